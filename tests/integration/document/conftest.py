from pathlib import Path

import pytest

from hosts_kit.document.document import HostsDocument, parse_document

SYSTEM_HOSTS = """\
##
# Host Database
#
# localhost is used to configure the loopback interface
# when the system is booting.  Do not change this entry.
##
127.0.0.1 localhost
255.255.255.255 broadcasthost
::1 localhost
fe80::1%lo0 localhost

# dev machines
10.0.0.10 api.dev.local api # primary
10.0.0.11 db.dev.local db
#10.0.0.12 cache.dev.local
"""

MESSY_HOSTS = (
    "  # leading spaces before comment  \n"
    "\t\n"
    "127.0.0.1\t\tlocalhost    lh\t# tabbed   comment\n"
    "   192.168.1.5  nas   \n"
)


def _write(path: Path, content: str) -> Path:
    path.write_text(content, encoding="utf-8")
    return path


@pytest.fixture
def hosts_dir(tmp_path: Path) -> Path:
    """A directory holding sample hosts files."""
    _write(tmp_path / "hosts", SYSTEM_HOSTS)
    _write(tmp_path / "hosts.messy", MESSY_HOSTS)
    _write(tmp_path / "hosts.broken", "127.0.0.1 localhost\n# ok\n10.9.9.9\n")
    return tmp_path


@pytest.fixture
def parsed_system(hosts_dir: Path) -> HostsDocument:
    return parse_document((hosts_dir / "hosts").read_text(encoding="utf-8"))


@pytest.fixture
def parsed_messy(hosts_dir: Path) -> HostsDocument:
    return parse_document((hosts_dir / "hosts.messy").read_text(encoding="utf-8"))


@pytest.fixture
def system_hosts_text() -> str:
    return SYSTEM_HOSTS
