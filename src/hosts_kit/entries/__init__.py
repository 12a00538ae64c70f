from .host_spec import HostSpec

__all__ = [
    "HostSpec",
]
