from typing import Protocol, TypeAlias

Labels: TypeAlias = dict[str, str]


class MetricsHook(Protocol):
    """Sink for parse/serialize metrics.

    Names come from ``hosts_kit.observability.names``. Durations are in ms.
    """

    def record_latency(
        self,
        name: str,
        value_ms: float,
        labels: Labels | None = None,
    ) -> None: ...

    def increment(
        self,
        name: str,
        value: int = 1,
        labels: Labels | None = None,
    ) -> None: ...

    def record_gauge(
        self,
        name: str,
        value: float,
        labels: Labels | None = None,
    ) -> None: ...


class NoOpMetricsHook:
    def record_latency(
        self, name: str, value_ms: float, labels: Labels | None = None
    ) -> None:
        pass

    def increment(self, name: str, value: int = 1, labels: Labels | None = None) -> None:
        pass

    def record_gauge(
        self, name: str, value: float, labels: Labels | None = None
    ) -> None:
        pass


class InMemoryMetricsHook:
    """Keeps every recorded value in memory, keyed by metric name.

    Labels are not part of the key; each entry stores ``(value, labels)``.
    Useful for tests and for short-lived tools that print a summary.
    """

    def __init__(self) -> None:
        self.latencies: dict[str, list[tuple[float, Labels]]] = {}
        self.counters: dict[str, int] = {}
        self.gauges: dict[str, tuple[float, Labels]] = {}

    def record_latency(
        self, name: str, value_ms: float, labels: Labels | None = None
    ) -> None:
        self.latencies.setdefault(name, []).append((value_ms, dict(labels or {})))

    def increment(self, name: str, value: int = 1, labels: Labels | None = None) -> None:
        self.counters[name] = self.counters.get(name, 0) + value

    def record_gauge(
        self, name: str, value: float, labels: Labels | None = None
    ) -> None:
        # last value wins
        self.gauges[name] = (value, dict(labels or {}))

    def reset(self) -> None:
        self.latencies.clear()
        self.counters.clear()
        self.gauges.clear()
