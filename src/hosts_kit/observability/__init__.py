from . import names
from .base import InMemoryMetricsHook, Labels, MetricsHook, NoOpMetricsHook

__all__ = [
    "InMemoryMetricsHook",
    "Labels",
    "MetricsHook",
    "NoOpMetricsHook",
    "names",
]
