from . import names
from .base import CountingMetricsHook, MetricsHook, NoOpMetricsHook

__all__ = [
    "CountingMetricsHook",
    "MetricsHook",
    "NoOpMetricsHook",
    "names",
]
