from . import names
from .base import MetricsHook, NoOpMetricsHook, timed

__all__ = [
    "MetricsHook",
    "NoOpMetricsHook",
    "names",
    "timed",
]
