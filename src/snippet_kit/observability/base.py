from collections.abc import Iterator
from contextlib import contextmanager
from time import monotonic
from typing import Protocol


class MetricsHook(Protocol):
    """Receives timings and counts from the text engines.

    Hosts plug in their own telemetry; the engines never depend on one.
    """

    def record_latency(
        self,
        name: str,
        value_ms: float,
        labels: dict[str, str] | None = None,
    ) -> None: ...

    def increment(
        self,
        name: str,
        value: int = 1,
        labels: dict[str, str] | None = None,
    ) -> None: ...

    def record_gauge(
        self,
        name: str,
        value: float,
        labels: dict[str, str] | None = None,
    ) -> None: ...


class NoOpMetricsHook:
    def record_latency(
        self, name: str, value_ms: float, labels: dict[str, str] | None = None
    ) -> None:
        pass

    def increment(
        self, name: str, value: int = 1, labels: dict[str, str] | None = None
    ) -> None:
        pass

    def record_gauge(
        self, name: str, value: float, labels: dict[str, str] | None = None
    ) -> None:
        pass


@contextmanager
def timed(
    hook: MetricsHook, name: str, labels: dict[str, str] | None = None
) -> Iterator[None]:
    """Record the duration of the ``with`` block if it completes."""
    start = monotonic()
    yield
    hook.record_latency(name, 1000 * (monotonic() - start), labels)
