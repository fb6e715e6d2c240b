# src/snippet_kit/choices/counter.py

"""Tab-stop counter.

Every generated tab stop takes the next multiple of ten so that stops
created one after another can later be renumbered by hand without
collisions. The counter value lives in the host's persistent store; this
module only computes the next state.
"""

import logging
from dataclasses import dataclass
from typing import Protocol

logger = logging.getLogger(__name__)

COUNTER_KEY = "counter"
COUNTER_SEED = 10
COUNTER_STEP = 10


class KeyValueStore(Protocol):
    def get(self, key: str, default: int) -> int: ...

    def set(self, key: str, value: int) -> None: ...


@dataclass(frozen=True)
class CounterState:
    value: int = COUNTER_SEED


def next_value(state: CounterState) -> tuple[int, CounterState]:
    value = state.value + COUNTER_STEP
    return value, CounterState(value)


def reset_counter() -> CounterState:
    """Return the state whose next value is the first tab stop, 10."""
    return CounterState(0)


def advance_counter(store: KeyValueStore) -> int:
    """Read the stored counter, compute the next value and write it back."""
    state = CounterState(store.get(COUNTER_KEY, COUNTER_SEED))
    value, state = next_value(state)
    store.set(COUNTER_KEY, state.value)
    logger.debug("Advanced tab-stop counter to %d", value)
    return value


def reset_stored_counter(store: KeyValueStore) -> None:
    store.set(COUNTER_KEY, reset_counter().value)
    logger.info("Tab-stop counter reset, next tab stop is %d", COUNTER_STEP)
