# src/snippet_kit/config.py

import logging
from dataclasses import dataclass
from typing import Literal, cast

logger = logging.getLogger(__name__)

EOL = Literal["\n", "\r\n"]

DEFAULT_TAB_SIZE = 1


def resolve_tab_size(value: object) -> int:
    """Return a usable tab size from whatever the host reported.

    Missing, non-integer or non-positive values fall back to 1.
    """
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        logger.warning(
            "Invalid tab size %r reported by host, falling back to %d",
            value,
            DEFAULT_TAB_SIZE,
        )
        return DEFAULT_TAB_SIZE
    return value


@dataclass(frozen=True)
class EditorConfig:
    """Editor settings consumed by the text engines.

    Immutable. Explicit. Built from host values via ``from_host``.
    """

    tab_size: int = DEFAULT_TAB_SIZE
    eol: EOL = "\n"

    @classmethod
    def from_host(cls, tab_size: object = None, eol: str = "\n") -> "EditorConfig":
        if eol not in ("\n", "\r\n"):
            raise ValueError(f"Unsupported line ending: {eol!r}")
        return cls(tab_size=resolve_tab_size(tab_size), eol=cast(EOL, eol))
