# src/snippet_kit/alignment/models.py

from dataclasses import dataclass, field
from enum import Enum


class PartKind(str, Enum):
    """Kind of a line segment produced by tokenization."""

    TEXT = "text"
    SEPARATOR = "separator"


@dataclass
class Part:
    kind: PartKind
    value: str


@dataclass
class Line:
    """One tokenized line.

    Parts alternate Text, Separator, ..., Text so their count is always odd.
    """

    number: int
    parts: list[Part] = field(default_factory=list)

    @property
    def text(self) -> str:
        return "".join(part.value for part in self.parts)

    @property
    def has_separator(self) -> bool:
        return len(self.parts) > 1
