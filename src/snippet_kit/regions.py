# src/snippet_kit/regions.py

from dataclasses import dataclass

from .config import EOL


@dataclass(frozen=True)
class TextRegion:
    """A selected region of a document as handed over by the editor."""

    text: str
    start_line: int = 0
    is_single_line: bool = True
    eol: EOL = "\n"

    @property
    def end_line(self) -> int:
        return self.start_line + self.text.count(self.eol)


@dataclass(frozen=True)
class Replacement:
    """Text to write back over lines ``start_line``..``end_line`` inclusive."""

    start_line: int
    end_line: int
    text: str


@dataclass(frozen=True)
class LineEdit:
    line_number: int
    text: str
