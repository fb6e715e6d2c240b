# src/snippet_kit/alignment/block.py

import logging
import re

from snippet_kit.config import EOL
from snippet_kit.regions import LineEdit
from snippet_kit.text.metrics import pad, width
from snippet_kit.text.patterns import compile_pattern

from .models import Line, Part, PartKind

logger = logging.getLogger(__name__)


def _squeeze_start(value: str) -> str:
    stripped = value.lstrip()
    return value if stripped == value else " " + stripped


def _squeeze_end(value: str) -> str:
    stripped = value.rstrip()
    return value if stripped == value else stripped + " "


class Block:
    """A region of text split into lines of alternating text and separators.

    Built once per alignment pass, then ``trim()`` and ``align()`` rewrite
    part values in place before the block is serialized back to text.

    Example:
        >>> block = Block("a = 1\\nbbb = 2", "\\n", "=", start_line=10)
        >>> block.trim().align(tab_size=4).text
        'a   = 1\\nbbb = 2'
    """

    def __init__(self, text: str, eol: EOL, pattern: str, start_line: int = 0):
        self.eol = eol
        self.start_line = start_line
        regex = compile_pattern(pattern)
        self.lines = [
            self._tokenize(raw, start_line + offset, regex)
            for offset, raw in enumerate(text.split(eol))
        ]
        logger.debug(
            "Built block: lines=%d, pattern=%r, start_line=%d",
            len(self.lines),
            pattern,
            start_line,
        )

    @staticmethod
    def _tokenize(raw: str, number: int, regex: re.Pattern[str]) -> Line:
        line = Line(number=number)
        pos = 0
        while pos <= len(raw):
            match = regex.search(raw, pos)
            if match is None:
                break
            # An empty match would never advance; the rest stays text.
            if match.end() == match.start():
                break
            line.parts.append(Part(PartKind.TEXT, raw[pos : match.start()]))
            line.parts.append(Part(PartKind.SEPARATOR, match.group(0)))
            pos = match.end()
        line.parts.append(Part(PartKind.TEXT, raw[pos:]))
        return line

    def trim(self) -> "Block":
        """Reduce the whitespace around every separator to a single space."""
        for line in self.lines:
            if not line.has_separator:
                continue
            last = len(line.parts) - 1
            for i, part in enumerate(line.parts):
                if i == 0:
                    part.value = _squeeze_end(part.value)
                elif i == last:
                    part.value = _squeeze_start(part.value).rstrip()
                else:
                    part.value = _squeeze_end(_squeeze_start(part.value))
        return self

    def align(self, tab_size: int = 1) -> "Block":
        """Pad every part but the last of each line to its column's width.

        The gap after a separator belongs to the separator's column, so
        padding a separator and re-aligning the output gives the same text.
        """
        widths: list[int] = []
        for line in self.lines:
            if not line.has_separator:
                continue
            self._attach_gaps(line)
            for i, part in enumerate(line.parts):
                w = width(part.value, tab_size)
                if i < len(widths):
                    widths[i] = max(widths[i], w)
                else:
                    widths.append(w)

        for line in self.lines:
            for i, part in enumerate(line.parts[:-1]):
                part.value = pad(part.value, widths[i], tab_size)
        return self

    @staticmethod
    def _attach_gaps(line: Line) -> None:
        # Whitespace-only text keeps its gap; it is a column value of its own.
        for separator, following in zip(line.parts[1::2], line.parts[2::2]):
            stripped = following.value.lstrip()
            if stripped and stripped != following.value:
                gap = following.value[: len(following.value) - len(stripped)]
                separator.value += gap
                following.value = stripped

    @property
    def end_line(self) -> int:
        return self.start_line + len(self.lines) - 1

    @property
    def text(self) -> str:
        return self.eol.join(line.text for line in self.lines)

    def line_edits(self) -> list[LineEdit]:
        return [LineEdit(line.number, line.text) for line in self.lines]
