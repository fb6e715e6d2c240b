# src/snippet_kit/snippets/errors.py

"""Structured syntax errors for the snippet grammar.

Messages read like ``Expected "//" but "h" found.`` and the error carries
the full list of expectations plus the exact location of the failure.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Literal

from snippet_kit.errors import SnippetKitError

ExpectationKind = Literal["literal", "class", "any", "end", "other"]


@dataclass(frozen=True)
class Expectation:
    kind: ExpectationKind
    text: str = ""
    parts: tuple[str | tuple[str, str], ...] = ()
    inverted: bool = False
    description: str = ""

    @classmethod
    def literal(cls, text: str) -> "Expectation":
        return cls("literal", text=text)

    @classmethod
    def char_class(
        cls, parts: Sequence[str | tuple[str, str]], inverted: bool = False
    ) -> "Expectation":
        return cls("class", parts=tuple(parts), inverted=inverted)

    @classmethod
    def any(cls) -> "Expectation":
        return cls("any")

    @classmethod
    def end(cls) -> "Expectation":
        return cls("end")

    @classmethod
    def other(cls, description: str) -> "Expectation":
        return cls("other", description=description)

    def describe(self) -> str:
        if self.kind == "literal":
            return '"' + _literal_escape(self.text) + '"'
        if self.kind == "class":
            escaped = ",".join(
                _class_escape(p[0]) + "-" + _class_escape(p[1])
                if isinstance(p, tuple)
                else _class_escape(p)
                for p in self.parts
            )
            return "[" + ("^" if self.inverted else "") + escaped + "]"
        if self.kind == "any":
            return "any character"
        if self.kind == "end":
            return "end of input"
        return self.description


@dataclass(frozen=True)
class Position:
    offset: int
    line: int
    column: int


@dataclass(frozen=True)
class SourceLocation:
    source: str | None
    start: Position
    end: Position


def _control_escape(ch: str) -> str:
    code = ord(ch)
    if code <= 0x1F or 0x7F <= code <= 0x9F:
        return f"\\x{code:02X}"
    return ch


def _literal_escape(s: str) -> str:
    s = (
        s.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\0", "\\0")
        .replace("\t", "\\t")
        .replace("\n", "\\n")
        .replace("\r", "\\r")
    )
    return "".join(_control_escape(ch) for ch in s)


def _class_escape(s: str) -> str:
    s = (
        s.replace("\\", "\\\\")
        .replace("]", "\\]")
        .replace("^", "\\^")
        .replace("-", "\\-")
        .replace("\0", "\\0")
        .replace("\t", "\\t")
        .replace("\n", "\\n")
        .replace("\r", "\\r")
    )
    return "".join(_control_escape(ch) for ch in s)


def describe_expected(expected: Sequence[Expectation]) -> str:
    descriptions = sorted({e.describe() for e in expected})
    if len(descriptions) == 1:
        return descriptions[0]
    if len(descriptions) == 2:
        return descriptions[0] + " or " + descriptions[1]
    return ", ".join(descriptions[:-1]) + ", or " + descriptions[-1]


def describe_found(found: str | None) -> str:
    return '"' + _literal_escape(found) + '"' if found else "end of input"


def build_message(expected: Sequence[Expectation], found: str | None) -> str:
    return f"Expected {describe_expected(expected)} but {describe_found(found)} found."


class GrammarSyntaxError(SnippetKitError):
    """The input does not follow the snippet definition grammar."""

    def __init__(
        self,
        message: str,
        expected: list[Expectation],
        found: str | None,
        location: SourceLocation,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.expected = expected
        self.found = found
        self.location = location

    @classmethod
    def from_expectations(
        cls,
        expected: list[Expectation],
        found: str | None,
        location: SourceLocation,
    ) -> "GrammarSyntaxError":
        return cls(build_message(expected, found), expected, found, location)

    def format(self, sources: Mapping[str | None, str]) -> str:
        """Render the error with an excerpt of the offending line.

        ``sources`` maps a source name to its text; the entry matching this
        error's location is used for the excerpt.

        Example output::

            Error: Expected "//" but "h" found.
             --> snippet.txt:1:1
              |
            1 | hello
              | ^
        """
        result = "Error: " + self.message
        start = self.location.start
        end = self.location.end
        loc = f"{self.location.source}:{start.line}:{start.column}"

        text = sources.get(self.location.source)
        if text is None:
            return result + "\n at " + loc

        lines = text.replace("\r\n", "\n").replace("\r", "\n").split("\n")
        line = lines[start.line - 1]
        last = end.column if start.line == end.line else len(line) + 1
        filler = " " * len(str(start.line))
        return (
            result
            + "\n --> "
            + loc
            + "\n"
            + filler
            + " |\n"
            + f"{start.line} | {line}\n"
            + filler
            + " | "
            + " " * (start.column - 1)
            + "^" * (last - start.column)
        )
