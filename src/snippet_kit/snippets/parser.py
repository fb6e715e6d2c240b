# src/snippet_kit/snippets/parser.py

"""Parser for snippet definition documents.

A definition looks like::

    // Name: greet
    // Scope: javascript
    // Prefix: hi
    // ----
    console.log("hi");

Grammar (PEG, ordered choice, no backtracking across fields)::

    snippet := name scope? prefix body
    name    := "//" sp "Name"   sp ":" sp rest nl
    scope   := "//" sp "Scope"  sp ":" sp rest nl
    prefix  := "//" sp "Prefix" sp ":" sp rest nl
    body    := sep any+
    sep     := "//" sp "-"+ sp nl
    rest    := [^\\r\\n]+
    sp      := [ \\t]*               -- "whitespace"
    nl      := ("\\r\\n" / "\\n")+     -- "newline"

The body is everything after the separator line, verbatim.

Rules return the matched value or ``FAILED``; only the top level raises.
Failures are tracked at the rightmost input position reached so the final
error names what was expected where the input went furthest.
"""

import logging
from typing import Final

from snippet_kit.observability import names
from snippet_kit.observability.base import MetricsHook, NoOpMetricsHook, timed

from .errors import Expectation, GrammarSyntaxError, Position, SourceLocation
from .models import ParsedSnippet

logger = logging.getLogger(__name__)


class _Failed:
    def __repr__(self) -> str:
        return "FAILED"


FAILED: Final = _Failed()

SLASHES = Expectation.literal("//")
COLON = Expectation.literal(":")
DASH = Expectation.literal("-")
CRLF = Expectation.literal("\r\n")
LF = Expectation.literal("\n")
NOT_NEWLINE = Expectation.char_class(["\r", "\n"], inverted=True)
BLANK = Expectation.char_class([" ", "\t"])
ANY = Expectation.any()
END = Expectation.end()
WHITESPACE = Expectation.other("whitespace")
NEWLINE = Expectation.other("newline")


class _ParseRun:
    """State of a single parse: cursor, furthest failure and line cache."""

    def __init__(self, text: str, source: str | None) -> None:
        self.input = text
        self.source = source
        self.pos = 0
        self.max_fail_pos = 0
        self.max_fail_expected: list[Expectation] = []
        self.silent = 0
        self._pos_details: dict[int, tuple[int, int]] = {0: (1, 1)}

    # -- failure bookkeeping ------------------------------------------------

    def fail(self, expectation: Expectation) -> None:
        if self.silent or self.pos < self.max_fail_pos:
            return
        if self.pos > self.max_fail_pos:
            self.max_fail_pos = self.pos
            self.max_fail_expected = []
        self.max_fail_expected.append(expectation)

    def position(self, offset: int) -> Position:
        details = self._pos_details.get(offset)
        if details is None:
            p = offset - 1
            while p not in self._pos_details:
                p -= 1
            line, column = self._pos_details[p]
            for ch in self.input[p:offset]:
                if ch == "\n":
                    line += 1
                    column = 1
                else:
                    column += 1
            details = (line, column)
            self._pos_details[offset] = details
        return Position(offset=offset, line=details[0], column=details[1])

    def location(self, start: int, end: int) -> SourceLocation:
        return SourceLocation(
            source=self.source, start=self.position(start), end=self.position(end)
        )

    def error(self) -> GrammarSyntaxError:
        at = self.max_fail_pos
        if at < len(self.input):
            found: str | None = self.input[at]
            location = self.location(at, at + 1)
        else:
            found = None
            location = self.location(at, at)
        return GrammarSyntaxError.from_expectations(
            self.max_fail_expected, found, location
        )

    # -- terminals ----------------------------------------------------------

    def literal(self, text: str, expectation: Expectation) -> str | _Failed:
        if self.input.startswith(text, self.pos):
            self.pos += len(text)
            return text
        self.fail(expectation)
        return FAILED

    def char(
        self, chars: str, expectation: Expectation, inverted: bool = False
    ) -> str | _Failed:
        if self.pos < len(self.input) and (self.input[self.pos] in chars) != inverted:
            self.pos += 1
            return self.input[self.pos - 1]
        self.fail(expectation)
        return FAILED

    # -- rules --------------------------------------------------------------

    def sp(self) -> str:
        start = self.pos
        self.silent += 1
        while self.char(" \t", BLANK) is not FAILED:
            pass
        self.silent -= 1
        self.fail(WHITESPACE)
        return self.input[start : self.pos]

    def nl(self) -> str | _Failed:
        start = self.pos
        self.silent += 1
        while (
            self.literal("\r\n", CRLF) is not FAILED
            or self.literal("\n", LF) is not FAILED
        ):
            pass
        self.silent -= 1
        self.fail(NEWLINE)
        if self.pos == start:
            return FAILED
        return self.input[start : self.pos]

    def rest(self) -> str | _Failed:
        start = self.pos
        while self.char("\r\n", NOT_NEWLINE, inverted=True) is not FAILED:
            pass
        if self.pos == start:
            return FAILED
        return self.input[start : self.pos]

    def field(self, keyword: str) -> str | _Failed:
        start = self.pos
        if self.literal("//", SLASHES) is FAILED:
            return self._backtrack(start)
        self.sp()
        if self.literal(keyword, Expectation.literal(keyword)) is FAILED:
            return self._backtrack(start)
        self.sp()
        if self.literal(":", COLON) is FAILED:
            return self._backtrack(start)
        self.sp()
        value = self.rest()
        if value is FAILED or self.nl() is FAILED:
            return self._backtrack(start)
        return value

    def sep(self) -> str | _Failed:
        start = self.pos
        if self.literal("//", SLASHES) is FAILED:
            return self._backtrack(start)
        self.sp()
        if self.literal("-", DASH) is FAILED:
            return self._backtrack(start)
        while self.literal("-", DASH) is not FAILED:
            pass
        self.sp()
        if self.nl() is FAILED:
            return self._backtrack(start)
        return self.input[start : self.pos]

    def body(self) -> str | _Failed:
        start = self.pos
        if self.sep() is FAILED:
            return self._backtrack(start)
        if self.pos >= len(self.input):
            self.fail(ANY)
            return self._backtrack(start)
        value = self.input[self.pos :]
        self.pos = len(self.input)
        return value

    def snippet(self) -> ParsedSnippet | _Failed:
        start = self.pos
        name = self.field("Name")
        if isinstance(name, _Failed):
            return self._backtrack(start)
        scope = self.field("Scope")
        prefix = self.field("Prefix")
        if isinstance(prefix, _Failed):
            return self._backtrack(start)
        body = self.body()
        if isinstance(body, _Failed):
            return self._backtrack(start)
        return ParsedSnippet(
            name=name,
            scope=None if isinstance(scope, _Failed) else scope,
            prefix=prefix,
            body=body,
        )

    def _backtrack(self, start: int) -> _Failed:
        self.pos = start
        return FAILED


class SnippetParser:
    """Parses snippet definition documents into :class:`ParsedSnippet`.

    Example:
        >>> parser = SnippetParser()
        >>> parser.parse("// Name: a\\n// Prefix: b\\n// -\\nbody").scope is None
        True
    """

    def __init__(self, metrics_hook: MetricsHook = NoOpMetricsHook()) -> None:
        self.metrics_hook = metrics_hook

    def parse(self, text: str, source: str | None = None) -> ParsedSnippet:
        """Parse a whole document.

        Args:
            text: The complete document text.
            source: Optional name of the document, reported in error locations.

        Raises:
            GrammarSyntaxError: If ``text`` is not a valid snippet definition.
        """
        self.metrics_hook.increment(names.PARSE_REQUESTS_TOTAL)
        with timed(self.metrics_hook, names.PARSE_DURATION):
            result = self._parse(text, source)
        logger.debug("Parsed snippet: name=%s, scope=%s", result.name, result.scope)
        return result

    def _parse(self, text: str, source: str | None) -> ParsedSnippet:
        run = _ParseRun(text, source)
        result = run.snippet()
        if not isinstance(result, _Failed) and run.pos == len(text):
            return result

        if not isinstance(result, _Failed):
            run.fail(END)
        error = run.error()
        self.metrics_hook.increment(names.PARSE_ERRORS_TOTAL)
        logger.error(
            "Snippet syntax error at %d:%d: %s",
            error.location.start.line,
            error.location.start.column,
            error.message,
        )
        raise error


def parse_snippet(text: str, source: str | None = None) -> ParsedSnippet:
    return SnippetParser().parse(text, source)
