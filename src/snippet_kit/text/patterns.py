# src/snippet_kit/text/patterns.py

"""Compilation of user supplied regular expressions.

Patterns typed by users follow the editor's regex dialect, which spells
named groups as ``(?<name>...)`` and their backreferences as ``\\k<name>``.
Both are mapped onto Python's ``(?P<name>...)`` / ``(?P=name)`` before
compiling; everything else is handed to :mod:`re` unchanged.
"""

import logging
import re

from snippet_kit.errors import InvalidPatternError

logger = logging.getLogger(__name__)

# An escaped character, a named group opener, or a named backreference.
_DIALECT_RE = re.compile(r"\\k<(\w+)>|\\.|\(\?<(\w+)>", re.DOTALL)


def _to_python_syntax(source: str) -> str:
    def convert(match: re.Match[str]) -> str:
        if match.group(1) is not None:
            return f"(?P={match.group(1)})"
        if match.group(2) is not None:
            return f"(?P<{match.group(2)}>"
        return match.group(0)

    return _DIALECT_RE.sub(convert, source)


def compile_pattern(source: str, flags: int = 0) -> re.Pattern[str]:
    """Compile ``source`` or raise :class:`InvalidPatternError`."""
    try:
        return re.compile(_to_python_syntax(source), flags)
    except re.error as e:
        logger.error("Invalid pattern %r: %s", source, e)
        raise InvalidPatternError(source, str(e)) from e
