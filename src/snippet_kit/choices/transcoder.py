# src/snippet_kit/choices/transcoder.py

"""Conversion between blocks of lines and choice tab stops.

A multi-line selection becomes ``${N|line 1,line 2,...|}``. A line followed
by a row of three or more carets is turned into a boxed header::

    Colors            ${20|╔════════╗,║ Colors ║,╚════════╝,red|}
    ^^^          ->
    red

Decoding reverses this, emitting ``^^^`` where the header box ended.
"""

import logging
import re

from snippet_kit.config import EOL

logger = logging.getLogger(__name__)

CHOICE_RE = re.compile(r"\$\{\d+\|(.+)\|\}")
HEADER_MARKER_RE = re.compile(r"\^{3,}")
HEADER_MARKER = "^^^"

# Runs of plain characters or backslash escapes, each ending at an
# unescaped comma or at the end of a line.
CHOICE_ITEM_RE = re.compile(r"(?=.)([^,\\]*(?:\\.[^,\\]*)*)(?:,|$)", re.MULTILINE)
BOX_TOP_RE = re.compile(r"╔═*╗")
BOX_BOTTOM_RE = re.compile(r"╚═*╝")
BOX_SIDES_RE = re.compile(r"^║ ?| ?║$")

NEWLINE_RE = re.compile(r"\r?\n")


def build_tabstop(text: str, n: int) -> str:
    return "${" + str(n) + ":" + text + "}"


def is_choice_tabstop(text: str) -> bool:
    return CHOICE_RE.fullmatch(text) is not None


def _box(line: str) -> str:
    # Escaped commas take two characters but display as one.
    border = "═" * (len(line) - line.count(","))
    return ",".join(
        [
            "╔═" + border + "═╗",
            "║ " + line + " ║",
            "╚═" + border + "═╝",
        ]
    )


def encode_choice(text: str, n: int, is_single_line: bool) -> str:
    """Wrap ``text`` as choice tab stop number ``n``."""
    if is_single_line:
        return "${" + str(n) + "|" + text + "|}"

    lines = [line.replace(",", "\\,") for line in NEWLINE_RE.split(text)]
    for i, line in enumerate(lines):
        if i > 0 and HEADER_MARKER_RE.fullmatch(line):
            lines[i - 1] = _box(lines[i - 1])

    items = [line for line in lines if not HEADER_MARKER_RE.fullmatch(line)]
    return "${" + str(n) + "|" + ",".join(items) + "|}"


def decode_choice(text: str, eol: EOL = "\n") -> str:
    """Turn a choice tab stop back into the lines it was built from.

    Raises:
        ValueError: If ``text`` is not a choice tab stop.
    """
    match = CHOICE_RE.fullmatch(text)
    if match is None:
        raise ValueError("Text is not a choice tab stop")

    lines: list[str] = []
    for item in CHOICE_ITEM_RE.finditer(match.group(1)):
        value = item.group(1)
        if BOX_TOP_RE.fullmatch(value):
            continue
        if BOX_BOTTOM_RE.fullmatch(value):
            lines.append(HEADER_MARKER)
            continue
        lines.append(BOX_SIDES_RE.sub("", value).replace("\\,", ","))

    logger.debug("Decoded choice tab stop into %d lines", len(lines))
    return eol.join(lines)


def transcode_choice(text: str, n: int, is_single_line: bool, eol: EOL = "\n") -> str:
    """Decode ``text`` if it already is a choice tab stop, otherwise encode it."""
    if is_choice_tabstop(text):
        return decode_choice(text, eol)
    return encode_choice(text, n, is_single_line)
