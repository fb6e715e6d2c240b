# src/snippet_kit/replace/escapes.py

import re

_SIMPLE_ESCAPES = {
    "\\": "\\",
    "t": "\t",
    "n": "\n",
    "r": "\r",
    "f": "\f",
    "v": "\v",
}

# One alternation so the whole template is decoded in a single pass:
# "\\\\n" yields a backslash and "n", never a newline.
_ESCAPE_RE = re.compile(r"\\(x[0-9A-Fa-f]{2}|u[0-9A-Fa-f]{4}|.)", re.DOTALL)


def _decode(match: re.Match[str]) -> str:
    code = match.group(1)
    if len(code) > 1:
        return chr(int(code[1:], 16))
    return _SIMPLE_ESCAPES.get(code, match.group(0))


def decode_escapes(template: str) -> str:
    """Decode backslash escapes in a replacement template.

    Supported: ``\\\\ \\t \\n \\r \\f \\v \\xHH \\uHHHH``. Unknown escapes are
    left as written, backslash included. ``$1``-style group references are
    not touched; they are expanded later by the replace step.
    """
    return _ESCAPE_RE.sub(_decode, template)
