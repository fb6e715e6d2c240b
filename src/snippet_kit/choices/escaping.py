# src/snippet_kit/choices/escaping.py

import re

# Characters with a meaning inside snippet bodies. Commas and pipes only
# matter within choice elements and are handled by the transcoder.
SPECIAL_CHARS_RE = re.compile(r"([$\\}])")


def escape_snippet_text(text: str) -> str:
    """Backslash-escape ``$``, ``\\`` and ``}`` so ``text`` is inserted literally."""
    return SPECIAL_CHARS_RE.sub(r"\\\1", text)
