# src/snippet_kit/snippets/export.py

"""Turning a parsed definition into a ``.code-snippets`` file.

The file holds the snippet as JSON followed by the original definition,
commented out, so the source can be recovered from the file alone.
"""

import json
import logging
import re
from pathlib import Path

from snippet_kit.config import EOL

from .models import ParsedSnippet, SnippetFile

logger = logging.getLogger(__name__)

PREFIX_SPLIT_RE = re.compile(r"\s*,\s*")
INVALID_FILENAME_CHARS_RE = re.compile(r'[/\\?%*:|"<>]')
REPEATED_SPACE_RE = re.compile(r"\s{2,}")

SNIPPET_EXTENSION = ".code-snippets"


def snippet_json(snippet: ParsedSnippet) -> str:
    document = {
        snippet.name: {
            "scope": snippet.scope or "",
            "prefix": PREFIX_SPLIT_RE.split(snippet.prefix),
            "body": [snippet.body],
            "description": snippet.name,
        }
    }
    return json.dumps(document, indent=4, ensure_ascii=False)


def snippet_file_content(snippet: ParsedSnippet, source: str, eol: EOL = "\n") -> str:
    commented = "// " + source.replace("\n", "\n// ")
    return snippet_json(snippet) + eol + eol + commented


def sanitize_filename(filename: str) -> str:
    return REPEATED_SPACE_RE.sub(" ", INVALID_FILENAME_CHARS_RE.sub("", filename))


def snippet_filename(snippet: ParsedSnippet) -> str:
    filename = f"[{snippet.prefix} - {snippet.name}]{SNIPPET_EXTENSION}"
    if snippet.scope:
        filename = f"{snippet.scope}.{filename}"
    return sanitize_filename(filename)


def snippet_directory(
    user_directory: str | Path, portable_data_path: str | Path | None = None
) -> Path:
    """Directory holding user snippets.

    ``portable_data_path`` is the data folder of a portable installation;
    the host passes it only when that folder exists.
    """
    if portable_data_path:
        return Path(portable_data_path) / "user-data" / "User" / "snippets"
    return Path(user_directory) / "snippets"


def build_snippet_file(
    snippet: ParsedSnippet,
    source: str,
    *,
    user_directory: str | Path,
    portable_data_path: str | Path | None = None,
    eol: EOL = "\n",
) -> SnippetFile:
    snippet_file = SnippetFile(
        directory=snippet_directory(user_directory, portable_data_path),
        filename=snippet_filename(snippet),
        content=snippet_file_content(snippet, source, eol),
    )
    logger.info("Prepared snippet file: %s", snippet_file.path)
    return snippet_file
