from .errors import Expectation, GrammarSyntaxError, Position, SourceLocation
from .export import (
    build_snippet_file,
    sanitize_filename,
    snippet_directory,
    snippet_file_content,
    snippet_filename,
    snippet_json,
)
from .models import ParsedSnippet, SnippetFile
from .parser import SnippetParser, parse_snippet

__all__ = [
    "Expectation",
    "GrammarSyntaxError",
    "ParsedSnippet",
    "Position",
    "SnippetFile",
    "SnippetParser",
    "SourceLocation",
    "build_snippet_file",
    "parse_snippet",
    "sanitize_filename",
    "snippet_directory",
    "snippet_file_content",
    "snippet_filename",
    "snippet_json",
]
