# Alignment
from .alignment import Block, align_region, align_text

# Choices
from .choices import (
    CounterState,
    advance_counter,
    build_tabstop,
    decode_choice,
    encode_choice,
    escape_snippet_text,
    next_value,
    transcode_choice,
)

# Configuration and errors
from .config import EditorConfig, resolve_tab_size
from .errors import InvalidPatternError, ReplaceStepFailedError, SnippetKitError

# Observability
from .observability import MetricsHook, NoOpMetricsHook

# Regions
from .regions import LineEdit, Replacement, TextRegion

# Replace
from .replace import (
    OperationStore,
    ReplaceEngine,
    ReplaceOperation,
    ReplaceStep,
    decode_escapes,
)

# Snippets
from .snippets import (
    GrammarSyntaxError,
    ParsedSnippet,
    SnippetFile,
    SnippetParser,
    build_snippet_file,
    parse_snippet,
)

__all__ = [
    # Alignment
    "Block",
    "align_region",
    "align_text",
    # Choices
    "CounterState",
    "advance_counter",
    "build_tabstop",
    "decode_choice",
    "encode_choice",
    "escape_snippet_text",
    "next_value",
    "transcode_choice",
    # Configuration and errors
    "EditorConfig",
    "InvalidPatternError",
    "ReplaceStepFailedError",
    "SnippetKitError",
    "resolve_tab_size",
    # Observability
    "MetricsHook",
    "NoOpMetricsHook",
    # Regions
    "LineEdit",
    "Replacement",
    "TextRegion",
    # Replace
    "OperationStore",
    "ReplaceEngine",
    "ReplaceOperation",
    "ReplaceStep",
    "decode_escapes",
    # Snippets
    "GrammarSyntaxError",
    "ParsedSnippet",
    "SnippetFile",
    "SnippetParser",
    "build_snippet_file",
    "parse_snippet",
]
