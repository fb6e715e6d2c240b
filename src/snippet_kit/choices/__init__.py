from .counter import (
    CounterState,
    KeyValueStore,
    advance_counter,
    next_value,
    reset_counter,
    reset_stored_counter,
)
from .escaping import escape_snippet_text
from .transcoder import (
    build_tabstop,
    decode_choice,
    encode_choice,
    is_choice_tabstop,
    transcode_choice,
)

__all__ = [
    "CounterState",
    "KeyValueStore",
    "advance_counter",
    "build_tabstop",
    "decode_choice",
    "encode_choice",
    "escape_snippet_text",
    "is_choice_tabstop",
    "next_value",
    "reset_counter",
    "reset_stored_counter",
    "transcode_choice",
]
