from .aligner import align_region, align_text, split_patterns
from .block import Block
from .models import Line, Part, PartKind

__all__ = [
    "Block",
    "Line",
    "Part",
    "PartKind",
    "align_region",
    "align_text",
    "split_patterns",
]
