from .metrics import pad, width
from .patterns import compile_pattern

__all__ = [
    "compile_pattern",
    "pad",
    "width",
]
