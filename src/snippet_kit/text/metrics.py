# src/snippet_kit/text/metrics.py


def width(s: str, tab_size: int) -> int:
    """Display width of ``s`` where a tab counts as ``tab_size`` columns.

    Every other character counts as one column, regardless of Unicode width.
    """
    return sum(tab_size if ch == "\t" else 1 for ch in s)


def pad(s: str, target_width: int, tab_size: int) -> str:
    """Right-pad ``s`` with spaces up to ``target_width``. Never truncates."""
    return s + " " * max(0, target_width - width(s, tab_size))
