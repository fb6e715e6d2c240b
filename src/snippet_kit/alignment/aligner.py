# src/snippet_kit/alignment/aligner.py

import logging
import re

from snippet_kit.config import EOL, resolve_tab_size
from snippet_kit.errors import InvalidPatternError
from snippet_kit.observability import names
from snippet_kit.observability.base import MetricsHook, NoOpMetricsHook, timed
from snippet_kit.regions import Replacement, TextRegion

from .block import Block

logger = logging.getLogger(__name__)

# Either spelling starts the next alignment pass.
PASS_DELIMITER_RE = re.compile(r"\{\]|\[\}")


def split_patterns(patterns: str) -> list[str]:
    """Split a chained pattern string into its passes.

    Whitespace-only segments are dropped; the others are kept verbatim.
    """
    return [p for p in PASS_DELIMITER_RE.split(patterns) if p.strip()]


def align_text(
    text: str,
    patterns: list[str],
    *,
    start_line: int = 0,
    eol: EOL = "\n",
    tab_size: int = 1,
) -> Block:
    """Run one alignment pass per pattern, each over the previous output.

    Raises:
        InvalidPatternError: If any pattern fails to compile.
        ValueError: If ``patterns`` is empty.
    """
    if not patterns:
        raise ValueError("at least one pattern is required")

    block = Block(text, eol, patterns[0], start_line).trim().align(tab_size)
    for pattern in patterns[1:]:
        block = Block(block.text, eol, pattern, start_line).trim().align(tab_size)
    return block


def align_region(
    region: TextRegion,
    patterns: str,
    *,
    tab_size: int | None = 1,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> Replacement | None:
    """Align ``region`` by a user entered, possibly chained, pattern string.

    ``tab_size`` is the host's value as reported; a missing or invalid one
    falls back to 1. Returns None when there is nothing to do (empty region
    or no pattern).
    """
    if not region.text:
        logger.info("Nothing to align: empty region")
        return None

    passes = split_patterns(patterns)
    if not passes:
        logger.info("Nothing to align: no pattern given")
        return None

    with timed(metrics_hook, names.ALIGN_DURATION):
        try:
            block = align_text(
                region.text,
                passes,
                start_line=region.start_line,
                eol=region.eol,
                tab_size=resolve_tab_size(tab_size),
            )
        except InvalidPatternError:
            metrics_hook.increment(names.ALIGN_ERRORS_TOTAL)
            raise

    metrics_hook.increment(names.ALIGN_PASSES_TOTAL, len(passes))
    metrics_hook.record_gauge(names.ALIGN_LINES, len(block.lines))
    logger.info(
        "Aligned lines %d-%d: passes=%d",
        block.start_line,
        block.end_line,
        len(passes),
    )
    return Replacement(
        start_line=block.start_line, end_line=block.end_line, text=block.text
    )
