# src/snippet_kit/observability/names.py

"""Standard metric names for snippet-kit observability.

Use these constants instead of hardcoded strings for consistency
across the codebase.

Note: All duration metrics are in milliseconds by convention.
"""

# ============================================================================
# Alignment Metrics
# ============================================================================

# Duration
ALIGN_DURATION = "align_duration"

# Counters
ALIGN_PASSES_TOTAL = "align_passes_total"
ALIGN_ERRORS_TOTAL = "align_errors_total"

# Gauges
ALIGN_LINES = "align_lines"


# ============================================================================
# Replace Metrics
# ============================================================================

# Duration
REPLACE_DURATION = "replace_duration"

# Counters
REPLACE_STEPS_TOTAL = "replace_steps_total"
REPLACE_ERRORS_TOTAL = "replace_errors_total"


# ============================================================================
# Snippet Parser Metrics
# ============================================================================

# Duration
PARSE_DURATION = "snippet_parse_duration"

# Counters
PARSE_REQUESTS_TOTAL = "snippet_parse_requests_total"
PARSE_ERRORS_TOTAL = "snippet_parse_errors_total"
