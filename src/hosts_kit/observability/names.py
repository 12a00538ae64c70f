# src/hosts_kit/observability/names.py

"""Standard metric names for hosts-kit observability.

Use these constants instead of hardcoded strings so every metrics backend
sees the same series.

Note: All duration metrics are in milliseconds by convention.
"""

# ============================================================================
# Document Metrics
# ============================================================================

# Duration
DOCUMENT_PARSE_DURATION = "document_parse_duration"

# Counters
DOCUMENT_LINES_PARSED = "document_lines_parsed"
DOCUMENT_PARSE_ERRORS_TOTAL = "document_parse_errors_total"

# Gauges
DOCUMENT_HOST_LINES = "document_host_lines"
