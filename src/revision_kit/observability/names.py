# src/revision_kit/observability/names.py

"""Standard metric names for revision-kit observability.

Use these constants instead of hardcoded strings for consistency
across the codebase.

Note: All duration metrics are in milliseconds by convention.
"""

# ============================================================================
# Revision Parser Metrics
# ============================================================================

# Duration
PARSING_DURATION = "parsing_duration"

# Counters
PARSING_PARAGRAPHS_TOTAL = "parsing_paragraphs_total"
PARSING_ENTRIES_TOTAL = "parsing_entries_total"
PARSING_ERRORS_TOTAL = "parsing_errors_total"


# ============================================================================
# Dataset Builder Metrics
# ============================================================================

# Duration
DATASET_BUILD_DURATION = "dataset_build_duration"

# Counters
DATASET_CHANGE_GROUPS_TOTAL = "dataset_change_groups_total"
DATASET_RECORDS_EMITTED = "dataset_records_emitted"
DATASET_RECORDS_SKIPPED = "dataset_records_skipped"


# ============================================================================
# Classification Metrics
# ============================================================================

# Duration
CLASSIFICATION_DURATION = "classification_duration"

# Counters
CLASSIFICATION_REQUESTS_TOTAL = "classification_requests_total"
CLASSIFICATION_ERRORS_TOTAL = "classification_errors_total"
CLASSIFICATION_LINES_SKIPPED = "classification_lines_skipped"
