"""
Constants used across result aggregation.
Message templates are part of the public contract (renderers match on them).
"""
from typing import List

# =============================================================================
# Paths
# =============================================================================
ROOT_PATH: str = ""

# JSON-pointer style paths start with one of these
POINTER_PREFIXES: List[str] = ["#/", "/"]

# =============================================================================
# Required-attribute messages
# =============================================================================
MISSING_ATTRIBUTE_MESSAGE: str = 'Missing required attribute "{attribute}"'
INVALID_VALUE_MESSAGE: str = 'Invalid value "{value}" for "{attribute}" '
VALID_OPTIONS_MESSAGE: str = "Valid options are {options}"

# =============================================================================
# JSON ingestion
# =============================================================================
JSON_REPARSE_INDENT: int = 4
JSON_TAB_REPLACEMENT: str = "  "

INVALID_JSON_MESSAGE: str = "Invalid JSON"
JSON_MISMATCH_MESSAGE: str = (
    "The parsed JSON did not equal the entered JSON. You may have a duplicate key, etc."
)

# =============================================================================
# Metric label values
# =============================================================================
ERROR_KIND_GENERAL: str = "general"
ERROR_KIND_REQUIRED: str = "required"
ERROR_KINDS: List[str] = [ERROR_KIND_GENERAL, ERROR_KIND_REQUIRED]

INGESTION_OBJECT: str = "object"
INGESTION_PARSED: str = "parsed"
INGESTION_MISMATCH: str = "mismatch"
INGESTION_INVALID: str = "invalid"
INGESTION_OUTCOMES: List[str] = [
    INGESTION_OBJECT,
    INGESTION_PARSED,
    INGESTION_MISMATCH,
    INGESTION_INVALID,
]
