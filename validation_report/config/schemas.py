"""
JSON Schemas for the wire form of validation results and runner inputs.

Two schemas:
1. VALIDATION_RESULT_SCHEMA — one result as produced by a tree walker
2. REQUIRED_CHECKS_SCHEMA   — list of required-attribute checks for the runner
"""

_ISSUE_PROPERTIES: dict = {
    "path": {
        "type": "string",
        "description": "Location in the validated tree (dotted or JSON pointer)",
    },
    "message": {
        "type": "string",
    },
}

# =============================================================================
# 1. Validation Result Schema
# =============================================================================
VALIDATION_RESULT_SCHEMA: dict = {
    "type": "object",
    "properties": {
        "errors": {
            "type": "array",
            "items": {
                "type": "object",
                "required": ["path", "message"],
                "properties": {
                    **_ISSUE_PROPERTIES,
                    "isRequiredError": {
                        "type": "boolean",
                        "description": "Presence/allowed-value failure, subject to dedup",
                    },
                },
            },
        },
        "warnings": {
            "type": "array",
            "items": {
                "type": "object",
                "required": ["message"],
                "properties": {
                    # warnings do not enforce a path
                    "path": {"type": ["string", "null"]},
                    "message": {"type": "string"},
                },
            },
        },
    },
}

# =============================================================================
# 2. Required Checks Schema
# =============================================================================
REQUIRED_CHECKS_SCHEMA: dict = {
    "type": "array",
    "items": {
        "type": "object",
        "additionalProperties": False,
        "required": ["attribute"],
        "properties": {
            "path": {
                "type": "string",
                "default": "",
                "description": "Path of the object holding the attribute",
            },
            "attribute": {
                "type": "string",
                "minLength": 1,
            },
            "possibleValues": {
                "type": "array",
                "description": "Allowed values; omitted means any present value is valid",
            },
        },
    },
}
