"""
Typed Pydantic models for the report handed to renderers.

The aggregated ValidationResult is internal; renderers (forms, CLIs, APIs)
consume this flat, serialisable contract instead.
"""
from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field, model_validator


class ReportIssue(BaseModel):
    """A single error or warning as displayed to the end user."""

    path: Optional[str] = Field(None, description="Location in the validated tree; '' is the root.")
    message: str = Field(..., description="Human-readable message.")
    required: bool = Field(False, description="True for deduplicated required-attribute errors.")


class ValidationReport(BaseModel):
    """
    Aggregated outcome of validating one document.

    Counts are derived from the issue lists and checked for consistency so a
    hand-built report cannot disagree with itself.
    """

    valid: bool
    errors: List[ReportIssue] = Field(default_factory=list)
    warnings: List[ReportIssue] = Field(default_factory=list)
    error_count: int = Field(0, ge=0)
    warning_count: int = Field(0, ge=0)
    required_error_count: int = Field(0, ge=0)

    @model_validator(mode="after")
    def check_counts(self) -> "ValidationReport":
        if self.error_count != len(self.errors):
            raise ValueError("error_count must equal len(errors)")
        if self.warning_count != len(self.warnings):
            raise ValueError("warning_count must equal len(warnings)")
        if self.required_error_count != sum(1 for e in self.errors if e.required):
            raise ValueError("required_error_count must equal the number of required errors")
        if self.valid != (self.error_count == 0):
            raise ValueError("valid must be True exactly when there are no errors")
        return self
