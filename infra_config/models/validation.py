"""
Validation outcome schemas.

Flat and detailed validation results shared by the name generator and
the configuration resolver.

Dependencies: pydantic
System role: Validation result contracts
"""

import enum
from typing import Any

from pydantic import BaseModel, Field


class ValidationErrorKind(str, enum.Enum):
    """Category of a validation error."""

    MISSING_REQUIRED_FIELD = "MissingRequiredField"
    INVALID_FORMAT = "InvalidFormat"
    INVALID_PORT = "InvalidPort"
    INVALID_PATH = "InvalidPath"
    AWS_NAMING_VIOLATION = "AwsNamingViolation"
    NAME_TOO_LONG = "NameTooLong"
    NAMING_CONFLICT = "NamingConflict"


class TypedError(BaseModel):
    """Validation error with remediation context."""

    kind: ValidationErrorKind
    field: str = Field(description="Field that failed validation")
    message: str = Field(description="Human-readable error message")
    value: Any = Field(default=None, description="Value that failed validation")
    suggestion: str | None = Field(default=None, description="Suggested fix")


class ValidationOutcome(BaseModel):
    """Flat validation result."""

    is_valid: bool
    errors: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)


class DetailedValidationOutcome(BaseModel):
    """Validation result with typed errors and a summary line."""

    is_valid: bool
    errors: list[TypedError] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
    summary: str
