"""Validation error records and report serialization.
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any

ROOT_FIELD = "root"


class ErrorKind(str, Enum):
    """Machine-readable classification of a validation failure.

    Attributes:
        INVALID_FORMAT: Document is not valid JSON or not a JSON object
        MISSING_REQUIRED_FIELD: Required field absent or null
        INVALID_FIELD_TYPE: Value has the wrong JSON type
        INVALID_FIELD_VALUE: Value not in the enum or does not match the pattern
        FIELD_TOO_LONG: String longer than max length
        FIELD_TOO_SHORT: String shorter than min length
        INVALID_EMAIL_FORMAT: String is not shaped like an email address
        INVALID_DATE_FORMAT: String is not shaped like YYYY-MM-DD
        VALUE_OUT_OF_RANGE: Number below minimum or above maximum
    """

    INVALID_FORMAT = "INVALID_FORMAT"
    MISSING_REQUIRED_FIELD = "MISSING_REQUIRED_FIELD"
    INVALID_FIELD_TYPE = "INVALID_FIELD_TYPE"
    INVALID_FIELD_VALUE = "INVALID_FIELD_VALUE"
    FIELD_TOO_LONG = "FIELD_TOO_LONG"
    FIELD_TOO_SHORT = "FIELD_TOO_SHORT"
    INVALID_EMAIL_FORMAT = "INVALID_EMAIL_FORMAT"
    INVALID_DATE_FORMAT = "INVALID_DATE_FORMAT"
    VALUE_OUT_OF_RANGE = "VALUE_OUT_OF_RANGE"


@dataclass(frozen=True)
class ValidationError:
    """One reported rule violation.

    This is a value, not an exception: validators return sequences of these
    and never raise them.

    Attributes:
        field: Name of the offending property, or ``"root"`` for
            document-level failures
        message: Human-readable explanation
        kind: Classification of the failure
        context: Optional extra detail (empty when unused)
    """

    field: str
    message: str
    kind: ErrorKind
    context: str = ""

    @property
    def code(self) -> str:
        """String form of ``kind`` as it appears in reports."""
        return self.kind.value

    @classmethod
    def root(cls, message: str) -> ValidationError:
        """Create a document-level INVALID_FORMAT error."""
        return cls(ROOT_FIELD, message, ErrorKind.INVALID_FORMAT)

    def to_dict(self) -> dict[str, Any]:
        """Convert to the report representation.

        Returns:
            Dictionary with ``field``, ``message`` and ``code`` keys, plus
            ``context`` when it is set
        """
        data: dict[str, Any] = {
            "field": self.field,
            "message": self.message,
            "code": self.code,
        }
        if self.context:
            data["context"] = self.context
        return data


def errors_to_dict(schema_name: str, errors: Sequence[ValidationError]) -> dict[str, Any]:
    """Build the error report for a failed validation.

    Args:
        schema_name: Name of the validator that produced the errors
        errors: Errors returned by ``validate``

    Returns:
        ``{"valid": False, "schema": ..., "errors": [...]}``
    """
    return {
        "valid": False,
        "schema": schema_name,
        "errors": [error.to_dict() for error in errors],
    }


def errors_to_json(schema_name: str, errors: Sequence[ValidationError]) -> str:
    """Serialize the error report as a compact JSON string."""
    return json.dumps(errors_to_dict(schema_name, errors), separators=(",", ":"))
