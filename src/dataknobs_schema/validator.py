"""Schema validator: binds a Schema to a name and evaluates documents.

Evaluation order for one document:

1. Parse (string input only). Malformed JSON yields a single ``root`` error.
2. The top-level value must be an object, otherwise a single ``root`` error.
3. Required-field pass, in the order the names were added.
4. Per-property pass over the input keys that have a rule.

Bad input data never raises; every violation becomes a
:class:`~dataknobs_schema.result.ValidationError`.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any, Union

from .fields import FieldFormat, FieldSchema, FieldType
from .formats import DEFAULT_PATTERN_INPUT_LIMIT, is_date, is_email, matches_pattern
from .loader import load_schema, load_schema_file
from .result import ErrorKind, ValidationError, errors_to_dict, errors_to_json
from .schema import Schema

logger = logging.getLogger(__name__)

_TYPE_NAMES = {
    FieldType.STRING: "a string",
    FieldType.INTEGER: "an integer",
    FieldType.NUMBER: "a number",
    FieldType.BOOLEAN: "a boolean",
}


def _reject_constant(token: str) -> Any:
    # NaN and Infinity are accepted by the json module but are not JSON
    raise ValueError(f"Unexpected token {token}")


class SchemaValidator:
    """Named, immutable pairing of a Schema with validation behavior.

    Instances hold no per-call state, so one validator can be shared by
    concurrent callers.

    Example:
        ```python
        validator = SchemaValidator("create_user", UserSchemas.create())
        errors = validator.validate('{"name": "Jane Doe"}')
        if errors:
            body = validator.errors_as_json(errors)
        ```
    """

    def __init__(
        self,
        name: str,
        schema: Schema,
        pattern_input_limit: int | None = DEFAULT_PATTERN_INPUT_LIMIT,
    ):
        """Initialize validator.

        Args:
            name: Label used in error reports
            schema: Schema to validate against
            pattern_input_limit: Longest string matched against a ``pattern``
                rule; longer strings fail the rule. None disables the limit.
        """
        self._name = name
        self._schema = schema
        self._pattern_input_limit = pattern_input_limit

    @classmethod
    def from_json_schema(
        cls,
        name: str,
        description: Union[str, dict[str, Any]],
        **kwargs: Any,
    ) -> SchemaValidator:
        """Create a validator from a JSON-Schema style description.

        Raises:
            SchemaDefinitionError: If the description cannot be parsed
        """
        return cls(name, load_schema(description), **kwargs)

    @classmethod
    def from_file(cls, name: str, path: Union[str, Path], **kwargs: Any) -> SchemaValidator:
        """Create a validator from a schema description file.

        Raises:
            SchemaDefinitionError: If the file cannot be loaded
        """
        return cls(name, load_schema_file(path), **kwargs)

    @property
    def name(self) -> str:
        return self._name

    @property
    def schema(self) -> Schema:
        return self._schema

    def __repr__(self) -> str:
        return f"SchemaValidator(name={self._name!r})"

    def validate(self, document: Any) -> list[ValidationError]:
        """Validate a document.

        Args:
            document: JSON text (``str``/``bytes``) or an already parsed value

        Returns:
            Errors in evaluation order; empty when the document is valid
        """
        if isinstance(document, (str, bytes, bytearray)):
            try:
                document = json.loads(document, parse_constant=_reject_constant)
            except (ValueError, RecursionError) as e:
                return [ValidationError.root(f"Invalid JSON format: {e}")]

        if not isinstance(document, Mapping):
            return [ValidationError.root("Input must be a JSON object")]

        errors = self._check_required(document)
        for name, value in document.items():
            field_schema = self._schema.properties.get(name)
            if field_schema is not None:
                errors.extend(self._check_field(name, value, field_schema))

        if errors:
            logger.debug(f"Schema '{self._name}' rejected document with {len(errors)} error(s)")
        return errors

    def is_valid(self, document: Any) -> bool:
        return not self.validate(document)

    def validate_many(self, documents: Iterable[Any]) -> list[list[ValidationError]]:
        """Validate each document independently.

        Returns:
            One error list per document, in input order
        """
        return [self.validate(document) for document in documents]

    def errors_as_dict(self, errors: list[ValidationError]) -> dict[str, Any]:
        """Build the ``{valid, schema, errors}`` report for ``errors``."""
        return errors_to_dict(self._name, errors)

    def errors_as_json(self, errors: list[ValidationError]) -> str:
        """Serialize the ``{valid, schema, errors}`` report as compact JSON."""
        return errors_to_json(self._name, errors)

    def _check_required(self, document: Mapping[str, Any]) -> list[ValidationError]:
        errors = []
        for name in self._schema.required:
            if name not in document:
                errors.append(ValidationError(
                    name,
                    f"Required field '{name}' is missing",
                    ErrorKind.MISSING_REQUIRED_FIELD,
                ))
            elif document[name] is None:
                errors.append(ValidationError(
                    name,
                    f"Required field '{name}' cannot be null",
                    ErrorKind.MISSING_REQUIRED_FIELD,
                ))
        return errors

    def _check_field(self, name: str, value: Any, rule: FieldSchema) -> list[ValidationError]:
        # Null on a required field was already reported by the required pass
        if value is None:
            return []

        if not rule.type.accepts(value):
            return [ValidationError(
                name,
                f"Field '{name}' must be {_TYPE_NAMES[rule.type]}",
                ErrorKind.INVALID_FIELD_TYPE,
            )]

        if rule.type is FieldType.STRING:
            return self._check_string(name, value, rule)
        if rule.type in (FieldType.INTEGER, FieldType.NUMBER):
            return self._check_range(name, value, rule)
        return []

    def _check_string(self, name: str, value: str, rule: FieldSchema) -> list[ValidationError]:
        errors = []

        if rule.min_length is not None and len(value) < rule.min_length:
            errors.append(ValidationError(
                name,
                f"Field '{name}' must be at least {rule.min_length} characters",
                ErrorKind.FIELD_TOO_SHORT,
            ))
        if rule.max_length is not None and len(value) > rule.max_length:
            errors.append(ValidationError(
                name,
                f"Field '{name}' must be at most {rule.max_length} characters",
                ErrorKind.FIELD_TOO_LONG,
            ))

        if rule.format is FieldFormat.EMAIL and not is_email(value):
            errors.append(ValidationError(
                name,
                f"Field '{name}' must be a valid email address",
                ErrorKind.INVALID_EMAIL_FORMAT,
            ))
        elif rule.format is FieldFormat.DATE and not is_date(value):
            errors.append(ValidationError(
                name,
                f"Field '{name}' must be a valid date (YYYY-MM-DD)",
                ErrorKind.INVALID_DATE_FORMAT,
            ))

        if rule.enum_values and value not in rule.enum_values:
            errors.append(ValidationError(
                name,
                f"Field '{name}' must be one of the allowed values",
                ErrorKind.INVALID_FIELD_VALUE,
            ))

        if rule.pattern is not None and not matches_pattern(
            rule.regex, value, self._pattern_input_limit
        ):
            errors.append(ValidationError(
                name,
                f"Field '{name}' does not match the required pattern",
                ErrorKind.INVALID_FIELD_VALUE,
                context=rule.pattern,
            ))

        return errors

    def _check_range(self, name: str, value: int | float, rule: FieldSchema) -> list[ValidationError]:
        errors = []
        if rule.minimum is not None and value < rule.minimum:
            errors.append(ValidationError(
                name,
                f"Field '{name}' must be at least {rule.minimum}",
                ErrorKind.VALUE_OUT_OF_RANGE,
            ))
        if rule.maximum is not None and value > rule.maximum:
            errors.append(ValidationError(
                name,
                f"Field '{name}' must be at most {rule.maximum}",
                ErrorKind.VALUE_OUT_OF_RANGE,
            ))
        return errors
