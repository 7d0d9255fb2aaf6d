"""Field rules and the builder helpers that produce common configurations.

A :class:`FieldSchema` describes the rule for a single scalar field: one
JSON type plus the constraints that apply to it. Constraints that do not
apply to the field's type are ignored (``min_length`` on an integer field,
for instance).

Example:
    ```python
    from dataknobs_schema.fields import email_field, integer_field, string_field

    name = string_field(2, 100)
    email = email_field()
    age = integer_field(18, 120)
    ```
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from dataclasses import field as dataclass_field
from enum import Enum
from re import Pattern as RegexPattern
from typing import Any

from .exceptions import SchemaDefinitionError
from .formats import compile_pattern

# Keywords that would change evaluation semantics if silently ignored
UNSUPPORTED_KEYWORDS = ("$ref", "oneOf", "anyOf", "allOf", "not", "items", "properties")


class FieldType(Enum):
    """JSON types a field rule can require.

    Attributes:
        STRING: JSON string
        INTEGER: JSON integer (a floating point value is not an integer)
        NUMBER: JSON integer or floating point value
        BOOLEAN: JSON true/false
    """

    STRING = "string"
    INTEGER = "integer"
    NUMBER = "number"
    BOOLEAN = "boolean"

    def accepts(self, value: Any) -> bool:
        """Check whether a parsed JSON value has this type."""
        if self is FieldType.STRING:
            return isinstance(value, str)
        if self is FieldType.BOOLEAN:
            return isinstance(value, bool)
        # bool is a subclass of int in Python but not a JSON number
        if isinstance(value, bool):
            return False
        if self is FieldType.INTEGER:
            return isinstance(value, int)
        return isinstance(value, (int, float))


class FieldFormat(Enum):
    """Format refinements for string fields."""

    NONE = "none"
    EMAIL = "email"
    DATE = "date"


@dataclass(frozen=True)
class FieldSchema:
    """Validation rule for one field.

    Attributes:
        type: Required JSON type
        format: Optional string format refinement
        min_length: Inclusive minimum string length
        max_length: Inclusive maximum string length
        minimum: Inclusive minimum for integer and number fields
        maximum: Inclusive maximum for integer and number fields
        enum_values: Allowed string values; empty means unconstrained
        pattern: Regular expression the whole string must match
        description: Optional human-readable description
    """

    type: FieldType
    format: FieldFormat = FieldFormat.NONE
    min_length: int | None = None
    max_length: int | None = None
    minimum: int | float | None = None
    maximum: int | float | None = None
    enum_values: tuple[str, ...] = ()
    pattern: str | None = None
    description: str | None = None
    _regex: RegexPattern | None = dataclass_field(
        default=None, init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        if not isinstance(self.enum_values, tuple):
            object.__setattr__(self, "enum_values", tuple(self.enum_values))
        if self.pattern is not None:
            object.__setattr__(self, "_regex", compile_pattern(self.pattern))

    @property
    def regex(self) -> RegexPattern | None:
        """Compiled ``pattern``, or None if unset or uncompilable."""
        return self._regex

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-Schema style property definition.

        Returns:
            Dictionary using JSON-Schema keyword names; unset constraints
            are omitted
        """
        data: dict[str, Any] = {"type": self.type.value}
        if self.format is not FieldFormat.NONE:
            data["format"] = self.format.value
        if self.min_length is not None:
            data["minLength"] = self.min_length
        if self.max_length is not None:
            data["maxLength"] = self.max_length
        if self.minimum is not None:
            data["minimum"] = self.minimum
        if self.maximum is not None:
            data["maximum"] = self.maximum
        if self.enum_values:
            data["enum"] = list(self.enum_values)
        if self.pattern is not None:
            data["pattern"] = self.pattern
        if self.description:
            data["description"] = self.description
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any], name: str | None = None) -> FieldSchema:
        """Create a field rule from a JSON-Schema style property definition.

        Keywords outside the supported subset that do not affect evaluation
        (``title``, ``default``, ``multipleOf``, ...) are ignored.

        Args:
            data: Property definition
            name: Property name, used in error context

        Returns:
            FieldSchema instance

        Raises:
            SchemaDefinitionError: If the definition uses an unsupported type,
                format or keyword, or a constraint has the wrong type
        """
        context = {"property": name}
        if not isinstance(data, dict):
            raise SchemaDefinitionError(
                f"Property '{name}' definition must be an object", context=context
            )

        for keyword in UNSUPPORTED_KEYWORDS:
            if keyword in data:
                raise SchemaDefinitionError(
                    f"Property '{name}' uses unsupported keyword '{keyword}'",
                    context={**context, "keyword": keyword},
                )

        type_name = data.get("type")
        try:
            field_type = FieldType(type_name)
        except (ValueError, TypeError) as e:
            raise SchemaDefinitionError(
                f"Property '{name}' has unsupported type: {type_name!r}",
                context={**context, "type": type_name},
            ) from e

        format_name = data.get("format", FieldFormat.NONE.value)
        try:
            field_format = FieldFormat(format_name)
        except (ValueError, TypeError) as e:
            raise SchemaDefinitionError(
                f"Property '{name}' has unsupported format: {format_name!r}",
                context={**context, "format": format_name},
            ) from e

        enum_values = data.get("enum", ())
        if not isinstance(enum_values, (list, tuple)) or not all(
            isinstance(v, str) for v in enum_values
        ):
            raise SchemaDefinitionError(
                f"Property '{name}' enum must be a list of strings", context=context
            )

        pattern = data.get("pattern")
        if pattern is not None and not isinstance(pattern, str):
            raise SchemaDefinitionError(
                f"Property '{name}' pattern must be a string", context=context
            )

        return cls(
            type=field_type,
            format=field_format,
            min_length=int_keyword(data, "minLength", name),
            max_length=int_keyword(data, "maxLength", name),
            minimum=number_keyword(data, "minimum", name),
            maximum=number_keyword(data, "maximum", name),
            enum_values=tuple(enum_values),
            pattern=pattern,
            description=data.get("description"),
        )


def int_keyword(data: dict[str, Any], keyword: str, name: str | None) -> int | None:
    value = data.get(keyword)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise SchemaDefinitionError(
            f"Property '{name}' {keyword} must be an integer, got {value!r}",
            context={"property": name, "keyword": keyword},
        )
    return value


def number_keyword(data: dict[str, Any], keyword: str, name: str | None) -> int | float | None:
    value = data.get(keyword)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise SchemaDefinitionError(
            f"Property '{name}' {keyword} must be a number, got {value!r}",
            context={"property": name, "keyword": keyword},
        )
    return value


def string_field(
    min_length: int | None = None,
    max_length: int | None = None,
    pattern: str | None = None,
) -> FieldSchema:
    """String field with optional inclusive length bounds and pattern."""
    return FieldSchema(
        type=FieldType.STRING,
        min_length=min_length,
        max_length=max_length,
        pattern=pattern,
    )


def email_field() -> FieldSchema:
    """String field holding an email address (5 to 255 characters)."""
    return FieldSchema(
        type=FieldType.STRING,
        format=FieldFormat.EMAIL,
        min_length=5,
        max_length=255,
    )


def date_field() -> FieldSchema:
    """String field holding a ``YYYY-MM-DD`` date."""
    return FieldSchema(type=FieldType.STRING, format=FieldFormat.DATE)


def integer_field(minimum: int | None = None, maximum: int | None = None) -> FieldSchema:
    """Integer field with optional inclusive bounds."""
    return FieldSchema(type=FieldType.INTEGER, minimum=minimum, maximum=maximum)


def number_field(
    minimum: int | float | None = None,
    maximum: int | float | None = None,
) -> FieldSchema:
    """Number field (integer or floating point) with optional inclusive bounds."""
    return FieldSchema(type=FieldType.NUMBER, minimum=minimum, maximum=maximum)


def boolean_field() -> FieldSchema:
    return FieldSchema(type=FieldType.BOOLEAN)


def enum_field(values: Iterable[str]) -> FieldSchema:
    """String field restricted to a fixed set of values."""
    return FieldSchema(type=FieldType.STRING, enum_values=tuple(values))
