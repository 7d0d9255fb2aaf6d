"""Schema definition with fluent API for JSON object validation.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from .exceptions import SchemaDefinitionError
from .fields import UNSUPPORTED_KEYWORDS, FieldSchema


class Schema:
    """Shape description for one JSON object.

    Holds a mapping of property name to :class:`FieldSchema` and the set of
    required property names. Build it once with the fluent methods, then
    hand it to a :class:`~dataknobs_schema.validator.SchemaValidator`.

    A required name need not have a property rule; such a field is only
    checked for presence.

    Example:
        ```python
        schema = (
            Schema()
            .add_property("name", string_field(2, 100))
            .add_property("email", email_field())
            .add_required(["name", "email"])
        )
        ```
    """

    def __init__(self, description: str | None = None):
        """Initialize an empty schema.

        Args:
            description: Optional schema description
        """
        self.properties: dict[str, FieldSchema] = {}
        # dict keys give set semantics with insertion order
        self._required: dict[str, None] = {}
        self.description = description

    @property
    def required(self) -> tuple[str, ...]:
        """Required field names in the order they were added."""
        return tuple(self._required)

    def add_property(self, name: str, field_schema: FieldSchema) -> Schema:
        """Add or replace the rule for a property (fluent API).

        Args:
            name: Property name
            field_schema: Rule for the property; replaces any earlier rule

        Returns:
            Self for chaining
        """
        self.properties[name] = field_schema
        return self

    def add_required(self, names: str | Iterable[str]) -> Schema:
        """Mark one or more properties as required (fluent API).

        Adding a name twice has no further effect.

        Args:
            names: A property name or an iterable of names

        Returns:
            Self for chaining
        """
        if isinstance(names, str):
            names = [names]
        for name in names:
            self._required.setdefault(name, None)
        return self

    def with_description(self, description: str) -> Schema:
        """Set schema description (fluent API)."""
        self.description = description
        return self

    def is_required(self, name: str) -> bool:
        return name in self._required

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Schema):
            return NotImplemented
        return (
            self.properties == other.properties
            and self.required == other.required
            and self.description == other.description
        )

    def __repr__(self) -> str:
        return f"Schema(properties={list(self.properties)}, required={list(self.required)})"

    def to_dict(self) -> dict[str, Any]:
        """Convert schema to a JSON-Schema style dictionary.

        Returns:
            ``{"type": "object", "properties": {...}, "required": [...]}``
        """
        data: dict[str, Any] = {
            "type": "object",
            "properties": {
                name: field_schema.to_dict() for name, field_schema in self.properties.items()
            },
        }
        if self._required:
            data["required"] = list(self._required)
        if self.description:
            data["description"] = self.description
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Schema:
        """Create schema from a JSON-Schema style dictionary.

        Only the flat subset is supported: a top-level object whose
        properties are scalar fields. ``additionalProperties`` is accepted
        and ignored, since unknown input keys are never rejected.

        Args:
            data: Dictionary with schema definition

        Returns:
            Schema instance

        Raises:
            SchemaDefinitionError: If the definition is outside the supported subset
        """
        if not isinstance(data, dict):
            raise SchemaDefinitionError(
                f"Schema definition must be an object, got {type(data).__name__}"
            )

        schema_type = data.get("type", "object")
        if schema_type != "object":
            raise SchemaDefinitionError(
                f"Schema type must be 'object', got {schema_type!r}",
                context={"type": schema_type},
            )

        for keyword in UNSUPPORTED_KEYWORDS:
            if keyword != "properties" and keyword in data:
                raise SchemaDefinitionError(
                    f"Schema uses unsupported keyword '{keyword}'",
                    context={"keyword": keyword},
                )

        properties = data.get("properties", {})
        if not isinstance(properties, dict):
            raise SchemaDefinitionError("Schema 'properties' must be an object")

        required = data.get("required", [])
        if not isinstance(required, list) or not all(isinstance(r, str) for r in required):
            raise SchemaDefinitionError("Schema 'required' must be a list of strings")

        schema = cls(description=data.get("description") or data.get("title"))
        for name, definition in properties.items():
            schema.add_property(name, FieldSchema.from_dict(definition, name=name))
        schema.add_required(required)
        return schema
