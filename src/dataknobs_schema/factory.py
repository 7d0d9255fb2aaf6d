"""Factory classes for building schemas and validators from configuration."""

import logging
from dataclasses import replace as _replace
from pathlib import Path
from typing import Any

from .exceptions import ConfigurationError, SchemaDefinitionError
from .fields import (
    FieldFormat,
    FieldSchema,
    FieldType,
    date_field,
    email_field,
    enum_field,
    int_keyword,
    number_keyword,
)
from .schema import Schema
from .validator import SchemaValidator

logger = logging.getLogger(__name__)


class FactoryBase:
    """Base class for factory objects.

    Factories that inherit from this should implement
    the create method.
    """

    def create(self, **config: Any) -> Any:
        """Create an object from configuration.

        Args:
            **config: Configuration parameters

        Returns:
            Created object
        """
        raise NotImplementedError("Subclasses must implement create method")


class SchemaFactory(FactoryBase):
    """Factory for creating schemas from declarative field lists.

    Configuration Options:
        description (str): Optional schema description
        fields (list): List of field definitions

    Field Definition Options:
        name (str): Field name
        type (str): string, integer, number, boolean, or the shortcuts
            email, date and enum
        required (bool): Whether field is required (default: False)
        values (list): Allowed values for the enum shortcut
        description (str): Field description
        constraints (list): List of constraint definitions

    Example Configuration:
        validators:
          - name: register_member
            fields:
              - name: username
                type: string
                required: true
                constraints:
                  - type: length
                    min: 3
                    max: 20
                  - type: pattern
                    pattern: "[a-zA-Z0-9_]+"
              - name: email
                type: email
                required: true
              - name: age
                type: integer
                constraints:
                  - type: range
                    min: 13
                    max: 120
    """

    def create(self, **config: Any) -> Schema:
        """Create a Schema instance from configuration.

        Args:
            **config: Schema configuration

        Returns:
            Schema instance

        Raises:
            SchemaDefinitionError: If a field is missing its name or has an
                unknown type
        """
        schema = Schema(config.get("description"))

        for field_config in config.get("fields", []):
            self._add_field_to_schema(schema, field_config)

        logger.info(f"Created schema with {len(schema.properties)} field(s)")
        return schema

    def _add_field_to_schema(self, schema: Schema, field_config: dict[str, Any]) -> None:
        field_name = field_config.get("name")
        if not field_name:
            raise SchemaDefinitionError(
                "Field configuration missing 'name'", context={"field": field_config}
            )

        field_schema = self._build_field(field_name, field_config)
        for constraint_config in field_config.get("constraints", []):
            field_schema = self._apply_constraint(field_name, field_schema, constraint_config)

        schema.add_property(field_name, field_schema)
        if field_config.get("required", False):
            schema.add_required(field_name)

    def _build_field(self, field_name: str, field_config: dict[str, Any]) -> FieldSchema:
        type_name = str(field_config.get("type", "string")).lower()
        description = field_config.get("description")

        if type_name == "email":
            base = email_field()
        elif type_name == "date":
            base = date_field()
        elif type_name == "enum":
            values = field_config.get("values", [])
            if not values:
                raise SchemaDefinitionError(
                    f"Enum field '{field_name}' requires 'values'",
                    context={"field": field_name},
                )
            base = enum_field(str(v) for v in values)
        else:
            try:
                base = FieldSchema(type=FieldType(type_name))
            except ValueError as e:
                raise SchemaDefinitionError(
                    f"Invalid field type for '{field_name}': {type_name}",
                    context={"field": field_name, "type": type_name},
                ) from e

        if description:
            base = _replace(base, description=description)
        return base

    def _apply_constraint(
        self, field_name: str, field_schema: FieldSchema, config: dict[str, Any]
    ) -> FieldSchema:
        constraint_type = config.get("type", "").lower()

        if constraint_type == "length":
            # Bounds missing from the constraint keep their current value
            changes = {}
            if "min" in config:
                changes["min_length"] = int_keyword(config, "min", field_name)
            if "max" in config:
                changes["max_length"] = int_keyword(config, "max", field_name)
            return _replace(field_schema, **changes)

        elif constraint_type == "range":
            changes = {}
            if "min" in config:
                changes["minimum"] = number_keyword(config, "min", field_name)
            if "max" in config:
                changes["maximum"] = number_keyword(config, "max", field_name)
            return _replace(field_schema, **changes)

        elif constraint_type == "pattern":
            pattern = config.get("pattern")
            if pattern is not None and not isinstance(pattern, str):
                raise SchemaDefinitionError(
                    f"Property '{field_name}' pattern must be a string, got {pattern!r}",
                    context={"property": field_name, "keyword": "pattern"},
                )
            if pattern:
                return _replace(field_schema, pattern=pattern)

        elif constraint_type == "enum":
            values = config.get("values", [])
            if values:
                return _replace(field_schema, enum_values=tuple(str(v) for v in values))

        elif constraint_type == "format":
            try:
                return _replace(field_schema, format=FieldFormat(config.get("format")))
            except ValueError as e:
                raise SchemaDefinitionError(
                    f"Unsupported format: {config.get('format')}",
                    context={"format": config.get("format")},
                ) from e

        else:
            logger.warning(f"Unknown constraint type: {constraint_type}")

        return field_schema


class ValidatorFactory(FactoryBase):
    """Factory for creating named validators from configuration.

    Exactly one schema source must be given.

    Configuration Options:
        name (str): Validator name (required)
        schema (dict | str): Inline JSON-Schema style description
        schema_file (str): Path to a description file, resolved against
            ``schemas_path`` when relative
        fields (list): Declarative field list (see SchemaFactory)
        description (str): Description for the ``fields`` form
        schemas_path (str): Base directory for ``schema_file``
        pattern_input_limit (int): Longest string matched against a pattern
    """

    def __init__(self, schema_factory: SchemaFactory | None = None):
        self._schema_factory = schema_factory or SchemaFactory()

    def create(self, **config: Any) -> SchemaValidator:
        """Create a SchemaValidator instance from configuration.

        Raises:
            ConfigurationError: If the name is missing or the number of
                schema sources is not exactly one
            SchemaDefinitionError: If the schema source is invalid
        """
        name = config.get("name")
        if not name:
            raise ConfigurationError("Validator configuration missing 'name'", context=config)

        sources = [key for key in ("schema", "schema_file", "fields") if key in config]
        if len(sources) != 1:
            raise ConfigurationError(
                f"Validator '{name}' needs exactly one of schema, schema_file or fields",
                context={"name": name, "sources": sources},
            )

        kwargs = {}
        if "pattern_input_limit" in config:
            kwargs["pattern_input_limit"] = config["pattern_input_limit"]

        logger.info(f"Creating validator: {name}")

        if "schema" in config:
            return SchemaValidator.from_json_schema(name, config["schema"], **kwargs)

        if "schema_file" in config:
            path = Path(config["schema_file"])
            if not path.is_absolute() and config.get("schemas_path"):
                path = Path(config["schemas_path"]) / path
            return SchemaValidator.from_file(name, path, **kwargs)

        schema = self._schema_factory.create(
            fields=config["fields"], description=config.get("description")
        )
        return SchemaValidator(name, schema, **kwargs)


# Create singleton instances for registration
schema_factory = SchemaFactory()
validator_factory = ValidatorFactory(schema_factory)
