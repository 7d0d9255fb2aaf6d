"""Tests for the schema and validator factories."""

import json
import logging

import pytest

from dataknobs_schema import (
    ConfigurationError,
    ErrorKind,
    FieldFormat,
    FieldType,
    Schema,
    SchemaDefinitionError,
    SchemaFactory,
    SchemaValidator,
    ValidatorFactory,
)


class TestSchemaFactory:
    """Test building schemas from declarative field lists."""

    def test_schema_factory_basic(self):
        """Test creating a basic schema from factory."""
        factory = SchemaFactory()
        schema = factory.create(
            description="Member registration",
            fields=[
                {
                    "name": "username",
                    "type": "string",
                    "required": True,
                    "constraints": [
                        {"type": "length", "min": 3, "max": 20},
                        {"type": "pattern", "pattern": "[a-zA-Z0-9_]+"},
                    ],
                },
                {
                    "name": "age",
                    "type": "INTEGER",
                    "constraints": [{"type": "range", "min": 13, "max": 120}],
                },
                {"name": "email", "type": "email", "required": True},
                {"name": "joined", "type": "date"},
                {"name": "plan", "type": "enum", "values": ["free", "pro"]},
            ],
        )

        assert isinstance(schema, Schema)
        assert schema.description == "Member registration"
        assert schema.required == ("username", "email")
        assert schema.properties["username"].max_length == 20
        assert schema.properties["username"].pattern == "[a-zA-Z0-9_]+"
        assert schema.properties["age"].type is FieldType.INTEGER
        assert schema.properties["age"].minimum == 13
        assert schema.properties["email"].format is FieldFormat.EMAIL
        assert schema.properties["joined"].format is FieldFormat.DATE
        assert schema.properties["plan"].enum_values == ("free", "pro")

        validator = SchemaValidator("members", schema)
        assert validator.validate({"username": "john_doe", "email": "j@example.com"}) == []
        assert validator.validate({"username": "jo!", "email": "j@example.com"})[0].kind is (
            ErrorKind.INVALID_FIELD_VALUE
        )

    def test_enum_and_format_constraints(self):
        schema = SchemaFactory().create(fields=[
            {"name": "size", "constraints": [{"type": "enum", "values": ["S", "M"]}]},
            {"name": "contact", "constraints": [{"type": "format", "format": "email"}]},
        ])
        assert schema.properties["size"].enum_values == ("S", "M")
        assert schema.properties["contact"].format is FieldFormat.EMAIL

    def test_unknown_constraint_is_skipped(self, caplog):
        """Test that unknown constraint types log a warning."""
        with caplog.at_level(logging.WARNING):
            schema = SchemaFactory().create(
                fields=[{"name": "v", "constraints": [{"type": "unique"}]}]
            )
        assert schema.properties["v"].type is FieldType.STRING
        assert "Unknown constraint type: unique" in caplog.text

    @pytest.mark.parametrize(
        "field_config",
        [
            {"type": "string"},
            {"name": "v", "type": "json"},
            {"name": "v", "type": "enum"},
            {"name": "v", "constraints": [{"type": "format", "format": "uuid"}]},
            {"name": "v", "constraints": [{"type": "length", "min": "3"}]},
            {"name": "v", "constraints": [{"type": "length", "max": 2.5}]},
            {"name": "v", "type": "integer", "constraints": [{"type": "range", "max": "10"}]},
            {"name": "v", "type": "number", "constraints": [{"type": "range", "min": True}]},
            {"name": "v", "constraints": [{"type": "pattern", "pattern": 5}]},
        ],
    )
    def test_invalid_field_config(self, field_config):
        with pytest.raises(SchemaDefinitionError):
            SchemaFactory().create(fields=[field_config])

    def test_partial_bounds_keep_existing_values(self):
        """Test that a constraint only replaces the bounds it names."""
        schema = SchemaFactory().create(fields=[
            {"name": "email", "type": "email", "constraints": [{"type": "length", "max": 100}]},
            {
                "name": "quantity",
                "type": "integer",
                "constraints": [
                    {"type": "range", "min": 1, "max": 1000},
                    {"type": "range", "min": 5},
                ],
            },
        ])

        email = schema.properties["email"]
        assert email.min_length == 5
        assert email.max_length == 100

        quantity = schema.properties["quantity"]
        assert quantity.minimum == 5
        assert quantity.maximum == 1000

    def test_bad_bound_fails_at_create(self):
        """Test that a quoted bound is rejected before any validation runs."""
        with pytest.raises(SchemaDefinitionError) as exc_info:
            SchemaFactory().create(fields=[
                {"name": "code", "constraints": [{"type": "length", "min": "3"}]},
            ])
        assert exc_info.value.context["property"] == "code"


class TestValidatorFactory:
    """Test building named validators."""

    def test_from_inline_schema(self):
        validator = ValidatorFactory().create(
            name="tag",
            schema={"properties": {"label": {"type": "string"}}, "required": ["label"]},
        )
        assert validator.name == "tag"
        assert validator.validate({})[0].kind is ErrorKind.MISSING_REQUIRED_FIELD

    def test_from_schema_file_relative_to_schemas_path(self, tmp_path):
        (tmp_path / "tag.json").write_text(json.dumps({"properties": {"n": {"type": "integer"}}}))

        validator = ValidatorFactory().create(
            name="tag", schema_file="tag.json", schemas_path=str(tmp_path)
        )
        assert validator.validate({"n": "x"})[0].kind is ErrorKind.INVALID_FIELD_TYPE

    def test_from_fields(self):
        validator = ValidatorFactory().create(
            name="sku",
            fields=[{"name": "code", "required": True, "constraints": [{"type": "length", "min": 3}]}],
            pattern_input_limit=50,
        )
        assert validator.validate({"code": "ab"})[0].kind is ErrorKind.FIELD_TOO_SHORT

    def test_missing_name(self):
        with pytest.raises(ConfigurationError, match="missing 'name'"):
            ValidatorFactory().create(schema={})

    @pytest.mark.parametrize(
        "sources",
        [{}, {"schema": {}, "fields": []}, {"schema_file": "a.json", "schema": {}}],
    )
    def test_requires_exactly_one_source(self, sources):
        with pytest.raises(ConfigurationError, match="exactly one"):
            ValidatorFactory().create(name="x", **sources)

    def test_bad_inline_schema_fails_fast(self):
        with pytest.raises(SchemaDefinitionError):
            ValidatorFactory().create(name="x", schema="{oops")
