"""Tests for the validator registry."""

import json
from threading import Thread

import pytest

from dataknobs_schema import (
    ErrorKind,
    NotFoundError,
    RegistrationError,
    Schema,
    SchemaDefinitionError,
    SchemaValidator,
    ValidatorRegistry,
    predefined_validators,
    string_field,
)


def make_validator(name, min_length=1):
    return SchemaValidator(name, Schema().add_property("v", string_field(min_length)))


def write_schema(path, min_length):
    path.write_text(json.dumps({
        "type": "object",
        "properties": {"label": {"type": "string", "minLength": min_length}},
        "required": ["label"],
    }))


class TestValidatorRegistry:
    """Test basic registry operations."""

    def test_create_registry(self):
        registry = ValidatorRegistry("api")
        assert registry.name == "api"
        assert registry.count() == 0

    def test_register_and_get(self):
        registry = ValidatorRegistry()
        validator = make_validator("tag")
        registry.register(validator)

        assert registry.get("tag") is validator
        assert registry.has("tag")
        assert "tag" in registry
        assert len(registry) == 1

    def test_duplicate_raises(self):
        """Test that a second registration needs allow_overwrite."""
        registry = ValidatorRegistry()
        registry.register(make_validator("tag"))

        with pytest.raises(RegistrationError, match="already registered"):
            registry.register(make_validator("tag"))

        replacement = make_validator("tag", 5)
        registry.register(replacement, allow_overwrite=True)
        assert registry.get("tag") is replacement

    def test_get_missing_raises(self):
        registry = ValidatorRegistry()
        registry.register(make_validator("tag"))

        with pytest.raises(NotFoundError) as exc_info:
            registry.get("missing")
        assert exc_info.value.context["available_keys"] == ["tag"]
        assert registry.get_optional("missing") is None

    def test_unregister(self):
        registry = ValidatorRegistry()
        validator = make_validator("tag")
        registry.register(validator)

        assert registry.unregister("tag") is validator
        assert not registry.has("tag")
        with pytest.raises(NotFoundError):
            registry.unregister("tag")

    def test_list_and_clear(self):
        registry = ValidatorRegistry()
        registry.register_all(predefined_validators())

        assert "create_order" in registry.list_keys()
        assert registry.count() == 6

        registry.clear()
        assert registry.count() == 0

    def test_validate_by_name(self):
        registry = ValidatorRegistry()
        registry.register_all(predefined_validators())

        errors = registry.validate("create_user", '{"name": "Jane Doe"}')
        assert [(e.field, e.kind) for e in errors] == [
            ("email", ErrorKind.MISSING_REQUIRED_FIELD)
        ]
        with pytest.raises(NotFoundError):
            registry.validate("delete_user", "{}")

    def test_thread_safe_registration(self):
        """Test concurrent registration from several threads."""
        registry = ValidatorRegistry()

        def register_range(start):
            for i in range(start, start + 25):
                registry.register(make_validator(f"v{i}"))

        threads = [Thread(target=register_range, args=(i * 25,)) for i in range(4)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert registry.count() == 100


class TestFileBackedValidators:
    """Test loading validators from schema files."""

    def test_register_file(self, tmp_path):
        path = tmp_path / "tag.json"
        write_schema(path, 3)

        registry = ValidatorRegistry()
        validator = registry.register_file(path)

        assert validator.name == "tag"
        assert registry.validate("tag", {"label": "abc"}) == []
        assert registry.validate("tag", {"label": "ab"})[0].kind is ErrorKind.FIELD_TOO_SHORT

    def test_load_directory(self, tmp_path):
        """Test that every schema file in a directory is registered."""
        write_schema(tmp_path / "b_tag.json", 1)
        (tmp_path / "a_note.yaml").write_text(
            "type: object\nproperties:\n  text: {type: string, maxLength: 10}\n"
        )
        (tmp_path / "README.md").write_text("not a schema")

        registry = ValidatorRegistry()
        names = registry.load_directory(tmp_path)

        assert names == ["a_note", "b_tag"]
        assert registry.count() == 2

    def test_load_missing_directory(self, tmp_path):
        with pytest.raises(SchemaDefinitionError, match="not found"):
            ValidatorRegistry().load_directory(tmp_path / "missing")

    def test_load_directory_invalid_file(self, tmp_path):
        (tmp_path / "broken.json").write_text("{")
        with pytest.raises(SchemaDefinitionError):
            ValidatorRegistry().load_directory(tmp_path)

    def test_reload(self, tmp_path):
        """Test that reload picks up changes on disk."""
        path = tmp_path / "tag.json"
        write_schema(path, 1)
        registry = ValidatorRegistry()
        registry.register_file(path)
        assert registry.validate("tag", {"label": "ab"}) == []

        write_schema(path, 3)
        registry.reload("tag")
        assert registry.validate("tag", {"label": "ab"})[0].kind is ErrorKind.FIELD_TOO_SHORT

    def test_reload_keeps_old_validator_on_failure(self, tmp_path):
        path = tmp_path / "tag.json"
        write_schema(path, 1)
        registry = ValidatorRegistry()
        original = registry.register_file(path)

        path.write_text("{broken")
        with pytest.raises(SchemaDefinitionError):
            registry.reload("tag")
        assert registry.get("tag") is original

    def test_reload_requires_file_source(self):
        registry = ValidatorRegistry()
        registry.register(make_validator("tag"))
        with pytest.raises(NotFoundError, match="not loaded from a file"):
            registry.reload("tag")

    def test_pattern_limit_applies_to_loaded_validators(self, tmp_path):
        path = tmp_path / "code.json"
        path.write_text(json.dumps({"properties": {"c": {"type": "string", "pattern": "a+"}}}))

        registry = ValidatorRegistry(pattern_input_limit=3)
        registry.register_file(path)

        assert registry.validate("code", {"c": "aaa"}) == []
        assert registry.validate("code", {"c": "aaaa"})[0].kind is ErrorKind.INVALID_FIELD_VALUE
