"""Tests for the exception hierarchy."""

import pytest

from dataknobs_schema.exceptions import (
    ConfigurationError,
    NotFoundError,
    RegistrationError,
    SchemaDefinitionError,
    SchemaError,
)


class TestExceptions:
    """Test exception construction and hierarchy."""

    @pytest.mark.parametrize(
        "exc_class",
        [SchemaDefinitionError, ConfigurationError, NotFoundError, RegistrationError],
    )
    def test_subclasses_share_base(self, exc_class):
        with pytest.raises(SchemaError):
            raise exc_class("boom")

    def test_context(self):
        error = SchemaDefinitionError("bad type", context={"property": "tags"})
        assert str(error) == "bad type"
        assert error.context == {"property": "tags"}

    def test_context_defaults_to_empty(self):
        assert SchemaError("boom").context == {}
