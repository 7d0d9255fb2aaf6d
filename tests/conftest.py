"""Pytest configuration for dataknobs_schema tests."""

import sys
from pathlib import Path

import pytest

# Add the package source to path for testing
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from dataknobs_schema import (  # noqa: E402
    Schema,
    SchemaValidator,
    email_field,
    enum_field,
    integer_field,
    string_field,
)


@pytest.fixture
def user_validator():
    """Validator requiring a name (2-100 chars) and an email."""
    schema = (
        Schema()
        .add_property("name", string_field(2, 100))
        .add_property("email", email_field())
        .add_property("age", integer_field(18, 120))
        .add_required(["name", "email"])
    )
    return SchemaValidator("create_user", schema)


@pytest.fixture
def category_validator():
    """Validator with a required enum field."""
    schema = (
        Schema()
        .add_property("category", enum_field(["electronics", "clothing", "books", "food"]))
        .add_required("category")
    )
    return SchemaValidator("create_product", schema)
