"""Schemas for the users service."""

from __future__ import annotations

from dataknobs_schema.fields import email_field, enum_field, integer_field, string_field
from dataknobs_schema.schema import Schema
from dataknobs_schema.validator import SchemaValidator

SORT_FIELDS = ("id", "name", "email", "created_at")
SORT_ORDERS = ("asc", "desc")


class UserSchemas:
    """Named constructors for user request schemas."""

    @staticmethod
    def create() -> Schema:
        """Body of a create-user request: name and email, both required."""
        return (
            Schema("Schema for creating a new user")
            .add_property("name", string_field(2, 100))
            .add_property("email", email_field())
            .add_required(["name", "email"])
        )

    @staticmethod
    def update() -> Schema:
        """Body of an update-user request; only the id is required."""
        return (
            Schema("Schema for updating an existing user")
            .add_property("id", integer_field())
            .add_property("name", string_field(2, 100))
            .add_property("email", email_field())
            .add_required("id")
        )

    @staticmethod
    def query() -> Schema:
        """Query parameters for listing users."""
        return (
            Schema("Schema for user query parameters")
            .add_property("page", integer_field(minimum=1))
            .add_property("limit", integer_field(1, 100))
            .add_property("search", string_field(max_length=255))
            .add_property("sortBy", enum_field(SORT_FIELDS))
            .add_property("sortOrder", enum_field(SORT_ORDERS))
        )


def create_user_validator() -> SchemaValidator:
    return SchemaValidator("create_user", UserSchemas.create())


def update_user_validator() -> SchemaValidator:
    return SchemaValidator("update_user", UserSchemas.update())


def query_user_validator() -> SchemaValidator:
    return SchemaValidator("query_user", UserSchemas.query())
