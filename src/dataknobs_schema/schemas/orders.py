"""Schemas for the orders service."""

from __future__ import annotations

from dataknobs_schema.fields import enum_field, integer_field, number_field, string_field
from dataknobs_schema.schema import Schema
from dataknobs_schema.validator import SchemaValidator

ORDER_STATUSES = ("pending", "processing", "shipped", "delivered", "cancelled")


class OrderSchemas:
    """Named constructors for order request schemas."""

    @staticmethod
    def create() -> Schema:
        """Body of a create-order request; every field is required."""
        return (
            Schema("Schema for creating a new order")
            .add_property("user_id", integer_field(minimum=1))
            .add_property("product_name", string_field(2, 200))
            .add_property("quantity", integer_field(1, 1000))
            .add_property("price", number_field(minimum=0))
            .add_required(["user_id", "product_name", "quantity", "price"])
        )

    @staticmethod
    def update() -> Schema:
        """Body of an update-order request; all fields optional."""
        return (
            Schema("Schema for updating an existing order")
            .add_property("product_name", string_field(2, 200))
            .add_property("quantity", integer_field(1, 1000))
            .add_property("price", number_field(minimum=0))
            .add_property("status", enum_field(ORDER_STATUSES))
        )


def create_order_validator() -> SchemaValidator:
    return SchemaValidator("create_order", OrderSchemas.create())


def update_order_validator() -> SchemaValidator:
    return SchemaValidator("update_order", OrderSchemas.update())
