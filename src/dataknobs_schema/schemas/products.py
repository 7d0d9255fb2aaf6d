"""Schemas for the product catalog."""

from __future__ import annotations

from dataknobs_schema.fields import boolean_field, enum_field, integer_field, string_field
from dataknobs_schema.schema import Schema
from dataknobs_schema.validator import SchemaValidator

PRODUCT_CATEGORIES = ("electronics", "clothing", "books", "food")


class ProductSchemas:
    """Named constructors for product request schemas."""

    @staticmethod
    def create() -> Schema:
        """Body of a create-product request. Price is in cents."""
        return (
            Schema("Schema for creating a new product")
            .add_property("name", string_field(1, 255))
            .add_property("category", enum_field(PRODUCT_CATEGORIES))
            .add_property("price", integer_field(0, 999999))
            .add_property("inStock", boolean_field())
            .add_required(["name", "category", "price"])
        )


def create_product_validator() -> SchemaValidator:
    return SchemaValidator("create_product", ProductSchemas.create())
