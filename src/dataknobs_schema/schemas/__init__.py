"""Predefined schemas for the users, orders and products services.

Build the validators once at startup and pass them to the request
handlers; nothing here is cached at module level.
"""

from __future__ import annotations

from dataknobs_schema.validator import SchemaValidator

from .orders import OrderSchemas, create_order_validator, update_order_validator
from .products import ProductSchemas, create_product_validator
from .users import (
    UserSchemas,
    create_user_validator,
    query_user_validator,
    update_user_validator,
)


def predefined_validators() -> list[SchemaValidator]:
    """Create one validator for every predefined schema."""
    return [
        create_user_validator(),
        update_user_validator(),
        query_user_validator(),
        create_order_validator(),
        update_order_validator(),
        create_product_validator(),
    ]


__all__ = [
    "UserSchemas",
    "OrderSchemas",
    "ProductSchemas",
    "create_user_validator",
    "update_user_validator",
    "query_user_validator",
    "create_order_validator",
    "update_order_validator",
    "create_product_validator",
    "predefined_validators",
]
