"""Declarative validation of JSON request bodies for small services.

This package provides:

- **Field rules**: ``FieldSchema`` and builders such as ``string_field`` and ``email_field``
- **Schema**: fluent ``add_property`` / ``add_required`` builder
- **SchemaValidator**: named validator returning a list of ``ValidationError`` records
- **Predefined schemas**: ``UserSchemas``, ``OrderSchemas``, ``ProductSchemas``
- **Registry and config**: build every validator once at startup and inject it

Example:
    ```python
    from dataknobs_schema import Schema, SchemaValidator, email_field, string_field

    schema = (
        Schema()
        .add_property("name", string_field(2, 100))
        .add_property("email", email_field())
        .add_required(["name", "email"])
    )
    validator = SchemaValidator("create_user", schema)

    errors = validator.validate('{"name": "Jane Doe"}')
    # [ValidationError(field='email', kind=ErrorKind.MISSING_REQUIRED_FIELD, ...)]
    ```
"""

from dataknobs_schema.config import ValidationConfig, ValidationSettings
from dataknobs_schema.exceptions import (
    ConfigurationError,
    NotFoundError,
    RegistrationError,
    SchemaDefinitionError,
    SchemaError,
)
from dataknobs_schema.factory import (
    FactoryBase,
    SchemaFactory,
    ValidatorFactory,
    schema_factory,
    validator_factory,
)
from dataknobs_schema.fields import (
    FieldFormat,
    FieldSchema,
    FieldType,
    boolean_field,
    date_field,
    email_field,
    enum_field,
    integer_field,
    number_field,
    string_field,
)
from dataknobs_schema.loader import load_schema, load_schema_file
from dataknobs_schema.registry import ValidatorRegistry
from dataknobs_schema.result import ErrorKind, ValidationError, errors_to_dict, errors_to_json
from dataknobs_schema.schema import Schema
from dataknobs_schema.schemas import (
    OrderSchemas,
    ProductSchemas,
    UserSchemas,
    predefined_validators,
)
from dataknobs_schema.validator import SchemaValidator

__version__ = "0.1.0"

__all__ = [
    # Field rules
    "FieldType",
    "FieldFormat",
    "FieldSchema",
    "string_field",
    "email_field",
    "date_field",
    "integer_field",
    "number_field",
    "boolean_field",
    "enum_field",
    # Schema and validator
    "Schema",
    "SchemaValidator",
    "load_schema",
    "load_schema_file",
    # Results
    "ErrorKind",
    "ValidationError",
    "errors_to_dict",
    "errors_to_json",
    # Predefined schemas
    "UserSchemas",
    "OrderSchemas",
    "ProductSchemas",
    "predefined_validators",
    # Registry, factories and config
    "ValidatorRegistry",
    "FactoryBase",
    "SchemaFactory",
    "ValidatorFactory",
    "schema_factory",
    "validator_factory",
    "ValidationConfig",
    "ValidationSettings",
    # Exceptions
    "SchemaError",
    "SchemaDefinitionError",
    "ConfigurationError",
    "NotFoundError",
    "RegistrationError",
]
