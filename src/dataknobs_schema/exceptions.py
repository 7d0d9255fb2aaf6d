"""Exception hierarchy for the dataknobs_schema package.

Validation of request data never raises: every violation is reported as a
:class:`~dataknobs_schema.result.ValidationError` record. The exceptions
below are reserved for programmer and configuration errors, which should
fail fast at startup.

Example:
    ```python
    from dataknobs_schema.exceptions import SchemaDefinitionError

    try:
        validator = SchemaValidator.from_json_schema("widget", text)
    except SchemaDefinitionError as e:
        logger.error(f"Bad schema: {e}")
        if e.context:
            logger.error(f"Context: {e.context}")
    ```
"""

from typing import Any, Dict


class SchemaError(Exception):
    """Base exception for the dataknobs_schema package.

    Attributes:
        context: Dictionary containing contextual information about the error

    Args:
        message: Human-readable error message
        context: Optional dictionary with error context (schema names, keys, etc.)
    """

    def __init__(self, message: str, context: Dict[str, Any] | None = None):
        super().__init__(message)
        self.context = context or {}


class SchemaDefinitionError(SchemaError):
    """Raised when a schema description cannot be turned into a Schema.

    Common scenarios include:
    - Malformed JSON in a schema string or file
    - Unsupported property types (object, array)
    - Composition keywords such as ``$ref`` or ``oneOf``
    - Constraint values of the wrong type

    Example:
        ```python
        raise SchemaDefinitionError(
            "Unsupported type 'array'",
            context={"property": "tags", "type": "array"}
        )
        ```
    """

    pass


class ConfigurationError(SchemaError):
    """Raised when validator configuration is invalid or missing.

    Example:
        ```python
        raise ConfigurationError(
            "Environment variable 'SCHEMAS_PATH' not found",
            context={"variable": "SCHEMAS_PATH"}
        )
        ```
    """

    pass


class NotFoundError(SchemaError):
    """Raised when a requested validator is not registered."""

    pass


class RegistrationError(SchemaError):
    """Raised when a validator name is registered twice without overwrite."""

    pass
