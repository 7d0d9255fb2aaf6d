"""Loading schemas from JSON-Schema style descriptions.

Descriptions may be given as a dictionary, a JSON string or a file. All
failures are raised as :class:`SchemaDefinitionError` so that a bad
schema is caught when the validator is built, not on the first request.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Union

import yaml  # type: ignore[import-untyped]

from .exceptions import SchemaDefinitionError
from .schema import Schema

logger = logging.getLogger(__name__)

SCHEMA_FILE_SUFFIXES = (".json", ".yaml", ".yml")


def load_schema(source: Union[str, dict[str, Any]]) -> Schema:
    """Build a Schema from a JSON string or an already parsed dictionary.

    Args:
        source: JSON text or dictionary

    Returns:
        Schema instance

    Raises:
        SchemaDefinitionError: If the text is not valid JSON or the
            description is outside the supported subset
    """
    if isinstance(source, str):
        try:
            source = json.loads(source)
        except json.JSONDecodeError as e:
            raise SchemaDefinitionError(
                f"Failed to parse schema: {e}",
                context={"line": e.lineno, "column": e.colno},
            ) from e
    return Schema.from_dict(source)  # type: ignore[arg-type]


def load_schema_file(path: Union[str, Path]) -> Schema:
    """Build a Schema from a ``.json``, ``.yaml`` or ``.yml`` file.

    Args:
        path: Path to the schema description

    Returns:
        Schema instance

    Raises:
        SchemaDefinitionError: If the file is missing, has an unsupported
            suffix or does not hold a valid description
    """
    path = Path(path)
    suffix = path.suffix.lower()
    if suffix not in SCHEMA_FILE_SUFFIXES:
        raise SchemaDefinitionError(
            f"Unsupported schema file format: {suffix}", context={"path": str(path)}
        )
    if not path.exists():
        raise SchemaDefinitionError(
            f"Schema file not found: {path}", context={"path": str(path)}
        )

    logger.debug(f"Loading schema file: {path}")
    with open(path, encoding="utf-8") as f:
        try:
            if suffix == ".json":
                data = json.load(f)
            else:
                data = yaml.safe_load(f)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise SchemaDefinitionError(
                f"Failed to parse schema file {path}: {e}", context={"path": str(path)}
            ) from e

    try:
        return Schema.from_dict(data)
    except SchemaDefinitionError as e:
        e.context.setdefault("path", str(path))
        raise
