"""Registry of named validators.

A :class:`ValidatorRegistry` is built once at startup and passed to the
request-handling layer, rather than looked up through a global cache.

Example:
    ```python
    from dataknobs_schema.registry import ValidatorRegistry
    from dataknobs_schema.schemas import predefined_validators

    registry = ValidatorRegistry("api")
    registry.register_all(predefined_validators())
    registry.load_directory("schemas")

    errors = registry.validate("create_user", request_body)
    ```
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable
from pathlib import Path
from typing import Any, Dict, List, Union

from .exceptions import NotFoundError, RegistrationError, SchemaDefinitionError
from .formats import DEFAULT_PATTERN_INPUT_LIMIT
from .loader import SCHEMA_FILE_SUFFIXES
from .result import ValidationError
from .validator import SchemaValidator

logger = logging.getLogger(__name__)


class ValidatorRegistry:
    """Thread-safe collection of validators keyed by name.

    Validators loaded from files remember their source path so they can be
    reloaded individually.

    Args:
        name: Registry name for logging and error context
        pattern_input_limit: Passed to validators the registry creates itself
    """

    def __init__(
        self,
        name: str = "validators",
        pattern_input_limit: int | None = DEFAULT_PATTERN_INPUT_LIMIT,
    ):
        self._name = name
        self._pattern_input_limit = pattern_input_limit
        self._items: Dict[str, SchemaValidator] = {}
        self._sources: Dict[str, Path] = {}
        self._lock = threading.RLock()

    @property
    def name(self) -> str:
        """Get registry name."""
        return self._name

    def register(self, validator: SchemaValidator, allow_overwrite: bool = False) -> None:
        """Register a validator under its own name.

        Args:
            validator: Validator to register
            allow_overwrite: Whether to replace an existing validator

        Raises:
            RegistrationError: If the name is taken and allow_overwrite is False
        """
        with self._lock:
            if not allow_overwrite and validator.name in self._items:
                raise RegistrationError(
                    f"Validator '{validator.name}' already registered in {self._name}",
                    context={"key": validator.name, "registry": self._name},
                )
            self._items[validator.name] = validator
            self._sources.pop(validator.name, None)
        logger.debug(f"Registered validator '{validator.name}' in {self._name}")

    def register_all(
        self, validators: Iterable[SchemaValidator], allow_overwrite: bool = False
    ) -> None:
        for validator in validators:
            self.register(validator, allow_overwrite=allow_overwrite)

    def unregister(self, name: str) -> SchemaValidator:
        """Unregister and return a validator.

        Raises:
            NotFoundError: If no validator has that name
        """
        with self._lock:
            if name not in self._items:
                raise NotFoundError(
                    f"Validator not found: {name}",
                    context={"key": name, "registry": self._name},
                )
            self._sources.pop(name, None)
            return self._items.pop(name)

    def get(self, name: str) -> SchemaValidator:
        """Get a validator by name.

        Raises:
            NotFoundError: If no validator has that name
        """
        with self._lock:
            if name not in self._items:
                raise NotFoundError(
                    f"Validator not found: {name}",
                    context={
                        "key": name,
                        "registry": self._name,
                        "available_keys": list(self._items.keys()),
                    },
                )
            return self._items[name]

    def get_optional(self, name: str) -> SchemaValidator | None:
        with self._lock:
            return self._items.get(name)

    def has(self, name: str) -> bool:
        with self._lock:
            return name in self._items

    def list_keys(self) -> List[str]:
        with self._lock:
            return list(self._items.keys())

    def count(self) -> int:
        with self._lock:
            return len(self._items)

    def clear(self) -> None:
        with self._lock:
            self._items.clear()
            self._sources.clear()

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.has(name)

    def __len__(self) -> int:
        return self.count()

    def validate(self, name: str, document: Any) -> List[ValidationError]:
        """Validate a document with the named validator.

        Raises:
            NotFoundError: If no validator has that name
        """
        return self.get(name).validate(document)

    def register_file(
        self,
        path: Union[str, Path],
        name: str | None = None,
        allow_overwrite: bool = False,
    ) -> SchemaValidator:
        """Load a schema file and register a validator for it.

        Args:
            path: Schema description file
            name: Validator name; defaults to the file stem
            allow_overwrite: Whether to replace an existing validator

        Returns:
            The registered validator

        Raises:
            SchemaDefinitionError: If the file cannot be loaded
            RegistrationError: If the name is taken and allow_overwrite is False
        """
        path = Path(path)
        validator = SchemaValidator.from_file(
            name or path.stem, path, pattern_input_limit=self._pattern_input_limit
        )
        with self._lock:
            self.register(validator, allow_overwrite=allow_overwrite)
            self._sources[validator.name] = path
        return validator

    def load_directory(
        self, directory: Union[str, Path], allow_overwrite: bool = False
    ) -> List[str]:
        """Register a validator for every schema file in a directory.

        Each ``.json``, ``.yaml`` or ``.yml`` file becomes a validator named
        after its stem. Files are loaded in sorted order.

        Returns:
            Names of the validators that were registered

        Raises:
            SchemaDefinitionError: If the directory is missing or any file is invalid
        """
        directory = Path(directory)
        if not directory.is_dir():
            raise SchemaDefinitionError(
                f"Schema directory not found: {directory}",
                context={"path": str(directory)},
            )

        names = []
        for path in sorted(directory.iterdir()):
            if path.is_file() and path.suffix.lower() in SCHEMA_FILE_SUFFIXES:
                names.append(self.register_file(path, allow_overwrite=allow_overwrite).name)

        logger.info(f"Loaded {len(names)} schema(s) from {directory} into {self._name}")
        return names

    def reload(self, name: str) -> SchemaValidator:
        """Re-read a file-backed validator from disk.

        The registered validator is only replaced when the file loads
        successfully.

        Raises:
            NotFoundError: If the name is unknown or not backed by a file
            SchemaDefinitionError: If the file no longer loads
        """
        with self._lock:
            path = self._sources.get(name)
            if path is None:
                raise NotFoundError(
                    f"Validator '{name}' was not loaded from a file",
                    context={"key": name, "registry": self._name},
                )
            return self.register_file(path, name=name, allow_overwrite=True)
