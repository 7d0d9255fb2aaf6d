"""Configuration for building a validator registry at startup.

Example configuration file:

    settings:
      schemas_path: ${SCHEMAS_PATH:./schemas}
      pattern_input_limit: 10000
      include_predefined: true
    validators:
      - name: create_widget
        schema_file: widget.json
      - name: tag
        schema:
          type: object
          properties:
            label: {type: string, maxLength: 40}
          required: [label]

Example usage:
    ```python
    config = ValidationConfig.from_file("validation.yaml")
    registry = config.build_registry()
    ```
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Union

import yaml  # type: ignore[import-untyped]

from .exceptions import ConfigurationError
from .factory import ValidatorFactory, validator_factory
from .formats import DEFAULT_PATTERN_INPUT_LIMIT
from .registry import ValidatorRegistry
from .schemas import predefined_validators
from .substitution import substitute_all

logger = logging.getLogger(__name__)


@dataclass
class ValidationSettings:
    """Global settings applied to every configured validator.

    Attributes:
        schemas_path: Directory for relative ``schema_file`` entries; when
            ``load_schemas_path`` is set every schema file in it is registered
        pattern_input_limit: Longest string matched against a ``pattern`` rule
        include_predefined: Register the users/orders/products validators
        load_schemas_path: Register every schema file found in ``schemas_path``
    """

    schemas_path: Path | None = None
    pattern_input_limit: int | None = DEFAULT_PATTERN_INPUT_LIMIT
    include_predefined: bool = True
    load_schemas_path: bool = False

    @classmethod
    def from_dict(cls, data: Dict[str, Any], base_path: Path | None = None) -> ValidationSettings:
        """Create settings from a dictionary.

        Args:
            data: Settings dictionary
            base_path: Directory that a relative ``schemas_path`` is resolved against

        Raises:
            ConfigurationError: If a setting has the wrong type
        """
        schemas_path = data.get("schemas_path")
        if schemas_path is not None:
            schemas_path = Path(str(schemas_path))
            if not schemas_path.is_absolute() and base_path is not None:
                schemas_path = base_path / schemas_path

        limit = data.get("pattern_input_limit", DEFAULT_PATTERN_INPUT_LIMIT)
        if limit is not None and (isinstance(limit, bool) or not isinstance(limit, int)):
            raise ConfigurationError(
                f"pattern_input_limit must be an integer, got {limit!r}",
                context={"setting": "pattern_input_limit"},
            )

        return cls(
            schemas_path=schemas_path,
            pattern_input_limit=limit,
            include_predefined=bool(data.get("include_predefined", True)),
            load_schemas_path=bool(data.get("load_schemas_path", False)),
        )


@dataclass
class ValidationConfig:
    """Settings plus the list of validator definitions."""

    settings: ValidationSettings = field(default_factory=ValidationSettings)
    validators: List[Dict[str, Any]] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any], base_path: Path | None = None) -> ValidationConfig:
        """Create a config from a dictionary.

        Environment variables are substituted in all values first.

        Raises:
            ConfigurationError: If the structure is invalid or a referenced
                environment variable is missing
        """
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Configuration must be a mapping, got {type(data).__name__}"
            )
        data = substitute_all(data)

        validators = data.get("validators", [])
        if not isinstance(validators, list) or not all(isinstance(v, dict) for v in validators):
            raise ConfigurationError("'validators' must be a list of mappings")

        return cls(
            settings=ValidationSettings.from_dict(data.get("settings") or {}, base_path),
            validators=validators,
        )

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> ValidationConfig:
        """Create a config from a YAML or JSON file.

        A relative ``schemas_path`` is resolved against the file's directory.

        Raises:
            ConfigurationError: If the file is missing, has an unsupported
                format or cannot be parsed
        """
        path = Path(path).resolve()
        if not path.exists():
            raise ConfigurationError(
                f"Configuration file not found: {path}", context={"path": str(path)}
            )

        suffix = path.suffix.lower()
        logger.info(f"Loading validation config: {path}")
        with open(path, encoding="utf-8") as f:
            try:
                if suffix in [".yaml", ".yml"]:
                    data = yaml.safe_load(f)
                elif suffix == ".json":
                    data = json.load(f)
                else:
                    raise ConfigurationError(
                        f"Unsupported file format: {suffix}", context={"path": str(path)}
                    )
            except (yaml.YAMLError, json.JSONDecodeError) as e:
                raise ConfigurationError(
                    f"Failed to parse configuration file {path}: {e}",
                    context={"path": str(path)},
                ) from e

        return cls.from_dict(data or {}, base_path=path.parent)

    def build_registry(
        self,
        name: str = "validators",
        factory: ValidatorFactory | None = None,
    ) -> ValidatorRegistry:
        """Construct every configured validator.

        Predefined validators are registered first, then schema files from
        ``schemas_path`` (when enabled), then the explicit ``validators``
        entries, each of which may replace an earlier one of the same name.

        Raises:
            ConfigurationError: If a validator definition is incomplete
            SchemaDefinitionError: If a schema description is invalid
        """
        factory = factory or validator_factory
        settings = self.settings
        registry = ValidatorRegistry(name, pattern_input_limit=settings.pattern_input_limit)

        if settings.include_predefined:
            registry.register_all(predefined_validators())

        if settings.load_schemas_path:
            if settings.schemas_path is None:
                raise ConfigurationError("load_schemas_path is set but schemas_path is not")
            registry.load_directory(settings.schemas_path, allow_overwrite=True)

        for definition in self.validators:
            config = dict(definition)
            config.setdefault("pattern_input_limit", settings.pattern_input_limit)
            if settings.schemas_path is not None:
                config.setdefault("schemas_path", str(settings.schemas_path))
            registry.register(factory.create(**config), allow_overwrite=True)

        logger.info(f"Built registry '{name}' with {registry.count()} validator(s)")
        return registry
