"""Environment variable substitution for configuration values."""

import os
import re
from typing import Any, Dict, List, Union

from .exceptions import ConfigurationError


class VariableSubstitution:
    """Handles environment variable substitution in configuration values.

    Supports patterns:
    - ${VAR} - Replace with environment variable VAR, error if not found
    - ${VAR:default} - Replace with VAR or use default if not found
    - ${VAR:-default} - Same as above (bash-style)
    """

    VAR_PATTERN = re.compile(r'\$\{([^}:]+)(?::(-)?([^}]*))?\}')

    def substitute(self, value: Any) -> Any:
        """Recursively substitute environment variables in a value.

        Args:
            value: Value to process (can be string, dict, list, or other)

        Returns:
            Value with environment variables substituted

        Raises:
            ConfigurationError: If a required environment variable is not found
        """
        if isinstance(value, str):
            return self._substitute_string(value)
        elif isinstance(value, dict):
            # Keys are not substituted, only values
            return {key: self.substitute(item) for key, item in value.items()}
        elif isinstance(value, list):
            return [self.substitute(item) for item in value]
        else:
            return value

    def _substitute_string(self, text: str) -> Union[str, int, float, bool]:
        # A string that is exactly one variable reference may become a non-string
        if text.startswith('${') and text.endswith('}') and text.count('${') == 1:
            match = self.VAR_PATTERN.fullmatch(text)
            if match:
                return self._convert_type(self._lookup(match))

        return self.VAR_PATTERN.sub(self._lookup, text)

    def _lookup(self, match: re.Match) -> str:
        var_name = match.group(1)
        has_default = match.group(2) is not None or match.group(3) is not None

        if var_name in os.environ:
            return os.environ[var_name]
        elif has_default:
            return match.group(3) if match.group(3) is not None else ""
        raise ConfigurationError(
            f"Environment variable '{var_name}' not found",
            context={"variable": var_name},
        )

    def _convert_type(self, value: str) -> Union[str, int, float, bool]:
        """Convert a string value to bool, int or float where it parses as one."""
        if value.lower() in ('true', 'yes'):
            return True
        elif value.lower() in ('false', 'no'):
            return False

        try:
            return int(value)
        except ValueError:
            pass

        try:
            return float(value)
        except ValueError:
            pass

        return value


def substitute_all(data: Dict[str, Any] | List[Any]) -> Any:
    """Substitute environment variables throughout a config structure."""
    return VariableSubstitution().substitute(data)
