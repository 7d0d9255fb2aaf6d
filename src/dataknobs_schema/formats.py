"""String format checks used by the validation engine.

These are shape checks only. A date such as ``2024-13-45`` passes
:func:`is_date` because no calendar validation is performed.
"""

from __future__ import annotations

import re
from re import Pattern as RegexPattern

EMAIL_REGEX = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9-]+(?:\.[a-zA-Z0-9-]+)*\.[a-zA-Z]{2,}")
DATE_REGEX = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")

# Longest string handed to a user-supplied pattern
DEFAULT_PATTERN_INPUT_LIMIT = 10_000


def is_email(value: str) -> bool:
    """Check that a string looks like ``local@domain.tld``."""
    return EMAIL_REGEX.fullmatch(value) is not None


def is_date(value: str) -> bool:
    """Check that a string looks like ``YYYY-MM-DD``."""
    return DATE_REGEX.fullmatch(value) is not None


def compile_pattern(pattern: str) -> RegexPattern | None:
    """Compile a user-supplied pattern.

    Args:
        pattern: Regular expression source

    Returns:
        Compiled pattern, or None if the expression is invalid
    """
    try:
        return re.compile(pattern)
    except re.error:
        return None


def matches_pattern(
    regex: RegexPattern | None,
    value: str,
    input_limit: int | None = DEFAULT_PATTERN_INPUT_LIMIT,
) -> bool:
    """Check that ``value`` fully matches ``regex``.

    Fails closed: an uncompilable pattern (``regex`` is None) or a value
    longer than ``input_limit`` never matches.

    Args:
        regex: Compiled pattern from :func:`compile_pattern`
        value: String to test
        input_limit: Maximum value length to match, or None for no limit

    Returns:
        True if the whole string matches
    """
    if regex is None:
        return False
    if input_limit is not None and len(value) > input_limit:
        return False
    return regex.fullmatch(value) is not None
