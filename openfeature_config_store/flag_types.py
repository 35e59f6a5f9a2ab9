# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Parsing of string-encoded defaults and formatting of evaluated values.

Hosts exchange flag values as strings. Each flag type has a parser for the
``<key>_defaultValue`` metadata entry and a formatter for the value the
provider returns. Parsers raise ``ValueError``; callers attach the flag key.
"""

import json
import math
import re
from typing import Any

_TRUE_VALUES = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE_VALUES = frozenset({"0", "f", "F", "FALSE", "false", "False"})

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


def parse_bool(raw: str) -> bool:
    if raw in _TRUE_VALUES:
        return True
    if raw in _FALSE_VALUES:
        return False
    raise ValueError("invalid boolean syntax")


def format_bool(value: Any) -> str:
    return "true" if value else "false"


def parse_string(raw: str) -> str:
    return raw


def format_string(value: Any) -> str:
    return str(value)


def parse_int(raw: str) -> int:
    """Parse a base-10 signed 64-bit integer.

    Whitespace and digit-group underscores are rejected.
    """
    if not _INT_PATTERN.fullmatch(raw):
        raise ValueError("invalid integer syntax")
    value = int(raw)
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise ValueError("value out of 64-bit integer range")
    return value


def format_int(value: Any) -> str:
    return str(int(value))


def parse_float(raw: str) -> float:
    if raw != raw.strip() or "_" in raw:
        raise ValueError("invalid float syntax")
    value = float(raw)
    if math.isinf(value) and raw.lstrip("+-").lower() not in ("inf", "infinity"):
        raise ValueError("value out of 64-bit float range")
    return value


def format_float(value: Any) -> str:
    """Format a float using the shortest decimal that round-trips."""
    return repr(float(value))


def parse_object(raw: str) -> dict[str, Any]:
    """Decode a JSON object default.

    Raises:
        ValueError: If the text is not JSON or not a JSON object
    """
    value = json.loads(raw)
    if not isinstance(value, dict):
        raise ValueError(f"expected a JSON object, got {type(value).__name__}")
    return value


def format_object(value: Any) -> str:
    return json.dumps(value, separators=(",", ":"), sort_keys=True)


def is_bool(value: Any) -> bool:
    return isinstance(value, bool)


def is_string(value: Any) -> bool:
    return isinstance(value, str)


def is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def is_float(value: Any) -> bool:
    """Floats accept integral values too, as OpenFeature clients do."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_object(value: Any) -> bool:
    return isinstance(value, (dict, list))
