from __future__ import annotations

"""
Configuration Validation Service.

Gatekeeper between untrusted configuration sources (CLI, JSON files) and the
engine. Coerces types, clamps ranges and fills missing keys with defaults.
"""

import logging
import math
from typing import Any, Dict, List, Tuple

from dirtwins.domain.config import OUTPUT_FORMATS, get_default_config

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize a configuration dictionary.

    Args:
        config: Raw configuration data.
        strict: If True, raise on invalid values instead of coercing.

    Returns:
        Tuple[Dict[str, Any], List[str]]: Normalized configuration and warnings.

    Raises:
        TypeError: In strict mode, on a value of the wrong type.
        ValueError: In strict mode, on a value out of range.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using defaults.")
        logger.warning(msg)
        return defaults, warnings

    merged: Dict[str, Any] = dict(defaults)
    merged.update(config)

    for field in ("input_path", "output_path"):
        merged[field] = _as_str(merged.get(field), defaults[field], field, warnings, strict)

    merged["skip_comments"] = _as_bool(
        merged.get("skip_comments"), defaults["skip_comments"], "skip_comments", warnings, strict
    )

    for field in ("name_threshold", "content_threshold"):
        value = _as_float(merged.get(field), defaults[field], field, warnings, strict)
        merged[field] = _clamp(value, 0.0, 100.0, field, warnings, strict)

    merged["min_child_count"] = _as_int(
        merged.get("min_child_count"), defaults["min_child_count"], 0, "min_child_count", warnings, strict
    )
    for field in ("ingest_workers", "analysis_workers"):
        merged[field] = _as_int(merged.get(field), defaults[field], 1, field, warnings, strict)

    fmt = _as_str(merged.get("output_format"), defaults["output_format"], "output_format", warnings, strict)
    fmt = fmt.lower()
    if fmt not in OUTPUT_FORMATS:
        msg = f"Invalid field 'output_format': '{fmt}' not in {list(OUTPUT_FORMATS)}."
        if strict:
            raise ValueError(msg)
        warnings.append(f"{msg} Using fallback.")
        fmt = defaults["output_format"]
    merged["output_format"] = fmt

    return merged, warnings

# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _as_str(value: Any, fallback: str, field: str, warnings: List[str], strict: bool) -> str:
    if value is None:
        return fallback
    if isinstance(value, str):
        return value.strip()

    msg = f"Invalid field '{field}': expected str, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_bool(value: Any, fallback: bool, field: str, warnings: List[str], strict: bool) -> bool:
    """Coerce various input types into native booleans."""
    if isinstance(value, bool):
        return value
    if value is None:
        return fallback

    if not strict:
        if isinstance(value, (int, float)) and value in (0, 1):
            warnings.append(f"Field '{field}' converted from number {value} to bool.")
            return bool(value)
        if isinstance(value, str):
            s = value.strip().lower()
            if s in ("true", "1", "yes", "y"):
                warnings.append(f"Field '{field}' converted from '{value}' to True.")
                return True
            if s in ("false", "0", "no", "n"):
                warnings.append(f"Field '{field}' converted from '{value}' to False.")
                return False

    msg = f"Invalid field '{field}': expected bool, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_float(value: Any, fallback: float, field: str, warnings: List[str], strict: bool) -> float:
    if value is None:
        return float(fallback)
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return _finite(float(value), fallback, field, warnings, strict)

    if isinstance(value, str) and not strict:
        try:
            converted = float(value.strip().rstrip("%"))
        except ValueError:
            pass
        else:
            if not math.isfinite(converted):
                return _finite(converted, fallback, field, warnings, strict)
            warnings.append(f"Field '{field}' converted from '{value}' to {converted}.")
            return converted

    msg = f"Invalid field '{field}': expected number, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return float(fallback)


def _finite(value: float, fallback: float, field: str, warnings: List[str], strict: bool) -> float:
    """Reject NaN and infinities, which no gate comparison can honor."""
    if math.isfinite(value):
        return value
    msg = f"Invalid field '{field}': non-finite value {value}."
    if strict:
        raise ValueError(msg)
    warnings.append(f"{msg} Using fallback.")
    return float(fallback)


def _as_int(value: Any, fallback: int, minimum: int, field: str, warnings: List[str], strict: bool) -> int:
    """Coerce to int and enforce a lower bound."""
    result = fallback
    if value is None:
        result = fallback
    elif isinstance(value, int) and not isinstance(value, bool):
        result = value
    elif isinstance(value, str) and not strict and value.strip().lstrip("-").isdigit():
        result = int(value.strip())
        warnings.append(f"Field '{field}' converted from '{value}' to {result}.")
    else:
        msg = f"Invalid field '{field}': expected int, received {type(value).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using fallback.")

    if result < minimum:
        msg = f"Field '{field}' must be >= {minimum}, received {result}."
        if strict:
            raise ValueError(msg)
        warnings.append(f"{msg} Raised to {minimum}.")
        result = minimum
    return result


def _clamp(value: float, low: float, high: float, field: str, warnings: List[str], strict: bool) -> float:
    if low <= value <= high:
        return value
    msg = f"Field '{field}' must be within [{low:g}, {high:g}], received {value:g}."
    if strict:
        raise ValueError(msg)
    clamped = min(max(value, low), high)
    warnings.append(f"{msg} Clamped to {clamped:g}.")
    return clamped
