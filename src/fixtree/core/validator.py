from __future__ import annotations

"""
Configuration Validation Service.

Gatekeeper between untrusted configuration sources (CLI flags, JSON) and
the generator. Coerces types, injects defaults and checks domain values,
collecting human-readable warnings for every correction it makes.
"""

import codecs
import logging
from typing import Any, Dict, List, Tuple

from fixtree.domain.config import ProvisionMode, get_default_config

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
    Validate and normalize the provided configuration dictionary.

    Args:
        config: Raw configuration data (usually a dictionary).
        strict: If True, raise on invalid values instead of coercing.

    Returns:
        Tuple[Dict[str, Any], List[str]]: The normalized configuration and
                                          the list of warnings.

    Raises:
        TypeError: In strict mode, on a type mismatch.
        ValueError: In strict mode, on an out-of-domain value.
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

    string_fields = ["root_path", "temp_prefix", "encoding", "mode"]
    bool_fields = ["allow_streams", "allow_single_child", "print_tree"]
    mode_bits_fields = ["dir_mode", "file_mode"]

    for field in string_fields:
        merged[field] = _as_str(merged.get(field), defaults[field], field, warnings, strict)

    for field in bool_fields:
        merged[field] = _as_bool(merged.get(field), defaults[field], field, warnings, strict)

    for field in mode_bits_fields:
        merged[field] = _as_mode_bits(merged.get(field), defaults[field], field, warnings, strict)

    merged["mode"] = _normalize_mode(merged["mode"], defaults["mode"], warnings, strict)
    merged["encoding"] = _normalize_encoding(merged["encoding"], defaults["encoding"], warnings, strict)

    return merged, warnings


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _as_str(value: Any, fallback: str, field: str, warnings: List[str], strict: bool) -> str:
    """Validate and sanitize string inputs."""
    if value is None:
        return fallback
    if isinstance(value, str):
        v = value.strip()
        return v if v else fallback

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
            if s in ("true", "1", "yes", "y", "on"):
                warnings.append(f"Field '{field}' converted from '{value}' to True.")
                return True
            if s in ("false", "0", "no", "n", "off"):
                warnings.append(f"Field '{field}' converted from '{value}' to False.")
                return False

    msg = f"Invalid field '{field}': expected bool, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_mode_bits(value: Any, fallback: int, field: str, warnings: List[str], strict: bool) -> int:
    """Accept permission bits as int or as an octal string ('700', '0o700')."""
    if value is None:
        return fallback

    bits = None
    if isinstance(value, int) and not isinstance(value, bool):
        bits = value
    elif isinstance(value, str) and not strict:
        s = value.strip().lower()
        if s.startswith("0o"):
            s = s[2:]
        try:
            bits = int(s, 8)
            warnings.append(f"Field '{field}' converted from '{value}' to {oct(bits)}.")
        except ValueError:
            bits = None

    if bits is not None and 0 <= bits <= 0o7777:
        return bits

    msg = f"Invalid field '{field}': expected permission bits, received {value!r}."
    if strict:
        raise TypeError(msg) if bits is None else ValueError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: DOMAIN NORMALIZATION
# -----------------------------------------------------------------------------

def _normalize_mode(value: str, fallback: str, warnings: List[str], strict: bool) -> str:
    """Ensure the provisioning mode is one of the known policies."""
    v = value.strip().lower()
    known = [m.value for m in ProvisionMode]
    if v in known:
        return v

    msg = f"Invalid mode '{value}': expected one of {', '.join(known)}."
    if strict:
        raise ValueError(msg)
    warnings.append(f"{msg} Using '{fallback}'.")
    return fallback


def _normalize_encoding(value: str, fallback: str, warnings: List[str], strict: bool) -> str:
    """Ensure the text encoding is known to the codec registry."""
    try:
        return codecs.lookup(value).name
    except LookupError:
        msg = f"Unknown encoding '{value}'."
        if strict:
            raise ValueError(msg)
        warnings.append(f"{msg} Using '{fallback}'.")
        return fallback
