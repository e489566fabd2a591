from __future__ import annotations

import math
import re
from typing import Any, Iterable, Mapping

from ..core.constants import FORBIDDEN_KEY_CHARS
from ..core.exceptions import ValidationError


def require_non_empty(value: Any, field_name: str) -> str:
    if value is None or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def require_fields(data: Mapping[str, Any], fields: Iterable[str]) -> None:
    missing = [f for f in fields if not data.get(f)]
    if missing:
        raise ValidationError(f"Missing required fields: {', '.join(missing)}")


def require_key_segment(value: Any, field_name: str) -> str:
    """Value used as a realtime database path segment."""
    segment = require_non_empty(value, field_name)
    if any(ch in FORBIDDEN_KEY_CHARS for ch in segment):
        raise ValidationError(f"{field_name} must not contain any of . $ # [ ] /")
    return segment


def require_pattern(value: Any, pattern: str, message: str) -> str:
    if value is None or not re.fullmatch(pattern, str(value)):
        raise ValidationError(message)
    return str(value)


def to_number(value: Any, field_name: str) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a number") from None
    if not math.isfinite(number):
        raise ValidationError(f"{field_name} must be a finite number")
    return number


def base64_size_mb(encoded: str) -> float:
    """Decoded size of a base64 payload, with or without a data-URL prefix."""
    data = encoded.split("base64,", 1)[1] if "base64," in encoded else encoded
    data = data.strip().rstrip("=")
    return (len(data) * 3 // 4) / (1024 * 1024)


def require_image_within(encoded: Any, limit_mb: float) -> None:
    if not encoded:
        return
    if not isinstance(encoded, str):
        raise ValidationError("Image must be a base64 encoded string")
    if base64_size_mb(encoded) > limit_mb:
        raise ValidationError(f"Image size too large. Please use an image less than {limit_mb:g}MB.")
