from __future__ import annotations

from ..core.exceptions import ValidationError


def require_fields(message: str, *values: object) -> None:
    """Reject the form when any value is missing or blank."""
    for value in values:
        if value is None or (isinstance(value, str) and not value.strip()):
            raise ValidationError(message)


def to_int(value: object, default: int = 0) -> int:
    """Lenient integer coercion for numeric form fields.

    Mirrors the portal's parseInt use: leading digits win, blank falls back.
    """
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value)
    text = str(value or "").strip()
    if not text:
        return default
    digits = ""
    for i, ch in enumerate(text):
        if ch.isdigit() or (i == 0 and ch in "+-"):
            digits += ch
        else:
            break
    try:
        return int(digits)
    except ValueError:
        return default
