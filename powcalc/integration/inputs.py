"""
Text-to-operand parsing for the calculator front-ends.

The kernel assumes finite operands, so everything typed by a user goes
through here first:
- `parse_operands` is the strict path used right before calling `power`.
- `validate_fields` is the lenient per-keystroke check used by the GUI to
  enable or disable its Calculate button.
"""

from __future__ import annotations

from dataclasses import dataclass
from math import isfinite
from typing import Optional, Tuple

from ..core.power_kernel import InputError, is_integer

FIELD_BASE = "base"
FIELD_EXPONENT = "exponent"

_LABELS = {
    FIELD_BASE: ("Base", "base", "x"),
    FIELD_EXPONENT: ("Exponent", "exponent", "y"),
}


@dataclass(frozen=True)
class ParsedOperands:
    base: float
    exponent: float


@dataclass(frozen=True)
class ValidationState:
    can_calculate: bool
    message: str = ""
    invalid_fields: Tuple[str, ...] = ()


def try_parse_float(text: str) -> Optional[float]:
    """Parse *text* as a float, returning None when it is not a number."""
    try:
        return float(text.strip())
    except ValueError:
        return None


def parse_operand(text: str, *, field: str) -> float:
    """
    Parse one operand strictly.

    Raises InputError for empty text, non-numeric text, NaN and infinities.
    """
    if field not in _LABELS:
        raise ValueError(f"unknown field: {field!r}")
    title, noun, symbol = _LABELS[field]

    raw = text.strip()
    if not raw:
        raise InputError(f"Please enter {'a' if field == FIELD_BASE else 'an'} {noun} value ({symbol}).")
    value = try_parse_float(raw)
    if value is None:
        raise InputError(f"{title} value must be a valid number. Please check your input for '{raw}'.")
    if not isfinite(value):
        raise InputError(f"{title} value cannot be NaN or Infinity.")
    return value


def parse_operands(base_text: str, exponent_text: str) -> ParsedOperands:
    return ParsedOperands(
        base=parse_operand(base_text, field=FIELD_BASE),
        exponent=parse_operand(exponent_text, field=FIELD_EXPONENT),
    )


def validate_fields(base_text: str, exponent_text: str) -> ValidationState:
    """
    Pre-empt inputs that are known to fail before `power` is ever called.

    Rules (first match wins):
    - either field empty: disabled, no message
    - either field unparsable: disabled, offending fields flagged
    - zero base with negative exponent: disabled
    - negative base with non-integer exponent: disabled
    """
    if not base_text.strip() or not exponent_text.strip():
        return ValidationState(can_calculate=False)

    x = try_parse_float(base_text)
    y = try_parse_float(exponent_text)
    if x is None or y is None:
        flagged = tuple(name for name, v in ((FIELD_BASE, x), (FIELD_EXPONENT, y)) if v is None)
        return ValidationState(
            can_calculate=False,
            message="Please enter valid numeric values for x and y.",
            invalid_fields=flagged,
        )

    if x == 0.0 and y < 0.0:
        return ValidationState(
            can_calculate=False,
            message="0 raised to a negative power is undefined.",
            invalid_fields=(FIELD_EXPONENT,),
        )

    if x < 0.0 and not is_integer(y):
        return ValidationState(
            can_calculate=False,
            message="Negative base requires an integer exponent.",
            invalid_fields=(FIELD_EXPONENT,),
        )

    return ValidationState(can_calculate=True)
