"""
Text in, display out: the single call path the front-ends share.
"""

from __future__ import annotations

from ..core.power_kernel import PowerCalculatorError, power
from .config import DisplayConfig
from .formatting import DEFAULT_CONFIG, DisplayResult, format_error, format_result
from .inputs import parse_operands


def calculate(base_text: str, exponent_text: str) -> float:
    """Parse both fields and return ``power(x, y)``; raises `PowerCalculatorError`."""
    ops = parse_operands(base_text, exponent_text)
    return power(ops.base, ops.exponent)


def calculate_display(
    base_text: str,
    exponent_text: str,
    config: DisplayConfig = DEFAULT_CONFIG,
    *,
    auto_scientific: bool = True,
) -> DisplayResult:
    try:
        value = calculate(base_text, exponent_text)
    except PowerCalculatorError as exc:
        return format_error(exc)
    return format_result(value, config, auto_scientific=auto_scientific)
