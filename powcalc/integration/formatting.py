"""
Result rendering shared by the text and graphical front-ends.
"""

from __future__ import annotations

from dataclasses import dataclass
from math import isinf, isnan

from .config import DisplayConfig

DEFAULT_CONFIG = DisplayConfig()


@dataclass(frozen=True)
class DisplayResult:
    text: str
    error: str = ""

    @property
    def ok(self) -> bool:
        return not self.error


def format_number(value: float, config: DisplayConfig = DEFAULT_CONFIG, *, auto_scientific: bool = True) -> str:
    """
    Fixed notation, or scientific notation when the magnitude is outside
    ``[scientific_below, scientific_above]`` (zero is always fixed).
    """
    if auto_scientific:
        mag = abs(value)
        if (mag < config.scientific_below and value != 0) or mag > config.scientific_above:
            return f"{value:.{config.scientific_digits}e}"
    return f"{value:.{config.fixed_digits}f}"


def format_result(value: float, config: DisplayConfig = DEFAULT_CONFIG, *, auto_scientific: bool = True) -> DisplayResult:
    if isnan(value):
        return DisplayResult(
            text="Result: NaN (Not a Number)",
            error="The calculation resulted in an undefined value.",
        )
    if isinf(value):
        text = "Result: +∞ (Positive Infinity)" if value > 0 else "Result: -∞ (Negative Infinity)"
        return DisplayResult(text=text, error="The result is too large to represent as a finite number.")
    return DisplayResult(text=f"Result: {format_number(value, config, auto_scientific=auto_scientific)}")


def format_error(exc: BaseException) -> DisplayResult:
    return DisplayResult(text="Result: Error", error=f"Error: {exc}")
