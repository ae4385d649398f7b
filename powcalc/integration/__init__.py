"""
Front-end glue: input parsing, result formatting and display configuration
"""

from .calculator import calculate, calculate_display
from .config import DisplayConfig, load_display_config
from .formatting import DisplayResult, format_error, format_number, format_result
from .inputs import ParsedOperands, ValidationState, parse_operand, parse_operands, try_parse_float, validate_fields

__all__ = [
    "calculate",
    "calculate_display",
    "DisplayConfig",
    "load_display_config",
    "DisplayResult",
    "format_error",
    "format_number",
    "format_result",
    "ParsedOperands",
    "ValidationState",
    "parse_operand",
    "parse_operands",
    "try_parse_float",
    "validate_fields",
]
