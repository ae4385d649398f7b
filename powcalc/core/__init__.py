"""
Core numeric kernels
"""

from .power_kernel import (
    DomainError,
    InputError,
    PowerCalculatorError,
    exponential,
    is_integer,
    natural_log,
    power,
    power_integer,
)

__all__ = [
    "power",
    "power_integer",
    "natural_log",
    "exponential",
    "is_integer",
    "PowerCalculatorError",
    "DomainError",
    "InputError",
]
