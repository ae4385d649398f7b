"""Exception types for the power kernel and its front-ends.

Front-ends catch ``PowerCalculatorError`` and render the message verbatim.
"""

from __future__ import annotations


class PowerCalculatorError(Exception):
    """Base class for every failure surfaced to a user."""


class DomainError(PowerCalculatorError):
    """Raised when the inputs fall outside the real-number domain of the kernel."""


class InputError(PowerCalculatorError):
    """Raised when textual input cannot be turned into a finite operand."""
