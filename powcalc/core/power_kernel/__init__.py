"""`power_kernel`: pure-Python real exponentiation built from first principles.

No `math.pow`, `math.exp`, `math.log` or float `**` is used. The kernel is:
- stateless and deterministic (same inputs, same result or same error),
- composed of exponentiation by squaring, a range-reduced Taylor series for
  the natural logarithm, and a split Taylor series for the exponential,
- fail-fast: out-of-domain inputs raise `DomainError` immediately.

Public API:
- `power(x, y) -> float` (raises `DomainError`)
- `power_integer(x, n) -> float`
- `natural_log(x) -> float` (raises `DomainError`)
- `exponential(x) -> float`
"""

from .engine import power
from .errors import DomainError, InputError, PowerCalculatorError
from .math import E, LN2, exponential, is_integer, natural_log, power_integer

__all__ = [
    "power",
    "power_integer",
    "natural_log",
    "exponential",
    "is_integer",
    "E",
    "LN2",
    "PowerCalculatorError",
    "DomainError",
    "InputError",
]
