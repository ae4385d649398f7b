"""Special-case dispatch for ``power(x, y)``.

``power`` is the single entry point. Guards are checked in a fixed order and
the first match wins; several of them overlap at boundary values, so the order
is part of the contract:

1. ``x == 0``  -> 1 for ``y == 0``, error for ``y < 0``, 0 otherwise
2. ``x == 1``  -> 1 (for any ``y``, NaN and infinities included)
3. ``y == 0``  -> 1
4. ``y == 1``  -> x
5. ``x < 0`` and ``y`` non-integer -> error
6. ``y < 0``   -> ``1 / power(x, -y)``
7. ``y`` integer -> exponentiation by squaring
8. otherwise  -> ``exp(y * ln(x))``
"""

from __future__ import annotations

from .errors import DomainError
from .math import exponential, is_integer, natural_log, power_integer, reciprocal


def power(x: float, y: float) -> float:
    """Compute ``x ** y`` for real *x* and *y*.

    Inputs are expected to be finite; NaN/Infinity screening belongs to the
    caller. An infinite or NaN ``y`` is treated as a non-integer.

    Raises:
        DomainError: for ``0 ** negative`` and for a negative base with a
            non-integer exponent.
    """
    x = float(x)
    y = float(y)

    if x == 0.0:
        if y == 0.0:
            # 0 ** 0 is taken as 1.
            return 1.0
        if y < 0.0:
            raise DomainError("0 raised to a negative power is undefined.")
        return 0.0

    if x == 1.0:
        return 1.0

    if y == 0.0:
        return 1.0

    if y == 1.0:
        return x

    if x < 0.0 and not is_integer(y):
        raise DomainError(
            "Negative base with a non-integer exponent results in a complex number,"
            " which is not supported."
        )

    if y < 0.0:
        return reciprocal(power(x, -y))

    if is_integer(y):
        return power_integer(x, int(y))

    if x <= 0.0:
        raise DomainError("Cannot compute fractional power of non-positive number.")

    return exponential(y * natural_log(x))
