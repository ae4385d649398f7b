"""Series arithmetic for the power kernel.

Every function is stateless and operates on plain Python floats/ints.

Only floor/finiteness helpers are taken from the standard library; logarithms,
exponentials and powers are computed here. Loops are bounded: each series runs
at most ``MAX_SERIES_TERMS`` passes and stops early once a term drops below
``SERIES_EPSILON``.
"""

from __future__ import annotations

from math import copysign, floor, inf, isfinite, isnan

from .errors import DomainError

LN2: float = 0.6931471805599453
E: float = 2.718281828459045

MAX_SERIES_TERMS: int = 100
SERIES_EPSILON: float = 1e-15


# -- Basic helpers -----------------------------------------------------------

def is_integer(value: float) -> bool:
    """True when *value* is finite and equal to its own floor."""
    return isfinite(value) and value == floor(value)


def reciprocal(value: float) -> float:
    """``1 / value`` with IEEE semantics at zero (``1/+0 = +inf``, ``1/-0 = -inf``)."""
    if value == 0.0:
        return copysign(inf, value)
    return 1.0 / value


# -- Integer power -----------------------------------------------------------

def power_integer(x: float, n: int) -> float:
    """``x ** n`` for a signed integer *n*, by repeated squaring.

    Runs in ``O(log |n|)`` multiplications.
    """
    if n == 0:
        return 1.0
    if n == 1:
        return x
    if n < 0:
        return reciprocal(power_integer(x, -n))

    result = 1.0
    base = x
    while n > 0:
        if n & 1:
            result *= base
        base *= base
        n >>= 1
    return result


# -- Logarithm ---------------------------------------------------------------

def _reduce_binary(x: float) -> tuple[float, int]:
    """Split positive finite *x* into ``(m, k)`` with ``x = 2**k * m`` and ``1 <= m < 2``."""
    k = 0
    m = x
    while m >= 2.0:
        m /= 2.0
        k += 1
    while m < 1.0:
        m *= 2.0
        k -= 1
    return m, k


def _log1p_series(u: float) -> float:
    """``ln(1 + u)`` for ``0 <= u < 1`` via ``u - u^2/2 + u^3/3 - ...``."""
    result = 0.0
    term = u
    for i in range(1, MAX_SERIES_TERMS + 1):
        if i % 2 == 1:
            result += term / i
        else:
            result -= term / i
        term *= u
        if abs(term / i) < SERIES_EPSILON:
            break
    return result


def natural_log(x: float) -> float:
    """Natural logarithm of *x*.

    Range-reduces to ``x = 2**k * m`` with ``m`` in ``[1, 2)`` and returns
    ``k * ln(2) + ln(m)``, where ``ln(m)`` comes from the alternating Taylor
    series around 1.

    Raises:
        DomainError: if ``x <= 0``.
    """
    if x <= 0:
        raise DomainError("Natural logarithm is undefined for non-positive numbers.")
    if x == 1.0:
        return 0.0
    if not isfinite(x):
        # +inf never leaves the halving loop; NaN falls through to NaN anyway.
        return x

    m, k = _reduce_binary(x)
    return k * LN2 + _log1p_series(m - 1.0)


# -- Exponential -------------------------------------------------------------

def _exp_fraction_series(f: float) -> float:
    """``e**f`` for ``0 <= f < 1`` via ``1 + f + f^2/2! + ...``."""
    result = 1.0
    term = 1.0
    for i in range(1, MAX_SERIES_TERMS + 1):
        term *= f / i
        result += term
        if abs(term) < SERIES_EPSILON:
            break
    return result


def exponential(x: float) -> float:
    """``e**x``, split as ``e**n * e**f`` with ``n = floor(x)`` and ``f`` in ``[0, 1)``."""
    if x == 0.0:
        return 1.0
    if isnan(x):
        return x
    if not isfinite(x):
        # y * ln(x) overflowed upstream: e**inf = inf, e**-inf = 0.
        return x if x > 0 else 0.0

    n = floor(x)
    f = x - n
    return power_integer(E, n) * _exp_fraction_series(f)
