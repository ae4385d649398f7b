"""
Display configuration for the calculator front-ends.

Settings come from environment variables and fall back to defaults when a
variable is missing, blank or malformed. Integer settings are clamped to
their allowed range.

    POWCALC_FIXED_DIGITS  digits after the point in fixed notation (0..17)
    POWCALC_SCI_DIGITS    digits after the point in scientific notation (0..17)
    POWCALC_SCI_SMALL     nonzero magnitudes below this use scientific notation
    POWCALC_SCI_LARGE     magnitudes above this use scientific notation
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from math import isfinite
from typing import Mapping, Optional

MAX_DIGITS = 17


@dataclass(frozen=True)
class DisplayConfig:
    fixed_digits: int = 10
    scientific_digits: int = 2
    scientific_below: float = 1e-10
    scientific_above: float = 1e10


def _env_int(env: Mapping[str, str], name: str, default: int, *, lo: int, hi: int) -> int:
    raw = env.get(name)
    if raw is None or not raw.strip():
        return int(default)
    try:
        v = int(raw.strip())
    except ValueError:
        return int(default)
    if v < lo:
        return int(lo)
    if v > hi:
        return int(hi)
    return int(v)


def _env_float(env: Mapping[str, str], name: str, default: float) -> float:
    raw = env.get(name)
    if raw is None or not raw.strip():
        return float(default)
    try:
        v = float(raw.strip())
    except ValueError:
        return float(default)
    if not isfinite(v) or v < 0:
        return float(default)
    return v


def load_display_config(env: Optional[Mapping[str, str]] = None) -> DisplayConfig:
    """Build a `DisplayConfig` from *env* (defaults to ``os.environ``)."""
    if env is None:
        env = os.environ
    defaults = DisplayConfig()
    return DisplayConfig(
        fixed_digits=_env_int(env, "POWCALC_FIXED_DIGITS", defaults.fixed_digits, lo=0, hi=MAX_DIGITS),
        scientific_digits=_env_int(env, "POWCALC_SCI_DIGITS", defaults.scientific_digits, lo=0, hi=MAX_DIGITS),
        scientific_below=_env_float(env, "POWCALC_SCI_SMALL", defaults.scientific_below),
        scientific_above=_env_float(env, "POWCALC_SCI_LARGE", defaults.scientific_above),
    )
