"""Human-readable formatting of game numbers."""

from __future__ import annotations

import math
import sys
from decimal import Decimal
from enum import Enum
from typing import NamedTuple

from .state import DEFAULT_PRECISION, Precision

_EPSILON = sys.float_info.epsilon


class ShowSign(Enum):
    NEGATIVE_ONLY = "negative_only"
    ALWAYS = "always"


class _Breakpoint(NamedTuple):
    limit: float
    divisor: float
    suffix: str


_BREAKPOINTS = (
    _Breakpoint(1e210, 1e210, "Q"),
    _Breakpoint(1e42, 1e42, "W"),
    _Breakpoint(1e39, 1e39, "L"),
    _Breakpoint(1e36, 1e36, "F"),
    _Breakpoint(1e33, 1e33, "H"),
    _Breakpoint(1e30, 1e30, "S"),
    _Breakpoint(1e27, 1e27, "U"),
    _Breakpoint(1e24, 1e24, "Y"),
    _Breakpoint(1e21, 1e21, "Z"),
    _Breakpoint(1e18, 1e18, "E"),
    _Breakpoint(1e15, 1e15, "P"),
    _Breakpoint(1e12, 1e12, "T"),
    _Breakpoint(1e9, 1e9, "G"),
    _Breakpoint(1e6, 1e6, "M"),
    # K only appears once the number is almost five digits long.
    _Breakpoint(9e3, 1e3, "K"),
)


def _round_half_away(value: float) -> float:
    if not math.isfinite(value):
        return value
    whole = math.trunc(value)
    if abs(value - whole) >= 0.5:
        whole += 1 if value > 0 else -1
    return math.copysign(float(whole), value)


def _truncate(value: float) -> float:
    if not math.isfinite(value):
        return value
    return math.copysign(float(math.trunc(value)), value)


def _scale(precision: Precision) -> float:
    return float(10 ** int(precision))


def round_with_precision(number: float, precision: Precision = DEFAULT_PRECISION) -> float:
    """Round to the given number of decimals, halves away from zero."""
    scale = _scale(precision)
    return _round_half_away(number * scale * (1.0 + _EPSILON)) / scale


def trunc_with_precision(number: float, precision: Precision = DEFAULT_PRECISION) -> float:
    """Truncate towards zero at the given number of decimals."""
    scale = _scale(precision)
    return _truncate(number * scale * (1.0 + _EPSILON)) / scale


def format_number(
    number: float,
    show_sign: ShowSign = ShowSign.NEGATIVE_ONLY,
    precision: Precision = DEFAULT_PRECISION,
) -> str:
    """Format a number with magnitude suffixes such as K, M and G."""
    if math.isnan(number):
        raise ValueError("cannot format NaN")
    if math.isinf(number):
        raise ValueError("cannot format an infinite number")

    scaled = number
    suffixes: list[str] = []
    for breakpoint_ in _BREAKPOINTS:
        rounded = round_with_precision(scaled, precision)
        # Near the top of the float range rounding overflows; skip it then.
        if math.isfinite(rounded):
            scaled = rounded
        while scaled + _EPSILON >= breakpoint_.limit:
            suffixes.append(breakpoint_.suffix)
            scaled /= breakpoint_.divisor

    scaled = round_with_precision(scaled, precision)
    sign = "+" if show_sign is ShowSign.ALWAYS else ""
    return f"{scaled:{sign}.{int(precision)}f}{''.join(suffixes)}"


def format_integer(value: float, show_sign: ShowSign = ShowSign.NEGATIVE_ONLY) -> str:
    """Format a number in plain decimal notation with no trailing zeros."""
    if math.isnan(value):
        return "NaN"
    negative = math.copysign(1.0, value) < 0
    magnitude = abs(value)
    if math.isinf(magnitude):
        text = "inf"
    else:
        text = format(Decimal(repr(magnitude)), "f")
        if "." in text:
            text = text.rstrip("0").rstrip(".")
    if negative:
        return "-" + text
    if show_sign is ShowSign.ALWAYS:
        return "+" + text
    return text