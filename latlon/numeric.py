"""Pure numeric helpers shared by the geodesy engine and the DMS codec.

All functions take and return plain values and hold no state.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Context, Decimal
from numbers import Real

from .unit import Degree, Radian

TWO_PI = 2 * math.pi

# enough digits for any float quantized to any sensible number of places
_DECIMAL_CONTEXT = Context(prec=1100, rounding=ROUND_HALF_UP)


def to_number(value) -> float:
    """Coerce a coordinate-like value to a float in degrees.

    Real numbers pass through, angle units are converted to degrees and numeric
    strings are parsed. A string that is not a number gives NaN.

    Raises:
        TypeError: If ``value`` is neither a real number nor a string.
    """
    if isinstance(value, Radian):
        return value.to(Degree)
    if isinstance(value, Real) and not isinstance(value, bool):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value.strip())
        except ValueError:
            return math.nan
    raise TypeError(f"expected a number or string, got {type(value).__name__}")


def to_radians(degrees: float) -> float:
    return degrees * math.pi / 180


def to_degrees(radians: float) -> float:
    return radians * 180 / math.pi


def wrap_longitude(lam: float) -> float:
    """Normalise a longitude in radians to the range [-π, π)."""
    return (lam + 3 * math.pi) % TWO_PI - math.pi


def wrap_bearing(degrees: float) -> float:
    """Normalise a bearing in degrees to the range [0, 360)."""
    wrapped = (degrees + 360) % 360
    # -1e-17 + 360 rounds to 360.0 before the modulo
    return 0.0 if wrapped == 360 else wrapped


def clamp_unit(x: float) -> float:
    """Clamp a cosine/sine argument that rounding pushed just outside [-1, 1]."""
    return max(-1.0, min(1.0, x))


def _quantize(value: float, exponent: int) -> Decimal:
    """Round ``value`` to a multiple of 10**exponent, ties away from zero.

    ``Decimal(value)`` is the exact binary value of the float, so only true
    ties (2.5, 4.125) round up; 1.005 stays below the tie as it does in binary.
    """
    return Decimal(value).quantize(Decimal(1).scaleb(exponent), context=_DECIMAL_CONTEXT)


def to_fixed(value: float, dp: int) -> str:
    """Format ``value`` with exactly ``dp`` decimal places, rounding ties up.

    Example:
        >>> to_fixed(2.5, 0), to_fixed(4.125, 2), f"{4.125:.2f}"
        ('3', '4.13', '4.12')
    """
    value = float(value) + 0.0
    if not math.isfinite(value):
        return str(value)
    return format(_quantize(value, -int(dp)), "f")


def to_precision_fixed(value: float, precision: int) -> str:
    """Format ``value`` to ``precision`` significant digits in fixed-point form.

    Unlike ``format(value, ".4g")`` the result never uses exponent notation:
    large magnitudes are padded with trailing zeros and small magnitudes with
    leading zeros after the decimal point. Ties round away from zero.

    Args:
        value: Number to format.
        precision: Significant digits, at least 1.

    Returns:
        str: e.g. ``"7.403"``, ``"1230000000000000000000"`` or ``"0.000000000456"``.

    Raises:
        ValueError: If ``precision`` is less than 1.
    """
    precision = int(precision)
    if precision < 1:
        raise ValueError(f"precision must be at least 1, got {precision}")
    value = float(value) + 0.0  # folds -0.0 into 0.0
    if not math.isfinite(value):
        return str(value)

    if value == 0:
        sign, digits, exponent = "", "0" * precision, 0
    else:
        exponent = Decimal(value).adjusted()
        rounded = _quantize(value, exponent - precision + 1)
        if rounded.adjusted() > exponent:
            # 9.9996 -> 10.00 carries into a new leading digit
            exponent += 1
            rounded = rounded.quantize(Decimal(1).scaleb(exponent - precision + 1), context=_DECIMAL_CONTEXT)
        negative, digit_tuple, _ = rounded.as_tuple()
        sign = "-" if negative else ""
        digits = "".join(map(str, digit_tuple))

    if exponent < 0:
        return f"{sign}0.{'0' * (-exponent - 1)}{digits}"
    if exponent >= len(digits) - 1:
        return sign + digits + "0" * (exponent - len(digits) + 1)
    return f"{sign}{digits[:exponent + 1]}.{digits[exponent + 1:]}"


class SignificantFloat(float):
    """A float rounded to significant figures that prints in fixed-point form.

    Arithmetic gives plain floats; ``str``, ``repr`` and an empty format spec
    render through :func:`to_precision_fixed`, so a distance of 1.112e-05 km
    prints as ``0.00001112``.

    Example:
        >>> SignificantFloat(1.57079e21, 4)
        1571000000000000000000
    """

    def __new__(cls, value: float, precision: int):
        self = float.__new__(cls, to_precision_fixed(value, precision))
        self.precision = int(precision)
        return self

    def __str__(self) -> str:
        return to_precision_fixed(float(self), self.precision)

    __repr__ = __str__

    def __format__(self, format_spec: str) -> str:
        if not format_spec:
            return str(self)
        return float(self).__format__(format_spec)
