"""Float-based units with SI storage and family checks.

``UnitFloat`` subclasses ``float`` so a quantity can be handed straight to
``math`` functions, while the class carries the unit it was created in. The
stored float is always the SI value (radians, metres, seconds, m/s).

Only the operations a geodesy quantity needs are typed: adding or subtracting
a quantity of the same family, scaling by a plain number and comparing. Other
float operations fall through to ``float`` and give plain floats.

Example:
    >>> class Meter(UnitFloat):
    ...     IS_FAMILY_ROOT = True
    ...     SYMBOL = "m"
    >>> class Kilometer(Meter):
    ...     SCALE_TO_SI = 1000.0
    ...     SYMBOL = "km"
    >>> float(Kilometer(7.403))
    7403.0
"""

from __future__ import annotations

import operator
from numbers import Real
from typing import ClassVar

from .unit_base import Unit

Number = int | float


class UnitFloat(float, Unit):
    """Type-safe float stored in SI units.

    Attributes:
        SCALE_TO_SI (ClassVar[float]): Factor converting the native scale to SI.
        IS_FAMILY_ROOT (ClassVar[bool]): True for the root class of a family.
    """

    SCALE_TO_SI: ClassVar[float] = 1.0
    IS_FAMILY_ROOT: ClassVar[bool] = True

    def __new__(cls, value: Number):
        """Create a quantity from a value expressed in the unit's native scale."""
        return float.__new__(cls, float(value) * cls.SCALE_TO_SI)

    @classmethod
    def from_si(cls, si_value: float) -> UnitFloat:
        """Create a quantity from a value that is already in SI units."""
        return float.__new__(cls, si_value)

    def to(self, unit_type: type[UnitFloat]) -> float:
        """Return the plain value expressed in ``unit_type``'s scale.

        Raises:
            TypeError: If ``unit_type`` belongs to another family.
        """
        self._require_family(unit_type)
        return float(self) / unit_type.SCALE_TO_SI

    def as_unit(self, unit_type: type[UnitFloat]) -> UnitFloat:
        """Re-type this quantity as ``unit_type`` without changing its SI value."""
        self._require_family(unit_type)
        return unit_type.from_si(float(self))

    def _si(self, other: UnitFloat) -> float:
        self._require_family(other)
        return float(other)

    def _scale(self, op, k: Number) -> UnitFloat:
        if not isinstance(k, Real) or isinstance(k, Unit):
            raise TypeError(f"cannot scale {type(self).__name__} by {type(k).__name__}")
        return type(self).from_si(op(float(self), float(k)))

    # arithmetic keeps the left-hand unit
    def __add__(self, other: UnitFloat) -> UnitFloat:
        return type(self).from_si(float(self) + self._si(other))

    def __sub__(self, other: UnitFloat) -> UnitFloat:
        return type(self).from_si(float(self) - self._si(other))

    def __mul__(self, k: Number) -> UnitFloat:
        return self._scale(operator.mul, k)

    __rmul__ = __mul__

    def __truediv__(self, k: Number) -> UnitFloat:
        return self._scale(operator.truediv, k)

    # comparisons
    def __lt__(self, other: UnitFloat) -> bool:
        return float(self) < self._si(other)

    def __le__(self, other: UnitFloat) -> bool:
        return float(self) <= self._si(other)

    def __gt__(self, other: UnitFloat) -> bool:
        return float(self) > self._si(other)

    def __ge__(self, other: UnitFloat) -> bool:
        return float(self) >= self._si(other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Unit):
            return NotImplemented
        return float(self) == self._si(other)

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, Unit):
            return NotImplemented
        return float(self) != self._si(other)

    __hash__ = float.__hash__

    def __str__(self) -> str:
        """Value in the unit's native scale followed by its symbol, e.g. ``"7.403 km"``."""
        return f"{self.to(type(self))} {self.SYMBOL}".strip()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to(type(self))!r})"
