"""Unit family foundation for typed geodesy quantities.

Every unit class belongs to exactly one family (angle, length, time, velocity).
The family is identified by its ROOT class: the nearest class in the MRO that
sets ``IS_FAMILY_ROOT`` itself. Quantities from the same family can be
combined; mixing families is rejected at runtime.

Example:
    >>> class Length(Unit):
    ...     IS_FAMILY_ROOT = True
    >>> class Meter(Length):
    ...     pass
    >>> Meter.ROOT is Length
    True
"""

from __future__ import annotations

from typing import ClassVar


class Unit:
    """Base class for all unit types.

    Attributes:
        ROOT (ClassVar[type[Unit]]): Root class defining the unit family.
        SYMBOL (ClassVar[str]): Unit symbol used when printing values.
        IS_FAMILY_ROOT (ClassVar[bool]): Marks the class that starts a family.
    """

    __slots__ = ()

    ROOT: ClassVar[type[Unit]]
    SYMBOL: ClassVar[str] = ""
    IS_FAMILY_ROOT: ClassVar[bool] = False

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        cls.ROOT = next(
            (klass for klass in cls.__mro__ if klass.__dict__.get("IS_FAMILY_ROOT", False)),
            cls,
        )

    @classmethod
    def _require_family(cls, other) -> None:
        """Raise TypeError unless ``other`` (a unit value or type) is in this family."""
        root = getattr(other, "ROOT", None)
        if root is not cls.ROOT:
            name = root.__name__ if root is not None else getattr(other, "__name__", type(other).__name__)
            raise TypeError(f"cannot combine {cls.ROOT.__name__} with {name}")
