"""
Quantities (:mod:`pymensura.quantities`)
========================================

.. currentmodule:: pymensura.quantities

Measures of specific kinds of quantity, which check their unit / scale
and range when constructed.

Examples
--------
>>> from pymensura.units import DEGREE, Measure
>>> Latitude(91.0, DEGREE)  # doctest: +IGNORE_EXCEPTION_DETAIL
Traceback (most recent call last):
...
pymensura.units._errors.QuantityValidationError: value out of range

Normalised angles wrap into their range:

>>> print(Longitude(-90.0, DEGREE))
270.0°
"""
from __future__ import annotations

from pymensura.units import (DEGREE, MAGNITUDE_SCALE, RADIAN,
                             IntervalScale, Measure, QuantityError,
                             QuantityValidationError, Scale, Unit,
                             UnitError, UnitValidationError)


# ======================================================================

class Quantity(Measure):
    """
    A `Measure` with an optional `symbol` naming the quantity, e.g.
    ``'θ'``.  Conversion and arithmetic give plain measures.
    """
    __slots__ = ('_symbol',)

    def __init__(self, value: float | str, unit: Unit = None, *,
                 scale: Scale = None, error: float = None,
                 symbol: str = None):
        super().__init__(value, unit, scale=scale, error=error)
        self._symbol = symbol

    @property
    def symbol(self) -> str | None:
        return self._symbol

    def __repr__(self) -> str:
        measure_repr = super().__repr__()
        args = measure_repr[measure_repr.index('(') + 1:-1]
        if self._symbol is not None:
            args += f", symbol={self._symbol!r}"
        return f"{type(self).__name__}({args})"


# ----------------------------------------------------------------------

class Angle(Quantity):
    """
    An angle.  The unit must have the dimensions of the radian.

    Raises
    ------
    UnitValidationError
        If the unit is not an angle.
    """
    __slots__ = ()

    def __init__(self, value: float, unit: Unit = RADIAN, *,
                 error: float = None, symbol: str = None):
        if unit.dimensions != RADIAN.dimensions:
            raise UnitValidationError(UnitError.DIFFERENT_DIMENSIONALITY,
                                      f"'{unit.symbol}' is not an angle")
        super().__init__(value, unit, error=error, symbol=symbol)


class Latitude(Angle):
    """
    A latitude, which must be between -90° and +90° (inclusive).

    Raises
    ------
    QuantityValidationError
        If the value is out of range.
    """
    __slots__ = ()
    minimum = Measure(-90.0, DEGREE)
    maximum = Measure(90.0, DEGREE)

    def __init__(self, value: float, unit: Unit = RADIAN, *,
                 error: float = None, symbol: str = None):
        super().__init__(value, unit, error=error, symbol=symbol)
        # Limits are inclusive, within the tolerance of equality.
        below = self < self.minimum and self != self.minimum
        above = self > self.maximum and self != self.maximum
        if below or above:
            raise QuantityValidationError(
                QuantityError.OUT_OF_RANGE,
                f"{self} not in [{self.minimum}, {self.maximum}]")

    @property
    def range(self) -> tuple[Measure, Measure]:
        return self.minimum, self.maximum


class NormalisedAngle(Angle):
    """
    An angle within the range [`minimum`, `maximum`], which is
    [0°, 360°] unless changed by a derived class or the `range`
    argument.  Values outside the range are wrapped into
    [`minimum`, `maximum`).

    Parameters
    ----------
    range : (Measure, Measure), optional
        Minimum and maximum angles, overriding `minimum` and `maximum`.

    Raises
    ------
    ValueError
        If the maximum of `range` is not above the minimum.

    Examples
    --------
    >>> from pymensura.units import DEGREE
    >>> NormalisedAngle(370.0, DEGREE).scalar_value
    10.0
    >>> NormalisedAngle(360.0, DEGREE).scalar_value
    360.0
    """
    __slots__ = ('_range',)
    minimum = Measure(0.0, DEGREE)
    maximum = Measure(360.0, DEGREE)

    def __init__(self, value: float, unit: Unit = RADIAN, *,
                 error: float = None, symbol: str = None,
                 range: tuple[Measure, Measure] = None):
        if range is None:
            range = self.minimum, self.maximum
        lower = range[0].convert(unit).scalar_value
        upper = range[1].convert(unit).scalar_value
        if not upper > lower:
            raise ValueError(f"Empty range [{range[0]}, {range[1]}].")
        if not lower <= value <= upper:
            value = lower + (value - lower) % (upper - lower)
            if value >= upper:
                value = lower  # Rounding of tiny negative values.

        super().__init__(value, unit, error=error, symbol=symbol)
        self._range = tuple(range)

    @property
    def range(self) -> tuple[Measure, Measure]:
        return self._range


class Longitude(NormalisedAngle):
    """A longitude, normalised into [0°, 360°]."""
    __slots__ = ()


# ----------------------------------------------------------------------

class Magnitude(Quantity):
    """
    An astronomical magnitude.  This is a dimensionless value on an
    interval scale, by default `MAGNITUDE_SCALE`.

    Raises
    ------
    QuantityValidationError
        If `scale` is not an interval scale.
    UnitValidationError
        If `scale` is not dimensionless.
    """
    __slots__ = ()

    def __init__(self, value: float, scale: Scale = None, *,
                 error: float = None, symbol: str = None):
        if scale is None:
            scale = MAGNITUDE_SCALE
        if not isinstance(scale, IntervalScale):
            raise QuantityValidationError(
                QuantityError.ILLEGAL_SCALE_TYPE,
                f"{type(scale).__name__} '{scale.symbol}'")
        if not scale.dimensions.is_dimensionless():
            raise UnitValidationError(UnitError.DIFFERENT_DIMENSIONALITY,
                                      f"Scale '{scale.symbol}'")

        super().__init__(value, scale=scale, error=error, symbol=symbol)
