from __future__ import annotations

import math
import operator
from numbers import Real

import numpy as np

from pymensura.logger import logger
from ._dims import Dimensions
from ._errors import (MeasurementError, MeasureValidationError,
                      MeasureError, ScaleValidationError, ScaleError,
                      UnitValidationError, UnitError)
from ._opts import get_unit_options
from ._display import format_measure
from ._scale import (Scale, NominalScale, OrdinalScale, IntervalScale,
                     RatioScale)
from ._unit import (Unit, ONE, UnitDivision, UnitExponentiation,
                    UnitMultiplication)


# ======================================================================

class Measure:
    """
    A value expressed either as an amount of a `Unit`, or as a point on
    a `Scale`, with an optional error.  For nominal and ordinal scales
    the value is a label.

    Measures are immutable.  Conversion and arithmetic always return new
    measures.

    Parameters
    ----------
    value : float or str
        Numeric value, or a label for a nominal or ordinal scale.
    unit : Unit, optional
        Unit of the value.  If neither `unit` nor `scale` are given the
        measure is dimensionless (`ONE`).
    scale : Scale, optional
        Scale of the value.  The unit is then the unit of the scale.
        Only one of `unit` or `scale` can be given.
    error : float, optional
        Error magnitude (must be > 0 if given).

    Raises
    ------
    MeasureValidationError
        If `error` is not positive.
    ScaleValidationError
        If a label is not part of the given nominal / ordinal scale, or a
        negative value is given on a ratio scale.

    Examples
    --------
    >>> from pymensura.units import METRE, SECOND, KILOMETRE, HOUR
    >>> v = Measure(10.0, METRE / SECOND)
    >>> print(v.convert(KILOMETRE / HOUR))
    36.0 km/h

    Measures on scales convert between scales:

    >>> from pymensura.units import CELSIUS_SCALE, FAHRENHEIT_SCALE
    >>> print(Measure(100.0, scale=CELSIUS_SCALE).convert(FAHRENHEIT_SCALE))
    212.0 °F

    Equality and ordering work across compatible units and scales, and
    are simply ``False`` when the measures can't be compared:

    >>> Measure(1.0, KILOMETRE) == Measure(1000.0, METRE)
    True
    >>> Measure(1.0, METRE) < Measure(1.0, SECOND)
    False
    >>> Measure(1.0, METRE) > Measure(1.0, SECOND)
    False
    """
    __slots__ = ('_value', '_label', '_error', '_unit', '_scale')
    __hash__ = None

    def __init__(self, value: float | str, unit: Unit = None, *,
                 scale: Scale = None, error: float = None):
        if unit is not None and scale is not None:
            raise TypeError("Only one of 'unit' or 'scale' can be given.")
        if error is not None and not error > 0:
            raise MeasureValidationError(MeasureError.NON_POSITIVE_ERROR,
                                         f"Got {error}")

        self._label = None
        if isinstance(scale, NominalScale):
            scale.index(value)  # Check label.
            self._label, value = value, math.nan
        elif isinstance(scale, RatioScale) and value < 0:
            raise ScaleValidationError(
                ScaleError.NEGATIVE_VALUE_IN_RATIO_SCALE,
                f"{value} on scale '{scale.symbol}'")

        self._value = float(value)
        self._error = None if error is None else float(error)
        self._scale = scale
        if scale is not None:
            self._unit = scale.unit
        else:
            self._unit = ONE if unit is None else unit

    @classmethod
    def _make(cls, value: float, unit: Unit, scale: Scale | None,
              error: float | None) -> Measure:
        # Used for results, where an error may have collapsed to zero.
        if error is not None and not error > 0:
            error = None
        if scale is not None:
            return cls(value, scale=scale, error=error)
        return cls(value, unit, error=error)

    # -- Properties ----------------------------------------------------

    @property
    def dimensions(self) -> Dimensions:
        return self._unit.dimensions

    @property
    def error(self) -> float | None:
        return self._error

    @property
    def label(self) -> str | None:
        """Label for measures on nominal / ordinal scales, otherwise
        ``None``."""
        return self._label

    @property
    def scalar_value(self) -> float:
        """Numeric value.  This is NaN for labels."""
        return self._value

    @property
    def scale(self) -> Scale | None:
        return self._scale

    @property
    def string_value(self) -> str:
        """The measure as a display string, e.g. ``'36.0 km/h'``."""
        return format_measure(self)

    @property
    def unit(self) -> Unit:
        return self._unit

    @property
    def uses_measurement_scale(self) -> bool:
        """``True`` if the measure is on an interval or ratio scale."""
        return self._scale is not None and self._scale.is_measurement_scale

    @property
    def uses_scale(self) -> bool:
        return self._scale is not None

    # -- Conversion ----------------------------------------------------

    def convert(self, target: Unit | Scale) -> Measure:
        """
        Convert this measure to a different unit or scale.

        Parameters
        ----------
        target : Unit or Scale
            Unit to convert to (only for measures not on a scale), or
            scale to convert to (only for measures on a scale).

        Returns
        -------
        Measure
            New measure in the target unit / on the target scale.  Any
            error is scaled by the conversion factor only.

        Raises
        ------
        UnitValidationError
            If the units have different dimensions or do not share a base
            unit, or if converting a plain measure to a scale.
        ScaleValidationError
            If the scales cannot be converted, or if converting a measure
            on a scale to a plain unit.
        """
        if isinstance(target, Scale):
            return self._convert_to_scale(target)
        if isinstance(target, Unit):
            return self._convert_to_unit(target)
        raise TypeError(f"Can't convert to {type(target).__name__}.")

    def _convert_to_unit(self, unit: Unit) -> Measure:
        # Dimensions and base units are checked before the scale.
        factor = self._unit.factor_to(unit)
        if self._scale is not None:
            raise ScaleValidationError(
                ScaleError.CANNOT_CONVERT_SCALE_TO_UNIT,
                f"'{self._scale.symbol}' -> '{unit.symbol}'")
        if unit is self._unit:
            return self

        return Measure._make(self._value * factor, unit, None,
                             _scaled_error(self._error, factor))

    def _convert_to_scale(self, scale: Scale) -> Measure:
        if self._scale is None:
            raise UnitValidationError(
                UnitError.CANNOT_CONVERT_UNIT_TO_SCALE,
                f"'{self._unit.symbol}' -> '{scale.symbol}'")
        if self._scale == scale:
            return self

        if not (self._scale.is_measurement_scale and
                scale.is_measurement_scale):
            raise ScaleValidationError(
                ScaleError.CANNOT_CONVERT_NOMINAL_OR_ORDINAL_SCALE,
                f"'{self._scale.symbol}' -> '{scale.symbol}'")

        ratio_scale = _ratio_scale_for(self._scale)
        if ratio_scale != _ratio_scale_for(scale):
            raise ScaleValidationError(
                ScaleError.NO_COMMON_RATIO_SCALE,
                f"'{self._scale.symbol}' -> '{scale.symbol}'")

        for unit in (self._unit, scale.unit):
            if unit.dimensions != ratio_scale.dimensions:
                raise ScaleValidationError(
                    ScaleError.DIFFERENT_DIMENSIONALITY,
                    f"'{unit.symbol}' on '{ratio_scale.symbol}'")
            if unit.base_unit != ratio_scale.unit.base_unit:
                raise UnitValidationError(
                    UnitError.NO_COMMON_BASE_UNIT,
                    f"'{unit.symbol}' on '{ratio_scale.symbol}'")

        if self._scale != ratio_scale and scale != ratio_scale:
            # Interval scales always convert via their ratio scale.
            logger.debug(f"Converting '{self._scale.symbol}' -> "
                         f"'{scale.symbol}' via '{ratio_scale.symbol}'.")
            return self._convert_to_scale(ratio_scale).convert(scale)

        if scale == ratio_scale:
            # Interval -> ratio.
            factor = self._unit.factor_to(scale.unit)
            value = (self._value - self._scale.offset_value) * factor
        else:
            # Ratio -> interval.
            factor = self._unit.factor_to(scale.unit)
            value = self._value * factor + scale.offset_value

        return Measure._make(value, scale.unit, scale,
                             _scaled_error(self._error, factor))

    # -- Comparison Operators ------------------------------------------

    def __eq__(self, rhs) -> bool:
        if not isinstance(rhs, Measure):
            return NotImplemented
        try:
            return self._equals(rhs)
        except MeasurementError:
            return False

    def __ne__(self, rhs) -> bool:
        eq = self.__eq__(rhs)
        return eq if eq is NotImplemented else not eq

    def __lt__(self, rhs) -> bool:
        return self._order(rhs, operator.lt)

    def __le__(self, rhs) -> bool:
        return self._order(rhs, operator.le)

    def __gt__(self, rhs) -> bool:
        return self._order(rhs, operator.gt)

    def __ge__(self, rhs) -> bool:
        return self._order(rhs, operator.ge)

    def _equals(self, rhs: Measure) -> bool:
        if (self._scale is None) != (rhs._scale is None):
            return False

        if self._scale is not None:
            rhs = rhs.convert(self._scale)
            if self._label is not None:
                return self._label == rhs._label
        elif self._unit != rhs._unit:
            rhs = rhs.convert(self._unit)

        return _values_close(self._value, rhs._value)

    def _order(self, rhs, op) -> bool:
        if not isinstance(rhs, Measure):
            return NotImplemented

        # Only labels on the same ordinal scale are ordered.
        if self._label is not None or rhs._label is not None:
            if (isinstance(self._scale, OrdinalScale) and
                    self._scale == rhs._scale):
                return op(self._scale.index(self._label),
                          rhs._scale.index(rhs._label))
            return False

        if (self._scale is None) != (rhs._scale is None):
            return False
        try:
            rhs = rhs.convert(self._scale or self._unit)
        except MeasurementError:
            return False

        return op(self._value, rhs._value)

    # -- Arithmetic Operators ------------------------------------------

    def __add__(self, rhs) -> Measure:
        """
        Add `rhs` to this measure, giving a result in the same unit /
        scale as this measure.  `rhs` can't be on a scale, i.e. a
        temperature difference can be added to a temperature (``10 °C
        + 5 K = 15 °C``) but two temperatures can't be added.

        Raises
        ------
        ScaleValidationError
            If `rhs` is on a scale, or this measure is on a nominal or
            ordinal scale.
        UnitValidationError
            If the dimensions of the units are different or they do not
            share a base unit.
        """
        rhs = _as_measure(rhs)
        if rhs is NotImplemented:
            return NotImplemented

        value, error = self._add_terms(rhs)
        return Measure._make(self._value + value, self._unit, self._scale,
                             error)

    def __radd__(self, lhs) -> Measure:
        lhs = _as_measure(lhs)
        if lhs is NotImplemented:
            return NotImplemented
        return lhs + self

    def __sub__(self, rhs) -> Measure:
        """
        Subtract `rhs` from this measure following the same rules as
        ``__add__``.  In addition, if both measures are on anchored
        interval / ratio scales the result is their difference on the
        ratio scale, as a plain (non-scale) measure: ``10 °C - 5 °C =
        5 K``.  Two measures on the same unanchored interval scale give
        their difference in the unit of the scale.
        """
        rhs = _as_measure(rhs)
        if rhs is NotImplemented:
            return NotImplemented

        if self.uses_measurement_scale and rhs.uses_measurement_scale:
            return self._scale_difference(rhs)

        value, error = self._add_terms(rhs)
        return Measure._make(self._value - value, self._unit, self._scale,
                             error)

    def __rsub__(self, lhs) -> Measure:
        lhs = _as_measure(lhs)
        if lhs is NotImplemented:
            return NotImplemented
        return lhs - self

    def __mul__(self, rhs) -> Measure:
        """
        Multiplying by a plain number keeps the unit.  Multiplying two
        measures gives a product unit.  Scale information is discarded.
        """
        self._check_arithmetic()
        if isinstance(rhs, Real):
            return Measure._make(self._value * rhs, self._unit, None,
                                 _scaled_error(self._error, rhs))
        if not isinstance(rhs, Measure):
            return NotImplemented

        rhs._check_arithmetic()
        error = _hypot_error(rhs._value * _nz(self._error),
                             self._value * _nz(rhs._error),
                             self._error, rhs._error)
        return Measure._make(self._value * rhs._value,
                             UnitMultiplication(self._unit, rhs._unit),
                             None, error)

    def __rmul__(self, lhs) -> Measure:
        if isinstance(lhs, Real):
            return self * lhs
        return NotImplemented

    def __truediv__(self, rhs) -> Measure:
        """
        Dividing by a plain number keeps the unit.  Dividing two measures
        gives a quotient unit.  Scale information is discarded.
        """
        self._check_arithmetic()
        if isinstance(rhs, Real):
            return Measure._make(self._value / rhs, self._unit, None,
                                 _scaled_error(self._error, 1 / rhs))
        if not isinstance(rhs, Measure):
            return NotImplemented

        rhs._check_arithmetic()
        error = _hypot_error(_nz(self._error) / rhs._value,
                             self._value * _nz(rhs._error) / rhs._value ** 2,
                             self._error, rhs._error)
        return Measure._make(self._value / rhs._value,
                             UnitDivision(self._unit, rhs._unit), None,
                             error)

    def __rtruediv__(self, lhs) -> Measure:
        """Dividing a plain number by a measure gives the reciprocal
        unit."""
        if not isinstance(lhs, Real):
            return NotImplemented
        self._check_arithmetic()
        error = None
        if self._error is not None:
            error = abs(lhs * self._error / self._value ** 2)
        return Measure._make(lhs / self._value,
                             UnitDivision(ONE, self._unit), None, error)

    def __pow__(self, exponent: float) -> Measure:
        """
        Raise the measure to a (possibly fractional) power, giving an
        exponentiated unit.  The relative error is multiplied by the
        exponent.  Results that are not real numbers (e.g. a fractional
        power of a negative value) are NaN, and a zero value raised to a
        negative power (or the error of a fractional power of zero) is
        infinite.
        """
        if not isinstance(exponent, Real):
            return NotImplemented
        self._check_arithmetic()
        with np.errstate(invalid='ignore', divide='ignore'):
            value = float(np.power(self._value, exponent))
            error = None
            if self._error is not None:
                error = abs(float(exponent * np.power(
                    self._value, exponent - 1) * self._error))
        return Measure._make(value, UnitExponentiation(self._unit, exponent),
                             None, error)

    def __rpow__(self, base: float) -> Measure:
        """Raise a plain number to a dimensionless measure."""
        if not isinstance(base, Real):
            return NotImplemented
        from ._math import power
        return power(base, self)

    # -- Unary Operators -----------------------------------------------

    def __abs__(self) -> Measure:
        self._check_arithmetic()
        return Measure._make(abs(self._value), self._unit, self._scale,
                             self._error)

    def __float__(self) -> float:
        return self._value

    def __neg__(self) -> Measure:
        self._check_arithmetic()
        return Measure._make(-self._value, self._unit, self._scale,
                             self._error)

    def __pos__(self) -> Measure:
        return self

    # -- String Magic Methods ------------------------------------------

    def __format__(self, format_spec: str) -> str:
        """The format spec is applied to the numeric value, e.g.
        ``f"{m:.2f}"`` gives ``'36.00 km/h'``."""
        return format_measure(self, format_spec or None)

    def __repr__(self) -> str:
        if self._label is not None:
            args = f"{self._label!r}, scale={self._scale!r}"
        elif self._scale is not None:
            args = f"{self._value!r}, scale={self._scale!r}"
        else:
            args = f"{self._value!r}, {self._unit!r}"
        if self._error is not None:
            args += f", error={self._error!r}"
        return f"Measure({args})"

    def __str__(self) -> str:
        return self.string_value

    # -- Private Methods -----------------------------------------------

    def _add_terms(self, rhs: Measure) -> tuple[float, float | None]:
        """
        Check that `rhs` can be added to / subtracted from this measure,
        returning its value in the unit of this measure and the combined
        error.
        """
        if rhs._scale is not None:
            raise ScaleValidationError(
                ScaleError.CANNOT_USE_SCALE_IN_ARITHMETIC,
                f"'{rhs._scale.symbol}' on right hand side")
        self._check_arithmetic()

        rhs = rhs.convert(self._unit)
        error = _hypot_error(_nz(self._error), _nz(rhs._error),
                             self._error, rhs._error)
        return rhs._value, error

    def _check_arithmetic(self):
        if self._scale is not None and not self._scale.is_measurement_scale:
            raise ScaleValidationError(
                ScaleError.CANNOT_USE_ARITHMETIC_ON_NON_MEASUREMENT_SCALE,
                f"'{self._scale.symbol}'")

    def _scale_difference(self, rhs: Measure) -> Measure:
        """Difference between two measures on interval / ratio scales."""
        lhs = self
        try:
            ratio_scale = _ratio_scale_for(self._scale)
            lhs, rhs = self.convert(ratio_scale), rhs.convert(ratio_scale)
        except ScaleValidationError as e:
            # Unanchored scales can only be differenced with themselves.
            if self._scale != rhs._scale:
                raise ScaleValidationError(
                    ScaleError.CANNOT_USE_SCALE_IN_ARITHMETIC,
                    f"'{self._scale.symbol}' - '{rhs._scale.symbol}'"
                ) from e

        error = _hypot_error(_nz(lhs._error), _nz(rhs._error),
                             lhs._error, rhs._error)
        return Measure._make(lhs._value - rhs._value, lhs._unit, None,
                             error)


# ----------------------------------------------------------------------

def convert(value: float, from_units: Unit | Scale,
            to_units: Unit | Scale) -> float:
    """
    Convert a plain number between units, or between scales.

    Examples
    --------
    >>> from pymensura.units import METRE, KILOMETRE
    >>> convert(1500.0, METRE, KILOMETRE)
    1.5
    """
    if isinstance(from_units, Scale):
        measure = Measure(value, scale=from_units)
    else:
        measure = Measure(value, from_units)
    return measure.convert(to_units).scalar_value


# ----------------------------------------------------------------------

def _as_measure(x) -> Measure:
    """Plain numbers are treated as dimensionless measures."""
    if isinstance(x, Measure):
        return x
    if isinstance(x, Real):
        return Measure(x)
    return NotImplemented


def _hypot_error(a: float, b: float, *errors: float | None
                 ) -> float | None:
    # Result has no error if none of the operands do.
    if all(e is None for e in errors):
        return None
    return math.hypot(a, b)


def _nz(error: float | None) -> float:
    return 0.0 if error is None else error


def _ratio_scale_for(scale: Scale) -> RatioScale:
    """
    Returns the ratio scale underlying `scale`.

    Raises
    ------
    ScaleValidationError
        If `scale` is an interval scale not anchored to a ratio scale.
    """
    if isinstance(scale, RatioScale):
        return scale
    if isinstance(scale, IntervalScale) and scale.ratio_scale is not None:
        return scale.ratio_scale
    raise ScaleValidationError(ScaleError.NOT_LINKED_TO_RATIO_SCALE,
                               f"'{scale.symbol}'")


def _scaled_error(error: float | None, factor: float) -> float | None:
    return None if error is None else error * abs(factor)


def _values_close(a: float, b: float) -> bool:
    tol = get_unit_options().factor_rel_tol
    return math.isclose(a, b, rel_tol=tol, abs_tol=tol)
