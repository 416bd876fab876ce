"""
Mathematical functions of measures.  Results are dimensionless except
where noted.  Errors are not carried through these functions, except
for `power` and `sqrt`.
"""
from __future__ import annotations

from numbers import Real

import numpy as np

from ._defs import RADIAN
from ._errors import UnitValidationError, UnitError
from ._measure import Measure
from ._unit import ONE


# ======================================================================

def power(x: Measure | float, exponent: Measure | float) -> Measure:
    """
    Raise a measure to a plain exponent (giving an exponentiated unit),
    or raise a plain number to a dimensionless measure (giving a
    dimensionless result).

    Examples
    --------
    >>> from pymensura.units import METRE
    >>> print(power(Measure(3.0, METRE), 2))
    9.0 m²
    >>> print(power(2.0, Measure(3.0)))
    8.0
    """
    if isinstance(x, Measure) and isinstance(exponent, Real):
        return x ** exponent

    if isinstance(x, Real) and isinstance(exponent, Measure):
        exponent = _dimensionless_value(exponent)
        return Measure(float(np.power(x, exponent)))

    raise TypeError(f"Unsupported operands for power: "
                    f"{type(x).__name__}, {type(exponent).__name__}")


def sqrt(x: Measure) -> Measure:
    """Square root, giving a unit with exponent 0.5 (e.g. m² -> m)."""
    return x ** 0.5


# -- Logarithms and Exponentials ---------------------------------------

# These act on the scalar value alone, i.e. the measure is taken to be
# divided by its own unit.

def exp(x: Measure) -> Measure:
    return _scalar_function(np.exp, x)


def log(x: Measure) -> Measure:
    """Natural logarithm."""
    return _scalar_function(np.log, x)


def log10(x: Measure) -> Measure:
    return _scalar_function(np.log10, x)


def log2(x: Measure) -> Measure:
    return _scalar_function(np.log2, x)


# -- Trigonometric Functions -------------------------------------------

def cos(x: Measure) -> Measure:
    return _trig_function(np.cos, x)


def sin(x: Measure) -> Measure:
    """
    Sine of an angle measure.

    Raises
    ------
    UnitValidationError
        If `x` does not have angle (dimensionless) dimensions.

    Examples
    --------
    >>> from pymensura.units import DEGREE
    >>> print(sin(Measure(30.0, DEGREE)))
    0.5
    """
    return _trig_function(np.sin, x)


def tan(x: Measure) -> Measure:
    return _trig_function(np.tan, x)


def acos(x: Measure) -> Measure:
    return _inverse_trig_function(np.arccos, x)


def asin(x: Measure) -> Measure:
    """
    Inverse sine of a dimensionless measure, giving an angle in radians.
    """
    return _inverse_trig_function(np.arcsin, x)


def atan(x: Measure) -> Measure:
    return _inverse_trig_function(np.arctan, x)


def atan2(y: Measure, x: Measure) -> Measure:
    """
    Angle (in radians) of the point (`x`, `y`).  Both measures must have
    the same dimensions.
    """
    x = x.convert(y.unit)
    return Measure(float(np.arctan2(y.scalar_value, x.scalar_value)),
                   RADIAN)


# ----------------------------------------------------------------------

def _dimensionless_value(x: Measure) -> float:
    if not x.dimensions.is_dimensionless():
        raise UnitValidationError(UnitError.DIFFERENT_DIMENSIONALITY,
                                  f"'{x.unit.symbol}' is not dimensionless")
    return x.convert(ONE).scalar_value


def _inverse_trig_function(func, x: Measure) -> Measure:
    return Measure(float(func(_dimensionless_value(x))), RADIAN)


def _scalar_function(func, x: Measure) -> Measure:
    x._check_arithmetic()
    return Measure(float(func(x.scalar_value)))


def _trig_function(func, x: Measure) -> Measure:
    if x.dimensions != RADIAN.dimensions:
        raise UnitValidationError(UnitError.DIFFERENT_DIMENSIONALITY,
                                  f"'{x.unit.symbol}' is not an angle")
    return Measure(float(func(x.convert(RADIAN).scalar_value)))
