"""
Units (:mod:`pymensura.units`)
==============================

.. currentmodule:: pymensura.units

Dimensions, units, scales and measures.

Examples
--------

A ``Measure`` is a value together with a ``Unit``.  Predefined units are
available as constants, or by name using ``get_unit()``.  Derived units
are built using normal arithmetic operators:

>>> v = Measure(10.0, METRE / SECOND)
>>> print(v.convert(KILOMETRE / HOUR))
36.0 km/h
>>> get_unit('kilometre_per_hour') == KILOMETRE / HOUR
True

Units are equal when they are built from the same base units with the
same conversion factor, no matter how they were constructed.  Named
units compare equal to their definition:

>>> NEWTON == KILOGRAM * METRE / SECOND ** 2
True

Measures can only be converted, added or subtracted when they have the
same dimensions:

>>> Measure(1.0, METRE).convert(SECOND)  # doctest: +IGNORE_EXCEPTION_DETAIL
Traceback (most recent call last):
...
pymensura.units._errors.UnitValidationError: different dimensionality

Multiplication, division and powers give derived units.  Fractional
powers are allowed:

>>> area = Measure(4.0, METRE) * Measure(2.0, METRE)
>>> print(area)
8.0 m·m
>>> print(sqrt(Measure(16.0, METRE ** 2)))
4.0 m

The ``convert`` function can be used with plain numbers:

>>> convert(1.5, KILOMETRE, METRE)
1500.0

Scales
------

A measure can instead be a point on a ``Scale``.  Interval scales such
as Celsius and Fahrenheit have an arbitrary zero and are anchored to a
ratio scale (here Kelvin).  Conversions between interval scales always
go via the ratio scale:

>>> t = Measure(100.0, scale=REAUMUR_SCALE)
>>> print(t.convert(FAHRENHEIT_SCALE))
257.0 °F

A difference (in a plain unit) can be added to a point on a scale, but
two points can't be added.  Subtracting two points on anchored scales
gives their difference in the unit of the ratio scale:

>>> print(Measure(10.0, scale=CELSIUS_SCALE) + Measure(5.0, KELVIN))
15.0 °C
>>> print(Measure(10.0, scale=CELSIUS_SCALE) -
...       Measure(5.0, scale=CELSIUS_SCALE))
5.0 K

Nominal and ordinal scales hold labels:

>>> grades = OrdinalScale(['low', 'medium', 'high'])
>>> Measure('low', scale=grades) < Measure('high', scale=grades)
True

Comparisons between measures that can't be converted are ``False``
(they do not raise an exception):

>>> Measure(1.0, METRE) < Measure(1.0, KILOGRAM)
False
>>> Measure(1.0, METRE) > Measure(1.0, KILOGRAM)
False

Display
-------

Measures with an error show the value to the same precision as the
error.  Compound units show each part:

>>> print(Measure(1.2345, METRE, error=0.02))
1.23 ± 0.02 m
>>> print(Measure(-32.5, DEGREE).convert(DEGREE_ARCMINUTE_ARCSECOND))
-32° 30' 00"
"""

from ._opts import (UnitOptions, get_unit_options, set_unit_options,
                    unit_options)
from ._errors import (MeasurementError, UnitValidationError, UnitError,
                      ScaleValidationError, ScaleError,
                      MeasureValidationError, MeasureError,
                      QuantityValidationError, QuantityError)
from ._dims import Dimension, Dimensions, DIMENSIONLESS
from ._unit import (Unit, BaseUnit, PrefixedUnit, UnitMultiple,
                    EquivalentUnit, UnitMultiplication, UnitDivision,
                    UnitExponentiation, CompoundUnit, Prefix, ONE,
                    YOTTA, ZETTA, EXA, PETA, TERA, GIGA, MEGA, KILO, HECTO,
                    DECA, DECI, CENTI, MILLI, MICRO, NANO, PICO, FEMTO,
                    ATTO, ZEPTO, YOCTO)
from ._scale import (Scale, NominalScale, OrdinalScale, IntervalScale,
                     RatioScale)
from ._measure import Measure, convert
from ._display import (ComponentType, Baseline, DisplayComponent,
                       format_measure, measure_components,
                       render_components, unit_components)
from ._registry import (DefinitionRegistry, define_scale, define_unit,
                        get_scale, get_unit, known_scales, known_units,
                        resolve_all)
from ._defs import *  # Sets up standard units and scales.
from ._math import (power, sqrt, exp, log, log10, log2, sin, cos, tan,
                    asin, acos, atan, atan2)
