import math

from ._dims import Dimension
from ._measure import Measure
from ._registry import (define_scale, define_unit, get_scale, get_unit,
                        resolve_all)
from ._scale import IntervalScale, RatioScale
from ._unit import (ONE, BaseUnit, CompoundUnit, EquivalentUnit,
                    PrefixedUnit, UnitMultiple, GIGA, MEGA, KILO, HECTO,
                    DECA, DECI, CENTI, MILLI, MICRO, NANO)

# == SI Base Units =====================================================

define_unit('one', lambda: ONE)
define_unit('second', lambda: BaseUnit('s', Dimension.TIME))
define_unit('metre', lambda: BaseUnit('m', Dimension.LENGTH))
define_unit('kelvin', lambda: BaseUnit('K', Dimension.TEMPERATURE))
define_unit('mole', lambda: BaseUnit('mol', Dimension.AMOUNT_OF_SUBSTANCE))
define_unit('ampere', lambda: BaseUnit('A', Dimension.ELECTRIC_CURRENT))
define_unit('candela', lambda: BaseUnit('cd', Dimension.LUMINOUS_INTENSITY))

# The kilogram is the base unit of mass, not the gram.  The gram is
# made relative to the kilogram when the kilogram is constructed, so
# the gram is always obtained via the kilogram.
define_unit('kilogram', lambda: PrefixedUnit(
    KILO, BaseUnit('g', Dimension.MASS), is_base_unit=True))
define_unit('gram', lambda: get_unit('kilogram').unit)

# == SI Derived Units ==================================================

# -- Intermediate Units ------------------------------------------------

define_unit('per_second', lambda: ONE / get_unit('second'))
define_unit('metre_per_metre',
            lambda: get_unit('metre') / get_unit('metre'))
define_unit('square_metre', lambda: get_unit('metre') ** 2)
define_unit('cubic_metre', lambda: get_unit('metre') ** 3)
define_unit('square_metre_per_square_metre',
            lambda: get_unit('square_metre') / get_unit('square_metre'))
define_unit('metre_per_second',
            lambda: get_unit('metre') / get_unit('second'))
define_unit('metre_per_second_squared',
            lambda: get_unit('metre') / get_unit('second') ** 2)
define_unit('kilogram_metre_per_second_squared',
            lambda: get_unit('kilogram') *
            get_unit('metre_per_second_squared'))

# -- Named Units -------------------------------------------------------

define_unit('hertz', lambda: EquivalentUnit('Hz', get_unit('per_second')))
define_unit('radian',
            lambda: EquivalentUnit('rad', get_unit('metre_per_metre')))
define_unit('steradian', lambda: EquivalentUnit(
    'sr', get_unit('square_metre_per_square_metre')))
define_unit('newton', lambda: EquivalentUnit(
    'N', get_unit('kilogram_metre_per_second_squared')))
define_unit('pascal', lambda: EquivalentUnit(
    'Pa', get_unit('newton') / get_unit('square_metre')))
define_unit('joule', lambda: EquivalentUnit(
    'J', get_unit('newton') * get_unit('metre')))
define_unit('watt', lambda: EquivalentUnit(
    'W', get_unit('joule') / get_unit('second')))
define_unit('coulomb', lambda: EquivalentUnit(
    'C', get_unit('second') * get_unit('ampere')))
define_unit('volt', lambda: EquivalentUnit(
    'V', get_unit('watt') / get_unit('ampere')))
define_unit('farad', lambda: EquivalentUnit(
    'F', get_unit('coulomb') / get_unit('volt')))
define_unit('ohm', lambda: EquivalentUnit(
    'Ω', get_unit('volt') / get_unit('ampere')))
define_unit('siemens', lambda: EquivalentUnit(
    'S', get_unit('ampere') / get_unit('volt')))
define_unit('weber', lambda: EquivalentUnit(
    'Wb', get_unit('volt') * get_unit('second')))
define_unit('tesla', lambda: EquivalentUnit(
    'T', get_unit('weber') / get_unit('square_metre')))
define_unit('henry', lambda: EquivalentUnit(
    'H', get_unit('weber') / get_unit('ampere')))
define_unit('degree_celsius',
            lambda: EquivalentUnit('°C', get_unit('kelvin')))
define_unit('lumen', lambda: EquivalentUnit(
    'lm', get_unit('candela') * get_unit('steradian')))
define_unit('lux', lambda: EquivalentUnit(
    'lx', get_unit('lumen') / get_unit('square_metre')))
define_unit('becquerel',
            lambda: EquivalentUnit('Bq', get_unit('per_second')))
define_unit('gray', lambda: EquivalentUnit(
    'Gy', get_unit('joule') / get_unit('kilogram')))
define_unit('sievert', lambda: EquivalentUnit(
    'Sv', get_unit('joule') / get_unit('kilogram')))
define_unit('katal', lambda: EquivalentUnit(
    'kat', get_unit('mole') / get_unit('second')))

# -- Prefixed Length Units ---------------------------------------------

for _name, _prefix in (('kilometre', KILO), ('hectometre', HECTO),
                       ('decametre', DECA), ('decimetre', DECI),
                       ('centimetre', CENTI), ('millimetre', MILLI),
                       ('micrometre', MICRO), ('nanometre', NANO)):
    define_unit(_name, lambda p=_prefix: PrefixedUnit(p, get_unit('metre')))

# == Time ==============================================================

define_unit('minute', lambda: UnitMultiple(60, get_unit('second'), 'min'))
define_unit('hour', lambda: UnitMultiple(3600, get_unit('second'), 'h'))
define_unit('day', lambda: UnitMultiple(86400, get_unit('second'), 'd'))
define_unit('week', lambda: UnitMultiple(604800, get_unit('second'), 'wk'))
define_unit('sidereal_year',
            lambda: UnitMultiple(365.256363004, get_unit('day'), 'yr'))
define_unit('kilometre_per_hour',
            lambda: get_unit('kilometre') / get_unit('hour'))

# == Angles ============================================================

define_unit('degree',
            lambda: UnitMultiple(math.pi / 180, get_unit('radian'), '°'))
define_unit('arcminute',
            lambda: UnitMultiple(1 / 60, get_unit('degree'), "'"))
define_unit('arcsecond',
            lambda: UnitMultiple(1 / 3600, get_unit('degree'), '"'))
define_unit('milliarcsecond',
            lambda: PrefixedUnit(MILLI, get_unit('arcsecond'), 'mas'))
define_unit('microarcsecond',
            lambda: PrefixedUnit(MICRO, get_unit('arcsecond'), 'μas'))

# Hour angles, as used for right ascension (24h = 360°).
define_unit('angle_hour',
            lambda: UnitMultiple(15, get_unit('degree'), 'h'))
define_unit('angle_minute',
            lambda: UnitMultiple(1 / 60, get_unit('angle_hour'), 'm'))
define_unit('angle_second',
            lambda: UnitMultiple(1 / 3600, get_unit('angle_hour'), 's'))

# -- Compound Angles ---------------------------------------------------

define_unit('degree_arcminute_arcsecond', lambda: CompoundUnit(
    [get_unit('degree'), get_unit('arcminute'), get_unit('arcsecond')],
    extra_error_units=[get_unit('milliarcsecond'),
                       get_unit('microarcsecond')]))
define_unit('signed_degree_arcminute_arcsecond', lambda: CompoundUnit(
    [get_unit('degree'), get_unit('arcminute'), get_unit('arcsecond')],
    display_sign=True,
    extra_error_units=[get_unit('milliarcsecond'),
                       get_unit('microarcsecond')]))
define_unit('hour_minute_second', lambda: CompoundUnit(
    [get_unit('angle_hour'), get_unit('angle_minute'),
     get_unit('angle_second')]))

# == Astronomy =========================================================

define_unit('parsec', lambda: UnitMultiple(
    30856775714409184, get_unit('metre'), 'pc'))
define_unit('kiloparsec', lambda: PrefixedUnit(KILO, get_unit('parsec')))
define_unit('megaparsec', lambda: PrefixedUnit(MEGA, get_unit('parsec')))
define_unit('gigaparsec', lambda: PrefixedUnit(GIGA, get_unit('parsec')))
define_unit('light_year', lambda: UnitMultiple(
    9460730472580800, get_unit('metre'), 'ly'))
define_unit('light_second', lambda: UnitMultiple(
    299792458, get_unit('metre'), 'lsec'))
define_unit('light_minute', lambda: UnitMultiple(
    60, get_unit('light_second'), 'lmin'))
define_unit('light_hour', lambda: UnitMultiple(
    3600, get_unit('light_second'), 'lhr'))
define_unit('light_day', lambda: UnitMultiple(
    86400, get_unit('light_second'), 'ld'))
define_unit('light_week', lambda: UnitMultiple(
    7, get_unit('light_day'), 'lw'))
define_unit('astronomical_unit', lambda: UnitMultiple(
    149597870700, get_unit('metre'), 'au'))

# Astronomical magnitudes have no underlying ratio scale.
define_unit('magnitude', lambda: EquivalentUnit('mag', ONE))
define_scale('magnitude', lambda: IntervalScale(get_unit('magnitude')))

# == Temperature =======================================================

define_unit('degree_fahrenheit',
            lambda: UnitMultiple(5 / 9, get_unit('kelvin'), '°F'))
define_unit('degree_reaumur',
            lambda: UnitMultiple(5 / 4, get_unit('kelvin'), '°Ré'))

define_scale('kelvin', lambda: RatioScale(get_unit('kelvin')))


def _offset_scale(unit_name: str, offset: float) -> IntervalScale:
    """Temperature scale where 0 K is at `offset`."""
    unit = get_unit(unit_name)
    return IntervalScale(unit, ratio_scale=get_scale('kelvin'),
                         offset=Measure(offset, unit))


define_scale('celsius', lambda: _offset_scale('degree_celsius', -273.15))
define_scale('fahrenheit',
             lambda: _offset_scale('degree_fahrenheit', -459.67))
define_scale('reaumur', lambda: _offset_scale('degree_reaumur', -218.52))

# ======================================================================

resolve_all()

# -- Unit Constants ----------------------------------------------------

SECOND = get_unit('second')
METRE = get_unit('metre')
GRAM = get_unit('gram')
KILOGRAM = get_unit('kilogram')
KELVIN = get_unit('kelvin')
MOLE = get_unit('mole')
AMPERE = get_unit('ampere')
CANDELA = get_unit('candela')

HERTZ = get_unit('hertz')
RADIAN = get_unit('radian')
STERADIAN = get_unit('steradian')
NEWTON = get_unit('newton')
PASCAL = get_unit('pascal')
JOULE = get_unit('joule')
WATT = get_unit('watt')
COULOMB = get_unit('coulomb')
VOLT = get_unit('volt')
FARAD = get_unit('farad')
OHM = get_unit('ohm')
SIEMENS = get_unit('siemens')
WEBER = get_unit('weber')
TESLA = get_unit('tesla')
HENRY = get_unit('henry')
DEGREE_CELSIUS = get_unit('degree_celsius')
LUMEN = get_unit('lumen')
LUX = get_unit('lux')
BECQUEREL = get_unit('becquerel')
GRAY = get_unit('gray')
SIEVERT = get_unit('sievert')
KATAL = get_unit('katal')

KILOMETRE = get_unit('kilometre')
CENTIMETRE = get_unit('centimetre')
MILLIMETRE = get_unit('millimetre')

MINUTE = get_unit('minute')
HOUR = get_unit('hour')
DAY = get_unit('day')
WEEK = get_unit('week')
SIDEREAL_YEAR = get_unit('sidereal_year')

DEGREE = get_unit('degree')
ARCMINUTE = get_unit('arcminute')
ARCSECOND = get_unit('arcsecond')
MILLIARCSECOND = get_unit('milliarcsecond')
MICROARCSECOND = get_unit('microarcsecond')
ANGLE_HOUR = get_unit('angle_hour')
ANGLE_MINUTE = get_unit('angle_minute')
ANGLE_SECOND = get_unit('angle_second')
DEGREE_ARCMINUTE_ARCSECOND = get_unit('degree_arcminute_arcsecond')
SIGNED_DEGREE_ARCMINUTE_ARCSECOND = get_unit(
    'signed_degree_arcminute_arcsecond')
HOUR_MINUTE_SECOND = get_unit('hour_minute_second')

PARSEC = get_unit('parsec')
LIGHT_YEAR = get_unit('light_year')
ASTRONOMICAL_UNIT = get_unit('astronomical_unit')
MAGNITUDE = get_unit('magnitude')

DEGREE_FAHRENHEIT = get_unit('degree_fahrenheit')
DEGREE_REAUMUR = get_unit('degree_reaumur')

# -- Scale Constants ---------------------------------------------------

KELVIN_SCALE = get_scale('kelvin')
CELSIUS_SCALE = get_scale('celsius')
FAHRENHEIT_SCALE = get_scale('fahrenheit')
REAUMUR_SCALE = get_scale('reaumur')
MAGNITUDE_SCALE = get_scale('magnitude')

__all__ = [name for name in list(globals()) if name.isupper()]
