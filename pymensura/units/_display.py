from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from ._opts import get_unit_options
from ._unit import (Unit, CompoundUnit, PrefixedUnit, UnitDivision,
                    UnitExponentiation, UnitMultiplication, exponent_str,
                    to_ucode_super)

if TYPE_CHECKING:
    from ._measure import Measure


# ======================================================================

class ComponentType(Enum):
    SIGN = 'sign'
    VALUE = 'value'
    SPACE = 'space'
    PREFIX = 'prefix'
    SYMBOL = 'symbol'
    MULTIPLIER = 'multiplier'
    DIVIDER = 'divider'
    EXPONENT = 'exponent'
    PLUS_MINUS = 'plus_minus'
    ERROR = 'error'
    LABEL = 'label'


class Baseline(Enum):
    NORMAL = 'normal'
    SUPERSCRIPT = 'superscript'


@dataclass(frozen=True)
class DisplayComponent:
    """
    One piece of a displayed measure or unit.  Applications that need
    rich text (e.g. HTML) can render each component type separately;
    `render_components` gives plain text.
    """
    type: ComponentType
    text: str
    baseline: Baseline = Baseline.NORMAL


_SPACE = DisplayComponent(ComponentType.SPACE, ' ')

# Symbols written directly after the value, e.g. 12°.
_ATTACHED_SYMBOLS = frozenset(('°', "'", '"'))
_ATTACHED_ANGLE_SYMBOLS = frozenset(('h', 'm', 's'))


# ----------------------------------------------------------------------

def format_measure(measure: Measure, fmt: str = None) -> str:
    """
    Returns the measure as a plain string.

    Parameters
    ----------
    measure : Measure
        Measure to display.
    fmt : str, optional
        Format spec applied to the numeric value, if the measure has no
        error.  If not given, the value is shown to 12 significant
        figures (hiding floating point noise).

    Examples
    --------
    >>> from pymensura.units import Measure, METRE, SECOND
    >>> format_measure(Measure(9.81, METRE / SECOND ** 2))
    '9.81 m/s²'
    >>> format_measure(Measure(36.123, METRE, error=0.05))
    '36.12 ± 0.05 m'
    >>> format_measure(Measure(2.0 / 3.0, METRE), '.3f')
    '0.667 m'
    """
    return render_components(measure_components(measure, fmt))


def render_components(components: list[DisplayComponent]) -> str:
    """Join display components as plain text.  Superscripts follow
    ``UnitOptions.unicode_str``."""
    unicode_str = get_unit_options().unicode_str
    text = ''
    for comp in components:
        if comp.baseline == Baseline.SUPERSCRIPT:
            text += (to_ucode_super(comp.text) if unicode_str else
                     '^' + comp.text)
        else:
            text += comp.text
    return text


# ----------------------------------------------------------------------

def measure_components(measure: Measure, fmt: str = None
                       ) -> list[DisplayComponent]:
    """
    Split a measure into display components: sign, value, error and
    unit.  Measures on nominal / ordinal scales give only their label.
    Compound units give each partial value with its unit.
    """
    if measure.label is not None:
        return [DisplayComponent(ComponentType.LABEL, str(measure.label))]
    if isinstance(measure.unit, CompoundUnit):
        return _compound_components(measure, measure.unit)

    value, error = measure.scalar_value, measure.error
    comps = []
    if value < 0:
        comps.append(DisplayComponent(ComponentType.SIGN, '-'))

    if error is not None:
        if math.isfinite(error):
            decimals = _error_decimals(error)
            value_str = _fixed_str(abs(value), decimals)
            error_str = _fixed_str(error, decimals)
        else:
            value_str, error_str = _plain_str(abs(value)), str(error)
        comps += [DisplayComponent(ComponentType.VALUE, value_str),
                  _SPACE, DisplayComponent(ComponentType.PLUS_MINUS, '±'),
                  _SPACE, DisplayComponent(ComponentType.ERROR, error_str)]
    elif fmt is not None:
        comps.append(DisplayComponent(ComponentType.VALUE,
                                      format(abs(value), fmt)))
    else:
        comps.append(DisplayComponent(ComponentType.VALUE,
                                      _plain_str(abs(value))))

    unit_comps = unit_components(measure.unit)
    if unit_comps and not _is_attached(measure.unit):
        comps.append(_SPACE)
    return comps + unit_comps


def unit_components(unit: Unit) -> list[DisplayComponent]:
    """
    Split a unit symbol into display components, following the
    construction of the unit.

    Examples
    --------
    >>> from pymensura.units import KILOMETRE, SECOND
    >>> [c.type.name for c in unit_components(KILOMETRE / SECOND ** 2)]
    ['PREFIX', 'SYMBOL', 'DIVIDER', 'SYMBOL', 'EXPONENT']
    """
    if isinstance(unit, PrefixedUnit):
        if unit.symbol == unit.prefix.symbol + unit.unit.symbol:
            return ([DisplayComponent(ComponentType.PREFIX,
                                      unit.prefix.symbol)] +
                    unit_components(unit.unit))

    elif isinstance(unit, UnitMultiplication):
        lhs = unit_components(unit.multiplier)
        rhs = unit_components(unit.multiplicand)
        if not (lhs and rhs):
            return lhs or rhs
        return lhs + [DisplayComponent(ComponentType.MULTIPLIER, '·')] + rhs

    elif isinstance(unit, UnitDivision):
        num = (unit_components(unit.numerator) or
               [DisplayComponent(ComponentType.VALUE, '1')])
        den = unit_components(unit.denominator)
        if not den:
            return num
        if isinstance(unit.denominator, (UnitMultiplication, UnitDivision)):
            den = _parenthesised(den)
        return num + [DisplayComponent(ComponentType.DIVIDER, '/')] + den

    elif isinstance(unit, UnitExponentiation):
        base = unit_components(unit.base)
        if isinstance(unit.base, (UnitMultiplication, UnitDivision,
                                  UnitExponentiation, CompoundUnit)):
            base = _parenthesised(base)
        return base + [DisplayComponent(ComponentType.EXPONENT,
                                        exponent_str(unit.exponent),
                                        Baseline.SUPERSCRIPT)]

    elif isinstance(unit, CompoundUnit):
        comps = []
        for partial in unit.partial_units:
            if comps:
                comps.append(_SPACE)
            comps += unit_components(partial)
        return comps

    if not unit.symbol:
        return []
    return [DisplayComponent(ComponentType.SYMBOL, unit.symbol)]


# ----------------------------------------------------------------------

def _compound_components(measure: Measure, unit: CompoundUnit
                         ) -> list[DisplayComponent]:
    """
    Split the value into whole numbers of each partial unit, e.g.
    ``167° 25' 56"``.  Values are rounded to the finest unit shown.  If
    there is an error, the finest unit shown is the first of the error
    units in which the error is at least one.
    """
    value, error = measure.scalar_value, measure.error
    primary = unit.partial_units[0]

    shown = unit.partial_units
    if error is not None:
        for i, partial in enumerate(unit.error_units):
            if error * primary.factor_to(partial) >= 1:
                break
        shown = unit.error_units[:i + 1]
    finest = shown[-1]

    comps = []
    if value < 0:
        comps.append(DisplayComponent(ComponentType.SIGN, '-'))
    elif unit.display_sign:
        comps.append(DisplayComponent(ComponentType.SIGN, '+'))

    remaining = abs(value) + 0.5 * finest.factor_to(primary)
    for i, partial in enumerate(shown):
        count = max(math.floor(remaining * primary.factor_to(partial)), 0)
        remaining -= count * partial.factor_to(primary)

        if i > 0:
            comps.append(_SPACE)
            max_count = math.ceil(shown[i - 1].factor_to(partial) - 1e-9) - 1
            count_str = f"{count:0{len(str(max_count))}d}"
        else:
            count_str = str(count)
        comps += [DisplayComponent(ComponentType.VALUE, count_str)]
        comps += unit_components(partial)

    if error is not None:
        finest_error = error * primary.factor_to(finest)
        if math.isfinite(finest_error):
            error_str = _fixed_str(finest_error,
                                   _error_decimals(finest_error))
        else:
            error_str = str(finest_error)
        comps += [_SPACE, DisplayComponent(ComponentType.PLUS_MINUS, '±'),
                  _SPACE, DisplayComponent(ComponentType.ERROR, error_str)]
        comps += unit_components(finest)

    return comps


def _error_decimals(error: float) -> int:
    """Decimal position of the last significant digit of `error`."""
    return (get_unit_options().error_digits - 1 -
            math.floor(math.log10(error)))


def _fixed_str(x: float, decimals: int) -> str:
    if decimals > 0:
        return f"{x:.{decimals}f}"
    return f"{round(x, decimals):.0f}"


def _is_attached(unit: Unit) -> bool:
    if unit.symbol in _ATTACHED_SYMBOLS:
        return True
    # Angle hour / minute / second as used for right ascension.
    return (unit.dimensions.is_dimensionless() and
            unit.symbol in _ATTACHED_ANGLE_SYMBOLS)


def _parenthesised(comps: list[DisplayComponent]
                   ) -> list[DisplayComponent]:
    return ([DisplayComponent(ComponentType.SYMBOL, '(')] + comps +
            [DisplayComponent(ComponentType.SYMBOL, ')')])


def _plain_str(x: float) -> str:
    return str(float(f"{x:.12g}"))
