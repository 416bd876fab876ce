from __future__ import annotations

import math
import warnings
from collections.abc import Sequence
from types import MappingProxyType
from typing import Mapping, NamedTuple

from pymensura.logger import logger
from ._dims import Dimension, Dimensions, DIMENSIONLESS
from ._errors import UnitValidationError, UnitError
from ._opts import get_unit_options

# Per-dimension record of base unit identifiers and their exponents.
_BaseUnitExps = dict[Dimension, dict[str, float]]


# ======================================================================

class Unit:
    """
    ``Unit`` is the common base of all unit types.  Every unit has:

        - A display `symbol`.
        - `dimensions` giving the exponent of each principal dimension.
        - A `base_unit`, which is the unit of a coherent system that
          this unit is derived from (a base unit is its own base unit).
        - A `conversion_factor` giving the size of this unit as a
          multiple of its base unit.

    Units are immutable once constructed.  They are not normally created
    via this class directly; see `BaseUnit`, `PrefixedUnit`,
    `UnitMultiple`, `EquivalentUnit`, `UnitMultiplication`,
    `UnitDivision`, `UnitExponentiation` and `CompoundUnit`.

    Two units are equal if they have the same identifier, or if they
    have the same dimensions, the same conversion factor and the same
    base units per dimension.  This means that derived units built by
    different routes (e.g. ``N`` and ``kg·m/s²``) compare equal.

    Binary operators ``*``, ``/`` and ``**`` produce derived units.
    Operators ``+`` and ``-`` only check that both units have the same
    dimensions and return the left hand unit.
    """

    def __init__(self, symbol: str, dimensions: Dimensions, *,
                 identifier: str, conversion_factor: float = 1.0,
                 base_unit: Unit = None,
                 base_unit_exps: _BaseUnitExps = None):
        self._symbol = symbol
        self._dims = dimensions
        self._identifier = identifier
        self._factor = float(conversion_factor)
        self._base = base_unit  # None -> self.
        self._base_exps = _copy_exps(base_unit_exps or {})

    # -- Properties ----------------------------------------------------

    @property
    def base_unit(self) -> Unit:
        """The unit that `conversion_factor` is relative to."""
        return self if self._base is None else self._base

    @property
    def base_units_per_dimension(self) -> Mapping[Dimension,
                                                  Mapping[str, float]]:
        """
        For each dimension, a mapping of base unit identifiers to their
        exponents.  Used to check that two units are built from the same
        base units (and not just the same dimensions).
        """
        return MappingProxyType({dim: MappingProxyType(exps)
                                 for dim, exps in self._base_exps.items()})

    @property
    def conversion_factor(self) -> float:
        """Size of this unit as a multiple of `base_unit`."""
        return self._factor

    @property
    def dimensions(self) -> Dimensions:
        return self._dims

    @property
    def identifier(self) -> str:
        """Stable identifier, derived from the construction of the
        unit."""
        return self._identifier

    @property
    def is_base_unit(self) -> bool:
        return self._base is None

    @property
    def symbol(self) -> str:
        return self._symbol

    # -- Binary Operators ----------------------------------------------

    def __add__(self, rhs: Unit) -> Unit:
        """
        Check that `rhs` can be added to this unit, i.e. it has the same
        dimensions.  This unit is returned unchanged.

        Raises
        ------
        UnitValidationError
            If the dimensions differ.
        """
        if not isinstance(rhs, Unit):
            return NotImplemented
        _check_same_dims(self, rhs)
        return self

    def __sub__(self, rhs: Unit) -> Unit:
        """See ``__add__``."""
        if not isinstance(rhs, Unit):
            return NotImplemented
        _check_same_dims(self, rhs)
        return self

    def __mul__(self, rhs: Unit) -> Unit:
        if not isinstance(rhs, Unit):
            return NotImplemented
        return UnitMultiplication(self, rhs)

    def __truediv__(self, rhs: Unit) -> Unit:
        if not isinstance(rhs, Unit):
            return NotImplemented
        return UnitDivision(self, rhs)

    def __rtruediv__(self, lhs) -> Unit:
        """Allows ``1 / unit`` to give the reciprocal unit."""
        if lhs != 1:
            return NotImplemented
        return UnitDivision(ONE, self)

    def __pow__(self, exponent: float) -> Unit:
        return UnitExponentiation(self, exponent)

    # -- Comparison Operators ------------------------------------------

    def __eq__(self, rhs) -> bool:
        if not isinstance(rhs, Unit):
            return NotImplemented
        if self is rhs or self._identifier == rhs._identifier:
            return True
        if self._dims != rhs._dims:
            return False
        if not math.isclose(self._factor, rhs._factor,
                            rel_tol=get_unit_options().factor_rel_tol):
            return False
        return self._exps_key() == rhs._exps_key()

    def __hash__(self):
        # Conversion factors are compared with a tolerance, so they are
        # omitted here.
        return hash((self._dims, self._exps_key()))

    # -- String Magic Methods ------------------------------------------

    def __repr__(self) -> str:
        return f"<{type(self).__name__} '{self._symbol}'>"

    def __str__(self) -> str:
        return self._symbol

    # -- Public Methods ------------------------------------------------

    def factor_to(self, target: Unit) -> float:
        """
        Returns the multiplier that converts a value in this unit to a
        value in `target`.

        Raises
        ------
        UnitValidationError
            If the units have different dimensions or do not share a
            base unit.
        """
        if self._dims != target._dims:
            raise UnitValidationError(
                UnitError.DIFFERENT_DIMENSIONALITY,
                f"'{self.symbol}' {self._dims} -> '{target.symbol}' "
                f"{target._dims}")
        if self.base_unit != target.base_unit:
            raise UnitValidationError(
                UnitError.NO_COMMON_BASE_UNIT,
                f"'{self.symbol}' -> '{target.symbol}'")

        return self._factor / target._factor

    # -- Private Methods -----------------------------------------------

    def _exps_key(self) -> frozenset:
        decimals = get_unit_options().dimension_decimals
        key = set()
        for dim, exps in self._base_exps.items():
            for ident, exp in exps.items():
                exp = round(exp, decimals) + 0.0
                if exp != 0:
                    key.add((dim, ident, exp))
        return frozenset(key)


# ----------------------------------------------------------------------

class BaseUnit(Unit):
    """
    A unit that anchors a coherent system for a single dimension, e.g.
    metre or second.  A base unit has a conversion factor of one and is
    its own base unit.  If no dimension is given the unit is
    dimensionless (see `ONE`).

    Examples
    --------
    >>> furlong = BaseUnit('fur', Dimension.LENGTH)
    >>> furlong.is_base_unit, furlong.conversion_factor
    (True, 1.0)
    """

    def __init__(self, symbol: str, dimension: Dimension = None, *,
                 identifier: str = None):
        """
        Parameters
        ----------
        symbol : str
            Display symbol.
        dimension : Dimension, optional
            The single dimension of this unit (exponent = 1).  If omitted
            the unit is dimensionless.
        identifier : str, optional
            Identifier for the unit.  If omitted it is built from the
            symbol and dimension.
        """
        if dimension is not None:
            dims = Dimensions({dimension: 1})
            dim_str = dimension.value
        else:
            dims = DIMENSIONLESS
            dim_str = ''

        if identifier is None:
            identifier = f"{symbol}[{dim_str}]"

        super().__init__(symbol, dims, identifier=identifier)
        self._dimension = dimension
        if dimension is not None:
            self._base_exps = {dimension: {identifier: 1.0}}

    @property
    def dimension(self) -> Dimension | None:
        return self._dimension

    def _reparent(self, new_base: Unit, conversion_factor: float):
        """
        Make this unit relative to `new_base`.  This is only done once,
        when a prefixed version of this unit is declared to be the base
        unit instead (e.g. kilogram rather than gram).
        """
        if not self.is_base_unit:
            raise ValueError(f"Unit '{self.symbol}' is already relative "
                             f"to '{self.base_unit.symbol}'.")

        logger.debug(f"Base unit '{self.symbol}' replaced by "
                     f"'{new_base.symbol}'.")
        self._base = new_base
        self._factor = float(conversion_factor)
        self._base_exps = _copy_exps(new_base._base_exps)


# ----------------------------------------------------------------------

class Prefix(NamedTuple):
    """A metric prefix, e.g. kilo (k) = 1000."""
    symbol: str
    factor: float


YOTTA = Prefix('Y', 1e24)
ZETTA = Prefix('Z', 1e21)
EXA = Prefix('E', 1e18)
PETA = Prefix('P', 1e15)
TERA = Prefix('T', 1e12)
GIGA = Prefix('G', 1e9)
MEGA = Prefix('M', 1e6)
KILO = Prefix('k', 1000.0)
HECTO = Prefix('h', 100.0)
DECA = Prefix('da', 10.0)
DECI = Prefix('d', 0.1)
CENTI = Prefix('c', 0.01)
MILLI = Prefix('m', 0.001)
MICRO = Prefix('μ', 1e-6)
NANO = Prefix('n', 1e-9)
PICO = Prefix('p', 1e-12)
FEMTO = Prefix('f', 1e-15)
ATTO = Prefix('a', 1e-18)
ZEPTO = Prefix('z', 1e-21)
YOCTO = Prefix('y', 1e-24)


class PrefixedUnit(Unit):
    """
    A unit with a metric prefix applied, e.g. kilometre.

    A prefixed unit can also be declared as the base unit in place of
    the unit it wraps.  This is the case for the kilogram, which is the
    SI base unit of mass rather than the gram.  In that case the wrapped
    unit is made relative to the new prefixed unit at construction
    (this can only happen once, and must happen before the wrapped unit
    is used elsewhere).

    Examples
    --------
    >>> gram = BaseUnit('g', Dimension.MASS)
    >>> kilogram = PrefixedUnit(KILO, gram, is_base_unit=True)
    >>> kilogram.symbol, gram.conversion_factor, gram.base_unit is kilogram
    ('kg', 0.001, True)
    """

    def __init__(self, prefix: Prefix, unit: Unit, symbol: str = None, *,
                 is_base_unit: bool = False):
        """
        Parameters
        ----------
        prefix : Prefix
            Metric prefix to apply.
        unit : Unit
            Unit being prefixed.
        symbol : str, optional
            Display symbol.  Default is the prefix symbol followed by the
            unit symbol.
        is_base_unit : bool, default = False
            If ``True`` this unit becomes the base unit and `unit` is
            made relative to it.  `unit` must be a single dimension
            ``BaseUnit``.

        Raises
        ------
        ValueError
            If `is_base_unit` is requested for an unsuitable unit.
        """
        self._prefix, self._unit = prefix, unit
        if symbol is None:
            symbol = f"{prefix.symbol}{unit.symbol}"
        identifier = f"[{prefix.symbol}]{unit.identifier}"

        if not is_base_unit:
            super().__init__(symbol, unit.dimensions, identifier=identifier,
                             conversion_factor=(unit.conversion_factor *
                                                prefix.factor),
                             base_unit=unit.base_unit,
                             base_unit_exps=unit._base_exps)
            return

        if not (isinstance(unit, BaseUnit) and unit.dimension is not None):
            raise ValueError(f"Only a single dimension base unit can be "
                             f"replaced as the base unit, got "
                             f"'{unit.symbol}'.")

        super().__init__(symbol, unit.dimensions, identifier=identifier,
                         base_unit_exps={unit.dimension: {identifier: 1.0}})
        unit._reparent(self, 1.0 / prefix.factor)

    @property
    def prefix(self) -> Prefix:
        return self._prefix

    @property
    def unit(self) -> Unit:
        """The unit that the prefix is applied to."""
        return self._unit


# ----------------------------------------------------------------------

class UnitMultiple(Unit):
    """
    A unit that is an arbitrary multiple of another unit, e.g. the hour
    is 3600 seconds.  If no symbol is given, one is generated from the
    factor and the symbol of the unit.

    Examples
    --------
    >>> metre = BaseUnit('m', Dimension.LENGTH)
    >>> UnitMultiple(100.0, metre).symbol
    '100m'
    >>> UnitMultiple(100.12310001, metre).symbol
    '100.1231m'
    """

    def __init__(self, factor: float, unit: Unit, symbol: str = None):
        self._multiple, self._unit = float(factor), unit
        if symbol is None:
            symbol = f"{_multiple_str(factor)}{unit.symbol}"

        super().__init__(symbol, unit.dimensions,
                         identifier=f"[{float(factor)!r}]{unit.identifier}",
                         conversion_factor=unit.conversion_factor * factor,
                         base_unit=unit.base_unit,
                         base_unit_exps=unit._base_exps)

    @property
    def factor(self) -> float:
        """Multiple of `unit` represented by this unit."""
        return self._multiple

    @property
    def unit(self) -> Unit:
        return self._unit


class EquivalentUnit(Unit):
    """
    A unit that is identical in size and construction to another unit
    but has its own symbol, e.g. the hertz is equivalent to 1/s.  An
    equivalent unit compares equal to the unit it stands for.
    """

    def __init__(self, symbol: str, equivalent: Unit):
        self._unit = equivalent
        super().__init__(symbol, equivalent.dimensions,
                         identifier=f"{symbol}≡{equivalent.identifier}",
                         conversion_factor=equivalent.conversion_factor,
                         base_unit=equivalent.base_unit,
                         base_unit_exps=equivalent._base_exps)

    @property
    def unit(self) -> Unit:
        """The unit that this unit is equivalent to."""
        return self._unit


# ----------------------------------------------------------------------

class UnitMultiplication(Unit):
    """
    The product of two units, e.g. N·m.  If both units are base units
    the product is also a base unit, otherwise its base unit is the
    product of the two base units.
    """

    def __init__(self, multiplier: Unit, multiplicand: Unit):
        self._lhs, self._rhs = multiplier, multiplicand
        super().__init__(
            _join_symbols(multiplier.symbol, '·', multiplicand.symbol),
            multiplier.dimensions * multiplicand.dimensions,
            identifier=f"({multiplier.identifier})*"
                       f"({multiplicand.identifier})",
            base_unit_exps=_combine_exps(multiplier._base_exps,
                                         multiplicand._base_exps, +1))

        if not (multiplier.is_base_unit and multiplicand.is_base_unit):
            self._factor = (multiplier.conversion_factor *
                            multiplicand.conversion_factor)
            self._base = UnitMultiplication(multiplier.base_unit,
                                            multiplicand.base_unit)

    @property
    def multiplicand(self) -> Unit:
        return self._rhs

    @property
    def multiplier(self) -> Unit:
        return self._lhs


class UnitDivision(Unit):
    """
    The quotient of two units, e.g. m/s.  If both units are base units
    the quotient is also a base unit, otherwise its base unit is the
    quotient of the two base units.
    """

    def __init__(self, numerator: Unit, denominator: Unit):
        self._num, self._den = numerator, denominator
        super().__init__(
            _join_symbols(numerator.symbol, '/', denominator.symbol),
            numerator.dimensions / denominator.dimensions,
            identifier=f"({numerator.identifier})/"
                       f"({denominator.identifier})",
            base_unit_exps=_combine_exps(numerator._base_exps,
                                         denominator._base_exps, -1))

        if not (numerator.is_base_unit and denominator.is_base_unit):
            self._factor = (numerator.conversion_factor /
                            denominator.conversion_factor)
            self._base = UnitDivision(numerator.base_unit,
                                      denominator.base_unit)

    @property
    def denominator(self) -> Unit:
        return self._den

    @property
    def numerator(self) -> Unit:
        return self._num


class UnitExponentiation(Unit):
    """
    A unit raised to a power, e.g. m².  Non-integer exponents are
    allowed, which is required when taking the square root of a
    measure.
    """

    def __init__(self, base: Unit, exponent: float):
        self._root, self._exponent = base, exponent
        super().__init__(
            _power_symbol(base.symbol, exponent),
            base.dimensions ** exponent,
            identifier=f"({base.identifier})^{exponent!r}",
            base_unit_exps={dim: {ident: exp * exponent
                                  for ident, exp in exps.items()}
                            for dim, exps in base._base_exps.items()})

        if not base.is_base_unit:
            self._factor = base.conversion_factor ** exponent
            self._base = UnitExponentiation(base.base_unit, exponent)

    @property
    def base(self) -> Unit:
        """The unit being raised to `exponent`."""
        return self._root

    @property
    def exponent(self) -> float:
        return self._exponent


# ----------------------------------------------------------------------

class CompoundUnit(Unit):
    """
    A unit that is shown as a sequence of progressively smaller units,
    such as degrees, arcminutes and arcseconds (e.g. 12° 45' 22").  The
    compound unit has the same size as its first (largest) partial unit.

    Examples
    --------
    >>> second = BaseUnit('s', Dimension.TIME)
    >>> minute = UnitMultiple(60, second, 'min')
    >>> hour = UnitMultiple(3600, second, 'h')
    >>> hms = CompoundUnit([hour, minute, second])
    >>> [u.symbol for u in hms.partial_units]
    ['h', 'min', 's']
    >>> CompoundUnit([second, minute])
    Traceback (most recent call last):
    ...
    pymensura.units._errors.UnitValidationError: partial unit in illegal order: 's' is not larger than 'min'
    """

    def __init__(self, partial_units: Sequence[Unit], *,
                 display_sign: bool = False,
                 extra_error_units: Sequence[Unit] = (),
                 symbol: str = None):
        """
        Parameters
        ----------
        partial_units : Sequence[Unit]
            Units in order of decreasing size.  At least one is required.
        display_sign : bool, default = False
            If ``True`` a plus sign is displayed for positive values.
            Minus signs are always displayed.
        extra_error_units : Sequence[Unit], optional
            Smaller units that may be used in addition to
            `partial_units` when displaying an error value, e.g.
            milliarcseconds.
        symbol : str, optional
            Display symbol.  Default is the partial unit symbols
            separated by spaces.

        Raises
        ------
        UnitValidationError
            If there are no partial units, they do not have the same
            dimensions, or they are not in order of decreasing size.
        """
        partial_units = tuple(partial_units)
        error_units = partial_units + tuple(extra_error_units)
        if not partial_units:
            raise UnitValidationError(UnitError.NO_PARTIAL_UNITS_DEFINED)
        _check_decreasing(partial_units)
        _check_decreasing(error_units)

        primary = partial_units[0]
        if symbol is None:
            symbol = ' '.join(u.symbol for u in partial_units)
        super().__init__(symbol, primary.dimensions,
                         identifier='{' + ';'.join(u.identifier for u in
                                                   partial_units) + '}',
                         conversion_factor=primary.conversion_factor,
                         base_unit=primary.base_unit,
                         base_unit_exps=primary._base_exps)
        self._partial_units = partial_units
        self._error_units = error_units
        self._display_sign = display_sign

    @property
    def display_sign(self) -> bool:
        return self._display_sign

    @property
    def error_units(self) -> tuple[Unit, ...]:
        """Partial units followed by any extra units for errors."""
        return self._error_units

    @property
    def partial_units(self) -> tuple[Unit, ...]:
        return self._partial_units


# ----------------------------------------------------------------------

def _check_decreasing(units: Sequence[Unit]):
    primary = units[0]
    for larger, smaller in zip(units, units[1:]):
        if smaller.dimensions != primary.dimensions:
            raise UnitValidationError(
                UnitError.DIFFERENT_DIMENSIONALITY,
                f"'{smaller.symbol}' and '{primary.symbol}'")
        if larger.factor_to(smaller) <= 1.0:
            raise UnitValidationError(
                UnitError.PARTIAL_UNIT_IN_ILLEGAL_ORDER,
                f"'{larger.symbol}' is not larger than '{smaller.symbol}'")


def _check_same_dims(lhs: Unit, rhs: Unit):
    if lhs.dimensions != rhs.dimensions:
        raise UnitValidationError(UnitError.DIFFERENT_DIMENSIONALITY,
                                  f"'{lhs.symbol}' and '{rhs.symbol}'")


def _combine_exps(lhs: _BaseUnitExps, rhs: _BaseUnitExps,
                  sign: int) -> _BaseUnitExps:
    """Add (`sign` = +1) or subtract (`sign` = -1) base unit exponents.
    Entries that cancel out (after rounding to
    ``UnitOptions.dimension_decimals``) are dropped."""
    decimals = get_unit_options().dimension_decimals
    res = _copy_exps(lhs)
    for dim, exps in rhs.items():
        dim_exps = res.setdefault(dim, {})
        for ident, exp in exps.items():
            dim_exps[ident] = dim_exps.get(ident, 0.0) + sign * exp
            if round(dim_exps[ident], decimals) == 0:
                del dim_exps[ident]
        if not dim_exps:
            del res[dim]
    return res


def _copy_exps(exps: _BaseUnitExps) -> _BaseUnitExps:
    return {dim: dict(dim_exps) for dim, dim_exps in exps.items()}


def _join_symbols(lhs: str, op: str, rhs: str) -> str:
    if op == '/':
        if not lhs:
            lhs = '1'
        if not rhs:
            return lhs
        if any(c in rhs for c in '·/'):
            rhs = f"({rhs})"
        return f"{lhs}/{rhs}"

    if not lhs or not rhs:
        return lhs or rhs
    return f"{lhs}{op}{rhs}"


def _multiple_str(factor: float) -> str:
    """
    Gives the shortest decimal string for `factor` that is within
    ``UnitOptions.symbol_tolerance`` of the scaled value, e.g. 100.0 ->
    '100' and 100.12310001 -> '100.1231'.
    """
    opts = get_unit_options()
    for decimals in range(opts.symbol_max_decimals + 1):
        scaled = factor * 10 ** decimals
        if abs(scaled - round(scaled)) <= opts.symbol_tolerance:
            if decimals == 0:
                return str(int(round(factor)))
            return str(round(scaled) / 10 ** decimals)

    warnings.warn(f"No short representation found for unit multiple "
                  f"{factor!r}.")
    return repr(float(factor))


def _power_symbol(symbol: str, exponent: float) -> str:
    if any(c in symbol for c in '·/ '):
        symbol = f"({symbol})"
    exp_str = exponent_str(exponent)
    if get_unit_options().unicode_str:
        return symbol + to_ucode_super(exp_str)
    return f"{symbol}^{exp_str}"


# -- Unicode Functions -------------------------------------------------

_UCODE_SS_CHARS = ('⁺⁻ᐧ⁰¹²³⁴⁵⁶⁷⁸⁹', '+-.0123456789')


def exponent_str(exponent: float) -> str:
    """Integer valued exponents are shown without a decimal point."""
    if float(exponent).is_integer():
        return str(int(exponent))
    return str(exponent)


def to_ucode_super(ss: str) -> str:
    """
    Convert numeric characters in the string ``ss`` to unicode
    superscript.
    """
    result = ''
    for c in ss:
        idx = _UCODE_SS_CHARS[1].find(c)
        if idx >= 0:
            result += _UCODE_SS_CHARS[0][idx]
        else:
            result += c
    return result


# ----------------------------------------------------------------------

ONE = BaseUnit('', identifier='one')
"""The dimensionless unit."""
