from __future__ import annotations

import math
from collections.abc import Sequence
from typing import TYPE_CHECKING

from ._dims import Dimensions, DIMENSIONLESS
from ._errors import ScaleValidationError, ScaleError
from ._opts import get_unit_options
from ._unit import Unit, ONE

if TYPE_CHECKING:
    from ._measure import Measure


# ======================================================================

class Scale:
    """
    Base class for measurement scales.  A measure on a scale represents a
    point on that scale (e.g. a temperature of 15 °C) rather than an
    amount of a unit (e.g. a temperature difference of 15 K).

    The four scale types follow the classic levels of measurement:

        - `NominalScale`: Unordered labels.
        - `OrdinalScale`: Ordered labels.
        - `IntervalScale`: Numeric, with an arbitrary zero point.
        - `RatioScale`: Numeric, with a true zero.  Negative values are
          not permitted.
    """

    def __init__(self, symbol: str, unit: Unit):
        self._symbol = symbol
        self._unit = unit

    @property
    def dimensions(self) -> Dimensions:
        return self._unit.dimensions

    @property
    def is_measurement_scale(self) -> bool:
        """``True`` for interval and ratio scales, which can be used in
        arithmetic."""
        return isinstance(self, (IntervalScale, RatioScale))

    @property
    def symbol(self) -> str:
        return self._symbol

    @property
    def unit(self) -> Unit:
        """Unit of values on this scale.  Label scales use `ONE`."""
        return self._unit

    def __repr__(self) -> str:
        return f"<{type(self).__name__} '{self._symbol}'>"

    def __str__(self) -> str:
        return self._symbol


# ----------------------------------------------------------------------

class NominalScale(Scale):
    """
    A scale of unordered labels, e.g. colours.  Measures on a nominal
    scale can only be compared for equality.  Scales are equal when they
    have the same symbol and labels.

    Examples
    --------
    >>> colours = NominalScale(['red', 'green', 'blue'], 'colour')
    >>> 'green' in colours, 'mauve' in colours
    (True, False)
    """

    def __init__(self, labels: Sequence[str], symbol: str = ''):
        super().__init__(symbol, ONE)
        self._labels = tuple(labels)
        if len(set(self._labels)) != len(self._labels):
            raise ValueError(f"Duplicate labels in scale: {self._labels}")

    @property
    def dimensions(self) -> Dimensions:
        return DIMENSIONLESS

    @property
    def labels(self) -> tuple[str, ...]:
        return self._labels

    def index(self, label: str) -> int:
        """
        Returns the position of `label` in the scale.

        Raises
        ------
        ScaleValidationError
            If `label` is not part of this scale.
        """
        try:
            return self._labels.index(label)
        except ValueError:
            raise ScaleValidationError(
                ScaleError.UNKNOWN_LABEL,
                f"'{label}' not in scale '{self._symbol}'") from None

    def __contains__(self, label: str) -> bool:
        return label in self._labels

    def __eq__(self, rhs) -> bool:
        if not isinstance(rhs, Scale):
            return NotImplemented
        return self is rhs or (type(self) is type(rhs) and
                               self._symbol == rhs._symbol and
                               self._labels == rhs._labels)

    def __hash__(self):
        return hash((type(self).__name__, self._symbol, self._labels))


class OrdinalScale(NominalScale):
    """
    A scale of ordered labels, e.g. ``['low', 'medium', 'high']``.  The
    order is that of the labels as given.  Measures on the same ordinal
    scale can be compared using ``<``, ``>``, etc.
    """
    pass


# ----------------------------------------------------------------------

class RatioScale(Scale):
    """
    A numeric scale with a true zero, such as the Kelvin temperature
    scale.  Negative values are not permitted.  Interval scales anchor
    themselves to a ratio scale so that they can be converted.
    """

    def __init__(self, unit: Unit, symbol: str = None):
        super().__init__(unit.symbol if symbol is None else symbol, unit)

    def __eq__(self, rhs) -> bool:
        if not isinstance(rhs, Scale):
            return NotImplemented
        if self is rhs:
            return True
        return (isinstance(rhs, RatioScale) and
                self.dimensions == rhs.dimensions and
                self._unit == rhs._unit)

    def __hash__(self):
        return hash(('ratio', self._unit))


class IntervalScale(Scale):
    """
    A numeric scale with an arbitrary zero, such as the Celsius
    temperature scale.  An interval scale can only be converted to other
    scales if it is anchored to a `RatioScale`, by giving the `offset`
    value of this scale where the ratio scale is zero.

    Examples
    --------
    The Celsius scale is anchored to the Kelvin scale, where 0 K =
    -273.15 °C:

    >>> from pymensura.units import KELVIN_SCALE, DEGREE_CELSIUS, Measure
    >>> celsius = IntervalScale(DEGREE_CELSIUS, ratio_scale=KELVIN_SCALE,
    ...                         offset=Measure(-273.15, DEGREE_CELSIUS))
    >>> celsius.offset_value
    -273.15
    """

    def __init__(self, unit: Unit, symbol: str = None, *,
                 ratio_scale: RatioScale = None, offset: Measure = None):
        """
        Parameters
        ----------
        unit : Unit
            Unit of values on this scale.
        symbol : str, optional
            Scale symbol.  Default is the unit symbol.
        ratio_scale : RatioScale, optional
            Ratio scale this scale is anchored to.  If omitted the scale
            cannot be converted to or from any other scale.
        offset : Measure, optional
            Value on this scale that corresponds to zero on
            `ratio_scale`.  Required if `ratio_scale` is given.

        Raises
        ------
        ValueError
            If only one of `ratio_scale` and `offset` is given.
        ScaleValidationError
            If the offset or this scale do not have the same dimensions
            as `ratio_scale`.
        """
        super().__init__(unit.symbol if symbol is None else symbol, unit)
        if (ratio_scale is None) != (offset is None):
            raise ValueError("Both 'ratio_scale' and 'offset' are "
                             "required to anchor an interval scale.")

        self._ratio_scale, self._offset = ratio_scale, offset
        self._offset_value = 0.0
        if ratio_scale is None:
            return

        for dims in (offset.dimensions, unit.dimensions):
            if dims != ratio_scale.dimensions:
                raise ScaleValidationError(
                    ScaleError.DIFFERENT_DIMENSIONALITY,
                    f"Offset {dims} vs ratio scale "
                    f"{ratio_scale.dimensions}")

        # Offset is stored in the units of this scale.
        self._offset_value = (offset.scalar_value *
                              offset.unit.factor_to(unit))

    @property
    def offset(self) -> Measure | None:
        return self._offset

    @property
    def offset_value(self) -> float:
        """`offset` expressed in the unit of this scale (zero if not
        anchored)."""
        return self._offset_value

    @property
    def ratio_scale(self) -> RatioScale | None:
        return self._ratio_scale

    def __eq__(self, rhs) -> bool:
        if not isinstance(rhs, Scale):
            return NotImplemented
        if self is rhs:
            return True
        if not isinstance(rhs, IntervalScale) or self._unit != rhs._unit:
            return False
        if self._ratio_scale is None or rhs._ratio_scale is None:
            # Unanchored scales are only equal to themselves.
            return False

        return (self._ratio_scale == rhs._ratio_scale and
                math.isclose(self._offset_value, rhs._offset_value,
                             rel_tol=get_unit_options().factor_rel_tol))

    def __hash__(self):
        return hash(('interval', self._unit))
