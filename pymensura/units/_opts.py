from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass, replace


# ======================================================================


@dataclass(frozen=True, kw_only=True)
class UnitOptions:
    """
    Dataclass that holds option flags for handling units, scales and
    measures.  See `get_unit_options` and `set_unit_options` for full
    details.
    """
    dimension_decimals: int
    factor_rel_tol: float
    symbol_tolerance: float
    symbol_max_decimals: int
    unicode_str: bool
    error_digits: int

    def __post_init__(self):
        """Check certain values"""
        if self.dimension_decimals < 0:
            raise ValueError("Require 'dimension_decimals' >= 0.")
        if self.factor_rel_tol < 0:
            raise ValueError("Require 'factor_rel_tol' >= 0.")
        if self.symbol_tolerance <= 0:
            raise ValueError("Require 'symbol_tolerance' > 0.")
        if self.symbol_max_decimals < 0:
            raise ValueError("Require 'symbol_max_decimals' >= 0.")
        if self.error_digits < 1:
            raise ValueError("Require 'error_digits' >= 1.")


# Create single instance and set defaults.
_unit_options = UnitOptions(
    dimension_decimals=3,
    factor_rel_tol=1e-12,
    symbol_tolerance=0.001,
    symbol_max_decimals=9,
    unicode_str=True,
    error_digits=1
)


# ----------------------------------------------------------------------

def get_unit_options() -> UnitOptions:
    """
    Returns
    -------
    unit_options : UnitOptions
        Returns a copy of the current `UnitOptions`.  For a full
        description of each option, see `set_unit_options`.
    """
    return replace(_unit_options)


# noinspection PyIncorrectDocstring
def set_unit_options(**kwargs):
    """
    Set the current unit options.

    Parameters
    ----------
    dimension_decimals : int, default = 3
        Dimension exponents are rounded to this number of decimal places
        before being compared.  Exponents are normally integers, but
        fractional values arise from square roots and repeated
        compositions can accumulate small floating point errors.

    factor_rel_tol : float, default = 1e-12
        Relative tolerance used when comparing the conversion factors of
        two units that are not identical objects.

    symbol_tolerance : float, default = 0.001
        When a symbol is generated for a ``UnitMultiple`` the factor is
        shown with the fewest decimal places that reproduce it within
        this tolerance.

    symbol_max_decimals : int, default = 9
        Maximum number of decimal places tried when generating a symbol
        for a ``UnitMultiple``.  If no representation is found the full
        float is used.

    unicode_str : bool, default = True
        Generate unicode characters for superscripts in unit symbols and
        strings, e.g. ``m²`` instead of ``m^2``.

    error_digits : int, default = 1
        Number of significant digits of an error value shown when a
        measure is converted to a string.  The value itself is rounded
        to the same decimal position.

    Raises
    ------
    ValueError
        If any of the options have illegal values.  The current options
        are left unchanged.

    See Also
    --------
    get_unit_options, unit_options

    Examples
    --------
    >>> from pymensura.units import METRE, Measure, set_unit_options
    >>> print(Measure(4.0, METRE) ** 2)
    16.0 m²
    >>> set_unit_options(unicode_str=False)
    >>> print(Measure(4.0, METRE) ** 2)
    16.0 m^2
    >>> set_unit_options(unicode_str=True)
    """
    global _unit_options
    _unit_options = replace(_unit_options, **kwargs)


@contextmanager
def unit_options(**kwargs):
    """
    Context manager that applies the given unit options (see
    `set_unit_options`) and restores the previous options on exit.

    Examples
    --------
    >>> with unit_options(error_digits=2):
    ...     pass
    """
    global _unit_options
    previous = _unit_options
    set_unit_options(**kwargs)
    try:
        yield get_unit_options()
    finally:
        _unit_options = previous
