from __future__ import annotations

from enum import Enum
from typing import Mapping

import numpy as np
from numpy.typing import NDArray

from ._opts import get_unit_options


# ======================================================================

class Dimension(Enum):
    """
    The seven principal dimensions of the SI system, from which all
    units are built.  The value of each member is its conventional
    symbol.
    """
    TIME = 'T'
    LENGTH = 'L'
    MASS = 'M'
    ELECTRIC_CURRENT = 'I'
    TEMPERATURE = 'θ'
    AMOUNT_OF_SUBSTANCE = 'N'
    LUMINOUS_INTENSITY = 'J'


_DIMS = tuple(Dimension)
_DIM_IDX = {d: i for i, d in enumerate(_DIMS)}
_SYMBOL_DIM = {d.value: d for d in _DIMS}


# ----------------------------------------------------------------------

class Dimensions:
    """
    Immutable set of exponents over the seven principal dimensions.
    For example acceleration (m/s²) has `LENGTH` = 1 and `TIME` = -2,
    normally written as ``(T=-2, L=1)``.  Missing dimensions have an
    exponent of zero.

    Exponents are usually integers, but fractional values are supported
    (e.g. the square root of an area).  Two ``Dimensions`` are equal when
    every exponent agrees after rounding to
    ``UnitOptions.dimension_decimals`` places.

    Examples
    --------
    >>> acc = Dimensions(L=1, T=-2)
    >>> acc[Dimension.TIME]
    -2.0
    >>> acc * Dimensions(M=1)
    Dimensions(T=-2, L=1, M=1)
    >>> Dimensions(L=2) ** 0.5 == Dimensions({Dimension.LENGTH: 1})
    True
    """
    __slots__ = ('_exps',)

    def __init__(self, exponents: Mapping[Dimension, float] = None,
                 **kwargs: float):
        """
        Parameters
        ----------
        exponents : Mapping[Dimension, float], optional
            Exponent for each dimension present.
        kwargs : float
            Exponents given by dimension symbol (``T``, ``L``, ``M``,
            ``I``, ``θ``, ``N``, ``J``).

        Raises
        ------
        KeyError
            If an unknown dimension symbol is given.
        """
        exps = np.zeros(len(_DIMS))
        for dim, exp in (exponents or {}).items():
            exps[_DIM_IDX[dim]] = exp
        for sym, exp in kwargs.items():
            try:
                exps[_DIM_IDX[_SYMBOL_DIM[sym]]] = exp
            except KeyError:
                raise KeyError(f"Unknown dimension symbol '{sym}'.")

        exps.flags.writeable = False
        self._exps = exps

    @classmethod
    def _from_array(cls, exps: NDArray) -> Dimensions:
        res = cls.__new__(cls)
        exps = np.array(exps, dtype=float)
        exps.flags.writeable = False
        res._exps = exps
        return res

    # -- Operators -----------------------------------------------------

    def __getitem__(self, dim: Dimension) -> float:
        return float(self._exps[_DIM_IDX[dim]])

    def __mul__(self, rhs: Dimensions) -> Dimensions:
        """Exponents are added."""
        if not isinstance(rhs, Dimensions):
            return NotImplemented
        return Dimensions._from_array(self._exps + rhs._exps)

    def __truediv__(self, rhs: Dimensions) -> Dimensions:
        """Exponents of `rhs` are subtracted."""
        if not isinstance(rhs, Dimensions):
            return NotImplemented
        return Dimensions._from_array(self._exps - rhs._exps)

    def __pow__(self, exponent: float) -> Dimensions:
        """Exponents are multiplied by `exponent`."""
        return Dimensions._from_array(self._exps * exponent)

    def __eq__(self, rhs) -> bool:
        if not isinstance(rhs, Dimensions):
            return NotImplemented
        return bool(np.array_equal(self._rounded(), rhs._rounded()))

    def __hash__(self):
        return hash(tuple(self._rounded()))

    def __iter__(self):
        """Iterate over `(dimension, exponent)` pairs with non-zero
        exponents."""
        for dim, exp in zip(_DIMS, self._exps):
            if exp != 0:
                yield dim, float(exp)

    # -- String Magic Methods ------------------------------------------

    def __repr__(self) -> str:
        parts = [f"{dim.value}={_exp_str(exp)}" for dim, exp in self]
        return f"Dimensions({', '.join(parts)})"

    def __str__(self) -> str:
        parts = [f"{dim.value}={_exp_str(exp)}" for dim, exp in self]
        return f"({', '.join(parts)})"

    # -- Public Methods ------------------------------------------------

    def is_dimensionless(self) -> bool:
        """Returns ``True`` if all exponents are (effectively) zero."""
        return not np.any(self._rounded())

    # -- Private Methods -----------------------------------------------

    def _rounded(self) -> NDArray:
        # Adding 0.0 removes negative zeros so that hashes agree.
        return np.round(self._exps, get_unit_options().dimension_decimals
                        ) + 0.0


DIMENSIONLESS = Dimensions()


# ----------------------------------------------------------------------

def _exp_str(exp: float) -> str:
    """Show near-integer exponents as integers."""
    if round(exp) == round(exp, 3):
        return str(int(round(exp)))
    return str(exp)
