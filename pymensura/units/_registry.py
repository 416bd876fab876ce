from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping
from typing import Generic, TypeVar

from pymensura.logger import logger
from ._scale import Scale
from ._unit import Unit

_T = TypeVar('_T')


# ======================================================================

class DefinitionRegistry(Mapping, Generic[_T]):
    """
    Mapping of names to lazily constructed definitions (units or
    scales).  Each name is given a factory function taking no arguments.
    The factory is called the first time the name is looked up and the
    result is kept.  Factories obtain the definitions they depend on by
    looking them up in turn, so definitions can be given in any order.

    Names can only be defined once.  A definition that (directly or
    indirectly) depends on itself raises ``ValueError`` when resolved.

    Examples
    --------
    >>> reg = DefinitionRegistry('thing', object)
    >>> reg.define('b', lambda: ('b uses', reg['a']))
    >>> reg.define('a', lambda: 'a')
    >>> reg['b']
    ('b uses', 'a')
    >>> reg.define('a', lambda: 'again')
    Traceback (most recent call last):
    ...
    KeyError: "Overwriting thing 'a' not allowed."
    """

    def __init__(self, kind: str, result_type: type):
        """
        Parameters
        ----------
        kind : str
            Name of the kind of definition, used in messages.
        result_type : type
            Each factory must return an instance of this type.
        """
        self._kind = kind
        self._result_type = result_type
        self._factories: dict[str, Callable[[], _T]] = {}
        self._resolved: dict[str, _T] = {}
        self._resolving: list[str] = []

    def define(self, name: str, factory: Callable[[], _T]):
        """
        Add a definition.

        Raises
        ------
        KeyError
            If `name` is already defined.
        """
        if name in self._factories:
            raise KeyError(f"Overwriting {self._kind} '{name}' not "
                           f"allowed.")
        self._factories[name] = factory

    def resolve_all(self):
        """Construct every definition not yet constructed."""
        for name in list(self._factories):
            self[name]

    def __getitem__(self, name: str) -> _T:
        try:
            return self._resolved[name]
        except KeyError:
            pass

        try:
            factory = self._factories[name]
        except KeyError:
            raise KeyError(f"Unknown {self._kind} '{name}'.") from None

        if name in self._resolving:
            chain = ' -> '.join(self._resolving + [name])
            raise ValueError(f"Circular {self._kind} definition: {chain}")

        self._resolving.append(name)
        try:
            result = factory()
        finally:
            self._resolving.pop()

        if not isinstance(result, self._result_type):
            raise TypeError(f"Definition of {self._kind} '{name}' gave "
                            f"{type(result).__name__}.")

        logger.debug(f"Defined {self._kind} '{name}' = {result!r}.")
        self._resolved[name] = result
        return result

    def __contains__(self, name) -> bool:
        return name in self._factories

    def __iter__(self) -> Iterator[str]:
        return iter(self._factories)

    def __len__(self) -> int:
        return len(self._factories)


# ----------------------------------------------------------------------

_units: DefinitionRegistry[Unit] = DefinitionRegistry('unit', Unit)
_scales: DefinitionRegistry[Scale] = DefinitionRegistry('scale', Scale)


def define_scale(name: str, factory: Callable[[], Scale]):
    """Add a named scale definition.  See `define_unit`."""
    _scales.define(name, factory)


def define_unit(name: str, factory: Callable[[], Unit]):
    """
    Add a named unit definition.  `factory` is called with no arguments
    when the unit is first required, and can use `get_unit` /
    `get_scale` to obtain other definitions.

    Examples
    --------
    >>> from pymensura.units import UnitMultiple
    >>> define_unit('furlong', lambda: UnitMultiple(
    ...     201.168, get_unit('metre'), 'fur'))
    >>> get_unit('furlong').conversion_factor
    201.168
    """
    _units.define(name, factory)


def get_scale(name: str) -> Scale:
    """Returns the named scale, constructing it if required."""
    return _scales[name]


def get_unit(name: str) -> Unit:
    """
    Returns the named unit, constructing it if required.

    Raises
    ------
    KeyError
        If the unit is not defined.
    ValueError
        If the unit definition is circular.
    """
    return _units[name]


def known_scales() -> list[str]:
    return list(_scales)


def known_units() -> list[str]:
    return list(_units)


def resolve_all():
    """Construct all defined units and scales."""
    _units.resolve_all()
    _scales.resolve_all()
