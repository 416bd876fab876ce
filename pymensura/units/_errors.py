from __future__ import annotations

from enum import Enum


# ======================================================================

class UnitError(Enum):
    """Reasons for a `UnitValidationError`."""
    DIFFERENT_DIMENSIONALITY = "different dimensionality"
    NO_COMMON_BASE_UNIT = "no common base unit"
    CANNOT_CONVERT_UNIT_TO_SCALE = "cannot convert a unit to a scale"
    NO_PARTIAL_UNITS_DEFINED = "no partial units defined"
    PARTIAL_UNIT_IN_ILLEGAL_ORDER = "partial unit in illegal order"


class ScaleError(Enum):
    """Reasons for a `ScaleValidationError`."""
    DIFFERENT_DIMENSIONALITY = "different dimensionality"
    NO_COMMON_RATIO_SCALE = "no common ratio scale"
    CANNOT_CONVERT_SCALE_TO_UNIT = "cannot convert a scale to a unit"
    NOT_LINKED_TO_RATIO_SCALE = "not linked to a ratio scale"
    CANNOT_USE_SCALE_IN_ARITHMETIC = "cannot use a scale in arithmetic"
    CANNOT_USE_ARITHMETIC_ON_NON_MEASUREMENT_SCALE = (
        "cannot use arithmetic on a nominal or ordinal scale")
    CANNOT_CONVERT_NOMINAL_OR_ORDINAL_SCALE = (
        "cannot convert to or from a nominal or ordinal scale")
    UNKNOWN_LABEL = "unknown label for nominal or ordinal scale"
    NEGATIVE_VALUE_IN_RATIO_SCALE = "negative value in ratio scale"


class MeasureError(Enum):
    """Reasons for a `MeasureValidationError`."""
    NON_POSITIVE_ERROR = "error value must be positive"


class QuantityError(Enum):
    """Reasons for a `QuantityValidationError`."""
    OUT_OF_RANGE = "value out of range"
    ILLEGAL_SCALE_TYPE = "illegal scale type"


# ----------------------------------------------------------------------

class MeasurementError(ValueError):
    """
    Base class for all errors raised when units, scales, measures or
    quantities are used inconsistently.  These are ordinary recoverable
    errors; equality and ordering of measures catch them and return
    ``False`` instead.

    Notes
    -----
    Each derived error carries a `reason` enumeration member giving the
    specific kind of failure, and optionally a `details` string.
    """

    def __init__(self, reason: Enum, details: str = None):
        """
        Parameters
        ----------
        reason : Enum
            Member of the error family enumeration (`UnitError`,
            `ScaleError`, etc) giving the kind of failure.
        details : str, default = None
            Additional text relating to the specific failure.
        """
        super().__init__(reason.value)
        self.reason, self.details = reason, details

    def __str__(self):
        """Add the details after the main failure notice."""
        error_str = super().__str__()
        if self.details is not None:
            error_str += f": {self.details}"
        return error_str


class UnitValidationError(MeasurementError):
    """Raised when units are incompatible or badly defined."""
    reason: UnitError


class ScaleValidationError(MeasurementError):
    """Raised when scales are incompatible or used illegally."""
    reason: ScaleError


class MeasureValidationError(MeasurementError):
    """Raised when a measure is constructed with illegal values."""
    reason: MeasureError


class QuantityValidationError(MeasurementError):
    """Raised when a quantity value or scale is not permitted."""
    reason: QuantityError
