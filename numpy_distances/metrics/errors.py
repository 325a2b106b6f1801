"""Exceptions and warnings raised by the distance functions"""
from enum import Enum

__all__ = [
    "ErrorKind",
    "DistanceError",
    "DimensionMismatchError",
    "InvalidParameterError",
    "DegenerateInputError",
    "DistanceWarning",
]


class ErrorKind(Enum):
    DIMENSION_MISMATCH = "dimension_mismatch"
    INVALID_PARAMETER = "invalid_parameter"
    DEGENERATE_INPUT = "degenerate_input"


class DistanceError(ValueError):
    """Base class for errors raised by distance functions in strict mode"""

    kind = None

    def __init__(self, msg):
        super().__init__(msg)
        self.msg = msg

    def __repr__(self):
        return "{}(kind={}, msg={!r})".format(
            self.__class__.__name__, self.kind.value, self.msg
        )


class DimensionMismatchError(DistanceError):
    """Input vectors do not have the same number of dimensions"""

    kind = ErrorKind.DIMENSION_MISMATCH


class InvalidParameterError(DistanceError):
    """An exponent, weight, or coordinate lies outside its valid range"""

    kind = ErrorKind.INVALID_PARAMETER


class DegenerateInputError(DistanceError):
    """A denominator in the distance formula is exactly zero"""

    kind = ErrorKind.DEGENERATE_INPUT


class DistanceWarning(RuntimeWarning):
    pass
