"""
Exceptions raised by the curve model.
"""


class CurveError(Exception):
    """Base class for curve model errors."""


class OutOfRange(CurveError, IndexError):
    """Control point index does not exist."""


class Degenerate(CurveError, ZeroDivisionError):
    """A display vector has zero magnitude and cannot be normalized."""
