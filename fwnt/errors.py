"""Exceptions raised by the fwnt package."""


class FwntError(Exception):
    """Base class for all errors raised by this package."""


class ArgumentError(FwntError, ValueError):
    """An argument passed to a function is invalid."""


class BoundsError(FwntError, ValueError):
    """A value, either passed in or read from data, is out of bounds."""


class UnsupportedValueError(FwntError, ValueError):
    """A value is valid in form but not supported."""