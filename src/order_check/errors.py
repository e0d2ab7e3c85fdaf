"""Errors raised while loading, normalizing and checking order records."""

class OrderCheckError(Exception):
    """Base error for this package."""


class RuleError(OrderCheckError):
    """Raised when a normalization rule names an unknown op or field."""


class ParseError(OrderCheckError):
    """Raised when an input document cannot be parsed into an order."""


class InputPathError(OrderCheckError):
    """Raised when the input path is missing, of the wrong type, or empty."""
