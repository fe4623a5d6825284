"""
Exception types raised by the number parser.
"""


class NumberParserError(Exception):
    """Base class for all number parser errors."""
    pass


class NumberFormatError(NumberParserError, ValueError):
    """Raised when a piece of the numbers token is not a signed integer."""
    pass


class UnsupportedFormatError(NumberParserError, ValueError):
    """Raised when the requested output format has no writer."""
    pass


class PersistError(NumberParserError):
    """Raised when the output file cannot be written."""
    pass
