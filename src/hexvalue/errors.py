# hexvalue/errors.py

"""Exceptions raised by :mod:`hexvalue`.

Everything derives from :class:`HexValueError`, which is a ``ValueError`` so
callers that only care about "bad input" can keep catching that.
"""


class HexValueError(ValueError):
    """Base class for all hexvalue errors."""


class FormatError(HexValueError):
    """Malformed hex text or non-ASCII text."""


class RangeError(HexValueError, IndexError):
    """Offset, length or index outside what a strict operation accepts."""


class SizeMismatchError(HexValueError):
    """Operands of a byte-wise AND/OR/XOR differ in size."""


class UnsupportedDigestError(HexValueError):
    """The digest provider does not know the requested algorithm."""


__all__ = [
    "HexValueError",
    "FormatError",
    "RangeError",
    "SizeMismatchError",
    "UnsupportedDigestError",
]
