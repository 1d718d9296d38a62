# hexvalue/value.py

from __future__ import annotations

from functools import reduce
from typing import Iterable, Iterator, Optional, Union

from .digest import MD5, SHA1, SHA256, DigestProvider, hashlib_digest, normalize_algorithm
from .errors import RangeError, SizeMismatchError
from .logic import (
    and_bytes,
    ascii_to_bytes,
    bytes_to_ascii,
    bytes_to_hex,
    clamp,
    invert_bytes,
    or_bytes,
    parse_hex_bytes,
    xor_bytes,
)

BytesLike = Union[bytes, bytearray, memoryview, Iterable[int]]


def _as_bytes(buffer: BytesLike) -> bytes:
    # bytes(5) would quietly build five zero bytes, bytes("..") needs an encoding
    if isinstance(buffer, (int, str)):
        raise TypeError(f"expected a bytes-like object, got {type(buffer).__name__}")
    try:
        return bytes(buffer)
    except ValueError as exc:
        raise RangeError(f"Byte values must be 0..255: {exc}") from exc


def _check_byte(value: int) -> int:
    if not 0 <= value <= 0xFF:
        raise RangeError(f"Byte value out of range 0..255: {value}")
    return value


class HexValue:
    """An immutable sequence of bytes that renders as uppercase hex.

    Build one with :meth:`empty`, :meth:`from_bytes`, :meth:`from_hex`,
    :meth:`from_ascii` or the dispatching :meth:`of`::

        >>> HexValue.of("C8-58-B3").concat(HexValue.of(b"\\x01"))
        HexValue('C858B301')

    Two families of sub-range helpers exist. ``left``, ``right`` and
    ``slice`` clamp their arguments and never raise. ``mid``, ``u1``,
    ``u2`` and ``un`` are meant for decoding fixed binary layouts and raise
    :class:`~hexvalue.errors.RangeError` on bad arguments (``mid`` still
    truncates an overlong length).
    """

    __slots__ = ("_data",)

    def __init__(self, data: BytesLike = b"") -> None:
        object.__setattr__(self, "_data", _as_bytes(data))

    @classmethod
    def _wrap(cls, data: bytes) -> "HexValue":
        # data must already be an immutable bytes object
        obj = object.__new__(cls)
        object.__setattr__(obj, "_data", data)
        return obj

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        return (type(self), (self._data,))

    # ---------------- Constructors ----------------
    @classmethod
    def empty(cls) -> "HexValue":
        return cls._wrap(b"")

    @classmethod
    def from_bytes(
        cls, buffer: BytesLike, offset: int = 0, length: Optional[int] = None
    ) -> "HexValue":
        """Copy ``length`` bytes of *buffer* starting at ``offset``.

        ``length`` defaults to everything after ``offset``. Raises
        :class:`RangeError` for a negative offset or length, or when the
        requested range runs past the end of *buffer*.
        """
        data = _as_bytes(buffer)
        if offset < 0:
            raise RangeError(f"Offset must be non-negative: {offset}")
        if offset > len(data):
            raise RangeError(f"Offset past end of buffer: {offset} (size={len(data)})")
        if length is None:
            length = len(data) - offset
        if length < 0:
            raise RangeError(f"Length must be non-negative: {length}")
        if offset + length > len(data):
            raise RangeError(
                f"Invalid offset/length (offset={offset}, length={length}, size={len(data)})"
            )
        return cls._wrap(data[offset : offset + length])

    @classmethod
    def from_hex(cls, text: str) -> "HexValue":
        """Parse hex text, ignoring whitespace and ``:`` ``-`` ``_`` separators."""
        return cls._wrap(parse_hex_bytes(text))

    @classmethod
    def from_ascii(cls, text: str) -> "HexValue":
        return cls._wrap(ascii_to_bytes(text))

    @classmethod
    def of(cls, value: Union[str, "HexValue", BytesLike]) -> "HexValue":
        """Hex text, an existing value, or anything :meth:`from_bytes` accepts."""
        if isinstance(value, HexValue):
            return value
        if isinstance(value, str):
            return cls.from_hex(value)
        return cls.from_bytes(value)

    # ---------------- Rendering ----------------
    def to_hex(self) -> str:
        return bytes_to_hex(self._data)

    def to_bytes(self) -> bytes:
        """Content as ``bytes``; immutable, so it never aliases anything mutable."""
        return self._data

    def to_ascii(self) -> str:
        return bytes_to_ascii(self._data)

    def __str__(self) -> str:
        return self.to_hex()

    def __repr__(self) -> str:
        return f"{type(self).__name__}('{self.to_hex()}')"

    def __bytes__(self) -> bytes:
        return self._data

    # ---------------- Size & access ----------------
    @property
    def size(self) -> int:
        return len(self._data)

    @property
    def is_empty(self) -> bool:
        return not self._data

    @property
    def last_index(self) -> int:
        """Index of the last byte, ``-1`` when empty."""
        return len(self._data) - 1

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[int]:
        return iter(self._data)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._data):
            raise RangeError(f"Index out of bounds: {index} (size={len(self._data)})")

    def byte_at(self, index: int) -> int:
        self._check_index(index)
        return self._data[index]

    def __getitem__(self, index: int) -> int:
        if not isinstance(index, int):
            raise TypeError("HexValue indices must be integers; use slice() or mid() for ranges")
        return self.byte_at(index)

    def with_byte_at(self, index: int, value: int) -> "HexValue":
        """Copy of this value with the byte at *index* replaced."""
        self._check_index(index)
        _check_byte(value)
        data = bytearray(self._data)
        data[index] = value
        return self._wrap(bytes(data))

    # ---------------- Sub-ranges (clamping) ----------------
    def left(self, n: int) -> "HexValue":
        if n <= 0:
            return self.empty()
        if n >= self.size:
            return self
        return self._wrap(self._data[:n])

    def right(self, n: int) -> "HexValue":
        if n <= 0:
            return self.empty()
        if n >= self.size:
            return self
        return self._wrap(self._data[self.size - n :])

    def slice(self, start: int, end: Optional[int] = None) -> "HexValue":
        """Bytes in ``[start, end)``; both bounds are clamped into ``[0, size]``."""
        size = self.size
        start = clamp(start, 0, size)
        end = size if end is None else clamp(end, 0, size)
        if start >= end:
            return self.empty()
        return self._wrap(self._data[start:end])

    # ---------------- Sub-ranges (strict) ----------------
    def mid(self, start: int, length: Optional[int] = None) -> "HexValue":
        """Bytes ``[start, start + length)``.

        Negative arguments raise :class:`RangeError`. A start at or past the
        end gives an empty value and an overlong length is cut at the end.
        """
        if start < 0:
            raise RangeError(f"Invalid start index: {start}")
        if length is None:
            length = max(self.size - start, 0)
        if length < 0:
            raise RangeError(f"Invalid length: {length}")
        if start >= self.size:
            return self.empty()
        return self._wrap(self._data[start : start + length])

    def u1(self, index: int) -> "HexValue":
        self._check_index(index)
        return self._wrap(self._data[index : index + 1])

    def u2(self, index: int) -> "HexValue":
        self._check_index(index)
        self._check_index(index + 1)
        return self._wrap(self._data[index : index + 2])

    def un(self, index: int, length: int) -> "HexValue":
        if not 0 <= index < self.size:
            raise RangeError(f"Invalid start index: {index} (size={self.size})")
        if length < 0 or index + length > self.size:
            raise RangeError(f"Invalid length: {length} at index {index} (size={self.size})")
        return self._wrap(self._data[index : index + length])

    # ---------------- Padding ----------------
    def lpad(self, total_length: int, pad_byte: int = 0x00) -> "HexValue":
        _check_byte(pad_byte)
        if total_length <= self.size:
            return self
        return self._wrap(bytes([pad_byte]) * (total_length - self.size) + self._data)

    def rpad(self, total_length: int, pad_byte: int = 0x00) -> "HexValue":
        _check_byte(pad_byte)
        if total_length <= self.size:
            return self
        return self._wrap(self._data + bytes([pad_byte]) * (total_length - self.size))

    # ---------------- Concatenation ----------------
    def concat(self, other: "HexValue") -> "HexValue":
        if not isinstance(other, HexValue):
            raise TypeError(f"can only concatenate HexValue, not {type(other).__name__}")
        if not other._data:
            return self
        if not self._data:
            return other
        return self._wrap(self._data + other._data)

    def __add__(self, other):
        if not isinstance(other, HexValue):
            return NotImplemented
        return self.concat(other)

    # ---------------- Bitwise ----------------
    def _require_same_size(self, other: "HexValue", op: str) -> None:
        if not isinstance(other, HexValue):
            raise TypeError(f"{op} needs a HexValue, not {type(other).__name__}")
        if self.size != other.size:
            raise SizeMismatchError(
                f"Hex sizes must be equal for {op}: {self.size} != {other.size}"
            )

    def and_(self, other: "HexValue") -> "HexValue":
        self._require_same_size(other, "AND")
        return self._wrap(and_bytes(self._data, other._data))

    def or_(self, other: "HexValue") -> "HexValue":
        self._require_same_size(other, "OR")
        return self._wrap(or_bytes(self._data, other._data))

    def xor(self, other: "HexValue") -> "HexValue":
        self._require_same_size(other, "XOR")
        return self._wrap(xor_bytes(self._data, other._data))

    def not_(self) -> "HexValue":
        return self._wrap(invert_bytes(self._data))

    inverse = not_

    def __and__(self, other):
        if not isinstance(other, HexValue):
            return NotImplemented
        return self.and_(other)

    def __or__(self, other):
        if not isinstance(other, HexValue):
            return NotImplemented
        return self.or_(other)

    def __xor__(self, other):
        if not isinstance(other, HexValue):
            return NotImplemented
        return self.xor(other)

    def __invert__(self) -> "HexValue":
        return self.not_()

    # ---------------- Comparison ----------------
    def compare(self, other: "HexValue") -> int:
        """-1, 0 or 1; byte-wise, a strict prefix sorts first."""
        if not isinstance(other, HexValue):
            raise TypeError(f"can only compare HexValue, not {type(other).__name__}")
        a, b = self._data, other._data
        return (a > b) - (a < b)

    def equals(self, other: object) -> bool:
        return isinstance(other, HexValue) and self._data == other._data

    def __eq__(self, other) -> bool:
        if not isinstance(other, HexValue):
            return NotImplemented
        return self._data == other._data

    def __hash__(self) -> int:
        return hash(self._data)

    def __lt__(self, other):
        if not isinstance(other, HexValue):
            return NotImplemented
        return self._data < other._data

    def __le__(self, other):
        if not isinstance(other, HexValue):
            return NotImplemented
        return self._data <= other._data

    def __gt__(self, other):
        if not isinstance(other, HexValue):
            return NotImplemented
        return self._data > other._data

    def __ge__(self, other):
        if not isinstance(other, HexValue):
            return NotImplemented
        return self._data >= other._data

    # ---------------- Digests ----------------
    def digest(self, algorithm: str, provider: Optional[DigestProvider] = None) -> "HexValue":
        """Digest of the whole content, computed by *provider* (hashlib by default)."""
        canonical = normalize_algorithm(algorithm)
        provider = provider or hashlib_digest
        return HexValue(provider(self._data, canonical))

    def md5(self, provider: Optional[DigestProvider] = None) -> "HexValue":
        return self.digest(MD5, provider)

    def sha1(self, provider: Optional[DigestProvider] = None) -> "HexValue":
        return self.digest(SHA1, provider)

    def sha256(self, provider: Optional[DigestProvider] = None) -> "HexValue":
        return self.digest(SHA256, provider)


# ---------------- Function forms ----------------
def and_(a: HexValue, b: HexValue) -> HexValue:
    return a.and_(b)

def or_(a: HexValue, b: HexValue) -> HexValue:
    return a.or_(b)

def xor(a: HexValue, b: HexValue) -> HexValue:
    return a.xor(b)

def not_(a: HexValue) -> HexValue:
    return a.not_()

def compare(a: HexValue, b: HexValue) -> int:
    return a.compare(b)

def equals(a: HexValue, b: HexValue) -> bool:
    return a.equals(b)

def concat(*values: HexValue) -> HexValue:
    """Left-to-right concatenation; no arguments gives the empty value."""
    return reduce(HexValue.concat, values, HexValue.empty())

def left(value: HexValue, n: int) -> HexValue:
    return value.left(n)

def right(value: HexValue, n: int) -> HexValue:
    return value.right(n)

def mid(value: HexValue, start: int, length: Optional[int] = None) -> HexValue:
    return value.mid(start, length)

def lpad(value: HexValue, total_length: int, pad_byte: int = 0x00) -> HexValue:
    return value.lpad(total_length, pad_byte)

def rpad(value: HexValue, total_length: int, pad_byte: int = 0x00) -> HexValue:
    return value.rpad(total_length, pad_byte)


__all__ = [
    "HexValue",
    "and_", "or_", "xor", "not_",
    "compare", "equals", "concat",
    "left", "right", "mid", "lpad", "rpad",
]
