# hexvalue/logic.py

from __future__ import annotations

import re
from typing import Iterable

from .errors import FormatError

PRINTABLE_MIN = 32
PRINTABLE_MAX = 126
ASCII_MAX = 127

_SEPARATORS_RE = re.compile(r"[\s:\-_]+")
_NON_HEX_RE = re.compile(r"[^0-9A-Fa-f]")


# ---------------- Hex text ----------------
def clean_hex(text: str) -> str:
    """Drop whitespace and the ``:`` ``-`` ``_`` separators anywhere in *text*."""
    return _SEPARATORS_RE.sub("", text)

def is_hex(text: str) -> bool:
    return _NON_HEX_RE.search(text) is None

def parse_hex_bytes(text: str) -> bytes:
    """Parse hex text into bytes.

    Accepts:
      - "C858B3B299DB" (continuous)
      - "C8 58 B3 B2 99 DB" (whitespace, including newlines and tabs)
      - "C8:58:B3", "C8-58-B3", "C8_58_B3" (separators, mixed freely)
      - lower or upper case digits

    Separators are removed first, so they may sit between nibbles too
    ("C-8" is the byte C8). An empty result is the empty byte string.
    """
    s = clean_hex(text)
    if len(s) % 2 != 0:
        raise FormatError(f"Hex length must be even: {len(s)}")

    bad = _NON_HEX_RE.search(s)
    if bad is not None:
        raise FormatError(f"Invalid hex character: {bad.group()!r}")

    return bytes(int(s[i : i + 2], 16) for i in range(0, len(s), 2))

def bytes_to_hex(data: Iterable[int]) -> str:
    """Uppercase hex, two digits per byte, no separators."""
    return "".join(f"{b:02X}" for b in data)


# ---------------- ASCII text ----------------
def ascii_to_bytes(text: str) -> bytes:
    """Encode *text* one byte per character; only code points 0..127 are allowed."""
    try:
        return text.encode("ascii")
    except UnicodeEncodeError as exc:
        ch = text[exc.start]
        raise FormatError(
            f"Non-ASCII character {ch!r} (U+{ord(ch):04X}) at position {exc.start}"
        ) from exc

def bytes_to_ascii(data: bytes) -> str:
    """Decode bytes as ASCII; bytes above 0x7F become U+FFFD."""
    return data.decode("ascii", errors="replace")

def bytes_to_ascii_runs(data: Iterable[int]) -> list[str]:
    """Group printable ASCII into strings; map non-printables to '.'.
    Coalesces contiguous non-printables into a single dot *except* 0x7F (DEL),
    which is always emitted as its own '.'.
    """
    runs: list[str] = []
    buf: list[str] = []

    def flush_buf():
        if buf:
            runs.append("".join(buf))
            buf.clear()

    for b in data:
        if PRINTABLE_MIN <= b <= PRINTABLE_MAX:
            buf.append(chr(b))
            continue

        # non-printable
        flush_buf()
        if b == 0x7F:
            runs.append(".")
        else:
            if not runs or runs[-1] != ".":
                runs.append(".")

    flush_buf()
    return runs


# ---------------- Byte-wise logic ----------------
def and_bytes(a: bytes, b: bytes) -> bytes:
    return (int.from_bytes(a, "big") & int.from_bytes(b, "big")).to_bytes(len(a), "big")

def or_bytes(a: bytes, b: bytes) -> bytes:
    return (int.from_bytes(a, "big") | int.from_bytes(b, "big")).to_bytes(len(a), "big")

def xor_bytes(a: bytes, b: bytes) -> bytes:
    return (int.from_bytes(a, "big") ^ int.from_bytes(b, "big")).to_bytes(len(a), "big")

def invert_bytes(data: bytes) -> bytes:
    """One's complement of every byte."""
    return bytes(~x & 0xFF for x in data)


# ---------------- Numbers ----------------
def parse_int_maybe(text: str) -> int:
    """Parse an integer accepting 0x/0b/0o prefixes or decimal."""
    s = text.strip().replace("_", "")
    if not s:
        raise ValueError("Enter a number (e.g., 16 or 0x10).")
    return int(s, 0)


# ---------------- Ranges ----------------
def clamp(value: int, lo: int, hi: int) -> int:
    return max(lo, min(value, hi))
