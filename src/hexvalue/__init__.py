# hexvalue/__init__.py

"""hexvalue package.

Re-exports the value type, its errors and the byte helpers for convenient
imports in tests or other code.
"""
from .__about__ import (
    __version__,
    APP_NAME,
    APP_TITLE,
    LOGGER_NAME,
    AUTHOR,
    COPYRIGHT,
    COPYRIGHT_YEAR,
)

from .errors import (
    HexValueError,
    FormatError,
    RangeError,
    SizeMismatchError,
    UnsupportedDigestError,
)

from .digest import (
    ALGORITHMS,
    MD5,
    SHA1,
    SHA256,
    DigestProvider,
    hashlib_digest,
)

from .logic import (
    bytes_to_ascii_runs,
    bytes_to_hex,
    clean_hex,
    is_hex,
    parse_hex_bytes,
)

from .value import (
    HexValue,
    and_,
    or_,
    xor,
    not_,
    compare,
    equals,
    concat,
    left,
    right,
    mid,
    lpad,
    rpad,
)

__all__ = [
    # Metadata
    "__version__", "APP_NAME", "APP_TITLE", "LOGGER_NAME",
    "AUTHOR", "COPYRIGHT", "COPYRIGHT_YEAR",
    # Errors
    "HexValueError", "FormatError", "RangeError",
    "SizeMismatchError", "UnsupportedDigestError",
    # Digests
    "ALGORITHMS", "MD5", "SHA1", "SHA256", "DigestProvider", "hashlib_digest",
    # Logic
    "bytes_to_ascii_runs", "bytes_to_hex", "clean_hex", "is_hex", "parse_hex_bytes",
    # Value
    "HexValue", "and_", "or_", "xor", "not_", "compare", "equals", "concat",
    "left", "right", "mid", "lpad", "rpad",
]
