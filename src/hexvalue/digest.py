# hexvalue/digest.py

"""Digest collaborator used by :meth:`HexValue.md5` and friends.

A provider is any callable ``provider(data, algorithm) -> bytes`` where
*algorithm* is one of :data:`ALGORITHMS`. The default provider wraps
:mod:`hashlib`; tests and callers may pass their own.
"""
from __future__ import annotations

import hashlib
import logging
from typing import Callable

from .__about__ import LOGGER_NAME
from .errors import UnsupportedDigestError

MD5 = "MD5"
SHA1 = "SHA-1"
SHA256 = "SHA-256"

ALGORITHMS = (MD5, SHA1, SHA256)

DigestProvider = Callable[[bytes, str], bytes]

_HASHLIB_NAMES = {
    MD5: "md5",
    SHA1: "sha1",
    SHA256: "sha256",
}

logger = logging.getLogger(LOGGER_NAME)


def normalize_algorithm(name: str) -> str:
    """Map loose spellings ("sha256", "sha-1", "Md5") to the canonical name."""
    key = name.strip().upper().replace("_", "-")
    for algorithm in ALGORITHMS:
        if key in (algorithm, algorithm.replace("-", "")):
            return algorithm
    raise UnsupportedDigestError(
        f"Unsupported digest algorithm: {name!r} (expected one of {', '.join(ALGORITHMS)})"
    )

def hashlib_digest(data: bytes, algorithm: str) -> bytes:
    """Default provider backed by :mod:`hashlib`."""
    canonical = normalize_algorithm(algorithm)
    logger.debug("computing %s over %d bytes", canonical, len(data))
    return hashlib.new(_HASHLIB_NAMES[canonical], data).digest()


__all__ = [
    "ALGORITHMS", "MD5", "SHA1", "SHA256",
    "DigestProvider", "hashlib_digest", "normalize_algorithm",
]
