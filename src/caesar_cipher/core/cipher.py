"""Byte-wise Caesar transform.

Every one of the 256 byte values is shifted, NUL and newlines included;
this is a byte cipher, not a letter cipher.  Wraparound is explicit
modulo-256 arithmetic.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from caesar_cipher.core.models import Operation

logger = logging.getLogger(__name__)

_BYTE_RANGE: int = 256


@lru_cache(maxsize=_BYTE_RANGE)
def shift_table(shift: int) -> bytes:
    """Return the ``bytes.translate`` table mapping ``b`` to ``(b + shift) % 256``."""
    shift %= _BYTE_RANGE
    return bytes((value + shift) % _BYTE_RANGE for value in range(_BYTE_RANGE))


def transform(buffer: bytes | bytearray | memoryview, key: int, operation: Operation) -> bytes:
    """Apply the cipher in the given direction and return a new buffer.

    The result always has the same length as *buffer*, and
    ``transform(transform(x, k, ENCRYPT), k, DECRYPT) == x`` for every
    integer *k*.
    """
    shift = (key if operation is Operation.ENCRYPT else -key) % _BYTE_RANGE
    logger.debug("%s %d bytes with shift %d", operation.value, len(buffer), shift)
    return bytes(buffer).translate(shift_table(shift))


def encrypt(buffer: bytes | bytearray | memoryview, key: int) -> bytes:
    """Shift every byte up by *key*."""
    return transform(buffer, key, Operation.ENCRYPT)


def decrypt(buffer: bytes | bytearray | memoryview, key: int) -> bytes:
    """Shift every byte down by *key*."""
    return transform(buffer, key, Operation.DECRYPT)
