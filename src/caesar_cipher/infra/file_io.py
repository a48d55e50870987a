"""Infrastructure: whole-file binary read and write.

Files are read fully into memory and written back in a single call.
No streaming, no atomic rename: a failed write may leave a partial or
empty output file.
"""

from __future__ import annotations

import logging
import os

from caesar_cipher.exceptions import (
    InputFileNotFoundError,
    OutOfMemoryError,
    WriteFailureError,
)

logger = logging.getLogger(__name__)


def load(path: str | os.PathLike[str]) -> bytes:
    """Read the whole file at *path* as raw bytes.

    Raises
    ------
    InputFileNotFoundError
        The file is missing or cannot be opened for reading.
    OutOfMemoryError
        The contents do not fit in memory.
    """
    name = os.fspath(path)
    try:
        with open(name, "rb") as fh:
            data = fh.read()
    except FileNotFoundError as exc:
        raise InputFileNotFoundError(name) from exc
    except OSError as exc:
        raise InputFileNotFoundError(name, reason="cannot be opened") from exc
    except MemoryError as exc:
        raise OutOfMemoryError() from exc

    logger.debug("Loaded %d bytes from %s", len(data), name)
    return data


def save(path: str | os.PathLike[str], buffer: bytes | bytearray | memoryview) -> None:
    """Write *buffer* to *path*, creating or truncating the file.

    Raises
    ------
    WriteFailureError
        The file cannot be opened or written.
    """
    name = os.fspath(path)
    try:
        with open(name, "wb") as fh:
            fh.write(buffer)
    except OSError as exc:
        raise WriteFailureError(name) from exc

    logger.debug("Wrote %d bytes to %s", len(buffer), name)
