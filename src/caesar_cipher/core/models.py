"""Domain models for caesar-cipher.

All models are immutable: enums and a frozen dataclass with no I/O and
no behaviour beyond data access.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass


# ---------------------------------------------------------------------------
# Requested operation
# ---------------------------------------------------------------------------

class Operation(enum.Enum):
    """Direction of the byte shift."""

    ENCRYPT = "encrypt"
    DECRYPT = "decrypt"

    @property
    def past_tense(self) -> str:
        """Verb used in the success message (``encrypted``/``decrypted``)."""
        return f"{self.value}ed"


class InfoRequest(enum.Enum):
    """Informational outcomes of argument parsing."""

    HELP = "help"
    VERSION = "version"


# ---------------------------------------------------------------------------
# Transform request
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class CipherRequest:
    """A validated request to encrypt or decrypt one file into another."""

    operation: Operation
    """Whether to add or subtract the key."""

    key: int
    """Shift amount.  Any integer; reduced modulo 256 when applied."""

    input_path: str
    """File to read."""

    output_path: str
    """File to create or truncate."""
