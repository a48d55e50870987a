"""Core layer — the cipher and its domain models.

Rules
-----
* No ``print()`` calls.
* No filesystem I/O.
* No imports from ``cli`` or ``infra``.
"""

from caesar_cipher.core.cipher import decrypt, encrypt, shift_table, transform
from caesar_cipher.core.models import CipherRequest, InfoRequest, Operation

__all__: list[str] = [
    "CipherRequest",
    "InfoRequest",
    "Operation",
    "decrypt",
    "encrypt",
    "shift_table",
    "transform",
]
