"""Infrastructure layer — filesystem access.

Every raw ``OSError`` or ``MemoryError`` must be caught here and
re-raised as a :class:`~caesar_cipher.exceptions.CaesarCipherError`
subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
"""

from caesar_cipher.infra.file_io import load, save

__all__: list[str] = ["load", "save"]
