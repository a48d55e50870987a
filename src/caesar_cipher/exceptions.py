"""Custom exception hierarchy for caesar-cipher.

Every failure the user can trigger maps to a subclass of
:class:`CaesarCipherError`.  Components raise these; only the CLI error
boundary turns them into output and an exit code.  Raw ``OSError`` and
``MemoryError`` must never propagate beyond the infrastructure layer.

Hierarchy
---------
CaesarCipherError
├── ArgumentError
│   ├── ArgumentCountError
│   ├── UnrecognizedArgumentError
│   ├── InvalidKeyError
│   └── InvalidFilenameError
├── InputFileNotFoundError
├── WriteFailureError
└── OutOfMemoryError
"""

from __future__ import annotations


class CaesarCipherError(Exception):
    """Base exception for all caesar-cipher errors.

    The string form is the single-line cause printed after the
    ``caesar-cipher: error:`` header.
    """


# --- Command line ----------------------------------------------------------

class ArgumentError(CaesarCipherError):
    """Raised when the command line cannot be turned into a request."""


class ArgumentCountError(ArgumentError):
    """Raised when too few or too many arguments are supplied."""


class UnrecognizedArgumentError(ArgumentError):
    """Raised for an unknown flag or cipher mode."""

    def __init__(self, argument: str) -> None:
        super().__init__(f"unrecognized arguments {argument}")
        self.argument: str = argument


class InvalidKeyError(ArgumentError):
    """Raised when the key is not an integer."""

    def __init__(self, key: str) -> None:
        super().__init__("invalid key")
        self.key: str = key


class InvalidFilenameError(ArgumentError):
    """Raised when a path is blank or longer than the configured limit."""

    def __init__(self, filename: str) -> None:
        super().__init__(f"filename {filename} invalid")
        self.filename: str = filename


# --- File I/O --------------------------------------------------------------

class InputFileNotFoundError(CaesarCipherError):
    """Raised when the input file cannot be opened for reading."""

    def __init__(self, path: str, *, reason: str = "does not exist") -> None:
        super().__init__(f"the file {path} {reason}")
        self.path: str = path


class WriteFailureError(CaesarCipherError):
    """Raised when the output file cannot be written."""

    def __init__(self, path: str) -> None:
        super().__init__(f"impossible to write in file {path}")
        self.path: str = path


class OutOfMemoryError(CaesarCipherError):
    """Raised when the input file does not fit in memory."""

    def __init__(self) -> None:
        super().__init__("memory allocation failure")
