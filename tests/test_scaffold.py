"""Smoke tests: verify scaffold wiring.

These tests prove that:
* The CLI entry points are importable and callable.
* The exception hierarchy is correctly structured.
* Version is accessible.
* Exit codes are defined.
"""

from __future__ import annotations

import pytest

from caesar_cipher import __version__
from caesar_cipher.cli import exit_codes
from caesar_cipher.cli.app import cli, main
from caesar_cipher.exceptions import (
    ArgumentCountError,
    ArgumentError,
    CaesarCipherError,
    InputFileNotFoundError,
    InvalidFilenameError,
    InvalidKeyError,
    OutOfMemoryError,
    UnrecognizedArgumentError,
    WriteFailureError,
)


# ---------------------------------------------------------------------------
# Version
# ---------------------------------------------------------------------------

class TestVersion:
    def test_version_is_string(self) -> None:
        assert isinstance(__version__, str)

    def test_version_is_major_minor(self) -> None:
        parts = __version__.split(".")
        assert len(parts) == 2
        assert all(part.isdigit() for part in parts)


# ---------------------------------------------------------------------------
# Exception hierarchy
# ---------------------------------------------------------------------------

class TestExceptions:
    @pytest.mark.parametrize(
        "exc_class",
        [
            ArgumentError,
            ArgumentCountError,
            UnrecognizedArgumentError,
            InvalidKeyError,
            InvalidFilenameError,
            InputFileNotFoundError,
            WriteFailureError,
            OutOfMemoryError,
        ],
    )
    def test_all_exceptions_inherit_from_base(
        self, exc_class: type[CaesarCipherError]
    ) -> None:
        assert issubclass(exc_class, CaesarCipherError)

    @pytest.mark.parametrize(
        "exc_class",
        [ArgumentCountError, UnrecognizedArgumentError, InvalidKeyError, InvalidFilenameError],
    )
    def test_argument_errors_share_parent(
        self, exc_class: type[CaesarCipherError]
    ) -> None:
        assert issubclass(exc_class, ArgumentError)

    def test_base_inherits_from_exception(self) -> None:
        assert issubclass(CaesarCipherError, Exception)

    def test_input_error_does_not_shadow_builtin(self) -> None:
        assert not issubclass(InputFileNotFoundError, FileNotFoundError)

    def test_messages(self) -> None:
        assert str(ArgumentCountError("missing arguments")) == "missing arguments"
        assert str(UnrecognizedArgumentError("--foo")) == "unrecognized arguments --foo"
        assert str(InvalidKeyError("abc")) == "invalid key"
        assert str(InvalidFilenameError("x")) == "filename x invalid"
        assert str(InputFileNotFoundError("a.txt")) == "the file a.txt does not exist"
        assert (
            str(InputFileNotFoundError("dir", reason="cannot be opened"))
            == "the file dir cannot be opened"
        )
        assert str(WriteFailureError("b.txt")) == "impossible to write in file b.txt"
        assert str(OutOfMemoryError()) == "memory allocation failure"

    def test_offending_values_are_kept(self) -> None:
        assert UnrecognizedArgumentError("--foo").argument == "--foo"
        assert InvalidKeyError("abc").key == "abc"
        assert InvalidFilenameError("x").filename == "x"
        assert WriteFailureError("b.txt").path == "b.txt"


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------

class TestExitCodes:
    def test_success_is_zero(self) -> None:
        assert exit_codes.SUCCESS == 0

    def test_general_error_is_one(self) -> None:
        assert exit_codes.GENERAL_ERROR == 1

    def test_keyboard_interrupt_is_130(self) -> None:
        assert exit_codes.KEYBOARD_INTERRUPT == 130

    def test_unexpected_error_is_two(self) -> None:
        assert exit_codes.UNEXPECTED_ERROR == 2


# ---------------------------------------------------------------------------
# Entry points
# ---------------------------------------------------------------------------

class TestEntryPoints:
    def test_main_is_callable(self) -> None:
        assert callable(main)

    def test_cli_is_callable(self) -> None:
        assert callable(cli)

    def test_dunder_main_importable(self) -> None:
        import caesar_cipher.__main__  # noqa: F401
