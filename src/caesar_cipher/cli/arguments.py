"""Command-line argument parsing for caesar-cipher.

The command line is dispatched on its arity rather than through
:meth:`argparse.ArgumentParser.parse_args`: the tool promises fixed,
single-line error messages and must never exit from inside the parser.
``argparse`` is still used to describe the surface and render ``--help``.

Accepted forms::

    caesar-cipher [-e | -d] key input_file output_file
    caesar-cipher -h | --help
    caesar-cipher -v | --version
"""

from __future__ import annotations

import argparse
import re
from collections.abc import Sequence

from caesar_cipher.config import DEFAULT_SETTINGS, Settings
from caesar_cipher.core.models import CipherRequest, InfoRequest, Operation
from caesar_cipher.exceptions import (
    ArgumentCountError,
    InvalidFilenameError,
    InvalidKeyError,
    UnrecognizedArgumentError,
)
from caesar_cipher.version import __version__

ENCRYPT_FLAGS: tuple[str, ...] = ("--encrypt", "-e")
DECRYPT_FLAGS: tuple[str, ...] = ("--decrypt", "-d")
HELP_FLAGS: tuple[str, ...] = ("--help", "-h")
VERSION_FLAGS: tuple[str, ...] = ("--version", "-v")

_MODES: dict[str, Operation] = {
    **{flag: Operation.ENCRYPT for flag in ENCRYPT_FLAGS},
    **{flag: Operation.DECRYPT for flag in DECRYPT_FLAGS},
}

_INFO_FLAGS: dict[str, InfoRequest] = {
    **{flag: InfoRequest.HELP for flag in HELP_FLAGS},
    **{flag: InfoRequest.VERSION for flag in VERSION_FLAGS},
}

_REQUEST_ARITY: int = 4
"""mode, key, input_file, output_file."""

_KEY_PATTERN = re.compile(r"\s*[+-]?[0-9]+\s*")

_BYTE_RANGE: int = 256


# ---------------------------------------------------------------------------
# Help / version rendering
# ---------------------------------------------------------------------------

def _build_parser(settings: Settings) -> argparse.ArgumentParser:
    """Describe the command line for help rendering only."""
    parser = argparse.ArgumentParser(
        prog=settings.program_name,
        usage="%(prog)s [-e | -d] key input_file output_file",
        description="Shift every byte of a file by an integer key (Caesar cipher).",
        add_help=False,
    )
    parser.add_argument(
        "-d", "--decrypt", action="store_true",
        help="decrypt input_file with the given key",
    )
    parser.add_argument(
        "-e", "--encrypt", action="store_true",
        help="encrypt input_file with the given key",
    )
    parser.add_argument(
        "-h", "--help", action="store_true",
        help="display this help and exit",
    )
    parser.add_argument(
        "-v", "--version", action="store_true",
        help="display version and exit",
    )
    parser.add_argument("key", help="integer shift applied to every byte")
    parser.add_argument("input_file", help="file to read")
    parser.add_argument("output_file", help="file to create or overwrite")
    return parser


def format_help(settings: Settings = DEFAULT_SETTINGS) -> str:
    """Return the usage text shown by ``--help``."""
    return _build_parser(settings).format_help().rstrip("\n")


def format_version(settings: Settings = DEFAULT_SETTINGS) -> str:
    """Return the line shown by ``--version``."""
    return f"{settings.program_name} version {__version__}"


# ---------------------------------------------------------------------------
# Validators
# ---------------------------------------------------------------------------

def _fold_key(text: str) -> int:
    """Reduce a decimal key modulo 256 one digit at a time."""
    digits = text.strip()
    sign = -1 if digits.startswith("-") else 1
    value = 0
    for digit in digits.lstrip("+-"):
        value = (value * 10 + int(digit)) % _BYTE_RANGE
    return sign * value


def parse_key(text: str) -> int:
    """Parse a base-10 integer key, tolerating surrounding whitespace.

    Keys too long for :func:`int` are reduced modulo 256, which is all
    the cipher ever uses of them.
    """
    if not _KEY_PATTERN.fullmatch(text):
        raise InvalidKeyError(text)
    try:
        return int(text)
    except ValueError:
        return _fold_key(text)


def validate_filename(name: str, settings: Settings = DEFAULT_SETTINGS) -> str:
    """Return *name* unchanged if it is non-blank and short enough."""
    if not name.strip() or len(name) > settings.max_filename_length:
        raise InvalidFilenameError(name)
    return name


def parse_mode(flag: str) -> Operation:
    """Map ``-e``/``--encrypt``/``-d``/``--decrypt`` to an :class:`Operation`."""
    try:
        return _MODES[flag]
    except KeyError:
        raise UnrecognizedArgumentError(flag) from None


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

def parse_arguments(
    argv: Sequence[str],
    settings: Settings = DEFAULT_SETTINGS,
) -> CipherRequest | InfoRequest:
    """Turn the arguments (program name excluded) into a request.

    Raises
    ------
    ArgumentCountError
        Zero, two or three arguments (``missing arguments``) or more than
        four (``too many arguments``).
    UnrecognizedArgumentError
        Unknown single flag, or unknown cipher mode.
    InvalidKeyError
        The key is not an integer.
    InvalidFilenameError
        A path is blank or exceeds ``settings.max_filename_length``.
    """
    args = list(argv)

    if len(args) == 1:
        flag = args[0]
        if flag not in _INFO_FLAGS:
            raise UnrecognizedArgumentError(flag)
        return _INFO_FLAGS[flag]

    if len(args) > _REQUEST_ARITY:
        raise ArgumentCountError("too many arguments")
    if len(args) < _REQUEST_ARITY:
        raise ArgumentCountError("missing arguments")

    mode, key_text, input_path, output_path = args
    # Checked in order: key, input, output, mode.
    key = parse_key(key_text)
    validate_filename(input_path, settings)
    validate_filename(output_path, settings)
    operation = parse_mode(mode)

    return CipherRequest(
        operation=operation,
        key=key,
        input_path=input_path,
        output_path=output_path,
    )
