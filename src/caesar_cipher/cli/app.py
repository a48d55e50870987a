"""CLI application entry point for caesar-cipher.

This module is the **sole error boundary** for the entire application.
It catches :class:`~caesar_cipher.exceptions.CaesarCipherError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, prints a single
``caesar-cipher: error:`` line to stdout and returns a well-defined exit
code.

Architecture notes
------------------
* No business logic lives here — parsing, the cipher and file I/O are
  delegated to ``cli.arguments``, ``core`` and ``infra``.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import logging
import sys

from caesar_cipher.cli import exit_codes
from caesar_cipher.cli.arguments import format_help, format_version, parse_arguments
from caesar_cipher.cli.console import console
from caesar_cipher.config import DEFAULT_SETTINGS, Settings
from caesar_cipher.core.cipher import transform
from caesar_cipher.core.models import CipherRequest, InfoRequest
from caesar_cipher.exceptions import CaesarCipherError
from caesar_cipher.infra.file_io import load, save
from caesar_cipher.log import configure_logging

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_transform(request: CipherRequest) -> int:
    """Load the input, shift it, write the output.

    The output file is only opened once the input has been read, so a
    missing input never creates or truncates the output.
    """
    data = load(request.input_path)
    result = transform(data, request.key, request.operation)
    save(request.output_path, result)

    logger.info(
        "%s %s -> %s (%d bytes)",
        request.operation.value, request.input_path, request.output_path, len(result),
    )
    console.print(f"file successfully {request.operation.past_tense}")
    return exit_codes.SUCCESS


def _handle_info(request: InfoRequest, settings: Settings) -> int:
    if request is InfoRequest.HELP:
        console.print(format_help(settings))
    else:
        console.print(format_version(settings))
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None, settings: Settings | None = None) -> int:
    """Run the caesar-cipher CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.
    settings:
        Overrides for :data:`~caesar_cipher.config.DEFAULT_SETTINGS`.

    Returns
    -------
    int
        OS process exit code.  Domain errors are raised, not returned.
    """
    settings = settings or DEFAULT_SETTINGS
    args = sys.argv[1:] if argv is None else argv

    request = parse_arguments(args, settings)
    if isinstance(request, InfoRequest):
        return _handle_info(request, settings)
    return _handle_transform(request)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli(argv: list[str] | None = None) -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    configure_logging()
    try:
        code = main(argv)
        sys.exit(code)
    except CaesarCipherError as exc:
        console.error(str(exc))
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("Aborted by user.")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        logger.debug("Unhandled exception", exc_info=True)
        console.error(f"unexpected error ({type(exc).__name__}: {exc})")
        sys.exit(exit_codes.UNEXPECTED_ERROR)
