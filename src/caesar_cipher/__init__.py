"""caesar-cipher — additive byte-shift cipher for whole files.

A toy Caesar cipher: every byte of the input file is shifted by an
integer key with 8-bit wraparound.  Not secure encryption.
"""

from caesar_cipher.version import __version__

__all__: list[str] = ["__version__"]
