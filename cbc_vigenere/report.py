"""
Console report
==============
Echoes the inputs, lists the clean plaintext and the ciphertext in
80-column lines and closes with three counters: clean plaintext length,
block size and pad count.
"""

from typing import Iterator

from .engine import EncryptionResult
from .errors import CBCVigenereError

TITLE        = "CBC Vigenere"
REPORT_WIDTH = 80


def wrap_columns(text: str, width: int = REPORT_WIDTH) -> Iterator[str]:
    """Fixed-width chunks of `text`. No word breaking; the text has no spaces."""
    for i in range(0, len(text), width):
        yield text[i:i + width]


def _listing(title: str, text: str, width: int) -> str:
    body = "".join("\n" + chunk for chunk in wrap_columns(text, width))
    return f"{title}\n{body}\n\n"


def format_report(source: str, message: str, key: str, iv: str,
                  result: EncryptionResult, width: int = REPORT_WIDTH) -> str:
    return (
        f"{TITLE}\n"
        f"Plaintext file name: {source}\n"
        f"Vigenere keyword: {key}\n"
        f"Initialization vector: {iv}\n\n"
        + _listing("Clean Plaintext:", message, width)
        + _listing("Ciphertext: ", result.ciphertext, width)
        + f"Number of characters in clean plaintext file: {len(message)}\n"
        f"Block size = {len(key)}\n"
        f"Number of pad characters added: {result.pad_count}\n"
    )


def format_error(err: CBCVigenereError) -> str:
    return f"Error: {err.heading}\n{err.detail}\n\n"
