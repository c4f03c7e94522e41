"""
cbc_vigenere — CBC-Chained Vigenère Cipher
==========================================
A classroom Vigenère polyalphabetic cipher run in a cipher-block-chaining
mode: every block is blended with the previous ciphertext block (or the
IV for the first block) before the keyword shift is applied.

Pipeline:
    normalize   raw text → lowercase letters only (max 5000)
    validate    keyword + IV (equal length, alphabetic, max 10)
    encrypt     CBC-chained Vigenère, pads the last block with 'x'
    report      80-column listing + character / block / pad counters

Not modern-secure. Didactic analogue of block-cipher CBC mode.

License: Apache 2.0
"""

__version__  = "1.0.0"
__license__  = "Apache 2.0"

from .errors     import (
    CBCVigenereError,
    UsageError,
    KeyIvLengthMismatch,
    KeyInvalidCharacters,
    IvInvalidCharacters,
    SourceUnavailable,
)
from .values     import Message, Key, IV, Ciphertext, normalize
from .engine     import CBCVigenereCipher, EncryptionResult, encrypt
from .validation import Arguments, validate_arguments, load_message
from .report     import format_report, format_error

__all__ = [
    "CBCVigenereError",
    "UsageError",
    "KeyIvLengthMismatch",
    "KeyInvalidCharacters",
    "IvInvalidCharacters",
    "SourceUnavailable",
    "Message",
    "Key",
    "IV",
    "Ciphertext",
    "normalize",
    "CBCVigenereCipher",
    "EncryptionResult",
    "encrypt",
    "Arguments",
    "validate_arguments",
    "load_message",
    "format_report",
    "format_error",
]
