"""
Cipher Engine: Vigenère in CBC mode
===================================
The message is cut into blocks of len(key) letters. Each letter is first
added to the chaining letter at the same offset (IV for block 0, the
previous ciphertext block afterwards), then shifted by the key letter:

    x    = (p + c_prev) mod 26
    cphr = (x + k)      mod 26

A short final block is completed with 'x' pad letters, which are
counted and returned alongside the ciphertext.

Identical plaintext blocks encrypt differently whenever the preceding
context differs. That is the CBC property; the underlying substitution is
still trivially breakable.
"""

import logging
from typing import NamedTuple

from .values import ALPHABET, PAD_CHAR, Ciphertext, IV, Key, Message, alpha_offset

logger = logging.getLogger(__name__)


class EncryptionResult(NamedTuple):
    ciphertext: Ciphertext
    pad_count:  int

    def block_count(self, block_size: int) -> int:
        return len(self.ciphertext) // block_size


def encrypt(message: str, key: str, iv: str) -> EncryptionResult:
    """
    Encrypt `message` under `key` and `iv`.

    Returns (ciphertext, pad_count). The ciphertext length is
    len(message) rounded up to a multiple of len(key); an empty message
    gives an empty ciphertext and no padding.
    """
    return CBCVigenereCipher(key, iv).encrypt(message)


class CBCVigenereCipher:
    """CBC-chained Vigenère bound to one keyword / IV pair."""

    PAD_CHAR = PAD_CHAR

    def __init__(self, key: str, iv: str):
        key, iv = Key(key), IV(iv)
        if len(key) != len(iv):
            raise ValueError("Key and IV must be the same length.")
        self._key    = key
        self._iv     = iv
        self._shifts = [alpha_offset(c) for c in key]

    @property
    def key(self) -> Key:
        return self._key

    @property
    def iv(self) -> IV:
        return self._iv

    @property
    def block_size(self) -> int:
        return len(self._key)

    def encrypt(self, message: str) -> EncryptionResult:
        message = Message(message)
        size    = self.block_size
        blocks  = -(-len(message) // size)
        out     = []
        pad_count = 0

        for b in range(blocks):
            # chaining input: IV, then the block just produced
            chain = self._iv if b == 0 else out[(b - 1) * size:b * size]
            for j in range(size):
                pos = b * size + j
                if pos < len(message):
                    p = message[pos]
                else:
                    p = self.PAD_CHAR
                    pad_count += 1
                # floor mod keeps uppercase key/IV letters inside a..z
                x = (alpha_offset(p) + alpha_offset(chain[j])) % 26
                out.append(ALPHABET[(x + self._shifts[j]) % 26])

        logger.debug("encrypted %d letters in %d blocks of %d, %d pad",
                     len(message), blocks, size, pad_count)
        return EncryptionResult(Ciphertext("".join(out)), pad_count)
