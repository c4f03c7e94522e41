"""
Value objects: Message, Key, IV, Ciphertext
===========================================
Immutable, length-bounded strings. Each checks its invariant once, at
construction, and raises ValueError if it does not hold.

Alphabet arithmetic works on offsets from 'a'. Key and IV letters are
NOT case-folded: an uppercase letter keeps its own (negative) offset,
so "LEMON" and "lemon" are different keys.
"""

from typing import Union

ALPHABET = "abcdefghijklmnopqrstuvwxyz"
ASCII_LETTERS = ALPHABET + ALPHABET.upper()
PAD_CHAR = "x"


def alpha_offset(ch: str) -> int:
    """Offset of `ch` from 'a'. Not reduced mod 26."""
    return ord(ch) - ord("a")


def is_ascii_alpha(text: str) -> bool:
    return all(c in ASCII_LETTERS for c in text)


class _Letters(str):
    """Base for the bounded letter strings."""

    MIN_LENGTH = 0
    MAX_LENGTH = None
    LETTERS    = ALPHABET

    def __new__(cls, value: str = ""):
        value = str(value)
        if len(value) < cls.MIN_LENGTH:
            raise ValueError(
                f"{cls.__name__} must be at least {cls.MIN_LENGTH} characters.")
        if cls.MAX_LENGTH is not None and len(value) > cls.MAX_LENGTH:
            raise ValueError(
                f"{cls.__name__} must be at most {cls.MAX_LENGTH} characters.")
        if any(c not in cls.LETTERS for c in value):
            raise ValueError(f"{cls.__name__} must be alphabetic.")
        return super().__new__(cls, value)

    def __repr__(self):
        return f"{type(self).__name__}({str.__repr__(self)})"


class Message(_Letters):
    """Clean plaintext: lowercase letters only, at most 5000 of them."""

    MAX_LENGTH = 5000


class Key(_Letters):
    """Vigenère keyword, 1..10 letters, case kept as given."""

    MIN_LENGTH = 1
    MAX_LENGTH = 10
    LETTERS    = ASCII_LETTERS


class IV(Key):
    """Initialization vector. Same shape as Key."""


class Ciphertext(_Letters):
    pass


def normalize(raw: Union[bytes, str], limit: int = Message.MAX_LENGTH) -> Message:
    """
    Reduce raw input to a Message.

    Drops every character that is not an ASCII letter, lowercases the
    rest and stops after `limit` letters. Anything beyond the limit is
    silently discarded.
    """
    if isinstance(raw, bytes):
        raw = raw.decode("latin-1")
    letters = []
    for ch in raw:
        if len(letters) >= limit:
            break
        if ch in ASCII_LETTERS:
            letters.append(ch.lower())
    return Message("".join(letters))
