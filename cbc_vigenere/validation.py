"""
Argument validation and plaintext loading
=========================================
Checks run in a fixed order and the first failure wins:

    1. exactly three arguments: <file> <keyword> <iv>
    2. keyword and IV of equal length
    3. both cut to Key.MAX_LENGTH
    4. keyword alphabetic
    5. IV alphabetic

Only then is the file opened. Nothing here encrypts.
"""

import logging
from typing import NamedTuple, Sequence

from .errors import (
    IvInvalidCharacters,
    KeyInvalidCharacters,
    KeyIvLengthMismatch,
    SourceUnavailable,
    UsageError,
)
from .values import IV, Key, Message, is_ascii_alpha, normalize

logger = logging.getLogger(__name__)


class Arguments(NamedTuple):
    source: str
    key:    Key
    iv:     IV


def truncate(text: str, limit: int = Key.MAX_LENGTH) -> str:
    return text[:limit]


def validate_arguments(args: Sequence[str], prog: str = "cbc-vigenere") -> Arguments:
    """Validate <file> <keyword> <iv>. Raises a CBCVigenereError subclass."""
    if len(args) != 3:
        raise UsageError(prog)
    source, keyword, iv = args

    # length is compared before truncation
    if len(keyword) != len(iv):
        raise KeyIvLengthMismatch()
    if len(keyword) > Key.MAX_LENGTH:
        logger.info("keyword and IV truncated to %d characters", Key.MAX_LENGTH)
        keyword, iv = truncate(keyword), truncate(iv)

    if not keyword or not is_ascii_alpha(keyword):
        raise KeyInvalidCharacters()
    if not is_ascii_alpha(iv):
        raise IvInvalidCharacters()

    return Arguments(source, Key(keyword), IV(iv))


def load_message(source: str, limit: int = Message.MAX_LENGTH) -> Message:
    """Read `source` and reduce it to a clean Message."""
    try:
        with open(source, "rb") as f:
            raw = f.read()
    except OSError as e:
        raise SourceUnavailable(source) from e
    message = normalize(raw, limit)
    logger.debug("read %d bytes from %s, %d letters kept",
                 len(raw), source, len(message))
    return message
