"""
Error taxonomy
==============
Raised by the validation / input layer before any encryption work starts.
The cipher engine itself never raises on valid input.

Every error carries a short heading and a human-readable detail line;
the CLI prints them as:

    Error: <heading>
    <detail>
"""

SYNTAX = "Invalid command line syntax"
FILE_IO = "File I/O exception"


class CBCVigenereError(Exception):
    """Base class. `heading` names the error class, `detail` explains it."""

    heading = SYNTAX

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail

    def __str__(self):
        return f"{self.heading}: {self.detail}"


class UsageError(CBCVigenereError, ValueError):
    """Wrong number of invocation arguments."""

    def __init__(self, prog: str = "cbc-vigenere"):
        super().__init__(
            "Proper syntax is as follows:\n"
            f"  {prog} <file> <keyword> <iv>"
        )


class KeyIvLengthMismatch(CBCVigenereError, ValueError):
    def __init__(self):
        super().__init__("Keyword and IV are of differing length")


class KeyInvalidCharacters(CBCVigenereError, ValueError):
    def __init__(self):
        super().__init__("Keyword contains invalid characters")


class IvInvalidCharacters(CBCVigenereError, ValueError):
    def __init__(self):
        super().__init__("IV contains invalid characters")


class SourceUnavailable(CBCVigenereError, OSError):
    """The named plaintext file could not be opened or read."""

    heading = FILE_IO

    def __init__(self, source: str):
        super().__init__(f"Could not open '{source}'")
        self.source = source
