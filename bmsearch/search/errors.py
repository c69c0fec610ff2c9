from typing import Optional


class BoyerMooreError(ValueError):
    """Base exception for Boyer-Moore preprocessing and query errors."""
    pass


class InvalidPatternLength(BoyerMooreError):
    """Raised when a pattern is too short (length <= 1) to be preprocessed."""

    def __init__(self, length: int, message: Optional[str] = None) -> None:
        self.length = length
        super().__init__(message or f"Length of string must be greater than 1, got: {length}")


class SymbolNotInAlphabet(BoyerMooreError):
    """Raised when a pattern or query character is missing from the alphabet."""

    def __init__(self, symbol: str) -> None:
        self.symbol = symbol
        super().__init__(f"{symbol!r} not found in alphabet")


class InvalidOffset(BoyerMooreError):
    """Raised when an offset does not address a position of the pattern."""

    def __init__(self, offset: int, length: int) -> None:
        self.offset = offset
        self.length = length
        super().__init__(f"Invalid offset {offset} for pattern of length {length}")


class InvalidAlphabet(BoyerMooreError):
    """Raised when an alphabet is empty, repeats a symbol or holds multi-byte symbols."""

    def __init__(self, alphabet: str, reason: str) -> None:
        self.alphabet = alphabet
        super().__init__(f"Invalid alphabet {alphabet!r}: {reason}")
