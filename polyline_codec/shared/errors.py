"""
Errors raised while decoding encoded polylines.
"""

class PolylineDecodeError(ValueError):
    """Base class for malformed polyline input."""


class InvalidCharacterError(PolylineDecodeError):
    """
    A byte outside the alphabet [63, 127) was found.
    - position: zero-based byte offset in the input
    - character: offending byte value
    """

    def __init__(self, position: int, character: int) -> None:
        self.position = position
        self.character = character
        super().__init__(f"invalid character {chr(character)!r} at position {position}")


class UnterminatedError(PolylineDecodeError):
    """The input ended while a multi-character value was still accumulating."""

    def __init__(self) -> None:
        super().__init__("unterminated string")
