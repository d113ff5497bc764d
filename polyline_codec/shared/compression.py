"""
Compression utilities for integer sequences.
Implements the encoded polyline character scheme (5-bit groups, ASCII offset 63)
for unsigned integers, plus the zigzag mapping for signed integers.
"""

from typing import Iterable, List, Union

from polyline_codec.shared.config import (
    CHUNK_BITS,
    CHUNK_MASK,
    CONTINUATION_THRESHOLD,
    TERMINAL_OFFSET,
    CONTINUATION_OFFSET,
    ALPHABET_END,
)
from polyline_codec.shared.errors import InvalidCharacterError, UnterminatedError

# ---------------------------------------------------------
#   Unsigned integers
# ---------------------------------------------------------

def encode_uint(num: int) -> str:
    """
    Encode a single non-negative integer.
    - Break the integer into groups of 5 bits.
    - Write those groups least significant first.
    - Every group but the last is offset by 95 (continuation), the last by 63 (terminal).
    """
    if num < 0:
        raise ValueError(f"num must be non-negative, got {num}")

    chars: List[str] = []
    while num >= CONTINUATION_THRESHOLD:
        chars.append(chr((num & CHUNK_MASK) + CONTINUATION_OFFSET))
        num >>= CHUNK_BITS
    chars.append(chr(num + TERMINAL_OFFSET))
    return "".join(chars)

def encode_uints(numbers: Iterable[int]) -> str:
    """Encode a sequence of non-negative integers as one string."""
    return "".join(encode_uint(num) for num in numbers)

def decode_uints(encoded: Union[str, bytes]) -> List[int]:
    """
    Decode an encoded string back into non-negative integers.
    - Read one byte at a time.
    - Accumulate continuation groups until a terminal byte closes the value.
    - Raises InvalidCharacterError for bytes outside [63, 127),
      UnterminatedError if the input stops mid-value.
    """
    data = encoded.encode("utf-8") if isinstance(encoded, str) else bytes(encoded)

    decoded_numbers: List[int] = []
    num = shift = 0

    for i, byte in enumerate(data):
        if TERMINAL_OFFSET <= byte < CONTINUATION_OFFSET:
            # Terminal group closes the current value
            decoded_numbers.append(num + ((byte - TERMINAL_OFFSET) << shift))
            num = shift = 0
        elif CONTINUATION_OFFSET <= byte < ALPHABET_END:
            num += (byte - CONTINUATION_OFFSET) << shift
            shift += CHUNK_BITS
        else:
            raise InvalidCharacterError(i, byte)

    if shift != 0:
        raise UnterminatedError()

    return decoded_numbers

# ---------------------------------------------------------
#   Signed integers (zigzag)
# ---------------------------------------------------------

def zigzag_encode(num: int) -> int:
    """Map a signed integer to an unsigned one: 0, -1, 1, -2, 2 ... -> 0, 1, 2, 3, 4 ..."""
    if num < 0:
        return ~(num << 1)
    return num << 1

def zigzag_decode(num: int) -> int:
    if num & 1:
        return -((num + 1) >> 1)
    return num >> 1

def encode_int(num: int) -> str:
    """Encode a single signed integer."""
    return encode_uint(zigzag_encode(num))

def encode_ints(numbers: Iterable[int]) -> str:
    """Encode a sequence of signed integers as one string."""
    return "".join(encode_int(num) for num in numbers)

def decode_ints(encoded: Union[str, bytes]) -> List[int]:
    """Decode an encoded string into signed integers. Decode errors propagate unchanged."""
    return [zigzag_decode(num) for num in decode_uints(encoded)]
