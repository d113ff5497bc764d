"""
Coordinate transform for encoded polylines.
Scales flat coordinate sequences to integers, delta-encodes each value against
the same axis of the previous point, and compresses the result.
"""

from math import isfinite
from typing import Iterable, List, Optional, Sequence, Tuple, Union

from polyline_codec.shared.compression import encode_ints, decode_ints
from polyline_codec.shared.config import DEFAULT_DIM, DEFAULT_PRECISION

def scale_factor(precision: int) -> float:
    """Return 10 ** precision as a float (1e5 for the default precision)."""
    if precision < 0:
        raise ValueError(f"precision must be non-negative, got {precision}")
    return float(10 ** precision)

def check_dim(dim: int) -> None:
    if dim < 1:
        raise ValueError(f"dim must be at least 1, got {dim}")

def encode(coords: Sequence[float], dim: int = DEFAULT_DIM, precision: int = DEFAULT_PRECISION) -> str:
    """
    Encode a flat coordinate sequence, e.g. [lat1, lng1, lat2, lng2, ...].
    - Scale each value by 10 ** precision and truncate toward zero (no rounding).
    - Replace each value from index dim onward by its difference to the value dim positions earlier.
    - Compress the resulting integers.
    The length need not be a multiple of dim. Raises ValueError for NaN or infinite coordinates.
    """
    check_dim(dim)
    factor = scale_factor(precision)

    scaled: List[int] = []
    for i, coord in enumerate(coords):
        if not isfinite(coord):
            raise ValueError(f"coordinate {i} is not finite: {coord}")
        scaled.append(int(factor * coord))

    # Convert to delta form right to left so earlier values are still absolute
    for i in range(len(scaled) - 1, dim - 1, -1):
        scaled[i] -= scaled[i - dim]

    return encode_ints(scaled)

def decode(encoded: Union[str, bytes], dim: int = DEFAULT_DIM, precision: int = DEFAULT_PRECISION) -> List[float]:
    """
    Decode an encoded polyline into a flat coordinate sequence.
    - Decompress to signed integers.
    - Divide by 10 ** precision and add the reconstructed value dim positions earlier.
    Raises InvalidCharacterError or UnterminatedError for malformed input.
    """
    check_dim(dim)
    factor = scale_factor(precision)

    deltas = decode_ints(encoded)
    coords: List[float] = [0.0] * len(deltas)

    # Convert from delta form to absolute values
    for j, delta in enumerate(deltas):
        coords[j] = delta / factor
        if j >= dim:
            coords[j] += coords[j - dim]

    return coords

def encode_points(points: Iterable[Sequence[float]], precision: int = DEFAULT_PRECISION) -> str:
    """
    Encode a sequence of points, e.g. [(lat1, lng1), (lat2, lng2), ...].
    The dimension is taken from the points, which must all have the same length.
    """
    flat: List[float] = []
    dim: Optional[int] = None
    for i, point in enumerate(points):
        if i == 0:
            dim = len(point)
        elif len(point) != dim:
            raise ValueError(f"point {i} has {len(point)} coordinates, expected {dim}")
        flat.extend(point)

    if dim is None:
        return ""

    return encode(flat, dim, precision)

def decode_points(encoded: Union[str, bytes], dim: int = DEFAULT_DIM, precision: int = DEFAULT_PRECISION) -> List[Tuple[float, ...]]:
    """Decode an encoded polyline into a list of dim-tuples."""
    coords = decode(encoded, dim, precision)
    if len(coords) % dim:
        raise ValueError(f"decoded {len(coords)} values, not a multiple of dim={dim}")
    return [tuple(coords[i : i + dim]) for i in range(0, len(coords), dim)]
