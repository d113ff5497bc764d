"""
Batch encoding and decoding of many polylines.
Wraps the coordinate transform with an optional tqdm progress bar.
"""

from typing import Iterable, List, Sequence, Union

from tqdm import tqdm

from polyline_codec.polyline.polyline import encode, decode
from polyline_codec.shared.config import DEFAULT_DIM, DEFAULT_PRECISION
from polyline_codec.shared.errors import PolylineDecodeError
from polyline_codec.shared.logging_config import logger

def encode_all(
    paths: Iterable[Sequence[float]],
    dim: int = DEFAULT_DIM,
    precision: int = DEFAULT_PRECISION,
    show_progress: bool = False
) -> List[str]:
    """
    Encode each flat coordinate sequence in paths.
    Returns encoded strings in input order.
    """
    encoded: List[str] = []

    with tqdm(paths, desc="Encoding polylines", unit="path", disable=not show_progress) as progress:
        for coords in progress:
            encoded.append(encode(coords, dim, precision))

    logger.debug(f"Encoded {len(encoded)} polylines (dim={dim}, precision={precision})")
    return encoded

def decode_all(
    encoded: Iterable[Union[str, bytes]],
    dim: int = DEFAULT_DIM,
    precision: int = DEFAULT_PRECISION,
    show_progress: bool = False
) -> List[List[float]]:
    """
    Decode each encoded polyline.
    - Returns flat coordinate lists in input order.
    - The first malformed string aborts the batch; its error is logged with the
      string's index and re-raised unchanged.
    """
    decoded: List[List[float]] = []

    with tqdm(encoded, desc="Decoding polylines", unit="path", disable=not show_progress) as progress:
        for i, polyline in enumerate(progress):
            try:
                decoded.append(decode(polyline, dim, precision))
            except PolylineDecodeError as e:
                logger.warning(f"Malformed polyline at index {i}: {e}")
                raise

    logger.debug(f"Decoded {len(decoded)} polylines (dim={dim}, precision={precision})")
    return decoded
