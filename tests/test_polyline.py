import random

import pytest

from polyline_codec.polyline.polyline import (
    encode,
    decode,
    encode_points,
    decode_points,
    scale_factor,
)
from polyline_codec.shared.compression import encode_int, encode_ints
from polyline_codec.shared.errors import InvalidCharacterError, UnterminatedError

ROUTE = [38.5, -120.2, 40.7, -120.95, 43.252, -126.453]
ROUTE_ENCODED = "_p~iF~ps|U_ulLnnqC_mqNvxq`@"

@pytest.mark.parametrize("encoded, expected", [
    ("_p~iF~ps|U", [38.5, -120.2]),
    (ROUTE_ENCODED, ROUTE),
])
def test_decode(encoded, expected):
    assert decode(encoded, 2) == expected

@pytest.mark.parametrize("coords, expected", [
    ([38.5, -120.2], "_p~iF~ps|U"),
    (ROUTE, ROUTE_ENCODED),
])
def test_encode(coords, expected):
    assert encode(coords, 2) == expected

def test_default_dim_is_two():
    assert encode(ROUTE) == ROUTE_ENCODED
    assert decode(ROUTE_ENCODED) == ROUTE

def test_empty():
    assert encode([], 2) == ""
    assert decode("", 2) == []

def test_scale_truncates_toward_zero():
    # 1.9e-5 scales to ~1.9: truncation gives 1 where rounding would give 2
    assert encode([0.000019], 1) == encode_int(1)
    assert encode([-0.000019], 1) == encode_int(-1)
    assert decode(encode([0.000019], 1), 1) == [0.00001]

def test_scale_truncation_on_half_boundary():
    # 12.345675 scales to about 1234567.5; truncation keeps 1234567 on either side of the boundary
    assert encode([12.345675], 1) == encode_int(1234567)
    assert encode([-12.345675], 1) == encode_int(-1234567)

def test_deltas_use_same_axis():
    # Each value is differenced against the value dim positions earlier
    assert encode([1.0, 2.0, 1.5, 2.5], 2) == encode_ints([100000, 200000, 50000, 50000])
    assert encode([1.0, 2.0, 3.0, 1.5, 2.5, 3.5], 3) == encode_ints([100000, 200000, 300000, 50000, 50000, 50000])
    assert encode([1.0, 2.0, 4.0], 1) == encode_ints([100000, 100000, 200000])

def test_length_not_multiple_of_dim():
    coords = [1.0, 2.0, 3.0]
    assert encode(coords, 2) == encode_ints([100000, 200000, 200000])
    assert decode(encode(coords, 2), 2) == coords

def test_shorter_than_dim_has_no_deltas():
    assert encode([1.0, 2.0], 3) == encode_ints([100000, 200000])
    assert decode(encode_ints([100000, 200000]), 3) == [1.0, 2.0]

def test_coordinates_round_trip():
    rng = random.Random(42)
    for _ in range(100):
        coords = []
        for _ in range(rng.randint(0, 30)):
            coords.extend([rng.uniform(-90, 90), rng.uniform(-180, 180)])
        assert decode(encode(coords, 2), 2) == pytest.approx(coords, abs=1e-5 + 1e-9)

def test_quantized_coordinates_round_trip_exactly():
    coords = [38.5, -120.2, 38.5, -120.2, 0.0, 0.0]
    assert decode(encode(coords, 2), 2) == pytest.approx(coords, abs=1e-9)

def test_precision():
    assert scale_factor(5) == 1e5
    assert scale_factor(6) == 1e6
    encoded = encode([38.5, -120.25], 2, precision=6)
    assert encoded == encode_ints([38500000, -120250000])
    assert decode(encoded, 2, precision=6) == [38.5, -120.25]
    assert scale_factor(0) == 1.0

def test_negative_precision_rejected():
    with pytest.raises(ValueError):
        encode([1.0], 2, precision=-1)

@pytest.mark.parametrize("dim", [0, -1])
def test_non_positive_dim_rejected(dim):
    with pytest.raises(ValueError):
        encode([1.0, 2.0], dim)
    with pytest.raises(ValueError):
        decode("_p~iF~ps|U", dim)

def test_decode_errors_propagate():
    with pytest.raises(InvalidCharacterError) as exc_info:
        decode("_p~iF~ps|U ", 2)
    assert exc_info.value.position == 10
    with pytest.raises(UnterminatedError):
        decode("_p~i", 2)

def test_encode_points():
    assert encode_points([(38.5, -120.2), (40.7, -120.95), (43.252, -126.453)]) == ROUTE_ENCODED
    assert encode_points([]) == ""
    assert encode_points([(1.0, 2.0, 3.0)]) == encode([1.0, 2.0, 3.0], 3)

def test_encode_points_rejects_mixed_dimensions():
    with pytest.raises(ValueError):
        encode_points([(1.0, 2.0), (3.0,)])

def test_encode_points_rejects_empty_points():
    with pytest.raises(ValueError):
        encode_points([()])

def test_decode_points():
    assert decode_points(ROUTE_ENCODED) == [(38.5, -120.2), (40.7, -120.95), (43.252, -126.453)]
    assert decode_points("", 2) == []

def test_decode_points_rejects_partial_point():
    with pytest.raises(ValueError):
        decode_points(encode([1.0, 2.0, 3.0], 2), 2)

@pytest.mark.parametrize("bad", [float("inf"), float("-inf"), float("nan")])
def test_non_finite_coordinates_rejected(bad):
    with pytest.raises(ValueError, match="coordinate 1 is not finite"):
        encode([0.0, bad], 2)
