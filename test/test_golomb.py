# README
# October 15, 2026

# Tests for the Golomb-Rice Coder, its parameter search, and the entropy coder factory.

# IMPORTS
##################################################

import pytest
import numpy as np
from bitarray import bitarray

from entropy_codecs.entropy_coders.golomb import GolombCoder, search, encode_trial, get_code, get_trial_length
from entropy_codecs.entropy_coders.huffman import HuffmanCoder
from entropy_codecs.entropy_coders.factory import get_entropy_coder, TYPES
from entropy_codecs.bitstream import decode_fixed_width
from entropy_codecs.constants import ENDIANESS, GOLOMB_PARAMETER_BITS, GOLOMB_PARAMETERS
from entropy_codecs.errors import DecodeError, FormatError

##################################################


# HELPERS
##################################################

def bits(string: str) -> bitarray:
    return bitarray(string, endian = ENDIANESS)

def random_bytes(n: int, seed: int = 0) -> bytes:
    return np.random.default_rng(seed).integers(0, 256, size = n, dtype = np.uint8).tobytes()

# with k = 3, 16 costs 2 + 1 + 3 bits and 7 costs 0 + 1 + 3 bits, which no other exponent beats
K3_INPUT = bytes([16, 7] * 50)

INPUTS = [
    b"",
    b"\x00",
    b"\xff" * 10,
    bytes(range(256)),
    K3_INPUT,
    random_bytes(n = 1),
    random_bytes(n = 256),
    random_bytes(n = 10000),
]

##################################################


# CODES
##################################################

def test_get_code():
    assert get_code(symbol = 0, k = 0) == bits("0")
    assert get_code(symbol = 3, k = 0) == bits("1110")
    assert get_code(symbol = 19, k = 3) == bits("110" + "110") # 19 = 2 * 8 + 3
    assert get_code(symbol = 255, k = 7) == bits("10" + "1111111")

@pytest.mark.parametrize("k", GOLOMB_PARAMETERS)
def test_trial_length_matches_encoding(k):
    data = random_bytes(n = 500, seed = k)
    assert len(encode_trial(k = k, data = data)) == get_trial_length(data = data, k = k)

##################################################


# PARAMETER SEARCH
##################################################

def test_k3_is_selected():
    lengths = [get_trial_length(data = K3_INPUT, k = k) for k in GOLOMB_PARAMETERS]
    assert all(lengths[3] < length for k, length in enumerate(lengths) if k != 3)
    container = GolombCoder(jobs = 1).encode(data = K3_INPUT)
    assert decode_fixed_width(bits = container[:GOLOMB_PARAMETER_BITS]) == 3
    assert container[:GOLOMB_PARAMETER_BITS] == bits("110")
    assert len(container) == GOLOMB_PARAMETER_BITS + lengths[3]

def test_ties_go_to_lowest_exponent():
    # every trial of the empty input is empty
    k, payload = search(data = b"", jobs = 1)
    assert k == 0 and len(payload) == 0
    # 1 costs 2 bits with k = 0 or k = 1
    k, _ = search(data = b"\x01", jobs = 1)
    assert k == 0

def test_small_values_use_unary():
    container = GolombCoder(jobs = 1).encode(data = bytes([0, 1, 0, 2]))
    assert container == bits("000" + "0" + "10" + "0" + "110")

def test_parallel_search_matches_serial():
    data = random_bytes(n = 2000, seed = 3)
    assert GolombCoder(jobs = 8).encode(data = data) == GolombCoder(jobs = 1).encode(data = data)

def test_jobs_must_be_positive():
    with pytest.raises(AssertionError):
        GolombCoder(jobs = 0)

##################################################


# ROUND TRIP
##################################################

@pytest.mark.parametrize("data", INPUTS)
def test_round_trip(data):
    coder = GolombCoder(jobs = 1)
    assert coder.decode(bits = coder.encode(data = data)) == data

@pytest.mark.parametrize("data", INPUTS)
def test_reencoding_reproduces_container(data):
    coder = GolombCoder(jobs = 1)
    container = coder.encode(data = data)
    assert coder.encode(data = coder.decode(bits = container)) == container

def test_round_trip_through_bytes():
    coder = GolombCoder(jobs = 1)
    stream = coder.encode_to_bytes(data = K3_INPUT)
    assert coder.decode_from_bytes(stream = stream) == K3_INPUT

##################################################


# DECODE FAILURES
##################################################

def test_truncated_exponent():
    with pytest.raises(FormatError):
        GolombCoder().decode(bits = bits("11"))

def test_truncated_remainder():
    with pytest.raises(DecodeError):
        GolombCoder().decode(bits = bits("110" + "0" + "10")) # k = 3 needs 3 remainder bits

def test_unterminated_quotient():
    with pytest.raises(DecodeError):
        GolombCoder().decode(bits = bits("000" + "0" + "11"))

def test_quotient_overflowing_a_byte():
    assert GolombCoder().decode(bits = bits("000" + "1" * 255 + "0")) == b"\xff"
    with pytest.raises(DecodeError):
        GolombCoder().decode(bits = bits("000" + "1" * 256 + "0"))
    with pytest.raises(DecodeError):
        GolombCoder().decode(bits = bits("111" + "11" + "0" + "0000000")) # 2 * 128

##################################################


# FACTORY
##################################################

def test_factory():
    assert isinstance(get_entropy_coder(type_ = "huffman"), HuffmanCoder)
    coder = get_entropy_coder(type_ = "golomb", jobs = 2)
    assert isinstance(coder, GolombCoder) and coder.jobs == 2
    assert [get_entropy_coder(type_ = type_).type_ for type_ in TYPES] == TYPES
    with pytest.raises(ValueError):
        get_entropy_coder(type_ = "arithmetic")

##################################################
