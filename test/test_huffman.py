# README
# October 15, 2026

# Tests for the Huffman Coder and its container.

# IMPORTS
##################################################

import pytest
import numpy as np
from bitarray import bitarray

from entropy_codecs.entropy_coders.huffman import HuffmanCoder, compress, decompress
from entropy_codecs.entropy_coders.huffman_tree import HuffmanTree, Leaf
from entropy_codecs.bitstream import decode_fixed_width
from entropy_codecs.histogram import count
from entropy_codecs.constants import ENDIANESS, HUFFMAN_HEADER_BITS
from entropy_codecs.errors import DecodeError, DictionaryMiss, FormatError

##################################################


# HELPERS
##################################################

GOLDEN_INPUT = bytes([0, 0, 0, 2, 2, 2, 2, 5, 5, 10, 10, 10, 10, 10, 15])

def bits(string: str) -> bitarray:
    return bitarray(string, endian = ENDIANESS)

def random_bytes(n: int, seed: int = 0) -> bytes:
    return np.random.default_rng(seed).integers(0, 256, size = n, dtype = np.uint8).tobytes()

INPUTS = [
    b"",
    b"A",
    b"AAAA",
    bytes(range(256)),
    GOLDEN_INPUT,
    b"The quick brown fox jumps over the lazy dog",
    b"Lorem ipsum dolor sit amet " * 200,
    random_bytes(n = 1),
    random_bytes(n = 256),
    random_bytes(n = 10000),
]

##################################################


# CONTAINER
##################################################

def test_golden_container():
    container = HuffmanCoder().encode(data = GOLDEN_INPUT)
    header = "100011000000" # 49 = 10 * 5 - 1, least significant bit first
    tree = "1" + "1" + "000000000" + "1" + "011110000" + "010100000" + "1" + "001000000" + "001010000"
    payload = ("00" * 3) + ("10" * 4) + ("011" * 2) + ("11" * 5) + "010"
    assert decode_fixed_width(bits = container[:HUFFMAN_HEADER_BITS]) == 49
    assert container == bits(header + tree + payload)

def test_empty_container():
    container = HuffmanCoder().encode(data = b"")
    assert container == bits("0" * HUFFMAN_HEADER_BITS)
    assert HuffmanCoder().decode(bits = container) == b""

def test_single_symbol_container():
    container = HuffmanCoder().encode(data = b"AAAA")
    assert len(container) == HUFFMAN_HEADER_BITS + 9 + 4
    assert container[-4:] == bits("0000")

@pytest.mark.parametrize("data", INPUTS)
def test_round_trip(data):
    coder = HuffmanCoder()
    assert coder.decode(bits = coder.encode(data = data)) == data

@pytest.mark.parametrize("data", INPUTS)
def test_reencoding_reproduces_container(data):
    coder = HuffmanCoder()
    container = coder.encode(data = data)
    assert coder.encode(data = coder.decode(bits = container)) == container

def test_round_trip_through_bytes():
    coder = HuffmanCoder()
    data = random_bytes(n = 1000, seed = 1)
    stream = coder.encode_to_bytes(data = data)
    assert isinstance(stream, bytes)
    assert coder.decode_from_bytes(stream = stream) == data

def test_numpy_input():
    data = np.frombuffer(GOLDEN_INPUT, dtype = np.uint8)
    assert HuffmanCoder().encode(data = data) == HuffmanCoder().encode(data = GOLDEN_INPUT)

def test_compresses_skewed_data():
    coder = HuffmanCoder()
    data = b"a" * 900 + b"b" * 90 + b"c" * 10
    assert coder.get_compressed_size(bits = coder.encode(data = data)) < 8 * len(data)

##################################################


# DECODE FAILURES
##################################################

def test_payload_ending_mid_code():
    container = HuffmanCoder().encode(data = GOLDEN_INPUT)
    with pytest.raises(DecodeError):
        HuffmanCoder().decode(bits = container[:-1]) # last code is 010

def test_truncated_header():
    with pytest.raises(FormatError):
        HuffmanCoder().decode(bits = bits("10001"))

def test_header_longer_than_container():
    container = HuffmanCoder().encode(data = GOLDEN_INPUT)
    with pytest.raises(FormatError):
        HuffmanCoder().decode(bits = container[:HUFFMAN_HEADER_BITS + 20])

def test_malformed_tree():
    header = "100100000000" # 9 bits of tree
    with pytest.raises(FormatError):
        HuffmanCoder().decode(bits = bits(header + "111111111"))

def test_bits_after_empty_container():
    with pytest.raises(DecodeError):
        HuffmanCoder().decode(bits = bits("0" * HUFFMAN_HEADER_BITS + "0"))

##################################################


# COMPRESS / DECOMPRESS
##################################################

def test_compress_with_golden_dict():
    tree = HuffmanTree.from_histogram(histogram = count(data = GOLDEN_INPUT))
    assert compress(data = bytes([15, 0, 10]), dictionary = tree.to_dict()) == bits("010" + "00" + "11")
    assert decompress(bits = bits("010" + "00" + "11"), tree = tree) == bytes([15, 0, 10])

def test_dictionary_miss():
    with pytest.raises(DictionaryMiss) as excinfo:
        compress(data = b"abc", dictionary = {ord("a"): bits("0"), ord("c"): bits("1")})
    assert excinfo.value.symbol == ord("b")
    assert excinfo.value.position == 1

def test_decompress_single_leaf():
    assert decompress(bits = bits("000"), tree = HuffmanTree(root = Leaf(symbol = 7))) == bytes([7, 7, 7])
    assert decompress(bits = bits(""), tree = HuffmanTree(root = Leaf(symbol = 7))) == b""

##################################################
