# README
# October 13, 2026

# Lossless entropy coding of byte streams: canonical Huffman coding and adaptive Golomb-Rice coding.

from entropy_codecs.errors import EntropyCodingError, RangeError, FormatError, DecodeError, DictionaryMiss
from entropy_codecs.bitstream import encode_fixed_width, decode_fixed_width, pack, unpack
from entropy_codecs.histogram import count
from entropy_codecs.entropy_coders import EntropyCoder, HuffmanCoder, HuffmanTree, Leaf, Inner, GolombCoder, get_entropy_coder

__version__ = "0.1.0"
