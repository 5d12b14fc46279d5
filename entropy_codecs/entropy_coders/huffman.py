# README
# October 12, 2026

# Huffman Coder. The container is a 12-bit header holding the length of the serialized tree,
# the serialized tree, then the coded payload with no terminator.

# IMPORTS
##################################################

import logging
from bitarray import bitarray

from entropy_codecs.entropy_coders.entropy_coder import EntropyCoder, DATA_TYPE
from entropy_codecs.entropy_coders.huffman_tree import HuffmanTree, Leaf, Inner, DICT_TYPE, get_serialized_length
from entropy_codecs.bitstream import BitInputStream, BitOutputStream
from entropy_codecs.histogram import as_symbols, count
from entropy_codecs.constants import HUFFMAN_HEADER_BITS
from entropy_codecs.errors import DecodeError, DictionaryMiss, FormatError

##################################################


# COMPRESSION WITH A DICTIONARY
##################################################

def compress(
    data: DATA_TYPE,
    dictionary: DICT_TYPE,
) -> bitarray:
    """
    Concatenate the code of every symbol.

    Parameters
    ----------
    data : DATA_TYPE
        The byte stream to compress.
    dictionary : DICT_TYPE
        Mapping from symbol to code.

    Returns
    -------
    bitarray
        The concatenated codes.
    """
    out = BitOutputStream()
    for position, symbol in enumerate(as_symbols(data = data).tolist()):
        try:
            code = dictionary[symbol]
        except KeyError:
            raise DictionaryMiss(symbol = symbol, position = position) from None
        out.write_code(code = code)
    return out.flush()

def decompress(
    bits: bitarray,
    tree: HuffmanTree,
) -> bytes:
    """
    Walk the tree from the root one bit at a time (0 is left, 1 is right),
    emitting a symbol and returning to the root whenever a leaf is reached.

    Parameters
    ----------
    bits : bitarray
        The concatenated codes.
    tree : HuffmanTree
        The tree the codes were derived from.

    Returns
    -------
    bytes
        The decompressed byte stream.
    """
    symbols = bytearray()
    root = tree.root
    node = root
    for bit in bits:
        if isinstance(node, Inner):
            node = node.right if bit else node.left
        if isinstance(node, Leaf):
            symbols.append(node.symbol)
            node = root
    if node is not root:
        raise DecodeError(f"Payload of {len(bits)} bits ends in the middle of a code, after {len(symbols)} symbols.")
    return bytes(symbols)

##################################################


# HUFFMAN ENTROPY CODING FUNCTIONS
##################################################

def encode(
    out: BitOutputStream,
    data: DATA_TYPE,
) -> None:
    """
    Encode the data.

    Parameters
    ----------
    out : BitOutputStream
        The output stream to write to.
    data : DATA_TYPE
        The data to encode.
    """

    # empty input has no tree, which a header of zero bits signals
    symbols = as_symbols(data = data)
    if len(symbols) == 0:
        out.write_bits(bits = 0, n = HUFFMAN_HEADER_BITS)
        return

    # build tree from symbol frequencies
    histogram = count(data = symbols)
    tree = HuffmanTree.from_histogram(histogram = histogram)

    # write header and tree
    tree_length = get_serialized_length(n_leaves = len(histogram))
    out.write_bits(bits = tree_length, n = HUFFMAN_HEADER_BITS)
    out.write_code(code = tree.serialize())

    # write payload
    start = out.get_position()
    out.write_code(code = compress(data = symbols, dictionary = tree.to_dict()))
    logging.debug(f"huffman.encode: {len(histogram)} leaves, tree of {tree_length} bits, payload of {out.get_position() - start} bits for {len(symbols)} symbols")

    return

def decode(
    inp: BitInputStream,
) -> bytes:
    """
    Decode the data.

    Parameters
    ----------
    inp : BitInputStream
        The input stream to read from. Should raise FormatError when reading past its end.

    Returns
    -------
    bytes
        The decoded data.
    """

    # get the length of the serialized tree
    tree_length = inp.read_bits(n = HUFFMAN_HEADER_BITS)
    if tree_length == 0: # empty input
        if not inp.is_exhausted():
            raise DecodeError(f"Container with no tree has {inp.get_remaining()} payload bits.")
        return b""

    # rebuild tree, then walk it over the payload
    tree = HuffmanTree.deserialize(bits = inp.read_slice(n = tree_length))
    payload = inp.read_rest()
    logging.debug(f"huffman.decode: tree of {tree_length} bits, payload of {len(payload)} bits")
    return decompress(bits = payload, tree = tree)

##################################################


# ENTROPY CODER INTERFACE
##################################################

class HuffmanCoder(EntropyCoder):
    """
    Huffman Coder.
    """

    @property
    def type_(self) -> str:
        """
        Get the type of the entropy coder.

        Returns
        -------
        str
            The type of the entropy coder.
        """
        return "huffman"

    def __init__(
        self,
    ):
        """
        Initialize the Huffman Coder.
        """
        pass

    def encode(
        self,
        data: DATA_TYPE,
    ) -> bitarray:
        """
        Encode the data.

        Parameters
        ----------
        data : DATA_TYPE
            The data to encode.

        Returns
        -------
        bitarray
            The container.
        """
        out = BitOutputStream() # helper for writing bits to an output stream
        encode(out = out, data = data)
        return out.flush()

    def decode(
        self,
        bits: bitarray,
    ) -> bytes:
        """
        Decode the data.

        Parameters
        ----------
        bits : bitarray
            The container to decode.

        Returns
        -------
        bytes
            The decoded data.
        """
        inp = BitInputStream(bits = bits, error = FormatError) # a truncated header or tree is a malformed container
        return decode(inp = inp)

##################################################
