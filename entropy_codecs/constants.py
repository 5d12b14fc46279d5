# README
# October 11, 2026

# Constants for the entropy codecs. Both container formats are defined in bits, not bytes.

# IMPORTS
##################################################

from math import ceil, log2

##################################################


# CONSTANTS
##################################################

ENDIANESS = "little" # bit at index i of a fixed-width value contributes 2 ** i
SYMBOL_BITS = 8 # symbols are bytes
N_SYMBOLS = 2 ** SYMBOL_BITS # size of the symbol alphabet
MAXIMUM_SYMBOL = N_SYMBOLS - 1

##################################################


# HUFFMAN CONSTANTS
##################################################

HUFFMAN_TREE_INNER_MARKER = 1 # preorder marker for an inner node
HUFFMAN_TREE_LEAF_MARKER = 0 # preorder marker for a leaf, followed by SYMBOL_BITS bits
HUFFMAN_TREE_BITS_PER_LEAF = 1 + SYMBOL_BITS # marker plus symbol
HUFFMAN_HEADER_BITS = 12 # bits for the length of the serialized tree
MAXIMUM_HUFFMAN_TREE_BITS = (N_SYMBOLS * (HUFFMAN_TREE_BITS_PER_LEAF + 1)) - 1 # 10L - 1 with every symbol present
assert MAXIMUM_HUFFMAN_TREE_BITS < 2 ** HUFFMAN_HEADER_BITS, "Huffman header is too narrow for the symbol alphabet."
SINGLE_LEAF_CODE = "0" # code given to the only symbol of a one-leaf tree

##################################################


# GOLOMB CONSTANTS
##################################################

GOLOMB_PARAMETER_BITS = ceil(log2(SYMBOL_BITS)) # 3 bits for the exponent k
N_GOLOMB_PARAMETERS = SYMBOL_BITS # candidate exponents are k = 0, ..., 7
GOLOMB_PARAMETERS = tuple(range(N_GOLOMB_PARAMETERS))
GOLOMB_UNARY_BIT = 1 # repeated once per unit of quotient
GOLOMB_TERMINATOR_BIT = 0 # ends the unary quotient
JOBS_DEFAULT = N_GOLOMB_PARAMETERS # one worker per candidate exponent

##################################################


# BYTE TRANSPORT CONSTANTS
##################################################

PADDING_HEADER_BYTES = 1 # leading byte holding the number of padding bits in the final byte

##################################################
