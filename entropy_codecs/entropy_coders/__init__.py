from entropy_codecs.entropy_coders.entropy_coder import EntropyCoder
from entropy_codecs.entropy_coders.huffman import HuffmanCoder
from entropy_codecs.entropy_coders.huffman_tree import HuffmanTree, Leaf, Inner
from entropy_codecs.entropy_coders.golomb import GolombCoder
from entropy_codecs.entropy_coders.factory import get_entropy_coder, TYPES
