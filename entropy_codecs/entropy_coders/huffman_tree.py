# README
# October 12, 2026

# Huffman merge tree: construction from a histogram, code assignment, and a preorder bit serialization.

# IMPORTS
##################################################

import bisect
import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple, Union
from bitarray import bitarray

from entropy_codecs.bitstream import BitInputStream, BitOutputStream, encode_fixed_width
from entropy_codecs.constants import ENDIANESS, SYMBOL_BITS, MAXIMUM_SYMBOL, HUFFMAN_TREE_INNER_MARKER, HUFFMAN_TREE_LEAF_MARKER, HUFFMAN_TREE_BITS_PER_LEAF, SINGLE_LEAF_CODE
from entropy_codecs.errors import FormatError

##################################################


# NODES
##################################################

@dataclass(frozen = True)
class Leaf:
    """A symbol."""
    symbol: int

@dataclass(frozen = True)
class Inner:
    """An inner node, which exclusively owns its two children."""
    left: "Node"
    right: "Node"

# a node is either a leaf or an inner node
Node = Union[Leaf, Inner]

# type of a code dictionary, from symbol to code
DICT_TYPE = Dict[int, bitarray]

##################################################


# HELPER FUNCTIONS
##################################################

def get_serialized_length(n_leaves: int) -> int:
    """
    Get the length in bits of a serialized tree, given its number of leaves.
    A full binary tree with L leaves has L - 1 inner nodes, so the length is (L - 1) + 9L = 10L - 1.

    Parameters
    ----------
    n_leaves : int
        The number of leaves.

    Returns
    -------
    int
        The length of the serialized tree in bits.
    """
    return (n_leaves - 1) + (HUFFMAN_TREE_BITS_PER_LEAF * n_leaves)

def _reduce_once(nodes: List[Optional[Node]]) -> List[Optional[Node]]:
    """One left-to-right pass collapsing every [pending, node, node] window into an inner node."""
    reduced = []
    i = 0
    while i < len(nodes):
        if (i + 2 < len(nodes)) and (nodes[i] is None) and (nodes[i + 1] is not None) and (nodes[i + 2] is not None):
            reduced.append(Inner(left = nodes[i + 1], right = nodes[i + 2]))
            i += 3
        else:
            reduced.append(nodes[i])
            i += 1
    return reduced

##################################################


# HUFFMAN TREE
##################################################

@dataclass(frozen = True)
class HuffmanTree:
    """
    Minimal-weight binary merge tree over the symbols of a byte stream. Immutable once built.
    """

    root: Node

    @classmethod
    def from_histogram(cls, histogram: Dict[int, int]) -> "HuffmanTree":
        """
        Build the tree by repeatedly merging the two lowest-weight nodes.

        Entries are kept sorted by weight descending, ties by symbol ascending, so the lowest weights sit at the tail.
        The lowest entry becomes the left child and the next lowest the right child.
        A merged node is reinserted before any existing entries of equal weight.

        Parameters
        ----------
        histogram : Dict[int, int]
            Mapping from symbol to number of occurrences.

        Returns
        -------
        HuffmanTree
            The tree. A single distinct symbol yields a tree that is just that leaf.
        """

        # validate histogram
        if len(histogram) == 0:
            raise ValueError("Cannot build a Huffman tree from an empty histogram.")
        for symbol, weight in histogram.items():
            assert 0 <= symbol <= MAXIMUM_SYMBOL, f"Symbol {symbol} is not a byte."
            assert weight > 0, f"Symbol {symbol} has non-positive weight {weight}."

        # one entry per distinct symbol, heaviest first
        entries: List[Tuple[Node, int]] = sorted(
            ((Leaf(symbol = symbol), weight) for symbol, weight in histogram.items()),
            key = lambda entry: (-entry[1], entry[0].symbol),
        )

        # merge the two lightest entries until only the root remains
        while len(entries) > 1:
            left, left_weight = entries.pop()
            right, right_weight = entries.pop()
            weight = left_weight + right_weight
            index = bisect.bisect_left(entries, -weight, key = lambda entry: -entry[1]) # before equal weights
            entries.insert(index, (Inner(left = left, right = right), weight))

        root, _ = entries.pop()
        logging.debug(f"huffman_tree.from_histogram: built tree with {len(histogram)} leaves")
        return cls(root = root)

    def leaves(self) -> List[int]:
        """Symbols of the leaves, left to right."""
        symbols = []
        stack = [self.root]
        while stack:
            node = stack.pop()
            if isinstance(node, Leaf):
                symbols.append(node.symbol)
            else:
                stack.append(node.right)
                stack.append(node.left)
        return symbols

    def depth(self) -> int:
        """Length of the longest root-to-leaf path."""
        deepest = 0
        stack = [(self.root, 0)]
        while stack:
            node, level = stack.pop()
            if isinstance(node, Leaf):
                deepest = max(deepest, level)
            else:
                stack.append((node.left, level + 1))
                stack.append((node.right, level + 1))
        return deepest

    def to_dict(self) -> DICT_TYPE:
        """
        Derive the code of every symbol. Left edges append 0, right edges append 1.

        The traversal keeps its own stack, where each entry carries whether the node has already been descended into.
        Re-entering a descended node means ascending: the trailing bit is popped, and a 0 flips to 1 before the right child is visited.

        Returns
        -------
        DICT_TYPE
            Prefix-free mapping from symbol to code, covering every leaf.
        """

        # a lone leaf still needs a one-bit code
        if isinstance(self.root, Leaf):
            return {self.root.symbol: bitarray(SINGLE_LEAF_CODE, endian = ENDIANESS)}

        dictionary = {}
        code = bitarray(endian = ENDIANESS)
        stack = [(self.root, False)]
        while stack:
            node, descended = stack.pop()
            if isinstance(node, Leaf):
                dictionary[node.symbol] = code.copy()
            elif not descended:
                stack.append((node, True))
                stack.append((node.right, False))
                stack.append((node.left, False))
                code.append(0)
                continue
            if len(code) > 0 and not code.pop(): # finished a left subtree, so move to the right
                code.append(1)

        return dictionary

    def serialize(self) -> bitarray:
        """
        Serialize the tree as a preorder marker stream.
        An inner node is a 1 followed by its left then right subtree; a leaf is a 0 followed by its symbol in 8 bits.

        Returns
        -------
        bitarray
            The serialized tree, 10L - 1 bits long for L leaves.
        """
        out = BitOutputStream()
        stack = [self.root]
        while stack:
            node = stack.pop()
            if isinstance(node, Leaf):
                out.write_bit(bit = HUFFMAN_TREE_LEAF_MARKER)
                out.write_code(code = encode_fixed_width(value = node.symbol, width = SYMBOL_BITS))
            else:
                out.write_bit(bit = HUFFMAN_TREE_INNER_MARKER)
                stack.append(node.right)
                stack.append(node.left)
        return out.flush()

    @staticmethod
    def deserialize(bits: bitarray) -> "HuffmanTree":
        """
        Rebuild a tree from its preorder marker stream.

        First every 1 becomes a pending inner node and every 0 plus the following 8 bits becomes a leaf.
        Then passes over the list collapse each [pending, node, node] window into an inner node,
        until a pass changes nothing or a single node is left.

        Parameters
        ----------
        bits : bitarray
            The serialized tree.

        Returns
        -------
        HuffmanTree
            The tree.
        """

        # map markers onto pending inner nodes and leaves
        inp = BitInputStream(bits = bits, error = FormatError) # a leaf cut short is a malformed tree
        nodes: List[Optional[Node]] = []
        while not inp.is_exhausted():
            if inp.read_bit():
                nodes.append(None)
            else:
                nodes.append(Leaf(symbol = inp.read_bits(n = SYMBOL_BITS)))

        # reduce until there is a single node
        while len(nodes) >= 3:
            reduced = _reduce_once(nodes = nodes)
            if len(reduced) == len(nodes):
                break
            nodes = reduced
        if len(nodes) != 1 or nodes[0] is None:
            raise FormatError(f"Serialized tree of {len(bits)} bits does not describe exactly one tree ({len(nodes)} nodes left).")

        return HuffmanTree(root = nodes[0])

##################################################
