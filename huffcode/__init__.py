"""
Huffman coding: build a prefix-free code from symbol frequencies,
encode data into a bit sequence and decode it back with the same tree.
"""
from huffcode.errors import (
    CodeLookupError,
    DecodeError,
    EmptyInputError,
    HuffmanError,
    JoinError,
    TreeHeightError,
)
from huffcode.huffman_coding import (
    EncodedData,
    HuffmanTree,
    build_tree,
    char_frequency,
    decode,
    decode_text,
    derive_codes,
    encode,
)
from huffcode.node import Internal, Leaf, Node, iter_nodes, tree_height

__version__ = "0.1.0"
