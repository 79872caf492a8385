"""
Huffman coding algorithm -
data compression algorithm.

The pipeline is: count symbol frequencies, build the tree, derive
a code for every leaf, then encode the data with the code table and
decode it back by walking the same tree bit by bit.
"""
import heapq
from collections import defaultdict
from dataclasses import dataclass
from itertools import count

from bitarray import bitarray, frozenbitarray

from huffcode.errors import (
    CodeLookupError,
    DecodeError,
    EmptyInputError,
    JoinError,
)
from huffcode.node import Internal, Leaf, Node, tree_height

# Code given to the only symbol of a one-symbol alphabet
SINGLE_SYMBOL_CODE = "1"


def char_frequency(data) -> dict:
    """
    Function builds dictionary with frequency
    of each symbol for given data.

    Symbols keep the order of their first occurrence.

    :param data: data to count symbol frequency for
    :return: dict, dictionary with symbol frequency
    """
    char_frequency_dict = defaultdict(int)
    for el in data:
        char_frequency_dict[el] += 1

    return dict(char_frequency_dict)


def build_tree(frequencies: dict) -> Node:
    """
    Function builds Huffman Tree.

    The two lightest nodes are merged until a single node is left,
    the first node removed from the queue becomes the left child.
    Nodes of equal weight leave the queue in the order they were
    put in, leaves first in the order of the frequency dictionary.

    :param frequencies: dict, {symbol: frequency}
    :return: root of the tree
    :raises EmptyInputError: if there are no symbols
    """
    if not frequencies:
        raise EmptyInputError()

    order = count()
    nodes = []
    for symbol, weight in frequencies.items():
        if weight < 0:
            raise ValueError(f"Negative frequency {weight} for symbol {symbol!r}")
        nodes.append((weight, next(order), Leaf(symbol, weight)))
    heapq.heapify(nodes)

    while len(nodes) > 1:
        _, _, first = heapq.heappop(nodes)
        _, _, second = heapq.heappop(nodes)

        merged = Internal.merge(first, second)
        heapq.heappush(nodes, (merged.weight, next(order), merged))

    return nodes[0][2]


def derive_codes(root: Node) -> dict:
    """
    Function generates code for each symbol,
    preorder traversal of Huffman's tree.

    Going left appends 1, going right appends 0. A tree made of
    a single leaf gives its symbol the one bit code 1.

    :param root: root of the tree
    :return: dict, {symbol: bitarray}
    :raises TreeHeightError: if an internal node misses a child
    """
    if isinstance(root, Leaf):
        return {root.symbol: bitarray(SINGLE_SYMBOL_CODE, endian="big")}

    path = bitarray(tree_height(root), endian="big")
    path.setall(0)
    codes = {}
    _codes_generation(root, path, codes)
    return codes


def _codes_generation(root: Internal, path: bitarray, codes: dict):
    # (node, depth, bit written at depth - 1 on the way down)
    stack = [(root.right, 1, 0), (root.left, 1, 1)]
    while stack:
        node, depth, bit = stack.pop()
        path[depth - 1] = bit

        if isinstance(node, Leaf):
            # slicing copies, path is reused by the sibling branches
            codes.setdefault(node.symbol, path[:depth])
            continue

        stack.append((node.right, depth + 1, 0))
        stack.append((node.left, depth + 1, 1))


def encode(data, codes: dict) -> bitarray:
    """
    Function encodes data with given code table.

    :param data: symbols to encode
    :param codes: dict, {symbol: code}
    :return: bitarray, concatenated codes in input order
    :raises CodeLookupError: if a symbol has no code
    :raises JoinError: if a code is empty or is not a bit sequence
    """
    res = bitarray(endian="big")
    for symbol in data:
        try:
            code = codes[symbol]
        except KeyError:
            raise CodeLookupError(symbol) from None

        before = len(res)
        try:
            res.extend(code)
        except (TypeError, ValueError) as err:
            raise JoinError(f"Unable to join code {code!r} for symbol {symbol!r}") from err
        if len(res) == before:
            raise JoinError(f"Empty code for symbol {symbol!r}")

    return res


def decode(bits, root: Node) -> list:
    """
    Function decodes bits by walking the tree from the root,
    1 goes left and 0 goes right. Every time a leaf is reached its
    symbol is emitted and the walk starts over from the root.

    :param bits: bitarray (or a string of 0 and 1)
    :param root: root of the tree the bits were encoded with
    :return: list of decoded symbols
    :raises DecodeError: if the bits end in the middle of a code
        or the tree is broken
    """
    if isinstance(bits, str):
        bits = bitarray(bits, endian="big")

    if isinstance(root, Leaf):
        return _decode_single_symbol(bits, root)
    if not isinstance(root, Internal):
        raise DecodeError(f"Cannot decode with {type(root).__name__} as tree root")

    decoded = []
    node = root
    for position, bit in enumerate(bits):
        node = node.left if bit else node.right
        if isinstance(node, Leaf):
            decoded.append(node.symbol)
            node = root
        elif not isinstance(node, Internal):
            raise DecodeError(f"Broken tree: missing child reached at bit {position}")

    if node is not root:
        raise DecodeError(
            f"Unexpected end of bit sequence after {len(decoded)} symbols"
        )

    return decoded


def _decode_single_symbol(bits, leaf: Leaf) -> list:
    decoded = []
    for position, bit in enumerate(bits):
        if not bit:
            raise DecodeError(f"No code starts with 0 in a one-symbol tree (bit {position})")
        decoded.append(leaf.symbol)
    return decoded


def decode_text(bits, root: Node) -> str:
    """
    Decodes bits into a string, symbols of the tree must be characters.
    """
    return "".join(decode(bits, root))


@dataclass(frozen=True)
class EncodedData:
    """
    Data we need to decompress: the encoded bits and
    the tree they were encoded with. The bits are stored frozen,
    so the object is hashable.
    """
    bits: frozenbitarray
    tree: Node

    def __post_init__(self):
        object.__setattr__(self, "bits", frozenbitarray(self.bits))

    def decode(self) -> list:
        return decode(self.bits, self.tree)

    def decode_text(self) -> str:
        return decode_text(self.bits, self.tree)


class HuffmanTree:
    """
    Class object for Huffman Tree - main structure used
    in Huffman coding algorithm. Object includes encoding
    and decoding.
    """

    def __init__(self, data=None):
        """
        Function builds the tree and the codes for given data.

        :param data: symbols to build the tree from (str, bytes or
            any sequence of hashable symbols)
        :raises EmptyInputError: if data is empty
        """
        self.data = data
        self.frequencies = {}
        self.root = None
        self.codes = {}
        if data is not None:
            self._build(char_frequency(data))

    @classmethod
    def build_from_freq(cls, freq_dict: dict) -> "HuffmanTree":
        """
        Builds a tree from an external frequency dictionary.

        :param freq_dict: dict, {symbol: frequency}
        :return: HuffmanTree with root and codes filled in
        """
        tree = cls()
        tree._build(dict(freq_dict))
        return tree

    def _build(self, frequencies: dict):
        self.frequencies = frequencies
        self.root = build_tree(frequencies)
        self.codes = derive_codes(self.root)

    def height(self) -> int:
        return tree_height(self.root)

    def encode(self, data=None) -> EncodedData:
        """
        Encodes data (the data the tree was built from by default).
        """
        if data is None:
            data = self.data
        if data is None:
            raise ValueError("No data to encode")
        return EncodedData(encode(data, self.codes), self.root)

    def decode(self, bits):
        """
        Decodes bits with this tree. The result has the type
        of the data the tree was built from: str for str, bytes for bytes
        and a list of symbols otherwise.
        """
        symbols = decode(bits, self.root)
        if isinstance(self.data, str):
            return "".join(symbols)
        if isinstance(self.data, (bytes, bytearray)):
            return bytes(symbols)
        return symbols
