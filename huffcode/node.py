"""
Nodes of a Huffman tree.

A tree is built from two kinds of nodes: a Leaf holds exactly one symbol,
an Internal node holds exactly two children. Both are frozen, so a built
tree can be shared between encoders and decoders without copying.
"""
from dataclasses import dataclass, field
from typing import Any, Union

from huffcode.errors import TreeHeightError


@dataclass(frozen=True)
class Leaf:
    """
    Leaf of Huffman's Tree

    :param symbol: symbol held by the leaf
    :param weight: int, the frequency of the symbol in our data
    """
    symbol: Any
    weight: int


@dataclass(frozen=True)
class Internal:
    """
    Internal node of Huffman's Tree. Its weight is the sum
    of the weights of its children.
    """
    weight: int
    left: "Node" = field(repr=False)
    right: "Node" = field(repr=False)

    @classmethod
    def merge(cls, first: "Node", second: "Node") -> "Internal":
        """
        Combines two nodes into a new parent node, first one goes to the left.
        """
        return cls(first.weight + second.weight, first, second)


Node = Union[Leaf, Internal]


def tree_height(root: Node) -> int:
    """
    Function computes the number of edges on the longest
    path from root to a leaf.

    Uses an explicit stack, trees built from skewed frequencies
    can be deeper than the recursion limit.

    :param root: root of the tree
    :return: int, height of the tree
    :raises TreeHeightError: if an internal node misses a child
    """
    height = 0
    stack = [(root, 0)]
    while stack:
        node, depth = stack.pop()
        if isinstance(node, Leaf):
            height = max(height, depth)
        elif isinstance(node, Internal):
            stack.append((node.right, depth + 1))
            stack.append((node.left, depth + 1))
        else:
            raise TreeHeightError()

    return height


def iter_nodes(root: Node):
    """
    Yields every node of the tree in pre-order.
    """
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        if isinstance(node, Internal):
            stack.append(node.right)
            stack.append(node.left)
