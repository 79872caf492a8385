import pytest

from huffcode.errors import TreeHeightError
from huffcode.node import Internal, Leaf, iter_nodes, tree_height


def test_leaf_height_is_zero():
    assert tree_height(Leaf("A", 3)) == 0


def test_merge_sums_weights_and_keeps_order():
    first, second = Leaf("B", 1), Leaf("D", 3)
    parent = Internal.merge(first, second)
    assert parent.weight == 4
    assert parent.left is first
    assert parent.right is second


def test_height_of_unbalanced_tree():
    bd = Internal.merge(Leaf("B", 1), Leaf("D", 3))
    bda = Internal.merge(bd, Leaf("A", 5))
    root = Internal.merge(Leaf("C", 6), bda)
    assert tree_height(root) == 3
    assert tree_height(bda) == 2


def test_height_of_chain_deeper_than_recursion_limit():
    root = Leaf(0, 1)
    for i in range(1, 3000):
        root = Internal.merge(root, Leaf(i, 1))
    assert tree_height(root) == 2999


@pytest.mark.parametrize("left, right", [(None, Leaf("A", 1)), (Leaf("A", 1), None), (None, None)])
def test_height_rejects_missing_child(left, right):
    broken = Internal(1, left, right)
    with pytest.raises(TreeHeightError):
        tree_height(broken)


def test_height_rejects_missing_child_deep_in_tree():
    broken = Internal(1, Leaf("A", 1), None)
    root = Internal(3, Leaf("B", 2), broken)
    with pytest.raises(TreeHeightError):
        tree_height(root)


def test_height_rejects_non_node_root():
    with pytest.raises(TreeHeightError):
        tree_height(None)


def test_nodes_are_frozen():
    leaf = Leaf("A", 1)
    with pytest.raises(AttributeError):
        leaf.weight = 2


def test_iter_nodes_preorder():
    a, b, c = Leaf("A", 1), Leaf("B", 1), Leaf("C", 2)
    ab = Internal.merge(a, b)
    root = Internal.merge(ab, c)
    assert list(iter_nodes(root)) == [root, ab, a, b, c]
