import types

import pytest

from dsakit.traversal import TreeNode, level_order, tree_from_level_order, tree_height


def test_level_order_two_layers():
    root = TreeNode(1, TreeNode(2), TreeNode(3))
    assert list(level_order(root)) == [[1], [2, 3]]


def test_level_order_empty_tree():
    assert list(level_order(None)) == []
    assert tree_height(None) == -1


def test_level_order_is_lazy():
    layers = level_order(TreeNode(1, TreeNode(2)))
    assert isinstance(layers, types.GeneratorType)
    assert next(layers) == [1]
    assert next(layers) == [2]
    with pytest.raises(StopIteration):
        next(layers)


def test_level_order_keeps_left_to_right_across_subtrees():
    root = tree_from_level_order([3, 9, 20, None, None, 15, 7])
    assert list(level_order(root)) == [[3], [9, 20], [15, 7]]


def test_level_order_left_only_chain():
    root = TreeNode(1, left=TreeNode(2, left=TreeNode(3, left=TreeNode(4))))
    assert list(level_order(root)) == [[1], [2], [3], [4]]
    assert tree_height(root) == 3


def test_layer_count_matches_height():
    root = tree_from_level_order([1, 2, 3, 4, None, None, 5, None, 6])
    layers = list(level_order(root))
    assert layers == [[1], [2, 3], [4, 5], [6]]
    assert len(layers) == tree_height(root) + 1


def test_flattened_layers_visit_each_node_once():
    values = list(range(1, 16))
    root = tree_from_level_order(values)
    assert [value for layer in level_order(root) for value in layer] == values


def test_shared_node_rejected():
    shared = TreeNode(2)
    root = TreeNode(1, shared, shared)
    with pytest.raises(ValueError, match="more than once"):
        list(level_order(root))


def test_cycle_rejected():
    root = TreeNode(1)
    root.left = TreeNode(2, right=root)
    with pytest.raises(ValueError):
        list(level_order(root))


def test_tree_from_level_order_shape():
    root = tree_from_level_order([1, 2, 3, None, 4])
    assert root == TreeNode(1, TreeNode(2, right=TreeNode(4)), TreeNode(3))


def test_tree_from_level_order_empty_inputs():
    assert tree_from_level_order([]) is None
    assert tree_from_level_order([None, 1]) is None
