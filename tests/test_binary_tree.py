import copy

import pytest

from labkit.binary_tree import BinaryTree, Node


def in_order(tree):
    values = []
    tree.reset()
    while True:
        values.append(tree.value)
        if tree.is_end():
            return values
        tree.set_next()


def test_default_node_value():
    assert Node().value == 0


def test_node_with_value():
    assert Node(3).value == 3


def test_replace_node_value():
    node = Node(3)
    node.value = 1
    assert node.value == 1


def test_node_with_links():
    ed1, ed2, ed3 = Node(1), Node(2), Node(3)
    node = Node(3, ed1, ed2, ed3)
    assert node.parent.value == 1
    assert node.left.value == 2
    assert node.right.value == 3


def test_node_copy_drops_links():
    ed1, ed2 = Node(1), Node(2)
    ed3 = Node(3, ed1, ed2)
    clone = copy.copy(ed3)
    assert clone.value == 3
    assert clone.left is None
    assert clone.right is None
    assert clone.parent is None


def test_reset_on_empty_tree_raises():
    with pytest.raises(ValueError):
        BinaryTree().reset()


def test_value_on_empty_tree_raises():
    with pytest.raises(ValueError):
        _ = BinaryTree().value


def test_value_after_reset():
    tree = BinaryTree([3])
    tree.reset()
    assert tree.value == 3


def test_insert_into_empty_tree():
    tree = BinaryTree()
    tree.insert(2)
    tree.reset()
    assert tree.value == 2


def test_find_in_empty_tree():
    assert BinaryTree().find(2) is None


def test_find_in_tree():
    assert BinaryTree([2]).find(2).value == 2


def test_cannot_insert_repeated_value():
    tree = BinaryTree([3])
    with pytest.raises(ValueError):
        tree.insert(3)


def test_set_next_past_single_node():
    tree = BinaryTree([3])
    tree.reset()
    assert tree.value == 3
    assert tree.is_end() is True
    tree.set_next()
    with pytest.raises(ValueError):
        _ = tree.value


def test_insert_larger():
    tree = BinaryTree([3])
    tree.insert(8)
    tree.reset()
    assert tree.value == 3
    tree.set_next()
    assert tree.value == 8


def test_insert_smaller():
    tree = BinaryTree([3])
    tree.insert(1)
    tree.reset()
    assert tree.value == 1
    tree.set_next()
    assert tree.value == 3


def test_tree_from_values():
    assert in_order(BinaryTree([-2, 2, 5, 3, -1, 7, 8, 6])) == [-2, -1, 2, 3, 5, 6, 7, 8]


def test_tree_from_values_cursor():
    tree = BinaryTree([-2, 5, 3])
    tree.reset()
    assert tree.value == -2
    tree.set_next()
    assert tree.value == 3
    tree.set_next()
    assert tree.value == 5


def test_delete_from_empty_tree_raises():
    with pytest.raises(ValueError):
        BinaryTree().delete(2)


def test_find_in_tree_from_values():
    assert BinaryTree([-2, 2, 5, 3, -1, 7, 8, 6]).find(-1).value == -1


def test_delete_only_node():
    tree = BinaryTree([3])
    tree.delete(3)
    assert tree.find(3) is None
    with pytest.raises(ValueError):
        tree.reset()


def test_delete_leaf():
    tree = BinaryTree([1, 5, 4, -3, 7, -4])
    tree.delete(7)
    assert tree.find(7) is None
    assert in_order(tree) == [-4, -3, 1, 4, 5]


def test_delete_node_with_one_child():
    tree = BinaryTree([1, 5, 4, -3, 7, -4])
    tree.delete(-3)
    assert tree.find(-3) is None
    assert in_order(tree) == [-4, 1, 4, 5, 7]


def test_delete_node_with_two_children():
    tree = BinaryTree([1, 5, 4, -3, 7, -2])
    tree.delete(5)
    assert tree.find(5) is None
    assert in_order(tree) == [-3, -2, 1, 4, 7]


def test_delete_root():
    tree = BinaryTree([1, 5, 4, -3, 7, -2])
    tree.delete(1)
    assert tree.find(1) is None
    assert in_order(tree) == [-3, -2, 4, 5, 7]


def test_delete_root_with_one_child():
    tree = BinaryTree([1, 5])
    tree.delete(1)
    assert tree.find(1) is None
    assert in_order(tree) == [5]


def test_delete_missing_value_raises():
    tree = BinaryTree([1, 5])
    with pytest.raises(ValueError):
        tree.delete(3)


def test_set_next_climbs_to_parent():
    tree = BinaryTree([1, 5, 4, -3, 7, -2])
    tree.reset()
    tree.set_next()
    tree.set_next()
    assert tree.value == 1
    tree.set_next()
    assert tree.value == 4


def test_is_end():
    tree = BinaryTree([1, 5, 4])
    tree.reset()
    assert tree.is_end() is False
    tree.set_next()
    tree.set_next()
    assert tree.value == 5
    assert tree.is_end() is True