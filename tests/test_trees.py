import pytest

from algokit.trees import (
    Node,
    bst_insert,
    build_bst,
    build_tree,
    generate_trees,
    inorder,
    postorder,
    preorder,
    serialize_preorder,
)


def test_build_tree_traversals():
    root = build_tree([1, 2, -1, -1, 3, -1, -1])
    assert preorder(root) == [1, 2, 3]
    assert inorder(root) == [2, 1, 3]
    assert postorder(root) == [2, 3, 1]


def test_build_tree_preorder_round_trip():
    listing = [5, 4, 8, -1, -1, -1, 7, -1, 9, -1, -1]
    root = build_tree(listing)
    assert preorder(root) == [v for v in listing if v != -1]


def test_build_tree_empty_listing_is_null():
    assert build_tree([-1]) is None


def test_build_tree_truncated_raises():
    with pytest.raises(ValueError):
        build_tree([1, 2, -1])


def test_build_bst_inorder_is_sorted():
    values = [50, 30, 70, 20, 40, 60, 80, 30]
    root = build_bst(values)
    assert inorder(root) == sorted(values)
    assert preorder(root)[0] == 50
    assert postorder(root)[-1] == 50


def test_build_bst_stops_at_sentinel():
    root = build_bst([10, 5, 15, -1, 1, 2])
    assert sorted(preorder(root)) == [5, 10, 15]


def test_build_bst_empty():
    assert build_bst([]) is None
    assert inorder(None) == []


def test_bst_insert_equal_goes_right():
    root = bst_insert(None, 4)
    root = bst_insert(root, 4)
    assert root.left is None
    assert root.right is not None and root.right.value == 4


def test_serialize_single_node():
    assert serialize_preorder(Node(1)) == "1 null null"


def test_serialize_round_trip_with_build_tree():
    listing = [1, 2, -1, -1, 3, 4, -1, -1, -1]
    text = serialize_preorder(build_tree(listing))
    assert text.split() == ["null" if v == -1 else str(v) for v in listing]


def test_generate_trees_zero():
    assert generate_trees(0) == []


def test_generate_trees_negative_raises():
    with pytest.raises(ValueError):
        generate_trees(-1)


def test_generate_trees_three():
    trees = generate_trees(3)
    assert len(trees) == 5
    assert len({serialize_preorder(t) for t in trees}) == len(trees)


@pytest.mark.parametrize("n", [1, 2, 3, 4])
def test_generated_trees_are_search_trees(n):
    for tree in generate_trees(n):
        assert inorder(tree) == list(range(1, n + 1))