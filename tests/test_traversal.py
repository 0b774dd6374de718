from dsbasics.binary_tree import make_binary_tree
from dsbasics.complete_tree import CompleteBT
from dsbasics.traversal import (
    bf_traversal,
    df_traversal,
    height,
    iter_breadth_first,
    iter_depth_first,
)


def sample_tree():
    return make_binary_tree(
        1.0,
        make_binary_tree(
            2.0,
            make_binary_tree(4.0),
            make_binary_tree(5.0, None, make_binary_tree(8.0)),
        ),
        make_binary_tree(3.0, make_binary_tree(6.0), make_binary_tree(7.0)),
    )


def values(nodes):
    return [node.value for node in nodes]


def test_height_of_empty_and_leaf():
    assert height(None) == -1
    assert height(make_binary_tree(1)) == 0


def test_height_of_sample_tree():
    assert height(sample_tree()) == 3


def test_depth_first_is_in_order():
    assert values(iter_depth_first(sample_tree())) == [4, 2, 5, 8, 1, 6, 3, 7]


def test_breadth_first_by_levels():
    assert values(iter_breadth_first(sample_tree())) == [1, 2, 3, 4, 5, 6, 7, 8]


def test_breadth_first_on_complete_tree_is_storage_order():
    storage = [1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0, 8.0]
    assert values(iter_breadth_first(CompleteBT(storage))) == storage


def test_depth_first_on_complete_tree_visits_every_node():
    storage = list(range(10))
    visited = values(iter_depth_first(CompleteBT(storage)))
    assert sorted(visited) == storage


def test_callbacks_match_iterators():
    tree = sample_tree()
    seen_df, seen_bf = [], []
    df_traversal(tree, seen_df.append)
    bf_traversal(tree, seen_bf.append)
    assert seen_df == list(iter_depth_first(tree))
    assert seen_bf == list(iter_breadth_first(tree))


def test_empty_tree_visits_nothing():
    seen = []
    df_traversal(None, seen.append)
    bf_traversal(CompleteBT([]), seen.append)
    assert seen == []