import pytest

from dsbasics.complete_tree import CompleteBT


@pytest.fixture
def storage():
    return [1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0, 8.0]


def test_root_value(storage):
    tree = CompleteBT(storage)
    assert tree.value == storage[0]
    assert tree.size == len(storage)


def test_children_follow_index_layout(storage):
    tree = CompleteBT(storage)
    assert tree.left.value == storage[1]
    assert tree.right.value == storage[2]
    assert tree.left.left.value == storage[3]
    assert tree.left.right.value == storage[4]


def test_parent_inverts_children(storage):
    tree = CompleteBT(storage)
    for i in range(1, len(storage)):
        node = tree.subtree(i)
        assert node.parent.root == (i - 1) // 2
        parent = node.parent
        assert parent.left.root == i or parent.right.root == i


def test_root_has_empty_parent(storage):
    assert not CompleteBT(storage).parent


def test_out_of_range_subtree_is_empty(storage):
    tree = CompleteBT(storage)
    assert not tree.subtree(len(storage))
    assert tree.subtree(len(storage) - 1)
    assert not tree.left.left.left.right


def test_size_limits_view(storage):
    tree = CompleteBT(storage, 0, 3)
    assert tree.left
    assert tree.right
    assert not tree.left.left


def test_value_setter_writes_storage(storage):
    tree = CompleteBT(storage)
    tree.right.value = 42.0
    assert storage[2] == 42.0


def test_value_of_empty_tree_raises(storage):
    with pytest.raises(IndexError):
        CompleteBT(storage).subtree(100).value


def test_empty_storage_is_empty_tree():
    assert not CompleteBT([])