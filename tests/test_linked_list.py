from dsbasics.linked_list import Node


def _build(values):
    head = Node()
    for value in values:
        head.insert_after(value)
    return head


def test_insert_after_head_prepends():
    head = _build(float(i) for i in range(10))
    assert head.to_list() == [float(i) for i in reversed(range(10))]


def test_insert_after_returns_new_node():
    head = Node()
    node = head.insert_after(7)
    assert node.value == 7
    assert head.next is node


def test_appending_via_returned_node_keeps_order():
    head = Node()
    last = head
    for i in range(5):
        last = last.insert_after(i)
    assert head.to_list() == list(range(5))


def test_iteration_matches_to_list():
    head = _build([3, 1, 4])
    assert list(head) == head.to_list()


def test_empty_list():
    assert Node().to_list() == []


def test_find_predecessor_found():
    head = _build([1, 2, 3])
    pred = head.find_predecessor(lambda v: v == 2)
    assert pred is not None
    assert pred.next.value == 2


def test_find_predecessor_of_first_is_head():
    head = _build([1, 2, 3])
    assert head.find_predecessor(lambda v: v == 3) is head


def test_find_predecessor_missing():
    head = _build([1, 2, 3])
    assert head.find_predecessor(lambda v: v == 99) is None