import pytest

from algopractice.linked_list import (
    ListNode,
    copy_random_list,
    detect_cycle,
    from_values,
    is_palindrome,
    merge_two_lists,
    middle_node,
    remove_nth_from_end,
    reverse_list,
    rotate_right,
    to_values,
)


@pytest.mark.parametrize("values", [[], [7], [1, 2, 3, 4, 5]])
def test_round_trip(values):
    assert to_values(from_values(values)) == values


def test_iter_yields_nodes_in_order():
    head = from_values([4, 5, 6])
    nodes = list(head)
    assert [node.val for node in nodes] == [4, 5, 6]
    assert nodes[0] is head
    assert nodes[-1].next is None


def test_copy_random_list_is_deep_and_keeps_links():
    head = from_values([7, 13, 11, 10, 1])
    nodes = list(head)
    targets = [None, 0, 4, 2, 0]
    for node, target in zip(nodes, targets):
        node.random = None if target is None else nodes[target]

    copy = copy_random_list(head)
    copied = list(copy)
    assert to_values(copy) == to_values(head)
    assert all(a is not b for a, b in zip(nodes, copied))
    for node, target in zip(copied, targets):
        if target is None:
            assert node.random is None
        else:
            assert node.random is copied[target]
    assert to_values(head) == [7, 13, 11, 10, 1]


def test_copy_random_list_empty():
    assert copy_random_list(None) is None


@pytest.mark.parametrize("values", [[1], [1, 2], [1, 2, 3, 4, 5], [1, 2, 3, 4, 5, 6]])
def test_middle_node_returns_second_middle(values):
    assert to_values(middle_node(from_values(values))) == values[len(values) // 2:]


def test_middle_node_empty():
    assert middle_node(None) is None


@pytest.mark.parametrize("values", [[], [1], [1, 2, 3, 4, 5]])
def test_reverse_list(values):
    assert to_values(reverse_list(from_values(values))) == values[::-1]


@pytest.mark.parametrize(
    "values",
    [[], [1], [1, 2], [1, 1], [1, 2, 2, 1], [1, 2, 3, 2, 1], [1, 2, 3], [1, 2, 3, 1]],
)
def test_is_palindrome_and_list_restored(values):
    head = from_values(values)
    assert is_palindrome(head) == (values == values[::-1])
    assert to_values(head) == values


@pytest.mark.parametrize("n", [1, 2, 3, 4, 5])
def test_remove_nth_from_end(n):
    values = [1, 2, 3, 4, 5]
    expected = values[: len(values) - n] + values[len(values) - n + 1:]
    assert to_values(remove_nth_from_end(from_values(values), n)) == expected


def test_remove_only_node():
    assert remove_nth_from_end(from_values([1]), 1) is None


@pytest.mark.parametrize("n", [0, 4, -1])
def test_remove_nth_out_of_range(n):
    with pytest.raises(ValueError):
        remove_nth_from_end(from_values([1, 2, 3]), n)


@pytest.mark.parametrize("k", [0, 1, 2, 4, 5, 7, 12])
def test_rotate_right(k):
    values = [1, 2, 3, 4, 5]
    shift = k % len(values)
    expected = values[len(values) - shift:] + values[: len(values) - shift]
    assert to_values(rotate_right(from_values(values), k)) == expected


def test_rotate_right_short_lists():
    assert rotate_right(None, 3) is None
    single = from_values([9])
    assert rotate_right(single, 3) is single


def test_rotate_right_negative():
    with pytest.raises(ValueError):
        rotate_right(from_values([1, 2]), -1)


@pytest.mark.parametrize(
    "first,second",
    [([1, 2, 4], [1, 3, 4]), ([], [0]), ([5], []), ([], []), ([2, 6, 8], [1, 3, 9, 10])],
)
def test_merge_two_lists(first, second):
    merged = merge_two_lists(from_values(first), from_values(second))
    assert to_values(merged) == sorted(first + second)


@pytest.mark.parametrize("entry", [0, 1, 3])
def test_detect_cycle_finds_entry(entry):
    head = from_values([3, 2, 0, -4])
    nodes = list(head)
    nodes[-1].next = nodes[entry]
    assert detect_cycle(head) is nodes[entry]


def test_detect_cycle_self_loop():
    node = ListNode(1)
    node.next = node
    assert detect_cycle(node) is node


@pytest.mark.parametrize("values", [[], [1], [1, 2, 3]])
def test_detect_cycle_none(values):
    assert detect_cycle(from_values(values)) is None