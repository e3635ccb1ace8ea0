import pytest

from nodekit.listnode import (
    ListNode,
    delete_duplicates,
    from_iterable,
    has_cycle,
    is_palindrome,
    merge_two_lists,
    middle_node,
    remove_elements,
    reverse_list,
    to_list,
)


@pytest.mark.parametrize("values", [[], [1], [1, 2, 3], ["a", "b"]])
def test_round_trip(values):
    assert to_list(from_iterable(values)) == values


def test_empty_chain_is_none():
    assert from_iterable([]) is None
    assert to_list(None) == []


def test_node_iteration():
    assert list(ListNode(1, ListNode(2))) == [1, 2]


def test_has_cycle_false_for_plain_lists():
    assert has_cycle(None) is False
    assert has_cycle(from_iterable([3, 2, 0, -4])) is False


def test_has_cycle_true_for_loop():
    head = from_iterable([3, 2, 0, -4])
    tail = head
    while tail.next is not None:
        tail = tail.next
    tail.next = head.next
    assert has_cycle(head) is True


def test_has_cycle_self_loop():
    node = ListNode(1)
    node.next = node
    assert has_cycle(node) is True


def test_remove_elements_example():
    values = [1, 2, 6, 3, 4, 5, 6]
    head = from_iterable(values)
    result = remove_elements(head, 6)
    assert to_list(result) == [1, 2, 3, 4, 5]
    assert to_list(head) == values


def test_remove_elements_everything():
    assert remove_elements(from_iterable([7, 7, 7]), 7) is None
    assert remove_elements(None, 1) is None


@pytest.mark.parametrize("values", [[], [1], [1, 2], [1, 2, 3, 4, 5]])
def test_reverse_list(values):
    assert to_list(reverse_list(from_iterable(values))) == values[::-1]


def test_reverse_twice_is_identity():
    values = [5, 4, 9, 1]
    assert to_list(reverse_list(reverse_list(from_iterable(values)))) == values


def test_merge_two_lists_sorted():
    a, b = [1, 2, 4], [1, 3, 4]
    merged = merge_two_lists(from_iterable(a), from_iterable(b))
    assert to_list(merged) == sorted(a + b)


def test_merge_prefers_first_list_on_ties():
    first = ListNode(1)
    second = ListNode(1)
    assert merge_two_lists(first, second) is first


def test_merge_with_empty():
    only = from_iterable([0])
    assert merge_two_lists(None, only) is only
    assert merge_two_lists(None, None) is None


@pytest.mark.parametrize(
    "values, expected",
    [
        ([1, 2, 2, 1], True),
        ([1, 2, 3, 2, 1], True),
        ([1, 2], False),
        ([12, 1], False),
        ([], True),
        ([4], True),
    ],
)
def test_is_palindrome(values, expected):
    assert is_palindrome(from_iterable(values)) is expected


def test_is_palindrome_leaves_list_intact():
    values = [1, 2, 3, 4, 2, 1]
    head = from_iterable(values)
    is_palindrome(head)
    assert to_list(head) == values


def test_delete_duplicates():
    values = [1, 1, 2, 3, 3]
    head = from_iterable(values)
    result = delete_duplicates(head)
    assert result is head
    assert to_list(result) == sorted(set(values))


def test_delete_duplicates_empty():
    assert delete_duplicates(None) is None


def test_middle_node_odd_and_even():
    assert middle_node(from_iterable([1, 2, 3, 4, 5])).val == 3
    assert middle_node(from_iterable([1, 2, 3, 4, 5, 6])).val == 4
    assert middle_node(None) is None