import pytest

from structkit.doubly_linked_list import DoublyLinkedList, main


@pytest.mark.parametrize("values", [[], [1], [3, 1, 4, 1, 5, 9]])
def test_both_directions_agree(values):
    items = DoublyLinkedList(values)
    assert list(items) == values
    assert list(reversed(items)) == values[::-1]
    assert len(items) == len(values)


def test_insert_at_both_ends():
    items = DoublyLinkedList()
    items.insert_front(10)
    items.insert_front(5)
    items.insert_back(20)
    items.insert_back(30)
    assert list(items) == [5, 10, 20, 30]


@pytest.mark.parametrize(
    "start, removed, expected",
    [
        ([5, 10, 20, 30], [20], [5, 10, 30]),
        ([1, 2, 3], [1, 3], [2]),
        ([7, 8, 7], [7], [8, 7]),
        ([1], [1], []),
    ],
)
def test_remove_keeps_links(start, removed, expected):
    items = DoublyLinkedList(start)
    for value in removed:
        items.remove(value)
    assert list(items) == expected
    assert list(reversed(items)) == expected[::-1]
    assert len(items) == len(expected)


def test_ends_stay_linked_after_removal():
    items = DoublyLinkedList([1, 2, 3])
    items.remove(1)
    items.remove(3)
    items.insert_back(4)
    items.insert_front(0)
    assert list(reversed(items)) == [4, 2, 0]


def test_remove_missing_raises():
    items = DoublyLinkedList([1, 2])
    with pytest.raises(ValueError, match="Value 99 not found."):
        items.remove(99)
    assert list(items) == [1, 2]


@pytest.mark.parametrize(
    "values, forward, backward",
    [
        ([], "Forward:", "Backward: (empty)"),
        ([5, 10], "Forward: 5 10", "Backward: 10 5"),
    ],
)
def test_format(values, forward, backward):
    items = DoublyLinkedList(values)
    assert (items.format_forward(), items.format_backward()) == (forward, backward)


def test_main_output(capsys):
    assert main() == 0
    assert capsys.readouterr().out.splitlines() == [
        "Forward: 5 10 20 30",
        "Backward: 30 20 10 5",
        "Deleting 20...",
        "Forward: 5 10 30",
        "Backward: 30 10 5",
    ]