import pytest

from structkit.linked_list import LinkedList, main


def test_mixed_insertions():
    items = LinkedList([10, 20])
    items.insert_front(5)
    items.insert_back(30)
    assert list(items) == [5, 10, 20, 30]
    assert len(items) == 4


@pytest.mark.parametrize(
    "values, text",
    [([5, 10, 30], "5 -> 10 -> 30 -> NULL"), ([], "NULL")],
)
def test_str_format(values, text):
    assert str(LinkedList(values)) == text


@pytest.mark.parametrize(
    "start, removed, appended, expected",
    [
        ([1, 2, 1, 3], 1, None, [2, 1, 3]),
        ([1, 2, 3], 3, 4, [1, 2, 4]),
        ([1], 1, 2, [2]),
    ],
)
def test_remove(start, removed, appended, expected):
    items = LinkedList(start)
    items.remove(removed)
    if appended is not None:
        items.insert_back(appended)
    assert list(items) == expected
    assert len(items) == len(expected)


def test_remove_missing_raises():
    items = LinkedList([5, 10])
    with pytest.raises(ValueError, match="Value 99 not found."):
        items.remove(99)
    assert list(items) == [5, 10]


@pytest.mark.parametrize("values", [[], [7], [5, 10, 30, 40]])
def test_reverse_and_back(values):
    items = LinkedList(values)
    items.reverse()
    assert list(items) == values[::-1]
    items.reverse()
    assert list(items) == values


def test_reverse_then_insert_back():
    items = LinkedList([1, 2, 3])
    items.reverse()
    items.insert_back(0)
    assert list(items) == [3, 2, 1, 0]


def test_main_output(capsys):
    assert main() == 0
    assert capsys.readouterr().out.splitlines() == [
        "List: 5 -> 10 -> 20 -> 30 -> NULL",
        "List: 5 -> 10 -> 30 -> NULL",
        "Value 99 not found.",
        "List: 30 -> 10 -> 5 -> NULL",
    ]