import pytest

from structkit.hash_table import HashTable, djb2_hash, main


def test_empty_key_hashes_to_seed():
    assert djb2_hash("", 10**9) == 5381


def test_single_character_hash():
    assert djb2_hash("a", 10**9) == 177670


@pytest.mark.parametrize("key", ["", "apple", "banana", "orange", "ünïcode", "x" * 200])
@pytest.mark.parametrize("size", [1, 7, 100])
def test_hash_in_range(key, size):
    assert 0 <= djb2_hash(key, size) < size


@pytest.mark.parametrize("key", ["apple", "banana", "orange"])
def test_hash_default_size_is_100(key):
    assert djb2_hash(key) == djb2_hash(key, 100)
    assert djb2_hash(key) == djb2_hash(key, 10**9) % 100


def test_hash_rejects_bad_size():
    with pytest.raises(ValueError):
        djb2_hash("apple", 0)


def test_table_rejects_bad_size():
    with pytest.raises(ValueError):
        HashTable(0)


def test_insert_and_get():
    table = HashTable()
    table.insert("apple", 3)
    table.insert("banana", 5)
    assert table.get("apple") == 3
    assert table.get("banana") == 5
    assert len(table) == 2


def test_get_missing_returns_default():
    table = HashTable()
    assert table.get("missing") is None
    assert table.get("missing", -1) == -1


def test_insert_updates_existing():
    table = HashTable()
    table.insert("apple", 3)
    table.insert("apple", 9)
    assert table["apple"] == 9
    assert len(table) == 1


def test_delete_removes_and_ignores_missing():
    table = HashTable()
    table.insert("apple", 3)
    table.insert("banana", 5)
    table.delete("banana")
    table.delete("banana")
    assert table.get("banana", -1) == -1
    assert "banana" not in table
    assert len(table) == 1


def test_mapping_protocol():
    table = HashTable()
    table["orange"] = 7
    assert "orange" in table
    assert table["orange"] == 7
    del table["orange"]
    assert "orange" not in table
    with pytest.raises(KeyError):
        table["orange"]
    with pytest.raises(KeyError):
        del table["orange"]


def test_non_str_key_rejected():
    table = HashTable()
    with pytest.raises(TypeError):
        table.insert(5, 1)
    assert 5 not in table


def test_single_bucket_chains_newest_first():
    table = HashTable(1)
    for key, value in [("a", 1), ("b", 2), ("c", 3)]:
        table.insert(key, value)
    assert list(table.items()) == [("c", 3), ("b", 2), ("a", 1)]
    assert list(table) == ["c", "b", "a"]


def test_delete_middle_of_chain():
    table = HashTable(1)
    for key, value in [("a", 1), ("b", 2), ("c", 3)]:
        table.insert(key, value)
    table.delete("b")
    assert list(table.items()) == [("c", 3), ("a", 1)]


def test_items_cover_all_entries():
    table = HashTable(7)
    pairs = {f"key{n}": n for n in range(50)}
    for key, value in pairs.items():
        table[key] = value
    assert dict(table.items()) == pairs
    assert len(table) == len(pairs)


def test_format_entries():
    table = HashTable(1)
    table.insert("a", 1)
    table.insert("b", 2)
    assert table.format_entries() == "Key: b → Value: 2\nKey: a → Value: 1"


def test_format_entries_empty():
    assert HashTable().format_entries() == ""


def test_main_output(capsys):
    assert main() == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[:3] == ["apple: 3", "banana: 5", "banana: -1"]
    assert sorted(lines[3:]) == ["Key: apple → Value: 3", "Key: orange → Value: 7"]