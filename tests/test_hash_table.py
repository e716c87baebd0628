import pytest

from dsakit.hash_table import LinearProbingTable, TableFullError


def test_colliding_keys_probe_linearly():
    table = LinearProbingTable(10)
    assert [table.insert(key) for key in (5, 15, 25)] == [5, 6, 7]


def test_search_after_delete_still_finds_later_key():
    table = LinearProbingTable(10)
    table.insert(5)
    table.insert(15)
    slot = table.insert(25)
    table.delete(5)
    assert table.search(25) == slot
    assert 5 not in table
    assert 25 in table


def test_delete_frees_slot():
    table = LinearProbingTable(10)
    slot = table.insert(3)
    assert table.delete(3) == slot
    assert table.slots()[slot] is None
    with pytest.raises(KeyError):
        table.search(3)


def test_full_table_rejects_insert():
    table = LinearProbingTable(3)
    for key in (1, 2, 3):
        table.insert(key)
    with pytest.raises(TableFullError):
        table.insert(4)
    assert sorted(table.slots()) == [1, 2, 3]


def test_missing_key_raises():
    table = LinearProbingTable(10)
    table.insert(1)
    with pytest.raises(KeyError):
        table.search(11)
    with pytest.raises(KeyError):
        table.delete(11)


def test_slots_length_and_contents():
    table = LinearProbingTable(7)
    keys = [4, 11, 18]
    for key in keys:
        table.insert(key)
    slots = table.slots()
    assert len(slots) == table.size
    assert sorted(k for k in slots if k is not None) == keys


def test_every_inserted_key_is_found_at_its_slot():
    table = LinearProbingTable(10)
    keys = [0, 10, 20, 9, 19, 1]
    placed = {key: table.insert(key) for key in keys}
    assert all(table.search(key) == slot for key, slot in placed.items())
    assert all(table.slots()[slot] == key for key, slot in placed.items())


def test_invalid_size_rejected():
    with pytest.raises(ValueError):
        LinearProbingTable(0)