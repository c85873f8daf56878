from ftkit.tables import table_clear, table_len


def test_len_stops_at_terminator():
    assert table_len(["a", "b", None, "c"]) == table_len(["a", "b"])


def test_len_without_terminator():
    table = ["x", "y", "z"]
    assert table_len(table) == len(table)


def test_len_none_and_empty():
    assert table_len(None) == 0
    assert table_len([None, "a"]) == 0


def test_clear_empties_table():
    table = ["a", "b", None]
    table_clear(table)
    assert table == []
    assert table_len(table) == 0


def test_clear_none_is_noop():
    assert table_clear(None) is None