from chaintable.debug import print_chain, print_table, verify_table
from chaintable.table import HashTable


def test_diagnostic_string():
    t = HashTable()
    for value in (0, 4, 1, 2):
        t.add(value)

    assert t.to_diagnostic_string() == (
        "Slots occupied / capacity: 3/4\n"
        "Total number of entries: 4\n"
        "[  0 ]: 4 --> 0\n"
        "[  1 ]: 1\n"
        "[  2 ]: 2\n"
        "[  3 ]: empty"
    )
    assert str(t) == t.to_diagnostic_string()


def test_diagnostic_string_empty_table():
    t = HashTable(2)
    assert str(t) == (
        "Slots occupied / capacity: 0/2\n"
        "Total number of entries: 0\n"
        "[  0 ]: empty\n"
        "[  1 ]: empty"
    )


def test_print_table(capsys):
    t = HashTable(2)
    t.add("a")
    print_table(t, "letters")

    out = capsys.readouterr().out
    assert out.startswith("== letters ==\nSlots occupied / capacity: 1/2\n")
    assert out.endswith("\n")
    assert out.count(": a") == 1


def test_print_chain(capsys):
    t = HashTable(10)
    t.add(3)
    t.add(13)

    print_chain(t, 3)
    print_chain(t, 4)
    assert capsys.readouterr().out == "[  3 ]: 13 --> 3\n[  4 ]: empty\n"


def test_verify_table():
    t = HashTable()
    assert verify_table(t) == []

    for i in range(20):
        t.add(i * 3)
    assert verify_table(t) == []


def test_verify_table_reports_problems():
    t = HashTable()
    t.add(1)

    # corrupt the counters behind the table's back
    t._occupied_slots = 2
    t._total_entries = 5

    problems = verify_table(t)
    assert "occupied slots is 2, counted 1" in problems
    assert "total entries is 5, counted 1" in problems
    assert len(problems) == 2


def test_verify_table_reports_misplaced_entry():
    t = HashTable()
    t.add(1)
    t._slots[2], t._slots[1] = t._slots[1], None

    assert verify_table(t) == ["1 found in slot 2, belongs in slot 1"]


def test_print_chain_matches_dump(capsys):
    t = HashTable(4)
    t.add(1)
    t.add(5)

    for i in range(t.capacity):
        print_chain(t, i)
    slot_lines = capsys.readouterr().out.splitlines()

    assert slot_lines == str(t).splitlines()[2:]
