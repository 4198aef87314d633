import pytest

from chromapix.colors import NamedColorTable
from chromapix.errors import ContractViolation, NotFound


def test_basic_table():
    table = NamedColorTable.basic()
    assert len(table) == 10
    assert table.lookup("yellow") == (255, 255, 0)
    assert table.lookup("gray") == table.lookup("grey")
    assert "black" in table
    assert "mauve" not in table
    assert 42 not in table


def test_names_are_normalized():
    table = NamedColorTable({" Tomato ": (255, 99, 71)})
    assert table.lookup("TOMATO") == (255, 99, 71)
    assert table.names() == ["tomato"]
    assert list(table) == ["tomato"]


def test_lookup_f():
    table = NamedColorTable.basic()
    assert table.lookup_f("blue") == (0.0, 0.0, 1.0)


def test_not_found():
    table = NamedColorTable.basic()
    with pytest.raises(NotFound) as excinfo:
        table.lookup("mauve")
    assert "mauve" in str(excinfo.value)
    with pytest.raises(KeyError):
        table.lookup("")


@pytest.mark.parametrize("bad", [(1.0, 0.0, 0.0), (256, 0, 0), (1, 2)])
def test_rejects_non_byte_triples(bad):
    with pytest.raises(ContractViolation):
        NamedColorTable({"bad": bad})


def test_tables_are_independent():
    one = NamedColorTable({"ink": (10, 10, 10)})
    two = NamedColorTable.basic()
    assert "ink" in one
    assert "ink" not in two
    assert repr(one) == "NamedColorTable(1 colors)"
