import pytest

from minefield.errors import UnknownSymbolError
from minefield.grid.parser import cell_to_symbol, identify_symbol, tokenize
from minefield.types import Empty, Mine, RowSeparator


def test_identify_known_symbols():
    assert identify_symbol("*") == Mine()
    assert identify_symbol(".") == Empty(0)
    assert identify_symbol("-") == RowSeparator()


def test_identify_unknown_symbol_reports_it():
    with pytest.raises(UnknownSymbolError) as excinfo:
        identify_symbol("a")
    assert excinfo.value.symbol == "a"
    assert "'a'" in str(excinfo.value)


def test_newline_is_not_a_board_symbol():
    with pytest.raises(UnknownSymbolError):
        identify_symbol("\n")


def test_tokenize_keeps_order_and_separators():
    assert list(tokenize("*.-")) == [Mine(), Empty(0), RowSeparator()]
    assert list(tokenize("")) == []


def test_tokenize_is_lazy_and_stops_at_first_unknown_symbol():
    tokens = tokenize("*a")
    assert next(tokens) == Mine()
    with pytest.raises(UnknownSymbolError) as excinfo:
        next(tokens)
    assert excinfo.value.symbol == "a"


def test_cell_to_symbol():
    assert cell_to_symbol(Mine()) == "*"
    assert cell_to_symbol(Empty(0)) == "."
    assert cell_to_symbol(Empty(3)) == "3"
    assert cell_to_symbol(Empty(8)) == "8"


def test_symbols_round_trip_except_numbered_cells():
    assert identify_symbol(cell_to_symbol(Mine())) == Mine()
    assert identify_symbol(cell_to_symbol(Empty(0))) == Empty(0)
    # digits are output-only, they are not input symbols
    with pytest.raises(UnknownSymbolError):
        identify_symbol(cell_to_symbol(Empty(2)))


def test_cell_to_symbol_rejects_row_separator():
    with pytest.raises(TypeError):
        cell_to_symbol(RowSeparator())
