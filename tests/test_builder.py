import pytest

from minefield import config
from minefield.errors import EmptyBoardError, MalformedBoardError, UnknownSymbolError
from minefield.grid.builder import build_grid
from minefield.types import Empty, Grid, Mine


def test_build_two_by_two():
    grid = build_grid("*.-.*-")
    assert grid == Grid(width=2, height=2, cells=[Mine(), Empty(0), Empty(0), Mine()])


def test_build_without_mines():
    grid = build_grid("...-...-")
    assert (grid.width, grid.height) == (3, 2)
    assert grid.cells == (Empty(0),) * 6


def test_build_only_mines():
    grid = build_grid("**-**-**-")
    assert (grid.width, grid.height) == (2, 3)
    assert grid.cells == (Mine(),) * 6


def test_build_checkerboard():
    grid = build_grid("*.*-.*.-*.*-")
    assert (grid.width, grid.height) == (3, 3)
    assert grid.cells == (
        Mine(), Empty(0), Mine(),
        Empty(0), Mine(), Empty(0),
        Mine(), Empty(0), Mine(),
    )


def test_empty_text_is_rejected():
    with pytest.raises(EmptyBoardError):
        build_grid("")


@pytest.mark.parametrize("text", ["-", "--"])
def test_board_without_cells_is_rejected(text):
    with pytest.raises(EmptyBoardError):
        build_grid(text)


def test_rows_of_different_length_are_rejected():
    with pytest.raises(MalformedBoardError):
        build_grid("*.*-.*.-*.-")


def test_blank_row_after_first_row_is_rejected():
    with pytest.raises(MalformedBoardError):
        build_grid("..--")
    with pytest.raises(MalformedBoardError):
        build_grid("-..-")


def test_unknown_symbol_is_rejected():
    with pytest.raises(UnknownSymbolError) as excinfo:
        build_grid("*.*-.*.-*.a-")
    assert excinfo.value.symbol == "a"


def test_embedded_newline_is_rejected():
    with pytest.raises(UnknownSymbolError):
        build_grid("*.\n.*\n")


def test_unterminated_last_row_is_rejected_by_default():
    with pytest.raises(MalformedBoardError):
        build_grid("*.-.*")


def test_unterminated_last_row_can_be_accepted():
    grid = build_grid("*.-.*", require_trailing_separator=False)
    assert grid == Grid(width=2, height=2, cells=[Mine(), Empty(0), Empty(0), Mine()])

    grid = build_grid("*.*", require_trailing_separator=False)
    assert (grid.width, grid.height) == (3, 1)

    with pytest.raises(MalformedBoardError):
        build_grid("*.-.", require_trailing_separator=False)


def test_unknown_symbol_is_reported_before_later_malformed_row():
    with pytest.raises(UnknownSymbolError) as excinfo:
        build_grid("*.-x-")
    assert excinfo.value.symbol == "x"


def test_trailing_separator_policy_is_read_from_config(monkeypatch):
    monkeypatch.setattr(config, "REQUIRE_TRAILING_SEPARATOR", False)
    grid = build_grid("*.-.*")
    assert (grid.width, grid.height) == (2, 2)

    monkeypatch.setattr(config, "REQUIRE_TRAILING_SEPARATOR", True)
    with pytest.raises(MalformedBoardError):
        build_grid("*.-.*")
