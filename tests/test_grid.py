import io
import sys

import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsalgos.grid import format_grid, main, parse_grid


def _grids():
    return st.tuples(st.integers(0, 4), st.integers(0, 4)).flatmap(
        lambda shape: st.tuples(
            st.just(shape[1]),
            st.lists(
                st.lists(st.integers(-1000, 1000), min_size=shape[1], max_size=shape[1]),
                min_size=shape[0],
                max_size=shape[0],
            ),
        )
    )


def test_parse_grid_fills_row_by_row():
    assert parse_grid(["1", "2", "3", "4", "5", "6"], 2, 3) == [[1, 2, 3], [4, 5, 6]]


def test_parse_grid_accepts_integers_and_ignores_extra_tokens():
    assert parse_grid([7, 8, 9], 1, 2) == [[7, 8]]


def test_parse_grid_reads_from_iterator_without_overconsuming():
    tokens = iter(["1", "2", "3"])
    assert parse_grid(tokens, 1, 2) == [[1, 2]]
    assert list(tokens) == ["3"]


def test_parse_grid_too_few_tokens():
    with pytest.raises(ValueError):
        parse_grid(["1", "2", "3"], 2, 2)


def test_parse_grid_non_integer_token():
    with pytest.raises(ValueError):
        parse_grid(["1", "x"], 1, 2)


def test_parse_grid_negative_dimension():
    with pytest.raises(ValueError):
        parse_grid([], -1, 2)


def test_format_grid_layout():
    assert format_grid([[1, 2], [3, 4]]) == "1 2 \n3 4 \n"


def test_format_grid_empty_rows_still_end_lines():
    assert format_grid([[], []]) == "\n\n"


def test_format_grid_no_rows():
    assert format_grid([]) == ""


@given(_grids())
def test_round_trip(shape_and_grid):
    cols, grid = shape_and_grid
    text = format_grid(grid)
    assert text.count("\n") == len(grid)
    assert parse_grid(text.split(), len(grid), cols) == grid


def test_main_prints_grid(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("2 3\n1 2 3\n4 5 6\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Enter number of rows: Enter number of columns: ")
    assert out.endswith("\nUpdated 2D Array:\n" + format_grid([[1, 2, 3], [4, 5, 6]]))


def test_main_reports_short_input(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("2 2\n1 2\n"))
    assert main([]) == 1
    assert "error" in capsys.readouterr().err


def test_main_reports_bad_size(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("two\n"))
    assert main([]) == 1
    assert "error" in capsys.readouterr().err