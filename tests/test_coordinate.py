import pytest

from cui_rpg.coordinate import MAX_COLUMN, print_coordinates, render_coordinates

POINTS = [(0, 1), (0, 5), (2, 0), (2, 73), (4, 10)]


def test_empty_is_single_newline():
    assert render_coordinates([]) == "\n"


def test_star_count_matches_points():
    assert render_coordinates(POINTS).count("*") == len(POINTS)


def test_stars_land_at_their_positions():
    lines = render_coordinates(POINTS).split("\n")
    for row, column in POINTS:
        assert lines[row][column] == "*"


def test_rows_are_separated():
    lines = render_coordinates(POINTS).split("\n")
    assert lines[1] == ""
    assert lines[3] == ""
    assert lines[-1] == ""


def test_finished_rows_are_padded_to_line_width():
    lines = render_coordinates(POINTS).split("\n")
    assert len(lines[0]) == MAX_COLUMN
    assert len(lines[2]) == MAX_COLUMN


def test_last_row_stops_after_last_star():
    lines = render_coordinates(POINTS).split("\n")
    assert lines[4].endswith("*")
    assert len(lines[4]) == 11


def test_accepts_lists():
    assert render_coordinates([[0, 0]]) == render_coordinates([(0, 0)])


def test_column_out_of_range_raises():
    with pytest.raises(ValueError):
        render_coordinates([(0, MAX_COLUMN)])


def test_negative_column_raises():
    with pytest.raises(ValueError):
        render_coordinates([(0, -1)])


def test_row_going_backwards_raises():
    with pytest.raises(ValueError):
        render_coordinates([(2, 0), (2, 5), (1, 0)])


def test_print_matches_render(capsys):
    print_coordinates(POINTS)
    assert capsys.readouterr().out == render_coordinates(POINTS)