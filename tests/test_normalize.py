import pytest

from flatsvg.pathdata.normalize import (
    convert_relative_to_absolute, check_path_data, format_number,
    InvalidPathData, PathDataError,
)


def test_absolute_path_is_unchanged():
    d = "M1,2 L3,4 C5,6 7,8 9,10 Z"
    # absolute cubic groups must be written as one comma separated group
    assert convert_relative_to_absolute("M1,2 L3,4 C5,6,7,8,9,10 Z") == d


def test_absolute_round_trip_keeps_values():
    d = "M1.5,-2.25 L0.125,4"
    assert convert_relative_to_absolute(d) == d
    assert convert_relative_to_absolute(convert_relative_to_absolute(d)) == d


def test_relative_move_adds_to_cursor():
    assert convert_relative_to_absolute("M2,3 m5,5") == "M2,3 M7,8"


def test_relative_line_chain():
    assert convert_relative_to_absolute("m1,1 l2,0 l0,2") == "M1,1 L3,1 L3,3"


def test_relative_cubic_only_moves_endpoint():
    # control points stay as written, only the endpoint is offset by the cursor
    out = convert_relative_to_absolute("M10,10 c1,2,3,4,5,6")
    assert out == "M10,10 C1,2 3,4 15,16"


def test_close_resets_cursor_to_origin():
    assert convert_relative_to_absolute("M5,5 Z m1,1") == "M5,5 Z M1,1"


def test_close_alone():
    assert convert_relative_to_absolute("Z") == "Z"
    assert convert_relative_to_absolute("z l2,2") == "Z L2,2"


def test_unsupported_groups_are_skipped():
    assert convert_relative_to_absolute("M1,1 H5 q1,2,3,4 L2,2") == "M1,1 L2,2"


def test_smooth_groups_are_skipped():
    assert convert_relative_to_absolute("M0,0 S1,1,2,2") == "M0,0"


def test_whitespace_is_collapsed_and_trimmed():
    assert convert_relative_to_absolute("  M1,1\n\tL2,2  \n") == "M1,1 L2,2"


def test_empty_input():
    assert convert_relative_to_absolute("") == ""


def test_bad_number_is_fatal():
    with pytest.raises(PathDataError) as exc:
        convert_relative_to_absolute("M1,1 Lx,2")
    assert exc.value.group == "Lx,2"
    assert exc.value.text == "x"


def test_missing_coordinate_is_fatal():
    with pytest.raises(PathDataError):
        convert_relative_to_absolute("M1")


def test_cubic_split_across_groups_is_fatal():
    # "C1,2" leaves no text for the remaining four numbers
    with pytest.raises(PathDataError):
        convert_relative_to_absolute("M0,0 C1,2 3,4 5,6")


def test_path_data_error_is_value_error():
    with pytest.raises(ValueError):
        convert_relative_to_absolute("M1,1,1")


@pytest.mark.parametrize("value, text", [
    (7.0, "7"),
    (0.5, "0.5"),
    (-3.25, "-3.25"),
    (1e-05, "0.00001"),
    (1e21, "1000000000000000000000"),
    (-0.0, "-0"),
])
def test_format_number(value, text):
    assert format_number(value) == text


def test_check_path_data_accepts_move():
    check_path_data("M0,0")
    check_path_data("m0,0 l1,1")


@pytest.mark.parametrize("content", ["", "L0,0", " M0,0", "<path d='M0,0'/>"])
def test_check_path_data_rejects(content):
    with pytest.raises(InvalidPathData):
        check_path_data(content)


@pytest.mark.parametrize("d, expected", [
    ("M0,inf", "M0,inf"),
    ("M-Infinity,1", "M-inf,1"),
    ("MNaN,2", "MNaN,2"),
])
def test_non_finite_numbers_are_accepted(d, expected):
    assert convert_relative_to_absolute(d) == expected


def test_non_ascii_letter_is_not_a_command():
    assert convert_relative_to_absolute("M1,1 ſ2,2") == "M1,1"
