import pytest

from cslib.colors import canonical_color_name, convert_color_to_rgb, convert_rgb_to_color
from cslib.startup import ErrorException

TABLE_NAMES = [
    "black", "darkgray", "gray", "lightgray", "white", "red", "yellow",
    "green", "cyan", "blue", "magenta", "orange", "pink",
]


def test_canonical_name_strips_spaces_and_underscores():
    assert canonical_color_name(" Light_Gray ") == "lightgray"
    assert canonical_color_name("DARK GRAY") == "darkgray"


def test_named_colors():
    assert convert_color_to_rgb("DARK_GRAY") == 0x595959
    assert convert_color_to_rgb("Dark Gray") == 0x595959
    assert convert_color_to_rgb("orange") == 0xFFC800
    assert convert_color_to_rgb("BLACK") == 0x000000


def test_hex_color():
    assert convert_color_to_rgb("#FF00FF") == 0xFF00FF
    assert convert_color_to_rgb("#ff00ff") == 0xFF00FF


def test_empty_means_no_color():
    assert convert_color_to_rgb("") == -1
    assert convert_rgb_to_color(-1) == ""


def test_rgb_to_color_format():
    assert convert_rgb_to_color(0xFF00FF) == "#FF00FF"
    assert convert_rgb_to_color(0) == "#000000"


@pytest.mark.parametrize("name", TABLE_NAMES)
def test_named_round_trip(name):
    rgb = convert_color_to_rgb(name)
    assert convert_color_to_rgb(convert_rgb_to_color(rgb)) == rgb


@pytest.mark.parametrize("rgb", [0x000000, 0x123456, 0xABCDEF, 0xFFFFFF])
def test_rgb_round_trip(rgb):
    assert convert_color_to_rgb(convert_rgb_to_color(rgb)) == rgb


def test_rgb_to_color_ignores_high_bits():
    assert convert_rgb_to_color(0x7F123456) == convert_rgb_to_color(0x123456)


def test_illegal_hex():
    with pytest.raises(ErrorException, match="Illegal color"):
        convert_color_to_rgb("#zz0000")


def test_hex_out_of_range():
    with pytest.raises(ErrorException, match="Illegal color"):
        convert_color_to_rgb("#FFFFFFFFFF")


def test_undefined_color():
    with pytest.raises(ErrorException) as info:
        convert_color_to_rgb("chartreuse")
    assert info.value.message == "setColor: Undefined color - chartreuse"