import pytest

from termtint.attrs import Attr


@pytest.mark.parametrize(
    "attr, expected",
    [
        (Attr.FG_RED, 31),
        (Attr.BG_BRIGHT_CYAN, 106),
        (Attr.BOLD, 1),
        (Attr.UNDERLINE, 4),
        (Attr.BG_BLACK, 40),
        (Attr.FG_BRIGHT_GREEN, 92),
    ],
)
def test_known_codes(attr, expected):
    assert attr.code() == expected


@pytest.mark.parametrize(
    "attr, expected",
    [
        (Attr.FG_BLACK, 30),
        (Attr.BG_BRIGHT_WHITE, 107),
        (Attr.DIM, 2),
        (Attr.ITALIC, 3),
    ],
)
def test_pinned_codes_by_member(attr, expected):
    assert attr.code() == expected


def test_every_attr_has_a_distinct_code():
    codes = [Attr(value).code() for value in range(len(Attr))]
    assert len(codes) == len(set(codes))
    assert len(codes) == len(Attr)


def test_values_are_consecutive_from_zero():
    members = [Attr(value) for value in range(len(Attr))]
    assert members == list(Attr)
    assert Attr(0) is Attr.FG_BLACK


def test_foreground_codes_in_ansi_ranges():
    codes = [Attr(value).code() for value in range(16)]
    assert all(Attr(value).name.startswith("FG_") for value in range(16))
    assert codes[:8] == [30, 31, 32, 33, 34, 35, 36, 37]
    assert codes[8:] == [90, 91, 92, 93, 94, 95, 96, 97]


@pytest.mark.parametrize(
    "fg, bg",
    [
        (Attr.FG_BLACK, Attr.BG_BLACK),
        (Attr.FG_RED, Attr.BG_RED),
        (Attr.FG_GREEN, Attr.BG_GREEN),
        (Attr.FG_YELLOW, Attr.BG_YELLOW),
        (Attr.FG_BLUE, Attr.BG_BLUE),
        (Attr.FG_MAGENTA, Attr.BG_MAGENTA),
        (Attr.FG_CYAN, Attr.BG_CYAN),
        (Attr.FG_WHITE, Attr.BG_WHITE),
        (Attr.FG_BRIGHT_BLACK, Attr.BG_BRIGHT_BLACK),
        (Attr.FG_BRIGHT_RED, Attr.BG_BRIGHT_RED),
        (Attr.FG_BRIGHT_GREEN, Attr.BG_BRIGHT_GREEN),
        (Attr.FG_BRIGHT_YELLOW, Attr.BG_BRIGHT_YELLOW),
        (Attr.FG_BRIGHT_BLUE, Attr.BG_BRIGHT_BLUE),
        (Attr.FG_BRIGHT_MAGENTA, Attr.BG_BRIGHT_MAGENTA),
        (Attr.FG_BRIGHT_CYAN, Attr.BG_BRIGHT_CYAN),
        (Attr.FG_BRIGHT_WHITE, Attr.BG_BRIGHT_WHITE),
    ],
)
def test_background_is_foreground_plus_ten(fg, bg):
    assert bg.code() - fg.code() == 10


def test_background_members_follow_foreground():
    codes = [Attr(value).code() for value in range(16, 32)]
    assert all(Attr(value).name.startswith("BG_") for value in range(16, 32))
    assert codes[:8] == [40, 41, 42, 43, 44, 45, 46, 47]
    assert codes[8:] == [100, 101, 102, 103, 104, 105, 106, 107]


def test_attr_integer_values_match_key_encoding():
    assert Attr(1) is Attr.FG_RED
    assert Attr(2) is Attr.FG_GREEN