"""Text style attributes and their ANSI SGR codes."""

from enum import IntEnum


class Attr(IntEnum):
    """A text style attribute: foreground, background or font style."""

    FG_BLACK = 0
    FG_RED = 1
    FG_GREEN = 2
    FG_YELLOW = 3
    FG_BLUE = 4
    FG_MAGENTA = 5
    FG_CYAN = 6
    FG_WHITE = 7
    FG_BRIGHT_BLACK = 8
    FG_BRIGHT_RED = 9
    FG_BRIGHT_GREEN = 10
    FG_BRIGHT_YELLOW = 11
    FG_BRIGHT_BLUE = 12
    FG_BRIGHT_MAGENTA = 13
    FG_BRIGHT_CYAN = 14
    FG_BRIGHT_WHITE = 15

    BG_BLACK = 16
    BG_RED = 17
    BG_GREEN = 18
    BG_YELLOW = 19
    BG_BLUE = 20
    BG_MAGENTA = 21
    BG_CYAN = 22
    BG_WHITE = 23
    BG_BRIGHT_BLACK = 24
    BG_BRIGHT_RED = 25
    BG_BRIGHT_GREEN = 26
    BG_BRIGHT_YELLOW = 27
    BG_BRIGHT_BLUE = 28
    BG_BRIGHT_MAGENTA = 29
    BG_BRIGHT_CYAN = 30
    BG_BRIGHT_WHITE = 31

    BOLD = 32
    DIM = 33
    ITALIC = 34
    UNDERLINE = 35

    def code(self) -> int:
        """Return the ANSI SGR code for this attribute."""
        return _ANSI_CODES[self]


_ANSI_CODES = {
    Attr.BOLD: 1,
    Attr.DIM: 2,
    Attr.ITALIC: 3,
    Attr.UNDERLINE: 4,
    Attr.FG_BLACK: 30,
    Attr.FG_RED: 31,
    Attr.FG_GREEN: 32,
    Attr.FG_YELLOW: 33,
    Attr.FG_BLUE: 34,
    Attr.FG_MAGENTA: 35,
    Attr.FG_CYAN: 36,
    Attr.FG_WHITE: 37,
    Attr.FG_BRIGHT_BLACK: 90,
    Attr.FG_BRIGHT_RED: 91,
    Attr.FG_BRIGHT_GREEN: 92,
    Attr.FG_BRIGHT_YELLOW: 93,
    Attr.FG_BRIGHT_BLUE: 94,
    Attr.FG_BRIGHT_MAGENTA: 95,
    Attr.FG_BRIGHT_CYAN: 96,
    Attr.FG_BRIGHT_WHITE: 97,
    Attr.BG_BLACK: 40,
    Attr.BG_RED: 41,
    Attr.BG_GREEN: 42,
    Attr.BG_YELLOW: 43,
    Attr.BG_BLUE: 44,
    Attr.BG_MAGENTA: 45,
    Attr.BG_CYAN: 46,
    Attr.BG_WHITE: 47,
    Attr.BG_BRIGHT_BLACK: 100,
    Attr.BG_BRIGHT_RED: 101,
    Attr.BG_BRIGHT_GREEN: 102,
    Attr.BG_BRIGHT_YELLOW: 103,
    Attr.BG_BRIGHT_BLUE: 104,
    Attr.BG_BRIGHT_MAGENTA: 105,
    Attr.BG_BRIGHT_CYAN: 106,
    Attr.BG_BRIGHT_WHITE: 107,
}