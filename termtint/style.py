"""Wrap text in ANSI escape sequences."""

from collections.abc import Iterable
from itertools import groupby

from .attrs import Attr
from .cache import AnsiCache
from .term import allow_color

RESET = "\x1b[0m"

ansi_cache = AnsiCache()


def _code(attr: int) -> int:
    try:
        return Attr(attr).code()
    except ValueError:
        return 0


def make_attr_seq(attrs: Iterable[int]) -> str:
    """Join attribute codes with ';', dropping consecutive duplicates."""
    codes = (str(_code(a)) for a in attrs)
    return ";".join(code for code, _ in groupby(codes))


def make_start_seq(attrs: Iterable[int]) -> str:
    """Build the escape sequence that switches the attributes on."""
    return f"\x1b[{make_attr_seq(attrs)}m"


def style(text: str, *args: Attr) -> str:
    """Apply the given attributes to text, followed by a reset."""
    if not allow_color():
        return text
    if not args or not text:
        return text
    start = ansi_cache.get(args)
    if start is None:
        start = make_start_seq(args)
        ansi_cache.set(args, start)
    return f"{start}{text}{RESET}"