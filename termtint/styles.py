"""Shortcut functions for common colours and font styles."""

from .attrs import Attr
from .style import style


def _format(fmt: str, args: tuple) -> str:
    return fmt % args if args else fmt


def black(text: str) -> str:
    """Return text in black."""
    return style(text, Attr.FG_BLACK)


def bright_black(text: str) -> str:
    """Return text in bright black."""
    return style(text, Attr.FG_BRIGHT_BLACK)


def blackf(fmt: str, *args: object) -> str:
    """Format with %-style arguments and return the result in black."""
    return black(_format(fmt, args))


def red(text: str) -> str:
    """Return text in red."""
    return style(text, Attr.FG_RED)


def bright_red(text: str) -> str:
    """Return text in bright red."""
    return style(text, Attr.FG_BRIGHT_RED)


def redf(fmt: str, *args: object) -> str:
    """Format with %-style arguments and return the result in red."""
    return red(_format(fmt, args))


def green(text: str) -> str:
    """Return text in green."""
    return style(text, Attr.FG_GREEN)


def bright_green(text: str) -> str:
    """Return text in bright green."""
    return style(text, Attr.FG_BRIGHT_GREEN)


def greenf(fmt: str, *args: object) -> str:
    """Format with %-style arguments and return the result in green."""
    return green(_format(fmt, args))


def yellow(text: str) -> str:
    """Return text in yellow."""
    return style(text, Attr.FG_YELLOW)


def bright_yellow(text: str) -> str:
    """Return text in bright yellow."""
    return style(text, Attr.FG_BRIGHT_YELLOW)


def yellowf(fmt: str, *args: object) -> str:
    """Format with %-style arguments and return the result in yellow."""
    return yellow(_format(fmt, args))


def blue(text: str) -> str:
    """Return text in blue."""
    return style(text, Attr.FG_BLUE)


def bright_blue(text: str) -> str:
    """Return text in bright blue."""
    return style(text, Attr.FG_BRIGHT_BLUE)


def bluef(fmt: str, *args: object) -> str:
    """Format with %-style arguments and return the result in blue."""
    return blue(_format(fmt, args))


def magenta(text: str) -> str:
    """Return text in magenta."""
    return style(text, Attr.FG_MAGENTA)


def bright_magenta(text: str) -> str:
    """Return text in bright magenta."""
    return style(text, Attr.FG_BRIGHT_MAGENTA)


def magentaf(fmt: str, *args: object) -> str:
    """Format with %-style arguments and return the result in magenta."""
    return magenta(_format(fmt, args))


def cyan(text: str) -> str:
    """Return text in cyan."""
    return style(text, Attr.FG_CYAN)


def bright_cyan(text: str) -> str:
    """Return text in bright cyan."""
    return style(text, Attr.FG_BRIGHT_CYAN)


def cyanf(fmt: str, *args: object) -> str:
    """Format with %-style arguments and return the result in cyan."""
    return cyan(_format(fmt, args))


def white(text: str) -> str:
    """Return text in white."""
    return style(text, Attr.FG_WHITE)


def bright_white(text: str) -> str:
    """Return text in bright white."""
    return style(text, Attr.FG_BRIGHT_WHITE)


def whitef(fmt: str, *args: object) -> str:
    """Format with %-style arguments and return the result in white."""
    return white(_format(fmt, args))


def bold(text: str) -> str:
    """Return text in bold."""
    return style(text, Attr.BOLD)


def italic(text: str) -> str:
    """Return text in italic."""
    return style(text, Attr.ITALIC)


def underline(text: str) -> str:
    """Return text underlined."""
    return style(text, Attr.UNDERLINE)


def dim(text: str) -> str:
    """Return text dimmed."""
    return style(text, Attr.DIM)