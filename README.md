# termtint

termtint wraps text in ANSI escape sequences (SGR codes) so that it shows
colours and styles in a terminal. It uses only the standard library.

## Installation

```
pip install termtint
```

## Usage

The shortcut functions in `termtint.styles` cover the common colours and
font styles:

```python
from termtint.styles import red, bright_green, bold, underline, yellowf

print(red("Error: file not found"))
print(bright_green("Done"))
print(bold("Important"))
print(underline("Title"))
print(yellowf("%d warnings in %s", 3, "main.py"))
```

There is a plain and a bright function for each of black, red, green,
yellow, blue, magenta, cyan and white (`red`, `bright_red`, ...), an `...f`
variant of each plain colour (`redf`, `bluef`, ...), and `bold`, `italic`,
`underline` and `dim`.

The `...f` variants apply `%`-style formatting (`fmt % args`) and then colour
the result. With no arguments the format string is used as it is.

To combine attributes, pass members of `termtint.attrs.Attr` to
`termtint.style.style`:

```python
from termtint.attrs import Attr
from termtint.style import style

print(style("Important error", Attr.FG_RED, Attr.BOLD))   # "\x1b[31;1m...\x1b[0m"
print(style("Info", Attr.FG_BLACK, Attr.BG_BRIGHT_CYAN))  # "\x1b[30;106m...\x1b[0m"
```

`Attr` has `FG_*` and `BG_*` members for the eight colours and their bright
versions, plus `BOLD`, `DIM`, `ITALIC` and `UNDERLINE`. `Attr.code()` returns
the SGR number of a member, e.g. `Attr.FG_RED.code() == 31`.

Codes are written in the order given. A code repeated directly after itself
is written once: `style("x", Attr.BOLD, Attr.BOLD)` gives `"\x1b[1mx\x1b[0m"`.
Every styled string ends with the reset sequence `"\x1b[0m"`
(`termtint.style.RESET`).

`style` returns the text unchanged when the text is empty, when no
attributes are given, or when colour output is not allowed.

The lower-level helpers `make_attr_seq(attrs)` (the `;`-joined codes) and
`make_start_seq(attrs)` (the full opening sequence) are also in
`termtint.style`.

## When colour is used

`termtint.term.allow_color()` decides whether escape sequences are written,
using the module-level `termtint.term.settings` (a `ColorSettings`):

1. If `settings.no_color` is true, text is returned as it is.
2. Otherwise, if `settings.force_color` is true, sequences are always written.
3. Otherwise, sequences are written only if standard output is a character
   device (`is_terminal()`) and `supports_color()` is true, which needs both
   `TERM` and `COLORTERM` to be set and non-empty.

On import, `settings` is built from the environment: a non-empty `NO_COLOR`
sets `no_color`, a non-empty `FORCE_COLOR` sets `force_color`. Both fields
can be changed at run time:

```python
from termtint import term

term.settings.force_color = True
```

`ColorSettings.from_env(environ)` builds settings from any mapping, or from
`os.environ` when called with none.

## Caching

The opening sequence for each attribute combination is built once and kept
in `termtint.style.ansi_cache`, an `AnsiCache` guarded by a lock. Its keys
come from `termtint.cache.make_key`, which packs the attributes as
little-endian 64-bit integers and raises `ValueError` for an empty list.

## What it does not do

termtint is a library only; it has no command-line tool. It writes only the
basic 16 foreground and background colours and four font styles, with no
256-colour or true-colour support, and it does not detect colour support on
Windows consoles beyond the checks above.

## Running the tests

```
pip install -e ".[test]"
pytest
```