import pytest

from termtint.attrs import Attr
from termtint.cache import AnsiCache, make_key


def test_make_key_empty_raises():
    with pytest.raises(ValueError):
        make_key([])


@pytest.mark.parametrize(
    "attrs, expected",
    [
        ([Attr.FG_RED], bytes([1, 0, 0, 0, 0, 0, 0, 0])),
        (
            [Attr.FG_RED, Attr.FG_GREEN],
            bytes([1, 0, 0, 0, 0, 0, 0, 0, 2, 0, 0, 0, 0, 0, 0, 0]),
        ),
        (
            [256, 65536],
            bytes([0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0, 0, 0, 0]),
        ),
    ],
)
def test_make_key_values(attrs, expected):
    assert make_key(attrs) == expected


def test_make_key_order_matters():
    assert make_key([Attr.BOLD, Attr.FG_RED]) != make_key([Attr.FG_RED, Attr.BOLD])


def test_cache_roundtrip():
    cache = AnsiCache()
    cache.set([Attr.FG_RED, Attr.BOLD], "\x1b[31;1m")
    assert cache.get([Attr.FG_RED, Attr.BOLD]) == "\x1b[31;1m"


def test_cache_miss_returns_none():
    cache = AnsiCache()
    cache.set([Attr.FG_RED], "\x1b[31m")
    assert cache.get([Attr.FG_GREEN]) is None


def test_cache_empty_attrs_ignored():
    cache = AnsiCache()
    cache.set([], "anything")
    assert cache.get([]) is None


def test_cache_overwrite():
    cache = AnsiCache()
    cache.set([Attr.DIM], "first")
    cache.set([Attr.DIM], "second")
    assert cache.get([Attr.DIM]) == "second"