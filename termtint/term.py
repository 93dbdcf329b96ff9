"""Decide whether colour output is allowed."""

import os
import stat
import sys
from collections.abc import Mapping
from dataclasses import dataclass


@dataclass
class ColorSettings:
    """Switches that override terminal detection."""

    no_color: bool = False
    force_color: bool = False

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "ColorSettings":
        """Read NO_COLOR and FORCE_COLOR; any non-empty value enables them."""
        env = os.environ if environ is None else environ
        return cls(
            no_color=bool(env.get("NO_COLOR", "")),
            force_color=bool(env.get("FORCE_COLOR", "")),
        )


settings = ColorSettings.from_env()


def is_terminal() -> bool:
    """Report whether standard output is a character device."""
    try:
        mode = os.fstat(sys.stdout.fileno()).st_mode
    except (AttributeError, OSError, ValueError):
        return False
    return stat.S_ISCHR(mode)


def supports_color() -> bool:
    """Report colour support from the TERM and COLORTERM variables."""
    if not os.environ.get("TERM", ""):
        return False
    return bool(os.environ.get("COLORTERM", ""))


def allow_color() -> bool:
    """Return True when styled output should be produced."""
    if settings.no_color:
        return False
    if settings.force_color:
        return True
    return is_terminal() and supports_color()