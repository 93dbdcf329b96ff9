"""ANSI colour and style escape sequences for terminal text."""

__version__ = "0.1.0"