"""Readers for strings, flags and settings stored inside Inno Setup installers."""

__version__ = "0.1.0"