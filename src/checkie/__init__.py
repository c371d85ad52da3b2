"""Checkie — checkers with a pure move engine and a PyQt6 board."""

__version__ = "0.1.0"
