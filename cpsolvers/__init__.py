"""Solutions to classic competitive-programming problems as plain functions."""

__version__ = "0.1.0"