"""Solutions to short competitive-programming practice problems, as functions and a command."""

__version__ = "0.1.0"