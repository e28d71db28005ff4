"""Small algorithms and command-line tools built on the standard library."""

__version__ = "0.1.0"