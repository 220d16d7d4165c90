"""taskz: a minimalistic personal to-do list for the terminal."""

__version__ = "0.1.0"
