"""A deque-of-strings playground with a cursor, merge sort, and a command shell."""

__version__ = "0.1.0"
__all__ = ["algo", "emulator", "shell"]