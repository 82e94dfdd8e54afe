"""
Terminal Output

Helpers for the single-line countdown and for blanking the lines that showed
the password once it has been removed from the clipboard.
"""

import sys

CURSOR_UP = "\x1b[1A"


def write_in_place(text, stream=None):
    """Rewrite the current line with text, leaving the cursor on it."""
    stream = stream or sys.stdout
    stream.write(f"\r{text}")
    stream.flush()


def erase_lines(password_line, countdown_line, stream=None):
    """
    Blank the countdown line and the password line above it.

    Assumes the cursor sits on the countdown line, right after the password
    line, and a terminal that understands ANSI cursor-up. The cursor ends at
    column 0 of the (now blank) password line.
    """
    stream = stream or sys.stdout
    stream.write("\r" + " " * len(countdown_line))
    stream.write(CURSOR_UP)
    stream.write("\r" + " " * len(password_line))
    stream.write("\r")
    stream.flush()
