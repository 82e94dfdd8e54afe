"""
Input Resolution

This module decides the password length and symbol preference, either from
the built-in defaults or by asking on standard input.
"""

from typing import NamedTuple, Optional

from ..config import (DEFAULT_LENGTH, DEFAULT_INCLUDE_SYMBOLS, MIN_LENGTH,
                      MAX_LENGTH, LENGTH_PROMPT, INVALID_LENGTH_MESSAGE,
                      SYMBOLS_PROMPT)


class PasswordOptions(NamedTuple):
    length: int
    include_symbols: bool


def parse_length(raw: str) -> Optional[int]:
    """Return the length in raw if it is an integer within bounds, else None."""
    try:
        value = int(raw.strip())
    except ValueError:
        return None
    if MIN_LENGTH <= value <= MAX_LENGTH:
        return value
    return None


def ask_length(read_line=None, write=None) -> int:
    """Prompt until a valid password length is entered."""
    read_line = read_line or input
    write = write or print
    while True:
        write(LENGTH_PROMPT)
        length = parse_length(read_line())
        if length is not None:
            return length
        write(INVALID_LENGTH_MESSAGE)


def ask_include_symbols(read_line=None, write=None) -> bool:
    """Prompt once; only an answer of 'yes' enables symbols."""
    read_line = read_line or input
    write = write or print
    write(SYMBOLS_PROMPT)
    return read_line().strip().lower() == "yes"


def resolve_options(ask: bool, read_line=None, write=None) -> PasswordOptions:
    """
    Determine the password options for this run.

    Args:
        ask (bool): Prompt on standard input instead of using the defaults
        read_line: Callable returning the next input line
        write: Callable used to show prompts

    Returns:
        PasswordOptions: length and symbol preference

    Raises:
        EOFError: If input ends before a valid answer is read
    """
    if not ask:
        return PasswordOptions(DEFAULT_LENGTH, DEFAULT_INCLUDE_SYMBOLS)

    length = ask_length(read_line, write)
    include_symbols = ask_include_symbols(read_line, write)
    return PasswordOptions(length, include_symbols)
