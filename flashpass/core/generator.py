"""
Password Generator

This module builds random passwords directly into a SecurePassword buffer.
"""

import logging
import secrets

from ..config import ALPHANUMERIC, SYMBOLS
from ..secure_password import SecurePassword

logger = logging.getLogger(__name__)


def random_character(include_symbols: bool) -> str:
    """
    Pick one password character.

    With symbols enabled the character class (alphanumeric or symbol) is chosen
    first with equal odds, then a character is drawn uniformly from that class.
    """
    if include_symbols and secrets.randbelow(2):
        return secrets.choice(SYMBOLS)
    return secrets.choice(ALPHANUMERIC)


def generate_password(length: int, include_symbols: bool = True) -> SecurePassword:
    """
    Generate a random password of exactly `length` characters.

    Args:
        length (int): Number of characters to generate
        include_symbols (bool): Allow characters from the symbol set

    Returns:
        SecurePassword: The password, stored in a buffer it owns

    Raises:
        ValueError: If length is not positive
    """
    if length <= 0:
        raise ValueError(f"Password length must be positive, got {length}")

    # Every candidate character is ASCII, so one byte per character
    buffer = bytearray(length)
    for i in range(length):
        buffer[i] = ord(random_character(include_symbols))

    logger.info(f"Generated password of length {length} (symbols={'on' if include_symbols else 'off'})")
    return SecurePassword(buffer)
