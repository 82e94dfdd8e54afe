"""
Core module containing password generation, display and prompting.
"""

from .errors import (FlashpassError, ClipboardError, ClipboardUnavailableError,
                     SecureEraseError)
from .generator import generate_password
from .masking import mask_password
from .prompts import PasswordOptions, resolve_options
from .terminal import erase_lines, write_in_place

__all__ = [
    'FlashpassError',
    'ClipboardError',
    'ClipboardUnavailableError',
    'SecureEraseError',
    'generate_password',
    'mask_password',
    'PasswordOptions',
    'resolve_options',
    'erase_lines',
    'write_in_place'
]
