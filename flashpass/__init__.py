"""
flashpass - one-shot password generator with a self-clearing clipboard.
"""

from .version import __version__, __description__
from .secure_password import SecurePassword

__all__ = [
    '__version__',
    '__description__',
    'SecurePassword'
]
