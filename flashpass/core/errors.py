"""
Exceptions raised by flashpass.
"""


class FlashpassError(Exception):
    """Base exception for flashpass failures"""
    pass


class ClipboardError(FlashpassError):
    """Raised when the clipboard cannot be written, verified or cleared"""
    pass


class ClipboardUnavailableError(ClipboardError):
    """Raised when no clipboard service is reachable"""
    pass


class SecureEraseError(FlashpassError):
    """Raised when the wiped byte count does not match the password length"""
    pass
