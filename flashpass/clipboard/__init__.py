"""
Clipboard hand-off and retention countdown for flashpass.
"""

from .clipboard_access import SystemClipboard, ensure_display_available
from .retention_timer import RetentionTimer

__all__ = [
    'SystemClipboard',
    'ensure_display_available',
    'RetentionTimer'
]
