"""
System Clipboard Access

This module wraps Qt's application clipboard for a single password hand-off.
"""

import os
import sys
import logging

from PyQt6.QtWidgets import QApplication

from ..core import ClipboardError, ClipboardUnavailableError

logger = logging.getLogger(__name__)


def ensure_display_available(environ=None, platform=None):
    """
    Fail early when Qt would have no display to talk to.

    On X11/Wayland systems the clipboard lives in the display server; Qt aborts
    the whole interpreter if it cannot connect, so check before creating the
    application. An explicit QT_QPA_PLATFORM is trusted as-is.
    """
    environ = os.environ if environ is None else environ
    platform = sys.platform if platform is None else platform

    if platform in ("win32", "cygwin", "darwin"):
        return
    if environ.get("QT_QPA_PLATFORM"):
        return
    if not (environ.get("DISPLAY") or environ.get("WAYLAND_DISPLAY")):
        raise ClipboardUnavailableError(
            "No X11 or Wayland display found (DISPLAY and WAYLAND_DISPLAY are unset); "
            "cannot access the system clipboard"
        )


class SystemClipboard:
    """Writes one password to the clipboard and clears it again."""

    def __init__(self, clipboard=None):
        if clipboard is None:
            if QApplication.instance() is None:
                raise ClipboardUnavailableError("Clipboard requested before the Qt application was created")
            clipboard = QApplication.clipboard()
        if clipboard is None:
            raise ClipboardUnavailableError("Qt did not provide a system clipboard")
        self._clipboard = clipboard

    def set_password(self, secure_password):
        """
        Put the password on the clipboard and confirm it landed there.

        Raises:
            ClipboardError: If the clipboard does not hold the password afterwards
        """
        text = secure_password.get_password()
        try:
            self._clipboard.setText(text)
            copied = self._clipboard.text() == text
        finally:
            del text
        if not copied:
            raise ClipboardError("Clipboard did not accept the password")
        logger.info(f"Copied {len(secure_password)} characters to clipboard")

    def clear(self):
        """
        Remove the clipboard contents.

        Raises:
            ClipboardError: If text is still present after clearing
        """
        self._clipboard.clear()
        if self._clipboard.text():
            raise ClipboardError("Clipboard still holds data after clearing")
        logger.info("Cleared clipboard")
