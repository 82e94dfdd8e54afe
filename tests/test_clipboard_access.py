import unittest
from unittest.mock import MagicMock, patch
from flashpass.clipboard.clipboard_access import SystemClipboard, ensure_display_available
from flashpass.core import ClipboardError, ClipboardUnavailableError
from flashpass.secure_password import SecurePassword


class FakeQtClipboard:
    """In-memory stand-in for QClipboard."""

    def __init__(self, accepts_text=True, clears=True):
        self.accepts_text = accepts_text
        self.clears = clears
        self.contents = ""

    def setText(self, text):
        if self.accepts_text:
            self.contents = text

    def text(self):
        return self.contents

    def clear(self):
        if self.clears:
            self.contents = ""


class TestEnsureDisplayAvailable(unittest.TestCase):
    def test_linux_without_display_fails(self):
        """Test that a headless Linux session is reported as unavailable."""
        with self.assertRaises(ClipboardUnavailableError):
            ensure_display_available(environ={}, platform="linux")

    def test_display_variables_accepted(self):
        """Test X11, Wayland and explicit Qt platforms."""
        test_cases = [
            {"DISPLAY": ":0"},
            {"WAYLAND_DISPLAY": "wayland-0"},
            {"QT_QPA_PLATFORM": "offscreen"},
        ]
        for environ in test_cases:
            with self.subTest(environ=environ):
                ensure_display_available(environ=environ, platform="linux")

    def test_desktop_platforms_skip_check(self):
        """Test that Windows and macOS need no display variables."""
        for platform in ("win32", "darwin"):
            with self.subTest(platform=platform):
                ensure_display_available(environ={}, platform=platform)


class TestSystemClipboard(unittest.TestCase):
    def test_set_password_places_text(self):
        """Test that the plaintext lands on the clipboard."""
        qt_clipboard = FakeQtClipboard()
        clipboard = SystemClipboard(qt_clipboard)

        clipboard.set_password(SecurePassword("Abc12xyzQR"))

        self.assertEqual(qt_clipboard.contents, "Abc12xyzQR")

    def test_set_password_verifies_write(self):
        """Test that a clipboard ignoring writes is fatal."""
        clipboard = SystemClipboard(FakeQtClipboard(accepts_text=False))
        with self.assertRaises(ClipboardError):
            clipboard.set_password(SecurePassword("Abc12xyzQR"))

    def test_clear_empties_clipboard(self):
        """Test clearing after a copy."""
        qt_clipboard = FakeQtClipboard()
        clipboard = SystemClipboard(qt_clipboard)
        clipboard.set_password(SecurePassword("Abc12xyzQR"))

        clipboard.clear()

        self.assertEqual(qt_clipboard.contents, "")

    def test_clear_verifies_result(self):
        """Test that a clipboard that keeps its text is fatal."""
        qt_clipboard = FakeQtClipboard(clears=False)
        clipboard = SystemClipboard(qt_clipboard)
        clipboard.set_password(SecurePassword("Abc12xyzQR"))

        with self.assertRaises(ClipboardError):
            clipboard.clear()

    def test_requires_qt_application(self):
        """Test that using the system clipboard without an app is refused."""
        with patch('flashpass.clipboard.clipboard_access.QApplication') as mock_app:
            mock_app.instance.return_value = None
            with self.assertRaises(ClipboardUnavailableError):
                SystemClipboard()

    def test_missing_qt_clipboard(self):
        """Test that a Qt application without a clipboard is refused."""
        with patch('flashpass.clipboard.clipboard_access.QApplication') as mock_app:
            mock_app.instance.return_value = MagicMock()
            mock_app.clipboard.return_value = None
            with self.assertRaises(ClipboardUnavailableError):
                SystemClipboard()


if __name__ == '__main__':
    unittest.main()
