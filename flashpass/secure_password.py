"""
Secure Password Module

Cross-platform password holder that minimizes memory exposure.
This module provides a SecurePassword class that keeps the password in a
mutable byte array it owns, so the bytes can be overwritten in place once the
password has been handed to the clipboard.
"""

import os
from typing import Union


class SecurePassword:
    """Password storage backed by a bytearray that can be wiped in place."""

    def __init__(self, password: Union[str, bytearray] = ""):
        """
        Initialize secure password storage.

        Args:
            password (str | bytearray): The password to store. A bytearray is
                adopted as-is (not copied) and belongs to this object from now on.
        """
        if isinstance(password, bytearray):
            self._data = password
        else:
            self._data = bytearray(password.encode('utf-8')) if password else bytearray()

    def get_password(self) -> str:
        """
        Get password as string (use sparingly and clear quickly).

        Returns:
            str: The password as a plaintext string

        Warning:
            This method returns plaintext - Python strings are immutable and
            cannot be wiped, so drop the returned value as soon as possible.
        """
        if not self._data:
            return ""
        return bytes(self._data).decode('utf-8')

    def wipe(self) -> int:
        """
        Overwrite every byte with random data without resizing the buffer.

        Returns:
            int: Number of bytes overwritten
        """
        size = len(self._data)
        # Equal-length slice assignment rewrites the existing buffer
        self._data[:] = os.urandom(size)
        return size

    def clear(self):
        """Securely clear password from memory."""
        if self._data:
            # Overwrite with random data first, then zeros
            self.wipe()
            for i in range(len(self._data)):
                self._data[i] = 0
            self._data.clear()

    def is_empty(self) -> bool:
        """
        Check if password is empty.

        Returns:
            bool: True if password is empty
        """
        return len(self._data) == 0

    def __getitem__(self, index):
        """Return a bytes copy of a single position or slice."""
        if isinstance(index, slice):
            return bytes(self._data[index])
        return bytes([self._data[index]])

    def __len__(self):
        """Return length of password."""
        return len(self._data)

    def __del__(self):
        """Ensure password is cleared when object is destroyed."""
        self.clear()

    def __bool__(self):
        """Return True if password is not empty."""
        return not self.is_empty()

    def __str__(self):
        """Return masked representation for debugging."""
        if self.is_empty():
            return "SecurePassword(empty)"
        return f"SecurePassword({len(self._data)} chars)"

    def __repr__(self):
        """Return masked representation for debugging."""
        return self.__str__()
