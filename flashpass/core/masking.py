"""
Masked Display

This module renders a password with its middle characters hidden.
"""

from ..config import MASK_GLYPH, VISIBLE_PREFIX, VISIBLE_SUFFIX


def _as_text(chunk):
    if isinstance(chunk, (bytes, bytearray)):
        return chunk.decode('utf-8')
    return chunk


def mask_password(password, visible_prefix=VISIBLE_PREFIX,
                  visible_suffix=VISIBLE_SUFFIX, glyph=MASK_GLYPH):
    """
    Replace the middle of a password with mask glyphs.

    Args:
        password: SecurePassword, str or bytes-like value
        visible_prefix (int): Leading characters left visible
        visible_suffix (int): Trailing characters left visible
        glyph (str): Character shown in place of hidden ones

    Returns:
        str: Masked text with the same length as the password
    """
    length = len(password)
    if length < visible_prefix + visible_suffix:
        raise ValueError(
            f"Password of length {length} is too short to mask "
            f"({visible_prefix} + {visible_suffix} characters stay visible)"
        )

    head = _as_text(password[:visible_prefix])
    tail = _as_text(password[length - visible_suffix:]) if visible_suffix else ""
    hidden = length - visible_prefix - visible_suffix

    return f"{head}{glyph * hidden}{tail}"
