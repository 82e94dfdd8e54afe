"""
Version information for flashpass
"""

__version__ = "1.0.0"
__version_info__ = (1, 0, 0)

__description__ = "flashpass - Generate a password, hold it on the clipboard briefly, then wipe it"
