"""
Application Constants

Fixed values used across flashpass. The tool has no runtime configuration
beyond the --ask flag, so everything here is a module-level constant.
"""

import os
import string

APP_NAME = "flashpass"

# Password options
DEFAULT_LENGTH = 50
DEFAULT_INCLUDE_SYMBOLS = True
MIN_LENGTH = 10
MAX_LENGTH = 100

ALPHANUMERIC = string.ascii_letters + string.digits
SYMBOLS = "!@#$%^&*()-=_+[]{}|;:',.<>?/"

# Masked display
MASK_GLYPH = "\u25cf"
VISIBLE_PREFIX = 5
VISIBLE_SUFFIX = 2

# Clipboard retention
RETENTION_SECONDS = 15
TICK_INTERVAL_MS = 1000

# Prompts and messages
LENGTH_PROMPT = f"Enter desired password length (minimum {MIN_LENGTH}, maximum {MAX_LENGTH}):"
INVALID_LENGTH_MESSAGE = f"Invalid input. Please enter a number between {MIN_LENGTH} and {MAX_LENGTH}."
SYMBOLS_PROMPT = "Include symbols? (yes/no):"
PASSWORD_LINE_PREFIX = "Generated password: "
COUNTDOWN_FORMAT = "Seconds remaining: {:2}"
DONE_MESSAGE = "Password has been hidden and removed from clipboard."

# Logging
LOGGER_NAME = APP_NAME
LOG_FILE = os.path.join(os.path.expanduser("~"), "flashpass.log")
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
CONSOLE_FORMAT = '%(name)s: %(levelname)s: %(message)s'
LOG_MAX_BYTES = 1024 * 1024
LOG_BACKUP_COUNT = 5
