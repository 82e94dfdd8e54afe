"""
flashpass session

Runs one generate / show / copy / wait / wipe cycle.
"""

import sys
import logging
from logging.handlers import RotatingFileHandler

from .config import (LOGGER_NAME, LOG_FILE, LOG_FORMAT, CONSOLE_FORMAT, LOG_MAX_BYTES,
                     LOG_BACKUP_COUNT, PASSWORD_LINE_PREFIX, COUNTDOWN_FORMAT,
                     DONE_MESSAGE, RETENTION_SECONDS)
from .core import (generate_password, mask_password, erase_lines,
                   write_in_place, SecureEraseError)


def setup_logging(log_file=LOG_FILE):
    """Configure application logging"""
    logger = logging.getLogger(LOGGER_NAME)
    if logger.handlers:
        return logger

    formatter = logging.Formatter(LOG_FORMAT)

    # File handler with rotation
    file_handler = RotatingFileHandler(
        log_file, maxBytes=LOG_MAX_BYTES, backupCount=LOG_BACKUP_COUNT
    )
    file_handler.setFormatter(formatter)

    # Console handler; warnings only so it stays out of the countdown line
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    console_handler.setLevel(logging.WARNING)

    logger.setLevel(logging.INFO)
    logger.addHandler(file_handler)
    logger.addHandler(console_handler)
    return logger


class FlashSession:
    """One password lifetime, from generation to wipe."""

    def __init__(self, options, clipboard, timer, stream=None):
        self.options = options
        self.clipboard = clipboard
        self.timer = timer
        self.stream = stream or sys.stdout
        self.logger = logging.getLogger(f"{LOGGER_NAME}.session")
        self.countdown_line = COUNTDOWN_FORMAT.format(RETENTION_SECONDS)

    def show_remaining(self, seconds):
        self.countdown_line = COUNTDOWN_FORMAT.format(seconds)
        write_in_place(self.countdown_line, self.stream)

    def run(self):
        length = self.options.length
        password = generate_password(length, self.options.include_symbols)
        copied = False
        try:
            password_line = f"{PASSWORD_LINE_PREFIX}{mask_password(password)}"
            self.stream.write(password_line + "\n")
            self.stream.flush()

            self.clipboard.set_password(password)
            copied = True

            wiped = password.wipe()
            self.logger.info(f"Overwrote {wiped} password bytes in memory")
            if wiped != length:
                raise SecureEraseError(f"Wiped {wiped} bytes but the password has {length}")

            self.timer.tick.connect(self.show_remaining)
            self.timer.run()

            copied = False
            self.clipboard.clear()
        finally:
            password.clear()
            if copied:
                # A later step failed; don't leave the password behind
                self.logger.warning("Session aborted, clearing clipboard")
                self.clipboard.clear()

        erase_lines(password_line, self.countdown_line, self.stream)
        self.stream.write(DONE_MESSAGE + "\n")
        self.stream.flush()
        self.logger.info("Session complete")
