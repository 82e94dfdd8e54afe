"""
flashpass

Main entry point for the application.
"""

import sys
import argparse
import logging

from PyQt6.QtWidgets import QApplication

from .app import FlashSession, setup_logging
from .clipboard import SystemClipboard, RetentionTimer, ensure_display_available
from .config import APP_NAME, LOGGER_NAME
from .core import FlashpassError, resolve_options
from .version import __version__, __description__


def handle_exception(exc_type, exc_value, exc_traceback):
    """Global exception handler"""
    if issubclass(exc_type, KeyboardInterrupt):
        sys.__excepthook__(exc_type, exc_value, exc_traceback)
        return

    # Log the exception
    logger = logging.getLogger(LOGGER_NAME)
    logger.critical("Uncaught exception", exc_info=(exc_type, exc_value, exc_traceback))


def build_parser():
    parser = argparse.ArgumentParser(prog=APP_NAME, description=__description__)
    parser.add_argument(
        "--ask",
        action="store_true",
        help="Ask for password length and symbol preference",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def main(argv=None):
    """Main application entry point"""
    args = build_parser().parse_args(argv)

    # Set up global exception handler
    sys.excepthook = handle_exception
    logger = setup_logging()

    try:
        options = resolve_options(args.ask)

        ensure_display_available()
        app = QApplication.instance() or QApplication([APP_NAME])
        app.setApplicationName(APP_NAME)

        session = FlashSession(options, SystemClipboard(), RetentionTimer())
        session.run()
    except FlashpassError as e:
        logger.error(str(e))
        return 1
    except EOFError:
        logger.error("Input ended before a valid answer was given")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
