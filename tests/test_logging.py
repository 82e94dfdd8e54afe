import os
import logging
import tempfile
import unittest
from logging.handlers import RotatingFileHandler
from flashpass.app import setup_logging
from flashpass.config import LOGGER_NAME


class TestSetupLogging(unittest.TestCase):
    def setUp(self):
        """Start from a logger with no handlers and a temporary log file."""
        self.logger = logging.getLogger(LOGGER_NAME)
        self.saved_handlers = list(self.logger.handlers)
        self.logger.handlers = []
        self.temp_dir = tempfile.TemporaryDirectory()
        self.log_file = os.path.join(self.temp_dir.name, "flashpass.log")

    def tearDown(self):
        """Close test handlers and restore the previous ones."""
        for handler in self.logger.handlers:
            handler.close()
        self.logger.handlers = self.saved_handlers
        self.temp_dir.cleanup()

    def test_handlers_configured(self):
        """Test rotating file handler plus a warning-level console handler."""
        logger = setup_logging(self.log_file)

        self.assertIs(logger, self.logger)
        self.assertEqual(logger.level, logging.INFO)
        file_handlers = [h for h in logger.handlers if isinstance(h, RotatingFileHandler)]
        console_handlers = [h for h in logger.handlers if not isinstance(h, logging.FileHandler)]
        self.assertEqual(len(file_handlers), 1)
        self.assertEqual(len(console_handlers), 1)
        self.assertEqual(file_handlers[0].maxBytes, 1024 * 1024)
        self.assertEqual(file_handlers[0].backupCount, 5)
        self.assertEqual(console_handlers[0].level, logging.WARNING)

    def test_setup_is_idempotent(self):
        """Test that repeated setup does not stack handlers."""
        setup_logging(self.log_file)
        setup_logging(self.log_file)
        self.assertEqual(len(self.logger.handlers), 2)

    def test_child_loggers_reach_file(self):
        """Test module loggers write through the application logger."""
        setup_logging(self.log_file)
        logging.getLogger(f"{LOGGER_NAME}.core.generator").info("Generated password of length 10")
        for handler in self.logger.handlers:
            handler.flush()

        with open(self.log_file) as f:
            self.assertIn("Generated password of length 10", f.read())


if __name__ == '__main__':
    unittest.main()
