"""
Test suite for logging setup
"""

import logging

from rematch.logger import setup_logging


def test_setup_logging_closes_replaced_handlers(tmp_path):
    """Calling setup_logging again closes the previous log file."""

    log_file = tmp_path / "rematch.log"
    setup_logging(level="INFO", log_file=str(log_file))

    root_logger = logging.getLogger("rematch")
    old = [h for h in root_logger.handlers if isinstance(h, logging.FileHandler)]
    assert len(old) == 1

    setup_logging(level="INFO")

    assert old[0].stream is None
    assert not any(isinstance(h, logging.FileHandler) for h in root_logger.handlers)
    assert len(root_logger.handlers) == 1
