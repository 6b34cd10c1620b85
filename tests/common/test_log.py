from __future__ import annotations

import logging

from src.visitor_control.visitor_control.common.log import setup_logger


def test_setup_logger_adds_file_handler_once(tmp_path):
    log_file = tmp_path / "logs" / "app.log"

    logger = setup_logger("visitor_control_log_test", log_file=str(log_file), level="debug")
    again = setup_logger("visitor_control_log_test", log_file=str(log_file))

    assert again is logger
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 2
    assert log_file.parent.is_dir()

    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()
