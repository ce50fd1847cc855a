"""Tests for logger setup."""

import logging

from task_list.utils.logger import setup_logger


class TestSetupLogger:
    """Tests for setup_logger."""

    def test_console_only_by_default(self):
        logger = setup_logger(name="task_list.test_console")

        assert logger.level == logging.WARNING
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], logging.StreamHandler)

    def test_file_handler_when_log_dir_given(self, tmp_path):
        log_dir = tmp_path / "logs"
        logger = setup_logger(name="task_list.test_file", log_dir=log_dir, level=logging.INFO)
        logger.info("hello file")

        for handler in logger.handlers:
            handler.flush()

        log_files = list(log_dir.glob("task_list_*.log"))
        assert len(log_files) == 1
        assert "hello file" in log_files[0].read_text(encoding="utf-8")

        setup_logger(name="task_list.test_file")

    def test_repeated_setup_replaces_handlers(self):
        setup_logger(name="task_list.test_repeat")
        logger = setup_logger(name="task_list.test_repeat")

        assert len(logger.handlers) == 1
