"""Unit tests for logging setup"""

import logging

import pytest

from ir_lab.logging_config import MAX_SESSION_LOGS, setup_logging


@pytest.fixture
def restore_root_logger():
    """Put the root logger back the way pytest configured it"""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestSetupLogging:
    """Test console + session file handlers"""

    def test_creates_session_file(self, tmp_path, restore_root_logger):
        session_log = setup_logging(log_file=str(tmp_path / "logs" / "ir-lab.log"))

        assert session_log.parent == tmp_path / "logs"
        assert session_log.name.startswith("ir-lab_")
        assert session_log.exists()

    def test_handlers_and_levels(self, tmp_path, restore_root_logger):
        setup_logging(
            log_file=str(tmp_path / "ir-lab.log"),
            console_level=logging.WARNING,
            file_level=logging.DEBUG,
        )
        root = logging.getLogger()
        levels = sorted(h.level for h in root.handlers)
        assert levels == [logging.DEBUG, logging.WARNING]

    @pytest.mark.parametrize("name", ["uvicorn.access", "httpx", "httpcore"])
    def test_request_loggers_quieted(self, tmp_path, restore_root_logger, name):
        setup_logging(log_file=str(tmp_path / "ir-lab.log"))
        assert logging.getLogger(name).level == logging.WARNING

    def test_debug_lines_reach_file(self, tmp_path, restore_root_logger):
        session_log = setup_logging(log_file=str(tmp_path / "ir-lab.log"))
        logging.getLogger("ir_lab.scoring.bm25").debug("bm25 run summary")
        for handler in logging.getLogger().handlers:
            handler.flush()

        assert "bm25 run summary" in session_log.read_text(encoding="utf-8")

    def test_old_session_logs_pruned(self, tmp_path, restore_root_logger):
        for i in range(MAX_SESSION_LOGS + 2):
            (tmp_path / f"ir-lab_20240101_00000{i}.log").write_text("old")

        setup_logging(log_file=str(tmp_path / "ir-lab.log"))

        assert len(list(tmp_path.glob("ir-lab_*.log"))) == MAX_SESSION_LOGS
