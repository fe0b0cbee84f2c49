import json
import logging

from globpath.core.logger import get_logger, setup_logger


class TestLogger:
    """Unit tests for logger setup and retrieval in globpath.core.logger."""

    def test_setup_logger_creates_log_file_and_handlers(self, tmp_path):
        logger = setup_logger(
            name="test_portal_logger",
            log_dir=tmp_path,
            logger_level=logging.INFO,
            stream_level=logging.WARNING,
            file_level=logging.INFO,
            file_mode="w",
            max_bytes=1024,
            backup_count=1,
            use_structlog=False,
        )
        assert logger.name == "test_portal_logger"
        handler_types = {type(h) for h in logger.handlers}
        assert logging.StreamHandler in handler_types
        assert any("RotatingFileHandler" in str(type(h)) for h in logger.handlers)

        log_file = tmp_path / "modules" / "test_portal_logger.log"
        assert log_file.exists()
        logger.info("Test log message")
        assert "Test log message" in log_file.read_text()

    def test_get_logger_prefixes_namespace(self, tmp_path):
        logger = get_logger("unit.test_get_logger", log_dir=tmp_path, file_mode="w", use_structlog=False)

        assert logger.name == "globpath.unit.test_get_logger"
        assert logger.propagate is True
        log_file = tmp_path / "modules" / "globpath.unit.test_get_logger.log"
        assert log_file.exists()

    def test_get_logger_level_follows_config(self, tmp_path, monkeypatch):
        monkeypatch.setenv("GLOBPATH__LOG_LEVEL", "warning")

        logger = get_logger("unit.level", log_dir=tmp_path, use_structlog=False)

        assert logger.level == logging.WARNING

    def test_get_logger_without_name_uses_root(self, tmp_path):
        logger = get_logger(name=None, log_dir=tmp_path, use_structlog=False)

        assert logger.name == "globpath"
        assert (tmp_path / "globpath.log").exists()

    def test_calling_twice_does_not_duplicate_handlers(self, tmp_path):
        get_logger("unit.repeat", log_dir=tmp_path, use_structlog=False)
        logger = get_logger("unit.repeat", log_dir=tmp_path, use_structlog=False)

        assert len(logger.handlers) == 2


class TestStructLogger:
    def test_structlog_writes_json_lines(self, tmp_path):
        logger = setup_logger(
            name="unit.structured",
            log_dir=tmp_path,
            file_mode="w",
            add_stream_handler=False,
            use_structlog=True,
            structlog_bind={"component": "auth"},
        )

        logger.info("session checked", user="jane@lab.com")

        line = (tmp_path / "modules" / "unit.structured.log").read_text().strip().splitlines()[-1]
        record = json.loads(line)
        assert record["event"] == "session checked"
        assert record["component"] == "auth"
        assert record["user"] == "jane@lab.com"
        assert list(record)[:2] == ["timestamp", "event"]
