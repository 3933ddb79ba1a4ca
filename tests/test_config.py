"""
Tests for configuration and logging setup.
"""

from loguru import logger

from mla_citations import logging_setup
from mla_citations.config import Config


class TestConfig:
    """Test environment-driven settings."""

    def test_defaults(self, monkeypatch):
        for key in ("DEFAULT_CITATION_TYPE", "COPIED_NOTICE_SECONDS", "CLIPBOARD_COMMAND",
                    "LOG_LEVEL", "ENABLE_FILE_LOGGING"):
            monkeypatch.delenv(key, raising=False)
        cfg = Config()
        assert cfg.DEFAULT_CITATION_TYPE == "book"
        assert cfg.COPIED_NOTICE_SECONDS == 2.0
        assert cfg.CLIPBOARD_COMMAND == ""
        assert cfg.LOG_LEVEL == "INFO"
        assert cfg.ENABLE_FILE_LOGGING is False

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("DEFAULT_CITATION_TYPE", "Journal")
        monkeypatch.setenv("COPIED_NOTICE_SECONDS", "5")
        monkeypatch.setenv("ENABLE_FILE_LOGGING", "yes")
        cfg = Config()
        assert cfg.DEFAULT_CITATION_TYPE == "journal"
        assert cfg.COPIED_NOTICE_SECONDS == 5.0
        assert cfg.ENABLE_FILE_LOGGING is True

    def test_invalid_values_fall_back(self, monkeypatch):
        monkeypatch.setenv("DEFAULT_CITATION_TYPE", "podcast")
        monkeypatch.setenv("COPIED_NOTICE_SECONDS", "-1")
        monkeypatch.setenv("LOG_LEVEL", "LOUD")
        monkeypatch.setenv("LOG_RETENTION_COUNT", "abc")
        cfg = Config()
        assert cfg.DEFAULT_CITATION_TYPE == "book"
        assert cfg.COPIED_NOTICE_SECONDS == 2.0
        assert cfg.LOG_LEVEL == "INFO"
        assert cfg.LOG_RETENTION_COUNT == 5

    def test_to_dict(self):
        data = Config().to_dict()
        assert "DEFAULT_CITATION_TYPE" in data
        assert "LOG_LEVEL" in data


class TestLoggingSetup:
    """Test loguru sink configuration."""

    def teardown_method(self):
        logging_setup.reset_logging()

    def test_file_logging(self, tmp_path):
        logging_setup.reset_logging()
        logging_setup.setup_logging(enable_file_logging=True, log_dir=tmp_path)
        logger.error("clipboard failure for test")
        logger.complete()
        logging_setup.reset_logging()
        assert (tmp_path / "mla_citations.log").exists()
        assert "clipboard failure for test" in (tmp_path / "errors.log").read_text()

    def test_setup_is_idempotent(self, tmp_path):
        logging_setup.reset_logging()
        logging_setup.setup_logging(enable_file_logging=True, log_dir=tmp_path)
        logging_setup.setup_logging(enable_file_logging=True, log_dir=tmp_path / "other")
        assert not (tmp_path / "other").exists()

    def test_error_log_holds_errors_only(self, tmp_path):
        logging_setup.reset_logging()
        logging_setup.setup_logging(enable_file_logging=True, log_dir=tmp_path)
        logger.info("formatted 3 citations")
        logger.error("batch file unreadable")
        logger.complete()
        logging_setup.reset_logging()
        errors = (tmp_path / "errors.log").read_text()
        assert "batch file unreadable" in errors
        assert "formatted 3 citations" not in errors
        assert "formatted 3 citations" in (tmp_path / "mla_citations.log").read_text()

    def test_default_log_directory(self):
        assert logging_setup.get_log_directory() == logging_setup.LOG_DIR
        assert logging_setup.LOG_DIR.parts[-2:] == ('.data', 'logs')
