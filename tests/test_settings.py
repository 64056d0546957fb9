import logging

from wallframe.logging_config import LOG_FORMAT, LOGGER_NAME, setup_logging
from wallframe.settings import Settings


class TestSettings:
    def test_defaults(self):
        settings = Settings.from_env({})
        assert settings.log_level == "INFO"
        assert settings.port == 8000
        assert settings.cors_origins == ["*"]

    def test_reads_prefixed_variables(self):
        settings = Settings.from_env({
            "WALLFRAME_PORT": "9001",
            "WALLFRAME_HOST": "127.0.0.1",
            "WALLFRAME_CORS_ORIGINS": "http://a.test, http://b.test,",
            "PORT": "1",
        })
        assert settings.port == 9001
        assert settings.host == "127.0.0.1"
        assert settings.cors_origins == ["http://a.test", "http://b.test"]

    def test_debug_forces_debug_logging(self):
        settings = Settings.from_env({"WALLFRAME_DEBUG": "true", "WALLFRAME_LOG_LEVEL": "WARNING"})
        assert settings.debug is True
        assert settings.log_level == "DEBUG"


def test_setup_logging_is_idempotent():
    logger = setup_logging("debug")
    count = len(logger.handlers)
    setup_logging("WARNING")

    assert logger is logging.getLogger(LOGGER_NAME)
    assert len(logger.handlers) == count
    assert logger.level == logging.WARNING


def test_setup_logging_handler_format():
    logger = setup_logging()
    formats = [h.formatter._fmt for h in logger.handlers if h.formatter is not None]
    assert formats.count(LOG_FORMAT) == 1
