"""
Tests for logging setup.
"""

import logging
from pathlib import Path

from nginx_directive.logging import (
    ColoredFormatter,
    LogConfig,
    get_log_level,
    get_logger,
    setup_logging,
)


def test_get_log_level() -> None:
    assert get_log_level("debug") == logging.DEBUG
    assert get_log_level("WARN") == logging.WARNING
    assert get_log_level("unknown") == logging.INFO


def test_get_logger_prefix() -> None:
    assert get_logger("parser").name == "nginx_directive.parser"
    assert get_logger("nginx_directive.loader").name == "nginx_directive.loader"


def test_colored_formatter_restores_record() -> None:
    formatter = ColoredFormatter(fmt="%(levelname)s %(name)s %(message)s", use_colors=True)
    record = logging.LogRecord("nginx_directive.parser", logging.WARNING, __file__, 1, "msg", None, None)

    text = formatter.format(record)

    assert "\033[" in text
    assert record.levelname == "WARNING"
    assert record.name == "nginx_directive.parser"


def test_setup_logging_with_file(tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "nginx-directive.log"
    config = LogConfig(
        console_level="error",
        file_enabled=True,
        file_path=str(log_file),
        module_levels={"parser": "error"},
    )

    setup_logging(config)
    get_logger("loader").info("written to file")

    logger = logging.getLogger("nginx_directive")
    for handler in logger.handlers:
        handler.flush()

    assert "written to file" in log_file.read_text()
    assert get_logger("parser").level == logging.ERROR
