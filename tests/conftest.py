"""
Pytest configuration and fixtures.
"""

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

from nginx_directive.config.directive import Directive
from nginx_directive.config.parser import parse_config


@pytest.fixture
def example_config_path() -> Path:
    """Path to the example virtual host config."""
    return Path(__file__).parent / "example.conf"


@pytest.fixture
def example_config(example_config_path: Path) -> str:
    """Text of the example virtual host config."""
    return example_config_path.read_text(encoding="utf-8")


@pytest.fixture
def directive(example_config: str) -> Directive:
    """Parsed example config."""
    return parse_config(example_config)


@pytest.fixture(autouse=True)
def reset_logging() -> Iterator[None]:
    """Drop handlers installed by the command line entry point."""
    yield
    logger = logging.getLogger("nginx_directive")
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    for name in list(logging.root.manager.loggerDict):
        if name == "nginx_directive" or name.startswith("nginx_directive."):
            logging.getLogger(name).setLevel(logging.NOTSET)
