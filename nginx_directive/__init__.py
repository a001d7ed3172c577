"""
nginx-directive: parse, query, edit and write nginx-style block configuration.
"""

from .const import APP_VERSION
from .config import (
    ConfigError,
    ConfigLoader,
    ConfigParser,
    Directive,
    NoParentError,
    ParseError,
    ParseWarning,
    UndefinedDirectiveError,
    parse_config,
)
from .utils import snake_case

__version__ = APP_VERSION

__all__ = [
    "__version__",
    "Directive",
    "ConfigParser",
    "ConfigLoader",
    "ConfigError",
    "ParseError",
    "ParseWarning",
    "NoParentError",
    "UndefinedDirectiveError",
    "parse_config",
    "snake_case",
]
