"""
Configuration tree module with nginx-like syntax support.
"""

from .directive import Directive, DirectiveError, NoParentError, UndefinedDirectiveError
from .loader import ConfigError, ConfigLoader, load_config
from .parser import ConfigParser, ParseError, ParseWarning, parse_config, parse_config_file

__all__ = [
    "Directive",
    "DirectiveError",
    "NoParentError",
    "UndefinedDirectiveError",
    "ConfigParser",
    "ParseError",
    "ParseWarning",
    "parse_config",
    "parse_config_file",
    "ConfigLoader",
    "ConfigError",
    "load_config",
]
