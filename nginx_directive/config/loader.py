"""
Configuration loader with file reading, warnings and saving.
"""

from pathlib import Path

from ..const import DEFAULT_ENCODING, DEFAULT_FILENAME, DEFAULT_INDENT
from ..logging import get_logger
from .directive import Directive
from .parser import ConfigParser, ParseError, ParseWarning


logger = get_logger("loader")


class ConfigError(Exception):
    """Exception raised for configuration errors."""

    pass


class ConfigLoader:
    """
    Loads configuration trees from files or strings and writes them back.

    Usage:
        loader = ConfigLoader()
        root = loader.load_file("/etc/nginx/sites-available/default")
        for warning in loader.validate():
            print(warning)
        loader.save_file(root, "/tmp/default.conf")
    """

    def __init__(self, strict: bool = False):
        self.strict = strict
        self.last_filename: str | None = None
        self.last_warnings: list[ParseWarning] = []

    def load_file(self, path: str | Path) -> Directive:
        """
        Load configuration from a file.

        Args:
            path: Path to the configuration file

        Returns:
            Root directive of the parsed tree

        Raises:
            ConfigError: If file cannot be read or (in strict mode) parsed
        """
        path = Path(path)

        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")

        if not path.is_file():
            raise ConfigError(f"Not a file: {path}")

        try:
            source = path.read_text(encoding=DEFAULT_ENCODING)
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigError(f"Failed to read configuration: {e}") from e

        return self.load_string(source, str(path))

    def load_string(self, source: str, filename: str = DEFAULT_FILENAME) -> Directive:
        """
        Load configuration from a string.

        Args:
            source: Configuration source text
            filename: Filename for warnings and log messages

        Returns:
            Root directive of the parsed tree

        Raises:
            ConfigError: If configuration cannot be parsed in strict mode
        """
        parser = ConfigParser(source, filename, strict=self.strict)

        try:
            root = parser.parse()
        except ParseError as e:
            raise ConfigError(f"Failed to parse {filename}: {e}") from e
        finally:
            self.last_filename = filename
            self.last_warnings = parser.warnings

        logger.info(f"Loaded {filename} ({len(root.children)} top-level directives)")
        return root

    def validate(self) -> list[str]:
        """
        Describe the problems found by the last load.

        Returns:
            List of warning messages (empty if no issues)
        """
        return [
            f"{self.last_filename}:{warning.line}: {warning.message}"
            for warning in self.last_warnings
        ]

    def save_file(
        self,
        directive: Directive,
        path: str | Path,
        indent: int = DEFAULT_INDENT,
    ) -> None:
        """
        Write a directive tree to a file.

        Args:
            directive: Directive to serialize (usually a root)
            path: Destination file; parent directories are created
            indent: Number of spaces per nesting level

        Raises:
            ConfigError: If the file cannot be written
        """
        path = Path(path)
        text = directive.to_string(indent)
        if text and not text.endswith("\n"):
            text += "\n"

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(text, encoding=DEFAULT_ENCODING)
        except OSError as e:
            raise ConfigError(f"Failed to write configuration: {e}") from e

        logger.info(f"Saved {path}")


def load_config(path: str | Path, strict: bool = False) -> Directive:
    """
    Convenience function to load configuration from a file.

    Args:
        path: Path to the configuration file
        strict: Fail on unrecognized lines and unbalanced braces

    Returns:
        Root directive of the parsed tree
    """
    loader = ConfigLoader(strict=strict)
    return loader.load_file(path)
