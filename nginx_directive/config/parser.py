"""
Line-oriented parser for nginx-like configuration syntax.

Builds a Directive tree from configuration text, one line at a time.
Every line is one of:

    server example.com { # comment      opening section (descends)
    # comment                           standalone comment
    } # comment                         closing section (ascends)
    listen 80; # comment                statement

Short sections written on a single line are expanded into one line per
statement:

    location = /robots.txt { access_log off; log_not_found off; }

The parser is lenient: lines it cannot use and unbalanced braces are
reported as warnings and skipped, unless strict mode is enabled.
"""

import re
from dataclasses import dataclass
from pathlib import Path

from ..const import DEFAULT_ENCODING, DEFAULT_FILENAME
from ..logging import get_logger
from .directive import Directive


logger = get_logger("parser")


OPENING_SECTION = re.compile(r"^(\w+) ?(.*?) ?\{( ?# ?(.*))?$")
COMMENT = re.compile(r"^# ?(.*)$")
CLOSING_SECTION = re.compile(r"^\}( ?# ?(.*))?$")
STATEMENT = re.compile(r"^(\w+)(?: (.+?))? ?;( ?# ?(.*))?$")
INLINE_SECTION = re.compile(r"^(.+?) ?\{ ?([^{}]*?) ?\}( ?# ?(.*))?$")

LINE_BREAKS = re.compile(r"\r\n|\n\r|\r")
HORIZONTAL_SPACE = re.compile(r"[ \t]+")


class ParseError(Exception):
    """Exception raised for parser errors in strict mode."""

    def __init__(self, message: str, line: int | None = None):
        self.line = line
        if line is not None:
            super().__init__(f"Line {line}: {message}")
        else:
            super().__init__(message)


@dataclass
class ParseWarning:
    """A line the parser skipped or a brace it could not balance."""

    line: int
    text: str
    message: str

    def __str__(self) -> str:
        return f"Line {self.line}: {self.message}"


def _optional(text: str | None) -> str | None:
    """Empty captures become None."""
    return text if text else None


def normalize_source(source: str) -> list[str]:
    """
    Normalize line endings and whitespace, and split into trimmed lines.

    Args:
        source: Raw configuration text

    Returns:
        Lines with runs of spaces/tabs collapsed to a single space
    """
    source = LINE_BREAKS.sub("\n", source)
    source = HORIZONTAL_SPACE.sub(" ", source)
    return [line.strip() for line in source.split("\n")]


class ConfigParser:
    """
    Parser for nginx-like configuration text.

    The parser keeps a single cursor (the section accepting new children)
    that starts at the root, descends on every opening section and
    ascends on every closing brace.

    Usage:
        parser = ConfigParser(source)
        root = parser.parse()
        for warning in parser.warnings:
            print(warning)
    """

    def __init__(
        self,
        source: str,
        filename: str = DEFAULT_FILENAME,
        strict: bool = False,
    ):
        self.source = source
        self.filename = filename
        self.strict = strict
        self.warnings: list[ParseWarning] = []

        self.root = Directive()
        self.builder = self.root

        # Line numbers of the currently open sections, innermost last
        self._open_sections: list[int] = []

    def parse(self) -> Directive:
        """Parse the entire configuration text."""
        lines = normalize_source(self.source)

        for number, line in enumerate(lines, start=1):
            self._parse_line(line, number)

        for number in reversed(self._open_sections):
            self._warn(number, "", "Section is never closed")

        self.builder = self.root
        self._open_sections = []

        logger.debug(
            f"Parsed {self.filename}: {len(lines)} lines, "
            f"{len(self.root.children)} top-level directives, {len(self.warnings)} warnings"
        )

        return self.root

    def _warn(self, line: int, text: str, message: str) -> None:
        if self.strict:
            raise ParseError(message, line)

        warning = ParseWarning(line=line, text=text, message=message)
        self.warnings.append(warning)
        logger.warning(f"{self.filename}: {warning}")

    def _parse_line(self, line: str, number: int) -> None:
        if self._parse_known(line, number):
            return

        if not line:
            return

        if self._expand_inline_section(line, number):
            return

        self._warn(number, line, f"Unrecognized line: {line!r}")

    def _parse_known(self, line: str, number: int) -> bool:
        """Try the four line kinds in priority order."""
        return (
            self._parse_opening_section(line, number)
            or self._parse_comment(line)
            or self._parse_closing_section(line, number)
            or self._parse_statement(line)
        )

    def _parse_opening_section(self, line: str, number: int) -> bool:
        match = OPENING_SECTION.match(line)
        if not match:
            return False

        self.builder = self.builder.append(
            match.group(1),
            _optional(match.group(2)),
            _optional(match.group(4)),
        )
        self._open_sections.append(number)
        return True

    def _parse_comment(self, line: str) -> bool:
        match = COMMENT.match(line)
        if not match:
            return False

        self.builder.append(None, None, match.group(1))
        return True

    def _parse_closing_section(self, line: str, number: int) -> bool:
        match = CLOSING_SECTION.match(line)
        if not match:
            return False

        if self.builder.parent is None:
            self._warn(number, line, "Closing brace without an open section")
        else:
            self.builder = self.builder.parent
            self._open_sections.pop()

        comment = _optional(match.group(2))
        if comment is not None:
            self.builder.append(None, None, comment)
        return True

    def _parse_statement(self, line: str) -> bool:
        match = STATEMENT.match(line)
        if not match:
            return False

        self.builder.append(
            match.group(1),
            _optional(match.group(2)),
            _optional(match.group(4)),
        )
        return True

    def _expand_inline_section(self, line: str, number: int) -> bool:
        """
        Split ``name value { a 1; b 2; } # comment`` into separate lines.

        Only bodies without nested braces are expanded, and only when the
        head is a valid section opening.
        """
        match = INLINE_SECTION.match(line)
        if not match:
            return False

        head, body, _, comment = match.groups()

        opening = f"{head} {{"
        if not OPENING_SECTION.match(opening):
            return False

        block = [opening]
        block.extend(f"{statement.strip()};" for statement in body.split(";") if statement.strip())
        block.append(f"}} # {comment}" if comment else "}")

        for block_line in block:
            if not self._parse_known(block_line, number):
                self._warn(number, block_line, f"Unrecognized statement in inline section: {block_line!r}")

        return True


def parse_config(
    source: str,
    filename: str = DEFAULT_FILENAME,
    strict: bool = False,
) -> Directive:
    """
    Convenience function to parse a configuration string.

    Args:
        source: Configuration text
        filename: Name used in log messages
        strict: Raise ParseError instead of collecting warnings

    Returns:
        Root directive of the parsed tree
    """
    parser = ConfigParser(source, filename, strict)
    return parser.parse()


def parse_config_file(path: str | Path, strict: bool = False) -> Directive:
    """
    Parse a configuration file.

    Args:
        path: Path to the configuration file
        strict: Raise ParseError instead of collecting warnings

    Returns:
        Root directive of the parsed tree
    """
    path = Path(path)
    source = path.read_text(encoding=DEFAULT_ENCODING)
    return parse_config(source, str(path), strict)
