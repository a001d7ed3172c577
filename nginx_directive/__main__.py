"""
Entry point for nginx-directive.

Usage:
    python -m nginx_directive /etc/nginx/nginx.conf
    python -m nginx_directive site.conf --format json --indent 2
    python -m nginx_directive site.conf --search location
    cat site.conf | python -m nginx_directive - --validate
    python -m nginx_directive --help
"""

import argparse
import json
import sys
from pathlib import Path

from . import __version__
from .config.directive import Directive
from .config.loader import ConfigError, ConfigLoader
from .config.serializer import from_dict
from .const import APP_NAME, DEFAULT_ENCODING, DEFAULT_INDENT
from .logging import LogConfig, get_logger, setup_logging


logger = get_logger("cli")


def validate_config(loader: ConfigLoader, root: Directive) -> int:
    """Print parse warnings and a summary. Returns exit code."""
    warnings = loader.validate()

    if warnings:
        print(f"Configuration warnings ({len(warnings)}):")
        for warning in warnings:
            print(f"  - {warning}")

    nodes = list(root.walk())
    print("\nConfiguration summary:")
    print(f"  Top-level directives: {len(root.children)}")
    print(f"  Directives: {sum(1 for d in nodes if d.name is not None)}")
    print(f"  Sections: {sum(1 for d in nodes if d.has_children())}")
    print(f"  Comments: {sum(1 for d in nodes if d.name is None)}")

    if warnings:
        return 1

    print("\nConfiguration is well-formed!")
    return 0


def load_input(loader: ConfigLoader, source: str, from_json: bool) -> Directive:
    """Read the configuration from a path or stdin ("-")."""
    if source != "-" and not from_json:
        return loader.load_file(source)

    filename = "<stdin>" if source == "-" else source

    try:
        if source == "-":
            text = sys.stdin.read()
        else:
            path = Path(source)
            if not path.is_file():
                raise ConfigError(f"Configuration file not found: {path}")
            text = path.read_text(encoding=DEFAULT_ENCODING)
    except UnicodeDecodeError as e:
        raise ConfigError(f"Failed to read {filename}: {e}") from e

    if from_json:
        try:
            return from_dict(json.loads(text))
        except (ValueError, AttributeError, TypeError) as e:
            raise ConfigError(f"Invalid JSON export in {filename}: {e}") from e

    return loader.load_string(text, filename)


def render(root: Directive, args: argparse.Namespace) -> str:
    """Render the selected directives in the requested format."""
    if args.search:
        selected = root.search(args.search)
        logger.info(f"Found {len(selected)} '{args.search}' directives")
    else:
        selected = [root]

    if args.format == "json":
        data = [d.to_dict() for d in selected] if args.search else root.to_dict()
        return json.dumps(data, indent=args.indent or None) + "\n"

    return "".join(d.to_string(args.indent) for d in selected)


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        prog=APP_NAME,
        description="Parse, query and rewrite nginx-style configuration files",
    )

    parser.add_argument(
        "config",
        help="Path to configuration file, or - for stdin",
    )

    parser.add_argument(
        "-f", "--format",
        choices=["text", "json"],
        default="text",
        help="Output format (default: text)",
    )

    parser.add_argument(
        "-i", "--indent",
        type=int,
        default=DEFAULT_INDENT,
        metavar="N",
        help=f"Spaces per nesting level (default: {DEFAULT_INDENT})",
    )

    parser.add_argument(
        "-s", "--search",
        metavar="NAME",
        help="Only output directives with this name, searched recursively",
    )

    parser.add_argument(
        "--from-json",
        action="store_true",
        help="Read a JSON export instead of configuration text",
    )

    parser.add_argument(
        "-o", "--output",
        metavar="PATH",
        help="Write output to file instead of stdout",
    )

    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail on unrecognized lines and unbalanced braces",
    )

    parser.add_argument(
        "--validate",
        action="store_true",
        help="Report parse warnings and exit",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging (INFO level)",
    )

    parser.add_argument(
        "-d", "--debug",
        action="store_true",
        help="Enable debug logging (DEBUG level)",
    )

    parser.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Quiet mode (only errors)",
    )

    parser.add_argument(
        "--log-file",
        metavar="PATH",
        help="Write logs to file",
    )

    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored output",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    args = parser.parse_args(argv)

    if args.indent < 0:
        parser.error("--indent must be non-negative")

    log_config = LogConfig()

    if args.debug:
        log_config.console_level = "debug"
    elif args.verbose:
        log_config.console_level = "info"
    elif args.quiet:
        log_config.console_level = "error"

    if args.no_color:
        log_config.console_colors = False

    if args.log_file:
        log_config.file_enabled = True
        log_config.file_path = args.log_file

    setup_logging(log_config)

    loader = ConfigLoader(strict=args.strict)

    try:
        root = load_input(loader, args.config, args.from_json)

        if args.validate:
            return validate_config(loader, root)

        output = render(root, args)

        if args.output:
            Path(args.output).write_text(output, encoding=DEFAULT_ENCODING)
            logger.info(f"Wrote {args.output}")
        else:
            sys.stdout.write(output)
        return 0
    except ConfigError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        logger.error(f"I/O error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
