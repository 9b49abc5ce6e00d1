"""
lollint CLI entry point.

Lints every file named on the command line (directories are searched
recursively) and exits with 0 when no errors were found, 1 when any file
has lint errors and 2 when any file could not be read, tokenized or
parsed.
"""

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from lollint import __version__
from lollint.config import ConfigError, LintConfig, discover_sources, load_config
from lollint.lang import LANGUAGE_VERSION
from lollint.linter import SemanticLinter

from .errors import EXIT_FATAL, CLIConfigError, CLIError, format_cli_error
from .output import make_console, print_human_report, print_json_report
from .report import FileReport, analyze_files, overall_exit_code

LOG_LEVEL_ENV = "LOLLINT_LOG_LEVEL"


def _configure_logging(args) -> None:
    """Configure the ``lollint`` logger from --log-level or the environment."""
    log_level = (
        getattr(args, 'log_level', None) or
        os.getenv(LOG_LEVEL_ENV, 'warning')
    ).lower()

    level_map = {
        'debug': logging.DEBUG,
        'info': logging.INFO,
        'warn': logging.WARNING,
        'warning': logging.WARNING,
        'error': logging.ERROR,
    }

    numeric_level = level_map.get(log_level, logging.WARNING)

    package_logger = logging.getLogger('lollint')
    package_logger.setLevel(numeric_level)

    if not package_logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
        handler.setFormatter(formatter)
        package_logger.addHandler(handler)
        package_logger.propagate = False


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lollint",
        description=f"Static analyzer for LOLCODE {LANGUAGE_VERSION} programs.",
    )
    parser.add_argument(
        "paths",
        nargs="+",
        type=Path,
        metavar="PATH",
        help="LOLCODE files or directories to lint",
    )
    parser.add_argument("--json", action="store_true", default=None, help="Emit one JSON document")
    parser.add_argument("--stats", action="store_true", default=None, help="Show code statistics")
    parser.add_argument("--no-color", action="store_true", default=None, help="Disable colored output")
    parser.add_argument("--debug", action="store_true", help="Dump tokens and the AST to stderr")
    parser.add_argument("--config", type=Path, help="Path to lollint.toml or .lollintrc")
    parser.add_argument(
        "--log-level",
        choices=["debug", "info", "warn", "warning", "error"],
        help=f"Logging level (default: ${LOG_LEVEL_ENV} or warning)",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__} (LOLCODE {LANGUAGE_VERSION})",
    )
    return parser


def _load_config(args) -> LintConfig:
    try:
        return load_config(Path.cwd(), args.config)
    except ConfigError as exc:
        raise CLIConfigError(
            str(exc),
            hint="Check lollint.toml / .lollintrc or the --config path",
        ) from exc


def _resolve_flag(cli_value: Optional[bool], default: bool) -> bool:
    return default if cli_value is None else cli_value


def run(args) -> int:
    config = _load_config(args)
    use_json = _resolve_flag(args.json, config.output.json)
    show_stats = _resolve_flag(args.stats, config.output.stats)
    color = False if args.no_color else config.output.color

    console = make_console(color=color)
    err_console = make_console(color=color, stderr=True)

    linter = SemanticLinter(scoping=config.scoping, disabled_rules=config.disable)
    sources = discover_sources(args.paths, config.extensions)
    logging.getLogger(__name__).debug("Linting %d file(s)", len(sources))

    reports: List[FileReport] = analyze_files(
        sources,
        linter,
        debug_console=err_console if args.debug else None,
    )

    if use_json:
        print_json_report(reports)
    else:
        print_human_report(reports, console=console, err_console=err_console, show_stats=show_stats)

    return overall_exit_code(reports)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args)

    try:
        return run(args)
    except CLIError as exc:
        print(format_cli_error(exc), file=sys.stderr)
        return EXIT_FATAL


def cli_entry() -> None:
    sys.exit(main())


__all__ = ["main", "run", "build_parser", "cli_entry"]
