#!/usr/bin/env python3
"""
Config check CLI - Validate the commit lint configuration.

Usage:
    python -m src.cli.check_config
    python -m src.cli.check_config --config .commitlintrc.yaml --emit-json
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Optional

from ..config.errors import MalformedConfig
from ..config.loader import CONFIG_FILENAMES, find_config_file, read_config_file
from ..config.presets import resolve_rules
from ..config.validator import ConfigValidator, ValidationResult
from ..utils.logging import LogContext, get_logger, log_validation_issue, setup_logging

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_MISSING = 2

logger = get_logger("cli")


def check_config(
    config_path: Path,
    allow_unknown_rules: bool = False,
) -> ValidationResult:
    """
    Validate a configuration file and log every problem found.

    Args:
        config_path: Path to the configuration file
        allow_unknown_rules: Pass unknown rules through instead of rejecting them

    Returns:
        ValidationResult

    Raises:
        FileNotFoundError: If the file doesn't exist
    """
    with LogContext(config_file=str(config_path)):
        try:
            data = read_config_file(config_path)
        except MalformedConfig as e:
            log_validation_issue(logger, "error", e.field, e.message)
            return ValidationResult(valid=False, errors=[e])

        result = ConfigValidator(allow_unknown_rules=allow_unknown_rules).validate(data)

        for warning in result.warnings:
            field, _, message = warning.partition(": ")
            log_validation_issue(logger, "warning", field, message)

        for error in result.errors:
            log_validation_issue(logger, "error", error.field, error.message, value=error.value)

        if result.valid:
            logger.info(
                f"{config_path}: configuration is valid "
                f"({len(result.config.rules)} rules, {len(result.warnings)} warnings)"
            )
        else:
            logger.error(f"{config_path}: {len(result.errors)} configuration errors")

    return result


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for the config check CLI."""
    parser = argparse.ArgumentParser(
        description="Validate the commit lint configuration",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Looks for {', '.join(CONFIG_FILENAMES)} in the project root.

Examples:
  # Check the configuration in the current directory
  python -m src.cli.check_config

  # Check a specific file and print it in the engine's JSON shape
  python -m src.cli.check_config -c .commitlintrc.yaml --emit-json
        """,
    )
    parser.add_argument(
        "-c", "--config",
        type=Path,
        default=None,
        help="Path to the configuration file",
    )
    parser.add_argument(
        "--root",
        type=Path,
        default=None,
        help="Project root to search for the configuration (default: current directory)",
    )
    parser.add_argument(
        "--allow-unknown-rules",
        action="store_true",
        help="Pass rules unknown to the catalog through to the lint engine",
    )
    parser.add_argument(
        "--emit-json",
        action="store_true",
        help="Print the validated configuration as JSON",
    )
    parser.add_argument(
        "--show-effective",
        action="store_true",
        help="Print the effective rules after applying presets",
    )
    parser.add_argument(
        "--log-format",
        choices=["text", "json"],
        default="text",
        help="Log output format (default: text)",
    )
    parser.add_argument(
        "--log-file",
        type=str,
        default=None,
        help="Also write logs to this file (rotated at 10 MB)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args(argv)

    setup_logging(
        level="DEBUG" if args.verbose else "INFO",
        log_file=args.log_file,
        json_format=args.log_format == "json",
    )

    config_path = args.config or find_config_file(args.root)
    if config_path is None:
        logger.error(
            f"No configuration file found in {args.root or Path.cwd()} "
            f"(looked for {', '.join(CONFIG_FILENAMES)})"
        )
        return EXIT_MISSING

    try:
        result = check_config(config_path, allow_unknown_rules=args.allow_unknown_rules)
    except FileNotFoundError as e:
        logger.error(str(e))
        return EXIT_MISSING

    if not result.valid:
        return EXIT_INVALID

    if args.emit_json:
        print(json.dumps(result.config.to_dict(), indent=2))

    if args.show_effective:
        effective = {name: spec.to_entry() for name, spec in sorted(resolve_rules(result.config).items())}
        print(json.dumps(effective, indent=2))

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
