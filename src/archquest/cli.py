"""
Command-line interface.

Usage:
    archquest check structure.json
    archquest check structure.json --rules rules.json -v
    archquest rules --rules rules.json

Exit codes for ``check``: 0 valid, 1 violations found, 2 unreadable input.
"""

import sys

import click
from rich.console import Console

from archquest import __version__
from archquest.application.validator import ArchitectureValidator
from archquest.domain.exceptions import RuleConfigError, StructureFileError
from archquest.domain.rules import DEFAULT_RULE_CONFIGS, STANDARD_RULES
from archquest.infrastructure.config import RuleSettings, load_rule_settings
from archquest.infrastructure.structure_file import load_structure
from archquest.logging_config import setup_logging
from archquest.visualization.console import (
    format_rule_table,
    print_error,
    render_validation_result,
)

console = Console()

INPUT_ERROR_HINT = "Check that your JSON files exist and match the documented format."


def _settings(rules_path: str | None) -> RuleSettings:
    if rules_path is None:
        return RuleSettings(rules=STANDARD_RULES, configs=DEFAULT_RULE_CONFIGS)
    return load_rule_settings(rules_path)


@click.group()
@click.version_option(__version__, prog_name="archquest")
def main() -> None:
    """Validate and score layered architectures."""


@main.command()
@click.argument("structure", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--rules",
    "rules_path",
    default=None,
    type=click.Path(exists=True, dir_okay=False),
    help="Path to a rule configuration JSON file",
)
@click.option(
    "--log-file",
    default=None,
    type=click.Path(),
    help="Path to log file",
)
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Enable verbose (DEBUG) logging",
)
@click.option(
    "-q",
    "--quiet",
    is_flag=True,
    help="Only log errors",
)
def check(
    structure: str,
    rules_path: str | None,
    log_file: str | None,
    verbose: bool,
    quiet: bool,
) -> None:
    """Validate a structure document and print the review."""
    logger = setup_logging(verbose=verbose, quiet=quiet, log_file=log_file)

    try:
        settings = _settings(rules_path)
        layer_structure = load_structure(structure)
    except (RuleConfigError, StructureFileError) as e:
        logger.error(str(e))
        print_error(str(e), INPUT_ERROR_HINT)
        sys.exit(2)

    validator = ArchitectureValidator(settings.rules, settings.configs)
    result = validator.validate(layer_structure)
    render_validation_result(result, console)

    sys.exit(0 if result.is_valid else 1)


@main.command()
@click.option(
    "--rules",
    "rules_path",
    default=None,
    type=click.Path(exists=True, dir_okay=False),
    help="Path to a rule configuration JSON file",
)
def rules(rules_path: str | None) -> None:
    """Show the rules that would run, in order, with their configuration."""
    try:
        settings = _settings(rules_path)
    except RuleConfigError as e:
        print_error(str(e), INPUT_ERROR_HINT)
        sys.exit(2)

    console.print(format_rule_table(settings.rules, settings.configs))


if __name__ == "__main__":
    main()
