"""
Console rendering of validation results.

Prints the score, a validity badge and one table row per violation
using rich.
"""

from collections.abc import Iterable, Mapping

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from archquest.domain.models import ValidationResult
from archquest.domain.rules import RuleConfig, ValidationRule
from archquest.domain.score import penalty_for


def _score_style(score: int) -> str:
    if score >= 90:
        return "bold green"
    if score >= 70:
        return "bold yellow"
    return "bold red"


def format_violation_table(result: ValidationResult) -> Table:
    """Build a table with one row per violation, in reporting order."""
    table = Table(title="Violations", show_lines=False)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Type", style="cyan", no_wrap=True)
    table.add_column("Penalty", justify="right", style="red")
    table.add_column("Message")

    for i, violation in enumerate(result.violations, start=1):
        table.add_row(
            str(i),
            violation.type,
            f"-{penalty_for(violation.type)}",
            Text(violation.message),
        )
    return table


def format_rule_table(
    rules: Iterable[ValidationRule],
    configs: Mapping[ValidationRule, RuleConfig],
) -> Table:
    """Build a table of rules in evaluation order with their configuration."""
    table = Table(title="Rules")
    table.add_column("Rule", style="cyan", no_wrap=True)
    table.add_column("Enabled")
    table.add_column("Severity")
    table.add_column("Params", style="dim")

    for rule in rules:
        config = configs[rule]
        params = ", ".join(f"{k}={v}" for k, v in sorted(config.params.items()))
        table.add_row(
            rule.value,
            "yes" if config.enabled else "no",
            config.severity.value,
            Text(params or "-"),
        )
    return table


def render_validation_result(
    result: ValidationResult, console: Console | None = None
) -> None:
    """
    Print a validation summary.

    Args:
        result: The result to display
        console: Target console (defaults to a new stdout console)
    """
    console = console or Console()
    style = _score_style(result.score)
    badge = "[bold green]VALID[/bold green]" if result.is_valid else "[bold red]INVALID[/bold red]"

    console.print(f"\n[bold]═══ ARCHITECTURE REVIEW ═══[/bold]  {badge}")
    console.print(f"Score: [{style}]{result.score}/100[/{style}]")

    if result.violations:
        console.print(format_violation_table(result))
    else:
        console.print("[dim]No violations found.[/dim]")


def print_error(message: str, hint: str | None = None, console: Console | None = None) -> None:
    """Print formatted error message (to stderr by default)."""
    console = console or Console(stderr=True)
    content = Text(f"ERROR: {message}", style="bold red")
    if hint:
        content.append(f"\n\nHint: {hint}", style="yellow")
    console.print(Panel(content, title="Error", border_style="red"))
