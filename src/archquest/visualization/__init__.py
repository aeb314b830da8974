"""
Visualization for validation results.
"""

from archquest.visualization.console import (
    format_rule_table,
    format_violation_table,
    print_error,
    render_validation_result,
)

__all__ = [
    "format_rule_table",
    "format_violation_table",
    "print_error",
    "render_validation_result",
]
