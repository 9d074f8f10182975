"""Variable sets, Boolean expressions and valuations for binary decision diagrams."""

__version__ = "0.1.0"

__all__ = [
    "boolean_expression",
    "builder",
    "valuation",
    "variable",
    "variable_set",
]