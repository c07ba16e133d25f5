"""Output layer — rendering values for descriptions and mismatches."""

from matchkit.output.formatters import ValueFormatter, default_formatter, describe

__all__ = ["ValueFormatter", "default_formatter", "describe"]
