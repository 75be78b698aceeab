"""Output sinks for loan reports."""

from loan_calc.sinks.console import ConsoleSink
from loan_calc.sinks.text_file import TextFileSink

__all__ = ["ConsoleSink", "TextFileSink"]
