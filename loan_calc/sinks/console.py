"""Console sink for echoing loan reports."""

import json
import sys
from typing import TextIO

from loan_calc.report import LoanReport
from loan_calc.sinks.serialization import to_dict


class ConsoleSink:
    """Output loan reports to the console (stdout by default)."""

    def __init__(
        self,
        format_type: str = "text",
        currency_symbol: str = "$",
        stream: TextIO | None = None,
    ) -> None:
        """Initialize console sink.

        Parameters
        ----------
        format_type : str
            ``"text"`` for the report lines, ``"json"`` for a JSON document.
        currency_symbol : str
            Prefix for money amounts in text output.
        stream : TextIO | None
            Destination stream (default ``sys.stdout``).
        """
        self.format_type = format_type
        self.currency_symbol = currency_symbol
        self.stream = stream or sys.stdout

    def write(self, report: LoanReport) -> None:
        """Write ``report`` to the stream."""
        if self.format_type == "json":
            print(json.dumps(to_dict(report), indent=2, ensure_ascii=False), file=self.stream)
            return

        print(f"\n{'=' * 40}", file=self.stream)
        for line in report.lines(self.currency_symbol):
            print(line, file=self.stream)
        print("=" * 40, file=self.stream)
