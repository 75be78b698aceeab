"""Plain-text file sink for loan reports."""

from pathlib import Path

from loan_calc.exceptions import ReportWriteError
from loan_calc.logging import get_logger
from loan_calc.report import LoanReport

logger = get_logger(__name__)


class TextFileSink:
    """Write a loan report to a text file, one field per line."""

    def __init__(self, output_path: str | Path, currency_symbol: str = "$") -> None:
        """Initialize text file sink.

        Parameters
        ----------
        output_path : str | Path
            File to write. Overwritten on every write.
        currency_symbol : str
            Prefix for money amounts.
        """
        self.output_path = Path(output_path)
        self.currency_symbol = currency_symbol

    def write(self, report: LoanReport) -> Path:
        """Write ``report`` and return the path written.

        Raises
        ------
        ReportWriteError
            If the file cannot be opened.
        """
        try:
            f = open(self.output_path, "w", encoding="utf-8")
        except OSError as exc:
            logger.error("Cannot open %s: %s", self.output_path, exc)
            raise ReportWriteError() from exc

        with f:
            for line in report.lines(self.currency_symbol):
                f.write(line + "\n")

        logger.info("Loan report written to %s", self.output_path)
        return self.output_path
