"""Command-line entry point for loan-calc.

Asks for the loan parameters, computes the repayment figures and saves
them to a text file. Every outcome, including rejected input, exits 0
after a one-line message on stdout.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Sequence, TextIO

from loan_calc import __version__
from loan_calc.calculator import LoanCalculator
from loan_calc.config import ECHO_FORMATS, LOG_FORMATS, LoanCalcConfig
from loan_calc.exceptions import (
    ConfigurationError,
    InputAbortedError,
    ReportWriteError,
    ValidationError,
)
from loan_calc.logging import get_logger, setup_logging
from loan_calc.models import RateChange
from loan_calc.parsing import parse_rate_change
from loan_calc.prompts import Prompter, collect_request
from loan_calc.report import LoanReport
from loan_calc.sinks import ConsoleSink, TextFileSink

logger = get_logger(__name__)

DEGENERATE_WARNING = (
    "Warning: a zero interest rate or zero-month term leaves the payment formula "
    "undefined; the saved figures are not finite."
)


def _rate_change_arg(text: str) -> RateChange:
    result = parse_rate_change(text)
    if not result.ok:
        raise argparse.ArgumentTypeError(result.error)
    return result.value


class _ArgumentParser(argparse.ArgumentParser):
    """Raise on bad arguments instead of exiting with status 2."""

    def error(self, message: str):
        raise ConfigurationError(f"{self.prog}: {message}")


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="loan-calc",
        description="Compute monthly and total loan payments and save them to a text file",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Report file to write (default: loan_details.txt or $LOAN_CALC_OUTPUT)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Log level (default: WARNING or $LOG_LEVEL)",
    )
    parser.add_argument(
        "--log-format",
        choices=LOG_FORMATS,
        default=None,
        help="Log format (default: standard or $LOG_FORMAT)",
    )
    parser.add_argument(
        "--echo",
        choices=ECHO_FORMATS,
        default=None,
        help="Also print the report to stdout in this format",
    )
    parser.add_argument(
        "--strict-term",
        action="store_true",
        help="Reject loans whose combined term is zero or fewer months",
    )
    parser.add_argument(
        "--rate-change",
        type=_rate_change_arg,
        action="append",
        default=[],
        metavar="MONTH:RATE",
        help="Flexible-rate reset after MONTH installments to RATE percent (repeatable)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def load_config(args: argparse.Namespace) -> LoanCalcConfig:
    """Environment config with command-line overrides applied."""
    config = LoanCalcConfig.from_env()
    if args.output is not None:
        config.output.output_path = args.output
    if args.echo is not None:
        config.output.echo_format = args.echo
    if args.log_level is not None:
        config.log_level = args.log_level
    if args.log_format is not None:
        config.log_format = args.log_format
    if args.strict_term:
        config.reject_degenerate_terms = True
    return config


def run(
    config: LoanCalcConfig,
    stdin: TextIO,
    stdout: TextIO,
    rate_changes: tuple[RateChange, ...] = (),
) -> LoanReport | None:
    """One interactive session. Returns the saved report, or None if it stopped early."""
    prompter = Prompter(stdin, stdout)
    calculator = LoanCalculator(reject_degenerate_terms=config.reject_degenerate_terms)

    try:
        request = collect_request(prompter, calculator, rate_changes=rate_changes)
        loan = calculator.validate_request(request)
    except (ValidationError, InputAbortedError) as exc:
        logger.info("Session ended without a loan: %s", exc)
        prompter.write(str(exc))
        return None

    report = LoanReport.build(loan, calculator)
    logger.debug(
        "Computed report",
        extra={
            "extra": {
                "monthly_payment": report.monthly_payment,
                "total_payment": report.total_payment,
            }
        },
    )
    if report.degenerate:
        prompter.write(DEGENERATE_WARNING)

    if config.output.echo_format is not None:
        ConsoleSink(
            format_type=config.output.echo_format,
            currency_symbol=config.output.currency_symbol,
            stream=stdout,
        ).write(report)

    sink = TextFileSink(config.output.output_path, config.output.currency_symbol)
    try:
        path = sink.write(report)
    except ReportWriteError as exc:
        prompter.write(str(exc))
        return None

    prompter.write(f"Loan details have been saved to '{path}'")
    return report


def main(
    argv: Sequence[str] | None = None,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> int:
    """Entry point. Always returns 0."""
    stdout = stdout or sys.stdout

    try:
        args = build_parser().parse_args(argv)
        config = load_config(args)
    except ConfigurationError as exc:
        print(str(exc), file=stdout)
        return 0

    setup_logging(level=config.log_level, format_type=config.log_format)
    run(config, stdin or sys.stdin, stdout, rate_changes=tuple(args.rate_change))
    return 0


if __name__ == "__main__":
    sys.exit(main())
