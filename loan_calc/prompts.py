"""Interactive prompt driver.

Wraps the pure parsers in ``loan_calc.parsing`` with a read/re-ask loop.
Only malformed input is retried. A semantically invalid answer ends
the session.
"""

from __future__ import annotations

from typing import TextIO

from loan_calc.calculator import LoanCalculator
from loan_calc.exceptions import InputAbortedError, InvalidCategoryError
from loan_calc.logging import get_logger
from loan_calc.models import LoanCategory, LoanRequest, RateChange
from loan_calc.parsing import Parser, parse_float, parse_int, parse_yes_no

logger = get_logger(__name__)


class Prompter:
    """Read answers from a text stream, re-asking on malformed input.

    Parameters
    ----------
    stdin : TextIO
        Stream answers are read from.
    stdout : TextIO
        Stream prompts and retry messages are written to.
    """

    def __init__(self, stdin: TextIO, stdout: TextIO) -> None:
        self.stdin = stdin
        self.stdout = stdout

    def ask(self, prompt: str, parser: Parser):
        """Ask until ``parser`` accepts the answer and return its value.

        Blank lines are skipped without re-asking, so an answer may follow
        on a later line.

        Raises
        ------
        InputAbortedError
            If the input stream ends first.
        """
        attempts = 0
        self.write(prompt, end="")
        while True:
            line = self.stdin.readline()
            if not line:
                raise InputAbortedError()
            if not line.strip():
                continue

            result = parser(line)
            if result.ok:
                return result.value

            attempts += 1
            logger.debug("Rejected input %r (attempt %d)", line.rstrip("\n"), attempts)
            self.write(result.error)
            self.write(prompt, end="")

    def write(self, text: str, end: str = "\n") -> None:
        self.stdout.write(text + end)
        self.stdout.flush()

    def ask_amount(self) -> float:
        return self.ask("Enter the loan amount: ", parse_float)

    def ask_term_years(self) -> int:
        return self.ask("Enter the loan term in years: ", parse_int)

    def ask_term_months(self) -> int:
        return self.ask("Enter the loan term in months: ", parse_int)

    def ask_rate(self) -> float:
        return self.ask("Enter the interest rate (%): ", parse_float)

    def ask_category(self) -> int:
        self.write("Select the loan type:")
        for number, category in enumerate(LoanCategory, start=1):
            self.write(f"{number}. {category.label}")
        return self.ask(f"Enter your choice (1-{len(LoanCategory)}): ", parse_int)

    def ask_fixed_rate(self) -> bool:
        return self.ask("Is the interest rate fixed? (y/n): ", parse_yes_no)


def collect_request(
    prompter: Prompter,
    calculator: LoanCalculator,
    rate_changes: tuple[RateChange, ...] = (),
) -> LoanRequest:
    """Ask for every loan field in order.

    Each field is checked as soon as it is entered, so an invalid amount
    stops the session before the term is asked.

    Raises
    ------
    ValidationError
        On the first semantically invalid answer.
    InputAbortedError
        If input ends mid-session.
    """
    amount = prompter.ask_amount()
    calculator.check_amount(amount)

    term_years = prompter.ask_term_years()
    term_months = prompter.ask_term_months()

    rate_percent = prompter.ask_rate()
    calculator.check_rate(rate_percent)

    category_choice = prompter.ask_category()
    if LoanCategory.from_choice(category_choice) is None:
        raise InvalidCategoryError()

    fixed_rate = prompter.ask_fixed_rate()

    return LoanRequest(
        amount=amount,
        term_years=term_years,
        term_months=term_months,
        rate_percent=rate_percent,
        category_choice=category_choice,
        fixed_rate=fixed_rate,
        rate_changes=rate_changes,
    )
