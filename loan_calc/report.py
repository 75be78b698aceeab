"""Loan repayment summary."""

from __future__ import annotations

from dataclasses import dataclass

from loan_calc.calculator import LoanCalculator
from loan_calc.models import Loan


@dataclass(frozen=True)
class LoanReport:
    """A loan together with its computed repayment figures."""

    loan: Loan
    monthly_payment: float
    total_payment: float
    degenerate: bool = False

    @classmethod
    def build(cls, loan: Loan, calculator: LoanCalculator) -> "LoanReport":
        return cls(
            loan=loan,
            monthly_payment=calculator.monthly_payment(loan),
            total_payment=calculator.total_payment(loan),
            degenerate=calculator.is_degenerate(loan),
        )

    def lines(self, currency_symbol: str = "$") -> list[str]:
        """Summary lines in file order."""
        loan = self.loan
        return [
            f"Loan Amount: {currency_symbol}{format_number(loan.amount)}",
            f"Loan Term: {loan.term_years} years and {loan.term_months} months",
            f"Interest Rate: {format_number(loan.annual_rate_percent)}%",
            f"Loan Type: {loan.category.label}",
            f"Interest Rate Type: {loan.rate_type.value}",
            f"Monthly Payment: {currency_symbol}{format_number(self.monthly_payment)}",
            f"Total Payment: {currency_symbol}{format_number(self.total_payment)}",
        ]


def format_number(value: float) -> str:
    """Shortest text that parses back to exactly ``value`` (``nan``/``inf`` included)."""
    return repr(float(value))
