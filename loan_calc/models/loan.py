"""Loan models."""

from dataclasses import dataclass

from loan_calc.models.enums import LoanCategory, RateType


@dataclass(frozen=True)
class RateChange:
    """A variable-rate reset.

    Starting with installment ``month + 1`` the loan accrues interest at
    ``annual_rate_percent`` and the remaining balance is re-amortized over
    the remaining installments.
    """

    month: int
    annual_rate_percent: float


@dataclass(frozen=True)
class Loan:
    """Validated loan record. Never mutated after construction."""

    amount: float  # Principal borrowed
    term_years: int
    term_months: int
    annual_rate_percent: float  # Nominal annual rate, e.g. 6.0 for 6%
    category: LoanCategory
    fixed_rate: bool
    rate_changes: tuple[RateChange, ...] = ()

    @property
    def total_months(self) -> int:
        """Number of monthly installments."""
        return self.term_years * 12 + self.term_months

    @property
    def monthly_rate(self) -> float:
        """Monthly rate as a fraction (6% annual -> 0.005)."""
        return self.annual_rate_percent / 12 / 100

    @property
    def rate_type(self) -> RateType:
        return RateType.FIXED if self.fixed_rate else RateType.FLEXIBLE


@dataclass(frozen=True)
class LoanRequest:
    """Raw loan input as entered, before validation."""

    amount: float
    term_years: int
    term_months: int
    rate_percent: float
    category_choice: int
    fixed_rate: bool
    rate_changes: tuple[RateChange, ...] = ()
