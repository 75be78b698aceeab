"""Rate strategies for level-payment (annuity) loans.

A fixed-rate loan pays one level installment for the whole term. A
variable-rate loan starts at the loan's stored rate and, at each
``RateChange``, re-amortizes the outstanding balance over the remaining
installments at the new rate. With no rate changes both strategies give
the same figures.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from loan_calc.logging import get_logger
from loan_calc.models import Loan, RateChange

logger = get_logger(__name__)


def annuity_payment(principal: float, monthly_rate: float, installments: int) -> float:
    """Level payment that amortizes ``principal`` over ``installments`` periods.

    ``principal * r / (1 - (1 + r) ** -n)``. A zero rate or a zero term makes
    the denominator zero; the result is then ``nan`` (0/0) or a signed
    ``inf``, matching IEEE float division instead of raising.
    """
    numerator = principal * monthly_rate
    try:
        denominator = 1.0 - (1.0 + monthly_rate) ** (-installments)
    except OverflowError:
        denominator = float("-inf")

    if denominator == 0:
        if numerator == 0:
            return float("nan")
        return float("inf") if numerator > 0 else float("-inf")
    return numerator / denominator


def remaining_balance(
    principal: float, monthly_rate: float, payment: float, months: int
) -> float:
    """Outstanding balance after paying ``payment`` for ``months`` periods."""
    if monthly_rate == 0:
        return principal - payment * months
    growth = (1.0 + monthly_rate) ** months
    return principal * growth - payment * (growth - 1.0) / monthly_rate


class RateStrategy(ABC):
    """How the interest rate behaves over the life of a loan."""

    @abstractmethod
    def monthly_payment(self, loan: Loan) -> float:
        """First (or only) level installment."""

    @abstractmethod
    def total_payment(self, loan: Loan) -> float:
        """Sum of all installments."""


class FixedRate(RateStrategy):
    """The stored rate applies to every installment."""

    def monthly_payment(self, loan: Loan) -> float:
        return annuity_payment(loan.amount, loan.monthly_rate, loan.total_months)

    def total_payment(self, loan: Loan) -> float:
        return self.monthly_payment(loan) * loan.total_months


class VariableRate(RateStrategy):
    """The stored rate is the initial rate; ``loan.rate_changes`` reset it."""

    def monthly_payment(self, loan: Loan) -> float:
        return annuity_payment(loan.amount, loan.monthly_rate, loan.total_months)

    def total_payment(self, loan: Loan) -> float:
        n = loan.total_months
        if not loan.rate_changes:
            return self.monthly_payment(loan) * n

        balance = loan.amount
        rate = loan.monthly_rate
        start = 0
        payment = self.monthly_payment(loan)
        total = 0.0

        for change in sorted(loan.rate_changes, key=lambda c: c.month):
            months = change.month - start
            total += payment * months
            balance = remaining_balance(balance, rate, payment, months)
            start = change.month
            rate = _monthly(change)
            payment = _reset_payment(balance, rate, n - start)
            logger.debug(
                "Rate reset at month %d: balance=%.2f new payment=%.2f",
                change.month,
                balance,
                payment,
            )

        return total + payment * (n - start)


def _reset_payment(balance: float, monthly_rate: float, installments: int) -> float:
    """Level payment after a rate reset; a 0% reset splits the balance evenly."""
    if monthly_rate == 0:
        return balance / installments
    return annuity_payment(balance, monthly_rate, installments)


def _monthly(change: RateChange) -> float:
    return change.annual_rate_percent / 12 / 100


def strategy_for(loan: Loan) -> RateStrategy:
    """Pick the rate strategy matching ``loan.fixed_rate``."""
    return FixedRate() if loan.fixed_rate else VariableRate()
