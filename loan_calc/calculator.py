"""Loan validation and repayment calculation."""

from __future__ import annotations

import math
from typing import Iterable

from loan_calc.exceptions import (
    InvalidAmountError,
    InvalidCategoryError,
    InvalidRateError,
    InvalidTermError,
)
from loan_calc.logging import get_logger
from loan_calc.models import Loan, LoanCategory, LoanRequest, RateChange
from loan_calc.rates import strategy_for

logger = get_logger(__name__)


class LoanCalculator:
    """Validate raw loan input and compute its repayment figures.

    Parameters
    ----------
    reject_degenerate_terms : bool
        Reject a combined term of zero or fewer months at validation.
        Off by default: such terms pass validation and surface as a
        non-finite payment (see ``is_degenerate``).
    """

    def __init__(self, reject_degenerate_terms: bool = False) -> None:
        self.reject_degenerate_terms = reject_degenerate_terms

    def validate(
        self,
        amount: float,
        term_years: int,
        term_months: int,
        rate_percent: float,
        category_choice: int,
        fixed_rate: bool = True,
        rate_changes: Iterable[RateChange] = (),
    ) -> Loan:
        """Build a ``Loan`` from raw input.

        Raises
        ------
        InvalidAmountError
            If ``amount`` is not greater than zero.
        InvalidRateError
            If ``rate_percent`` is negative, or a rate change is unusable.
        InvalidCategoryError
            If ``category_choice`` is not 1-4.
        InvalidTermError
            If strict terms are on and the combined term is not positive.
        """
        self.check_amount(amount)
        self.check_rate(rate_percent)

        category = LoanCategory.from_choice(category_choice)
        if category is None:
            raise InvalidCategoryError()

        total_months = term_years * 12 + term_months
        if self.reject_degenerate_terms and total_months <= 0:
            raise InvalidTermError()

        changes = tuple(sorted(rate_changes, key=lambda c: c.month))
        self._check_rate_changes(changes, total_months, fixed_rate)

        loan = Loan(
            amount=amount,
            term_years=term_years,
            term_months=term_months,
            annual_rate_percent=rate_percent,
            category=category,
            fixed_rate=fixed_rate,
            rate_changes=changes,
        )
        logger.debug("Validated loan: %s", loan)
        return loan

    def validate_request(self, request: LoanRequest) -> Loan:
        """Validate a ``LoanRequest`` (see ``validate``)."""
        return self.validate(
            amount=request.amount,
            term_years=request.term_years,
            term_months=request.term_months,
            rate_percent=request.rate_percent,
            category_choice=request.category_choice,
            fixed_rate=request.fixed_rate,
            rate_changes=request.rate_changes,
        )

    @staticmethod
    def check_amount(amount: float) -> None:
        if not amount > 0:
            raise InvalidAmountError()

    @staticmethod
    def check_rate(rate_percent: float) -> None:
        if not rate_percent >= 0:
            raise InvalidRateError()

    def _check_rate_changes(
        self, changes: tuple[RateChange, ...], total_months: int, fixed_rate: bool
    ) -> None:
        if not changes:
            return
        if fixed_rate:
            raise InvalidRateError("Rate changes require a flexible interest rate.")

        seen: set[int] = set()
        for change in changes:
            if not change.annual_rate_percent >= 0:
                raise InvalidRateError()
            if not 1 <= change.month < total_months:
                raise InvalidRateError(
                    f"Rate change month {change.month} is outside the loan term "
                    f"(1-{total_months - 1})."
                )
            if change.month in seen:
                raise InvalidRateError(f"Duplicate rate change at month {change.month}.")
            seen.add(change.month)

    def monthly_payment(self, loan: Loan) -> float:
        """Level monthly installment at the loan's stored rate."""
        payment = strategy_for(loan).monthly_payment(loan)
        if not math.isfinite(payment):
            logger.warning(
                "Degenerate loan (rate=%s%%, term=%d months): payment is %s",
                loan.annual_rate_percent,
                loan.total_months,
                payment,
            )
        return payment

    def total_payment(self, loan: Loan) -> float:
        """Sum of every installment over the term."""
        return strategy_for(loan).total_payment(loan)

    @staticmethod
    def is_degenerate(loan: Loan) -> bool:
        """True when the annuity formula divides by zero for this loan.

        Judged on the computed figures: a rate too small to move ``1 + r``
        off 1.0 divides by zero just like a zero rate.
        """
        strategy = strategy_for(loan)
        return not (
            math.isfinite(strategy.monthly_payment(loan))
            and math.isfinite(strategy.total_payment(loan))
        )
