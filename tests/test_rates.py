"""Tests for rate strategies."""

import math

import pytest

from loan_calc.models import Loan, LoanCategory, RateChange
from loan_calc.rates import (
    FixedRate,
    VariableRate,
    annuity_payment,
    remaining_balance,
    strategy_for,
)


def _flexible_loan(*changes: RateChange, years: int = 3, rate: float = 6.0) -> Loan:
    return Loan(
        amount=30000.0,
        term_years=years,
        term_months=0,
        annual_rate_percent=rate,
        category=LoanCategory.CAR,
        fixed_rate=False,
        rate_changes=tuple(changes),
    )


class TestAnnuityPayment:
    """Tests for annuity_payment."""

    def test_known_value(self) -> None:
        assert annuity_payment(10000, 0.005, 12) == pytest.approx(860.6643, abs=1e-4)

    def test_single_installment(self) -> None:
        """One installment repays principal plus one month of interest."""
        assert annuity_payment(1000, 0.01, 1) == pytest.approx(1010.0)

    def test_zero_rate_is_nan(self) -> None:
        assert math.isnan(annuity_payment(1000, 0.0, 12))

    def test_zero_term_is_infinite(self) -> None:
        assert annuity_payment(1000, 0.005, 0) == math.inf

    def test_zero_everything_is_nan(self) -> None:
        assert math.isnan(annuity_payment(1000, 0.0, 0))


class TestRemainingBalance:
    """Tests for remaining_balance."""

    def test_fully_amortized(self) -> None:
        payment = annuity_payment(10000, 0.005, 12)
        assert remaining_balance(10000, 0.005, payment, 12) == pytest.approx(0.0, abs=1e-6)

    def test_no_payments_accrues_interest(self) -> None:
        assert remaining_balance(1000, 0.01, 0.0, 2) == pytest.approx(1020.1)

    def test_zero_rate(self) -> None:
        assert remaining_balance(1200, 0.0, 100, 5) == pytest.approx(700)


class TestStrategies:
    """Tests for FixedRate and VariableRate."""

    def test_strategy_for(self) -> None:
        loan = _flexible_loan()
        assert isinstance(strategy_for(loan), VariableRate)
        fixed = Loan(1000.0, 1, 0, 5.0, LoanCategory.BUSINESS, True)
        assert isinstance(strategy_for(fixed), FixedRate)

    def test_variable_without_changes_matches_fixed(self) -> None:
        loan = _flexible_loan()

        assert VariableRate().monthly_payment(loan) == FixedRate().monthly_payment(loan)
        assert VariableRate().total_payment(loan) == FixedRate().total_payment(loan)

    def test_monthly_payment_uses_initial_rate(self) -> None:
        loan = _flexible_loan(RateChange(12, 9.0))
        assert VariableRate().monthly_payment(loan) == FixedRate().monthly_payment(loan)

    def test_change_to_same_rate_keeps_total(self) -> None:
        loan = _flexible_loan(RateChange(12, 6.0))
        assert VariableRate().total_payment(loan) == pytest.approx(FixedRate().total_payment(loan))

    def test_rate_increase_costs_more(self) -> None:
        loan = _flexible_loan(RateChange(12, 9.0))
        assert VariableRate().total_payment(loan) > FixedRate().total_payment(loan)

    def test_rate_decrease_costs_less(self) -> None:
        loan = _flexible_loan(RateChange(12, 3.0), RateChange(24, 2.0))
        assert VariableRate().total_payment(loan) < FixedRate().total_payment(loan)

    def test_reamortization_by_hand(self) -> None:
        """Two segments: 12 months at 6%, then 24 months at 9% on the balance."""
        loan = _flexible_loan(RateChange(12, 9.0))
        first = annuity_payment(30000, 0.005, 36)
        balance = remaining_balance(30000, 0.005, first, 12)
        second = annuity_payment(balance, 0.0075, 24)

        expected = first * 12 + second * 24

        assert VariableRate().total_payment(loan) == pytest.approx(expected)
        assert remaining_balance(balance, 0.0075, second, 24) == pytest.approx(0.0, abs=1e-6)

    def test_changes_applied_in_month_order(self) -> None:
        ordered = _flexible_loan(RateChange(6, 7.0), RateChange(18, 8.0))
        shuffled = _flexible_loan(RateChange(18, 8.0), RateChange(6, 7.0))

        assert VariableRate().total_payment(ordered) == VariableRate().total_payment(shuffled)

    def test_reset_to_zero_rate_splits_balance(self) -> None:
        """After a 0% reset the outstanding balance is repaid in equal parts."""
        loan = _flexible_loan(RateChange(12, 0.0))
        first = annuity_payment(30000, 0.005, 36)
        balance = remaining_balance(30000, 0.005, first, 12)

        total = VariableRate().total_payment(loan)

        assert math.isfinite(total)
        assert total == pytest.approx(first * 12 + balance)

    def test_zero_rate_reset_between_resets(self) -> None:
        loan = _flexible_loan(RateChange(6, 0.0), RateChange(18, 5.0))

        total = VariableRate().total_payment(loan)

        assert math.isfinite(total)
        assert total > loan.amount
