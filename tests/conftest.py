"""Pytest configuration and fixtures."""

import pytest

from loan_calc.calculator import LoanCalculator
from loan_calc.models import Loan, LoanCategory

LOAN_ENV_VARS = [
    "LOAN_CALC_OUTPUT",
    "LOAN_CALC_CURRENCY",
    "LOAN_CALC_ECHO",
    "LOAN_CALC_REJECT_DEGENERATE_TERMS",
    "LOG_LEVEL",
    "LOG_FORMAT",
]


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def calculator() -> LoanCalculator:
    """Calculator with default (lenient) term checking."""
    return LoanCalculator()


@pytest.fixture
def sample_loan() -> Loan:
    """10 000 at 6% over 12 months."""
    return Loan(
        amount=10000.0,
        term_years=1,
        term_months=0,
        annual_rate_percent=6.0,
        category=LoanCategory.PERSONAL,
        fixed_rate=True,
    )


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove loan-calc environment variables for the test."""
    for name in LOAN_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
