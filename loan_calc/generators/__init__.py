"""Sample data generators."""

from loan_calc.generators.loan import LoanRequestGenerator

__all__ = ["LoanRequestGenerator"]
