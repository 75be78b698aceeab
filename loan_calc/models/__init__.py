"""Domain models for loan calculation."""

from loan_calc.models.enums import LoanCategory, RateType
from loan_calc.models.loan import Loan, LoanRequest, RateChange

__all__ = ["Loan", "LoanCategory", "LoanRequest", "RateChange", "RateType"]
