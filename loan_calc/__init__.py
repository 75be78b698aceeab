"""loan-calc: annuity loan repayment calculator."""

__version__ = "0.1.0"
