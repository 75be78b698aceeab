"""Custom exception hierarchy for loan-calc."""


class LoanCalcError(Exception):
    """Base exception for all loan-calc errors."""


class ValidationError(LoanCalcError):
    """Raised when loan input fails semantic validation."""


class InvalidAmountError(ValidationError):
    """Raised when the loan amount is not greater than zero."""

    def __init__(self, message: str = "Loan amount must be greater than zero.") -> None:
        super().__init__(message)


class InvalidRateError(ValidationError):
    """Raised when an interest rate is negative or a rate change is unusable."""

    def __init__(self, message: str = "Interest rate cannot be negative.") -> None:
        super().__init__(message)


class InvalidCategoryError(ValidationError):
    """Raised when the loan type choice is outside the menu."""

    def __init__(self, message: str = "Invalid loan type choice.") -> None:
        super().__init__(message)


class InvalidTermError(ValidationError):
    """Raised when the combined term is not positive and strict terms are on."""

    def __init__(self, message: str = "Loan term must be at least one month.") -> None:
        super().__init__(message)


class ConfigurationError(LoanCalcError):
    """Raised when configuration is invalid or missing."""


class InputAbortedError(LoanCalcError):
    """Raised when the input stream ends before a value was supplied."""

    def __init__(self, message: str = "Input ended before all values were entered.") -> None:
        super().__init__(message)


class SinkError(LoanCalcError):
    """Raised when a sink operation fails."""


class ReportWriteError(SinkError):
    """Raised when the report file cannot be opened for writing."""

    def __init__(self, message: str = "Unable to open the file.") -> None:
        super().__init__(message)
