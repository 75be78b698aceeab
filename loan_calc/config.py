"""Configuration management for loan-calc."""

from dataclasses import dataclass, field
from pathlib import Path

from loan_calc.exceptions import ConfigurationError

DEFAULT_OUTPUT_FILE = "loan_details.txt"

LOG_FORMATS = ("standard", "json")
ECHO_FORMATS = ("text", "json")


@dataclass
class OutputConfig:
    """Report output configuration."""

    output_path: Path = field(default_factory=lambda: Path(DEFAULT_OUTPUT_FILE))
    currency_symbol: str = "$"
    echo_format: str | None = None  # "text", "json" or None for no echo


@dataclass
class LoanCalcConfig:
    """Main configuration for loan-calc."""

    output: OutputConfig = field(default_factory=OutputConfig)
    log_level: str = "WARNING"
    log_format: str = "standard"
    reject_degenerate_terms: bool = False

    def __post_init__(self) -> None:
        if self.log_format not in LOG_FORMATS:
            raise ConfigurationError(
                f"Unknown log format {self.log_format!r}, expected one of {LOG_FORMATS}"
            )
        if self.output.echo_format is not None and self.output.echo_format not in ECHO_FORMATS:
            raise ConfigurationError(
                f"Unknown echo format {self.output.echo_format!r}, expected one of {ECHO_FORMATS}"
            )

    @classmethod
    def from_env(cls) -> "LoanCalcConfig":
        """Create config from environment variables."""
        import os

        output = OutputConfig(
            output_path=Path(os.getenv("LOAN_CALC_OUTPUT", DEFAULT_OUTPUT_FILE)),
            currency_symbol=os.getenv("LOAN_CALC_CURRENCY", "$"),
            echo_format=os.getenv("LOAN_CALC_ECHO") or None,
        )

        return cls(
            output=output,
            log_level=os.getenv("LOG_LEVEL", "WARNING"),
            log_format=os.getenv("LOG_FORMAT", "standard"),
            reject_degenerate_terms=(
                os.getenv("LOAN_CALC_REJECT_DEGENERATE_TERMS", "false").lower() == "true"
            ),
        )
