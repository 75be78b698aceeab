#!/usr/bin/env python3
"""Generate sample loans and print their repayment figures.

Useful for eyeballing the calculator across realistic inputs for every
loan category, including flexible-rate loans with rate resets.
"""

import argparse
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from loan_calc.calculator import LoanCalculator
from loan_calc.generators import LoanRequestGenerator
from loan_calc.logging import setup_logging
from loan_calc.models import LoanCategory
from loan_calc.report import LoanReport
from loan_calc.sinks import ConsoleSink


def main() -> None:
    parser = argparse.ArgumentParser(description="Print repayment figures for sample loans")
    parser.add_argument(
        "--count",
        type=int,
        default=5,
        help="Number of loans to generate (default: 5)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=42,
        help="Random seed for reproducibility (default: 42)",
    )
    parser.add_argument(
        "--category",
        choices=[c.name.lower() for c in LoanCategory],
        default=None,
        help="Restrict to one loan category (default: any)",
    )
    parser.add_argument(
        "--rate-changes",
        action="store_true",
        help="Give flexible-rate loans random rate resets",
    )
    parser.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="Output format (default: text)",
    )
    args = parser.parse_args()

    setup_logging(level="WARNING")

    generator = LoanRequestGenerator(seed=args.seed)
    calculator = LoanCalculator()
    sink = ConsoleSink(format_type=args.format)
    category = LoanCategory[args.category.upper()] if args.category else None

    for request in generator.generate_batch(
        args.count, category=category, with_rate_changes=args.rate_changes
    ):
        loan = calculator.validate_request(request)
        sink.write(LoanReport.build(loan, calculator))

    print(f"\nGenerated {args.count} loans (seed={args.seed})")


if __name__ == "__main__":
    main()
