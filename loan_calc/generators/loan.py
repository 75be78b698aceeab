"""Sample loan request generator."""

import random
from typing import Iterator

from loan_calc.generators.base import BaseGenerator
from loan_calc.models import LoanCategory, LoanRequest, RateChange


class LoanRequestGenerator(BaseGenerator):
    """Generate realistic, valid loan requests."""

    CATEGORIES = list(LoanCategory)

    # Principal in thousands, term in years, annual rate in percent
    PROFILES = {
        LoanCategory.BUSINESS: {"amount": (10, 500), "years": (1, 10), "rate": (5.0, 15.0)},
        LoanCategory.PERSONAL: {"amount": (1, 50), "years": (1, 7), "rate": (6.0, 25.0)},
        LoanCategory.MORTGAGE: {"amount": (100, 1500), "years": (10, 30), "rate": (3.0, 8.0)},
        LoanCategory.CAR: {"amount": (5, 80), "years": (2, 7), "rate": (4.0, 12.0)},
    }

    def generate(
        self,
        category: LoanCategory | None = None,
        fixed_rate: bool | None = None,
        with_rate_changes: bool = False,
    ) -> LoanRequest:
        """Generate a loan request.

        Parameters
        ----------
        category : LoanCategory | None
            Loan category; random when omitted.
        fixed_rate : bool | None
            Rate fixedness; about 70% fixed when omitted.
        with_rate_changes : bool
            Add one to three rate resets to flexible-rate requests.

        Returns
        -------
        LoanRequest
            Request that passes ``LoanCalculator.validate_request``.
        """
        if category is None:
            category = self.fake.random_element(self.CATEGORIES)
        if fixed_rate is None:
            fixed_rate = self.fake.boolean(chance_of_getting_true=70)

        profile = self.PROFILES[category]
        amount = float(random.randint(*profile["amount"]) * 1000)
        term_years = random.randint(*profile["years"])
        term_months = random.randint(0, 11)
        rate_percent = round(random.uniform(*profile["rate"]), 2)

        rate_changes: tuple[RateChange, ...] = ()
        if with_rate_changes and not fixed_rate:
            rate_changes = self._generate_rate_changes(
                term_years * 12 + term_months, profile["rate"]
            )

        return LoanRequest(
            amount=amount,
            term_years=term_years,
            term_months=term_months,
            rate_percent=rate_percent,
            category_choice=self.CATEGORIES.index(category) + 1,
            fixed_rate=fixed_rate,
            rate_changes=rate_changes,
        )

    def generate_batch(self, count: int, **kwargs) -> Iterator[LoanRequest]:
        """Generate ``count`` loan requests."""
        for _ in range(count):
            yield self.generate(**kwargs)

    def _generate_rate_changes(
        self, total_months: int, rate_range: tuple[float, float]
    ) -> tuple[RateChange, ...]:
        """Rate resets at distinct months strictly inside the term."""
        if total_months < 2:
            return ()
        count = min(random.randint(1, 3), total_months - 1)
        months = sorted(random.sample(range(1, total_months), count))
        return tuple(
            RateChange(month=month, annual_rate_percent=round(random.uniform(*rate_range), 2))
            for month in months
        )
