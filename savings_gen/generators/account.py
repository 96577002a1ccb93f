"""Savings account generation."""

from __future__ import annotations

import calendar
import logging
from datetime import date

import numpy as np
import pandas as pd

from savings_gen.generators.base import (
    BaseGenerator,
    draw_unique_ids,
    missing_mask,
    row_index,
)
from savings_gen.logging import stage_fields

logger = logging.getLogger(__name__)

ACCOUNT_COLUMNS = [
    "account_id",
    "customer_id",
    "opening_date",
    "tenure_months",
    "balance",
    "interest",
]

OPENING_YEARS = (2000, 2023)
MAX_OPENING_DAY = 30


def compose_date(year: int, month: int, day: int) -> date:
    """Build a date, clamping ``day`` to the last day of the month."""
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(day, last_day))


def months_between(opening: pd.Series, reference: date) -> pd.Series:
    """Whole months elapsed from each opening date to ``reference``.

    A month counts only once its day-of-month has been reached, so
    2023-12-30 -> 2024-04-01 is 3 months.
    """
    opening = pd.to_datetime(opening)
    months = (reference.year - opening.dt.year) * 12 + (reference.month - opening.dt.month)
    months = months - (opening.dt.day > reference.day).astype("int64")
    return months.astype("int64")


class AccountGenerator(BaseGenerator):
    """Generate one savings account per customer.

    Identifiers come from their own seed (``id_seed``). The account stage
    generator then draws opening days, months and years, followed by the
    balance mask.

    Parameters
    ----------
    seed : int
        Seed for dates and the balance mask.
    id_seed : int
        Seed for account identifiers.
    reference_date : date
        Date tenure is measured to.
    missing_rate : float
        Per-row probability that the balance is absent.
    balance_factor : float
        Balance = balance_factor * tenure * monthly salary.
    interest_rate : float
        Simple annual interest rate.
    """

    def __init__(
        self,
        seed: int,
        id_seed: int,
        reference_date: date = date(2024, 4, 1),
        missing_rate: float = 0.05,
        balance_factor: float = 0.2,
        interest_rate: float = 0.03,
    ) -> None:
        super().__init__(seed)
        self.id_rng = np.random.default_rng(id_seed)
        self.reference_date = reference_date
        self.missing_rate = missing_rate
        self.balance_factor = balance_factor
        self.interest_rate = interest_rate

    def generate_opening_dates(self, count: int) -> pd.Series:
        """Draw ``count`` opening dates between 2000-01-01 and 2023-12-30."""
        days = self.rng.integers(1, MAX_OPENING_DAY + 1, size=count)
        months = self.rng.integers(1, 13, size=count)
        years = self.rng.integers(OPENING_YEARS[0], OPENING_YEARS[1] + 1, size=count)
        dates = [
            compose_date(int(y), int(m), int(d)) for d, m, y in zip(days, months, years)
        ]
        return pd.Series(pd.to_datetime(dates), index=row_index(count))

    def generate(self, customers: pd.DataFrame) -> pd.DataFrame:
        """Generate accounts for every customer.

        Parameters
        ----------
        customers : pd.DataFrame
            Customer table with ``customer_id`` and ``monthly_salary``.

        Returns
        -------
        pd.DataFrame
            One row per customer with ``ACCOUNT_COLUMNS``. ``balance`` and
            ``interest`` are NaN together for masked rows.
        """
        count = len(customers)
        index = row_index(count)

        account_ids = draw_unique_ids(self.id_rng, count)
        opening = self.generate_opening_dates(count)
        tenure = months_between(opening, self.reference_date)

        salary = pd.Series(customers["monthly_salary"].to_numpy(dtype="float64"), index=index)
        balance = self.balance_factor * tenure * salary
        mask = missing_mask(self.rng, count, self.missing_rate)
        balance = balance.where(~mask)
        interest = balance * (tenure / 12) * self.interest_rate

        accounts = pd.DataFrame(
            {
                "account_id": account_ids,
                "customer_id": customers["customer_id"].to_numpy(dtype="int64"),
                "opening_date": opening,
                "tenure_months": tenure,
                "balance": balance,
                "interest": interest,
            },
            index=index,
        )
        logger.info(
            "Generated %d accounts, %d balances masked as missing",
            count,
            int(mask.sum()),
            extra=stage_fields("accounts", rows=count, missing=int(mask.sum())),
        )
        return accounts[ACCOUNT_COLUMNS]
