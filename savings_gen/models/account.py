"""Savings account model."""

from dataclasses import dataclass
from datetime import date


@dataclass
class Account:
    """Savings account entity, exactly one per customer.

    ``balance`` is the average monthly balance. ``interest`` is derived from
    it and is absent whenever the balance is absent.
    """

    account_id: int
    customer_id: int
    opening_date: date
    tenure_months: int
    balance: float | None = None
    interest: float | None = None
