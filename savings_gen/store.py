"""Generated dataset container with referential integrity checks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator

import pandas as pd

from savings_gen.exceptions import ReferentialIntegrityError
from savings_gen.models import Account, AgeBracket, Customer, EducationTier, Gender


def _optional(value: Any) -> Any:
    """Map pandas missing markers to ``None``."""
    return None if pd.isna(value) else value


@dataclass
class SavingsDataset:
    """The Customer and Account tables and their cleaned join."""

    customers: pd.DataFrame
    accounts: pd.DataFrame
    merged: pd.DataFrame

    def validate(self) -> None:
        """Check the one-account-per-customer relationship.

        Raises
        ------
        ReferentialIntegrityError
            If an account is orphaned, a customer has no account or more
            than one, or the merged table lost or duplicated rows.
        """
        customer_ids = set(self.customers["customer_id"])
        if len(customer_ids) != len(self.customers):
            raise ReferentialIntegrityError("Customer identifiers are not unique")
        if len(set(self.accounts["account_id"])) != len(self.accounts):
            raise ReferentialIntegrityError("Account identifiers are not unique")

        owners = self.accounts["customer_id"]
        if owners.duplicated().any() or set(owners) != customer_ids:
            raise ReferentialIntegrityError("Customers and accounts are not one-to-one")

        if len(self.merged) != len(self.customers):
            raise ReferentialIntegrityError(
                f"Merged table has {len(self.merged)} rows, expected {len(self.customers)}"
            )

    def tables(self) -> dict[str, pd.DataFrame]:
        """Tables by export name."""
        return {
            "customers": self.customers,
            "accounts": self.accounts,
            "merged": self.merged,
        }

    def iter_customers(self) -> Iterator[Customer]:
        """Yield customer records."""
        for row in self.customers.itertuples(index=False):
            yield Customer(
                customer_id=int(row.customer_id),
                first_name=row.first_name,
                surname=row.surname,
                full_name=row.full_name,
                gender=Gender(row.gender),
                age=int(row.age),
                age_bracket=AgeBracket(row.age_bracket),
                education=EducationTier(row.education),
                profession=row.profession,
                monthly_salary=float(row.monthly_salary),
                address=_optional(row.address),
            )

    def iter_accounts(self) -> Iterator[Account]:
        """Yield account records."""
        for row in self.accounts.itertuples(index=False):
            yield Account(
                account_id=int(row.account_id),
                customer_id=int(row.customer_id),
                opening_date=pd.Timestamp(row.opening_date).date(),
                tenure_months=int(row.tenure_months),
                balance=_optional(row.balance),
                interest=_optional(row.interest),
            )

    def get_customer_account(self, customer_id: int) -> Account | None:
        """Return the account owned by ``customer_id``, if any."""
        for account in self.iter_accounts():
            if account.customer_id == customer_id:
                return account
        return None
