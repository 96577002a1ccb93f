"""Tests for the dataset container."""

from dataclasses import replace
from datetime import date

import pytest

from savings_gen.exceptions import ReferentialIntegrityError
from savings_gen.models import Account, Customer, EducationTier, Gender
from savings_gen.store import SavingsDataset


class TestSavingsDataset:
    """Tests for SavingsDataset."""

    def test_validate_passes(self, dataset: SavingsDataset) -> None:
        """Test validation of a generated dataset."""
        dataset.validate()

    def test_tables(self, dataset: SavingsDataset) -> None:
        """Test tables by export name."""
        assert list(dataset.tables()) == ["customers", "accounts", "merged"]

    def test_iter_customers(self, dataset: SavingsDataset) -> None:
        """Test customer record iteration."""
        customers = list(dataset.iter_customers())

        assert len(customers) == 200
        assert all(isinstance(c, Customer) for c in customers)
        assert all(isinstance(c.gender, Gender) for c in customers)
        assert all(isinstance(c.education, EducationTier) for c in customers)
        assert all(c.age_bracket.contains(c.age) for c in customers)
        assert all(c.address is None or isinstance(c.address, str) for c in customers)

    def test_iter_accounts(self, dataset: SavingsDataset) -> None:
        """Test account record iteration."""
        accounts = list(dataset.iter_accounts())

        assert len(accounts) == 200
        assert all(isinstance(a, Account) for a in accounts)
        assert all(date(2000, 1, 1) <= a.opening_date <= date(2023, 12, 30) for a in accounts)
        assert all((a.balance is None) == (a.interest is None) for a in accounts)

    def test_get_customer_account(self, dataset: SavingsDataset) -> None:
        """Test account lookup by customer."""
        customer_id = int(dataset.customers["customer_id"].iloc[0])

        account = dataset.get_customer_account(customer_id)

        assert account is not None
        assert account.customer_id == customer_id

    def test_get_customer_account_unknown(self, dataset: SavingsDataset) -> None:
        """Unknown customer has no account."""
        assert dataset.get_customer_account(1) is None

    def test_validate_detects_orphan(self, dataset: SavingsDataset) -> None:
        """Orphan account fails validation."""
        accounts = dataset.accounts.copy()
        accounts.loc[accounts.index[0], "customer_id"] = 1
        broken = replace(dataset, accounts=accounts)

        with pytest.raises(ReferentialIntegrityError):
            broken.validate()

    def test_validate_detects_dropped_rows(self, dataset: SavingsDataset) -> None:
        """Dropped merged rows fail validation."""
        broken = replace(dataset, merged=dataset.merged.iloc[:-1])

        with pytest.raises(ReferentialIntegrityError, match="199 rows"):
            broken.validate()
