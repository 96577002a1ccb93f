"""Tests for the join and clean stage."""

from datetime import date

import numpy as np
import pandas as pd
import pytest

from savings_gen.cleaning import (
    impute_median,
    impute_missing,
    join_and_clean,
    join_tables,
    normalize_types,
)
from savings_gen.exceptions import ReferentialIntegrityError
from savings_gen.store import SavingsDataset


@pytest.fixture
def customers() -> pd.DataFrame:
    return pd.DataFrame(
        {
            "customer_id": [11111111, 22222222, 33333333],
            "gender": ["Female", "Male", "Female"],
            "age_bracket": ["20-39", "40-69", "70+"],
            "age": [30, 50, 75],
            "education": ["Higher", "Secondary", "Vocational"],
            "profession": ["Engineer", "Cleaner", "Chef"],
            "monthly_salary": [8800.0, 4000.0, 5600.0],
            "address": ["1 Collins Street, Melbourne VIC", None, "3 Swan Street, Melbourne VIC"],
        }
    )


@pytest.fixture
def accounts() -> pd.DataFrame:
    return pd.DataFrame(
        {
            "account_id": [90000001, 90000002, 90000003],
            "customer_id": [33333333, 11111111, 22222222],
            "opening_date": pd.to_datetime(["2020-05-10", "2023-12-30", "2010-01-01"]),
            "tenure_months": [46, 3, 171],
            "balance": [100.0, np.nan, 300.0],
            "interest": [1.0, np.nan, 3.0],
        }
    )


class TestJoinTables:
    """Tests for join_tables."""

    def test_one_row_per_customer(self, customers: pd.DataFrame, accounts: pd.DataFrame) -> None:
        """Test one merged row per customer."""
        merged = join_tables(customers, accounts)

        assert len(merged) == 3
        assert merged["customer_id"].tolist() == customers["customer_id"].tolist()
        assert merged["account_id"].tolist() == [90000002, 90000003, 90000001]

    def test_orphan_account(self, customers: pd.DataFrame, accounts: pd.DataFrame) -> None:
        """An account for an unknown customer is rejected."""
        accounts.loc[0, "customer_id"] = 44444444

        with pytest.raises(ReferentialIntegrityError, match="unknown customers"):
            join_tables(customers, accounts)

    def test_customer_without_account(
        self, customers: pd.DataFrame, accounts: pd.DataFrame
    ) -> None:
        """A customer without an account is rejected."""
        with pytest.raises(ReferentialIntegrityError, match="no account"):
            join_tables(customers, accounts.iloc[:2])

    def test_two_accounts_for_one_customer(
        self, customers: pd.DataFrame, accounts: pd.DataFrame
    ) -> None:
        """Two accounts for one customer are rejected."""
        accounts.loc[0, "customer_id"] = 11111111

        with pytest.raises(ReferentialIntegrityError, match="more than one"):
            join_tables(customers, accounts)


class TestNormalizeTypes:
    """Tests for normalize_types."""

    def test_categoricals(self, customers: pd.DataFrame, accounts: pd.DataFrame) -> None:
        """Test categorical column types."""
        frame = normalize_types(join_tables(customers, accounts), date(2024, 4, 1))

        assert isinstance(frame["gender"].dtype, pd.CategoricalDtype)
        assert not frame["gender"].cat.ordered
        assert isinstance(frame["profession"].dtype, pd.CategoricalDtype)
        assert frame["education"].cat.ordered
        assert frame["education"].cat.categories.tolist() == [
            "Secondary",
            "Vocational",
            "Higher",
        ]
        assert frame["education"].min() == "Secondary"
        assert frame["education"].max() == "Higher"

    def test_identifiers_are_integers(
        self, customers: pd.DataFrame, accounts: pd.DataFrame
    ) -> None:
        """Identifier columns are int64."""
        frame = normalize_types(join_tables(customers, accounts), date(2024, 4, 1))

        assert frame["customer_id"].dtype == "int64"
        assert frame["account_id"].dtype == "int64"

    def test_tenure_recomputed(self, customers: pd.DataFrame, accounts: pd.DataFrame) -> None:
        """Tenure is recomputed from the opening date."""
        merged = join_tables(customers, accounts)
        merged["tenure_months"] = 0

        frame = normalize_types(merged, date(2024, 4, 1))

        assert frame["tenure_months"].tolist() == [3, 171, 46]


class TestImputation:
    """Tests for median imputation."""

    def test_impute_median(self) -> None:
        """Test median imputation of a series."""
        values = pd.Series([1.0, np.nan, 3.0, 10.0])

        assert impute_median(values).tolist() == [1.0, 3.0, 3.0, 10.0]

    def test_impute_missing(self, customers: pd.DataFrame, accounts: pd.DataFrame) -> None:
        """Test cleaned balance and interest columns."""
        frame = impute_missing(join_tables(customers, accounts))

        assert frame["cleaned_balance"].tolist() == [200.0, 300.0, 100.0]
        assert frame["cleaned_interest"].tolist() == [2.0, 3.0, 1.0]
        assert frame["balance"].isna().sum() == 1

    def test_address_left_missing(
        self, customers: pd.DataFrame, accounts: pd.DataFrame
    ) -> None:
        """Missing addresses are not imputed."""
        frame = join_and_clean(customers, accounts)

        assert frame["address"].isna().sum() == 1


class TestJoinAndCleanOnDataset:
    """Properties of the cleaned merged table of a full run."""

    def test_cardinality(self, dataset: SavingsDataset) -> None:
        """Merged table keeps one row per customer."""
        assert len(dataset.merged) == 200
        assert dataset.merged["customer_id"].is_unique

    def test_no_missing_after_imputation(self, dataset: SavingsDataset) -> None:
        """Cleaned columns have no missing values."""
        merged = dataset.merged

        assert merged["cleaned_balance"].notna().all()
        assert merged["cleaned_interest"].notna().all()

    def test_observed_values_unchanged(self, dataset: SavingsDataset) -> None:
        """Observed balances are copied unchanged."""
        merged = dataset.merged
        observed = merged["balance"].notna()

        assert (merged.loc[observed, "cleaned_balance"] == merged.loc[observed, "balance"]).all()
        observed = merged["interest"].notna()
        assert (
            merged.loc[observed, "cleaned_interest"] == merged.loc[observed, "interest"]
        ).all()

    def test_imputed_with_median(self, dataset: SavingsDataset) -> None:
        """Missing balances take the column median."""
        merged = dataset.merged
        missing = merged["balance"].isna()

        assert (merged.loc[missing, "cleaned_balance"] == merged["balance"].median()).all()
