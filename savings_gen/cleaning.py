"""Join of the customer and account tables, type normalization and imputation."""

from __future__ import annotations

import logging
from datetime import date

import pandas as pd

from savings_gen.exceptions import ReferentialIntegrityError
from savings_gen.generators.account import months_between
from savings_gen.models.enums import AgeBracket, EducationTier

logger = logging.getLogger(__name__)

# Columns imputed with the column median; address is deliberately left as is.
IMPUTED_COLUMNS = {"balance": "cleaned_balance", "interest": "cleaned_interest"}


def join_tables(customers: pd.DataFrame, accounts: pd.DataFrame) -> pd.DataFrame:
    """Left-join accounts onto customers by ``customer_id``.

    Raises
    ------
    ReferentialIntegrityError
        If the relationship is not exactly one account per customer.
    """
    customer_ids = customers["customer_id"]
    account_owners = accounts["customer_id"]

    if customer_ids.duplicated().any():
        raise ReferentialIntegrityError("Duplicate customer_id in customer table")
    if account_owners.duplicated().any():
        raise ReferentialIntegrityError("Customer owns more than one account")

    orphans = set(account_owners) - set(customer_ids)
    if orphans:
        raise ReferentialIntegrityError(
            f"{len(orphans)} account(s) reference unknown customers, e.g. {min(orphans)}"
        )
    without_account = set(customer_ids) - set(account_owners)
    if without_account:
        raise ReferentialIntegrityError(
            f"{len(without_account)} customer(s) have no account, e.g. {min(without_account)}"
        )

    merged = customers.merge(accounts, on="customer_id", how="left", validate="one_to_one")
    logger.info("Joined %d customers with %d accounts", len(customers), len(accounts))
    return merged


def normalize_types(merged: pd.DataFrame, reference_date: date) -> pd.DataFrame:
    """Cast identifiers, categories and dates; recompute tenure.

    ``education`` becomes an ordered categorical (Secondary < Vocational
    < Higher); ``gender`` and ``profession`` become unordered categoricals.
    """
    frame = merged.copy()
    frame["customer_id"] = frame["customer_id"].astype("int64")
    frame["account_id"] = frame["account_id"].astype("int64")
    frame["age"] = frame["age"].astype("int64")
    frame["gender"] = frame["gender"].astype("category")
    frame["profession"] = frame["profession"].astype("category")
    frame["education"] = pd.Categorical(
        frame["education"],
        categories=EducationTier.ordered_labels(),
        ordered=True,
    )
    frame["age_bracket"] = pd.Categorical(
        frame["age_bracket"],
        categories=[bracket.value for bracket in AgeBracket],
        ordered=True,
    )
    frame["opening_date"] = pd.to_datetime(frame["opening_date"])
    frame["tenure_months"] = months_between(frame["opening_date"], reference_date)
    return frame


def impute_median(values: pd.Series) -> pd.Series:
    """Fill missing entries with the median of the observed entries."""
    return values.fillna(values.median())


def impute_missing(frame: pd.DataFrame) -> pd.DataFrame:
    """Add median-imputed ``cleaned_balance`` and ``cleaned_interest`` columns.

    The median is taken over the whole column, not per profession or
    education tier.
    """
    frame = frame.copy()
    for source, target in IMPUTED_COLUMNS.items():
        missing = int(frame[source].isna().sum())
        frame[target] = impute_median(frame[source])
        logger.info("Imputed %d missing %s values with the median", missing, source)
    return frame


def join_and_clean(
    customers: pd.DataFrame,
    accounts: pd.DataFrame,
    reference_date: date = date(2024, 4, 1),
) -> pd.DataFrame:
    """Join, normalize and impute in one step.

    Parameters
    ----------
    customers : pd.DataFrame
        Customer table.
    accounts : pd.DataFrame
        Account table.
    reference_date : date
        Date tenure is measured to.

    Returns
    -------
    pd.DataFrame
        Merged table, one row per customer.
    """
    merged = join_tables(customers, accounts)
    merged = normalize_types(merged, reference_date)
    return impute_missing(merged)
