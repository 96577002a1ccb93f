"""Base generator class for all samplers."""

from __future__ import annotations

from abc import ABC

import numpy as np
import pandas as pd

from savings_gen.exceptions import SampleSizeExceededError

# Name of the synthetic row index shared by every per-customer attribute table
ROW_INDEX = "row_id"

ID_MIN = 10_000_000
ID_MAX = 99_999_999


class BaseGenerator(ABC):
    """Base class for all samplers.

    Each sampler owns a private ``numpy.random.Generator`` seeded with an
    explicit value, so its output does not depend on what other stages
    drew before it.

    Parameters
    ----------
    seed : int
        Seed for this stage's random generator.
    """

    def __init__(self, seed: int) -> None:
        self.seed = seed
        self.rng = np.random.default_rng(seed)


def row_index(count: int) -> pd.RangeIndex:
    """Row index shared by every attribute table of one run."""
    return pd.RangeIndex(count, name=ROW_INDEX)


def check_sample_size(requested: int, available: int, what: str) -> None:
    """Ensure a without-replacement draw of ``requested`` items is possible.

    Raises
    ------
    SampleSizeExceededError
        If ``requested`` exceeds ``available``.
    """
    if requested > available:
        raise SampleSizeExceededError(
            f"Cannot draw {requested} unique {what} without replacement; "
            f"only {available} available"
        )


def draw_unique_ids(
    rng: np.random.Generator,
    count: int,
    low: int = ID_MIN,
    high: int = ID_MAX,
) -> np.ndarray:
    """Draw ``count`` distinct integers from the inclusive range [low, high].

    With the default bounds every value has exactly 8 digits and no
    leading zero.
    """
    span = high - low + 1
    check_sample_size(count, span, "identifiers")
    return rng.choice(span, size=count, replace=False).astype("int64") + low


class IdentifierGenerator(BaseGenerator):
    """Generate unique 8-digit identifiers."""

    def generate(self, count: int) -> pd.Series:
        """Draw ``count`` unique identifiers.

        Parameters
        ----------
        count : int
            Number of identifiers.

        Returns
        -------
        pd.Series
            Identifiers indexed by row.
        """
        return pd.Series(draw_unique_ids(self.rng, count), index=row_index(count))


def missing_mask(rng: np.random.Generator, count: int, rate: float) -> np.ndarray:
    """Independent per-row Bernoulli mask; ``True`` marks a value as absent."""
    return rng.uniform(size=count) < rate
