"""Two-stage age sampling: bracket first, then age within the bracket."""

from __future__ import annotations

import logging

import numpy as np
import pandas as pd

from savings_gen.generators.base import BaseGenerator, row_index
from savings_gen.logging import stage_fields
from savings_gen.models.enums import AgeBracket

logger = logging.getLogger(__name__)

DEFAULT_BRACKET_WEIGHTS: dict[str, float] = {
    AgeBracket.TEENS.value: 0.13,
    AgeBracket.YOUNG_ADULT.value: 0.45,
    AgeBracket.MIDDLE_AGE.value: 0.25,
    AgeBracket.SENIOR.value: 0.17,
}


def age_within_bracket(rng: np.random.Generator, bracket: AgeBracket) -> int:
    """Draw a uniform value over the bracket range, rounded to an integer."""
    low, high = bracket.bounds
    return int(round(rng.uniform(low, high)))


class DemographicSampler(BaseGenerator):
    """Sample an age bracket and an age for each customer.

    Parameters
    ----------
    seed : int
        Stage seed.
    bracket_weights : dict[str, float] | None
        Bracket label -> probability.
    """

    def __init__(self, seed: int, bracket_weights: dict[str, float] | None = None) -> None:
        super().__init__(seed)
        weights = bracket_weights or DEFAULT_BRACKET_WEIGHTS
        self.brackets = [AgeBracket(label) for label in weights]
        self.weights = list(weights.values())

    def generate(self, count: int) -> pd.DataFrame:
        """Draw ``count`` brackets, then one age per bracket.

        Returns
        -------
        pd.DataFrame
            Columns ``age_bracket`` (label) and ``age`` (int), indexed by row.
        """
        labels = [bracket.value for bracket in self.brackets]
        drawn = self.rng.choice(labels, size=count, replace=True, p=self.weights)
        ages = [age_within_bracket(self.rng, AgeBracket(label)) for label in drawn]

        frame = pd.DataFrame(
            {"age_bracket": drawn, "age": np.asarray(ages, dtype="int64")},
            index=row_index(count),
        )
        bracket_counts = frame["age_bracket"].value_counts().reindex(labels, fill_value=0)
        logger.info(
            "Sampled ages: %s",
            bracket_counts.to_dict(),
            extra=stage_fields("demographics", rows=count),
        )
        return frame
