"""Full-name generation from first-name and surname references."""

from __future__ import annotations

import logging

import pandas as pd

from savings_gen.generators.base import BaseGenerator, check_sample_size, row_index
from savings_gen.logging import stage_fields

logger = logging.getLogger(__name__)


class NameGenerator(BaseGenerator):
    """Sample full names from the first-name x surname universe.

    The universe is the cross product of every (gender, first name) row
    with every surname. Names are drawn without replacement from that
    universe, so rows are distinct, but the same full name can still be
    drawn twice when a first name occurs in both gender lists.
    """

    def build_universe(self, names: pd.DataFrame, surnames: pd.DataFrame) -> pd.DataFrame:
        """Cross-join first names with surnames.

        Returns
        -------
        pd.DataFrame
            Columns ``gender``, ``first_name``, ``surname``, ``full_name``;
            ``len(names) * len(surnames)`` rows.
        """
        universe = names[["gender", "first_name"]].merge(
            surnames[["surname"]], how="cross"
        )
        universe["full_name"] = universe["first_name"] + " " + universe["surname"]
        return universe

    def generate(
        self,
        names: pd.DataFrame,
        surnames: pd.DataFrame,
        count: int,
    ) -> pd.DataFrame:
        """Draw ``count`` rows from the name universe.

        Parameters
        ----------
        names : pd.DataFrame
            Names reference (``gender``, ``first_name``).
        surnames : pd.DataFrame
            Surnames reference (``surname``).
        count : int
            Number of customers.

        Returns
        -------
        pd.DataFrame
            Universe columns, indexed by row.
        """
        check_sample_size(count, len(names) * len(surnames), "full names")
        universe = self.build_universe(names, surnames)

        sample = universe.sample(n=count, replace=False, random_state=self.rng)
        sample.index = row_index(count)

        duplicates = int(sample["full_name"].duplicated().sum())
        if duplicates:
            logger.debug("%d duplicate full names drawn across gender lists", duplicates)
        logger.info(
            "Sampled %d names from a universe of %d",
            count,
            len(universe),
            extra=stage_fields("names", rows=count, universe=len(universe)),
        )
        return sample
