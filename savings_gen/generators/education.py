"""Joint sampling of education tier, profession and salary."""

from __future__ import annotations

import logging

import numpy as np
import pandas as pd

from savings_gen.exceptions import SampleSizeExceededError
from savings_gen.generators.base import BaseGenerator, row_index
from savings_gen.logging import stage_fields
from savings_gen.models.enums import QUALIFICATION_TIERS, EducationTier

logger = logging.getLogger(__name__)

DEFAULT_TIER_WEIGHTS: dict[str, float] = {"SS": 0.47, "VE": 0.18, "HE": 0.35}

WEEKS_PER_MONTH = 4


def partition_by_tier(salaries: pd.DataFrame) -> dict[EducationTier, pd.DataFrame]:
    """Split the salary reference into one profession table per tier.

    Qualification labels map to tiers through ``QUALIFICATION_TIERS``;
    rows with other labels belong to no tier.
    """
    labels = {label: tier.value for label, tier in QUALIFICATION_TIERS.items()}
    tiers = salaries["qualification"].map(labels)
    return {
        tier: salaries[tiers == tier.value].reset_index(drop=True)
        for tier in EducationTier
    }


def allowed_professions(salaries: pd.DataFrame) -> dict[EducationTier, set[str]]:
    """Tier -> set of professions a customer of that tier may hold."""
    return {
        tier: set(table["profession"])
        for tier, table in partition_by_tier(salaries).items()
    }


class EducationSampler(BaseGenerator):
    """Sample education tier, then a profession of that tier, then salary.

    Draw order within the stage is fixed: all tiers first, then
    professions tier by tier (Secondary, Vocational, Higher), then one
    salary noise value per customer.

    Parameters
    ----------
    seed : int
        Stage seed.
    tier_weights : dict[str, float] | None
        Tier code (SS, VE, HE) -> probability.
    noise_scale : float
        Standard deviation of the monthly salary noise.
    """

    def __init__(
        self,
        seed: int,
        tier_weights: dict[str, float] | None = None,
        noise_scale: float = 200.0,
    ) -> None:
        super().__init__(seed)
        weights = tier_weights or DEFAULT_TIER_WEIGHTS
        self.codes = list(weights)
        self.weights = list(weights.values())
        self.noise_scale = noise_scale

    def generate(self, salaries: pd.DataFrame, count: int) -> pd.DataFrame:
        """Generate education, profession and salary for ``count`` customers.

        Parameters
        ----------
        salaries : pd.DataFrame
            Salary reference (``profession``, ``qualification``,
            ``weekly_salary``).
        count : int
            Number of customers.

        Returns
        -------
        pd.DataFrame
            Columns ``education`` (tier label), ``profession``,
            ``weekly_salary`` and ``monthly_salary``, indexed by row.
        """
        codes = self.rng.choice(self.codes, size=count, replace=True, p=self.weights)
        tiers = np.array([EducationTier.from_code(code).value for code in codes], dtype=object)

        professions = np.empty(count, dtype=object)
        weekly = np.zeros(count, dtype="float64")
        tier_counts: dict[str, int] = {}
        for tier, table in partition_by_tier(salaries).items():
            positions = np.flatnonzero(tiers == tier.value)
            tier_counts[tier.code] = len(positions)
            if len(positions) == 0:
                continue
            if table.empty:
                raise SampleSizeExceededError(
                    f"No professions available for education tier {tier.value}"
                )
            picks = self.rng.choice(len(table), size=len(positions), replace=True)
            professions[positions] = table["profession"].to_numpy()[picks]
            weekly[positions] = table["weekly_salary"].to_numpy(dtype="float64")[picks]

        noise = self.rng.normal(0.0, self.noise_scale, size=count)
        monthly = np.round(weekly * WEEKS_PER_MONTH + noise, -2)

        logger.info(
            "Sampled education tiers: %s",
            tier_counts,
            extra=stage_fields("education", rows=count, **tier_counts),
        )
        return pd.DataFrame(
            {
                "education": tiers,
                "profession": professions,
                "weekly_salary": weekly,
                "monthly_salary": monthly,
            },
            index=row_index(count),
        )
