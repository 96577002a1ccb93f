"""Address sampling with injected missing values."""

from __future__ import annotations

import logging

import pandas as pd

from savings_gen.generators.base import (
    BaseGenerator,
    check_sample_size,
    missing_mask,
    row_index,
)
from savings_gen.logging import stage_fields

logger = logging.getLogger(__name__)


def format_addresses(addresses: pd.DataFrame, suffix: str) -> pd.Series:
    """Build ``"<region> <street><suffix>"`` strings from the street reference."""
    region = addresses["region_id"]
    if pd.api.types.is_float_dtype(region):
        region = region.round().astype("Int64")
    return region.astype(str) + " " + addresses["street_name"].astype(str) + suffix


class AddressSampler(BaseGenerator):
    """Draw addresses without replacement, then mask some as absent.

    Parameters
    ----------
    seed : int
        Stage seed.
    missing_rate : float
        Per-row probability that the address is absent.
    suffix : str
        Place suffix appended to every address.
    """

    def __init__(
        self,
        seed: int,
        missing_rate: float = 0.05,
        suffix: str = ", Melbourne VIC",
    ) -> None:
        super().__init__(seed)
        self.missing_rate = missing_rate
        self.suffix = suffix

    def generate(self, addresses: pd.DataFrame, count: int) -> pd.DataFrame:
        """Sample ``count`` addresses.

        Returns
        -------
        pd.DataFrame
            Column ``address`` (string or missing), indexed by row.
        """
        check_sample_size(count, len(addresses), "addresses")

        formatted = format_addresses(addresses, self.suffix)
        sample = formatted.sample(n=count, replace=False, random_state=self.rng)
        sample.index = row_index(count)

        mask = missing_mask(self.rng, count, self.missing_rate)
        frame = sample.where(~mask).to_frame("address")

        logger.info(
            "Sampled %d addresses, %d masked as missing",
            count,
            int(mask.sum()),
            extra=stage_fields("addresses", rows=count, missing=int(mask.sum())),
        )
        return frame
