"""Customer table assembly."""

from __future__ import annotations

import logging
from functools import reduce

import pandas as pd

from savings_gen.config import GenerationConfig, SeedConfig
from savings_gen.exceptions import ReferentialIntegrityError
from savings_gen.generators.address import AddressSampler
from savings_gen.generators.base import IdentifierGenerator, row_index
from savings_gen.generators.demographics import DemographicSampler
from savings_gen.generators.education import EducationSampler
from savings_gen.generators.names import NameGenerator
from savings_gen.models.enums import Gender
from savings_gen.references.loader import ReferenceTables

logger = logging.getLogger(__name__)

CUSTOMER_COLUMNS = [
    "customer_id",
    "first_name",
    "surname",
    "full_name",
    "gender",
    "age_bracket",
    "age",
    "education",
    "profession",
    "monthly_salary",
    "address",
]


def join_on_row_index(parts: list[pd.DataFrame], count: int) -> pd.DataFrame:
    """Join per-attribute tables on their shared row index.

    Raises
    ------
    ReferentialIntegrityError
        If any part does not carry exactly the rows ``0..count-1``.
    """
    expected = row_index(count)
    for part in parts:
        if not part.index.equals(expected):
            raise ReferentialIntegrityError(
                f"Attribute table with columns {list(part.columns)} is not aligned "
                f"to the {count}-row index"
            )
    return reduce(
        lambda left, right: left.join(right, how="inner", validate="one_to_one"),
        parts,
    )


class CustomerGenerator:
    """Generate the customer table from the reference tables.

    Runs the identifier, name, demographic, education and address
    samplers, each with its own seed, and joins their outputs on the
    shared row index.

    Parameters
    ----------
    seeds : SeedConfig | None
        Per-stage seeds.
    generation : GenerationConfig | None
        Sizes, rates and distributions.
    address_suffix : str
        Place suffix for generated addresses.
    """

    def __init__(
        self,
        seeds: SeedConfig | None = None,
        generation: GenerationConfig | None = None,
        address_suffix: str = ", Melbourne VIC",
    ) -> None:
        self.seeds = seeds or SeedConfig()
        self.generation = generation or GenerationConfig()
        self.address_suffix = address_suffix

    def generate(self, references: ReferenceTables) -> pd.DataFrame:
        """Generate the customer table.

        Parameters
        ----------
        references : ReferenceTables
            Loaded reference tables.

        Returns
        -------
        pd.DataFrame
            One row per customer with ``CUSTOMER_COLUMNS``.
        """
        count = self.generation.num_customers
        seeds = self.seeds

        ids = IdentifierGenerator(seeds.customer_ids).generate(count).to_frame("customer_id")
        names = NameGenerator(seeds.names).generate(
            references.names, references.surnames, count
        )
        demographics = DemographicSampler(
            seeds.demographics, self.generation.age_bracket_weights
        ).generate(count)
        education = EducationSampler(
            seeds.education,
            self.generation.education_weights,
            self.generation.salary_noise_scale,
        ).generate(references.salaries, count)
        addresses = AddressSampler(
            seeds.addresses, self.generation.missing_rate, self.address_suffix
        ).generate(references.addresses, count)

        customers = join_on_row_index(
            [ids, names, demographics, education, addresses], count
        )
        customers["gender"] = customers["gender"].map(lambda tag: Gender.from_tag(tag).value)

        logger.info("Assembled customer table: %d rows", len(customers))
        return customers[CUSTOMER_COLUMNS]
