"""Offline reference tables built with Faker.

Produces the same four tables :class:`ReferenceLoader` returns, so the
pipeline can run without spreadsheets or network access. Output is fully
determined by ``seed``.
"""

from __future__ import annotations

import pandas as pd
from faker import Faker

from savings_gen.models.enums import QUALIFICATION_TIERS, EducationTier
from savings_gen.references.loader import ReferenceTables

# Weekly salary range (AUD) per tier
WEEKLY_SALARY_RANGES: dict[EducationTier, tuple[int, int]] = {
    EducationTier.SECONDARY: (900, 1500),
    EducationTier.VOCATIONAL: (1200, 1900),
    EducationTier.HIGHER: (1600, 2800),
}


def _distinct(draw, count: int, attempts: int) -> list[str]:
    """Collect up to ``count`` distinct values from ``attempts`` draws."""
    values = dict.fromkeys(draw() for _ in range(attempts))
    return list(values)[:count]


def build_sample_references(
    seed: int = 0,
    first_names_per_gender: int = 25,
    num_surnames: int = 40,
    num_professions: int = 42,
    num_streets: int = 400,
    locale: str = "en_AU",
) -> ReferenceTables:
    """Build a deterministic offline reference set.

    Parameters
    ----------
    seed : int
        Faker seed.
    first_names_per_gender : int
        Target number of distinct first names per gender.
    num_surnames : int
        Target number of distinct surnames.
    num_professions : int
        Target number of distinct professions. Qualification labels are
        assigned round-robin so every education tier is populated.
    num_streets : int
        Number of street reference rows.
    locale : str
        Faker locale.

    Returns
    -------
    ReferenceTables
        Tables with the canonical loader columns.
    """
    fake = Faker(locale)
    fake.seed_instance(seed)

    girls = _distinct(fake.first_name_female, first_names_per_gender, first_names_per_gender * 4)
    boys = _distinct(fake.first_name_male, first_names_per_gender, first_names_per_gender * 4)
    names = pd.DataFrame(
        {
            "gender": ["girl"] * len(girls) + ["boy"] * len(boys),
            "first_name": girls + boys,
        }
    )

    surname_list = _distinct(fake.last_name, num_surnames, num_surnames * 4)
    surnames = pd.DataFrame(
        {"rank": range(1, len(surname_list) + 1), "surname": surname_list}
    )

    labels = list(QUALIFICATION_TIERS)
    professions = _distinct(fake.job, num_professions, num_professions * 4)
    rows = []
    for i, profession in enumerate(professions):
        qualification = labels[i % len(labels)]
        low, high = WEEKLY_SALARY_RANGES[QUALIFICATION_TIERS[qualification]]
        rows.append(
            {
                "profession": profession,
                "qualification": qualification,
                "weekly_salary": float(fake.random_int(min=low, max=high)),
            }
        )
    salaries = pd.DataFrame(rows, columns=["profession", "qualification", "weekly_salary"])

    addresses = pd.DataFrame(
        {
            "region_id": [fake.random_int(min=1, max=999) for _ in range(num_streets)],
            "street_name": [fake.street_name() for _ in range(num_streets)],
        }
    )

    return ReferenceTables(
        names=names,
        surnames=surnames,
        salaries=salaries,
        addresses=addresses,
    )
