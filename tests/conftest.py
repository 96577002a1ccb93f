"""Pytest configuration and fixtures."""

import pandas as pd
import pytest

from savings_gen.config import SavingsGenConfig
from savings_gen.references import ReferenceTables, build_sample_references
from savings_gen.scenarios import SavingsScenario
from savings_gen.store import SavingsDataset


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture(scope="session")
def references() -> ReferenceTables:
    """Offline reference set."""
    return build_sample_references(seed=0)


@pytest.fixture(scope="session")
def dataset(references: ReferenceTables) -> SavingsDataset:
    """Full 200-customer dataset generated with default seeds."""
    return SavingsScenario(config=SavingsGenConfig(), references=references).generate()


@pytest.fixture
def small_salaries() -> pd.DataFrame:
    """Salary reference with two professions per tier."""
    return pd.DataFrame(
        {
            "profession": [
                "Cleaner",
                "Retail Assistant",
                "Electrician",
                "Chef",
                "Engineer",
                "Pharmacist",
            ],
            "qualification": [
                "No tertiary qualification",
                "No tertiary qualification",
                "Certificate III-IV",
                "Diploma",
                "Bachelor degree",
                "Postgraduate degree",
            ],
            "weekly_salary": [1000.0, 1100.0, 1500.0, 1400.0, 2200.0, 2600.0],
        }
    )
