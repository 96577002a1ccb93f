"""Domain models for synthetic savings data."""

from savings_gen.models.account import Account
from savings_gen.models.customer import Customer
from savings_gen.models.enums import (
    QUALIFICATION_TIERS,
    AgeBracket,
    EducationTier,
    Gender,
)

__all__ = [
    "Account",
    "AgeBracket",
    "Customer",
    "EducationTier",
    "Gender",
    "QUALIFICATION_TIERS",
]
