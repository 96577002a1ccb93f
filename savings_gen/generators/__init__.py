"""Samplers and table generators."""

from savings_gen.generators.account import AccountGenerator
from savings_gen.generators.address import AddressSampler
from savings_gen.generators.base import IdentifierGenerator
from savings_gen.generators.customer import CustomerGenerator
from savings_gen.generators.demographics import DemographicSampler
from savings_gen.generators.education import EducationSampler
from savings_gen.generators.names import NameGenerator

__all__ = [
    "AccountGenerator",
    "AddressSampler",
    "CustomerGenerator",
    "DemographicSampler",
    "EducationSampler",
    "IdentifierGenerator",
    "NameGenerator",
]
