"""Scenarios for generating synthetic savings data sets."""

from savings_gen.scenarios.savings import SavingsScenario

__all__ = ["SavingsScenario"]
