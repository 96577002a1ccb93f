"""Savings scenario: customers, one savings account each, cleaned join."""

import logging
from typing import Any

from savings_gen.cleaning import join_and_clean
from savings_gen.config import SavingsGenConfig
from savings_gen.exceptions import InvalidStateError
from savings_gen.generators import AccountGenerator, CustomerGenerator
from savings_gen.references import ReferenceLoader, ReferenceTables
from savings_gen.store import SavingsDataset

logger = logging.getLogger(__name__)


class SavingsScenario:
    """Generate the customer, account and merged tables.

    Stages run strictly in order: reference loading, customer assembly,
    account generation, then join and clean. Each sampling stage uses
    its own seed from ``config.seeds``, so two runs with the same
    configuration and references produce identical tables.
    """

    def __init__(
        self,
        config: SavingsGenConfig | None = None,
        references: ReferenceTables | None = None,
    ) -> None:
        """Initialize savings scenario.

        Parameters
        ----------
        config : SavingsGenConfig | None
            Full configuration. Defaults to ``SavingsGenConfig()``.
        references : ReferenceTables | None
            Pre-loaded reference tables. When ``None`` they are read
            from the sources in ``config.references``.
        """
        self.config = config or SavingsGenConfig()
        self.config.validate()
        self.references = references
        self.dataset: SavingsDataset | None = None

    def load_references(self) -> ReferenceTables:
        """Return the reference tables, loading them on first use."""
        if self.references is None:
            self.references = ReferenceLoader(self.config.references).load_all()
        return self.references

    def generate(self) -> SavingsDataset:
        """Run the full pipeline.

        Returns
        -------
        SavingsDataset
            Customer, account and merged tables.
        """
        generation = self.config.generation
        seeds = self.config.seeds
        logger.info("Starting savings scenario: %d customers", generation.num_customers)

        references = self.load_references()

        customers = CustomerGenerator(
            seeds=seeds,
            generation=generation,
            address_suffix=self.config.references.address_suffix,
        ).generate(references)

        accounts = AccountGenerator(
            seed=seeds.accounts,
            id_seed=seeds.account_ids,
            reference_date=generation.reference_date,
            missing_rate=generation.missing_rate,
            balance_factor=generation.balance_factor,
            interest_rate=generation.interest_rate,
        ).generate(customers)

        merged = join_and_clean(customers, accounts, generation.reference_date)

        dataset = SavingsDataset(customers=customers, accounts=accounts, merged=merged)
        dataset.validate()
        self.dataset = dataset

        logger.info(
            "Generated %d customers, %d accounts, %d merged rows",
            len(customers),
            len(accounts),
            len(merged),
        )
        return dataset

    def export(self, sinks: list[Any]) -> None:
        """Export generated tables to sinks.

        Parameters
        ----------
        sinks : list[Any]
            Sink instances (CsvFileSink, JsonFileSink, ConsoleSink).
        """
        dataset = self._require_dataset()
        for sink in sinks:
            for name, table in dataset.tables().items():
                sink.write_batch(name, table)

        logger.info("Exported savings data to %d sinks", len(sinks))

    def get_customer_view(self, customer_id: int) -> dict[str, Any] | None:
        """Get the merged row of a single customer.

        Returns
        -------
        dict[str, Any] | None
            Column -> value, or None if not found.
        """
        merged = self._require_dataset().merged
        rows = merged[merged["customer_id"] == customer_id]
        if rows.empty:
            return None
        return rows.iloc[0].to_dict()

    def get_summary(self) -> dict[str, Any]:
        """Get summary statistics for the generated data.

        Returns
        -------
        dict[str, Any]
            Summary statistics.
        """
        dataset = self._require_dataset()
        merged = dataset.merged

        return {
            "total_customers": len(dataset.customers),
            "total_accounts": len(dataset.accounts),
            "merged_rows": len(merged),
            "missing_addresses": int(merged["address"].isna().sum()),
            "missing_balances": int(merged["balance"].isna().sum()),
            "missing_interest": int(merged["interest"].isna().sum()),
            "missing_after_imputation": int(
                merged[["cleaned_balance", "cleaned_interest"]].isna().sum().sum()
            ),
            "education_counts": {
                str(tier): int(count)
                for tier, count in merged["education"].value_counts(sort=False).items()
            },
            "avg_monthly_salary": float(merged["monthly_salary"].mean()),
            "avg_balance": float(merged["cleaned_balance"].mean()),
        }

    def _require_dataset(self) -> SavingsDataset:
        if self.dataset is None:
            raise InvalidStateError("generate() must be called first")
        return self.dataset
