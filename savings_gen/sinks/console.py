"""Console sink for debugging and development."""

import pandas as pd


class ConsoleSink:
    """Print table previews to stdout."""

    def __init__(self, max_records: int | None = 5) -> None:
        """Initialize console sink.

        Parameters
        ----------
        max_records : int | None
            Maximum rows to print per table (None for all).
        """
        self.max_records = max_records
        self._counts: dict[str, int] = {}

    def write_batch(self, entity_type: str, table: pd.DataFrame) -> None:
        """Print a table preview."""
        print(f"\n{'='*60}")
        print(f"Entity: {entity_type} ({len(table)} records)")
        print("=" * 60)

        preview = table.head(self.max_records) if self.max_records else table
        print(preview.to_string(index=False))

        if self.max_records and len(table) > self.max_records:
            print(f"... and {len(table) - self.max_records} more records")

        self._counts[entity_type] = self._counts.get(entity_type, 0) + len(table)

    def close(self) -> None:
        """Print summary."""
        print(f"\n{'='*60}")
        print("Summary")
        print("=" * 60)
        for entity_type, count in self._counts.items():
            print(f"  {entity_type}: {count} records")
