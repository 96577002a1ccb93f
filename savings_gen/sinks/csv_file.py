"""CSV file sink for exporting tables to flat files."""

import logging
from pathlib import Path

import pandas as pd

from savings_gen.exceptions import SinkError

logger = logging.getLogger(__name__)


class CsvFileSink:
    """Output tables to CSV files, one file per table."""

    def __init__(self, output_dir: str | Path, date_format: str = "%Y-%m-%d") -> None:
        """Initialize CSV file sink.

        Parameters
        ----------
        output_dir : str | Path
            Directory to write CSV files.
        date_format : str
            strftime format for date columns.
        """
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        self.date_format = date_format
        self._counts: dict[str, int] = {}

    def write_batch(self, entity_type: str, table: pd.DataFrame) -> None:
        """Write a table to ``<entity_type>.csv``; missing values are empty cells."""
        file_path = self.output_dir / f"{entity_type}.csv"
        try:
            table.to_csv(file_path, index=False, date_format=self.date_format)
        except OSError as exc:
            raise SinkError(f"Failed to write {file_path}: {exc}") from exc

        self._counts[entity_type] = len(table)
        logger.debug("Wrote %d rows to %s", len(table), file_path)

    def close(self) -> None:
        """Log summary."""
        logger.info("CSV files written to: %s", self.output_dir)
        for entity_type, count in self._counts.items():
            logger.info("  %s: %d rows", entity_type, count)
