"""JSON file sink for exporting tables to files."""

import json
import logging
from pathlib import Path

import pandas as pd

from savings_gen.exceptions import SinkError
from savings_gen.sinks.serialization import table_to_records

logger = logging.getLogger(__name__)


class JsonFileSink:
    """Output tables to JSON files, one array of row objects per table."""

    def __init__(self, output_dir: str | Path, pretty: bool = False) -> None:
        """Initialize JSON file sink.

        Parameters
        ----------
        output_dir : str | Path
            Directory to write JSON files.
        pretty : bool
            Pretty-print JSON output.
        """
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        self.pretty = pretty
        self._counts: dict[str, int] = {}

    def write_batch(self, entity_type: str, table: pd.DataFrame) -> None:
        """Write a table to ``<entity_type>.json``."""
        file_path = self.output_dir / f"{entity_type}.json"
        data = table_to_records(table)

        try:
            with open(file_path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2 if self.pretty else None, ensure_ascii=False)
        except OSError as exc:
            raise SinkError(f"Failed to write {file_path}: {exc}") from exc

        self._counts[entity_type] = len(table)
        logger.debug("Wrote %d records to %s", len(table), file_path)

    def close(self) -> None:
        """Log summary."""
        logger.info("JSON files written to: %s", self.output_dir)
        for entity_type, count in self._counts.items():
            logger.info("  %s: %d records", entity_type, count)
