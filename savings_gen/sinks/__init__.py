"""Output sinks for exporting generated tables."""

from savings_gen.sinks.console import ConsoleSink
from savings_gen.sinks.csv_file import CsvFileSink
from savings_gen.sinks.json_file import JsonFileSink

__all__ = ["ConsoleSink", "CsvFileSink", "JsonFileSink"]
