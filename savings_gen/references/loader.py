"""Loading of the external reference tables.

Four tables feed the generators:

- ``names``: gender-tagged first names (``gender`` in {girl, boy}, ``first_name``)
- ``surnames``: ranked surnames (``rank``, ``surname``), usually scraped from
  the first HTML table of a web page
- ``salaries``: average weekly salary per profession and qualification
  (``profession``, ``qualification``, ``weekly_salary``)
- ``addresses``: street names per region (``region_id``, ``street_name``),
  usually fetched as a remote CSV file

Every read is a single attempt. Missing files, HTTP failures, timeouts and
unparsable content raise :class:`SourceUnavailableError`; a table lacking a
required column raises :class:`SchemaMismatchError`.
"""

from __future__ import annotations

import io
import logging
import zipfile
from dataclasses import dataclass
from pathlib import Path
from typing import Callable

import pandas as pd
import requests
from openpyxl.utils.exceptions import InvalidFileException

from savings_gen.config import ReferenceConfig
from savings_gen.exceptions import SchemaMismatchError, SourceUnavailableError
from savings_gen.models.enums import GENDER_TAGS, QUALIFICATION_TIERS

logger = logging.getLogger(__name__)

NAMES_COLUMNS = ("gender", "first_name")
SURNAMES_COLUMNS = ("rank", "surname")
SALARIES_COLUMNS = ("profession", "qualification", "weekly_salary")
ADDRESSES_COLUMNS = ("region_id", "street_name")


@dataclass
class ReferenceTables:
    """The four reference tables consumed by the generators."""

    names: pd.DataFrame
    surnames: pd.DataFrame
    salaries: pd.DataFrame
    addresses: pd.DataFrame


def is_url(source: str | Path) -> bool:
    """Whether ``source`` is an HTTP(S) URL."""
    return str(source).lower().startswith(("http://", "https://"))


def fetch_text(url: str, timeout: float) -> str:
    """Fetch ``url`` once and return the response body.

    Raises
    ------
    SourceUnavailableError
        On connection errors, timeouts or non-2xx responses.
    """
    logger.info("Fetching %s", url)
    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as exc:
        raise SourceUnavailableError(f"Failed to fetch {url}: {exc}") from exc
    return response.text


def read_first_html_table(html: str | Path) -> pd.DataFrame:
    """Parse the first ``<table>`` of an HTML document."""
    source = io.StringIO(html) if isinstance(html, str) else html
    try:
        tables = pd.read_html(source)
    except (ValueError, ImportError) as exc:
        raise SourceUnavailableError(f"No parsable HTML table: {exc}") from exc
    return tables[0]


def _read_local(path: Path) -> pd.DataFrame:
    """Read a local tabular file, choosing the reader from its suffix."""
    if not path.exists():
        raise SourceUnavailableError(f"Reference file not found: {path}")

    suffix = path.suffix.lower()
    reader: Callable[[Path], pd.DataFrame]
    if suffix in (".xlsx", ".xls"):
        reader = pd.read_excel
    elif suffix in (".html", ".htm"):
        reader = read_first_html_table
    else:
        reader = pd.read_csv

    logger.info("Reading %s", path)
    try:
        return reader(path)
    except SourceUnavailableError:
        raise
    except (
        ValueError,
        OSError,
        ImportError,
        zipfile.BadZipFile,
        InvalidFileException,
    ) as exc:
        raise SourceUnavailableError(f"Could not read {path}: {exc}") from exc


def _normalize_columns(
    frame: pd.DataFrame,
    required: tuple[str, ...],
    rename: dict[str, str],
    source: str,
) -> pd.DataFrame:
    """Apply the rename map, canonicalize headers and keep ``required``."""
    frame = frame.rename(columns=rename)
    if isinstance(frame.columns, pd.MultiIndex):
        frame.columns = frame.columns.get_level_values(-1)
    frame.columns = [str(c).strip().lower().replace(" ", "_") for c in frame.columns]

    missing = [column for column in required if column not in frame.columns]
    if missing:
        raise SchemaMismatchError(
            f"{source} is missing column(s) {missing}; found {list(frame.columns)}"
        )

    frame = frame[list(required)].dropna()
    if frame.empty:
        raise SourceUnavailableError(f"{source} contains no usable rows")
    return frame.reset_index(drop=True)


def _parse_money(values: pd.Series) -> pd.Series:
    """Convert ``"$1,234"``-style strings to floats."""
    if not pd.api.types.is_numeric_dtype(values):
        values = values.astype(str).str.replace(r"[$,\s]", "", regex=True)
    return pd.to_numeric(values, errors="coerce")


class ReferenceLoader:
    """Load and validate the reference tables.

    Parameters
    ----------
    config : ReferenceConfig
        Source locations, fetch timeout and column rename maps.
    """

    def __init__(self, config: ReferenceConfig) -> None:
        self.config = config

    def load_all(self) -> ReferenceTables:
        """Load all four reference tables.

        Returns
        -------
        ReferenceTables
            Validated reference tables.
        """
        cfg = self.config
        if not cfg.is_complete:
            raise SourceUnavailableError(
                "Reference sources are not fully configured "
                "(names_path, surnames_source, salaries_path, addresses_source)"
            )
        return ReferenceTables(
            names=self.load_names(cfg.names_path),
            surnames=self.load_surnames(cfg.surnames_source),
            salaries=self.load_salaries(cfg.salaries_path),
            addresses=self.load_addresses(cfg.addresses_source),
        )

    def load_names(self, path: str | Path) -> pd.DataFrame:
        """Load the gender-tagged first-name list."""
        frame = _normalize_columns(
            _read_local(Path(path)),
            NAMES_COLUMNS,
            self.config.names_columns,
            "names reference",
        )
        frame["gender"] = frame["gender"].astype(str).str.strip().str.lower()
        frame["first_name"] = frame["first_name"].astype(str).str.strip()

        unknown = sorted(set(frame["gender"]) - set(GENDER_TAGS))
        if unknown:
            raise SchemaMismatchError(
                f"names reference has unknown gender tag(s) {unknown}; "
                f"expected {list(GENDER_TAGS)}"
            )

        logger.info("Loaded %d first names", len(frame))
        return frame

    def load_surnames(self, source: str | Path) -> pd.DataFrame:
        """Load the ranked surname list from a web page or local file."""
        if is_url(source):
            raw = read_first_html_table(fetch_text(str(source), self.config.timeout_seconds))
        else:
            raw = _read_local(Path(source))

        frame = _normalize_columns(
            raw, SURNAMES_COLUMNS, self.config.surnames_columns, "surnames reference"
        )
        frame["rank"] = pd.to_numeric(frame["rank"], errors="coerce")
        frame["surname"] = frame["surname"].astype(str).str.strip()
        frame = frame.dropna().sort_values("rank", kind="stable").reset_index(drop=True)

        logger.info("Loaded %d surnames", len(frame))
        return frame

    def load_salaries(self, path: str | Path) -> pd.DataFrame:
        """Load the profession/qualification salary table.

        Rows whose qualification label has no education tier are dropped
        with a warning.
        """
        frame = _normalize_columns(
            _read_local(Path(path)),
            SALARIES_COLUMNS,
            self.config.salaries_columns,
            "salaries reference",
        )
        frame["profession"] = frame["profession"].astype(str).str.strip()
        frame["qualification"] = frame["qualification"].astype(str).str.strip()
        frame["weekly_salary"] = _parse_money(frame["weekly_salary"])
        frame = frame.dropna(subset=["weekly_salary"])

        known = frame["qualification"].isin(list(QUALIFICATION_TIERS))
        if not known.all():
            logger.warning(
                "Dropping %d salary rows with unmapped qualification labels: %s",
                int((~known).sum()),
                sorted(frame.loc[~known, "qualification"].unique()),
            )
        frame = frame[known].reset_index(drop=True)
        if frame.empty:
            raise SchemaMismatchError("salaries reference has no mappable qualification labels")

        logger.info("Loaded %d profession salary rows", len(frame))
        return frame

    def load_addresses(self, source: str | Path) -> pd.DataFrame:
        """Load the street reference from a remote CSV file or local file."""
        if is_url(source):
            text = fetch_text(str(source), self.config.timeout_seconds)
            try:
                raw = pd.read_csv(io.StringIO(text))
            except ValueError as exc:
                raise SourceUnavailableError(f"Could not parse {source}: {exc}") from exc
        else:
            raw = _read_local(Path(source))

        frame = _normalize_columns(
            raw, ADDRESSES_COLUMNS, self.config.addresses_columns, "addresses reference"
        )
        frame["street_name"] = frame["street_name"].astype(str).str.strip()

        logger.info("Loaded %d street addresses", len(frame))
        return frame
