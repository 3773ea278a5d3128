"""
Data loading and caching.

This module loads the CSV exports of the source sheets with caching to
prevent repeated file I/O while a report is being built.
"""

import csv
import logging
from pathlib import Path

from ..config import (
    BANGKIT_FILE,
    BATCH_ROUNDS_FILE,
    DATA_DIR,
    MAJU_FILE,
    MAPPING_FILE,
    UM_FILE,
)

logger = logging.getLogger(__name__)


class DataLoader:
    """
    Loads and caches the sheet exports.

    WHY CACHING: One report reads every sheet once per mentee lookup.
    Loading each export once keeps that to a single read per file.

    WHY LAZY LOADING: Properties only load files when first accessed.
    A mentor dashboard that never needs the UM sheet never reads it.

    DATA SOURCES (CSV exports, one per sheet tab):
    - mapping.csv:       mentor <-> mentee assignments (SOURCE OF TRUTH for who
                         mentors whom)
    - bangkit.csv:       Bangkit session reports
    - laporan_maju.csv:  Maju session reports
    - um.csv:            standalone Upward Mobility forms
    - batch_rounds.csv:  round definitions, the only export with a header row

    Sheet exports are returned as lists of rows (header row first), the
    same shape the sheets API returns as "values". Callers skip the header.

    Usage:
        loader = DataLoader()
        rows = loader.mapping_rows          # [[header...], [row...], ...]
        rounds = loader.batch_round_rows    # [{"batch_name": ..., ...}, ...]
    """

    def __init__(self, data_dir=DATA_DIR):
        self.data_dir = Path(data_dir)
        # Private cache variables - None means "not loaded yet"
        self._mapping_rows = None
        self._bangkit_rows = None
        self._maju_rows = None
        self._um_rows = None
        self._batch_round_rows = None

    def _read_rows(self, filename: str) -> list:
        filepath = self.data_dir / filename
        if not filepath.exists():
            raise FileNotFoundError(f"Sheet export not found: {filepath}")
        with open(filepath, "r", encoding="utf-8-sig", newline="") as f:
            rows = list(csv.reader(f))
        logger.debug("Loaded %d rows from %s", len(rows), filepath)
        return rows

    def _read_records(self, filename: str) -> list:
        filepath = self.data_dir / filename
        if not filepath.exists():
            raise FileNotFoundError(f"Table export not found: {filepath}")
        with open(filepath, "r", encoding="utf-8-sig", newline="") as f:
            records = list(csv.DictReader(f))
        logger.debug("Loaded %d records from %s", len(records), filepath)
        return records

    @property
    def mapping_rows(self) -> list:
        """Mentor/mentee mapping rows. Required for every report."""
        if self._mapping_rows is None:
            self._mapping_rows = self._read_rows(MAPPING_FILE)
        return self._mapping_rows

    @property
    def bangkit_rows(self) -> list:
        """Bangkit session report rows."""
        if self._bangkit_rows is None:
            self._bangkit_rows = self._read_rows(BANGKIT_FILE)
        return self._bangkit_rows

    @property
    def maju_rows(self) -> list:
        """Maju session report rows."""
        if self._maju_rows is None:
            self._maju_rows = self._read_rows(MAJU_FILE)
        return self._maju_rows

    @property
    def um_rows(self) -> list:
        """Standalone Upward Mobility form rows."""
        if self._um_rows is None:
            self._um_rows = self._read_rows(UM_FILE)
        return self._um_rows

    @property
    def batch_round_rows(self) -> list:
        """Round definitions as dicts keyed by the table's header names."""
        if self._batch_round_rows is None:
            self._batch_round_rows = self._read_records(BATCH_ROUNDS_FILE)
        return self._batch_round_rows

    def clear_cache(self):
        """Forget loaded exports so the next access re-reads the files."""
        self._mapping_rows = None
        self._bangkit_rows = None
        self._maju_rows = None
        self._um_rows = None
        self._batch_round_rows = None
