"""
Download CSV exports of the mentoring sheets into the data directory.

Each source sheet tab is fetched through the Google Sheets CSV export
endpoint, so the spreadsheets must be shared as "anyone with the link can
view" (or published). Spreadsheet ids and tab names come from the
environment; a .env file in the project root is loaded first.

    GOOGLE_SHEETS_MAPPING_ID      mapping tab              -> mapping.csv
    GOOGLE_SHEETS_REPORT_ID       Bangkit report tab       -> bangkit.csv
    GOOGLE_SHEETS_MAJU_REPORT_ID  LaporanMaju tab          -> laporan_maju.csv
    UPWARD_MOBILITY_SPREADSHEET_ID  UM tab                 -> um.csv
    BATCH_ROUNDS_SHEET_ID         batch_rounds tab         -> batch_rounds.csv

Sources whose id is not set are skipped; the monitor treats every export
except the mapping as optional.

Usage:
    python scripts/fetch_sheets.py
"""

import logging
import os
import sys
from pathlib import Path
from urllib.parse import quote

import requests
from dotenv import load_dotenv
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

BASE_DIR = Path(__file__).resolve().parent.parent
load_dotenv(BASE_DIR / ".env")

# Imported after load_dotenv so MENTORING_DATA_DIR from .env is honoured
sys.path.insert(0, str(BASE_DIR))
from mentoring.config import (  # noqa: E402
    BANGKIT_FILE,
    BATCH_ROUNDS_FILE,
    DATA_DIR,
    MAJU_FILE,
    MAPPING_FILE,
    UM_FILE,
)

logger = logging.getLogger("fetch_sheets")

# --- CONFIGURATION ---
EXPORT_URL = "https://docs.google.com/spreadsheets/d/{sheet_id}/gviz/tq?tqx=out:csv&sheet={tab}"
REQUEST_TIMEOUT = 60

# (spreadsheet id variable, tab name variable, default tab, output file)
SOURCES = [
    ("GOOGLE_SHEETS_MAPPING_ID", "MAPPING_TAB", "mapping", MAPPING_FILE),
    ("GOOGLE_SHEETS_REPORT_ID", "BANGKIT_TAB", "Bangkit", BANGKIT_FILE),
    ("GOOGLE_SHEETS_MAJU_REPORT_ID", "MAJU_TAB", "LaporanMaju", MAJU_FILE),
    ("UPWARD_MOBILITY_SPREADSHEET_ID", "UPWARD_MOBILITY_TAB", "UM", UM_FILE),
    ("BATCH_ROUNDS_SHEET_ID", "BATCH_ROUNDS_TAB", "batch_rounds", BATCH_ROUNDS_FILE),
]
# ---------------------


def create_retry_session() -> requests.Session:
    """Session that backs off on rate limits and transient server errors."""
    session = requests.Session()
    retries = Retry(
        total=5,
        backoff_factor=2,  # Wait 2s, 4s, 8s, 16s... on 429 errors
        status_forcelist=[429, 500, 502, 503, 504],
        allowed_methods=["GET"],
    )
    adapter = HTTPAdapter(max_retries=retries)
    session.mount("https://", adapter)
    return session


def build_export_url(sheet_id: str, tab: str) -> str:
    return EXPORT_URL.format(sheet_id=quote(sheet_id, safe=""), tab=quote(tab, safe=""))


def fetch_tab(session, sheet_id: str, tab: str) -> str:
    """Download one tab as CSV text. Raises requests.HTTPError on failure."""
    resp = session.get(build_export_url(sheet_id, tab), timeout=REQUEST_TIMEOUT)
    resp.raise_for_status()
    resp.encoding = "utf-8"
    return resp.text


def download_all(session, output_dir: Path, sources=SOURCES, environ=os.environ) -> list:
    """
    Fetch every configured source into output_dir.

    Returns:
        List of file names written. A failing source is logged and skipped
        so one broken share setting doesn't block the others.
    """
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    written = []
    for id_var, tab_var, default_tab, filename in sources:
        sheet_id = environ.get(id_var, "").strip()
        if not sheet_id:
            logger.info("Skipping %s: %s is not set", filename, id_var)
            continue
        tab = environ.get(tab_var, "").strip() or default_tab
        try:
            text = fetch_tab(session, sheet_id, tab)
        except requests.RequestException as e:
            logger.error("Failed to fetch %s (tab %r): %s", filename, tab, e)
            continue
        (output_dir / filename).write_text(text, encoding="utf-8")
        logger.info("Saved %s (%d bytes)", filename, len(text))
        written.append(filename)
    return written


def run():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(message)s")
    logger.info("Saving exports to %s", DATA_DIR)
    written = download_all(create_retry_session(), DATA_DIR)
    if MAPPING_FILE not in written:
        logger.error("Mapping export missing; reports can't be built without it")
        return 1
    logger.info("Done. %d export(s) written", len(written))
    return 0


if __name__ == "__main__":
    sys.exit(run())
