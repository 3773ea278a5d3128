"""
Configuration constants for the mentoring progress system.

This module contains all configuration values and constants used throughout
the status engine. Centralizing these makes it easy to adjust behavior as
program policies change (new batches, new sheet layouts, new vocabularies).
"""

import os
from pathlib import Path

# =============================================================================
# FILE PATHS
# =============================================================================

# Base data directory (relative to this file's location)
BASE_DIR = Path(__file__).parent.parent
DATA_DIR = Path(os.getenv("MENTORING_DATA_DIR", BASE_DIR / "data"))

# CSV exports of the source sheets / tables, one file per tab
MAPPING_FILE = "mapping.csv"            # mentor <-> mentee assignments
BANGKIT_FILE = "bangkit.csv"            # Bangkit session reports
MAJU_FILE = "laporan_maju.csv"          # Maju session reports
UM_FILE = "um.csv"                      # standalone Upward Mobility forms
BATCH_ROUNDS_FILE = "batch_rounds.csv"  # round definitions (has a header row)


# =============================================================================
# SHEET COLUMN LAYOUTS
# =============================================================================
# Zero-based column indexes. The sheets are positional (no stable headers),
# so every index the parser relies on lives here.

MAPPING_COLUMNS = {
    "batch": 0,           # A
    "mentor_name": 2,     # C
    "mentor_email": 3,    # D
    "mentee_name": 4,     # E
    "business_name": 5,   # F
    "mentee_email": 9,    # J
}

BANGKIT_COLUMNS = {
    "timestamp": 0,       # A
    "mentor_email": 1,    # B
    "status": 2,          # C  "Status Sesi"  (Selesai / MIA)
    "session_label": 3,   # D  "Sesi Laporan" (Sesi #1)
    "session_date": 4,    # E
    "mentee_name": 7,     # H
}

MAJU_COLUMNS = {
    "timestamp": 0,       # A
    "mentor_email": 2,    # C
    "mentee_name": 3,     # D
    "session_date": 8,    # I  TARIKH_SESI
    "session_number": 9,  # J  SESI_NUMBER
    "mia_status": 27,     # AB MIA_STATUS (Tidak MIA / MIA)
}

UM_COLUMNS = {
    "timestamp": 0,       # A
    "mentor_email": 1,    # B
    "batch": 3,           # D
    "session_label": 4,   # E  "Sesi 2"
    "mentee_name": 6,     # G
}

# Header names of the round table export
BATCH_ROUND_FIELDS = {
    "batch_name": "batch_name",
    "round_number": "round_number",
    "round_name": "round_name",
    "program": "program",
    "start_month": "start_month",
    "end_month": "end_month",
    "period_label": "period_label",
    "notes": "notes",
}


# =============================================================================
# STATUS VOCABULARIES
# =============================================================================
# The two programs encode session outcomes with opposite polarity:
#   Bangkit: "Selesai" (done) is success, "MIA" is failure
#   Maju:    "Tidak MIA" (not MIA) is success, "MIA" is failure

BANGKIT_COMPLETED_STATUSES = {"selesai", "completed"}
MAJU_COMPLETED_MARKER = "tidak"
MIA_STATUS_TEXT = "mia"

# Timestamp / date layouts seen in the sheets (tried in order)
DATE_FORMATS = (
    "%Y-%m-%d",
    "%Y-%m-%dT%H:%M:%S",
    "%Y-%m-%d %H:%M:%S",
    "%d/%m/%Y, %H:%M:%S",
    "%d/%m/%Y %H:%M:%S",
    "%d/%m/%Y",
)


# =============================================================================
# ROUND & DUE DATE POLICY
# =============================================================================

# Fail-open round used when a batch has no round definitions
DEFAULT_ROUND_NUMBER = 1

# A mentee is "due soon" when the current session is outstanding and the
# round's due date is at most this many days away
DUE_SOON_WINDOW_DAYS = 7

# Sessions tracked per mentoring cycle in the admin progress breakdown
SESSIONS_PER_CYCLE = 4


# =============================================================================
# COMBINED FORM POLICY
# =============================================================================
# For these program/batch combinations the session report form embeds the
# Upward Mobility section, so a completed session also counts as that
# session's UM form. Each entry is (program, minimum batch number).
#   - Bangkit reports carry UM for every batch.
#   - Maju moved to the combined Maju+UM form starting Batch 7.

COMBINED_FORM_RULES = (
    ("bangkit", 1),
    ("maju", 7),
)


# =============================================================================
# LOGGING
# =============================================================================

LOG_LEVEL = os.getenv("MENTORING_LOG_LEVEL", "WARNING").upper()
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
