"""
Session Normalization.

This module maps the two differently-shaped program records (Bangkit and
Maju) onto the canonical NormalizedSession used by the validator.
"""

import logging
import re
from datetime import date, datetime
from typing import Optional

from ..config import (
    BANGKIT_COMPLETED_STATUSES,
    DATE_FORMATS,
    MAJU_COMPLETED_MARKER,
    MIA_STATUS_TEXT,
)
from ..models import (
    CompletionStatus,
    NormalizedSession,
    ProgramType,
    RawSessionBangkit,
    RawSessionMaju,
)

logger = logging.getLogger(__name__)

SESSION_NUMBER_PATTERN = re.compile(r"\d+")


def extract_session_number(label) -> Optional[int]:
    """
    Extract the first integer in a session label.

    "Sesi #2" -> 2, "Mentoring 3 (ulang)" -> 3, "" -> None
    """
    if label is None:
        return None
    match = SESSION_NUMBER_PATTERN.search(str(label))
    return int(match.group()) if match else None


def parse_session_date(value) -> Optional[date]:
    """
    Parse a sheet date or timestamp into a date.

    Accepts the layouts in DATE_FORMATS (ISO dates, ISO datetimes and the
    Malaysian "DD/MM/YYYY, HH:MM:SS" timestamp). Returns None otherwise.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not value or not isinstance(value, str):
        return None
    text = value.strip()
    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue
    return None


# =============================================================================
# PROGRAM STATUS RULES
# =============================================================================
# The two vocabularies have inverted polarity and must stay separate:
#   Bangkit: "Selesai"/"Completed" is success
#   Maju:    "Tidak MIA" ("not MIA") is success

def _bangkit_status(text: str) -> CompletionStatus:
    if text in BANGKIT_COMPLETED_STATUSES:
        return CompletionStatus.COMPLETED
    if text == MIA_STATUS_TEXT:
        return CompletionStatus.MIA
    return CompletionStatus.OTHER


def _maju_status(text: str) -> CompletionStatus:
    if MAJU_COMPLETED_MARKER in text and text != MIA_STATUS_TEXT:
        return CompletionStatus.COMPLETED
    if text == MIA_STATUS_TEXT:
        return CompletionStatus.MIA
    return CompletionStatus.OTHER


STATUS_RULES = {
    ProgramType.BANGKIT: _bangkit_status,
    ProgramType.MAJU: _maju_status,
}


def normalize_status(raw_status, program_type: ProgramType) -> CompletionStatus:
    """Map a raw status string onto the tri-state CompletionStatus."""
    text = (raw_status or "").strip().lower()
    return STATUS_RULES[program_type](text)


# =============================================================================
# RECORD FIELD EXTRACTION
# =============================================================================
# Each raw shape exposes (status text, explicit number, label, date text).

def _bangkit_fields(record: RawSessionBangkit) -> tuple:
    return record.status, record.session_number, record.session_label, record.session_date


def _maju_fields(record: RawSessionMaju) -> tuple:
    # SESI_NUMBER is text in the sheet; the label rule handles "3" and "Sesi 3"
    return record.mia_status, None, record.session_number, record.session_date


FIELD_EXTRACTORS = {
    RawSessionBangkit: _bangkit_fields,
    RawSessionMaju: _maju_fields,
}


class SessionNormalizer:
    """
    Maps raw per-program session records into NormalizedSession objects.

    SESSION NUMBER PRECEDENCE:
    --------------------------
    1. Explicit numeric field (when the source has one)
    2. First integer in the free-text label ("Sesi #2")
    3. Chronological position among the records (1-based, by session date,
       undated records last, input order breaks ties)

    A malformed row never blocks the rest of the mentee's history: every
    record yields a NormalizedSession, degrading to the fallbacks above and
    a None date.

    The normalizer assumes every record belongs to the mentee under
    evaluation; rows without mentee linkage are dropped before this point.
    """

    def normalize(self, raw_records: list,
                  program_type: Optional[ProgramType] = None) -> list:
        """
        Normalize one mentee's raw records.

        Args:
            raw_records: RawSessionBangkit / RawSessionMaju objects
            program_type: Program whose status rules apply. When None, each
                record's own program tag is used.

        Returns:
            List of NormalizedSession in input order
        """
        extracted = []
        for record in raw_records:
            status_text, explicit, label, date_text = FIELD_EXTRACTORS[type(record)](record)
            extracted.append((
                record,
                status_text,
                explicit,
                label,
                parse_session_date(date_text),
            ))

        positions = self._chronological_positions([e[4] for e in extracted])

        sessions = []
        for index, (record, status_text, explicit, label, session_date) in enumerate(extracted):
            program = program_type or record.program_type
            number = self._session_number(explicit, label)
            if number is None:
                number = positions[index]
                logger.debug("No session number for %s record of %r, using position %d",
                             program.value, record.mentee_name, number)
            sessions.append(NormalizedSession(
                session_number=number,
                completion_status=normalize_status(status_text, program),
                date=session_date,
                program_type=program,
            ))
        return sessions

    @staticmethod
    def _session_number(explicit, label) -> Optional[int]:
        if explicit is not None:
            try:
                number = int(explicit)
            except (TypeError, ValueError):
                number = None
            if number is not None and number >= 0:
                return number
        return extract_session_number(label)

    @staticmethod
    def _chronological_positions(dates: list) -> list:
        """1-based position of each record when sorted by date (None last)."""
        order = sorted(
            range(len(dates)),
            key=lambda i: (dates[i] is None, dates[i] or date.min, i),
        )
        positions = [0] * len(dates)
        for rank, i in enumerate(order, 1):
            positions[i] = rank
        return positions
