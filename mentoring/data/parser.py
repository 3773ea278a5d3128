"""
Sheet row parsing.

This module turns positional sheet rows into the typed records the engines
consume. It is the boundary where malformed rows are dropped.
"""

import logging

from ..config import (
    BANGKIT_COLUMNS,
    BATCH_ROUND_FIELDS,
    MAJU_COLUMNS,
    MAPPING_COLUMNS,
    UM_COLUMNS,
)
from ..engines.normalizer import extract_session_number
from ..engines.rounds import calculate_due_date, parse_month_start
from ..models import (
    MenteeAssignment,
    ProgramType,
    RawSessionBangkit,
    RawSessionMaju,
    RoundDefinition,
)

logger = logging.getLogger(__name__)


def _cell(row: list, index: int) -> str:
    """Stripped cell value; short rows (sheets trim trailing blanks) read as ""."""
    if index >= len(row) or row[index] is None:
        return ""
    return str(row[index]).strip()


def mentee_key(mentor_email: str, mentee_name: str) -> tuple:
    """Case-insensitive lookup key joining sessions to assignments."""
    return ((mentor_email or "").strip().lower(), (mentee_name or "").strip().lower())


class SheetRowParser:
    """
    Parses sheet exports into typed records.

    MENTEE LINKAGE:
    ---------------
    Every session row must carry a mentor email and a mentee name; together
    they link the row to a mapping entry. Rows missing either are dropped
    here (and counted in a warning) so the normalizer only ever sees records
    that belong to the mentee under evaluation.

    HEADER ROWS:
    ------------
    Sheet exports start with a header row which is always skipped. The round
    table is read as header-keyed dicts and needs no skipping.
    """

    def parse_assignments(self, rows: list) -> list:
        """Mapping sheet rows -> MenteeAssignment list."""
        cols = MAPPING_COLUMNS
        assignments = []
        dropped = 0
        for row in rows[1:]:
            mentor_email = _cell(row, cols["mentor_email"]).lower()
            mentee_name = _cell(row, cols["mentee_name"])
            if not mentor_email or not mentee_name:
                dropped += 1
                continue
            batch = _cell(row, cols["batch"])
            assignments.append(MenteeAssignment(
                batch=batch,
                program=ProgramType.from_batch_name(batch),
                mentor_name=_cell(row, cols["mentor_name"]),
                mentor_email=mentor_email,
                mentee_name=mentee_name,
                business_name=_cell(row, cols["business_name"]),
                mentee_email=_cell(row, cols["mentee_email"]).lower(),
            ))
        if dropped:
            logger.warning("Dropped %d mapping rows without mentor email or mentee name", dropped)
        return assignments

    def parse_bangkit(self, rows: list) -> list:
        """Bangkit report rows -> RawSessionBangkit list."""
        cols = BANGKIT_COLUMNS
        records = []
        dropped = 0
        for row in rows[1:]:
            mentor_email = _cell(row, cols["mentor_email"]).lower()
            mentee_name = _cell(row, cols["mentee_name"])
            if not mentor_email or not mentee_name:
                dropped += 1
                continue
            records.append(RawSessionBangkit(
                mentor_email=mentor_email,
                mentee_name=mentee_name,
                status=_cell(row, cols["status"]),
                session_label=_cell(row, cols["session_label"]),
                session_date=_cell(row, cols["session_date"]) or _cell(row, cols["timestamp"]),
                timestamp=_cell(row, cols["timestamp"]),
            ))
        if dropped:
            logger.warning("Dropped %d Bangkit rows without mentee linkage", dropped)
        return records

    def parse_maju(self, rows: list) -> list:
        """Maju report rows -> RawSessionMaju list."""
        cols = MAJU_COLUMNS
        records = []
        dropped = 0
        for row in rows[1:]:
            mentor_email = _cell(row, cols["mentor_email"]).lower()
            mentee_name = _cell(row, cols["mentee_name"])
            if not mentor_email or not mentee_name:
                dropped += 1
                continue
            records.append(RawSessionMaju(
                mentor_email=mentor_email,
                mentee_name=mentee_name,
                session_number=_cell(row, cols["session_number"]),
                mia_status=_cell(row, cols["mia_status"]),
                session_date=_cell(row, cols["session_date"]) or _cell(row, cols["timestamp"]),
                timestamp=_cell(row, cols["timestamp"]),
            ))
        if dropped:
            logger.warning("Dropped %d Maju rows without mentee linkage", dropped)
        return records

    def parse_um_sessions(self, rows: list) -> dict:
        """
        UM form rows -> {mentee_key: set of session numbers}.

        Rows without a parseable session number are skipped; a UM form for an
        unknown session can't satisfy any requirement.
        """
        cols = UM_COLUMNS
        submissions = {}
        dropped = 0
        for row in rows[1:]:
            mentor_email = _cell(row, cols["mentor_email"])
            mentee_name = _cell(row, cols["mentee_name"])
            number = extract_session_number(_cell(row, cols["session_label"]))
            if not mentor_email or not mentee_name or number is None:
                dropped += 1
                continue
            submissions.setdefault(mentee_key(mentor_email, mentee_name), set()).add(number)
        if dropped:
            logger.warning("Dropped %d UM rows without mentor, mentee or session", dropped)
        return submissions

    def parse_rounds(self, records: list) -> list:
        """Round table records -> RoundDefinition list."""
        f = BATCH_ROUND_FIELDS
        rounds = []
        for record in records:
            batch_name = (record.get(f["batch_name"]) or "").strip()
            start_month = (record.get(f["start_month"]) or "").strip()
            end_month = (record.get(f["end_month"]) or "").strip()
            start_date = parse_month_start(start_month)
            end_date = calculate_due_date(end_month)
            if not batch_name or start_date is None or end_date is None:
                logger.warning("Skipping round row with missing batch or bad months: %r", record)
                continue
            try:
                round_number = int((record.get(f["round_number"]) or "1").strip())
            except ValueError:
                logger.warning("Bad round number %r for %s, using 1",
                               record.get(f["round_number"]), batch_name)
                round_number = 1
            rounds.append(RoundDefinition(
                batch_name=batch_name,
                round_number=round_number,
                start_date=start_date,
                end_date=end_date,
                end_month=end_month,
                program=(record.get(f["program"]) or "").strip(),
                round_name=(record.get(f["round_name"]) or "").strip(),
                period_label=(record.get(f["period_label"]) or "").strip(),
                notes=(record.get(f["notes"]) or "").strip(),
            ))
        return rounds

    @staticmethod
    def group_by_mentee(records: list) -> dict:
        """Group raw session records by mentee_key, preserving sheet order."""
        grouped = {}
        for record in records:
            grouped.setdefault(mentee_key(record.mentor_email, record.mentee_name), []).append(record)
        return grouped
