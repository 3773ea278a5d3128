"""
Round Resolution and Due Date Calculation.

This module determines which mentoring round a batch is currently in and
converts a round's end month into its due date.
"""

import calendar
import logging
from datetime import date
from typing import Optional

from ..config import DEFAULT_ROUND_NUMBER
from ..models import RoundDefinition, RoundInfo

logger = logging.getLogger(__name__)


def _split_year_month(value) -> Optional[tuple]:
    """Parse the year and month out of "YYYY-MM" or "YYYY-MM-DD"."""
    if not value or not isinstance(value, str):
        return None
    parts = value.strip().split("-")
    try:
        year = int(parts[0])
        month = int(parts[1])
    except (ValueError, IndexError):
        return None
    if year <= 0 or not 1 <= month <= 12:
        return None
    return year, month


def calculate_due_date(end_month) -> Optional[date]:
    """
    Convert a round's end month into its due date.

    The due date is the last calendar day of the end month, with NO grace
    period. Grace handling belongs to callers.

    Args:
        end_month: "YYYY-MM" or "YYYY-MM-DD" (the day part is ignored)

    Returns:
        The last day of that month, or None if year/month can't be parsed
        (callers then treat the mentee as pending)

    Example:
        calculate_due_date("2024-02") -> date(2024, 2, 29)
    """
    parsed = _split_year_month(end_month)
    if parsed is None:
        logger.debug("Invalid end month format: %r", end_month)
        return None
    year, month = parsed
    return date(year, month, calendar.monthrange(year, month)[1])


def parse_month_start(start_month) -> Optional[date]:
    """
    Parse a round's start month.

    "YYYY-MM" starts on the first of the month; "YYYY-MM-DD" keeps its day.
    """
    parsed = _split_year_month(start_month)
    if parsed is None:
        return None
    year, month = parsed
    parts = start_month.strip().split("-")
    if len(parts) >= 3:
        try:
            return date(year, month, int(parts[2][:2]))
        except ValueError:
            return None
    return date(year, month, 1)


# =============================================================================
# FALLBACK CHAIN
# =============================================================================
# Each selector receives the batch's rounds (sorted by start date) and today.
# They are tried in order; the first one to return a round wins.

def _select_active(rounds: list, today: date) -> Optional[RoundDefinition]:
    """The round whose [start, end] interval contains today."""
    for r in rounds:
        if r.start_date <= today <= r.end_date:
            return r
    return None


def _select_upcoming(rounds: list, today: date) -> Optional[RoundDefinition]:
    """The earliest round that hasn't started yet."""
    for r in rounds:
        if r.start_date > today:
            return r
    return None


def _select_latest(rounds: list, today: date) -> Optional[RoundDefinition]:
    """The most recently finished round (degraded fallback)."""
    past = [r for r in rounds if r.end_date < today]
    if not past:
        return None
    return max(past, key=lambda r: r.end_date)


FALLBACK_CHAIN = (
    ("active", _select_active),
    ("upcoming", _select_upcoming),
    ("latest", _select_latest),
)


class RoundResolver:
    """
    Determines the currently active mentoring round for a batch.

    BATCH MATCHING:
    ---------------
    Batch names are written inconsistently across sheets ("Batch 5" in the
    mapping, "Batch 5 Bangkit" in the round table). A round row matches when
    either name contains the other, case-insensitively.

    FAIL-OPEN POLICY:
    -----------------
    A batch with no round rows resolves to round 1 starting today
    (RoundInfo.is_default = True) instead of raising, so one unmapped batch
    never stalls a whole report. The caller is responsible for logging it.

    Usage:
        resolver = RoundResolver(round_table)
        info = resolver.resolve_current_round("Batch 5 Bangkit", date.today())
    """

    def __init__(self, round_table: list):
        self.round_table = list(round_table)

    @staticmethod
    def _names_match(query: str, candidate: str) -> bool:
        q = (query or "").strip().lower()
        c = (candidate or "").strip().lower()
        if not q or not c:
            return False
        return q in c or c in q

    @staticmethod
    def _program_matches(program: Optional[str], row_program: str) -> bool:
        p = (program or "").strip().lower()
        rp = (row_program or "").strip().lower()
        if not p or not rp:
            return True
        return p in rp or rp in p

    def matching_rounds(self, batch_name: str, program: Optional[str] = None) -> list:
        """All round rows for a batch (and program), sorted by start date."""
        rounds = [
            r for r in self.round_table
            if self._names_match(batch_name, r.batch_name)
            and self._program_matches(program, r.program)
        ]
        return sorted(rounds, key=lambda r: r.start_date)

    def resolve_current_round(self, batch_name: str, today: date,
                              program: Optional[str] = None) -> RoundInfo:
        """
        Resolve the current round of a batch.

        Args:
            batch_name: Batch as written in the mapping sheet
            today: Evaluation date (captured once by the caller)
            program: Optional program name to narrow the round rows

        Returns:
            RoundInfo for the active round, else the next upcoming round,
            else the most recent past round, else the default round 1
        """
        rounds = self.matching_rounds(batch_name, program)

        for rule, selector in FALLBACK_CHAIN:
            selected = selector(rounds, today)
            if selected is not None:
                logger.debug("Batch %r resolved to round %d (%s)",
                             batch_name, selected.round_number, rule)
                return RoundInfo(
                    round_number=selected.round_number,
                    start_date=selected.start_date,
                    end_date=selected.end_date,
                    batch_name=selected.batch_name,
                    end_month=selected.end_month,
                    round_name=selected.round_name,
                    period_label=selected.period_label,
                )

        return RoundInfo(
            round_number=DEFAULT_ROUND_NUMBER,
            start_date=today,
            end_date=None,
            batch_name=batch_name or "",
            is_default=True,
        )


def resolve_current_round(batch_name: str, round_table: list, today: date,
                          program: Optional[str] = None) -> RoundInfo:
    """Functional shortcut for RoundResolver(round_table).resolve_current_round()."""
    return RoundResolver(round_table).resolve_current_round(batch_name, today, program)
