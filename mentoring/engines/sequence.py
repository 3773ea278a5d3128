"""
Sequential Session Validation Engine.

This module decides a mentee's canonical progress status from their session
history, the batch's current round and the round's due date.
"""

import logging
from datetime import date, datetime
from typing import Optional

from ..config import DUE_SOON_WINDOW_DAYS
from ..models import CompletionStatus, MenteeStatus, ValidationResult

logger = logging.getLogger(__name__)


def _as_date(value) -> Optional[date]:
    """Time-zero a datetime; anything that isn't a date becomes None."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return None


class SequentialSessionValidator:
    """
    Validates sequential session completion for a mentee.

    SEQUENCING RULES:
    -----------------
    Round R expects session R, and every session 1..R-1 must already exist.
    Only presence counts: duplicate submissions of a session are collapsed.

    STATUS PRIORITY (evaluated in this exact order):
    ------------------------------------------------
    1. MIA:             any session marked MIA, ever (absorbing state)
    2. Current session done:
         ON_TRACK         no gaps in 1..R-1
         SEQUENCE_BROKEN  gaps in 1..R-1 (catch-up / out-of-order submission)
    3. Current session NOT done:
         NEVER_STARTED    R >= 2 and session 1 missing
         SEQUENCE_BROKEN  other gaps in 1..R-1
         OVERDUE          no gaps, due date passed
         DUE_SOON         no gaps, due within DUE_SOON_WINDOW_DAYS
         PENDING          no gaps, plenty of time or no due date

    A mentee can't be "due soon" on round 3 while round 1 is missing; date
    based states only apply once earlier rounds are complete.

    The validator never raises: a missing due date degrades to PENDING so a
    dashboard badge can always be rendered.
    """

    def __init__(self, due_soon_days: int = DUE_SOON_WINDOW_DAYS):
        self.due_soon_days = due_soon_days

    def validate(self, sessions: list, current_round_number: int,
                 due_date: Optional[date] = None,
                 today: Optional[date] = None) -> ValidationResult:
        """
        Validate a mentee's full normalized session history.

        Args:
            sessions: NormalizedSession list (any order, duplicates allowed)
            current_round_number: The session number expected this round
            due_date: Due date of the current round, or None
            today: Evaluation date. Read once here when not supplied, so all
                comparisons in one pass share the same clock reading.

        Returns:
            ValidationResult
        """
        today = _as_date(today) or date.today()
        due_date = _as_date(due_date)

        # STEP 1: Completed-set extraction
        completed = {
            s.session_number for s in sessions
            if s.completion_status == CompletionStatus.COMPLETED
        }
        submitted = sorted(completed)

        # STEP 2: MIA short-circuit
        if any(s.completion_status == CompletionStatus.MIA for s in sessions):
            return ValidationResult(
                status=MenteeStatus.MIA,
                expected_session=current_round_number,
                submitted_sessions=submitted,
                missing_sessions=[],
                next_due_session=current_round_number,
                completed_count=len(submitted),
            )

        # STEP 3: Gap detection
        missing = [i for i in range(1, current_round_number) if i not in completed]
        current_done = current_round_number in completed

        # STEP 4: Status decision
        days_until_due = None
        if current_done:
            status = MenteeStatus.ON_TRACK if not missing else MenteeStatus.SEQUENCE_BROKEN
        elif current_round_number >= 2 and 1 not in completed:
            status = MenteeStatus.NEVER_STARTED
        elif missing:
            status = MenteeStatus.SEQUENCE_BROKEN
        elif due_date is None:
            status = MenteeStatus.PENDING
        else:
            days_until_due = (due_date - today).days
            status = self._due_status(days_until_due)

        # STEP 5: Next session to chase (fill the earliest gap first)
        if missing:
            next_due = missing[0]
        elif current_done:
            next_due = current_round_number + 1
        else:
            next_due = current_round_number

        logger.debug("Round %d, submitted %s, missing %s -> %s",
                     current_round_number, submitted, missing, status.value)

        # STEP 6: Assemble
        return ValidationResult(
            status=status,
            expected_session=current_round_number,
            submitted_sessions=submitted,
            missing_sessions=missing,
            next_due_session=next_due,
            completed_count=len(submitted),
            days_until_due=days_until_due,
        )

    def _due_status(self, days_until_due: int) -> MenteeStatus:
        if days_until_due < 0:
            return MenteeStatus.OVERDUE
        if days_until_due <= self.due_soon_days:
            return MenteeStatus.DUE_SOON
        return MenteeStatus.PENDING


def validate_sequential_sessions(sessions: list, current_round_number: int,
                                 due_date: Optional[date] = None,
                                 today: Optional[date] = None) -> ValidationResult:
    """Functional shortcut using the default due-soon window."""
    return SequentialSessionValidator().validate(sessions, current_round_number, due_date, today)
