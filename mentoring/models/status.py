"""
Status data models.

Contains the per-mentee status enum, the rollup enum used for batches and
mentors, and the ValidationResult produced by the sequence validator.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class MenteeStatus(Enum):
    """
    Canonical progress status of a mentee.

    ON_TRACK: Current session done and every earlier session present
    DUE_SOON: Current session outstanding, due date within the window
    OVERDUE: Current session outstanding, due date has passed
    PENDING: Current session outstanding with time left (or no due date)
    SEQUENCE_BROKEN: An earlier required session is missing
    NEVER_STARTED: Round 2 or later and session 1 was never completed
    MIA: Any session was reported MIA (absorbing)
    """
    ON_TRACK = "on_track"
    DUE_SOON = "due_soon"
    OVERDUE = "overdue"
    PENDING = "pending"
    SEQUENCE_BROKEN = "sequence_broken"
    NEVER_STARTED = "never_started"
    MIA = "mia"


class RollupStatus(Enum):
    """
    Worst-case status of a group of mentees (batch, mentor, program).

    Declared in increasing severity; RollupStatus.severity relies on it.
    """
    ON_TRACK = "on_track"
    AT_RISK = "at_risk"
    CRITICAL = "critical"

    @property
    def severity(self) -> int:
        return list(RollupStatus).index(self)


@dataclass
class ValidationResult:
    """
    Result of validating one mentee's session history against the current round.

    Example for a mentee in round 3 who skipped session 2:
        status: SEQUENCE_BROKEN
        expected_session: 3
        submitted_sessions: [1, 3]
        missing_sessions: [2]
        next_due_session: 2
        completed_count: 2
    """
    status: MenteeStatus
    expected_session: int
    submitted_sessions: list = field(default_factory=list)  # ascending, no duplicates
    missing_sessions: list = field(default_factory=list)    # subset of [1, expected_session)
    next_due_session: int = 1
    completed_count: int = 0
    days_until_due: Optional[int] = None  # only set when the due-date branch ran
