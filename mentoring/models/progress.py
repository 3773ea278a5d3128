"""
Mentee progress data models.

These tie a mentor/mentee assignment to its evaluated status so the
aggregation and presentation layers have everything in one place.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from .rounds import RoundInfo
from .session import ProgramType
from .status import MenteeStatus, ValidationResult


@dataclass(frozen=True)
class MenteeAssignment:
    """A mentor/mentee pairing from the mapping sheet."""
    batch: str
    program: ProgramType
    mentor_name: str
    mentor_email: str                      # lower-cased, stripped
    mentee_name: str
    business_name: str = ""
    mentee_email: str = ""

    @property
    def key(self) -> tuple:
        """Lookup key shared with session rows: (mentor email, mentee name)."""
        return (self.mentor_email, self.mentee_name.lower())


@dataclass
class MenteeProgress:
    """
    Everything known about one mentee after evaluation.

    um_sessions holds the session numbers of standalone Upward Mobility forms;
    combined-form rules may add report sessions on top during aggregation.
    """
    assignment: MenteeAssignment
    round_info: RoundInfo
    due_date: Optional[date]
    result: ValidationResult
    um_sessions: frozenset = field(default_factory=frozenset)
    last_session_date: Optional[date] = None

    @property
    def status(self) -> MenteeStatus:
        return self.result.status

    @property
    def current_round(self) -> int:
        return self.round_info.round_number
