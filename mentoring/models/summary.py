"""
Aggregation result data models.

Contains the rollup summaries consumed by dashboards and KPI cards.
"""

from dataclasses import dataclass, field

from .status import RollupStatus


@dataclass
class SessionRequirement:
    """
    Required vs submitted count for one session number within a group.

    Sessions beyond the current round are not required yet (required = 0).
    """
    session_number: int
    required: int
    submitted: int
    pending: int
    pending_mentees: list = field(default_factory=list)


@dataclass
class FormProgress:
    """
    Completion of one reporting requirement (session reports or UM forms).

    required grows with the round number (mentees x current round), so 100%
    means "up to date", not "program finished".
    """
    required: int
    submitted: int
    percent_complete: int
    sessions: list = field(default_factory=list)  # List of SessionRequirement


@dataclass
class GroupSummary:
    """
    Rollup of a group of mentees: one batch of a mentor, a mentor, or a program.

    Example:
        name: "Batch 5 Bangkit"
        mentor_email: "aisyah@example.com"
        rollup_status: AT_RISK (one mentee overdue)
        mentee_count: 4
        status_counts: {"on_track": 3, "overdue": 1, ...}
    """
    name: str
    rollup_status: RollupStatus
    mentee_count: int
    status_counts: dict             # {MenteeStatus.value: count}
    reports: FormProgress
    upward_mobility: FormProgress
    mentor_email: str = ""
    mentor_name: str = ""
    current_round: int = 0          # batch groups only


@dataclass
class ProgressSummary:
    """
    Top-level aggregation result.

    batch_summaries are keyed per mentor and batch, the way the admin
    progress report lists them; program-wide rates default to 100 when
    nothing is required yet.
    """
    batch_summaries: list           # List of GroupSummary
    mentor_summaries: list          # List of GroupSummary
    program_summaries: list         # List of GroupSummary
    overall_status: RollupStatus
    total_mentors: int
    total_mentees: int
    report_completion_rate: int
    um_completion_rate: int
    mentors_critical: int
    mentors_at_risk: int
    mentors_on_track: int
