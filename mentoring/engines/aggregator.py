"""
Status Aggregation Engine.

This module rolls per-mentee statuses up into per-batch, per-mentor and
per-program summaries for dashboards and KPI cards.
"""

import logging
import re
from functools import reduce
from typing import Optional

from ..config import COMBINED_FORM_RULES, SESSIONS_PER_CYCLE
from ..models import (
    FormProgress,
    GroupSummary,
    MenteeStatus,
    ProgressSummary,
    RollupStatus,
    SessionRequirement,
)

logger = logging.getLogger(__name__)

AT_RISK_STATUSES = {
    MenteeStatus.SEQUENCE_BROKEN,
    MenteeStatus.NEVER_STARTED,
    MenteeStatus.OVERDUE,
}

BATCH_NUMBER_PATTERN = re.compile(r"\d+")


def classify_mentee(status: MenteeStatus) -> RollupStatus:
    """Severity class of a single mentee status."""
    if status == MenteeStatus.MIA:
        return RollupStatus.CRITICAL
    if status in AT_RISK_STATUSES:
        return RollupStatus.AT_RISK
    return RollupStatus.ON_TRACK


def _worst(a: RollupStatus, b: RollupStatus) -> RollupStatus:
    return a if a.severity >= b.severity else b


def rollup_status(statuses) -> RollupStatus:
    """
    Worst case propagates up: CRITICAL > AT_RISK > ON_TRACK.

    A single at-risk mentee taints the whole group on purpose, so dashboards
    surface problems instead of averaging them away. An empty group is
    ON_TRACK.
    """
    return reduce(_worst, (classify_mentee(s) for s in statuses), RollupStatus.ON_TRACK)


def filter_by_status(progress_list: list, status: MenteeStatus) -> list:
    """Dashboard filter predicate: mentees whose status equals `status`."""
    return [p for p in progress_list if p.status == status]


def batch_number(batch_name: str) -> Optional[int]:
    """First integer in a batch name ("Batch 7 Maju" -> 7)."""
    match = BATCH_NUMBER_PATTERN.search(batch_name or "")
    return int(match.group()) if match else None


def _percent(submitted: int, required: int) -> int:
    """Half-up rounded percentage; 0 when nothing is required."""
    if required <= 0:
        return 0
    return int(100 * submitted / required + 0.5)


class StatusAggregator:
    """
    Rolls MenteeProgress records up into group summaries.

    PERCENT COMPLETE:
    -----------------
    required = sum of each mentee's current round number, which for a batch
    is mentee_count x current_round. Required work grows as rounds progress,
    so 100% means "up to date right now", not "program finished". Only
    sessions within [1, current round] count as submitted, keeping the
    percentage within 0-100.

    COMBINED FORM:
    --------------
    Some program/batch combinations submit the Upward Mobility section inside
    the session report. For those (see COMBINED_FORM_RULES) every completed
    session also counts as that session's UM form. The thresholds are policy
    data, not code.

    Usage:
        aggregator = StatusAggregator()
        summary = aggregator.aggregate(progress_list)
        summary.batch_summaries[0].rollup_status  # RollupStatus.AT_RISK
    """

    def __init__(self, sessions_per_cycle: int = SESSIONS_PER_CYCLE,
                 combined_form_rules=COMBINED_FORM_RULES):
        self.sessions_per_cycle = sessions_per_cycle
        self.combined_form_rules = tuple(combined_form_rules)

    def uses_combined_form(self, program: str, batch_name: str) -> bool:
        """True when a session report also satisfies the UM form requirement."""
        number = batch_number(batch_name)
        if number is None:
            return False
        program = (program or "").lower()
        return any(
            program == rule_program and number >= min_batch
            for rule_program, min_batch in self.combined_form_rules
        )

    def report_sessions(self, progress) -> set:
        return set(progress.result.submitted_sessions)

    def um_sessions(self, progress) -> set:
        """UM sessions, including those covered by a combined-form report."""
        sessions = set(progress.um_sessions)
        assignment = progress.assignment
        if self.uses_combined_form(assignment.program.value, assignment.batch):
            sessions |= self.report_sessions(progress)
        return sessions

    def aggregate(self, progress_list: list) -> ProgressSummary:
        """
        Aggregate evaluated mentees.

        Args:
            progress_list: MenteeProgress records (all evaluations finished)

        Returns:
            ProgressSummary with batch, mentor and program summaries
        """
        by_batch = {}
        by_mentor = {}
        by_program = {}
        for p in progress_list:
            a = p.assignment
            by_batch.setdefault((a.mentor_email, a.batch), []).append(p)
            by_mentor.setdefault(a.mentor_email, []).append(p)
            by_program.setdefault(a.program, []).append(p)

        batch_summaries = []
        for (mentor_email, batch), members in by_batch.items():
            summary = self._summarize(batch, members)
            summary.mentor_email = mentor_email
            summary.mentor_name = members[0].assignment.mentor_name
            summary.current_round = members[0].current_round
            batch_summaries.append(summary)
        batch_summaries.sort(key=lambda s: (s.mentor_name.lower(), s.mentor_email, s.name))

        mentor_summaries = []
        for mentor_email, members in by_mentor.items():
            mentor_name = members[0].assignment.mentor_name
            summary = self._summarize(mentor_name or mentor_email, members)
            summary.mentor_email = mentor_email
            summary.mentor_name = mentor_name
            mentor_summaries.append(summary)
        mentor_summaries.sort(key=lambda s: (s.mentor_name.lower(), s.mentor_email))

        program_summaries = [
            self._summarize(program.value, members)
            for program, members in sorted(by_program.items(), key=lambda kv: kv[0].value)
        ]

        reports_required = sum(s.reports.required for s in mentor_summaries)
        reports_submitted = sum(s.reports.submitted for s in mentor_summaries)
        um_required = sum(s.upward_mobility.required for s in mentor_summaries)
        um_submitted = sum(s.upward_mobility.submitted for s in mentor_summaries)

        logger.debug("Aggregated %d mentees into %d batches, %d mentors",
                     len(progress_list), len(batch_summaries), len(mentor_summaries))

        return ProgressSummary(
            batch_summaries=batch_summaries,
            mentor_summaries=mentor_summaries,
            program_summaries=program_summaries,
            overall_status=rollup_status(p.status for p in progress_list),
            total_mentors=len(mentor_summaries),
            total_mentees=len(progress_list),
            # Nothing required yet counts as fully complete at program level
            report_completion_rate=_percent(reports_submitted, reports_required) if reports_required else 100,
            um_completion_rate=_percent(um_submitted, um_required) if um_required else 100,
            mentors_critical=sum(1 for s in mentor_summaries if s.rollup_status == RollupStatus.CRITICAL),
            mentors_at_risk=sum(1 for s in mentor_summaries if s.rollup_status == RollupStatus.AT_RISK),
            mentors_on_track=sum(1 for s in mentor_summaries if s.rollup_status == RollupStatus.ON_TRACK),
        )

    def _summarize(self, name: str, members: list) -> GroupSummary:
        status_counts = {status.value: 0 for status in MenteeStatus}
        for p in members:
            status_counts[p.status.value] += 1

        return GroupSummary(
            name=name,
            rollup_status=rollup_status(p.status for p in members),
            mentee_count=len(members),
            status_counts=status_counts,
            reports=self._form_progress(members, self.report_sessions),
            upward_mobility=self._form_progress(members, self.um_sessions),
        )

    def _form_progress(self, members: list, sessions_of) -> FormProgress:
        """
        Required vs submitted for one form type.

        For session n: required when n <= the mentee's current round (future
        sessions aren't required yet), pending mentees listed by name.
        """
        member_sessions = [(p, sessions_of(p)) for p in members]

        required = sum(max(p.current_round, 0) for p in members)
        submitted = sum(
            sum(1 for n in sessions if 1 <= n <= p.current_round)
            for p, sessions in member_sessions
        )

        breakdown = []
        for n in range(1, self.sessions_per_cycle + 1):
            session_required = sum(1 for p in members if n <= p.current_round)
            session_submitted = sum(1 for _, sessions in member_sessions if n in sessions)
            pending_mentees = [
                p.assignment.mentee_name for p, sessions in member_sessions
                if n <= p.current_round and n not in sessions
            ]
            breakdown.append(SessionRequirement(
                session_number=n,
                required=session_required,
                submitted=session_submitted,
                pending=max(0, session_required - session_submitted),
                pending_mentees=pending_mentees,
            ))

        return FormProgress(
            required=required,
            submitted=submitted,
            percent_complete=_percent(submitted, required),
            sessions=breakdown,
        )
