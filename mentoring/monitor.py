"""
Mentor Monitor - Main Orchestrator.

This module contains the MentorMonitor class that connects the data layer,
the status engines and the presentation layer.

NOTE: Don't run this file directly. Run from the project root:
    python3 -m mentoring
"""

import logging
from datetime import date, datetime

from .data import DataLoader, SheetRowParser
from .engines import (
    RoundResolver,
    SequentialSessionValidator,
    SessionNormalizer,
    StatusAggregator,
    calculate_due_date,
)
from .engines.aggregator import classify_mentee
from .models import MenteeProgress, ProgramType
from .ui import TerminalDisplay

logger = logging.getLogger(__name__)


class MentorMonitor:
    """
    Main interface for the mentoring progress system.

    ═══════════════════════════════════════════════════════════════════════════
    ROLE: ORCHESTRATOR
    ═══════════════════════════════════════════════════════════════════════════

    1. Loads the sheet exports (DataLoader) and parses them (SheetRowParser)
    2. Resolves each batch's current round ONCE per evaluation
    3. Normalizes and validates every mentee's history
    4. Aggregates statuses and hands the data to the display

    `today` is captured once per call and threaded through every engine, so
    two mentees evaluated in the same report never see different dates.

    GRACEFUL DEGRADATION:
    ---------------------
    The mapping export is required: without it there is nobody to report on,
    so FileNotFoundError propagates. Every other source is optional. A missing
    report sheet, UM sheet or round table is logged, recorded in
    `self.errors`, and the report is built from what is available.

    TO CHANGE THE UI:
    -----------------
    Pass a different display object, or call mentor_dashboard() /
    progress_report() directly and render the returned data yourself.

    ═══════════════════════════════════════════════════════════════════════════

    USAGE:
        monitor = MentorMonitor()

        # Print a mentor's dashboard
        monitor.run_mentor_dashboard("mentor@example.com")

        # Or get the data without printing
        report = monitor.progress_report()
        report["summary"].mentors_at_risk
    """

    def __init__(self, loader=None, display=None):
        self.loader = loader or DataLoader()
        self.parser = SheetRowParser()
        self.normalizer = SessionNormalizer()
        self.validator = SequentialSessionValidator()
        self.aggregator = StatusAggregator()
        self.display = display or TerminalDisplay()
        self.errors = []

    def _load_optional(self, label: str, read, parse, default):
        """Read and parse an optional export, recording a gap instead of failing."""
        try:
            rows = read()
        except FileNotFoundError as e:
            logger.warning("%s unavailable: %s", label, e)
            self.errors.append(f"{label} unavailable: {e}")
            return default
        return parse(rows)

    def build_progress(self, today=None, mentor_email: str = None) -> list:
        """
        Evaluate every mapped mentee (or one mentor's mentees).

        Args:
            today: Evaluation date; defaults to date.today(), read once
            mentor_email: When given, only this mentor's mentees are evaluated

        Returns:
            List of MenteeProgress in mapping order
        """
        if isinstance(today, datetime):
            today = today.date()
        today = today or date.today()
        self.errors = []

        # STEP 1: Who mentors whom (required)
        assignments = self.parser.parse_assignments(self.loader.mapping_rows)
        if mentor_email:
            wanted = mentor_email.strip().lower()
            assignments = [a for a in assignments if a.mentor_email == wanted]

        # STEP 2: Optional sources
        round_table = self._load_optional(
            "Round table", lambda: self.loader.batch_round_rows, self.parser.parse_rounds, [])
        bangkit = self._load_optional(
            "Bangkit reports", lambda: self.loader.bangkit_rows, self.parser.parse_bangkit, [])
        maju = self._load_optional(
            "Maju reports", lambda: self.loader.maju_rows, self.parser.parse_maju, [])
        um_submissions = self._load_optional(
            "UM forms", lambda: self.loader.um_rows, self.parser.parse_um_sessions, {})

        # Each program reads only its own report sheet
        records_by_program = {
            ProgramType.BANGKIT: self.parser.group_by_mentee(bangkit),
            ProgramType.MAJU: self.parser.group_by_mentee(maju),
        }

        # STEP 3: Evaluate
        resolver = RoundResolver(round_table)
        rounds = {}
        progress = []
        for assignment in assignments:
            round_key = (assignment.batch, assignment.program)
            if round_key not in rounds:
                rounds[round_key] = self._resolve_round(resolver, assignment, today)
            round_info = rounds[round_key]

            due_date = calculate_due_date(round_info.end_month)
            records = records_by_program[assignment.program].get(assignment.key, [])
            sessions = self.normalizer.normalize(records, assignment.program)
            result = self.validator.validate(
                sessions, round_info.round_number, due_date, today)

            dates = [s.date for s in sessions if s.date is not None]
            progress.append(MenteeProgress(
                assignment=assignment,
                round_info=round_info,
                due_date=due_date,
                result=result,
                um_sessions=frozenset(um_submissions.get(assignment.key, ())),
                last_session_date=max(dates) if dates else None,
            ))

        logger.info("Evaluated %d mentees as of %s", len(progress), today.isoformat())
        return progress

    def _resolve_round(self, resolver: RoundResolver, assignment, today: date):
        info = resolver.resolve_current_round(assignment.batch, today, assignment.program.value)
        if info.is_default:
            logger.warning("No round defined for batch %r, assuming round %d",
                           assignment.batch, info.round_number)
            self.errors.append(
                f"No round defined for batch '{assignment.batch}', assuming round {info.round_number}")
        return info

    def list_mentors(self) -> list:
        """(mentor_email, mentor_name) pairs from the mapping, sorted by name."""
        mentors = {}
        for a in self.parser.parse_assignments(self.loader.mapping_rows):
            mentors.setdefault(a.mentor_email, a.mentor_name)
        return sorted(mentors.items(), key=lambda kv: (kv[1].lower(), kv[0]))

    @staticmethod
    def _by_urgency(progress: list) -> list:
        """Most severe first, then by mentee name."""
        return sorted(progress, key=lambda p: (
            -classify_mentee(p.status).severity,
            p.assignment.mentee_name.lower(),
        ))

    def mentor_dashboard(self, mentor_email: str, today=None) -> dict:
        """
        One mentor's mentees with their statuses.

        Returns:
            Dict with mentor_email, mentees (most urgent first), summary
            (ProgressSummary) and errors
        """
        progress = self.build_progress(today, mentor_email=mentor_email)
        return {
            "mentor_email": mentor_email.strip().lower(),
            "mentees": self._by_urgency(progress),
            "summary": self.aggregator.aggregate(progress),
            "errors": list(self.errors),
        }

    def progress_report(self, today=None) -> dict:
        """
        Program-wide progress report for administrators.

        Returns:
            Dict with mentees, summary (ProgressSummary) and errors
        """
        progress = self.build_progress(today)
        return {
            "mentees": progress,
            "summary": self.aggregator.aggregate(progress),
            "errors": list(self.errors),
        }

    def run_mentor_dashboard(self, mentor_email: str, today=None) -> dict:
        """Build a mentor's dashboard and print it."""
        dashboard = self.mentor_dashboard(mentor_email, today)
        self.display.print_mentor_dashboard(dashboard)
        return dashboard

    def run_progress_report(self, today=None) -> dict:
        """Build the admin progress report and print it."""
        report = self.progress_report(today)
        self.display.print_progress_report(report)
        return report
