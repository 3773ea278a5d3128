"""
Terminal Display Implementation.

This module handles all console/terminal output formatting.
It's the ONLY place where printing happens in the mentoring package.

To create a different UI (web, PDF, etc.), create a new class with
the same method signatures but different output handling.
"""

from ..models import FormProgress, GroupSummary, MenteeStatus, ProgressSummary, RollupStatus


class TerminalDisplay:
    """
    Pretty terminal output for mentor dashboards and progress reports.

    ═══════════════════════════════════════════════════════════════════════════
    HOW TO REPLACE THIS UI
    ═══════════════════════════════════════════════════════════════════════════

    1. FOR WEB UI:
       Create a WebDisplay class with print_mentor_dashboard() and
       print_progress_report(). Render templates instead of printing.

    2. FOR API RESPONSE:
       Skip the display entirely and serialize the dicts returned by
       MentorMonitor.mentor_dashboard() / progress_report().

    ═══════════════════════════════════════════════════════════════════════════
    """

    # ANSI color codes for terminal styling
    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    RED = "\033[91m"
    CYAN = "\033[96m"
    MAGENTA = "\033[95m"
    WHITE = "\033[97m"

    BG_GREEN = "\033[42m"
    BG_YELLOW = "\033[43m"
    BG_RED = "\033[41m"

    # Badge text and color per mentee status
    STATUS_STYLES = {
        MenteeStatus.ON_TRACK: (GREEN, "✓ On track"),
        MenteeStatus.DUE_SOON: (YELLOW, "⏳ Due soon"),
        MenteeStatus.PENDING: (CYAN, "… Pending"),
        MenteeStatus.OVERDUE: (RED, "✗ Overdue"),
        MenteeStatus.SEQUENCE_BROKEN: (RED, "⚠ Sequence broken"),
        MenteeStatus.NEVER_STARTED: (RED, "⚠ Never started"),
        MenteeStatus.MIA: (MAGENTA, "✗ MIA"),
    }

    ROLLUP_STYLES = {
        RollupStatus.ON_TRACK: (BG_GREEN, "ON TRACK"),
        RollupStatus.AT_RISK: (BG_YELLOW, "AT RISK"),
        RollupStatus.CRITICAL: (BG_RED, "CRITICAL"),
    }

    @classmethod
    def print_header(cls, title: str):
        """Print a major section header with decorative borders."""
        width = 70
        print()
        print(f"{cls.BOLD}{cls.CYAN}{'═' * width}{cls.RESET}")
        print(f"{cls.BOLD}{cls.CYAN}  {title}{cls.RESET}")
        print(f"{cls.BOLD}{cls.CYAN}{'═' * width}{cls.RESET}")

    @classmethod
    def print_subheader(cls, title: str):
        """Print a subsection header."""
        print()
        print(f"{cls.BOLD}{cls.WHITE}  ── {title} ──{cls.RESET}")

    @classmethod
    def status_badge(cls, status: MenteeStatus) -> str:
        """Return a colored badge for a mentee status."""
        color, label = cls.STATUS_STYLES[status]
        return f"{color}{label}{cls.RESET}"

    @classmethod
    def rollup_badge(cls, status: RollupStatus) -> str:
        """Return a colored background badge for a group rollup."""
        background, label = cls.ROLLUP_STYLES[status]
        return f"{background}{cls.WHITE} {label} {cls.RESET}"

    @classmethod
    def print_errors(cls, errors: list):
        """Print data gaps that were tolerated while building the report."""
        if not errors:
            return
        cls.print_subheader("Data Warnings")
        for message in errors:
            print(f"  {cls.YELLOW}! {message}{cls.RESET}")

    @classmethod
    def print_mentee_table(cls, mentees: list):
        """Print one row per mentee: round, status, sessions and next action."""
        if not mentees:
            print(f"\n  {cls.DIM}(no mentees){cls.RESET}")
            return

        print(f"\n  {cls.BOLD}{'MENTEE':<28} {'BATCH':<18} {'RND':<4} {'STATUS':<20} {'SESSIONS':<12} {'NEXT'}{cls.RESET}")
        print(f"  {cls.DIM}{'-' * 94}{cls.RESET}")

        for p in mentees:
            result = p.result
            sessions = ",".join(str(n) for n in result.submitted_sessions) or "-"
            # Pad the plain label, then color it, so columns stay aligned
            color, label = cls.STATUS_STYLES[p.status]
            status_str = f"{color}{label:<20}{cls.RESET}"
            print(f"  {p.assignment.mentee_name[:27]:<28} {p.assignment.batch[:17]:<18} "
                  f"{p.current_round:<4} {status_str} {sessions:<12} {cls._next_action(p)}")
            if result.missing_sessions:
                missing = ", ".join(str(n) for n in result.missing_sessions)
                print(f"  {cls.DIM}  └─ missing session(s): {missing}{cls.RESET}")

    @classmethod
    def _next_action(cls, progress) -> str:
        """Short description of what the mentor should submit next."""
        result = progress.result
        if progress.status == MenteeStatus.MIA:
            return f"{cls.DIM}(MIA){cls.RESET}"
        action = f"Session {result.next_due_session}"
        if result.days_until_due is not None:
            if result.days_until_due < 0:
                action += f" ({-result.days_until_due}d late)"
            else:
                action += f" ({result.days_until_due}d left)"
        elif progress.due_date is not None and progress.status != MenteeStatus.ON_TRACK:
            action += f" (due {progress.due_date.isoformat()})"
        return action

    @classmethod
    def _form_line(cls, label: str, form: FormProgress) -> str:
        if form.percent_complete >= 100:
            color = cls.GREEN
        elif form.percent_complete >= 50:
            color = cls.YELLOW
        else:
            color = cls.RED
        return (f"  {cls.BOLD}{label:<16}{cls.RESET} "
                f"{color}{form.percent_complete:>3}%{cls.RESET} "
                f"({form.submitted}/{form.required})")

    @classmethod
    def print_session_breakdown(cls, form: FormProgress):
        """Per-session required/submitted counts, listing pending mentees."""
        for req in form.sessions:
            if req.required == 0 and req.submitted == 0:
                continue
            line = f"    Session {req.session_number}: {req.submitted}/{req.required}"
            if req.pending:
                names = ", ".join(req.pending_mentees[:5])
                more = f" +{len(req.pending_mentees) - 5}" if len(req.pending_mentees) > 5 else ""
                line += f"  {cls.YELLOW}pending: {names}{more}{cls.RESET}"
            print(line)

    @classmethod
    def print_group_summary(cls, group: GroupSummary, show_sessions: bool = False):
        """Print one batch/mentor/program rollup."""
        title = group.name
        if group.mentor_name and group.mentor_name != group.name:
            title = f"{group.mentor_name} - {group.name}"
        print(f"\n  {cls.rollup_badge(group.rollup_status)} {cls.BOLD}{title}{cls.RESET}")

        details = [f"{group.mentee_count} mentee(s)"]
        if group.current_round:
            details.append(f"round {group.current_round}")
        print(f"  {cls.DIM}{', '.join(details)}{cls.RESET}")

        counts = [
            f"{status.value.replace('_', ' ')}: {group.status_counts[status.value]}"
            for status in MenteeStatus if group.status_counts.get(status.value)
        ]
        if counts:
            print(f"  {cls.DIM}{' | '.join(counts)}{cls.RESET}")

        print(cls._form_line("Reports", group.reports))
        if show_sessions:
            cls.print_session_breakdown(group.reports)
        print(cls._form_line("Upward Mobility", group.upward_mobility))
        if show_sessions:
            cls.print_session_breakdown(group.upward_mobility)

    @classmethod
    def print_overall_summary(cls, summary: ProgressSummary):
        """Print the KPI block at the top of the admin report."""
        cls.print_subheader("Overview")
        print(f"  {cls.BOLD}Overall Status:{cls.RESET} {cls.rollup_badge(summary.overall_status)}")
        print(f"  {cls.BOLD}Mentors:{cls.RESET} {summary.total_mentors}   "
              f"{cls.BOLD}Mentees:{cls.RESET} {summary.total_mentees}")
        print(f"  {cls.BOLD}Report completion:{cls.RESET} {summary.report_completion_rate}%   "
              f"{cls.BOLD}UM completion:{cls.RESET} {summary.um_completion_rate}%")
        print(f"  {cls.RED}Critical: {summary.mentors_critical}{cls.RESET}   "
              f"{cls.YELLOW}At risk: {summary.mentors_at_risk}{cls.RESET}   "
              f"{cls.GREEN}On track: {summary.mentors_on_track}{cls.RESET}")

    @classmethod
    def print_mentor_dashboard(cls, dashboard: dict):
        """Print a mentor's own dashboard."""
        cls.print_header(f"MENTOR DASHBOARD: {dashboard['mentor_email']}")
        cls.print_errors(dashboard.get("errors", []))

        mentees = dashboard["mentees"]
        if not mentees:
            print(f"\n  {cls.YELLOW}No mentees are assigned to this mentor.{cls.RESET}")
            return

        summary = dashboard["summary"]
        print(f"\n  {cls.BOLD}Status:{cls.RESET} {cls.rollup_badge(summary.overall_status)}")
        print(f"  {cls.BOLD}Reports:{cls.RESET} {summary.report_completion_rate}%   "
              f"{cls.BOLD}Upward Mobility:{cls.RESET} {summary.um_completion_rate}%")

        cls.print_subheader("Mentees")
        cls.print_mentee_table(mentees)

        for group in summary.batch_summaries:
            cls.print_subheader(group.name)
            cls.print_group_summary(group, show_sessions=True)

    @classmethod
    def print_progress_report(cls, report: dict):
        """Print the program-wide admin report."""
        summary = report["summary"]
        cls.print_header("MENTOR PROGRESS REPORT")
        cls.print_errors(report.get("errors", []))
        cls.print_overall_summary(summary)

        cls.print_subheader("By Program")
        for group in summary.program_summaries:
            cls.print_group_summary(group)

        cls.print_subheader("By Mentor and Batch")
        for group in summary.batch_summaries:
            cls.print_group_summary(group, show_sessions=group.rollup_status != RollupStatus.ON_TRACK)
