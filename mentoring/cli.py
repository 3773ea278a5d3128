"""
Command-Line Interface for the Mentoring Progress System.

This module provides the interactive CLI. It handles user input and
hands the work to MentorMonitor.

MODES:
------
1. MENTOR DASHBOARD: One mentor's mentees, statuses and next sessions
2. PROGRESS REPORT: Program-wide rollup for administrators

NOTE: Don't run this file directly. Run from the project root:
    python3 -m mentoring
or use the installed `mentor-progress` command.
"""

import logging
from datetime import date, datetime

from .config import DATA_DIR, LOG_FORMAT, LOG_LEVEL
from .monitor import MentorMonitor
from .ui import TerminalDisplay

logger = logging.getLogger(__name__)


def _ask_evaluation_date() -> date:
    """
    Ask which date to evaluate as of.

    Useful for checking what the dashboard looked like at a round's due
    date. Empty or invalid input falls back to today.
    """
    try:
        text = input("  Evaluate as of (YYYY-MM-DD, Enter for today): ").strip()
    except EOFError:
        text = ""
    if not text:
        return date.today()
    try:
        return datetime.strptime(text, "%Y-%m-%d").date()
    except ValueError:
        print(f"  {TerminalDisplay.YELLOW}Invalid date. Using today.{TerminalDisplay.RESET}")
        return date.today()


def _select_mentor(monitor: MentorMonitor) -> str:
    """
    Pick a mentor interactively.

    Accepts a list number or an email typed directly.

    Returns:
        Mentor email, or "" when the mapping has no mentors
    """
    mentors = monitor.list_mentors()
    if not mentors:
        return ""

    print(f"\n{TerminalDisplay.BOLD}Select a mentor:{TerminalDisplay.RESET}")
    for i, (email, name) in enumerate(mentors, 1):
        print(f"    {i}. {name or email} {TerminalDisplay.DIM}<{email}>{TerminalDisplay.RESET}")

    try:
        choice = input(f"\n  Enter number (1-{len(mentors)}) or email: ").strip()
        if "@" in choice:
            return choice
        return mentors[int(choice) - 1][0]
    except (ValueError, IndexError, EOFError):
        email = mentors[0][0]
        print(f"  → Using default: {email}")
        return email


def main():
    """
    Command-line interface for the mentoring progress system.

    ═══════════════════════════════════════════════════════════════════════════
    AVAILABLE MODES
    ═══════════════════════════════════════════════════════════════════════════

    1. MENTOR DASHBOARD:
       Lists a mentor's mentees with their status badge, submitted sessions
       and the next session to chase, plus per-batch completion.

    2. PROGRESS REPORT:
       Program-wide KPIs (completion rates, mentors at risk), then a rollup
       per program and per mentor batch.

    ═══════════════════════════════════════════════════════════════════════════
    """
    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)

    monitor = MentorMonitor()

    print(f"\n{TerminalDisplay.BOLD}{TerminalDisplay.CYAN}")
    print("╔══════════════════════════════════════════════════════════════════╗")
    print("║         MENTOR PROGRESS MONITOR                                  ║")
    print("║         Bangkit & Maju session tracking                          ║")
    print("╠══════════════════════════════════════════════════════════════════╣")
    print("║                                                                  ║")
    print("║  1. 👤 MENTOR DASHBOARD - One mentor's mentees                  ║")
    print("║  2. 📊 PROGRESS REPORT  - Program-wide rollup                   ║")
    print("║                                                                  ║")
    print("╚══════════════════════════════════════════════════════════════════╝")
    print(f"{TerminalDisplay.RESET}")
    print(f"  {TerminalDisplay.DIM}Data directory: {DATA_DIR}{TerminalDisplay.RESET}")

    try:
        mode = input(f"{TerminalDisplay.BOLD}Select mode (1 or 2): {TerminalDisplay.RESET}").strip()
    except EOFError:
        mode = "2"

    try:
        if mode == "1":
            mentor_email = _select_mentor(monitor)
            if not mentor_email:
                print(f"\n  {TerminalDisplay.YELLOW}The mapping has no mentors.{TerminalDisplay.RESET}")
                return
            today = _ask_evaluation_date()
            monitor.run_mentor_dashboard(mentor_email, today)
        else:
            today = _ask_evaluation_date()
            monitor.run_progress_report(today)
    except FileNotFoundError as e:
        logger.error("Cannot build report: %s", e)
        print(f"\n  {TerminalDisplay.RED}Error: {e}{TerminalDisplay.RESET}")
        print(f"  {TerminalDisplay.DIM}Run scripts/fetch_sheets.py or set MENTORING_DATA_DIR.{TerminalDisplay.RESET}")
        raise SystemExit(1)


if __name__ == "__main__":
    main()
