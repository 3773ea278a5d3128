"""
Mentor Progress Monitoring Package
==================================

Status engine for a two-program mentoring scheme (Bangkit and Maju): works
out which round each batch is in, whether every mentee has submitted their
sessions in order, and rolls the results up for mentors and administrators.

ARCHITECTURE OVERVIEW
---------------------

┌─────────────────────────────────────────────────────────────────────────┐
│                         ALGORITHM LAYER                                  │
│        (Pure logic - returns data structures, NO UI/printing)           │
│                                                                         │
│  ┌─────────────┐  ┌─────────────────┐  ┌─────────────────────────────┐  │
│  │ DataLoader  │  │ SheetRowParser  │  │     SessionNormalizer       │  │
│  │  (I/O)      │  │ (row parsing)   │  │ (Bangkit/Maju -> canonical) │  │
│  └─────────────┘  └─────────────────┘  └─────────────────────────────┘  │
│                                                                         │
│  ┌───────────────┐  ┌──────────────────────────┐  ┌──────────────────┐  │
│  │ RoundResolver │  │SequentialSessionValidator│  │ StatusAggregator │  │
│  │ (round, due)  │  │ (per-mentee status)      │  │ (group rollups)  │  │
│  └───────────────┘  └──────────────────────────┘  └──────────────────┘  │
└─────────────────────────────────────────────────────────────────────────┘
                                   │
                                   │ Returns dataclasses
                                   ▼
┌─────────────────────────────────────────────────────────────────────────┐
│                      PRESENTATION LAYER                                  │
│           (UI only - can be swapped without touching algorithm)         │
│                                                                         │
│  ┌─────────────────────────────────────────────────────────────────┐   │
│  │                    TerminalDisplay                               │   │
│  └─────────────────────────────────────────────────────────────────┘   │
└─────────────────────────────────────────────────────────────────────────┘
                                   │
                                   ▼
┌─────────────────────────────────────────────────────────────────────────┐
│                       MentorMonitor                                      │
│          (Orchestrator - connects algorithm to presentation)            │
└─────────────────────────────────────────────────────────────────────────┘

PACKAGE STRUCTURE
-----------------

mentoring/
├── __init__.py          # This file - main exports
├── __main__.py          # python -m mentoring
├── config.py            # Configuration constants
├── monitor.py           # MentorMonitor orchestrator
├── cli.py               # Command-line interface
│
├── models/              # Data classes and enums
│   ├── session.py       # ProgramType, raw records, NormalizedSession
│   ├── rounds.py        # RoundDefinition, RoundInfo
│   ├── status.py        # MenteeStatus, RollupStatus, ValidationResult
│   ├── progress.py      # MenteeAssignment, MenteeProgress
│   └── summary.py       # FormProgress, GroupSummary, ProgressSummary
│
├── data/                # Data loading and parsing
│   ├── loader.py        # DataLoader
│   └── parser.py        # SheetRowParser
│
├── engines/             # Status engines
│   ├── rounds.py        # RoundResolver, calculate_due_date
│   ├── normalizer.py    # SessionNormalizer
│   ├── sequence.py      # SequentialSessionValidator
│   └── aggregator.py    # StatusAggregator
│
└── ui/                  # User interface implementations
    └── terminal.py      # TerminalDisplay

USAGE
-----

    from mentoring import MentorMonitor

    monitor = MentorMonitor()
    monitor.run_mentor_dashboard("mentor@example.com")

    report = monitor.progress_report()
    print(report["summary"].report_completion_rate)

Using the engines directly:

    from datetime import date
    from mentoring import validate_sequential_sessions

    result = validate_sequential_sessions(sessions, 3, date(2024, 8, 31))

Running from command line:

    python -m mentoring

"""

# Version
__version__ = "1.0.0"

# Main exports
from .monitor import MentorMonitor
from .cli import main

# Model exports (for programmatic use)
from .models import (
    ProgramType,
    CompletionStatus,
    RawSessionBangkit,
    RawSessionMaju,
    NormalizedSession,
    RoundDefinition,
    RoundInfo,
    MenteeStatus,
    RollupStatus,
    ValidationResult,
    MenteeAssignment,
    MenteeProgress,
    SessionRequirement,
    FormProgress,
    GroupSummary,
    ProgressSummary,
)

# Engine exports (for advanced use)
from .engines import (
    RoundResolver,
    calculate_due_date,
    resolve_current_round,
    SessionNormalizer,
    extract_session_number,
    normalize_status,
    SequentialSessionValidator,
    validate_sequential_sessions,
    StatusAggregator,
    filter_by_status,
    rollup_status,
)

# Data exports
from .data import DataLoader, SheetRowParser

# UI exports
from .ui import TerminalDisplay

# Configuration exports
from .config import (
    DATA_DIR,
    DUE_SOON_WINDOW_DAYS,
    SESSIONS_PER_CYCLE,
    COMBINED_FORM_RULES,
)

__all__ = [
    # Version
    "__version__",
    # Main entry points
    "MentorMonitor",
    "main",
    # Models
    "ProgramType",
    "CompletionStatus",
    "RawSessionBangkit",
    "RawSessionMaju",
    "NormalizedSession",
    "RoundDefinition",
    "RoundInfo",
    "MenteeStatus",
    "RollupStatus",
    "ValidationResult",
    "MenteeAssignment",
    "MenteeProgress",
    "SessionRequirement",
    "FormProgress",
    "GroupSummary",
    "ProgressSummary",
    # Engines
    "RoundResolver",
    "calculate_due_date",
    "resolve_current_round",
    "SessionNormalizer",
    "extract_session_number",
    "normalize_status",
    "SequentialSessionValidator",
    "validate_sequential_sessions",
    "StatusAggregator",
    "filter_by_status",
    "rollup_status",
    # Data
    "DataLoader",
    "SheetRowParser",
    # UI
    "TerminalDisplay",
    # Config
    "DATA_DIR",
    "DUE_SOON_WINDOW_DAYS",
    "SESSIONS_PER_CYCLE",
    "COMBINED_FORM_RULES",
]
