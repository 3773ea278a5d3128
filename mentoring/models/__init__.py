"""
Data models for the mentoring progress system.

This package contains all dataclasses and enums used throughout the system.
These serve as "contracts" between different parts of the system.
"""

from .session import (
    ProgramType,
    CompletionStatus,
    RawSessionBangkit,
    RawSessionMaju,
    NormalizedSession,
)
from .rounds import RoundDefinition, RoundInfo
from .status import MenteeStatus, RollupStatus, ValidationResult
from .progress import MenteeAssignment, MenteeProgress
from .summary import SessionRequirement, FormProgress, GroupSummary, ProgressSummary

__all__ = [
    # Session models
    "ProgramType",
    "CompletionStatus",
    "RawSessionBangkit",
    "RawSessionMaju",
    "NormalizedSession",
    # Rounds
    "RoundDefinition",
    "RoundInfo",
    # Status
    "MenteeStatus",
    "RollupStatus",
    "ValidationResult",
    # Progress
    "MenteeAssignment",
    "MenteeProgress",
    # Summaries
    "SessionRequirement",
    "FormProgress",
    "GroupSummary",
    "ProgressSummary",
]
