"""
Status engines.

This package contains the pure logic of the mentoring progress system:
round resolution, session normalization, sequence validation and
aggregation. Nothing here performs I/O.
"""

from .rounds import RoundResolver, calculate_due_date, resolve_current_round
from .normalizer import SessionNormalizer, extract_session_number, normalize_status
from .sequence import SequentialSessionValidator, validate_sequential_sessions
from .aggregator import StatusAggregator, filter_by_status, rollup_status

__all__ = [
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
]
