"""
Round data models.

A round is a program-defined time window in which one mentoring session is
expected. Batches run through rounds back to back.
"""

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class RoundDefinition:
    """
    A single row of the round table.

    Example:
        batch_name: "Batch 5 Bangkit"
        round_number: 2
        start_date: 2024-07-01
        end_date: 2024-08-31
        end_month: "2024-08"
    """
    batch_name: str
    round_number: int
    start_date: date
    end_date: date
    end_month: str                  # raw value, the due date is derived from it
    program: str = ""               # optional program filter ("Bangkit", "Maju")
    round_name: str = ""            # e.g. "Mentoring 2"
    period_label: str = ""          # e.g. "Jul - Aug 2024"
    notes: str = ""


@dataclass(frozen=True)
class RoundInfo:
    """
    The round a batch is currently in.

    is_default marks the fail-open sentinel returned when a batch has no
    round definitions at all (round 1 starting today). Callers log it.
    """
    round_number: int
    start_date: date
    end_date: Optional[date]
    batch_name: str
    end_month: str = ""
    round_name: str = ""
    period_label: str = ""
    is_default: bool = False
