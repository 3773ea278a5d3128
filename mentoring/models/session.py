"""
Session data models.

Contains the raw per-program session records (as they come out of the
sheets) and the canonical NormalizedSession every engine works with.
"""

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import ClassVar, Optional


class ProgramType(Enum):
    """
    Mentoring program a record originates from.

    BANGKIT: session reports with a "Status Sesi" column
    MAJU:    session reports with a "MIA_STATUS" column
    """
    BANGKIT = "bangkit"
    MAJU = "maju"

    @classmethod
    def from_batch_name(cls, batch_name: str) -> "ProgramType":
        """Batch names mention BANGKIT explicitly; everything else is Maju."""
        if batch_name and "BANGKIT" in batch_name.upper():
            return cls.BANGKIT
        return cls.MAJU


class CompletionStatus(Enum):
    """
    Semantic outcome of a single session.

    COMPLETED: Session took place and the report was submitted
    MIA: Mentor could not reach the mentee ("Missing In Action")
    OTHER: Anything else (drafts, blanks, unknown vocabulary)
    """
    COMPLETED = "completed"
    MIA = "mia"
    OTHER = "other"


@dataclass
class RawSessionBangkit:
    """
    A Bangkit session report row.

    Bangkit encodes the outcome in "Status Sesi" ("Selesai" or "MIA") and
    the session in a free-text "Sesi Laporan" label such as "Sesi #2".
    """
    program_type: ClassVar[ProgramType] = ProgramType.BANGKIT

    mentor_email: str
    mentee_name: str
    status: str = ""                      # "Status Sesi"
    session_label: str = ""               # "Sesi Laporan"
    session_number: Optional[int] = None  # explicit number, when a source has one
    session_date: str = ""
    timestamp: str = ""


@dataclass
class RawSessionMaju:
    """
    A Maju session report row.

    Maju stores the session number in its own SESI_NUMBER column (as text)
    and the outcome as "Tidak MIA" / "MIA" in MIA_STATUS.
    """
    program_type: ClassVar[ProgramType] = ProgramType.MAJU

    mentor_email: str
    mentee_name: str
    session_number: str = ""              # "SESI_NUMBER"
    mia_status: str = ""                  # "MIA_STATUS"
    session_date: str = ""
    timestamp: str = ""


@dataclass(frozen=True)
class NormalizedSession:
    """
    One mentee's record of a single mentoring session.

    session_number is derived, not authoritative: duplicate submissions can
    resolve to the same number and only presence matters downstream.
    The date is kept for ordering/display only; status logic never reads it.
    """
    session_number: int
    completion_status: CompletionStatus
    date: Optional[date]
    program_type: ProgramType
