"""
Shared pytest fixtures for the mentoring progress test suite.

Builders for sessions and progress records, plus a fixture that writes a
small set of sheet exports into a temporary data directory.
"""

import csv
from datetime import date

import pytest

from mentoring.config import (
    BANGKIT_COLUMNS,
    BANGKIT_FILE,
    BATCH_ROUNDS_FILE,
    MAJU_COLUMNS,
    MAJU_FILE,
    MAPPING_COLUMNS,
    MAPPING_FILE,
)
from mentoring.models import (
    CompletionStatus,
    MenteeAssignment,
    MenteeProgress,
    NormalizedSession,
    ProgramType,
    RoundDefinition,
    RoundInfo,
    ValidationResult,
)


# ---------------------------------------------------------------------------
# Builders
# ---------------------------------------------------------------------------

def make_sessions(*numbers, status=CompletionStatus.COMPLETED, program=ProgramType.BANGKIT):
    """NormalizedSession list for the given session numbers."""
    return [NormalizedSession(n, status, None, program) for n in numbers]


def make_progress(mentee, status, round_number=1, submitted=(), batch="Batch 5 Bangkit",
                  mentor_email="aisyah@example.com", mentor_name="Aisyah Rahman",
                  um_sessions=()):
    """MenteeProgress with a hand-set validation result."""
    assignment = MenteeAssignment(
        batch=batch,
        program=ProgramType.from_batch_name(batch),
        mentor_name=mentor_name,
        mentor_email=mentor_email,
        mentee_name=mentee,
    )
    return MenteeProgress(
        assignment=assignment,
        round_info=RoundInfo(round_number, date(2024, 1, 1), None, batch),
        due_date=None,
        result=ValidationResult(
            status=status,
            expected_session=round_number,
            submitted_sessions=sorted(submitted),
        ),
        um_sessions=frozenset(um_sessions),
    )


def sheet_row(columns: dict, width: int, **values) -> list:
    """Positional sheet row with the named cells filled in."""
    row = [""] * width
    for name, value in values.items():
        row[columns[name]] = value
    return row


def write_csv(path, rows):
    with open(path, "w", encoding="utf-8", newline="") as f:
        csv.writer(f).writerows(rows)


# ---------------------------------------------------------------------------
# Pytest fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def bangkit_rounds():
    """Three back-to-back rounds of Batch 5 Bangkit in 2024."""
    return [
        RoundDefinition("Batch 5 Bangkit", 1, date(2024, 1, 1), date(2024, 3, 31), "2024-03"),
        RoundDefinition("Batch 5 Bangkit", 2, date(2024, 4, 1), date(2024, 6, 30), "2024-06"),
        RoundDefinition("Batch 5 Bangkit", 3, date(2024, 7, 1), date(2024, 8, 31), "2024-08"),
    ]


@pytest.fixture
def data_dir(tmp_path):
    """
    Sheet exports for two mentors, evaluated on 2024-08-26.

    Batch 5 Bangkit (round 3, due 2024-08-31):
        Ali Hassan    sessions 1, 2, 3        -> on_track
        Siti Nor      sessions 1, 3           -> sequence_broken
        Farid Ismail  session 1 MIA           -> mia
        Zara Aziz     sessions 1, 2           -> due_soon
    Batch 7 Maju (no rounds defined, default round 1):
        Mei Ling      session 1 "Tidak MIA"   -> on_track

    No UM export is written.
    """
    mapping_width = max(MAPPING_COLUMNS.values()) + 1
    mapping = [["Batch", "Zon", "Mentor", "Mentor_Email", "Usahawan", "Nama_Syarikat",
                "Alamat", "No_Tel", "Folder_ID", "Emel"]]
    for batch, mentor, email, mentee in [
        ("Batch 5 Bangkit", "Aisyah Rahman", "Aisyah@Example.com ", "Ali Hassan"),
        ("Batch 5 Bangkit", "Aisyah Rahman", "aisyah@example.com", "Siti Nor"),
        ("Batch 5 Bangkit", "Aisyah Rahman", "aisyah@example.com", "Farid Ismail"),
        ("Batch 5 Bangkit", "Aisyah Rahman", "aisyah@example.com", "Zara Aziz"),
        ("Batch 7 Maju", "Daniel Wong", "daniel@example.com", "Mei Ling"),
    ]:
        mapping.append(sheet_row(MAPPING_COLUMNS, mapping_width, batch=batch,
                                 mentor_name=mentor, mentor_email=email, mentee_name=mentee))
    write_csv(tmp_path / MAPPING_FILE, mapping)

    bangkit_width = max(BANGKIT_COLUMNS.values()) + 1
    bangkit = [["Timestamp", "Emel", "Status Sesi", "Sesi Laporan", "Tarikh", "", "", "Nama"]]
    for mentee, status, label, session_date in [
        ("Ali Hassan", "Selesai", "Sesi #1", "2024-02-10"),
        ("Ali Hassan", "Selesai", "Sesi #2", "2024-05-12"),
        ("Ali Hassan", "Selesai", "Sesi #3", "2024-08-05"),
        ("Siti Nor", "Selesai", "Sesi #1", "2024-02-11"),
        ("Siti Nor", "Selesai", "Sesi #3", "2024-08-06"),
        ("Farid Ismail", "MIA", "Sesi #1", "2024-03-01"),
        ("zara aziz", "Selesai", "Sesi #1", "2024-02-20"),
        ("Zara Aziz", "Selesai", "Sesi #2", "2024-05-20"),
    ]:
        bangkit.append(sheet_row(BANGKIT_COLUMNS, bangkit_width, timestamp=session_date,
                                 mentor_email="aisyah@example.com", status=status,
                                 session_label=label, session_date=session_date,
                                 mentee_name=mentee))
    write_csv(tmp_path / BANGKIT_FILE, bangkit)

    maju_width = max(MAJU_COLUMNS.values()) + 1
    maju = [["Timestamp"] + [""] * (maju_width - 1)]
    maju.append(sheet_row(MAJU_COLUMNS, maju_width, timestamp="20/02/2024 10:00:00",
                          mentor_email="daniel@example.com", mentee_name="Mei Ling",
                          session_date="2024-02-19", session_number="1",
                          mia_status="Tidak MIA"))
    write_csv(tmp_path / MAJU_FILE, maju)

    write_csv(tmp_path / BATCH_ROUNDS_FILE, [
        ["batch_name", "round_number", "round_name", "program", "start_month", "end_month",
         "period_label", "notes"],
        ["Batch 5 Bangkit", "1", "Mentoring 1", "Bangkit", "2024-01", "2024-03", "", ""],
        ["Batch 5 Bangkit", "2", "Mentoring 2", "Bangkit", "2024-04", "2024-06", "", ""],
        ["Batch 5 Bangkit", "3", "Mentoring 3", "Bangkit", "2024-07", "2024-08", "", ""],
    ])
    return tmp_path


EVALUATION_DATE = date(2024, 8, 26)
