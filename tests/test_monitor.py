"""
Integration tests for mentoring/monitor.py - exports in, statuses out.

Uses the `data_dir` fixture from conftest.py; see its docstring for the
scenario.
"""

from datetime import date

import pytest

from conftest import EVALUATION_DATE

from mentoring.config import MAPPING_FILE
from mentoring.data import DataLoader
from mentoring.engines import RoundResolver
from mentoring.models import MenteeStatus, RollupStatus
from mentoring.monitor import MentorMonitor


class RecordingDisplay:
    """Stands in for TerminalDisplay and remembers what it was asked to print."""

    def __init__(self):
        self.calls = []

    def print_mentor_dashboard(self, dashboard):
        self.calls.append(("dashboard", dashboard))

    def print_progress_report(self, report):
        self.calls.append(("report", report))


@pytest.fixture
def monitor(data_dir):
    return MentorMonitor(loader=DataLoader(data_dir), display=RecordingDisplay())


def statuses(progress):
    return {p.assignment.mentee_name: p.status for p in progress}


class TestBuildProgress:

    def test_statuses(self, monitor):
        progress = monitor.build_progress(EVALUATION_DATE)
        assert statuses(progress) == {
            "Ali Hassan": MenteeStatus.ON_TRACK,
            "Siti Nor": MenteeStatus.SEQUENCE_BROKEN,
            "Farid Ismail": MenteeStatus.MIA,
            "Zara Aziz": MenteeStatus.DUE_SOON,
            "Mei Ling": MenteeStatus.ON_TRACK,
        }

    def test_round_and_due_date(self, monitor):
        zara = next(p for p in monitor.build_progress(EVALUATION_DATE)
                    if p.assignment.mentee_name == "Zara Aziz")
        assert zara.current_round == 3
        assert zara.due_date == date(2024, 8, 31)
        assert zara.result.days_until_due == 5
        assert zara.result.next_due_session == 3

    def test_last_session_date(self, monitor):
        ali = next(p for p in monitor.build_progress(EVALUATION_DATE)
                   if p.assignment.mentee_name == "Ali Hassan")
        assert ali.last_session_date == date(2024, 8, 5)

    def test_batch_without_rounds_uses_default(self, monitor):
        mei = next(p for p in monitor.build_progress(EVALUATION_DATE)
                   if p.assignment.mentee_name == "Mei Ling")
        assert mei.round_info.is_default
        assert mei.due_date is None
        assert any("Batch 7 Maju" in e for e in monitor.errors)

    def test_missing_optional_source_is_recorded(self, monitor):
        monitor.build_progress(EVALUATION_DATE)
        assert any(e.startswith("UM forms unavailable") for e in monitor.errors)

    def test_errors_reset_between_runs(self, monitor):
        monitor.build_progress(EVALUATION_DATE)
        count = len(monitor.errors)
        monitor.build_progress(EVALUATION_DATE)
        assert len(monitor.errors) == count

    def test_missing_mapping_raises(self, data_dir):
        (data_dir / MAPPING_FILE).unlink()
        monitor = MentorMonitor(loader=DataLoader(data_dir), display=RecordingDisplay())
        with pytest.raises(FileNotFoundError):
            monitor.build_progress(EVALUATION_DATE)

    def test_round_resolved_once_per_batch(self, monitor, monkeypatch):
        resolved = []
        real_resolve = RoundResolver.resolve_current_round

        def counting(self, batch_name, today, program=None):
            resolved.append(batch_name)
            return real_resolve(self, batch_name, today, program)

        monkeypatch.setattr(RoundResolver, "resolve_current_round", counting)
        monitor.build_progress(EVALUATION_DATE)
        assert sorted(resolved) == ["Batch 5 Bangkit", "Batch 7 Maju"]


class TestReports:

    def test_mentor_dashboard(self, monitor):
        dashboard = monitor.mentor_dashboard(" AISYAH@example.com", EVALUATION_DATE)
        names = [p.assignment.mentee_name for p in dashboard["mentees"]]
        assert names[0] == "Farid Ismail"
        assert sorted(names) == ["Ali Hassan", "Farid Ismail", "Siti Nor", "Zara Aziz"]
        assert dashboard["summary"].overall_status == RollupStatus.CRITICAL

    def test_unknown_mentor_has_empty_dashboard(self, monitor):
        dashboard = monitor.mentor_dashboard("nobody@example.com", EVALUATION_DATE)
        assert dashboard["mentees"] == []
        assert dashboard["summary"].total_mentees == 0

    def test_progress_report(self, monitor):
        summary = monitor.progress_report(EVALUATION_DATE)["summary"]
        assert summary.total_mentees == 5
        assert summary.total_mentors == 2
        assert summary.mentors_critical == 1
        assert summary.mentors_on_track == 1
        # Bangkit 7/12 within round 3, Maju 1/1 within round 1
        assert summary.report_completion_rate == 62
        # Both batches use the combined report form
        assert summary.um_completion_rate == 62

    def test_list_mentors(self, monitor):
        assert monitor.list_mentors() == [
            ("aisyah@example.com", "Aisyah Rahman"),
            ("daniel@example.com", "Daniel Wong"),
        ]

    def test_run_methods_hand_data_to_display(self, monitor):
        monitor.run_mentor_dashboard("aisyah@example.com", EVALUATION_DATE)
        monitor.run_progress_report(EVALUATION_DATE)
        assert [kind for kind, _ in monitor.display.calls] == ["dashboard", "report"]


class TestTerminalOutput:

    def test_progress_report_prints(self, data_dir, capsys):
        MentorMonitor(loader=DataLoader(data_dir)).run_progress_report(EVALUATION_DATE)
        out = capsys.readouterr().out
        assert "MENTOR PROGRESS REPORT" in out
        assert "Batch 5 Bangkit" in out
        assert "UM forms unavailable" in out

    def test_mentor_dashboard_prints(self, data_dir, capsys):
        MentorMonitor(loader=DataLoader(data_dir)).run_mentor_dashboard(
            "aisyah@example.com", EVALUATION_DATE)
        out = capsys.readouterr().out
        assert "MENTOR DASHBOARD: aisyah@example.com" in out
        assert "Farid Ismail" in out
        assert "Sequence broken" in out
