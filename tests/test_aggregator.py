"""
Unit tests for mentoring/engines/aggregator.py - rollups and completion rates.
"""

from conftest import make_progress

from mentoring.engines.aggregator import (
    StatusAggregator,
    _percent,
    batch_number,
    filter_by_status,
    rollup_status,
)
from mentoring.models import MenteeStatus, RollupStatus

S = MenteeStatus


class TestRollupStatus:

    def test_empty_group_is_on_track(self):
        assert rollup_status([]) == RollupStatus.ON_TRACK

    def test_benign_statuses(self):
        assert rollup_status([S.ON_TRACK, S.DUE_SOON, S.PENDING]) == RollupStatus.ON_TRACK

    def test_single_at_risk_taints_group(self):
        for status in (S.OVERDUE, S.SEQUENCE_BROKEN, S.NEVER_STARTED):
            assert rollup_status([S.ON_TRACK, S.ON_TRACK, status]) == RollupStatus.AT_RISK

    def test_mia_is_critical(self):
        assert rollup_status([S.OVERDUE, S.MIA, S.ON_TRACK]) == RollupStatus.CRITICAL


class TestHelpers:

    def test_percent_rounds_half_up(self):
        assert _percent(1, 8) == 13
        assert _percent(2, 3) == 67
        assert _percent(1, 3) == 33
        assert _percent(0, 0) == 0

    def test_batch_number(self):
        assert batch_number("Batch 7 Maju") == 7
        assert batch_number("Bangkit") is None

    def test_filter_by_status(self):
        progress = [
            make_progress("Ali", S.ON_TRACK),
            make_progress("Siti", S.OVERDUE),
            make_progress("Zara", S.OVERDUE),
        ]
        overdue = filter_by_status(progress, S.OVERDUE)
        assert [p.assignment.mentee_name for p in overdue] == ["Siti", "Zara"]
        assert filter_by_status(progress, S.MIA) == []


class TestCombinedForm:

    def setup_method(self):
        self.aggregator = StatusAggregator()

    def test_rules(self):
        assert self.aggregator.uses_combined_form("bangkit", "Batch 1 Bangkit")
        assert self.aggregator.uses_combined_form("maju", "Batch 7 Maju")
        assert self.aggregator.uses_combined_form("maju", "Batch 8 Maju")
        assert not self.aggregator.uses_combined_form("maju", "Batch 6 Maju")
        assert not self.aggregator.uses_combined_form("maju", "Maju")

    def test_report_counts_as_um_for_combined_form(self):
        progress = make_progress("Mei", S.ON_TRACK, 2, submitted=[1, 2], batch="Batch 7 Maju")
        assert self.aggregator.um_sessions(progress) == {1, 2}

    def test_separate_um_form_before_cutover(self):
        progress = make_progress("Raj", S.ON_TRACK, 2, submitted=[1, 2], batch="Batch 6 Maju",
                                 um_sessions=[1])
        assert self.aggregator.um_sessions(progress) == {1}

    def test_custom_rules(self):
        aggregator = StatusAggregator(combined_form_rules=[])
        assert not aggregator.uses_combined_form("bangkit", "Batch 5 Bangkit")


class TestAggregate:

    def setup_method(self):
        self.aggregator = StatusAggregator()

    def test_batch_with_one_overdue_is_at_risk(self):
        progress = [make_progress(name, S.ON_TRACK) for name in ("A", "B", "C")]
        progress.append(make_progress("D", S.OVERDUE))
        summary = self.aggregator.aggregate(progress)
        [batch] = summary.batch_summaries
        assert batch.rollup_status == RollupStatus.AT_RISK
        assert batch.mentee_count == 4
        assert batch.status_counts["on_track"] == 3
        assert batch.status_counts["overdue"] == 1
        assert batch.status_counts["mia"] == 0

    def test_report_progress_and_breakdown(self):
        progress = [
            make_progress("Ali", S.ON_TRACK, 3, submitted=[1, 2, 3]),
            make_progress("Siti", S.PENDING, 3, submitted=[1]),
        ]
        [batch] = self.aggregator.aggregate(progress).batch_summaries
        reports = batch.reports
        assert reports.required == 6
        assert reports.submitted == 4
        assert reports.percent_complete == 67
        session_two = reports.sessions[1]
        assert (session_two.required, session_two.submitted, session_two.pending) == (2, 1, 1)
        assert session_two.pending_mentees == ["Siti"]
        session_four = reports.sessions[3]
        assert (session_four.required, session_four.submitted, session_four.pending) == (0, 0, 0)
        assert len(reports.sessions) == 4

    def test_sessions_beyond_round_are_not_counted(self):
        progress = [make_progress("Ali", S.ON_TRACK, 2, submitted=[1, 2, 3])]
        [batch] = self.aggregator.aggregate(progress).batch_summaries
        assert batch.reports.submitted == 2
        assert batch.reports.percent_complete == 100
        session_three = batch.reports.sessions[2]
        assert session_three.required == 0
        assert session_three.pending == 0

    def test_batches_are_keyed_per_mentor(self):
        progress = [
            make_progress("Ali", S.ON_TRACK),
            make_progress("Mei", S.ON_TRACK, mentor_email="daniel@example.com", mentor_name="Daniel Wong"),
        ]
        summary = self.aggregator.aggregate(progress)
        assert [(b.mentor_name, b.name) for b in summary.batch_summaries] == [
            ("Aisyah Rahman", "Batch 5 Bangkit"),
            ("Daniel Wong", "Batch 5 Bangkit"),
        ]
        assert summary.total_mentors == 2

    def test_mentor_counts(self):
        progress = [
            make_progress("Farid", S.MIA, mentor_email="a@example.com", mentor_name="A"),
            make_progress("Ali", S.ON_TRACK, mentor_email="a@example.com", mentor_name="A"),
            make_progress("Siti", S.OVERDUE, mentor_email="b@example.com", mentor_name="B"),
            make_progress("Mei", S.DUE_SOON, mentor_email="c@example.com", mentor_name="C"),
        ]
        summary = self.aggregator.aggregate(progress)
        assert summary.mentors_critical == 1
        assert summary.mentors_at_risk == 1
        assert summary.mentors_on_track == 1
        assert summary.overall_status == RollupStatus.CRITICAL
        assert summary.total_mentees == 4

    def test_program_summaries(self):
        progress = [
            make_progress("Ali", S.ON_TRACK),
            make_progress("Mei", S.OVERDUE, batch="Batch 7 Maju"),
        ]
        summary = self.aggregator.aggregate(progress)
        assert [(p.name, p.rollup_status) for p in summary.program_summaries] == [
            ("bangkit", RollupStatus.ON_TRACK),
            ("maju", RollupStatus.AT_RISK),
        ]

    def test_nothing_required_counts_as_complete(self):
        summary = self.aggregator.aggregate([make_progress("Ali", S.PENDING, 0)])
        assert summary.report_completion_rate == 100
        assert summary.um_completion_rate == 100
        assert summary.batch_summaries[0].reports.percent_complete == 0

    def test_empty_input(self):
        summary = self.aggregator.aggregate([])
        assert summary.total_mentees == 0
        assert summary.overall_status == RollupStatus.ON_TRACK
        assert summary.batch_summaries == []
        assert summary.report_completion_rate == 100

    def test_um_rate_uses_separate_forms(self):
        progress = [make_progress("Raj", S.ON_TRACK, 2, submitted=[1, 2], batch="Batch 6 Maju",
                                  um_sessions=[1])]
        summary = self.aggregator.aggregate(progress)
        assert summary.report_completion_rate == 100
        assert summary.um_completion_rate == 50
