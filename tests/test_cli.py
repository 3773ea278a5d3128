"""
Tests for mentoring/cli.py input helpers. input() is monkeypatched.
"""

from datetime import date

from mentoring import cli


def answer(monkeypatch, text):
    monkeypatch.setattr("builtins.input", lambda prompt="": text)


def no_answer(monkeypatch):
    def raise_eof(prompt=""):
        raise EOFError
    monkeypatch.setattr("builtins.input", raise_eof)


class FakeMonitor:

    def list_mentors(self):
        return [("aisyah@example.com", "Aisyah Rahman"), ("daniel@example.com", "Daniel Wong")]


class TestEvaluationDate:

    def test_explicit_date(self, monkeypatch):
        answer(monkeypatch, "2024-08-26")
        assert cli._ask_evaluation_date() == date(2024, 8, 26)

    def test_blank_is_today(self, monkeypatch):
        answer(monkeypatch, "")
        assert cli._ask_evaluation_date() == date.today()

    def test_invalid_is_today(self, monkeypatch):
        answer(monkeypatch, "26/08/2024")
        assert cli._ask_evaluation_date() == date.today()

    def test_eof_is_today(self, monkeypatch):
        no_answer(monkeypatch)
        assert cli._ask_evaluation_date() == date.today()


class TestSelectMentor:

    def test_by_number(self, monkeypatch):
        answer(monkeypatch, "2")
        assert cli._select_mentor(FakeMonitor()) == "daniel@example.com"

    def test_by_email(self, monkeypatch):
        answer(monkeypatch, "someone@example.com")
        assert cli._select_mentor(FakeMonitor()) == "someone@example.com"

    def test_eof_uses_first_mentor(self, monkeypatch):
        no_answer(monkeypatch)
        assert cli._select_mentor(FakeMonitor()) == "aisyah@example.com"
