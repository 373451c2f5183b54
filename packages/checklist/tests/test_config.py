# This project was developed with assistance from AI tools.
"""Tests for environment-driven settings."""

import pytest
from pydantic import ValidationError

from checklist.config import ChecklistSettings


def test_defaults(monkeypatch):
    monkeypatch.delenv("CHECKLIST_TAX_SLIP_RELEASE_MONTH", raising=False)
    monkeypatch.delenv("CHECKLIST_SYNTHESIZE_MISSING_BORROWER", raising=False)
    s = ChecklistSettings()
    assert s.TAX_SLIP_RELEASE_MONTH == 5
    assert s.SYNTHESIZE_MISSING_BORROWER is True


def test_reads_prefixed_env(monkeypatch):
    monkeypatch.setenv("CHECKLIST_TAX_SLIP_RELEASE_MONTH", "4")
    monkeypatch.setenv("CHECKLIST_SYNTHESIZE_MISSING_BORROWER", "false")
    monkeypatch.setenv("CHECKLIST_LOG_LEVEL", "DEBUG")
    s = ChecklistSettings()
    assert s.TAX_SLIP_RELEASE_MONTH == 4
    assert s.SYNTHESIZE_MISSING_BORROWER is False
    assert s.LOG_LEVEL == "DEBUG"


@pytest.mark.parametrize("month", ["1", "13"])
def test_release_month_bounds(monkeypatch, month):
    monkeypatch.setenv("CHECKLIST_TAX_SLIP_RELEASE_MONTH", month)
    with pytest.raises(ValidationError):
        ChecklistSettings()
