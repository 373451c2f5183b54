# This project was developed with assistance from AI tools.
"""Shared fixtures for checklist engine tests."""

import pytest

from checklist.engine.context import build_borrower_contexts

from factories import REFERENCE_DATE, make_snapshot


@pytest.fixture
def reference_date():
    """Pinned date so tax-year labels are deterministic."""
    return REFERENCE_DATE


@pytest.fixture
def main_context(reference_date):
    """Context for a single salaried main borrower on a purchase."""
    return build_borrower_contexts(make_snapshot(), reference_date).contexts[0]
