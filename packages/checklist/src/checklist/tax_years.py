# This project was developed with assistance from AI tools.
"""Dynamic tax year calculation.

Tax documents (T4, NOA, T1) reference specific years. Rather than hardcoding
years, labels are computed from the run's reference date so they stay
correct as time passes. Slips for tax year Y are expected from May of Y+1;
before that, the previous calendar year is treated as current.
"""

from dataclasses import asdict, dataclass
from datetime import date
from typing import Callable

from .config import settings


@dataclass(frozen=True)
class TaxYearInfo:
    """Tax year references derived from a reference date."""

    current_tax_year: int
    previous_tax_year: int
    two_years_ago: int
    t4_available: bool


def get_tax_years(reference_date: date, release_month: int | None = None) -> TaxYearInfo:
    """Resolve the tax years to reference in document labels.

    Args:
        reference_date: The run's reference date.
        release_month: First month in which slips are expected (defaults to
            ``settings.TAX_SLIP_RELEASE_MONTH``).

    Returns:
        TaxYearInfo with the current, previous and two-years-ago tax years.
    """
    month = release_month or settings.TAX_SLIP_RELEASE_MONTH
    t4_available = reference_date.month >= month
    current = reference_date.year if t4_available else reference_date.year - 1
    return TaxYearInfo(
        current_tax_year=current,
        previous_tax_year=current - 1,
        two_years_ago=current - 2,
        t4_available=t4_available,
    )


def tax_year_label(template: str) -> Callable[[date], str]:
    """Build a date-dependent label from a ``str.format`` template.

    The template may reference any ``TaxYearInfo`` field, e.g.
    ``"{previous_tax_year} and {current_tax_year} T4s"``. The label is
    resolved per run, never at import time.
    """

    def _label(reference_date: date) -> str:
        return template.format(**asdict(get_tax_years(reference_date)))

    return _label
