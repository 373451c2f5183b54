# This project was developed with assistance from AI tools.
"""Sections 7-9: other income types.

Section 7: retired (pension, CPP/OAS, investment income).
Section 8: maternity / parental leave (dormant).
Section 9: probation (dormant).

Neither a leave nor a probation period can be read reliably from the
application, so sections 8 and 9 only fire once activated manually.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..enums import ChecklistScope, ChecklistStage, IncomeSource
from .base import ChecklistRule, never

if TYPE_CHECKING:
    from ..engine.context import RuleContext

SECTION_RETIRED = "7_income_retired"
SECTION_MATERNITY = "8_income_maternity"
SECTION_PROBATION = "9_income_probation"


def is_retired(ctx: RuleContext) -> bool:
    return any(inc.source == IncomeSource.RETIRED for inc in ctx.borrower_incomes)


# ---------------------------------------------------------------------------
# Section 7: Retired
# ---------------------------------------------------------------------------


def retired_rules() -> list[ChecklistRule]:
    return [
        ChecklistRule(
            id="s7_pension_letter",
            section=SECTION_RETIRED,
            document="Pension letter stating current year entitlement",
            display_name="Pension letter stating current year entitlement",
            stage=ChecklistStage.PRE,
            scope=ChecklistScope.PER_BORROWER,
            condition=is_retired,
        ),
        ChecklistRule(
            id="s7_cpp_oas_t4a",
            section=SECTION_RETIRED,
            document="2 years CPP/OAS T4As",
            display_name="2 years of CPP/OAS T4A slips",
            stage=ChecklistStage.PRE,
            scope=ChecklistScope.PER_BORROWER,
            condition=is_retired,
            notes="If applicable",
        ),
        ChecklistRule(
            id="s7_bank_pension",
            section=SECTION_RETIRED,
            document="3 months bank statements showing pension deposits",
            display_name="3 months of bank statements showing pension deposits",
            stage=ChecklistStage.FULL,
            scope=ChecklistScope.PER_BORROWER,
            condition=is_retired,
        ),
        ChecklistRule(
            id="s7_t5s",
            section=SECTION_RETIRED,
            document="2 years T5s",
            display_name="2 years of T5 slips (dividends / investment income)",
            stage=ChecklistStage.FULL,
            scope=ChecklistScope.PER_BORROWER,
            condition=is_retired,
            notes="If receiving dividends or investment income",
        ),
    ]


# ---------------------------------------------------------------------------
# Section 8: Maternity / Parental Leave (dormant)
# ---------------------------------------------------------------------------


def maternity_rules() -> list[ChecklistRule]:
    return [
        ChecklistRule(
            id="s8_loe_return",
            section=SECTION_MATERNITY,
            document="LOE confirming return date",
            display_name=(
                "Letter of Employment confirming return date (must show guaranteed return)"
            ),
            stage=ChecklistStage.PRE,
            scope=ChecklistScope.PER_BORROWER,
            condition=never,
        ),
        ChecklistRule(
            id="s8_pre_leave_paystub",
            section=SECTION_MATERNITY,
            document="Pre-leave paystub",
            display_name="Pre-leave pay stub (showing pre-leave salary)",
            stage=ChecklistStage.PRE,
            scope=ChecklistScope.PER_BORROWER,
            condition=never,
        ),
        ChecklistRule(
            id="s8_ei_statement",
            section=SECTION_MATERNITY,
            document="EI statement",
            display_name="Employment Insurance (EI) benefit statement",
            stage=ChecklistStage.FULL,
            scope=ChecklistScope.PER_BORROWER,
            condition=never,
            notes="If applicable",
        ),
    ]


# ---------------------------------------------------------------------------
# Section 9: Probation (dormant)
# ---------------------------------------------------------------------------


def probation_rules() -> list[ChecklistRule]:
    return [
        ChecklistRule(
            id="s9_loe_probation",
            section=SECTION_PROBATION,
            document="LOE with probation details",
            display_name=(
                "Letter of Employment with probation details "
                "(end date, confirmation of permanent hire)"
            ),
            stage=ChecklistStage.PRE,
            scope=ChecklistScope.PER_BORROWER,
            condition=never,
        ),
        ChecklistRule(
            id="s9_employment_history",
            section=SECTION_PROBATION,
            document="3 years previous employment history",
            display_name="3 years of previous employment history",
            stage=ChecklistStage.PRE,
            scope=ChecklistScope.PER_BORROWER,
            condition=never,
            notes="If not included in application",
        ),
    ]


def income_other_rules() -> list[ChecklistRule]:
    return [*retired_rules(), *maternity_rules(), *probation_rules()]
