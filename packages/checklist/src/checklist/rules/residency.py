# This project was developed with assistance from AI tools.
"""Sections 16-17: residency programs and first-time buyers.

Newcomer, work permit and non-resident status cannot be read from the
application, so every section 16 rule is dormant. First-time buyer status
is known but needs no documents; it is tracked as an internal flag for
FHSA / HBP eligibility.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..enums import ChecklistScope, ChecklistStage
from .base import ChecklistRule, never

if TYPE_CHECKING:
    from ..engine.context import RuleContext

SECTION_NEWCOMER = "16_residency_newcomer"
SECTION_WORK_PERMIT = "16_residency_work_permit"
SECTION_NON_RESIDENT = "16_residency_non_resident"
SECTION_FIRST_TIME_BUYER = "17_first_time_buyer"


def is_first_time_buyer(ctx: RuleContext) -> bool:
    return ctx.borrower.first_time is True


def _dormant(
    rule_id: str,
    section: str,
    document: str,
    display_name: str,
    stage: ChecklistStage = ChecklistStage.PRE,
    notes: str | None = None,
) -> ChecklistRule:
    return ChecklistRule(
        id=rule_id,
        section=section,
        document=document,
        display_name=display_name,
        stage=stage,
        scope=ChecklistScope.PER_BORROWER,
        condition=never,
        notes=notes,
    )


# ---------------------------------------------------------------------------
# Section 16: Newcomer (PR < 5 years), dormant
# ---------------------------------------------------------------------------


def newcomer_rules() -> list[ChecklistRule]:
    return [
        _dormant("s16_newcomer_pr", SECTION_NEWCOMER, "PR card", "Permanent Resident (PR) card"),
        _dormant("s16_newcomer_passport", SECTION_NEWCOMER, "Passport", "Passport"),
        _dormant(
            "s16_newcomer_employment",
            SECTION_NEWCOMER,
            "Canadian employment (3+ months)",
            "Proof of Canadian employment (minimum 3 months)",
        ),
        _dormant(
            "s16_newcomer_credit",
            SECTION_NEWCOMER,
            "International credit report OR 12 months Canadian payment history",
            "International credit report, OR 12 months of Canadian payment history",
            stage=ChecklistStage.FULL,
            notes="Only needed if they hold foreign securities",
        ),
        _dormant(
            "s16_newcomer_dp",
            SECTION_NEWCOMER,
            "Down payment verification (may require foreign statements)",
            "Down payment verification (may require foreign bank statements)",
            stage=ChecklistStage.FULL,
        ),
    ]


# ---------------------------------------------------------------------------
# Section 16: Work permit, dormant
# ---------------------------------------------------------------------------


def work_permit_rules() -> list[ChecklistRule]:
    return [
        _dormant(
            "s16_wp_permit",
            SECTION_WORK_PERMIT,
            "Work permit (12+ months remaining)",
            "Work permit (must have 12+ months remaining)",
        ),
        _dormant(
            "s16_wp_sin",
            SECTION_WORK_PERMIT,
            "SIN starting with 9",
            "Social Insurance Number (SIN) starting with 9",
        ),
        _dormant("s16_wp_passport", SECTION_WORK_PERMIT, "Passport", "Passport"),
        _dormant(
            "s16_wp_employment",
            SECTION_WORK_PERMIT,
            "Canadian employment letter",
            "Canadian employment letter",
        ),
    ]


# ---------------------------------------------------------------------------
# Section 16: Non-resident (foreign buyer), dormant
# ---------------------------------------------------------------------------


def non_resident_rules() -> list[ChecklistRule]:
    return [
        _dormant(
            "s16_nr_passport",
            SECTION_NON_RESIDENT,
            "Passport",
            "Passport",
            notes="Foreign buyer ban in effect until 2027 (with exceptions)",
        ),
        _dormant(
            "s16_nr_income",
            SECTION_NON_RESIDENT,
            "Proof of foreign income",
            "Proof of foreign income",
        ),
        _dormant(
            "s16_nr_credit",
            SECTION_NON_RESIDENT,
            "International credit report",
            "International credit report",
            stage=ChecklistStage.FULL,
        ),
        _dormant(
            "s16_nr_dp",
            SECTION_NON_RESIDENT,
            "Down payment proof (foreign bank statements)",
            "Down payment proof (foreign bank statements)",
            stage=ChecklistStage.FULL,
        ),
        _dormant(
            "s16_nr_lawyer",
            SECTION_NON_RESIDENT,
            "Canadian lawyer for ILA",
            "Canadian lawyer for Independent Legal Advice (ILA)",
            stage=ChecklistStage.FULL,
        ),
    ]


# ---------------------------------------------------------------------------
# Section 17: First-time buyer, internal flag only
# ---------------------------------------------------------------------------


def first_time_buyer_rules() -> list[ChecklistRule]:
    return [
        ChecklistRule(
            id="s17_ftb_flag",
            section=SECTION_FIRST_TIME_BUYER,
            document="First-time buyer status -- internal tracking",
            display_name="First-time buyer -- no additional docs needed",
            stage=ChecklistStage.PRE,
            scope=ChecklistScope.PER_BORROWER,
            condition=is_first_time_buyer,
            internal_only=True,
            internal_check_note=(
                "First-time buyer status determined from application data. No additional "
                "documents needed. Status is tracked for FHSA/HBP eligibility."
            ),
        ),
    ]


def residency_rules() -> list[ChecklistRule]:
    return [
        *newcomer_rules(),
        *work_permit_rules(),
        *non_resident_rules(),
        *first_time_buyer_rules(),
    ]
