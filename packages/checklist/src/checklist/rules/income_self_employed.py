# This project was developed with assistance from AI tools.
"""Sections 3-6: self-employed income.

Section 3: every self-employed borrower.
Section 4: sole proprietor (T2125 internal check only).
Section 5: incorporated (articles, T2, financials).
Section 6: stated income / B lender (dormant -- manual flag).

Incorporation is detected from ``business_type`` wording or a "salary"
entry in ``self_pay_type``. When detection is uncertain the borrower is
treated as a sole proprietor.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..enums import ChecklistScope, ChecklistStage, IncomeSource
from ..schemas.snapshot import Income
from ..tax_years import tax_year_label
from .base import ChecklistRule, never

if TYPE_CHECKING:
    from ..engine.context import RuleContext

SECTION_GENERAL = "3_income_self_employed_general"
SECTION_SOLE_PROP = "4_income_self_employed_sole_prop"
SECTION_INCORPORATED = "5_income_self_employed_incorporated"
SECTION_STATED = "6_income_self_employed_stated"

_SELF_EMPLOYED_SOURCES = frozenset(
    {IncomeSource.SELF_EMPLOYED.value, IncomeSource.SELF_EMPLOYED_HYPHEN.value}
)
_INCORPORATED_MARKERS = ("corporation", "incorporated", "inc")

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def is_self_employed_income(income: Income) -> bool:
    return income.source in _SELF_EMPLOYED_SOURCES


def _pays_self_salary(income: Income) -> bool:
    return any(
        isinstance(pt, str) and pt.lower() == "salary" for pt in income.self_pay_type or []
    )


def _is_incorporated_income(income: Income) -> bool:
    if not is_self_employed_income(income):
        return False
    business_type = (income.business_type or "").lower()
    if any(marker in business_type for marker in _INCORPORATED_MARKERS):
        return True
    return _pays_self_salary(income)


def is_self_employed(ctx: RuleContext) -> bool:
    return any(is_self_employed_income(inc) for inc in ctx.borrower_incomes)


def is_incorporated(ctx: RuleContext) -> bool:
    return any(_is_incorporated_income(inc) for inc in ctx.borrower_incomes)


def is_sole_proprietor(ctx: RuleContext) -> bool:
    return is_self_employed(ctx) and not is_incorporated(ctx)


def is_incorporated_with_salary(ctx: RuleContext) -> bool:
    return is_incorporated(ctx) and any(
        is_self_employed_income(inc) and _pays_self_salary(inc) for inc in ctx.borrower_incomes
    )


# ---------------------------------------------------------------------------
# Section 3: General
# ---------------------------------------------------------------------------


def general_self_employed_rules() -> list[ChecklistRule]:
    return [
        ChecklistRule(
            id="s3_t1_current",
            section=SECTION_GENERAL,
            document="T1 General -- Current year (full return)",
            display_name=tax_year_label(
                "{current_tax_year} T1 General (full return including all schedules)"
            ),
            stage=ChecklistStage.PRE,
            scope=ChecklistScope.PER_BORROWER,
            condition=is_self_employed,
        ),
        ChecklistRule(
            id="s3_t1_previous",
            section=SECTION_GENERAL,
            document="T1 General -- Previous year (full return)",
            display_name=tax_year_label(
                "{previous_tax_year} T1 General (full return including all schedules)"
            ),
            stage=ChecklistStage.PRE,
            scope=ChecklistScope.PER_BORROWER,
            condition=is_self_employed,
        ),
        ChecklistRule(
            id="s3_noa_current",
            section=SECTION_GENERAL,
            document="NOA -- Current year",
            display_name=tax_year_label("{current_tax_year} Notice of Assessment (NOA)"),
            stage=ChecklistStage.PRE,
            scope=ChecklistScope.PER_BORROWER,
            condition=is_self_employed,
            notes=(
                "If the NOA shows an amount owing, also provide the CRA Statement of "
                "Account showing taxes paid to zero"
            ),
        ),
        ChecklistRule(
            id="s3_noa_previous",
            section=SECTION_GENERAL,
            document="NOA -- Previous year",
            display_name=tax_year_label("{previous_tax_year} Notice of Assessment (NOA)"),
            stage=ChecklistStage.PRE,
            scope=ChecklistScope.PER_BORROWER,
            condition=is_self_employed,
        ),
        ChecklistRule(
            id="s3_t4_salary",
            section=SECTION_GENERAL,
            document="T4 (if paying self a salary from corporation)",
            display_name=tax_year_label("{current_tax_year} T4 (salary from corporation)"),
            stage=ChecklistStage.FULL,
            scope=ChecklistScope.PER_BORROWER,
            condition=is_incorporated_with_salary,
        ),
    ]


# ---------------------------------------------------------------------------
# Section 4: Sole Proprietor
# ---------------------------------------------------------------------------


def sole_proprietor_rules() -> list[ChecklistRule]:
    return [
        ChecklistRule(
            id="s4_t2125_check",
            section=SECTION_SOLE_PROP,
            document="T2125 (Statement of Business Activities) -- internal check",
            display_name="T2125 verification",
            stage=ChecklistStage.PRE,
            scope=ChecklistScope.PER_BORROWER,
            condition=is_sole_proprietor,
            internal_only=True,
            internal_check_note=(
                "Verify T1 includes T2125 (Statement of Business Activities). Do NOT "
                "request T2125 separately, it is part of the T1 package."
            ),
        ),
    ]


# ---------------------------------------------------------------------------
# Section 5: Incorporated
# ---------------------------------------------------------------------------


def incorporated_rules() -> list[ChecklistRule]:
    return [
        ChecklistRule(
            id="s5_articles",
            section=SECTION_INCORPORATED,
            document="Articles of Incorporation",
            display_name="Articles of Incorporation",
            stage=ChecklistStage.PRE,
            scope=ChecklistScope.PER_BORROWER,
            condition=is_incorporated,
        ),
        ChecklistRule(
            id="s5_t2_schedule50",
            section=SECTION_INCORPORATED,
            document="T2 Corporate Tax Return with Schedule 50 OR Central Securities Register",
            display_name=(
                "T2 Corporate Tax Return with Schedule 50, OR Central Securities Register"
            ),
            stage=ChecklistStage.FULL,
            scope=ChecklistScope.PER_BORROWER,
            condition=is_incorporated,
            internal_check_note=(
                "Verify T2 includes Schedule 50 (shareholder listing). If not included, "
                "request the Central Securities Register separately."
            ),
        ),
        ChecklistRule(
            id="s5_financials",
            section=SECTION_INCORPORATED,
            document="2 years accountant-prepared financial statements",
            display_name=(
                "2 years of accountant-prepared financial statements "
                "(balance sheet + income statement)"
            ),
            stage=ChecklistStage.FULL,
            scope=ChecklistScope.PER_BORROWER,
            condition=is_incorporated,
        ),
        ChecklistRule(
            id="s5_business_bank",
            section=SECTION_INCORPORATED,
            document="Business bank statements (6-12 months)",
            display_name="Business bank statements (6-12 months)",
            stage=ChecklistStage.LENDER_CONDITION,
            scope=ChecklistScope.PER_BORROWER,
            condition=is_incorporated,
            notes="Rarely requested upfront -- only collect if conditioned by lender.",
        ),
    ]


# ---------------------------------------------------------------------------
# Section 6: Stated Income / B Lender (dormant)
# ---------------------------------------------------------------------------


def stated_income_rules() -> list[ChecklistRule]:
    return [
        ChecklistRule(
            id="s6_business_bank",
            section=SECTION_STATED,
            document="Business bank statements (6-12 months)",
            display_name="Business bank statements (6-12 months)",
            stage=ChecklistStage.PRE,
            scope=ChecklistScope.PER_BORROWER,
            condition=never,
            notes=(
                "Stated income / B-lender program. If stated income is from a "
                "corporation, also collect all incorporated-business documents."
            ),
        ),
        ChecklistRule(
            id="s6_personal_bank",
            section=SECTION_STATED,
            document="Personal bank statements (3 months)",
            display_name="Personal bank statements (3 months)",
            stage=ChecklistStage.PRE,
            scope=ChecklistScope.PER_BORROWER,
            condition=never,
        ),
        ChecklistRule(
            id="s6_business_reg",
            section=SECTION_STATED,
            document="Business registration",
            display_name="Business registration",
            stage=ChecklistStage.PRE,
            scope=ChecklistScope.PER_BORROWER,
            condition=never,
        ),
        ChecklistRule(
            id="s6_income_declaration",
            section=SECTION_STATED,
            document="Signed income declaration",
            display_name="Signed income declaration (must be reasonable for industry)",
            stage=ChecklistStage.PRE,
            scope=ChecklistScope.PER_BORROWER,
            condition=never,
        ),
    ]


def income_self_employed_rules() -> list[ChecklistRule]:
    return [
        *general_self_employed_rules(),
        *sole_proprietor_rules(),
        *incorporated_rules(),
        *stated_income_rules(),
    ]
