# This project was developed with assistance from AI tools.
"""Sections 1-2: employed income.

Section 1: salaried / hourly employees.
Section 2: contract / seasonal employees.

Pay stub, letter of employment and employment contract are requested per
income entry, so a borrower with two jobs gets one request noting both
employers once the deduplicator merges them.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..enums import ChecklistScope, ChecklistStage, IncomeSource, JobType, PayType
from ..schemas.snapshot import Income
from ..tax_years import tax_year_label
from .base import ChecklistRule

if TYPE_CHECKING:
    from ..engine.context import RuleContext

SECTION_SALARY = "1_income_employed_salary"
SECTION_CONTRACT = "2_income_employed_contract"

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def is_salary_or_hourly(income: Income | None) -> bool:
    """Upstream sends 'salaried', 'hourly_guaranted' or 'hourly_non_guaranted'."""
    if income is None or income.source != IncomeSource.EMPLOYED:
        return False
    pay_type = income.pay_type or ""
    return pay_type == PayType.SALARIED or pay_type.startswith(PayType.HOURLY.value)


def is_contract(income: Income | None) -> bool:
    return (
        income is not None
        and income.source == IncomeSource.EMPLOYED
        and income.job_type == JobType.CONTRACT
    )


def has_salary_or_hourly(ctx: RuleContext) -> bool:
    return any(is_salary_or_hourly(inc) for inc in ctx.borrower_incomes)


def has_contract(ctx: RuleContext) -> bool:
    return any(is_contract(inc) for inc in ctx.borrower_incomes)


def has_bonus(ctx: RuleContext) -> bool:
    return any(inc.bonuses is True for inc in ctx.borrower_incomes)


def employer_note(ctx: RuleContext) -> str | None:
    """Name the employer of the income being evaluated, when known."""
    income = ctx.current_income
    if income is None or not income.business:
        return None
    return f"From {income.business}"


_LOE_BASE = (
    "Letter of Employment (dated within the last 30 days) -- must include: "
    "position, start date, salary, full-time/part-time, guaranteed hours"
)


def loe_display_name(ctx: RuleContext) -> str:
    """Fold bonus details into the LOE instead of requesting a separate bonus letter."""
    if has_bonus(ctx):
        return (
            f"{_LOE_BASE}, and bonus structure (guaranteed or discretionary, "
            "amounts paid in each of the last 2 years)"
        )
    return _LOE_BASE


# ---------------------------------------------------------------------------
# Section 1: Salary / Hourly
# ---------------------------------------------------------------------------


def salary_hourly_rules() -> list[ChecklistRule]:
    return [
        ChecklistRule(
            id="s1_paystub",
            section=SECTION_SALARY,
            document="Recent paystub (within 30 days)",
            display_name="Recent pay stub (must show YTD earnings)",
            stage=ChecklistStage.PRE,
            scope=ChecklistScope.PER_BORROWER,
            condition=lambda ctx: is_salary_or_hourly(ctx.current_income),
            notes_fn=employer_note,
            per_income=True,
        ),
        ChecklistRule(
            id="s1_loe",
            section=SECTION_SALARY,
            document="Letter of Employment",
            display_name=_LOE_BASE,
            display_name_fn=loe_display_name,
            stage=ChecklistStage.PRE,
            scope=ChecklistScope.PER_BORROWER,
            condition=lambda ctx: is_salary_or_hourly(ctx.current_income),
            notes_fn=employer_note,
            per_income=True,
        ),
        ChecklistRule(
            id="s1_t4_previous",
            section=SECTION_SALARY,
            document="T4 -- Previous year",
            display_name=tax_year_label("{previous_tax_year} T4"),
            stage=ChecklistStage.PRE,
            scope=ChecklistScope.PER_BORROWER,
            condition=has_salary_or_hourly,
        ),
        ChecklistRule(
            id="s1_t4_current",
            section=SECTION_SALARY,
            document="T4 -- Current year",
            display_name=tax_year_label("{current_tax_year} T4"),
            stage=ChecklistStage.PRE,
            scope=ChecklistScope.PER_BORROWER,
            condition=has_salary_or_hourly,
            notes=(
                "If not yet available, provide the last pay stub of the previous year "
                "showing year-end earnings"
            ),
        ),
        ChecklistRule(
            id="s1_noa_previous",
            section=SECTION_SALARY,
            document="NOA -- Previous year",
            display_name=tax_year_label("{previous_tax_year} Notice of Assessment (NOA)"),
            stage=ChecklistStage.FULL,
            scope=ChecklistScope.PER_BORROWER,
            condition=has_salary_or_hourly,
        ),
        ChecklistRule(
            id="s1_noa_current",
            section=SECTION_SALARY,
            document="NOA -- Current year",
            display_name=tax_year_label("{current_tax_year} Notice of Assessment (NOA)"),
            stage=ChecklistStage.FULL,
            scope=ChecklistScope.PER_BORROWER,
            condition=has_salary_or_hourly,
        ),
    ]


# ---------------------------------------------------------------------------
# Section 2: Contract / Seasonal
# ---------------------------------------------------------------------------


def contract_rules() -> list[ChecklistRule]:
    return [
        ChecklistRule(
            id="s2_contract",
            section=SECTION_CONTRACT,
            document="Employment contract",
            display_name="Employment contract (term, rate, renewal likelihood)",
            stage=ChecklistStage.PRE,
            scope=ChecklistScope.PER_BORROWER,
            condition=lambda ctx: is_contract(ctx.current_income),
            notes_fn=employer_note,
            per_income=True,
        ),
        ChecklistRule(
            id="s2_t4s_2year",
            section=SECTION_CONTRACT,
            document="2 years of T4s",
            display_name=tax_year_label("{previous_tax_year} and {current_tax_year} T4s"),
            stage=ChecklistStage.PRE,
            scope=ChecklistScope.PER_BORROWER,
            condition=has_contract,
        ),
        ChecklistRule(
            id="s2_noas",
            section=SECTION_CONTRACT,
            document="NOAs (current + previous)",
            display_name=tax_year_label(
                "{previous_tax_year} and {current_tax_year} Notices of Assessment (NOAs)"
            ),
            stage=ChecklistStage.FULL,
            scope=ChecklistScope.PER_BORROWER,
            condition=has_contract,
        ),
    ]


def income_employed_rules() -> list[ChecklistRule]:
    return [*salary_hourly_rules(), *contract_rules()]
