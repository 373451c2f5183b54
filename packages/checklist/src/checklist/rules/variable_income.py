# This project was developed with assistance from AI tools.
"""Section 10: variable income.

Commission and rental income are detected from the application. Child
benefit, support received, disability, social assistance, trust and
investment income are dormant sections that need manual activation.

Bonus income has no rules of its own: the letter of employment picks up
the bonus structure instead (see ``income_employed.loe_display_name``).
Rental leases, tax bills and mortgage statements are requested once per
rental property; T776 is never requested on its own, only verified.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..enums import ChecklistScope, ChecklistStage, PayType
from ..schemas.snapshot import Income, Property
from ..tax_years import tax_year_label
from .base import ChecklistRule, never
from .income_employed import employer_note

if TYPE_CHECKING:
    from ..engine.context import RuleContext

SECTION_COMMISSION = "10_variable_income_commission"
SECTION_RENTAL = "10_variable_income_rental"
SECTION_CCB = "10_variable_income_ccb"
SECTION_SUPPORT = "10_variable_income_support"
SECTION_OTHER = "10_variable_income_other"

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def is_commission(income: Income | None) -> bool:
    return income is not None and income.pay_type == PayType.COMMISSION


def has_commission(ctx: RuleContext) -> bool:
    return any(is_commission(inc) for inc in ctx.borrower_incomes)


def is_rental_property(prop: Property | None) -> bool:
    return prop is not None and (prop.rental_income or 0) > 0


def _owned_by(prop: Property, borrower_id: str) -> bool:
    # No owners recorded means the property belongs to the whole application.
    return not prop.owners or borrower_id in prop.owners


def owns_rental_property(ctx: RuleContext) -> bool:
    return any(
        is_rental_property(p) and _owned_by(p, ctx.borrower.id) for p in ctx.properties
    )


def all_rentals_selling(ctx: RuleContext) -> bool:
    """True when every property earning rent is being sold with this deal."""
    rentals = [p for p in ctx.properties if is_rental_property(p)]
    return all(p.is_selling is True for p in rentals)


def _current_rental_is_mortgaged(ctx: RuleContext) -> bool:
    prop = ctx.current_property
    return is_rental_property(prop) and prop.mortgaged is not False


# ---------------------------------------------------------------------------
# Commission
# ---------------------------------------------------------------------------


def commission_rules() -> list[ChecklistRule]:
    return [
        ChecklistRule(
            id="s10_commission_t4s",
            section=SECTION_COMMISSION,
            document="T4 history (2 years showing commission)",
            display_name=tax_year_label(
                "{previous_tax_year} and {current_tax_year} T4s (showing commission income)"
            ),
            stage=ChecklistStage.PRE,
            scope=ChecklistScope.PER_BORROWER,
            condition=has_commission,
        ),
        ChecklistRule(
            id="s10_commission_statements",
            section=SECTION_COMMISSION,
            document="Commission statements (YTD + prior year)",
            display_name="Commission statements (year-to-date + prior year)",
            stage=ChecklistStage.PRE,
            scope=ChecklistScope.PER_BORROWER,
            condition=lambda ctx: is_commission(ctx.current_income),
            notes_fn=employer_note,
            per_income=True,
        ),
        ChecklistRule(
            id="s10_commission_employer_letter",
            section=SECTION_COMMISSION,
            document="Employer letter confirming commission structure",
            display_name="Employer letter confirming commission structure",
            stage=ChecklistStage.FULL,
            scope=ChecklistScope.PER_BORROWER,
            condition=has_commission,
            notes="Especially important if commission exceeds 20% of total income",
        ),
    ]


# ---------------------------------------------------------------------------
# Rental
# ---------------------------------------------------------------------------


def rental_rules() -> list[ChecklistRule]:
    return [
        ChecklistRule(
            id="s10_rental_lease",
            section=SECTION_RENTAL,
            document="Current lease agreement(s)",
            display_name="Current lease agreement(s)",
            stage=ChecklistStage.PRE,
            scope=ChecklistScope.PER_PROPERTY,
            condition=lambda ctx: is_rental_property(ctx.current_property),
        ),
        ChecklistRule(
            id="s10_rental_tax",
            section=SECTION_RENTAL,
            document="Property tax bills (rental)",
            display_name="Property tax bill (rental property)",
            stage=ChecklistStage.PRE,
            scope=ChecklistScope.PER_PROPERTY,
            condition=lambda ctx: is_rental_property(ctx.current_property),
            exclude_when=all_rentals_selling,
        ),
        ChecklistRule(
            id="s10_rental_t1",
            section=SECTION_RENTAL,
            document="T1 General showing rental income",
            display_name="T1 General showing rental income (Schedule T776)",
            stage=ChecklistStage.FULL,
            scope=ChecklistScope.PER_BORROWER,
            condition=owns_rental_property,
        ),
        ChecklistRule(
            id="s10_rental_mortgage",
            section=SECTION_RENTAL,
            document="Rental property mortgage statement",
            display_name="Rental property mortgage statement",
            stage=ChecklistStage.FULL,
            scope=ChecklistScope.PER_PROPERTY,
            condition=_current_rental_is_mortgaged,
            notes="If applicable",
        ),
        ChecklistRule(
            id="s10_t776_check",
            section=SECTION_RENTAL,
            document="T776 (rental income schedule) -- internal check",
            display_name="T776 verification",
            stage=ChecklistStage.FULL,
            scope=ChecklistScope.PER_BORROWER,
            condition=owns_rental_property,
            internal_only=True,
            internal_check_note=(
                "Verify T1 includes T776 (Statement of Real Estate Rentals). Do NOT "
                "request T776 separately, it is part of the T1 package."
            ),
        ),
    ]


# ---------------------------------------------------------------------------
# Canada Child Benefit (dormant)
# ---------------------------------------------------------------------------


def ccb_rules() -> list[ChecklistRule]:
    return [
        ChecklistRule(
            id="s10_ccb_proof",
            section=SECTION_CCB,
            document="Canada Child Benefit (CCB) statement",
            display_name="Canada Child Benefit (CCB) statement from CRA",
            stage=ChecklistStage.PRE,
            scope=ChecklistScope.PER_BORROWER,
            condition=never,
        ),
    ]


# ---------------------------------------------------------------------------
# Support received (dormant)
# ---------------------------------------------------------------------------


def support_rules() -> list[ChecklistRule]:
    return [
        ChecklistRule(
            id="s10_support_agreement",
            section=SECTION_SUPPORT,
            document="Separation/Divorce agreement or court order",
            display_name=(
                "Separation/Divorce agreement or court order "
                "(outlining child/spousal support entitlement)"
            ),
            stage=ChecklistStage.PRE,
            scope=ChecklistScope.PER_BORROWER,
            condition=never,
        ),
        ChecklistRule(
            id="s10_support_proof",
            section=SECTION_SUPPORT,
            document="3 months bank statements showing support receipt",
            display_name="3 months of bank statements showing support payments received",
            stage=ChecklistStage.FULL,
            scope=ChecklistScope.PER_BORROWER,
            condition=never,
        ),
    ]


# ---------------------------------------------------------------------------
# Other income (dormant)
# ---------------------------------------------------------------------------


def other_income_rules() -> list[ChecklistRule]:
    return [
        ChecklistRule(
            id="s10_disability",
            section=SECTION_OTHER,
            document="Disability award letter + payment statement",
            display_name="Disability award letter and payment statement",
            stage=ChecklistStage.PRE,
            scope=ChecklistScope.PER_BORROWER,
            condition=never,
        ),
        ChecklistRule(
            id="s10_social_assistance",
            section=SECTION_OTHER,
            document="Social assistance benefit statement",
            display_name="Current social assistance benefit statement",
            stage=ChecklistStage.PRE,
            scope=ChecklistScope.PER_BORROWER,
            condition=never,
        ),
        ChecklistRule(
            id="s10_trust",
            section=SECTION_OTHER,
            document="Trust income docs + payment history",
            display_name="Trust documents and payment history",
            stage=ChecklistStage.FULL,
            scope=ChecklistScope.PER_BORROWER,
            condition=never,
        ),
        ChecklistRule(
            id="s10_investment",
            section=SECTION_OTHER,
            document="Investment statements + T5 slips",
            display_name="Investment statements and T5 slips",
            stage=ChecklistStage.FULL,
            scope=ChecklistScope.PER_BORROWER,
            condition=never,
        ),
    ]


def variable_income_rules() -> list[ChecklistRule]:
    return [
        *commission_rules(),
        *rental_rules(),
        *ccb_rules(),
        *support_rules(),
        *other_income_rules(),
    ]
