# This project was developed with assistance from AI tools.
"""Section 15: property and deal type.

Purchase documents depend on an accepted offer existing, so they are held
back while the borrower is still searching. Refinances, renewals and
switches share the existing-property documents; home insurance is only
needed for a renewal or switch.

Condo and multi-unit documents describe the subject property and are
listed under that property. Appraisals are lender conditions and never
reach the borrower's checklist upfront.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..enums import (
    ApplicationGoal,
    ApplicationProcess,
    ChecklistScope,
    ChecklistStage,
    PropertyType,
    PropertyUse,
)
from .base import ChecklistRule

if TYPE_CHECKING:
    from ..engine.context import RuleContext

SECTION_PURCHASE = "15_property_purchase"
SECTION_REFINANCE = "15_property_refinance"
SECTION_CONDO = "15_property_condo"
SECTION_MULTIUNIT = "15_property_multiunit"
SECTION_INVESTMENT = "15_property_investment"

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def is_purchase(ctx: RuleContext) -> bool:
    return ctx.application.goal == ApplicationGoal.PURCHASE


def is_searching(ctx: RuleContext) -> bool:
    return ctx.application.process == ApplicationProcess.SEARCHING


def is_existing_property_deal(ctx: RuleContext) -> bool:
    """Refinance, renewal or switch.

    An unrecognized goal on an application that already links a subject
    property is treated the same way.
    """
    goal = ctx.application.goal
    if goal is None or goal == ApplicationGoal.PURCHASE:
        return False
    if goal in (ApplicationGoal.REFINANCE, ApplicationGoal.RENEW):
        return True
    return ctx.subject_property is not None


def is_renewal_or_switch(ctx: RuleContext) -> bool:
    return ctx.application.goal == ApplicationGoal.RENEW


def _is_subject(ctx: RuleContext) -> bool:
    prop = ctx.current_property
    return (
        prop is not None
        and ctx.subject_property is not None
        and prop.id == ctx.subject_property.id
    )


def is_subject_condo(ctx: RuleContext) -> bool:
    if not _is_subject(ctx):
        return False
    prop = ctx.current_property
    return prop.type == PropertyType.CONDO or (prop.monthly_fees or 0) > 0


def is_subject_condo_existing_deal(ctx: RuleContext) -> bool:
    return is_subject_condo(ctx) and is_existing_property_deal(ctx)


def is_subject_multi_unit(ctx: RuleContext) -> bool:
    return _is_subject(ctx) and (ctx.current_property.number_of_units or 0) > 1


def is_investment(ctx: RuleContext) -> bool:
    """Only an explicit non-owner-occupied use counts; a missing use does not."""
    use = ctx.application.use
    return use is not None and use != PropertyUse.OWNER_OCCUPIED


# ---------------------------------------------------------------------------
# Purchase
# ---------------------------------------------------------------------------


def purchase_rules() -> list[ChecklistRule]:
    return [
        ChecklistRule(
            id="s15_purchase_offer",
            section=SECTION_PURCHASE,
            document="Accepted Offer / APS (signed)",
            display_name="Accepted Offer / Agreement of Purchase and Sale (signed)",
            stage=ChecklistStage.PRE,
            scope=ChecklistScope.SHARED,
            condition=is_purchase,
            exclude_when=is_searching,
        ),
        ChecklistRule(
            id="s15_purchase_mls",
            section=SECTION_PURCHASE,
            document="MLS listing",
            display_name="MLS listing",
            stage=ChecklistStage.FULL,
            scope=ChecklistScope.SHARED,
            condition=is_purchase,
            exclude_when=is_searching,
        ),
    ]


# ---------------------------------------------------------------------------
# Refinance / renewal / switch
# ---------------------------------------------------------------------------


def refinance_rules() -> list[ChecklistRule]:
    return [
        ChecklistRule(
            id="s15_refi_mortgage",
            section=SECTION_REFINANCE,
            document="Current mortgage statement",
            display_name="Current mortgage statement",
            stage=ChecklistStage.PRE,
            scope=ChecklistScope.SHARED,
            condition=is_existing_property_deal,
        ),
        ChecklistRule(
            id="s15_refi_tax",
            section=SECTION_REFINANCE,
            document="Property tax bill (most recent)",
            display_name="Property tax bill (most recent)",
            stage=ChecklistStage.PRE,
            scope=ChecklistScope.SHARED,
            condition=is_existing_property_deal,
        ),
        ChecklistRule(
            id="s15_switch_insurance",
            section=SECTION_REFINANCE,
            document="Home insurance",
            display_name="Home insurance policy",
            stage=ChecklistStage.PRE,
            scope=ChecklistScope.SHARED,
            condition=is_renewal_or_switch,
        ),
    ]


# ---------------------------------------------------------------------------
# Subject property type
# ---------------------------------------------------------------------------


def condo_rules() -> list[ChecklistRule]:
    return [
        ChecklistRule(
            id="s15_condo_fee",
            section=SECTION_CONDO,
            document=(
                "Condo fee confirmation OR 3 months bank statements showing strata withdrawals"
            ),
            display_name=(
                "Condo fee confirmation, OR 3 months of bank statements showing "
                "strata fee withdrawals"
            ),
            stage=ChecklistStage.PRE,
            scope=ChecklistScope.PER_PROPERTY,
            # Purchases get the status certificate through the lawyer instead.
            condition=is_subject_condo_existing_deal,
        ),
    ]


def multi_unit_rules() -> list[ChecklistRule]:
    return [
        ChecklistRule(
            id="s15_multiunit_leases",
            section=SECTION_MULTIUNIT,
            document="Lease agreements for all units",
            display_name="Lease agreements for all units",
            stage=ChecklistStage.PRE,
            scope=ChecklistScope.PER_PROPERTY,
            condition=is_subject_multi_unit,
        ),
        ChecklistRule(
            id="s15_multiunit_appraisal",
            section=SECTION_MULTIUNIT,
            document="Appraisal (lender ordered)",
            display_name="Appraisal (lender ordered)",
            stage=ChecklistStage.LENDER_CONDITION,
            scope=ChecklistScope.PER_PROPERTY,
            condition=is_subject_multi_unit,
            notes="Usually only mentioned once we have an approval",
        ),
    ]


def investment_rules() -> list[ChecklistRule]:
    return [
        ChecklistRule(
            id="s15_investment_appraisal",
            section=SECTION_INVESTMENT,
            document="Appraisal (lender ordered)",
            display_name="Appraisal (lender ordered)",
            stage=ChecklistStage.LENDER_CONDITION,
            scope=ChecklistScope.SHARED,
            condition=is_investment,
        ),
    ]


def property_rules() -> list[ChecklistRule]:
    return [
        *purchase_rules(),
        *refinance_rules(),
        *condo_rules(),
        *multi_unit_rules(),
        *investment_rules(),
    ]
