# This project was developed with assistance from AI tools.
"""Section 14: down payment (source of funds).

Covers savings, RRSP, TFSA, FHSA, gift, sale of property, inheritance and
borrowed funds. None of these rules fire for a refinance or a renewal,
where no down payment changes hands.

Registered-account statements are requested per borrower from the assets
that borrower owns; an RRSP held by one co-borrower never produces a
request addressed to the other. Savings, gift, sale, inheritance and
borrowed-funds documents are deal-level and land in the shared list.

An asset whose ``down_payment`` contribution is explicitly zero is ignored.
A missing contribution counts as a possible source.

Gift letters are internal: the format depends on the lender, so staff
collect them once a lender is picked. Gift donor proof of funds is only
requested once an offer is accepted, since it expires before then.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

from ..enums import (
    ApplicationGoal,
    ApplicationProcess,
    AssetType,
    ChecklistScope,
    ChecklistStage,
)
from ..schemas.snapshot import Asset
from .base import ChecklistRule, contains_text

if TYPE_CHECKING:
    from ..engine.context import RuleContext

SECTION_SAVINGS = "14_down_payment_savings"
SECTION_RRSP = "14_down_payment_rrsp"
SECTION_TFSA = "14_down_payment_tfsa"
SECTION_FHSA = "14_down_payment_fhsa"
SECTION_GIFT = "14_down_payment_gift"
SECTION_SALE = "14_down_payment_sale"
SECTION_INHERITANCE = "14_down_payment_inheritance"
SECTION_BORROWED = "14_down_payment_borrowed"

_NO_DOWN_PAYMENT_GOALS = frozenset({ApplicationGoal.REFINANCE.value, ApplicationGoal.RENEW.value})

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def needs_down_payment(ctx: RuleContext) -> bool:
    return ctx.application.goal not in _NO_DOWN_PAYMENT_GOALS


def _is_down_payment_source(asset: Asset) -> bool:
    return asset.down_payment is None or asset.down_payment > 0


def _sources(assets: Iterable[Asset]) -> list[Asset]:
    return [a for a in assets if _is_down_payment_source(a)]


def is_rrsp(asset: Asset) -> bool:
    return asset.type == AssetType.RRSP


def is_tfsa(asset: Asset) -> bool:
    return asset.type == AssetType.TFSA or (
        asset.type == AssetType.CASH_SAVINGS and contains_text(asset.description, "tfsa")
    )


def is_fhsa(asset: Asset) -> bool:
    return contains_text(asset.description, "fhsa")


def has_savings(ctx: RuleContext) -> bool:
    return needs_down_payment(ctx) and any(
        a.type == AssetType.CASH_SAVINGS for a in _sources(ctx.assets)
    )


def owns_rrsp(ctx: RuleContext) -> bool:
    return needs_down_payment(ctx) and any(is_rrsp(a) for a in _sources(ctx.borrower_assets))


def owns_tfsa(ctx: RuleContext) -> bool:
    return needs_down_payment(ctx) and any(is_tfsa(a) for a in _sources(ctx.borrower_assets))


def owns_fhsa(ctx: RuleContext) -> bool:
    return needs_down_payment(ctx) and any(is_fhsa(a) for a in _sources(ctx.borrower_assets))


def _described_as(ctx: RuleContext, needle: str) -> bool:
    return needs_down_payment(ctx) and any(
        contains_text(a.description, needle) for a in _sources(ctx.assets)
    )


def has_gift(ctx: RuleContext) -> bool:
    return _described_as(ctx, "gift")


def has_gift_and_found_property(ctx: RuleContext) -> bool:
    return has_gift(ctx) and ctx.application.process == ApplicationProcess.FOUND_PROPERTY


def has_property_sale(ctx: RuleContext) -> bool:
    return needs_down_payment(ctx) and any(p.is_selling is True for p in ctx.properties)


def has_inheritance(ctx: RuleContext) -> bool:
    return _described_as(ctx, "inheritance")


def has_borrowed_funds(ctx: RuleContext) -> bool:
    return _described_as(ctx, "borrow")


# ---------------------------------------------------------------------------
# Savings and registered accounts
# ---------------------------------------------------------------------------


def savings_rules() -> list[ChecklistRule]:
    return [
        ChecklistRule(
            id="s14_savings_bank",
            section=SECTION_SAVINGS,
            document="90-day bank statement history",
            display_name=(
                "90-day bank statement history for the account(s) currently holding your "
                "down payment funds (must show account ownership -- name and account number)"
            ),
            stage=ChecklistStage.PRE,
            scope=ChecklistScope.SHARED,
            condition=has_savings,
        ),
        ChecklistRule(
            id="s14_large_deposit",
            section=SECTION_SAVINGS,
            document="Large deposit explanations",
            display_name="Explanation for any deposits over $5k that aren't from your payroll",
            stage=ChecklistStage.FULL,
            scope=ChecklistScope.SHARED,
            condition=has_savings,
            notes=(
                "If transfer from other account, we will need 90-day statement showing "
                "the transfer"
            ),
        ),
    ]


def registered_account_rules() -> list[ChecklistRule]:
    return [
        ChecklistRule(
            id="s14_rrsp_statement",
            section=SECTION_RRSP,
            document="RRSP statement (90 days)",
            display_name="RRSP statement (90-day history)",
            stage=ChecklistStage.PRE,
            scope=ChecklistScope.PER_BORROWER,
            condition=owns_rrsp,
        ),
        ChecklistRule(
            id="s14_tfsa_statement",
            section=SECTION_TFSA,
            document="TFSA statement (90 days)",
            display_name="TFSA statement (90-day history)",
            stage=ChecklistStage.PRE,
            scope=ChecklistScope.PER_BORROWER,
            condition=owns_tfsa,
        ),
        ChecklistRule(
            id="s14_fhsa_statement",
            section=SECTION_FHSA,
            document="FHSA statement",
            display_name="First Home Savings Account (FHSA) statement",
            stage=ChecklistStage.PRE,
            scope=ChecklistScope.PER_BORROWER,
            condition=owns_fhsa,
        ),
    ]


# ---------------------------------------------------------------------------
# Gift
# ---------------------------------------------------------------------------


def gift_rules() -> list[ChecklistRule]:
    return [
        ChecklistRule(
            id="s14_gift_donor_info",
            section=SECTION_GIFT,
            document="Donor contact information",
            display_name=(
                "Gift donor contact information (full name, relationship to borrower, "
                "address, phone, email)"
            ),
            stage=ChecklistStage.PRE,
            scope=ChecklistScope.SHARED,
            condition=has_gift,
        ),
        ChecklistRule(
            id="s14_gift_amount",
            section=SECTION_GIFT,
            document="Amount of gift",
            display_name="Confirmed gift amount",
            stage=ChecklistStage.PRE,
            scope=ChecklistScope.SHARED,
            condition=has_gift,
        ),
        ChecklistRule(
            id="s14_gift_savings_note",
            section=SECTION_GIFT,
            document="Bank statements for savings used alongside gift",
            display_name=(
                "90-day bank statement history if you'll also be using some of your "
                "savings in addition to the gifted funds"
            ),
            stage=ChecklistStage.PRE,
            scope=ChecklistScope.SHARED,
            condition=has_gift,
        ),
        ChecklistRule(
            id="s14_gift_proof_of_funds",
            section=SECTION_GIFT,
            document="Donor proof of funds OR transfer confirmation + current balance",
            display_name=(
                "Gift donor proof of funds, OR transfer confirmation plus current "
                "account balance"
            ),
            stage=ChecklistStage.PRE,
            scope=ChecklistScope.SHARED,
            condition=has_gift_and_found_property,
        ),
        ChecklistRule(
            id="s14_gift_letter",
            section=SECTION_GIFT,
            document="Gift letter (signed)",
            display_name="Gift letter (signed)",
            stage=ChecklistStage.LATER,
            scope=ChecklistScope.SHARED,
            condition=has_gift,
            internal_only=True,
            internal_check_note=(
                "Collect gift letter once lender is picked. Do NOT request upfront, "
                "the format varies by lender."
            ),
        ),
    ]


# ---------------------------------------------------------------------------
# Sale of property
# ---------------------------------------------------------------------------


def sale_rules() -> list[ChecklistRule]:
    return [
        ChecklistRule(
            id="s14_sale_offer",
            section=SECTION_SALE,
            document="Accepted offer / sale agreement",
            display_name="Accepted offer or sale agreement (for property being sold)",
            stage=ChecklistStage.PRE,
            scope=ChecklistScope.SHARED,
            condition=has_property_sale,
        ),
        ChecklistRule(
            id="s14_sale_mortgage",
            section=SECTION_SALE,
            document="Most recent mortgage statement to confirm equity",
            display_name=(
                "Most recent mortgage statement for property being sold "
                "(to confirm equity amount)"
            ),
            stage=ChecklistStage.PRE,
            scope=ChecklistScope.SHARED,
            condition=has_property_sale,
        ),
        ChecklistRule(
            id="s14_sale_lawyer",
            section=SECTION_SALE,
            document="Lawyer's statement of adjustments",
            display_name="Lawyer's statement of adjustments (after closing)",
            stage=ChecklistStage.FULL,
            scope=ChecklistScope.SHARED,
            condition=has_property_sale,
        ),
    ]


# ---------------------------------------------------------------------------
# Inheritance and borrowed funds
# ---------------------------------------------------------------------------


def inheritance_rules() -> list[ChecklistRule]:
    return [
        ChecklistRule(
            id="s14_inheritance_will",
            section=SECTION_INHERITANCE,
            document="Will / estate docs",
            display_name="Will or estate documents",
            stage=ChecklistStage.PRE,
            scope=ChecklistScope.SHARED,
            condition=has_inheritance,
        ),
        ChecklistRule(
            id="s14_inheritance_executor",
            section=SECTION_INHERITANCE,
            document="Executor letter",
            display_name="Executor letter",
            stage=ChecklistStage.PRE,
            scope=ChecklistScope.SHARED,
            condition=has_inheritance,
        ),
        ChecklistRule(
            id="s14_inheritance_bank",
            section=SECTION_INHERITANCE,
            document="Bank statement showing receipt",
            display_name="Bank statement showing inheritance receipt",
            stage=ChecklistStage.FULL,
            scope=ChecklistScope.SHARED,
            condition=has_inheritance,
        ),
    ]


def borrowed_rules() -> list[ChecklistRule]:
    return [
        ChecklistRule(
            id="s14_borrowed_statement",
            section=SECTION_BORROWED,
            document="LOC or personal loan statement",
            display_name="Line of credit or personal loan statement (for borrowed down payment)",
            stage=ChecklistStage.PRE,
            scope=ChecklistScope.SHARED,
            condition=has_borrowed_funds,
        ),
    ]


def down_payment_rules() -> list[ChecklistRule]:
    return [
        *savings_rules(),
        *registered_account_rules(),
        *gift_rules(),
        *sale_rules(),
        *inheritance_rules(),
        *borrowed_rules(),
    ]
