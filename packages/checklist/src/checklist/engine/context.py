# This project was developed with assistance from AI tools.
"""Context factory -- turns an application snapshot into per-borrower rule contexts.

Each borrower gets a RuleContext with their own incomes, assets and
liabilities pre-filtered, plus the full application for cross-borrower
checks. The main borrower's context is always first.
"""

import logging
from dataclasses import dataclass, field
from datetime import date

from ..config import settings
from ..schemas.snapshot import (
    Application,
    ApplicationSnapshot,
    Asset,
    Borrower,
    Income,
    Liability,
    Property,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RuleContext:
    """Read-only view of one borrower within one application.

    For shared and per-property rules the main borrower's context is used.
    ``current_income`` and ``current_property`` are only set on the narrowed
    copies the engine makes while evaluating per-income and per-property rules.
    """

    application: Application
    borrower: Borrower
    borrower_incomes: tuple[Income, ...]
    all_borrowers: tuple[Borrower, ...]
    all_incomes: tuple[Income, ...]
    assets: tuple[Asset, ...]
    borrower_assets: tuple[Asset, ...]
    properties: tuple[Property, ...]
    subject_property: Property | None
    liabilities: tuple[Liability, ...]
    borrower_liabilities: tuple[Liability, ...]
    reference_date: date
    current_income: Income | None = None
    current_property: Property | None = None


@dataclass(frozen=True)
class ContextBuildResult:
    contexts: list[RuleContext]
    warnings: list[str] = field(default_factory=list)


def find_subject_property(snapshot: ApplicationSnapshot) -> Property | None:
    """Return the property linked by ``application.property_id``, or None."""
    property_id = snapshot.application.property_id
    if not property_id:
        return None
    return next((p for p in snapshot.properties if p.id == property_id), None)


def _synthesize_borrower(snapshot: ApplicationSnapshot) -> Borrower:
    """Build a main borrower from the applicant record."""
    applicant = snapshot.applicant
    return Borrower(
        id=applicant.id,
        first_name=applicant.first_name,
        last_name=applicant.last_name,
        email=applicant.email,
        first_time=False,
        marital="single",
        is_main_borrower=True,
    )


def build_borrower_contexts(
    snapshot: ApplicationSnapshot,
    reference_date: date,
) -> ContextBuildResult:
    """Build one RuleContext per borrower, main borrower first.

    Incomes are matched on ``borrower_id``; assets and liabilities on their
    ``owners`` list, so a jointly-owned asset appears in every owner's slice.
    Dangling references resolve to empty slices or None, never to errors.

    Args:
        snapshot: The application snapshot.
        reference_date: Date used by every date-relative rule in this run.

    Returns:
        ContextBuildResult with the ordered contexts and any data-quality warnings.
    """
    warnings: list[str] = []
    subject_property = find_subject_property(snapshot)

    borrowers = list(snapshot.borrowers)
    if not borrowers:
        if snapshot.applicant is not None and settings.SYNTHESIZE_MISSING_BORROWER:
            warnings.append(
                "No borrowers in application -- synthesized from applicant data. "
                "Some income-specific rules may not fire."
            )
            borrowers = [_synthesize_borrower(snapshot)]
        else:
            warnings.append(
                "No borrowers in application -- cannot generate borrower-specific "
                "checklist items."
            )
            return ContextBuildResult(contexts=[], warnings=warnings)

    all_borrowers = tuple(borrowers)
    all_incomes = tuple(snapshot.incomes)
    assets = tuple(snapshot.assets)
    properties = tuple(snapshot.properties)
    liabilities = tuple(snapshot.liabilities)

    contexts = [
        RuleContext(
            application=snapshot.application,
            borrower=borrower,
            borrower_incomes=tuple(i for i in all_incomes if i.borrower_id == borrower.id),
            all_borrowers=all_borrowers,
            all_incomes=all_incomes,
            assets=assets,
            borrower_assets=tuple(a for a in assets if borrower.id in a.owners),
            properties=properties,
            subject_property=subject_property,
            liabilities=liabilities,
            borrower_liabilities=tuple(lb for lb in liabilities if borrower.id in lb.owners),
            reference_date=reference_date,
        )
        for borrower in borrowers
    ]

    # sorted() is stable: co-borrowers keep their snapshot order
    contexts = sorted(contexts, key=lambda c: not c.borrower.is_main_borrower)

    logger.debug(
        "Built %d borrower contexts for application %s",
        len(contexts),
        snapshot.application.id,
    )
    return ContextBuildResult(contexts=contexts, warnings=warnings)
