# This project was developed with assistance from AI tools.
"""Checklist assembly -- buckets, dedup, internal flag routing, and stats.

Pure reshape of evaluation output into a ``GeneratedChecklist``. Nothing
here can fail on well-formed candidates.
"""

from collections import Counter
from dataclasses import dataclass, field
from datetime import date
from typing import Sequence

from ..enums import ChecklistScope, ChecklistStage, InternalFlagType
from ..rules.base import ChecklistRule
from ..schemas.checklist import (
    BorrowerChecklist,
    ChecklistItem,
    ChecklistStats,
    GeneratedChecklist,
    InternalFlag,
    PropertyChecklist,
)
from ..schemas.snapshot import Address, ApplicationSnapshot, Borrower, Property
from .context import RuleContext
from .dedupe import dedupe_items
from .evaluate import SHARED_KEY, ScopedItem, ScopeKey


@dataclass
class _Bucket:
    items: list[ChecklistItem] = field(default_factory=list)
    # First matching rule per rule id
    rules: dict[str, ChecklistRule] = field(default_factory=dict)


def _bucket_candidates(candidates: Sequence[ScopedItem]) -> dict[ScopeKey, _Bucket]:
    buckets: dict[ScopeKey, _Bucket] = {}
    for candidate in candidates:
        bucket = buckets.setdefault(candidate.scope_key, _Bucket())
        bucket.items.append(candidate.item)
        bucket.rules.setdefault(candidate.item.rule_id, candidate.rule)
    return buckets


# ---------------------------------------------------------------------------
# Property descriptions
# ---------------------------------------------------------------------------


def _address_text(address: Address | None) -> str | None:
    if address is None:
        return None
    street = " ".join(
        part
        for part in (address.street_number, address.street_name, address.street_type)
        if part
    )
    if street and address.city:
        return f"{street}, {address.city}"
    return street or address.city or None


def describe_property(
    prop: Property,
    addresses: Sequence[Address],
    is_subject: bool,
    additional_index: int = 0,
    additional_count: int = 1,
) -> str:
    """Human-readable property label from its address.

    Falls back to "Subject Property", or "Additional Property [n]" when the
    application lists more than one non-subject property.
    """
    address = next((a for a in addresses if a.id == prop.address_id), None)
    text = _address_text(address)
    if text:
        return text
    if is_subject:
        return "Subject Property"
    if additional_count > 1:
        return f"Additional Property {additional_index + 1}"
    return "Additional Property"


# ---------------------------------------------------------------------------
# Internal flag routing
# ---------------------------------------------------------------------------


def _split_bucket(
    bucket: _Bucket,
    borrower: Borrower | None = None,
    property_id: str | None = None,
) -> tuple[list[ChecklistItem], list[InternalFlag]]:
    """Dedupe one bucket and separate client items from internal flags."""
    client_items: list[ChecklistItem] = []
    flags: list[InternalFlag] = []

    for item in dedupe_items(bucket.items):
        rule = bucket.rules[item.rule_id]
        if item.for_email:
            client_items.append(item)
            if not rule.internal_check_note:
                continue
            flag_type = InternalFlagType.INTERNAL_CHECK
        elif rule.internal_check_note:
            flag_type = InternalFlagType.INTERNAL_CHECK
        else:
            flag_type = InternalFlagType.DEFERRED_DOC

        flags.append(
            InternalFlag(
                rule_id=item.rule_id,
                description=item.document,
                type=flag_type,
                borrower_id=borrower.id if borrower else None,
                borrower_name=borrower.full_name if borrower else None,
                property_id=property_id,
                check_note=rule.internal_check_note,
            )
        )
    return client_items, flags


# ---------------------------------------------------------------------------
# Stats
# ---------------------------------------------------------------------------


def compute_stats(
    borrower_checklists: Sequence[BorrowerChecklist],
    property_checklists: Sequence[PropertyChecklist],
    shared_items: Sequence[ChecklistItem],
    internal_flags: Sequence[InternalFlag],
    warnings: Sequence[str],
    property_count: int,
) -> ChecklistStats:
    client_items = [
        *(item for bc in borrower_checklists for item in bc.items),
        *(item for pc in property_checklists for item in pc.items),
        *shared_items,
    ]
    stage_counts = Counter(item.stage for item in client_items)

    # A check flag raised on a client item is the same document, counted once
    client_keys = {
        *((bc.borrower_id, None, item.rule_id) for bc in borrower_checklists for item in bc.items),
        *((None, pc.property_id, item.rule_id) for pc in property_checklists for item in pc.items),
        *((None, None, item.rule_id) for item in shared_items),
    }
    flag_only = sum(
        1
        for flag in internal_flags
        if (flag.borrower_id, flag.property_id, flag.rule_id) not in client_keys
    )

    return ChecklistStats(
        total_items=len(client_items) + flag_only,
        pre_items=stage_counts[ChecklistStage.PRE],
        full_items=stage_counts[ChecklistStage.FULL],
        by_stage={stage: stage_counts[stage] for stage in ChecklistStage},
        per_borrower_items=sum(len(bc.items) for bc in borrower_checklists),
        by_borrower={bc.borrower_id: len(bc.items) for bc in borrower_checklists},
        property_items=sum(len(pc.items) for pc in property_checklists),
        shared_items=len(shared_items),
        internal_flags=len(internal_flags),
        warnings=len(warnings),
        borrower_count=len(borrower_checklists),
        property_count=property_count,
    )


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------


def assemble_checklist(
    snapshot: ApplicationSnapshot,
    contexts: Sequence[RuleContext],
    candidates: Sequence[ScopedItem],
    warnings: Sequence[str],
    reference_date: date,
) -> GeneratedChecklist:
    """Build the final checklist from evaluated candidates.

    Args:
        snapshot: The application snapshot (properties and addresses).
        contexts: Borrower contexts, main borrower first.
        candidates: Evaluation output in catalog order.
        warnings: Data-quality warnings collected so far.
        reference_date: The run's reference date.

    Returns:
        A frozen GeneratedChecklist.
    """
    buckets = _bucket_candidates(candidates)
    internal_flags: list[InternalFlag] = []

    # Borrowers -- every context gets a list, even an empty one
    borrower_checklists: list[BorrowerChecklist] = []
    for ctx in contexts:
        key = ScopeKey(ChecklistScope.PER_BORROWER, ctx.borrower.id)
        items, flags = _split_bucket(buckets.get(key, _Bucket()), borrower=ctx.borrower)
        internal_flags.extend(flags)
        borrower_checklists.append(
            BorrowerChecklist(
                borrower_id=ctx.borrower.id,
                borrower_name=ctx.borrower.full_name,
                is_main_borrower=ctx.borrower.is_main_borrower,
                items=items,
            )
        )

    # Properties -- listed only when they have client items
    subject_id = snapshot.application.property_id
    additional_count = sum(1 for p in snapshot.properties if p.id != subject_id)
    additional_index = 0
    property_checklists: list[PropertyChecklist] = []
    for prop in snapshot.properties:
        is_subject = prop.id == subject_id
        description = describe_property(
            prop, snapshot.addresses, is_subject, additional_index, additional_count
        )
        if not is_subject:
            additional_index += 1

        key = ScopeKey(ChecklistScope.PER_PROPERTY, prop.id)
        items, flags = _split_bucket(buckets.get(key, _Bucket()), property_id=prop.id)
        internal_flags.extend(flags)
        if items:
            property_checklists.append(
                PropertyChecklist(
                    property_id=prop.id,
                    property_description=description,
                    is_subject_property=is_subject,
                    items=items,
                )
            )

    shared_items, flags = _split_bucket(buckets.get(SHARED_KEY, _Bucket()))
    internal_flags.extend(flags)

    stats = compute_stats(
        borrower_checklists,
        property_checklists,
        shared_items,
        internal_flags,
        warnings,
        property_count=len(snapshot.properties),
    )
    return GeneratedChecklist(
        application_id=snapshot.application.id,
        generated_at=reference_date.isoformat(),
        borrower_checklists=borrower_checklists,
        property_checklists=property_checklists,
        shared_items=shared_items,
        internal_flags=internal_flags,
        warnings=list(warnings),
        stats=stats,
    )
