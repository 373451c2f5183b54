# This project was developed with assistance from AI tools.
"""Checklist rule definition and shared predicate helpers.

A rule produces a checklist item when ``condition`` returns True and
``exclude_when`` (if present) returns False. Labels may be static strings or
functions of the reference date, resolved per run by the engine.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import TYPE_CHECKING, Callable

from ..enums import ChecklistScope, ChecklistStage

if TYPE_CHECKING:
    from ..engine.context import RuleContext

Label = str | Callable[[date], str]
Predicate = Callable[["RuleContext"], bool]


@dataclass(frozen=True)
class ChecklistRule:
    """A single declarative catalog entry."""

    id: str
    section: str
    document: Label
    display_name: Label
    stage: ChecklistStage
    scope: ChecklistScope
    condition: Predicate
    exclude_when: Predicate | None = None
    display_name_fn: Callable[[RuleContext], str] | None = None
    notes: str | None = None
    notes_fn: Callable[[RuleContext], str | None] | None = None
    # Evaluate once per borrower income entry (ctx.current_income is set).
    per_income: bool = False
    internal_only: bool = False
    internal_check_note: str | None = None

    def __post_init__(self) -> None:
        if self.per_income and self.scope != ChecklistScope.PER_BORROWER:
            raise ValueError(f"Rule {self.id}: per_income requires scope per_borrower")

    def resolve_document(self, reference_date: date) -> str:
        return _resolve_label(self.document, reference_date)

    def resolve_display_name(self, ctx: RuleContext) -> str:
        if self.display_name_fn is not None:
            return self.display_name_fn(ctx)
        return _resolve_label(self.display_name, ctx.reference_date)

    def resolve_notes(self, ctx: RuleContext) -> str | None:
        if self.notes_fn is not None:
            return self.notes_fn(ctx)
        return self.notes


def _resolve_label(label: Label, reference_date: date) -> str:
    if callable(label):
        return label(reference_date)
    return label


# ---------------------------------------------------------------------------
# Shared predicates
# ---------------------------------------------------------------------------


def never(_ctx: RuleContext) -> bool:
    """Dormant condition -- the situation is not detectable from application data."""
    return False


def always(_ctx: RuleContext) -> bool:
    return True


def contains_text(value: str | None, needle: str) -> bool:
    """Case-insensitive substring test that treats None as empty."""
    return bool(value) and needle.lower() in value.lower()
