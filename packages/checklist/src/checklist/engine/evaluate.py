# This project was developed with assistance from AI tools.
"""Rule evaluation -- turns contexts and rules into scoped candidate items.

Pure function, no I/O. Every rule is visited in catalog order and evaluated
against the context(s) its scope calls for:

- ``per_borrower``: each borrower context, once per income entry for
  ``per_income`` rules.
- ``per_property``: each property on the application, using the main
  borrower's context narrowed to that property.
- ``shared``: the main borrower's context, once.

Duplicates within a bucket are expected here and resolved by the
deduplicator. A predicate that raises aborts the whole run.
"""

import dataclasses
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Iterator, Sequence

from ..enums import ChecklistScope, ChecklistStage
from ..rules.base import ChecklistRule
from ..schemas.checklist import ChecklistItem
from ..schemas.snapshot import Borrower
from .context import RuleContext

logger = logging.getLogger(__name__)


class RuleEvaluationError(RuntimeError):
    """A rule predicate or label function raised during evaluation."""

    def __init__(self, rule_id: str, phase: str, cause: BaseException):
        self.rule_id = rule_id
        self.phase = phase
        super().__init__(f"Rule {rule_id} failed during {phase}: {cause!r}")


@dataclass(frozen=True)
class ScopeKey:
    """Identifies one output bucket: a borrower, a property, or the shared list."""

    scope: ChecklistScope
    owner_id: str | None = None


SHARED_KEY = ScopeKey(ChecklistScope.SHARED)


@dataclass(frozen=True)
class ScopedItem:
    scope_key: ScopeKey
    item: ChecklistItem
    rule: ChecklistRule
    borrower: Borrower | None = None


@dataclass(frozen=True)
class EvaluationResult:
    candidates: list[ScopedItem] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _call(
    rule: ChecklistRule, phase: str, fn: Callable[[RuleContext], Any], ctx: RuleContext
) -> Any:
    try:
        return fn(ctx)
    except Exception as exc:
        raise RuleEvaluationError(rule.id, phase, exc) from exc


def evaluate_rule(rule: ChecklistRule, ctx: RuleContext) -> ChecklistItem | None:
    """Evaluate one rule against one (possibly narrowed) context.

    ``exclude_when`` only runs after the primary condition matched.

    Returns:
        The resolved item, or None when the rule does not match or is vetoed.

    Raises:
        RuleEvaluationError: If a predicate or label function raises.
    """
    if not _call(rule, "condition", rule.condition, ctx):
        return None
    if rule.exclude_when is not None and _call(rule, "exclude_when", rule.exclude_when, ctx):
        return None

    return ChecklistItem(
        rule_id=rule.id,
        document=_call(rule, "document", lambda c: rule.resolve_document(c.reference_date), ctx),
        display_name=_call(rule, "display_name", rule.resolve_display_name, ctx),
        stage=rule.stage,
        notes=_call(rule, "notes", rule.resolve_notes, ctx) or None,
        for_email=not rule.internal_only and rule.stage != ChecklistStage.LENDER_CONDITION,
        section=rule.section,
    )


def _borrower_contexts(rule: ChecklistRule, ctx: RuleContext) -> Iterator[RuleContext]:
    if not rule.per_income:
        yield ctx
        return
    for income in ctx.borrower_incomes:
        yield dataclasses.replace(ctx, current_income=income)


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------


def evaluate_rules(
    contexts: Sequence[RuleContext],
    rules: Sequence[ChecklistRule],
) -> EvaluationResult:
    """Evaluate every rule against the contexts its scope requires.

    Args:
        contexts: Borrower contexts, main borrower first.
        rules: Rules in catalog order.

    Returns:
        EvaluationResult with candidates in catalog order and any warnings.

    Raises:
        RuleEvaluationError: If any predicate raises. No partial result is
            returned.
    """
    if not contexts:
        return EvaluationResult(
            warnings=["No borrower contexts -- no checklist rules were evaluated."]
        )

    main_ctx = contexts[0]
    property_contexts = [
        dataclasses.replace(main_ctx, current_property=prop) for prop in main_ctx.properties
    ]
    candidates: list[ScopedItem] = []

    for rule in rules:
        if rule.scope == ChecklistScope.PER_BORROWER:
            for ctx in contexts:
                key = ScopeKey(ChecklistScope.PER_BORROWER, ctx.borrower.id)
                for narrowed in _borrower_contexts(rule, ctx):
                    item = evaluate_rule(rule, narrowed)
                    if item is not None:
                        candidates.append(ScopedItem(key, item, rule, ctx.borrower))

        elif rule.scope == ChecklistScope.PER_PROPERTY:
            for ctx in property_contexts:
                item = evaluate_rule(rule, ctx)
                if item is not None:
                    key = ScopeKey(ChecklistScope.PER_PROPERTY, ctx.current_property.id)
                    candidates.append(ScopedItem(key, item, rule))

        else:
            item = evaluate_rule(rule, main_ctx)
            if item is not None:
                candidates.append(ScopedItem(SHARED_KEY, item, rule))

    logger.debug(
        "Evaluated %d rules against %d borrowers and %d properties: %d candidates",
        len(rules),
        len(contexts),
        len(property_contexts),
        len(candidates),
    )
    return EvaluationResult(candidates=candidates)
