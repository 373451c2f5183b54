# This project was developed with assistance from AI tools.
"""Checklist generation engine."""

from .assemble import assemble_checklist, describe_property
from .context import (
    ContextBuildResult,
    RuleContext,
    build_borrower_contexts,
    find_subject_property,
)
from .dedupe import dedupe_items, merge_notes
from .evaluate import (
    EvaluationResult,
    RuleEvaluationError,
    ScopedItem,
    ScopeKey,
    evaluate_rule,
    evaluate_rules,
)
from .generate import generate_checklist

__all__ = [
    "ContextBuildResult",
    "EvaluationResult",
    "RuleContext",
    "RuleEvaluationError",
    "ScopeKey",
    "ScopedItem",
    "assemble_checklist",
    "build_borrower_contexts",
    "dedupe_items",
    "describe_property",
    "evaluate_rule",
    "evaluate_rules",
    "find_subject_property",
    "generate_checklist",
    "merge_notes",
]
