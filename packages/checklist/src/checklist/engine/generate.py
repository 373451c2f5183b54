# This project was developed with assistance from AI tools.
"""Top-level checklist generation.

``generate_checklist`` is a deterministic function of the snapshot, the
rule list and the reference date: the same inputs always produce the same
checklist. Warnings reference ids and field names only, never borrower
names or SINs.
"""

import logging
from datetime import date
from typing import Sequence

from ..enums import ApplicationGoal, IncomeSource
from ..rules import ALL_RULES
from ..rules.base import ChecklistRule
from ..schemas.checklist import GeneratedChecklist
from ..schemas.snapshot import ApplicationSnapshot
from .assemble import assemble_checklist
from .context import build_borrower_contexts, find_subject_property
from .evaluate import evaluate_rules

logger = logging.getLogger(__name__)


def _data_quality_warnings(snapshot: ApplicationSnapshot) -> list[str]:
    warnings: list[str] = []
    application = snapshot.application

    if application.property_id and find_subject_property(snapshot) is None:
        warnings.append(
            f'Subject property not found: application.propertyId "{application.property_id}" '
            "does not match any property"
        )

    if application.goal and application.goal not in ApplicationGoal.known_values():
        warnings.append(
            f'Unrecognized application goal "{application.goal}" -- '
            "deal-type rules may not fire"
        )

    known_sources = IncomeSource.known_values()
    for income in snapshot.incomes:
        if income.source and income.source not in known_sources:
            warnings.append(
                f'Income {income.id} has unrecognized source "{income.source}" -- '
                "income rules may not fire"
            )
    return warnings


def generate_checklist(
    snapshot: ApplicationSnapshot,
    rules: Sequence[ChecklistRule] | None = None,
    reference_date: date | None = None,
) -> GeneratedChecklist:
    """Generate the document checklist for one application.

    Args:
        snapshot: The application snapshot.
        rules: Rules to evaluate, in output order (defaults to the full
            catalog). Pass the result of ``activate_sections`` to include
            manually flagged dormant sections.
        reference_date: Date used for tax-year labels (defaults to today).

    Returns:
        The assembled, frozen GeneratedChecklist.

    Raises:
        RuleEvaluationError: If any rule predicate raises.
    """
    if rules is None:
        rules = ALL_RULES
    if reference_date is None:
        reference_date = date.today()

    built = build_borrower_contexts(snapshot, reference_date)
    warnings = [*built.warnings, *_data_quality_warnings(snapshot)]

    evaluation = evaluate_rules(built.contexts, rules)
    warnings.extend(evaluation.warnings)

    checklist = assemble_checklist(
        snapshot, built.contexts, evaluation.candidates, warnings, reference_date
    )
    logger.debug(
        "Generated checklist for application %s: %d client items, %d internal flags, "
        "%d warnings",
        snapshot.application.id,
        checklist.stats.total_items - checklist.stats.internal_flags,
        checklist.stats.internal_flags,
        checklist.stats.warnings,
    )
    return checklist
