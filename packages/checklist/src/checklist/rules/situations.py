# This project was developed with assistance from AI tools.
"""Sections 12-13: life situations.

Section 12: divorce / separation, read from the borrower's marital status.
Section 13: bankruptcy / consumer proposal (dormant). Credit bureau reports
are pulled by the brokerage and never requested from the borrower.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..enums import ChecklistScope, ChecklistStage, MaritalStatus
from .base import ChecklistRule, never

if TYPE_CHECKING:
    from ..engine.context import RuleContext

SECTION_DIVORCE = "12_situations_divorce"
SECTION_BANKRUPTCY = "13_situations_bankruptcy"

_SEPARATED_STATUSES = frozenset({MaritalStatus.DIVORCED.value, MaritalStatus.SEPARATED.value})


def is_divorced_or_separated(ctx: RuleContext) -> bool:
    return ctx.borrower.marital in _SEPARATED_STATUSES


def divorce_rules() -> list[ChecklistRule]:
    return [
        ChecklistRule(
            id="s12_separation_agreement",
            section=SECTION_DIVORCE,
            document="Separation/Divorce agreement",
            display_name=(
                "Separation/Divorce agreement outlining any child/spousal support obligations"
            ),
            stage=ChecklistStage.PRE,
            scope=ChecklistScope.PER_BORROWER,
            condition=is_divorced_or_separated,
        ),
    ]


def bankruptcy_rules() -> list[ChecklistRule]:
    return [
        ChecklistRule(
            id="s13_discharge",
            section=SECTION_BANKRUPTCY,
            document="Certificate of discharge (bankruptcy)",
            display_name="Certificate of discharge (bankruptcy)",
            stage=ChecklistStage.PRE,
            scope=ChecklistScope.PER_BORROWER,
            condition=never,
        ),
        ChecklistRule(
            id="s13_full_performance",
            section=SECTION_BANKRUPTCY,
            document="Certificate of full performance (consumer proposal)",
            display_name="Certificate of full performance (consumer proposal)",
            stage=ChecklistStage.PRE,
            scope=ChecklistScope.PER_BORROWER,
            condition=never,
        ),
        ChecklistRule(
            id="s13_explanation",
            section=SECTION_BANKRUPTCY,
            document="Explanation letter",
            display_name="Explanation letter (bankruptcy or consumer proposal)",
            stage=ChecklistStage.PRE,
            scope=ChecklistScope.PER_BORROWER,
            condition=never,
        ),
    ]


def situation_rules() -> list[ChecklistRule]:
    return [*divorce_rules(), *bankruptcy_rules()]
