# This project was developed with assistance from AI tools.
"""Section 11: liabilities.

Credit card, car loan, student loan and personal loan statements are not
requested because those balances come from the credit report. Mortgages on
other properties are covered by the property sections.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..enums import ChecklistScope, ChecklistStage, LiabilityType
from .base import ChecklistRule

if TYPE_CHECKING:
    from ..engine.context import RuleContext

SECTION_LIABILITIES = "11_liabilities"


def has_line_of_credit(ctx: RuleContext) -> bool:
    return any(
        lb.type == LiabilityType.UNSECURED_LINE_CREDIT for lb in ctx.borrower_liabilities
    )


def liability_rules() -> list[ChecklistRule]:
    return [
        ChecklistRule(
            id="s11_loc_statements",
            section=SECTION_LIABILITIES,
            document="Line of credit statements",
            display_name="Line of credit statements",
            stage=ChecklistStage.PRE,
            scope=ChecklistScope.PER_BORROWER,
            condition=has_line_of_credit,
        ),
    ]
