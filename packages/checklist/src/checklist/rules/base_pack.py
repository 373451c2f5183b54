# This project was developed with assistance from AI tools.
"""Section 0: base pack -- requested on every application.

Signed credit consent is sent automatically by the origination platform and
is deliberately absent here.
"""

from ..enums import ChecklistScope, ChecklistStage
from .base import ChecklistRule, always

SECTION_BASE_PACK = "0_base_pack"


def base_pack_rules() -> list[ChecklistRule]:
    return [
        ChecklistRule(
            id="s0_photo_id",
            section=SECTION_BASE_PACK,
            document="Government-issued photo ID",
            display_name="Government-issued photo ID (driver's license or passport)",
            stage=ChecklistStage.PRE,
            scope=ChecklistScope.PER_BORROWER,
            condition=always,
        ),
        ChecklistRule(
            id="s0_second_id",
            section=SECTION_BASE_PACK,
            document="Second form of ID",
            display_name=(
                "Second form of ID (passport, credit card, PR card, SIN card, "
                "birth certificate, or firearms license)"
            ),
            stage=ChecklistStage.PRE,
            scope=ChecklistScope.PER_BORROWER,
            condition=always,
        ),
        ChecklistRule(
            id="s0_void_cheque",
            section=SECTION_BASE_PACK,
            document="Void cheque or direct deposit form",
            display_name="Void cheque or direct deposit form",
            stage=ChecklistStage.FULL,
            scope=ChecklistScope.SHARED,
            condition=always,
        ),
    ]
