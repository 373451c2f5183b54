# This project was developed with assistance from AI tools.
"""The ordered rule catalog and the dormant-section registry.

Catalog order is output order: within each borrower, property or shared
list, items appear in the order their rules are declared here.
"""

from ..schemas.checklist import DormantSection
from .base import ChecklistRule
from .base_pack import base_pack_rules
from .down_payment import down_payment_rules
from .income_employed import income_employed_rules
from .income_other import income_other_rules
from .income_self_employed import income_self_employed_rules
from .liabilities import liability_rules
from .property import property_rules
from .residency import residency_rules
from .situations import situation_rules
from .variable_income import variable_income_rules

ALL_RULES: tuple[ChecklistRule, ...] = (
    *base_pack_rules(),
    *income_employed_rules(),
    *income_self_employed_rules(),
    *income_other_rules(),
    *variable_income_rules(),
    *liability_rules(),
    *situation_rules(),
    *down_payment_rules(),
    *property_rules(),
    *residency_rules(),
)

# Sections whose rules never fire on their own -- the situation cannot be
# read from application data. Ops activate them per application.
DORMANT_SECTIONS: tuple[DormantSection, ...] = (
    DormantSection(
        section="6_income_self_employed_stated",
        description="Stated Income / B Lender -- not detectable from application data",
    ),
    DormantSection(
        section="8_income_maternity",
        description="Maternity / Parental Leave -- not detectable from application data",
    ),
    DormantSection(
        section="9_income_probation",
        description="Probation -- not reliably inferred from short tenure",
    ),
    DormantSection(
        section="10_variable_income_ccb",
        description="Canada Child Benefit -- not detectable from application data",
    ),
    DormantSection(
        section="10_variable_income_support",
        description="Support Income (Receiving) -- not detectable from application data",
    ),
    DormantSection(
        section="10_variable_income_other",
        description=(
            "Other Income (disability, social assistance, trust, investment) -- "
            "not detectable from application data"
        ),
    ),
    DormantSection(
        section="13_situations_bankruptcy",
        description="Bankruptcy / Consumer Proposal -- not detectable from application data",
    ),
    DormantSection(
        section="16_residency_newcomer",
        description="Newcomer (PR < 5 years) -- not detectable from application data",
    ),
    DormantSection(
        section="16_residency_work_permit",
        description="Work Permit -- not detectable from application data",
    ),
    DormantSection(
        section="16_residency_non_resident",
        description="Non-Resident (Foreign Buyer) -- not detectable from application data",
    ),
)

_RULES_BY_ID: dict[str, ChecklistRule] = {}
for _rule in ALL_RULES:
    if _rule.id in _RULES_BY_ID:
        raise ValueError(f"Duplicate checklist rule id: {_rule.id}")
    _RULES_BY_ID[_rule.id] = _rule
del _rule


def get_rule(rule_id: str) -> ChecklistRule:
    """Look up a catalog rule by id. Raises KeyError for unknown ids."""
    try:
        return _RULES_BY_ID[rule_id]
    except KeyError:
        raise KeyError(f"Unknown checklist rule: {rule_id}") from None


def dormant_section_ids() -> frozenset[str]:
    return frozenset(ds.section for ds in DORMANT_SECTIONS)
