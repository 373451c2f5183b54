# This project was developed with assistance from AI tools.
"""
Domain enums for checklist generation.

Shared by the rule catalog, the engine, and the output schemas. Input
snapshot fields stay plain strings (the loan-origination system adds new
values without notice); these enums name the values the rules know about.
"""

import enum


class ChecklistStage(str, enum.Enum):
    PRE = "PRE"
    FULL = "FULL"
    LATER = "LATER"
    CONDITIONAL = "CONDITIONAL"
    LENDER_CONDITION = "LENDER_CONDITION"


class ChecklistScope(str, enum.Enum):
    PER_BORROWER = "per_borrower"
    PER_PROPERTY = "per_property"
    SHARED = "shared"


class InternalFlagType(str, enum.Enum):
    DEFERRED_DOC = "deferred_doc"
    INTERNAL_CHECK = "internal_check"


class ApplicationGoal(str, enum.Enum):
    PURCHASE = "purchase"
    REFINANCE = "refinance"
    RENEW = "renew"

    @classmethod
    def known_values(cls) -> frozenset[str]:
        return frozenset(g.value for g in cls)


class ApplicationProcess(str, enum.Enum):
    SEARCHING = "searching"
    FOUND_PROPERTY = "found_property"


class PropertyUse(str, enum.Enum):
    OWNER_OCCUPIED = "owner_occupied"
    RENTAL = "rental"


class IncomeSource(str, enum.Enum):
    EMPLOYED = "employed"
    SELF_EMPLOYED = "self_employed"
    # Upstream sends the hyphenated spelling on newer applications.
    SELF_EMPLOYED_HYPHEN = "self-employed"
    RETIRED = "retired"

    @classmethod
    def known_values(cls) -> frozenset[str]:
        return frozenset(s.value for s in cls)


class PayType(str, enum.Enum):
    SALARIED = "salaried"
    HOURLY = "hourly"
    COMMISSION = "commission"


class JobType(str, enum.Enum):
    FULL_TIME = "full_time"
    PART_TIME = "part_time"
    CONTRACT = "contract"


class AssetType(str, enum.Enum):
    CASH_SAVINGS = "cash_savings"
    RRSP = "rrsp"
    TFSA = "tfsa"
    VEHICLE = "vehicle"
    OTHER = "other"


class LiabilityType(str, enum.Enum):
    MORTGAGE = "mortgage"
    UNSECURED_LINE_CREDIT = "unsecured_line_credit"
    CREDIT_CARD = "credit_card"
    OTHER = "other"


class MaritalStatus(str, enum.Enum):
    SINGLE = "single"
    MARRIED = "married"
    COMMON_LAW = "common_law"
    DIVORCED = "divorced"
    SEPARATED = "separated"
    WIDOWED = "widowed"


class PropertyType(str, enum.Enum):
    DETACHED = "detached"
    SEMI_DETACHED = "semi_detached"
    TOWNHOUSE = "townhouse"
    CONDO = "condo"
