# This project was developed with assistance from AI tools.
"""Input snapshot and output checklist schemas."""

from .checklist import (
    BorrowerChecklist,
    ChecklistItem,
    ChecklistStats,
    DormantSection,
    GeneratedChecklist,
    InternalFlag,
    PropertyChecklist,
)
from .snapshot import (
    Address,
    Applicant,
    Application,
    ApplicationSnapshot,
    Asset,
    Borrower,
    Income,
    Liability,
    Property,
)

__all__ = [
    # Snapshot
    "Address",
    "Applicant",
    "Application",
    "ApplicationSnapshot",
    "Asset",
    "Borrower",
    "Income",
    "Liability",
    "Property",
    # Checklist
    "BorrowerChecklist",
    "ChecklistItem",
    "ChecklistStats",
    "DormantSection",
    "GeneratedChecklist",
    "InternalFlag",
    "PropertyChecklist",
]
