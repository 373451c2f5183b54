# This project was developed with assistance from AI tools.
"""Generated checklist schemas (engine output).

Renderers (email body, CRM field mapper) read these read-only and rely on
the camelCase names produced by ``model_dump(by_alias=True)``.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from ..enums import ChecklistStage, InternalFlagType


class ChecklistModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class ChecklistItem(ChecklistModel):
    """One document to collect (or, when ``for_email`` is false, to track internally)."""

    rule_id: str
    document: str
    display_name: str
    stage: ChecklistStage
    notes: str | None = None
    for_email: bool = True
    section: str


class BorrowerChecklist(ChecklistModel):
    borrower_id: str
    borrower_name: str
    is_main_borrower: bool
    items: list[ChecklistItem] = Field(default_factory=list)


class PropertyChecklist(ChecklistModel):
    property_id: str
    property_description: str
    is_subject_property: bool = False
    items: list[ChecklistItem] = Field(default_factory=list)


class InternalFlag(ChecklistModel):
    """Staff-only verification or deferred-document note. Never sent to the client."""

    rule_id: str
    description: str
    type: InternalFlagType
    borrower_id: str | None = None
    borrower_name: str | None = None
    property_id: str | None = None
    check_note: str | None = None


class ChecklistStats(ChecklistModel):
    """Summary counts over client-facing items (plus flag-only documents in the total)."""

    total_items: int = 0
    pre_items: int = 0
    full_items: int = 0
    by_stage: dict[ChecklistStage, int] = Field(default_factory=dict)
    per_borrower_items: int = 0
    by_borrower: dict[str, int] = Field(default_factory=dict)
    property_items: int = 0
    shared_items: int = 0
    internal_flags: int = 0
    warnings: int = 0
    borrower_count: int = 0
    property_count: int = 0


class GeneratedChecklist(ChecklistModel):
    """Complete checklist for one application and one reference date."""

    application_id: str
    generated_at: str
    borrower_checklists: list[BorrowerChecklist] = Field(default_factory=list)
    property_checklists: list[PropertyChecklist] = Field(default_factory=list)
    shared_items: list[ChecklistItem] = Field(default_factory=list)
    internal_flags: list[InternalFlag] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
    stats: ChecklistStats = Field(default_factory=ChecklistStats)

    def client_items(self) -> list[ChecklistItem]:
        """All client-facing items: borrowers first, then properties, then shared."""
        return [
            *(item for bc in self.borrower_checklists for item in bc.items),
            *(item for pc in self.property_checklists for item in pc.items),
            *self.shared_items,
        ]


class DormantSection(ChecklistModel):
    """A catalog section whose rules only fire after manual activation."""

    section: str
    description: str
