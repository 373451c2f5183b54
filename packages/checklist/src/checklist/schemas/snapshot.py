# This project was developed with assistance from AI tools.
"""Application snapshot schemas (engine input).

Mirrors the subset of the loan-origination API response that checklist
rules read. Field names accept the upstream camelCase JSON; unknown fields
(including SIN numbers) are dropped on validation and never reach the engine.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class SnapshotModel(BaseModel):
    """Base for immutable snapshot records parsed from camelCase JSON."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )


class Application(SnapshotModel):
    """Top-level application record -- deal type, goal, and subject property link."""

    id: str
    goal: str | None = None
    use: str | None = None
    process: str | None = None
    property_id: str | None = None
    down_payment: float | None = None
    purchase_price: float | None = None
    closing_date: str | None = None
    subject_property_province: str | None = None


class Applicant(SnapshotModel):
    """The user who started the application -- usually the main borrower."""

    id: str
    first_name: str = ""
    last_name: str = ""
    email: str | None = None


class Borrower(SnapshotModel):
    id: str
    first_name: str = ""
    last_name: str = ""
    email: str | None = None
    first_time: bool | None = False
    marital: str | None = None
    is_main_borrower: bool = False
    relationship_to_main_borrower: str | None = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()


class Income(SnapshotModel):
    """Income entry owned by exactly one borrower."""

    id: str
    borrower_id: str
    source: str | None = None
    pay_type: str | None = None
    job_type: str | None = None
    bonuses: bool | None = False
    business: str | None = None
    title: str | None = None
    business_type: str | None = None
    self_pay_type: list[Any] | None = None
    active: bool = True
    income: float | None = None


class Asset(SnapshotModel):
    """Asset owned by one or more borrowers -- drives down payment rules."""

    id: str
    type: str | None = None
    value: float | None = None
    down_payment: float | None = None
    description: str | None = None
    owners: list[str] = Field(default_factory=list)
    visibility: str | None = None


class Liability(SnapshotModel):
    id: str
    type: str | None = None
    balance: float | None = None
    monthly_payment: float | None = None
    description: str | None = None
    owners: list[str] = Field(default_factory=list)


class Property(SnapshotModel):
    """Property on the application -- subject, rental, or being sold."""

    id: str
    address_id: str | None = None
    is_selling: bool | None = False
    type: str | None = None
    tenure: str | None = None
    number_of_units: int | None = None
    monthly_fees: float | None = None
    rental_income: float | None = None
    use: str | None = None
    mortgaged: bool | None = None
    owners: list[str] = Field(default_factory=list)


class Address(SnapshotModel):
    id: str
    street_number: str | None = None
    street_name: str | None = None
    street_type: str | None = None
    city: str | None = None


class ApplicationSnapshot(SnapshotModel):
    """Complete input for one checklist run."""

    application: Application
    applicant: Applicant | None = None
    borrowers: list[Borrower] = Field(default_factory=list)
    incomes: list[Income] = Field(default_factory=list)
    assets: list[Asset] = Field(default_factory=list)
    liabilities: list[Liability] = Field(default_factory=list)
    properties: list[Property] = Field(default_factory=list)
    addresses: list[Address] = Field(default_factory=list)
