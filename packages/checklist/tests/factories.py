# This project was developed with assistance from AI tools.
"""Shared test factory functions for building application snapshots.

Every builder returns a real snapshot model with sensible defaults so tests
only spell out the fields they care about.
"""

from datetime import date

from checklist.schemas.snapshot import (
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

# Before the May slip release: current tax year is 2025.
REFERENCE_DATE = date(2026, 2, 15)


def make_borrower(
    id="b-main",
    first_name="Alex",
    last_name="Tremblay",
    is_main_borrower=True,
    marital="married",
    first_time=False,
    **kwargs,
):
    """Create a Borrower.

    Args:
        id: Borrower ID.
        first_name: Given name.
        last_name: Family name.
        is_main_borrower: Whether this is the main borrower.
        marital: Marital status string.
        first_time: First-time buyer flag.
        **kwargs: Any other Borrower field.

    Returns:
        Borrower model instance.
    """
    return Borrower(
        id=id,
        first_name=first_name,
        last_name=last_name,
        is_main_borrower=is_main_borrower,
        marital=marital,
        first_time=first_time,
        **kwargs,
    )


def make_co_borrower(id="b-co", first_name="Sam", last_name="Tremblay", **kwargs):
    return make_borrower(
        id=id, first_name=first_name, last_name=last_name, is_main_borrower=False, **kwargs
    )


def make_income(
    id="inc-1",
    borrower_id="b-main",
    source="employed",
    pay_type="salaried",
    job_type="full_time",
    business="Acme Corp",
    bonuses=False,
    **kwargs,
):
    """Create an Income entry (salaried full-time employment by default)."""
    return Income(
        id=id,
        borrower_id=borrower_id,
        source=source,
        pay_type=pay_type,
        job_type=job_type,
        business=business,
        bonuses=bonuses,
        **kwargs,
    )


def make_asset(
    id="asset-1",
    type="cash_savings",
    owners=("b-main",),
    value=50000.0,
    down_payment=50000.0,
    description=None,
):
    """Create an Asset contributing to the down payment by default."""
    return Asset(
        id=id,
        type=type,
        owners=list(owners),
        value=value,
        down_payment=down_payment,
        description=description,
    )


def make_liability(id="liab-1", type="unsecured_line_credit", owners=("b-main",), **kwargs):
    return Liability(id=id, type=type, owners=list(owners), **kwargs)


def make_property(
    id="prop-1",
    address_id=None,
    type="detached",
    is_selling=False,
    rental_income=None,
    mortgaged=None,
    owners=(),
    **kwargs,
):
    """Create a Property (a detached owner-occupied home by default)."""
    return Property(
        id=id,
        address_id=address_id,
        type=type,
        is_selling=is_selling,
        rental_income=rental_income,
        mortgaged=mortgaged,
        owners=list(owners),
        **kwargs,
    )


def make_address(
    id="addr-1",
    street_number="123",
    street_name="Main",
    street_type="Street",
    city="Toronto",
):
    return Address(
        id=id,
        street_number=street_number,
        street_name=street_name,
        street_type=street_type,
        city=city,
    )


def make_snapshot(
    goal="purchase",
    process="found_property",
    use="owner_occupied",
    property_id=None,
    borrowers=None,
    incomes=(),
    assets=(),
    liabilities=(),
    properties=(),
    addresses=(),
    applicant=None,
    application_id="app-1",
):
    """Create an ApplicationSnapshot.

    Args:
        goal: Application goal (purchase, refinance, renew).
        process: Application process (searching, found_property).
        use: Property use for the deal.
        property_id: Subject property ID.
        borrowers: Borrowers; defaults to a single main borrower. Pass an
            empty list for an application with no borrowers.
        incomes: Income entries.
        assets: Assets.
        liabilities: Liabilities.
        properties: Properties.
        addresses: Addresses.
        applicant: Applicant record.
        application_id: Application ID.

    Returns:
        ApplicationSnapshot model instance.
    """
    if borrowers is None:
        borrowers = [make_borrower()]
    return ApplicationSnapshot(
        application=Application(
            id=application_id,
            goal=goal,
            process=process,
            use=use,
            property_id=property_id,
        ),
        applicant=applicant,
        borrowers=list(borrowers),
        incomes=list(incomes),
        assets=list(assets),
        liabilities=list(liabilities),
        properties=list(properties),
        addresses=list(addresses),
    )


def make_applicant(id="user-1", first_name="Alex", last_name="Tremblay"):
    return Applicant(id=id, first_name=first_name, last_name=last_name)
