# This project was developed with assistance from AI tools.
"""End-to-end tests for checklist generation."""

from datetime import date

import pytest

from checklist.engine import RuleEvaluationError, generate_checklist
from checklist.enums import ChecklistScope, ChecklistStage, InternalFlagType
from checklist.rules import ALL_RULES
from checklist.rules.base import ChecklistRule, always
from factories import (
    REFERENCE_DATE,
    make_address,
    make_asset,
    make_borrower,
    make_co_borrower,
    make_income,
    make_liability,
    make_property,
    make_snapshot,
)


def _generate(**snapshot_kwargs):
    return generate_checklist(make_snapshot(**snapshot_kwargs), reference_date=REFERENCE_DATE)


def _borrower_ids(checklist, borrower_id):
    bc = next(bc for bc in checklist.borrower_checklists if bc.borrower_id == borrower_id)
    return [item.rule_id for item in bc.items]


def _shared_ids(checklist):
    return [item.rule_id for item in checklist.shared_items]


def _flag_ids(checklist):
    return [flag.rule_id for flag in checklist.internal_flags]


def _all_client_ids(checklist):
    return [item.rule_id for item in checklist.client_items()]


# ---------------------------------------------------------------------------
# Scenarios
# ---------------------------------------------------------------------------


class TestScenarioSalariedPurchase:
    """Single employed borrower, purchase, cash-savings down payment."""

    @pytest.fixture
    def checklist(self):
        return _generate(incomes=[make_income()], assets=[make_asset(type="cash_savings")])

    def test_savings_statement_shared(self, checklist):
        assert "s14_savings_bank" in _shared_ids(checklist)
        assert "s14_large_deposit" in _shared_ids(checklist)

    def test_no_registered_account_rules(self, checklist):
        ids = _all_client_ids(checklist)
        assert "s14_rrsp_statement" not in ids
        assert "s14_tfsa_statement" not in ids

    def test_borrower_items_in_catalog_order(self, checklist):
        assert _borrower_ids(checklist, "b-main") == [
            "s0_photo_id",
            "s0_second_id",
            "s1_paystub",
            "s1_loe",
            "s1_t4_previous",
            "s1_t4_current",
            "s1_noa_previous",
            "s1_noa_current",
        ]

    def test_shared_items(self, checklist):
        assert _shared_ids(checklist) == [
            "s0_void_cheque",
            "s14_savings_bank",
            "s14_large_deposit",
            "s15_purchase_offer",
            "s15_purchase_mls",
        ]

    def test_labels_use_reference_date(self, checklist):
        bc = checklist.borrower_checklists[0]
        names = {item.rule_id: item.display_name for item in bc.items}
        assert names["s1_t4_previous"] == "2024 T4"
        assert names["s1_t4_current"] == "2025 T4"

    def test_employer_note(self, checklist):
        bc = checklist.borrower_checklists[0]
        paystub = next(item for item in bc.items if item.rule_id == "s1_paystub")
        assert paystub.notes == "From Acme Corp"

    def test_no_internal_flags_or_warnings(self, checklist):
        assert checklist.internal_flags == []
        assert checklist.warnings == []
        assert checklist.property_checklists == []

    def test_metadata(self, checklist):
        assert checklist.application_id == "app-1"
        assert checklist.generated_at == "2026-02-15"
        assert checklist.borrower_checklists[0].borrower_name == "Alex Tremblay"


class TestScenarioRegisteredAccounts:
    """RRSP on the main borrower, TFSA on the co-borrower."""

    @pytest.fixture
    def checklist(self):
        return _generate(
            borrowers=[make_borrower(), make_co_borrower()],
            assets=[
                make_asset(id="a-rrsp", type="rrsp", owners=("b-main",)),
                make_asset(id="a-tfsa", type="tfsa", owners=("b-co",)),
            ],
        )

    def test_rrsp_only_for_owner(self, checklist):
        assert "s14_rrsp_statement" in _borrower_ids(checklist, "b-main")
        assert "s14_rrsp_statement" not in _borrower_ids(checklist, "b-co")

    def test_tfsa_only_for_owner(self, checklist):
        assert "s14_tfsa_statement" in _borrower_ids(checklist, "b-co")
        assert "s14_tfsa_statement" not in _borrower_ids(checklist, "b-main")

    def test_not_in_shared(self, checklist):
        assert "s14_rrsp_statement" not in _shared_ids(checklist)


class TestScenarioGift:
    """Gift down payment, with and without an accepted offer."""

    @staticmethod
    def _gift(process):
        return _generate(
            process=process,
            assets=[make_asset(type="other", description="Gift from parents")],
        )

    def test_found_property_requests_proof_of_funds(self):
        assert "s14_gift_proof_of_funds" in _shared_ids(self._gift("found_property"))

    def test_searching_holds_back_proof_of_funds(self):
        shared = _shared_ids(self._gift("searching"))
        assert "s14_gift_proof_of_funds" not in shared
        assert "s14_gift_donor_info" in shared
        assert "s14_gift_amount" in shared

    @pytest.mark.parametrize("process", ["found_property", "searching"])
    def test_gift_letter_internal_only(self, process):
        checklist = self._gift(process)
        assert "s14_gift_letter" not in _all_client_ids(checklist)
        flag = next(f for f in checklist.internal_flags if f.rule_id == "s14_gift_letter")
        assert flag.type == InternalFlagType.INTERNAL_CHECK
        assert "lender" in flag.check_note


# ---------------------------------------------------------------------------
# Scope and dedup properties
# ---------------------------------------------------------------------------


def test_co_borrowers_each_get_their_own_item():
    checklist = _generate(
        borrowers=[make_borrower(), make_co_borrower()],
        incomes=[
            make_income(id="i1", borrower_id="b-main"),
            make_income(id="i2", borrower_id="b-co", business="Globex"),
        ],
    )
    assert "s1_paystub" in _borrower_ids(checklist, "b-main")
    assert "s1_paystub" in _borrower_ids(checklist, "b-co")
    assert checklist.stats.by_borrower["b-co"] == len(_borrower_ids(checklist, "b-co"))


def test_two_jobs_merge_into_one_request():
    checklist = _generate(
        incomes=[
            make_income(id="i1", business="Acme Corp"),
            make_income(id="i2", business="Globex", pay_type="hourly_guaranted"),
        ]
    )
    items = checklist.borrower_checklists[0].items
    paystubs = [item for item in items if item.rule_id == "s1_paystub"]
    assert len(paystubs) == 1
    assert paystubs[0].notes == "From Acme Corp / From Globex"


def test_each_bucket_unique_by_rule_id():
    checklist = _generate(
        goal="refinance",
        use="rental",
        property_id="prop-1",
        borrowers=[make_borrower(marital="divorced", first_time=True), make_co_borrower()],
        incomes=[
            make_income(id="i1"),
            make_income(id="i2", business="Globex"),
            make_income(id="i3", pay_type="commission"),
            make_income(id="i4", borrower_id="b-co", source="self_employed"),
        ],
        liabilities=[make_liability(), make_liability(id="liab-2")],
        properties=[
            make_property(id="prop-1", type="condo", number_of_units=2),
            make_property(id="prop-2", rental_income=1200),
            make_property(id="prop-3", rental_income=900),
        ],
    )
    buckets = [
        *(bc.items for bc in checklist.borrower_checklists),
        *(pc.items for pc in checklist.property_checklists),
        checklist.shared_items,
    ]
    for items in buckets:
        ids = [item.rule_id for item in items]
        assert len(ids) == len(set(ids))


def test_idempotent():
    snapshot = make_snapshot(
        borrowers=[make_borrower(), make_co_borrower()],
        incomes=[make_income(), make_income(id="i2", business="Globex")],
        assets=[make_asset(description="gift")],
        properties=[make_property(rental_income=1000)],
    )
    first = generate_checklist(snapshot, reference_date=REFERENCE_DATE)
    second = generate_checklist(snapshot, reference_date=REFERENCE_DATE)
    assert first.model_dump_json() == second.model_dump_json()


# ---------------------------------------------------------------------------
# Exclusion and routing
# ---------------------------------------------------------------------------


def test_searching_excludes_purchase_offer():
    """Matched purchase rule vetoed while the borrower is still searching."""
    shared = _shared_ids(_generate(process="searching"))
    assert "s15_purchase_offer" not in shared
    assert "s15_purchase_mls" not in shared


def test_refinance_skips_down_payment():
    checklist = _generate(goal="refinance", assets=[make_asset(description="gift")])
    ids = _all_client_ids(checklist) + _flag_ids(checklist)
    assert not any(rule_id.startswith("s14_") for rule_id in ids)
    assert "s15_refi_mortgage" in _shared_ids(checklist)


def test_internal_items_never_client_facing():
    checklist = _generate(
        borrowers=[make_borrower(first_time=True)],
        incomes=[make_income(source="self_employed")],
        assets=[make_asset(description="gift")],
        properties=[make_property(rental_income=1500)],
    )
    internal_ids = {r.id for r in ALL_RULES if r.internal_only}
    assert not internal_ids & set(_all_client_ids(checklist))
    assert {"s4_t2125_check", "s10_t776_check", "s14_gift_letter", "s17_ftb_flag"} <= set(
        _flag_ids(checklist)
    )
    assert all(item.for_email for item in checklist.client_items())


def test_internal_flag_carries_borrower():
    checklist = _generate(borrowers=[make_borrower(first_time=True)])
    flag = next(f for f in checklist.internal_flags if f.rule_id == "s17_ftb_flag")
    assert flag.borrower_id == "b-main"
    assert flag.borrower_name == "Alex Tremblay"
    assert flag.property_id is None


def test_incorporated_lender_condition_and_check_note():
    checklist = _generate(
        incomes=[make_income(source="self_employed", business_type="Corporation")]
    )
    borrower_ids = _borrower_ids(checklist, "b-main")
    flags = {f.rule_id: f for f in checklist.internal_flags}

    # Lender condition: deferred, never emailed
    assert "s5_business_bank" not in borrower_ids
    assert flags["s5_business_bank"].type == InternalFlagType.DEFERRED_DOC

    # Client item that also needs a staff check
    assert "s5_t2_schedule50" in borrower_ids
    assert flags["s5_t2_schedule50"].type == InternalFlagType.INTERNAL_CHECK


# ---------------------------------------------------------------------------
# Properties
# ---------------------------------------------------------------------------


class TestPropertyChecklists:
    def test_rental_property_items(self):
        checklist = _generate(
            properties=[
                make_property(id="prop-1"),
                make_property(
                    id="prop-2", address_id="addr-1", rental_income=1800, mortgaged=True
                ),
            ],
            property_id="prop-1",
            addresses=[make_address()],
        )
        assert len(checklist.property_checklists) == 1
        pc = checklist.property_checklists[0]
        assert pc.property_id == "prop-2"
        assert pc.property_description == "123 Main Street, Toronto"
        assert pc.is_subject_property is False
        assert [item.rule_id for item in pc.items] == [
            "s10_rental_lease",
            "s10_rental_tax",
            "s10_rental_mortgage",
        ]

    def test_rental_t1_per_borrower(self):
        checklist = _generate(properties=[make_property(rental_income=1800)])
        assert "s10_rental_t1" in _borrower_ids(checklist, "b-main")

    def test_unmortgaged_rental_skips_mortgage_statement(self):
        checklist = _generate(properties=[make_property(rental_income=1800, mortgaged=False)])
        ids = [item.rule_id for item in checklist.property_checklists[0].items]
        assert "s10_rental_mortgage" not in ids

    def test_tax_bill_excluded_when_all_rentals_selling(self):
        checklist = _generate(properties=[make_property(rental_income=1800, is_selling=True)])
        ids = [item.rule_id for item in checklist.property_checklists[0].items]
        assert "s10_rental_lease" in ids
        assert "s10_rental_tax" not in ids

    def test_fallback_descriptions(self):
        checklist = _generate(
            property_id="prop-1",
            properties=[
                make_property(id="prop-1", number_of_units=3),
                make_property(id="prop-2", rental_income=1000),
                make_property(id="prop-3", rental_income=1000),
            ],
        )
        descriptions = [pc.property_description for pc in checklist.property_checklists]
        assert descriptions == [
            "Subject Property",
            "Additional Property 1",
            "Additional Property 2",
        ]
        assert checklist.property_checklists[0].is_subject_property is True

    def test_multi_unit_appraisal_deferred_with_property(self):
        checklist = _generate(
            property_id="prop-1", properties=[make_property(id="prop-1", number_of_units=2)]
        )
        pc = checklist.property_checklists[0]
        assert [item.rule_id for item in pc.items] == ["s15_multiunit_leases"]
        flag = next(f for f in checklist.internal_flags if f.rule_id == "s15_multiunit_appraisal")
        assert flag.type == InternalFlagType.DEFERRED_DOC
        assert flag.property_id == "prop-1"

    def test_property_without_items_not_listed(self):
        checklist = _generate(properties=[make_property()])
        assert checklist.property_checklists == []
        assert checklist.stats.property_count == 1


# ---------------------------------------------------------------------------
# Warnings and stats
# ---------------------------------------------------------------------------


class TestWarnings:
    def test_subject_property_not_found(self):
        checklist = _generate(property_id="missing", properties=[make_property()])
        assert any("missing" in w for w in checklist.warnings)

    def test_unknown_goal(self):
        checklist = _generate(goal="transfer")
        assert any("transfer" in w for w in checklist.warnings)

    def test_unknown_income_source_by_id_only(self):
        checklist = _generate(incomes=[make_income(id="inc-9", source="gig")])
        warning = next(w for w in checklist.warnings if "inc-9" in w)
        assert "gig" in warning
        assert "Alex" not in warning

    def test_no_borrowers(self):
        checklist = _generate(borrowers=[])
        assert checklist.borrower_checklists == []
        assert checklist.shared_items == []
        assert checklist.warnings
        assert checklist.stats.total_items == 0


def test_stats():
    checklist = _generate(
        borrowers=[make_borrower(first_time=True), make_co_borrower()],
        assets=[make_asset()],
    )
    stats = checklist.stats
    client = checklist.client_items()
    assert stats.total_items == len(client) + len(checklist.internal_flags)
    assert stats.pre_items == sum(1 for i in client if i.stage == ChecklistStage.PRE)
    assert stats.full_items == sum(1 for i in client if i.stage == ChecklistStage.FULL)
    assert set(stats.by_stage) == set(ChecklistStage)
    assert sum(stats.by_stage.values()) == len(client)
    assert stats.per_borrower_items == sum(stats.by_borrower.values())
    assert stats.shared_items == len(checklist.shared_items)
    assert stats.internal_flags == 1
    assert stats.borrower_count == 2


def test_stats_counts_checked_client_document_once():
    """An incorporated borrower's Schedule 50 is both a client item and a check flag."""
    checklist = _generate(
        incomes=[
            make_income(source="self_employed", pay_type=None, business_type="Corporation")
        ],
    )
    client_ids = {item.rule_id for item in checklist.client_items()}
    flag_ids = [flag.rule_id for flag in checklist.internal_flags]
    assert "s5_t2_schedule50" in client_ids
    assert "s5_t2_schedule50" in flag_ids

    flag_only = [rule_id for rule_id in flag_ids if rule_id not in client_ids]
    assert checklist.stats.total_items == len(checklist.client_items()) + len(flag_only)
    assert checklist.stats.internal_flags == len(flag_ids)


def test_camel_case_output():
    dumped = _generate().model_dump(mode="json", by_alias=True)
    assert "borrowerChecklists" in dumped
    assert "ruleId" in dumped["borrowerChecklists"][0]["items"][0]
    assert "preItems" in dumped["stats"]


# ---------------------------------------------------------------------------
# Errors and defaults
# ---------------------------------------------------------------------------


def _raising_rule(**overrides):
    fields = dict(
        id="t_boom",
        section="test",
        document="Boom",
        display_name="Boom",
        stage=ChecklistStage.PRE,
        scope=ChecklistScope.SHARED,
        condition=lambda ctx: 1 / 0,
    )
    fields.update(overrides)
    return ChecklistRule(**fields)


def test_raising_condition_fails_fast():
    with pytest.raises(RuleEvaluationError) as exc_info:
        generate_checklist(make_snapshot(), rules=[_raising_rule()], reference_date=REFERENCE_DATE)
    assert exc_info.value.rule_id == "t_boom"
    assert exc_info.value.phase == "condition"
    assert isinstance(exc_info.value.__cause__, ZeroDivisionError)


def test_raising_exclusion_fails_fast():
    rule = _raising_rule(condition=always, exclude_when=lambda ctx: ctx.missing_field)
    with pytest.raises(RuleEvaluationError) as exc_info:
        generate_checklist(make_snapshot(), rules=[rule], reference_date=REFERENCE_DATE)
    assert exc_info.value.phase == "exclude_when"


def test_exclusion_not_evaluated_when_condition_false():
    rule = _raising_rule(condition=lambda ctx: False, exclude_when=lambda ctx: 1 / 0)
    checklist = generate_checklist(make_snapshot(), rules=[rule], reference_date=REFERENCE_DATE)
    assert checklist.shared_items == []


def test_custom_rule_subset():
    rules = [r for r in ALL_RULES if r.section == "0_base_pack"]
    checklist = generate_checklist(make_snapshot(), rules=rules, reference_date=REFERENCE_DATE)
    assert _all_client_ids(checklist) == ["s0_photo_id", "s0_second_id", "s0_void_cheque"]


def test_defaults_to_today():
    checklist = generate_checklist(make_snapshot())
    assert checklist.generated_at == date.today().isoformat()
