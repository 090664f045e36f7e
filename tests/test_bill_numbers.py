from datetime import datetime
from decimal import Decimal

from meromart.core.billing import allocate_bill_number, next_bill_number
from meromart.models.bills import Bill
from meromart.models.store_settings import StoreSettings


def _bill(number):
    return Bill(
        bill_number=number,
        customer_name="Walk-in",
        subtotal=Decimal("10"),
        net_amount=Decimal("10"),
        date_time=datetime(2026, 1, 1, 9, 0),
        status="paid",
    )


def test_empty_store_starts_at_floor():
    assert allocate_bill_number([], "B-", 1000) == "B-1000"


def test_reuses_gap_left_by_deletion():
    assert allocate_bill_number(["B-1000", "B-1002"], "B-", 1000) == "B-1001"


def test_skips_contiguous_run():
    existing = ["B-1000", "B-1001", "B-1002"]
    assert allocate_bill_number(existing, "B-", 1000) == "B-1003"


def test_accepts_numbers_without_dash():
    assert allocate_bill_number(["B1000", "B-1001"], "B-", 1000) == "B-1002"


def test_malformed_numbers_are_ignored():
    existing = ["B-abc", "B-", "B-12x", None, ""]
    assert allocate_bill_number(existing, "B-", 1000) == "B-1000"


def test_malformed_number_does_not_raise_maximum():
    assert allocate_bill_number(["B-1000", "B-abc"], "B-", 1000) == "B-1001"


def test_other_prefix_letters_do_not_count():
    assert allocate_bill_number(["INV-1000", "b-1000"], "B-", 1000) == "B-1000"


def test_numbers_below_floor_do_not_block_floor():
    assert allocate_bill_number(["B-5", "B-999"], "B-", 1000) == "B-1000"


def test_generated_numbers_never_collide():
    existing = []
    for _ in range(25):
        number = allocate_bill_number(existing, "B-", 1000)
        assert number not in existing
        existing.append(number)

    assert len(set(existing)) == 25


def test_next_bill_number_reads_storage(db_session):
    db_session.add_all([_bill("B-1000"), _bill("B-1002"), _bill("B-oops")])
    db_session.commit()

    assert next_bill_number(db_session) == "B-1001"


def test_next_bill_number_uses_store_settings(db_session):
    db_session.add(StoreSettings(bill_prefix="S-", bill_start_number=500))
    db_session.add(_bill("S-500"))
    db_session.commit()

    assert next_bill_number(db_session) == "S-501"


def test_multi_letter_prefix_counts_its_own_numbers():
    assert allocate_bill_number(["INV-1", "INV-2"], "INV-", 1) == "INV-3"
