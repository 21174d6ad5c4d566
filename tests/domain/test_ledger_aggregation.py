"""Tests for the balance and ledger aggregation functions."""

import random
from datetime import date, timedelta

import pytest

from ledger_builders import credit, debit, transfer
from src.domain.exceptions import LedgerValidationError
from src.domain.models import Account, DebitEntry, TransferEntry
from src.domain.services.ledger import (
    bucket_commitments,
    compare_to_previous_month,
    compare_values,
    compute_monthly_trend,
    compute_period_summary,
    compute_real_balances,
    directional_amounts,
    filter_by_account,
    percent_variation,
)

TODAY = date(2026, 10, 19)
ACCOUNT_IDS = ("A", "B", "C", "D")


def _random_entries(rng: random.Random, count: int) -> list:
    entries = []
    for index in range(count):
        amount = rng.randint(0, 500_000)
        kind = rng.choice(("credit", "debit", "transfer"))
        status = rng.choice(("PENDING", "CONFIRMED", "CANCELLED"))
        occurred_at = TODAY - timedelta(days=rng.randint(0, 120))
        if kind == "transfer":
            source, target = rng.sample(ACCOUNT_IDS, 2)
            entries.append(
                transfer(
                    f"t{index}",
                    amount,
                    from_account_id=source,
                    to_account_id=target,
                    occurred_at=occurred_at,
                    status=status,
                )
            )
        else:
            builder = credit if kind == "credit" else debit
            entries.append(
                builder(
                    f"e{index}",
                    amount,
                    account_id=rng.choice(ACCOUNT_IDS),
                    occurred_at=occurred_at,
                    status=status,
                )
            )
    return entries


def _signed_effect(entries, account_id: str) -> int:
    effect = 0
    for entry in entries:
        if isinstance(entry, TransferEntry):
            if entry.to_account_id == account_id:
                effect += entry.amount
            if entry.from_account_id == account_id:
                effect -= entry.amount
        elif entry.account_id == account_id:
            sign = -1 if isinstance(entry, DebitEntry) else 1
            effect += sign * entry.amount
    return effect


def _accounts() -> list[Account]:
    return [
        Account(id="A", opening_balance=100_000),
        Account(id="B", opening_balance=0),
        Account(id="C", opening_balance=25_000),
        Account(id="D", opening_balance=-5_000, account_type="CREDIT"),
    ]


def test_real_balance_equals_opening_without_entries() -> None:
    """An account with no entries keeps its opening balance."""
    balances = compute_real_balances(_accounts(), [])

    assert [item.real_balance for item in balances] == [
        100_000,
        0,
        25_000,
        -5_000,
    ]
    assert all(item.movement == 0 for item in balances)


@pytest.mark.parametrize("seed", range(10))
def test_real_balance_is_opening_plus_signed_effect(seed: int) -> None:
    """Real balance should equal opening plus the signed entry effect."""
    rng = random.Random(seed)
    entries = _random_entries(rng, rng.randint(0, 60))
    accounts = _accounts()

    balances = compute_real_balances(accounts, entries)

    for account, balance in zip(accounts, balances):
        assert balance.account_id == account.id
        assert balance.real_balance == (
            account.opening_balance + _signed_effect(entries, account.id)
        )


@pytest.mark.parametrize("seed", range(10))
def test_transfers_conserve_total_balance(seed: int) -> None:
    """Transfers move money between legs and never change the total."""
    rng = random.Random(seed)
    transfers = [
        entry
        for entry in _random_entries(rng, 40)
        if isinstance(entry, TransferEntry)
    ]
    accounts = _accounts()

    balances = compute_real_balances(accounts, transfers)

    assert sum(item.real_balance for item in balances) == sum(
        account.opening_balance for account in accounts
    )


def test_transfer_moves_amount_between_its_two_legs() -> None:
    """A transfer debits the source leg and credits the destination leg."""
    balances = compute_real_balances(
        _accounts(),
        [transfer("t1", 30_000, from_account_id="A", to_account_id="B")],
    )

    by_id = {item.account_id: item.real_balance for item in balances}
    assert by_id == {"A": 70_000, "B": 30_000, "C": 25_000, "D": -5_000}


def test_transfer_never_touches_a_third_account() -> None:
    """Only the two legs of a transfer are affected."""
    entries = [
        transfer("t1", 10_000, from_account_id="C", to_account_id="B"),
    ]

    balances = compute_real_balances(_accounts(), entries)

    by_id = {item.account_id: item.movement for item in balances}
    assert by_id == {"A": 0, "B": 10_000, "C": -10_000, "D": 0}


def test_scenario_credit_and_transfer() -> None:
    """Credit then transfer yields the expected balances and sum."""
    accounts = [
        Account(id="A", opening_balance=100_000),
        Account(id="B", opening_balance=0),
    ]
    entries = [
        credit("c1", 50_000, account_id="A"),
        transfer("t1", 30_000, from_account_id="A", to_account_id="B"),
    ]

    balances = compute_real_balances(accounts, entries)

    assert [item.real_balance for item in balances] == [120_000, 30_000]
    assert sum(item.real_balance for item in balances) == 150_000


def test_real_balances_preserve_account_order_and_inputs() -> None:
    """Results follow the account order and inputs are left untouched."""
    accounts = list(reversed(_accounts()))
    entries = [credit("c1", 10, account_id="D")]
    snapshot = list(entries)

    balances = compute_real_balances(accounts, entries)

    assert [item.account_id for item in balances] == ["D", "C", "B", "A"]
    assert entries == snapshot


def test_real_balances_reject_negative_amount() -> None:
    """Malformed entries reject the whole input."""
    with pytest.raises(LedgerValidationError) as excinfo:
        compute_real_balances(_accounts(), [credit("bad", -1)])

    assert excinfo.value.entry_id == "bad"


def test_real_balances_reject_transfer_to_same_account() -> None:
    """A transfer whose legs are identical is rejected."""
    with pytest.raises(LedgerValidationError, match="different accounts"):
        compute_real_balances(
            _accounts(),
            [transfer("t1", 100, from_account_id="A", to_account_id="A")],
        )


def test_period_summary_excludes_transfers_for_all_accounts() -> None:
    """Combined view ignores transfers because their legs cancel."""
    entries = [
        transfer("t1", 30_000),
        transfer("t2", 5_000, from_account_id="B", to_account_id="C"),
    ]

    summary = compute_period_summary(
        entries,
        date(2026, 10, 1),
        date(2026, 10, 31),
    )

    assert summary.total_credit == 0
    assert summary.total_debit == 0
    assert summary.count == 0


def test_period_summary_counts_transfer_legs_for_selected_account() -> None:
    """Selected account sees incoming legs as credit, outgoing as debit."""
    entries = [
        credit("c1", 1_000, account_id="A"),
        debit("d1", 400, account_id="B"),
        transfer("t1", 300, from_account_id="A", to_account_id="B"),
        transfer("t2", 200, from_account_id="B", to_account_id="A"),
        transfer("t3", 999, from_account_id="C", to_account_id="D"),
    ]

    summary = compute_period_summary(
        entries,
        date(2026, 10, 1),
        date(2026, 10, 31),
        account_id="A",
    )

    assert summary.total_credit == 1_200
    assert summary.total_debit == 300
    assert summary.net == 900
    assert summary.count == 3


def test_period_summary_window_is_inclusive() -> None:
    """Entries on both window edges count, outside ones do not."""
    entries = [
        credit("before", 1, occurred_at=date(2026, 9, 30)),
        credit("first", 10, occurred_at=date(2026, 10, 1)),
        debit("last", 100, occurred_at=date(2026, 10, 31)),
        debit("after", 1_000, occurred_at=date(2026, 11, 1)),
    ]

    summary = compute_period_summary(
        entries,
        date(2026, 10, 1),
        date(2026, 10, 31),
    )

    assert summary.total_credit == 10
    assert summary.total_debit == 100
    assert summary.count == 2


def test_period_summary_splits_confirmed_and_pending() -> None:
    """Confirmed and pending totals exclude cancelled entries."""
    entries = [
        credit("c1", 500, status="CONFIRMED"),
        debit("d1", 200, status="PENDING"),
        debit("d2", 50, status="CANCELLED"),
    ]

    summary = compute_period_summary(
        entries,
        date(2026, 10, 1),
        date(2026, 10, 31),
    )

    assert summary.total_confirmed == 500
    assert summary.total_pending == 200
    assert summary.total_credit == 500
    assert summary.total_debit == 250
    assert summary.total_confirmed + summary.total_pending <= (
        summary.total_credit + summary.total_debit
    )


def test_period_summary_empty_window() -> None:
    summary = compute_period_summary([], date(2026, 10, 1), date(2026, 10, 31))

    assert summary.total_credit == 0
    assert summary.total_debit == 0
    assert summary.total_confirmed == 0
    assert summary.total_pending == 0
    assert summary.count == 0


def test_monthly_trend_returns_points_oldest_first() -> None:
    """Trend covers the requested months ending at the reference month."""
    entries = [
        credit("c1", 100, occurred_at=date(2026, 8, 5)),
        debit("d1", 40, occurred_at=date(2026, 9, 30)),
        credit("c2", 70, occurred_at=date(2026, 10, 1)),
        debit("d2", 10, occurred_at=date(2026, 7, 31)),
        transfer("t1", 5_000, occurred_at=date(2026, 10, 2)),
    ]

    points = compute_monthly_trend(entries, 3, TODAY)

    assert [point.label for point in points] == ["ago/26", "set/26", "out/26"]
    assert [(point.year, point.month) for point in points] == [
        (2026, 8),
        (2026, 9),
        (2026, 10),
    ]
    assert [point.total_credit for point in points] == [100, 0, 70]
    assert [point.total_debit for point in points] == [0, 40, 0]


def test_monthly_trend_crosses_year_boundary() -> None:
    points = compute_monthly_trend([], 3, date(2027, 1, 15))

    assert [point.label for point in points] == ["nov/26", "dez/26", "jan/27"]


def test_monthly_trend_for_selected_account_includes_transfer_legs() -> None:
    entries = [
        transfer("t1", 300, from_account_id="A", to_account_id="B"),
    ]

    points = compute_monthly_trend(entries, 1, TODAY, account_id="B")

    assert len(points) == 1
    assert points[0].total_credit == 300
    assert points[0].total_debit == 0


def test_monthly_trend_rejects_empty_range() -> None:
    with pytest.raises(ValueError, match="months_back"):
        compute_monthly_trend([], 0, TODAY)


@pytest.mark.parametrize(
    ("current", "previous", "expected"),
    [
        (500, 0, 100.0),
        (0, 0, 0.0),
        (100, 200, -50.0),
        (300, 200, 50.0),
        (0, 200, -100.0),
    ],
)
def test_percent_variation(current: int, previous: int, expected: float) -> None:
    """Zero baselines resolve to 100 or 0 and never divide by zero."""
    assert percent_variation(current, previous) == pytest.approx(expected)


def test_compare_values_keeps_both_values() -> None:
    result = compare_values(150, 100)

    assert result.current_value == 150
    assert result.previous_value == 100
    assert result.difference == 50
    assert result.percent_variation == pytest.approx(50.0)


def test_compare_to_previous_month() -> None:
    """Receivable and payable compare credits and debits month over month."""
    entries = [
        credit("c-prev", 0, occurred_at=date(2026, 9, 10)),
        credit("c-now", 500, occurred_at=date(2026, 10, 3)),
        debit("d-prev", 200, occurred_at=date(2026, 9, 1)),
        debit("d-now", 100, occurred_at=date(2026, 10, 31)),
        debit("d-old", 999, occurred_at=date(2026, 8, 31)),
    ]

    comparison = compare_to_previous_month(entries, TODAY)

    assert comparison.receivable.current_value == 500
    assert comparison.receivable.previous_value == 0
    assert comparison.receivable.percent_variation == 100.0
    assert comparison.payable.current_value == 100
    assert comparison.payable.previous_value == 200
    assert comparison.payable.percent_variation == pytest.approx(-50.0)


def test_compare_to_previous_month_in_january_uses_december() -> None:
    entries = [
        credit("c-dec", 200, occurred_at=date(2026, 12, 20)),
        credit("c-jan", 100, occurred_at=date(2027, 1, 2)),
    ]

    comparison = compare_to_previous_month(entries, date(2027, 1, 15))

    assert comparison.receivable.previous_value == 200
    assert comparison.receivable.current_value == 100


def test_compare_to_previous_month_with_no_activity() -> None:
    comparison = compare_to_previous_month([], TODAY)

    assert comparison.receivable.percent_variation == 0.0
    assert comparison.payable.percent_variation == 0.0


def test_bucket_commitments_boundaries() -> None:
    """Today goes to due_today, earlier pending dates go to overdue."""
    yesterday = TODAY - timedelta(days=1)
    due = debit("due", 100, occurred_at=TODAY, status="PENDING")
    late = debit("late", 200, occurred_at=yesterday, status="PENDING")
    settled = debit("settled", 300, occurred_at=yesterday, status="CONFIRMED")
    cancelled = credit("void", 50, occurred_at=yesterday, status="CANCELLED")
    future = credit(
        "future",
        400,
        occurred_at=TODAY + timedelta(days=1),
        status="PENDING",
    )

    buckets = bucket_commitments(
        [due, late, settled, cancelled, future],
        TODAY,
    )

    assert buckets.due_today == [due]
    assert buckets.overdue == [late]


def test_bucket_commitments_preserves_input_order() -> None:
    first = credit("1", 10, occurred_at=date(2026, 10, 1), status="PENDING")
    second = debit("2", 10, occurred_at=date(2026, 9, 1), status="PENDING")
    third = credit("3", 10, occurred_at=date(2026, 10, 5), status="PENDING")

    buckets = bucket_commitments([first, second, third], TODAY)

    assert [entry.id for entry in buckets.overdue] == ["1", "2", "3"]


def test_bucket_commitments_for_selected_account() -> None:
    own = debit("own", 10, account_id="A", occurred_at=TODAY, status="PENDING")
    other = debit(
        "other", 10, account_id="B", occurred_at=TODAY, status="PENDING"
    )
    leg = transfer(
        "leg",
        10,
        from_account_id="C",
        to_account_id="A",
        occurred_at=TODAY,
        status="PENDING",
    )

    buckets = bucket_commitments([own, other, leg], TODAY, account_id="A")

    assert buckets.due_today == [own, leg]
    assert buckets.overdue == []


def test_filter_by_account_matches_credit_and_transfer_legs() -> None:
    entries = [
        credit("c1", 1, account_id="A"),
        debit("d1", 1, account_id="B"),
        transfer("t1", 1, from_account_id="B", to_account_id="A"),
        transfer("t2", 1, from_account_id="B", to_account_id="C"),
    ]

    assert [entry.id for entry in filter_by_account(entries, "A")] == [
        "c1",
        "t1",
    ]
    assert filter_by_account(entries, None) == entries


def test_directional_amounts() -> None:
    leg = transfer("t1", 300, from_account_id="A", to_account_id="B")

    assert directional_amounts(leg, None) is None
    assert directional_amounts(leg, "A") == (0, 300)
    assert directional_amounts(leg, "B") == (300, 0)
    assert directional_amounts(leg, "C") is None
    assert directional_amounts(credit("c1", 5), None) == (5, 0)
    assert directional_amounts(debit("d1", 5), "A") == (0, 5)
    assert directional_amounts(debit("d1", 5), "B") is None
