"""Tests for allocation result containers and output validation."""

from __future__ import annotations

from decimal import Decimal

import pytest
from conftest import make_pool

from stake_shares.library.allocations import AllocationEntry, AllocationPlan, allocate
from stake_shares.library.exceptions import OutputValidationError


def _plan(amounts, effective, pool_ids=None):
    if pool_ids is None:
        pool_ids = [f"pool-{i}" for i in range(len(amounts))]
    entries = [
        AllocationEntry(pool=make_pool(pool_id), zrx_amount=amount)
        for pool_id, amount in zip(pool_ids, amounts)
    ]
    return AllocationPlan(
        entries=entries,
        requested_amount=effective,
        effective_amount=effective,
        scoring_function="operator-share-fees",
    )


class TestAllocationPlan:
    def test_valid_plan(self):
        plan = _plan([Decimal("60.00"), Decimal("40.00")], Decimal("100.00"))

        assert plan.total_amount == Decimal("100.00")
        assert plan.pool_ids == ["pool-0", "pool-1"]
        assert plan.amount_for("pool-1") == Decimal("40.00")
        assert isinstance(plan.entries, tuple)
        assert not plan.is_empty

    def test_entries_list_is_converted(self):
        plan = _plan([Decimal("1.00")], Decimal("1.00"))

        assert isinstance(plan.entries, tuple)
        assert plan[0].pool_id == "pool-0"
        assert [entry.pool_id for entry in plan] == ["pool-0"]

    def test_empty_plan_for_zero(self):
        plan = _plan([], Decimal("0.00"))

        assert plan.is_empty
        assert plan.total_amount == Decimal("0.00")

    def test_amount_for_unknown_pool(self):
        plan = _plan([Decimal("1.00")], Decimal("1.00"))

        with pytest.raises(KeyError):
            plan.amount_for("nope")

    def test_sum_mismatch(self):
        with pytest.raises(OutputValidationError, match="sum to 99.99, expected 100.00"):
            _plan([Decimal("60.00"), Decimal("39.99")], Decimal("100.00"))

    def test_empty_plan_for_positive_amount(self):
        with pytest.raises(OutputValidationError, match="do not sum"):
            _plan([], Decimal("5.00"))

    @pytest.mark.parametrize(
        "amount,reason",
        [
            (Decimal("50.001"), "exactly two fraction digits"),
            (Decimal("50"), "exactly two fraction digits"),
            (50.0, "exactly two fraction digits"),
            (Decimal("-1.00"), "negative amount"),
            (Decimal("100.01"), "exceeds the effective"),
        ],
    )
    def test_invalid_amounts(self, amount, reason):
        with pytest.raises(OutputValidationError, match=reason):
            _plan([amount, Decimal("50.00")], Decimal("100.00"))

    def test_repeated_pool(self):
        with pytest.raises(OutputValidationError, match="more than once"):
            _plan(
                [Decimal("50.00"), Decimal("50.00")],
                Decimal("100.00"),
                pool_ids=["same", "same"],
            )

    def test_effective_amount_must_be_money(self):
        with pytest.raises(OutputValidationError, match="Effective amount"):
            _plan([Decimal("1.00")], Decimal("1"))

    def test_plan_is_frozen(self):
        plan = _plan([Decimal("1.00")], Decimal("1.00"))

        with pytest.raises(AttributeError):
            plan.effective_amount = Decimal("2.00")

    def test_plans_with_pool_metadata_are_hashable(self, kovan_pools):
        plan = allocate("470", kovan_pools)
        again = allocate("470", kovan_pools)

        assert hash(plan[0]) == hash(again[0])
        assert hash(plan) == hash(again)
        assert {plan, again} == {plan}
