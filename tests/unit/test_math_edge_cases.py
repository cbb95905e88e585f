"""
Edge cases for the apportionment, money and unit helpers.

"""

from __future__ import annotations

from decimal import Decimal
from fractions import Fraction

import pytest

from stake_shares.library.exceptions import AllocationError, InputValidationError
from stake_shares.library.utils import (
    cents_to_money,
    from_base_units,
    is_money,
    largest_remainder,
    money_to_cents,
    to_base_units,
    to_decimal,
    truncate_to_cents,
)


class TestLargestRemainder:
    def test_exact_split_needs_no_remainder(self):
        assert largest_remainder(10, [Decimal("0.5"), Decimal("0.3"), Decimal("0.2")]) == [
            5,
            3,
            2,
        ]

    def test_ties_go_to_earlier_weights(self):
        assert largest_remainder(100, [1, 1, 1]) == [34, 33, 33]
        assert largest_remainder(2, [1, 1, 1]) == [1, 1, 0]

    def test_remainder_goes_to_largest_fraction(self):
        # quotas 1.2, 1.2, 2.6 -> floors 1, 1, 2 -> spare unit to the third
        assert largest_remainder(5, [Fraction(6, 25), Fraction(6, 25), Fraction(13, 25)]) == [
            1,
            1,
            3,
        ]

    def test_zero_weight_never_gets_units(self):
        assert largest_remainder(7, [0, 1, 0, 1]) == [0, 4, 0, 3]

    def test_zero_total(self):
        assert largest_remainder(0, [1, 2]) == [0, 0]

    def test_tiny_weights_next_to_large_ones(self):
        units = largest_remainder(10**12, [Decimal("1e-30"), Decimal("1e30")])

        assert units == [0, 10**12]

    @pytest.mark.parametrize("total", [1, 99, 12345678912, 10**20 + 7])
    def test_sum_is_exact(self, total):
        weights = [Decimal("0.999996"), Decimal("0.51"), Decimal("1e-15"), Decimal("3")]

        units = largest_remainder(total, weights)

        assert sum(units) == total
        assert all(unit >= 0 for unit in units)

    @pytest.mark.parametrize(
        "total,weights,match",
        [
            (-1, [1], "negative total"),
            (10, [], "empty list"),
            (10, [1, -1], "non-negative"),
            (10, [0, 0], "positive weight"),
        ],
    )
    def test_invalid_inputs(self, total, weights, match):
        with pytest.raises(AllocationError, match=match):
            largest_remainder(total, weights)


class TestMoney:
    @pytest.mark.parametrize(
        "amount,cents",
        [
            (Decimal("1277.12999"), 127712),
            (Decimal("0.009"), 0),
            (Decimal("0.01"), 1),
            (Decimal("470"), 47000),
            (Decimal("123456789.12"), 12345678912),
            (Decimal("0.019999999999999999999999999999999999"), 1),
        ],
    )
    def test_truncate_to_cents(self, amount, cents):
        assert truncate_to_cents(amount) == cents

    def test_cents_to_money(self):
        assert cents_to_money(0) == Decimal("0.00")
        assert str(cents_to_money(5)) == "0.05"
        assert str(cents_to_money(12345678912)) == "123456789.12"
        assert str(cents_to_money(-105)) == "-1.05"

    def test_money_round_trip_through_cents(self):
        assert money_to_cents(Decimal("4200.27")) == 420027

    def test_money_to_cents_rejects_sub_cent(self):
        with pytest.raises(InputValidationError, match="more than two fraction digits"):
            money_to_cents(Decimal("1.001"))

    @pytest.mark.parametrize(
        "value,expected",
        [
            (Decimal("1.00"), True),
            (Decimal("1.0"), False),
            (Decimal("1"), False),
            (Decimal("1.000"), False),
            (1.0, False),
            ("1.00", False),
        ],
    )
    def test_is_money(self, value, expected):
        assert is_money(value) is expected

    @pytest.mark.parametrize(
        "value,expected",
        [
            (177.77, Decimal("177.77")),
            (1738.6666666666667, Decimal("1738.6666666666667")),
            (5, Decimal("5")),
            (" 12.5 ", Decimal("12.5")),
            (Decimal("3.14"), Decimal("3.14")),
        ],
    )
    def test_to_decimal(self, value, expected):
        result = to_decimal(value)

        assert result == expected
        assert isinstance(result, Decimal)

    @pytest.mark.parametrize(
        "value,match",
        [
            (None, "value is missing"),
            (True, "booleans"),
            ("abc", "not a decimal string"),
            (float("nan"), "NaN and infinity"),
            (Decimal("Infinity"), "NaN and infinity"),
            ([1], "unsupported type list"),
        ],
    )
    def test_to_decimal_rejects(self, value, match):
        with pytest.raises(InputValidationError, match=match):
            to_decimal(value, field_name="operator_share", pool_id="7")


class TestBaseUnits:
    def test_to_base_units(self):
        assert to_base_units(Decimal("1.5")) == 1_500_000_000_000_000_000
        assert to_base_units("0.01", decimals=6) == 10_000
        assert to_base_units(Decimal("123456789.12")) == 123456789_120000000000000000

    def test_from_base_units(self):
        assert from_base_units(1_500_000_000_000_000_000) == Decimal("1.5")
        assert from_base_units(10_000, decimals=6) == Decimal("0.01")

    def test_round_trip_is_exact_at_scale(self):
        units = 98765432109876543210980000000000000000000

        assert to_base_units(from_base_units(units)) == units

    def test_too_precise_amount(self):
        with pytest.raises(InputValidationError, match="more precision"):
            to_base_units(Decimal("0.001"), decimals=2)

    @pytest.mark.parametrize("decimals", [-1, 1.5, True, 37, 10**9])
    def test_invalid_decimals(self, decimals):
        with pytest.raises(InputValidationError, match="decimals"):
            to_base_units(Decimal("1"), decimals=decimals)

    def test_negative_amount(self):
        with pytest.raises(InputValidationError, match="Negative value"):
            to_base_units(Decimal("-1"))

    def test_negative_units(self):
        with pytest.raises(InputValidationError, match="non-negative integer"):
            from_base_units(-1)

    @pytest.mark.parametrize("decimals", [-1, 37])
    def test_invalid_decimals_for_units(self, decimals):
        with pytest.raises(InputValidationError, match="between 0 and 36"):
            from_base_units(1, decimals=decimals)

    def test_units_at_supported_magnitude(self):
        amount = Decimal("9.99e1000")

        units = to_base_units(amount)

        assert from_base_units(units) == amount
        assert from_base_units(10 ** (1001 + 18) - 1) < Decimal("1e1001")

    def test_units_past_supported_magnitude(self):
        with pytest.raises(InputValidationError, match="units must be below"):
            from_base_units(10 ** (1001 + 18))
        with pytest.raises(InputValidationError, match="out of supported range"):
            to_base_units("1e1001")
