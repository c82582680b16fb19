"""Tests for transaction value objects: goods, price, quantity, and date."""

from __future__ import annotations

import calendar
import datetime

import pytest
from pydantic import ValidationError

from clientbook.domain.transaction import Date, Goods, Price, Quantity, format_price


class TestFormatPrice:
    @pytest.mark.parametrize(
        "amount,expected",
        [
            (0, "0.00"),
            (12.5, "12.50"),
            (1234.5, "1,234.50"),
            (999999.99, "999,999.99"),
        ],
    )
    def test_grouping_and_two_decimals(self, amount: float, expected: str) -> None:
        assert format_price(amount) == expected


class TestGoods:
    def test_valid(self) -> None:
        assert Goods.is_valid_name("Apple juice, 1L")

    @pytest.mark.parametrize("goods", ["", "   "])
    def test_invalid(self, goods: str) -> None:
        assert not Goods.is_valid_name(goods)


class TestPrice:
    @pytest.mark.parametrize("price", ["0", "12.50", "12.", ".5", "+3", "999999.99"])
    def test_valid_literals(self, price: str) -> None:
        assert Price.is_valid_price(price)

    @pytest.mark.parametrize(
        "price", ["abc", "1.2.3", "1,000", "1e3", "nan", "inf", "1_000", ".", "- 5", "$5"]
    )
    def test_not_decimal_literals(self, price: str) -> None:
        assert not Price.is_valid_price(price)

    def test_negative_detection(self) -> None:
        assert not Price.is_positive_price("-5")
        assert Price.is_positive_price("5")

    def test_small_price(self) -> None:
        assert Price.is_small_price("999999.999")
        assert not Price.is_small_price("1000000")

    def test_small_price_on_non_numeric_does_not_raise(self) -> None:
        assert not Price.is_small_price("abc")

    def test_amount_and_display(self) -> None:
        price = Price("12.50")
        assert price.amount == 12.5
        assert str(price) == "12.50"
        assert price.canonical == "12.50"

    def test_grouped_display(self) -> None:
        assert str(Price("123456.7")) == "123,456.70"

    def test_json_round_trip(self) -> None:
        price = Price("12.50")
        assert Price.model_validate_json(price.model_dump_json()) == price

    def test_model_validate_json_enforces_rules(self) -> None:
        with pytest.raises(ValidationError):
            Price.model_validate_json('{"value": "-5"}')

    def test_raw_literal_kept(self) -> None:
        """Equal amounts with different literals are different prices."""
        assert Price("12.50") != Price("12.5")
        assert Price("12.50") == Price("12.50")

    @pytest.mark.parametrize(
        "price,message",
        [
            ("", Price.MESSAGE_CONSTRAINTS_EMPTY),
            ("abc", Price.MESSAGE_CONSTRAINTS),
            ("-5", Price.MESSAGE_CONSTRAINTS_POSITIVE),
            ("2000000", Price.MESSAGE_CONSTRAINTS_LARGE),
        ],
    )
    def test_constructor_rejects(self, price: str, message: str) -> None:
        with pytest.raises(ValidationError, match=message.replace(".", r"\.")):
            Price(price)


class TestQuantity:
    def test_valid(self) -> None:
        quantity = Quantity("10")
        assert quantity.amount == 10
        assert str(quantity) == "10"

    def test_integer_literal(self) -> None:
        assert Quantity.is_valid_quantity("+5")
        assert Quantity.is_valid_quantity("-5")
        assert not Quantity.is_valid_quantity("3.5")
        assert not Quantity.is_valid_quantity("1_000")

    def test_digit_regex(self) -> None:
        assert Quantity.is_valid_quantity_regex("0042")
        assert not Quantity.is_valid_quantity_regex("+5")

    def test_small_and_non_zero(self) -> None:
        assert Quantity.is_small_quantity("999999")
        assert not Quantity.is_small_quantity("1000000")
        assert not Quantity.is_valid_quantity_non_zero("000")
        assert Quantity.is_valid_quantity_non_zero("1")

    def test_checks_on_non_numeric_do_not_raise(self) -> None:
        assert not Quantity.is_small_quantity("abc")
        assert not Quantity.is_valid_quantity_non_zero("abc")

    def test_constructor_rejects_zero(self) -> None:
        with pytest.raises(ValidationError, match="Quantity should not be zero"):
            Quantity("0")


class TestDateValidity:
    @pytest.mark.parametrize(
        "text",
        ["07/01/2024", "29/02/2024", "28/02/2023", "30/04/2024", "31/12/1999", "31/01/0001"],
    )
    def test_valid(self, text: str) -> None:
        assert Date.is_valid_date(text)

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "7/1/2024",
            "07-01-2024",
            "2024-01-07",
            "29/02/2023",
            "30/02/2024",
            "31/04/2024",
            "31/06/2024",
            "31/09/2024",
            "31/11/2024",
            "32/01/2024",
            "00/01/2024",
            "01/00/2024",
            "01/13/2024",
            "01/01/0000",
            "01/01/24",
            "01/01/20245",
            " 07/01/2024",
        ],
    )
    def test_invalid(self, text: str) -> None:
        assert not Date.is_valid_date(text)

    @pytest.mark.parametrize("year", [1900, 2100])
    def test_every_fourth_year_has_feb_29(self, year: int) -> None:
        assert Date.is_valid_date(f"29/02/{year}")

    def test_calendar_grid(self) -> None:
        for year in range(1900, 2101):
            for month in range(1, 13):
                month_days = calendar.monthrange(year, month)[1]
                for day in range(1, 32):
                    expected = day <= month_days or (month == 2 and day == 29 and year % 4 == 0)
                    text = f"{day:02d}/{month:02d}/{year}"
                    assert Date.is_valid_date(text) is expected, text


class TestDateValue:
    def test_display_and_canonical(self) -> None:
        date = Date("07/01/2024")
        assert date.value == datetime.date(2024, 1, 7)
        assert str(date) == "7 Jan 2024"
        assert date.canonical == "07/01/2024"

    def test_leap_day(self) -> None:
        assert Date("29/02/2024").value == datetime.date(2024, 2, 29)

    def test_feb_29_in_non_gregorian_leap_year_resolves_to_28th(self) -> None:
        date = Date("29/02/1900")
        assert date.value == datetime.date(1900, 2, 28)
        assert date.canonical == "28/02/1900"

    def test_iso_round_trip(self) -> None:
        date = Date("25/12/2023")
        assert date.to_iso() == "2023-12-25"
        assert Date.from_iso("2023-12-25") == date

    def test_of(self) -> None:
        assert Date.of(datetime.date(2024, 3, 1)) == Date("01/03/2024")

    def test_equality_by_calendar_date(self) -> None:
        assert Date("01/03/2024") == Date("01/03/2024")
        assert Date("01/03/2024") != Date("02/03/2024")

    def test_constructor_rejects_invalid(self) -> None:
        with pytest.raises(ValidationError, match="DD/MM/YYYY"):
            Date("31/04/2024")

    def test_model_validate_from_stored_text(self) -> None:
        assert Date.model_validate({"value": "07/01/2024"}) == Date("07/01/2024")

    def test_model_validate_rejects_iso_text(self) -> None:
        with pytest.raises(ValidationError):
            Date.model_validate({"value": "2024-01-07"})
