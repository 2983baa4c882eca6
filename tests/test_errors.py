"""Tests for step results, schemas and formatting."""

from decimal import Decimal

import pytest
from pydantic import ValidationError as PydanticValidationError

from food_order_app.errors import OrderStep, StepResult, ValidationError
from food_order_app.menu import MENU, parse_food_type
from food_order_app.schemas import FoodType, PaymentResult, User, format_currency


def test_step_result_ok():
    result = StepResult.ok("Кава")

    assert result.success
    assert result.value == "Кава"
    assert result.error is None


def test_step_result_fail():
    result = StepResult.fail(OrderStep.ADDRESS, "Адреса не може бути порожньою")

    assert not result.success
    assert result.value is None
    assert result.error == ValidationError(OrderStep.ADDRESS, "Адреса не може бути порожньою")
    assert str(result.error) == "Адреса не може бути порожньою"
    assert result.error.log_message == (
        "Помилка введення адреси: Адреса не може бути порожньою"
    )


def test_menu_is_read_only():
    assert all(len(items) == 5 for items in MENU.values())
    assert set(MENU) == set(FoodType)
    with pytest.raises(TypeError):
        MENU[FoodType.PIZZA] = ("Інша",)


def test_parse_food_type():
    assert parse_food_type("Sushi") is FoodType.SUSHI
    assert parse_food_type("суші") is None
    assert parse_food_type(None) is None


def test_models_are_frozen():
    user = User(name="Олена", phone_number="123")

    with pytest.raises(PydanticValidationError):
        user.name = "Інша"


def test_payment_result_invariants():
    with pytest.raises(PydanticValidationError):
        PaymentResult(amount=Decimal("0"), card_number="4111", balance=Decimal("1"))
    with pytest.raises(PydanticValidationError):
        PaymentResult(amount=Decimal("1"), card_number="4111", balance=Decimal("-1"))


@pytest.mark.parametrize(
    "amount, expected",
    [
        (Decimal("150"), "150,00 ₴"),
        (Decimal("0.5"), "0,50 ₴"),
        (Decimal("1234567.891"), "1 234 567,89 ₴"),
    ],
)
def test_format_currency(amount, expected):
    assert format_currency(amount) == expected


@pytest.mark.parametrize(
    "amount, expected",
    [
        (Decimal("0.005"), "0,01 ₴"),
        (Decimal("2.345"), "2,35 ₴"),
        (Decimal("-0.005"), "-0,01 ₴"),
    ],
)
def test_format_currency_rounds_half_up(amount, expected):
    assert format_currency(amount) == expected
