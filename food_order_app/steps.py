"""
Ordering Steps

The six steps of the ordering walkthrough. Each step prompts through a
Console, validates what it reads and returns a StepResult; none of them
raises for bad input. Only food-type selection retries, all other steps
fail on the first invalid answer.

Author: Khalil_Bannouri
Version: 1.0.0
"""

import logging
import re
from decimal import Decimal
from typing import Optional

from pydantic import ValidationError as PydanticValidationError

from food_order_app.console import Console
from food_order_app.errors import OrderStep, StepResult
from food_order_app.menu import FOOD_TYPE_LABELS, MENU, parse_food_type
from food_order_app.schemas import (
    FoodType,
    Order,
    PaymentResult,
    User,
    format_currency,
)
from food_order_app.services.payment.base import BasePaymentService

logger = logging.getLogger(__name__)

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
_DECIMAL_RE = re.compile(r"[+-]?(?:[0-9]+(?:[.,][0-9]*)?|[.,][0-9]+)")

# Largest accepted power of ten in an amount or balance
MAX_AMOUNT_EXPONENT = 15


# =============================================================================
# INPUT PARSING
# =============================================================================

def parse_decimal(text: Optional[str]) -> Optional[Decimal]:
    """
    Parse a plain decimal amount, accepting ``.`` or ``,`` as the separator.

    Exponent notation, digit separators and non-ASCII digits are rejected,
    as are values of 10**16 and above.

    Returns:
        The value, or None when the text is absent, malformed or too large
    """
    if text is None:
        return None
    text = text.strip()
    if not _DECIMAL_RE.fullmatch(text):
        return None
    value = Decimal(text.replace(",", "."))
    if value and value.adjusted() > MAX_AMOUNT_EXPONENT:
        return None
    return value


def parse_choice(text: Optional[str]) -> Optional[int]:
    """Parse a menu number; surrounding whitespace is allowed."""
    if text is None:
        return None
    text = text.strip()
    if not _INTEGER_RE.fullmatch(text):
        return None
    return int(text)


# =============================================================================
# STEPS
# =============================================================================

def register_user(console: Console) -> StepResult[User]:
    name = console.ask("Введіть ваше ім'я:")
    phone_number = console.ask("Введіть ваш номер телефону:")

    try:
        user = User(name=name, phone_number=phone_number)
    except PydanticValidationError:
        return StepResult.fail(
            OrderStep.REGISTRATION,
            "Ім'я або номер телефону не можуть бути порожніми",
        )
    return StepResult.ok(user)


def choose_food_type(console: Console) -> StepResult[FoodType]:
    """
    Ask for a food category until a valid one is given.

    There is no retry limit. End of input ends the step with an error
    since no further answer can arrive.
    """
    labels = ", ".join(
        f"{label} - {food_type.value}" for food_type, label in FOOD_TYPE_LABELS.items()
    )

    while True:
        answer = console.ask(f"Оберіть тип їжі ({labels}):")
        if answer is None:
            return StepResult.fail(
                OrderStep.FOOD_TYPE,
                "Введення завершено до вибору типу їжі",
            )

        food_type = parse_food_type(answer)
        if food_type is not None:
            return StepResult.ok(food_type)

        logger.debug(f"Rejected food type: {answer!r}")
        console.say("Невірний тип їжі. Спробуйте ще раз")


def choose_menu_item(console: Console, food_type: str) -> StepResult[str]:
    """
    Show the numbered menu of a category and read the chosen number.

    Args:
        console: Console to prompt through
        food_type: Category identifier (pizza, burger, sushi or drinks)
    """
    try:
        category = FoodType(food_type)
    except ValueError:
        return StepResult.fail(OrderStep.MENU_ITEM, "Невірний тип їжі")

    menu = MENU[category]

    console.say(f"Оберіть страву з меню {category.value}:")
    for number, item in enumerate(menu, start=1):
        console.say(f"{number}. {item}")

    choice = parse_choice(console.read())
    if choice is None or not 1 <= choice <= len(menu):
        return StepResult.fail(OrderStep.MENU_ITEM, "Невірний вибір страви")

    return StepResult.ok(menu[choice - 1])


def enter_delivery_address(console: Console) -> StepResult[str]:
    address = console.ask("Введіть вашу адресу доставки:")

    if not address:
        return StepResult.fail(OrderStep.ADDRESS, "Адреса не може бути порожньою")
    return StepResult.ok(address)


def process_payment(
    console: Console,
    payment_service: BasePaymentService,
) -> StepResult[PaymentResult]:
    """
    Read amount, card number and balance, then charge the card.

    Each value is validated before the next one is asked for. The card
    number is taken as entered: no format check, no masking.
    """
    amount = parse_decimal(console.ask("Введіть суму до оплати:"))
    if amount is None or amount <= 0:
        return StepResult.fail(OrderStep.PAYMENT, "Невірна сума до оплати")

    card_number = console.ask("Введіть номер картки для оплати:")
    if not card_number:
        return StepResult.fail(OrderStep.PAYMENT, "Номер картки не може бути порожнім")

    balance = parse_decimal(console.ask("Введіть баланс картки:"))
    if balance is None:
        return StepResult.fail(
            OrderStep.PAYMENT,
            "Невірний баланс картки або недостатньо коштів",
        )

    charge = payment_service.charge(amount, card_number, balance)
    if not charge.success:
        logger.debug(f"Charge rejected by {payment_service.provider_name}: {charge.to_dict()}")
        return StepResult.fail(
            OrderStep.PAYMENT,
            "Невірний баланс картки або недостатньо коштів",
        )

    return StepResult.ok(
        PaymentResult(
            amount=amount,
            card_number=card_number,
            balance=charge.balance_after,
        )
    )


def confirm_order(console: Console, order: Order, currency_symbol: str = "₴") -> None:
    """Print the order summary."""
    payment = order.payment

    console.say("Дякуємо за ваше замовлення!")
    console.say("Деталі замовлення:")
    console.say(f"Ім'я: {order.user.name}")
    console.say(f"Телефон: {order.user.phone_number}")
    console.say(f"Тип їжі: {order.food_type.value}")
    console.say(f"Обрано: {order.menu_item}")
    console.say(f"Адреса: {order.address}")
    console.say(f"Сума: {format_currency(payment.amount, currency_symbol)}")
    console.say(f"Номер картки: {payment.card_number}")
    console.say(f"Залишок на карті: {format_currency(payment.balance, currency_symbol)}")
