"""
Console Application Entry Point

Runs the ordering walkthrough top to bottom:
    registration → food type → menu item → address → payment → confirmation

The first failed step ends the run. Its error is logged once, shown to the
user and no later step is attempted. The logging session is closed on every
exit path.

Usage:
    python -m food_order_app
    food-order

Author: Khalil_Bannouri
Version: 1.0.0
"""

import logging
from typing import Optional

from food_order_app.console import Console
from food_order_app.core.config import Settings, get_settings, logging_session
from food_order_app.errors import StepResult
from food_order_app.schemas import Order, format_currency
from food_order_app.services.payment import create_payment_service, get_payment_service
from food_order_app.services.payment.base import BasePaymentService
from food_order_app.steps import (
    choose_food_type,
    choose_menu_item,
    confirm_order,
    enter_delivery_address,
    process_payment,
    register_user,
)

logger = logging.getLogger(__name__)


def _failed(result: StepResult) -> StepResult[Order]:
    logger.error(result.error.log_message)
    return StepResult(error=result.error)


def place_order(
    console: Console,
    payment_service: BasePaymentService,
    settings: Settings,
) -> StepResult[Order]:
    """
    Run every ordering step in sequence.

    Args:
        console: Console to prompt through
        payment_service: Service that charges the card
        settings: Application settings (currency formatting)

    Returns:
        StepResult holding the confirmed Order, or the first step's error
    """
    symbol = settings.currency_symbol

    user = register_user(console)
    if not user.success:
        return _failed(user)
    logger.info(
        f"Користувач {user.value.name} з номером {user.value.phone_number} зареєстрований"
    )

    food_type = choose_food_type(console)
    if not food_type.success:
        return _failed(food_type)
    logger.info(f"Обрано тип їжі: {food_type.value.value}")

    menu_item = choose_menu_item(console, food_type.value)
    if not menu_item.success:
        return _failed(menu_item)
    logger.info(f"Обрано страву: {menu_item.value}")

    address = enter_delivery_address(console)
    if not address.success:
        return _failed(address)
    logger.info(f"Адреса доставки: {address.value}")

    payment = process_payment(console, payment_service)
    if not payment.success:
        return _failed(payment)
    logger.info(
        f"Оплата на суму {format_currency(payment.value.amount, symbol)} "
        f"за допомогою картки {payment.value.card_number}. "
        f"Залишок на карті: {format_currency(payment.value.balance, symbol)}"
    )

    order = Order(
        user=user.value,
        food_type=food_type.value,
        menu_item=menu_item.value,
        address=address.value,
        payment=payment.value,
    )
    confirm_order(console, order, symbol)
    logger.info(f"Замовлення для {order.user.name} успішно оформлено")

    return StepResult.ok(order)


def main(
    console: Optional[Console] = None,
    settings: Optional[Settings] = None,
) -> int:
    """
    Run one ordering session.

    Returns:
        Process exit code: 0 when the order was placed, 1 otherwise
    """
    console = console or Console()

    # No log sink exists yet for setup failures
    try:
        if settings is None:
            settings = get_settings()
            payment_service = get_payment_service()
        else:
            payment_service = create_payment_service(settings)
    except ValueError as e:
        console.say(f"Сталася помилка: невірні налаштування: {e}")
        return 1

    try:
        with logging_session(settings):
            return _run(console, payment_service, settings)
    except OSError as e:
        console.say(f"Сталася помилка: не вдалося відкрити журнал: {e}")
        return 1


def _run(
    console: Console,
    payment_service: BasePaymentService,
    settings: Settings,
) -> int:
    logger.info("Додаток для замовлення їжі запущено")
    logger.debug(f"{settings.app_name} v{settings.app_version}")

    try:
        result = place_order(console, payment_service, settings)
    except Exception as e:
        logger.error(f"Помилка: {e}")
        console.say(f"Сталася помилка: {e}")
        return 1

    if not result.success:
        console.say(f"Сталася помилка: {result.error.message}")
        return 1

    return 0
