"""
Payment Service Factory

Provides a single entry point for obtaining a payment service instance.

Usage:
    from food_order_app.services.payment import get_payment_service

    payment_service = get_payment_service()
    result = payment_service.charge(Decimal("50"), "4111", Decimal("200"))

Author: Khalil_Bannouri
Version: 1.0.0
"""

import logging
from functools import lru_cache

from food_order_app.core.config import PaymentProvider, Settings, get_settings
from food_order_app.services.payment.base import (
    BasePaymentService,
    ChargeResult,
)
from food_order_app.services.payment.simulated import SimulatedCardPaymentService

logger = logging.getLogger(__name__)


def create_payment_service(settings: Settings) -> BasePaymentService:
    """
    Build the payment service selected by the given settings.

    Args:
        settings: Settings naming the payment provider

    Returns:
        BasePaymentService: New payment service instance

    Raises:
        ValueError: If the configured provider has no implementation
    """
    if settings.payment_provider == PaymentProvider.SIMULATED:
        logger.debug("Payment Service: Using SimulatedCardPaymentService")
        return SimulatedCardPaymentService()

    raise ValueError(f"Unsupported payment provider: {settings.payment_provider.value}")


@lru_cache()
def get_payment_service() -> BasePaymentService:
    """
    Get the payment service configured by the environment.

    The instance is cached (singleton pattern) and always follows
    get_settings(). Use create_payment_service() for explicit settings.
    """
    return create_payment_service(get_settings())


def reset_payment_service() -> None:
    """
    Clear the cached payment service instance.

    The next call to get_payment_service() will create a new instance.
    """
    get_payment_service.cache_clear()
    logger.debug("Payment service cache cleared")


__all__ = [
    "create_payment_service",
    "get_payment_service",
    "reset_payment_service",
    "BasePaymentService",
    "ChargeResult",
    "SimulatedCardPaymentService",
]
