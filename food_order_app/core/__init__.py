"""
Core module initialization.
Exports configuration and logging utilities.
"""

from food_order_app.core.config import (
    PaymentProvider,
    Settings,
    get_settings,
    logging_session,
    reset_settings,
)

__all__ = [
    "get_settings",
    "reset_settings",
    "Settings",
    "PaymentProvider",
    "logging_session",
]
