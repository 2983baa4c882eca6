"""
Services package.

Exports the payment service factory.
"""

from food_order_app.services.payment import get_payment_service

__all__ = ["get_payment_service"]
