"""
Pydantic Schemas for Order Data

Immutable models for everything one run of the ordering flow collects:
the registered user, the payment outcome and the final order.

Author: Khalil_Bannouri
Version: 1.0.0
"""

from decimal import ROUND_HALF_UP, Decimal
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# ENUMS
# =============================================================================

class FoodType(str, Enum):
    PIZZA = "pizza"
    BURGER = "burger"
    SUSHI = "sushi"
    DRINKS = "drinks"


# =============================================================================
# ORDER DATA
# =============================================================================

class User(BaseModel):
    """Customer registered at the start of the flow."""
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, examples=["Олена"])
    phone_number: str = Field(..., min_length=1, examples=["0501234567"])


class PaymentResult(BaseModel):
    """
    Outcome of a successful card payment.

    ``balance`` is what remains on the card after ``amount`` was deducted.
    """
    model_config = ConfigDict(frozen=True)

    amount: Decimal = Field(..., gt=0, examples=["50"])
    card_number: str = Field(..., min_length=1, examples=["4111"])
    balance: Decimal = Field(..., ge=0, examples=["150"])


class Order(BaseModel):
    """Complete set of data produced by one run."""
    model_config = ConfigDict(frozen=True)

    user: User
    food_type: FoodType
    menu_item: str = Field(..., min_length=1)
    address: str = Field(..., min_length=1)
    payment: PaymentResult


# =============================================================================
# FORMATTING
# =============================================================================

def format_currency(amount: Decimal, symbol: str = "₴") -> str:
    """
    Format an amount the Ukrainian way: ``1 234,50 ₴``.

    Amounts are rounded half up to two decimals.

    Args:
        amount: Amount to format
        symbol: Currency symbol appended after the number
    """
    rounded = amount.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    number = f"{rounded:,.2f}".replace(",", " ").replace(".", ",")
    return f"{number} {symbol}"
