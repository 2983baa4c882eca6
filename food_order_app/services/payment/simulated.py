"""
Simulated Card Payment Service

Deducts the charged amount from a balance the user typed in. No money
moves and no external call is made.

Behavior:
    - Rejects non-positive amounts (invalid_amount)
    - Rejects negative balances (invalid_balance)
    - Rejects balances below the amount (insufficient_funds)
    - Accepts any card number as entered, without format checks

Author: Khalil_Bannouri
Version: 1.0.0
"""

import logging
from decimal import Decimal, DecimalException

from food_order_app.services.payment.base import (
    BasePaymentService,
    ChargeResult,
)

logger = logging.getLogger(__name__)


class SimulatedCardPaymentService(BasePaymentService):
    """
    Deterministic in-memory payment service.

    Example:
        >>> service = SimulatedCardPaymentService()
        >>> service.charge(Decimal("100"), "4111", Decimal("100")).balance_after
        Decimal('0')
    """

    @property
    def provider_name(self) -> str:
        """Return the provider name."""
        return "simulated"

    def charge(
        self,
        amount: Decimal,
        card_number: str,
        balance: Decimal,
    ) -> ChargeResult:
        logger.debug(f"Simulated: Charging {amount} (balance {balance})")

        if amount <= 0:
            return ChargeResult(
                success=False,
                amount=amount,
                error_code="invalid_amount",
                error_message="Amount must be greater than 0",
            )

        if balance < 0:
            return ChargeResult(
                success=False,
                amount=amount,
                error_code="invalid_balance",
                error_message="Balance cannot be negative",
            )

        if balance < amount:
            logger.debug("Simulated: Charge declined - insufficient_funds")
            return ChargeResult(
                success=False,
                amount=amount,
                error_code="insufficient_funds",
                error_message="Card balance is lower than the amount",
            )

        try:
            balance_after = balance - amount
        except DecimalException as e:
            logger.debug(f"Simulated: Charge failed - {e!r}")
            return ChargeResult(
                success=False,
                amount=amount,
                error_code="invalid_balance",
                error_message="Balance cannot be charged",
            )

        logger.debug(f"Simulated: Charge successful - remaining {balance_after}")

        return ChargeResult(
            success=True,
            amount=amount,
            balance_after=balance_after,
        )

    def health_check(self) -> bool:
        """The simulated service is always available."""
        return True
