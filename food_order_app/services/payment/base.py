"""
Payment Service Abstract Base Class

Defines the interface contract for payment service implementations.
The ordering flow only talks to this interface, so the simulated card
service can be swapped without touching the steps.

Design Pattern: Strategy Pattern
    - Allows runtime switching between payment providers
    - Facilitates testing with custom implementations

Author: Khalil_Bannouri
Version: 1.0.0
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional


@dataclass
class ChargeResult:
    """
    Standardized result from charging a card.

    Attributes:
        success: Whether the charge went through
        amount: Amount that was requested
        balance_after: Card balance after the charge (None on failure)
        error_code: Machine-readable error code
        error_message: Error description if the charge failed
    """
    success: bool
    amount: Optional[Decimal] = None
    balance_after: Optional[Decimal] = None
    error_code: Optional[str] = None
    error_message: Optional[str] = None

    def to_dict(self) -> dict:
        """Convert to dictionary for logging."""
        return {
            "success": self.success,
            "amount": str(self.amount) if self.amount is not None else None,
            "balance_after": str(self.balance_after) if self.balance_after is not None else None,
            "error_code": self.error_code,
            "error_message": self.error_message,
        }


class BasePaymentService(ABC):
    """
    Abstract base class for payment services.

    Example:
        >>> service = get_payment_service()
        >>> result = service.charge(Decimal("50"), "4111", Decimal("200"))
        >>> result.balance_after
        Decimal('150')
    """

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """
        Return the name of the payment provider.

        Returns:
            str: Provider name (e.g., "simulated")
        """
        pass

    @abstractmethod
    def charge(
        self,
        amount: Decimal,
        card_number: str,
        balance: Decimal,
    ) -> ChargeResult:
        """
        Charge a card.

        Args:
            amount: Amount to charge
            card_number: Card number as entered by the user
            balance: Card balance before the charge

        Returns:
            ChargeResult: Standardized result object
        """
        pass

    @abstractmethod
    def health_check(self) -> bool:
        """
        Verify the payment service is operational.

        Returns:
            bool: True if the service can accept charges
        """
        pass
