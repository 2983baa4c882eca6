"""
Step Results and Validation Errors

Each ordering step returns a StepResult instead of raising. A failed result
carries a ValidationError naming the step and a user-facing message; the
orchestrator logs it once and stops the run.

Author: Khalil_Bannouri
Version: 1.0.0
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class OrderStep(str, Enum):
    """The ordering steps, in execution order."""
    REGISTRATION = "registration"
    FOOD_TYPE = "food_type"
    MENU_ITEM = "menu_item"
    ADDRESS = "address"
    PAYMENT = "payment"


# Prefix used when a step failure is written to the log
STEP_LOG_PREFIXES = {
    OrderStep.REGISTRATION: "Помилка під час реєстрації користувача",
    OrderStep.FOOD_TYPE: "Помилка вибору типу їжі",
    OrderStep.MENU_ITEM: "Помилка вибору страви",
    OrderStep.ADDRESS: "Помилка введення адреси",
    OrderStep.PAYMENT: "Помилка обробки платежу",
}


@dataclass(frozen=True)
class ValidationError:
    """
    Invalid or missing input detected by a step.

    Attributes:
        step: Step that rejected the input
        message: User-facing description of the problem
    """
    step: OrderStep
    message: str

    @property
    def log_message(self) -> str:
        return f"{STEP_LOG_PREFIXES[self.step]}: {self.message}"

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class StepResult(Generic[T]):
    """
    Outcome of one ordering step: either a value or a ValidationError.

    Example:
        >>> result = StepResult.fail(OrderStep.ADDRESS, "Адреса не може бути порожньою")
        >>> result.success
        False
    """
    value: Optional[T] = None
    error: Optional[ValidationError] = None

    @property
    def success(self) -> bool:
        return self.error is None

    @classmethod
    def ok(cls, value: T) -> "StepResult[T]":
        return cls(value=value)

    @classmethod
    def fail(cls, step: OrderStep, message: str) -> "StepResult[T]":
        return cls(error=ValidationError(step=step, message=message))
