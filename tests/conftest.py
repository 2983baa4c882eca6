"""Shared fixtures for the ordering tests."""

import io
import os

import pytest

from food_order_app.console import Console
from food_order_app.core.config import Settings, reset_settings
from food_order_app.services.payment import (
    SimulatedCardPaymentService,
    reset_payment_service,
)


def make_console(*lines: str) -> Console:
    """Console that answers prompts with the given lines, then hits end of input."""
    stdin = io.StringIO("".join(f"{line}\n" for line in lines))
    return Console(stdin=stdin, stdout=io.StringIO())


def output_of(console: Console) -> str:
    return console.stdout.getvalue()


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Drop FOOD_ORDER_* overrides and cached services around every test."""
    for name in list(os.environ):
        if name.upper().startswith("FOOD_ORDER_"):
            monkeypatch.delenv(name)
    reset_settings()
    reset_payment_service()
    yield
    reset_settings()
    reset_payment_service()


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(log_directory=str(tmp_path), log_to_console=False)


@pytest.fixture
def payment_service() -> SimulatedCardPaymentService:
    return SimulatedCardPaymentService()
