from __future__ import annotations

import pytest
from flask import Flask
from flask.testing import FlaskClient

from finplan.app import create_app
from finplan.config import TestingConfig
from finplan.models import FinancialInputs


@pytest.fixture()
def app() -> Flask:
    return create_app(TestingConfig)


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    with app.test_client() as test_client:
        yield test_client


@pytest.fixture()
def reference_inputs() -> FinancialInputs:
    """The default plan of the calculator screen: 32 -> 65 -> 95."""
    return FinancialInputs(
        current_age=32,
        retirement_age=65,
        life_expectancy_age=95,
        expected_annual_return=8,
        annual_inflation=4,
        initial_capital=50000,
        monthly_contribution=2000,
        monthly_withdrawal=8000,
    )


@pytest.fixture()
def modest_inputs() -> FinancialInputs:
    """Plan with a real rate of roughly 4.95% a year."""
    return FinancialInputs(
        current_age=30,
        retirement_age=65,
        life_expectancy_age=90,
        expected_annual_return=1.05,
        annual_inflation=1.0,
        initial_capital=20000,
        monthly_contribution=1500,
        monthly_withdrawal=0,
    )
