"""
Property purchase simulators: bank financing (PRICE or SAC) versus consorcio.

Both use the geometric monthly-rate convention, unlike the projection engine.
Inputs are validated here and rejected with SimulationInputError.
"""

from __future__ import annotations

from enum import Enum

from finplan.core.rates import geometric_monthly_rate, growth_factor
from finplan.models import FrozenCamelModel


class SimulationInputError(ValueError):
    pass


class AmortizationSystem(str, Enum):
    PRICE = "price"
    SAC = "sac"


class FinancingInputs(FrozenCamelModel):
    property_value: float = 300000.0
    down_payment: float = 60000.0
    term_months: int = 240
    annual_interest_rate: float = 9.0  # percent
    system: AmortizationSystem = AmortizationSystem.PRICE
    monthly_insurance: float = 150.0


class FinancingResult(FrozenCamelModel):
    total_paid: float
    average_installment: float
    down_payment: float


class ConsorcioInputs(FrozenCamelModel):
    letter_value: float = 300000.0
    term_months: int = 180
    annual_admin_fee: float = 0.2  # percent
    annual_inflation: float = 4.0  # percent
    # informational only, the installment schedule does not depend on it
    contemplation_month: int = 24
    bid_percentage: float = 0.0


class ConsorcioResult(FrozenCamelModel):
    total_paid: float
    average_installment: float
    bid: float


def simulate_financing(inputs: FinancingInputs) -> FinancingResult:
    """
    Total cost of a financed purchase.

    PRICE: constant installment from the annuity formula (balance / n when the
    rate is zero). SAC: constant amortization, interest on the outstanding
    balance. The monthly insurance is added to every installment.
    """
    if (
        inputs.property_value <= 0
        or inputs.term_months <= 0
        or inputs.down_payment < 0
        or inputs.monthly_insurance < 0
    ):
        raise SimulationInputError("Informe valores válidos para simular.")

    balance = max(inputs.property_value - inputs.down_payment, 0.0)
    if balance <= 0:
        raise SimulationInputError("O valor do imóvel deve ser maior que a entrada.")

    monthly_rate = geometric_monthly_rate(inputs.annual_interest_rate)
    term = inputs.term_months
    total_paid = 0.0

    if inputs.system == AmortizationSystem.PRICE:
        power = growth_factor(monthly_rate, term)
        divisor = power - 1
        if divisor == 0:
            base_installment = balance / term
        else:
            base_installment = balance * (monthly_rate * power) / divisor
        total_paid = (base_installment + inputs.monthly_insurance) * term
    else:
        outstanding = balance
        amortization = balance / term
        for _ in range(term):
            interest = outstanding * monthly_rate
            total_paid += amortization + interest + inputs.monthly_insurance
            outstanding = max(outstanding - amortization, 0.0)

    return FinancingResult(
        total_paid=total_paid,
        average_installment=total_paid / term,
        down_payment=inputs.down_payment,
    )


def simulate_consorcio(inputs: ConsorcioInputs) -> ConsorcioResult:
    """
    Total cost of a consorcio letter.

    Installment i = value / n corrected by i months of inflation, plus the
    monthly admin fee on value / n. The bid is paid on top of the installments.
    """
    if (
        inputs.letter_value <= 0
        or inputs.term_months <= 0
        or inputs.annual_admin_fee < 0
        or inputs.annual_inflation < 0
        or inputs.bid_percentage < 0
    ):
        raise SimulationInputError("Informe valores válidos para simular.")

    monthly_inflation = geometric_monthly_rate(inputs.annual_inflation)
    monthly_fee = inputs.annual_admin_fee / 100 / 12
    base_installment = inputs.letter_value / inputs.term_months

    total_paid = 0.0
    for month in range(1, inputs.term_months + 1):
        correction = growth_factor(monthly_inflation, month)
        total_paid += base_installment * correction + base_installment * monthly_fee

    bid = inputs.letter_value * inputs.bid_percentage / 100
    total_paid += bid

    return ConsorcioResult(
        total_paid=total_paid,
        average_installment=total_paid / inputs.term_months,
        bid=bid,
    )
