# This project was developed with assistance from AI tools.
"""Tests for the calculation pipeline."""

import pytest

from mortgage_api.enums import PaymentSchedule
from mortgage_api.errors import InsufficientDownPaymentError
from mortgage_api.schemas.mortgage import (
    MortgageCalculationInput,
    MortgageCalculationResponse,
    MortgageTerms,
    format_amount,
)
from mortgage_api.services.mortgage import calculate_mortgage, quote_mortgage


def _terms(schedule=PaymentSchedule.MONTHLY, price=500000, down=50000, years=25):
    return MortgageTerms(
        property_price=price,
        down_payment=down,
        annual_interest_rate=3,
        amortization_years=years,
        payment_schedule=schedule,
    )


def test_premium_is_financed_into_principal():
    quote = calculate_mortgage(_terms())
    assert quote.insurance_rate == 3.1
    assert quote.cmhc_insurance == pytest.approx(13950)
    assert quote.principal == pytest.approx(450000 + 13950)
    assert quote.monthly_payment == pytest.approx(2195.62, abs=0.01)


def test_no_premium_at_twenty_percent_down():
    quote = calculate_mortgage(_terms(price=300000, down=60000))
    assert quote.cmhc_insurance == 0
    assert quote.principal == 240000
    assert quote.monthly_payment == pytest.approx(1135.79, abs=0.01)


@pytest.mark.parametrize(
    "schedule, factor",
    [
        (PaymentSchedule.MONTHLY, 1),
        (PaymentSchedule.BI_WEEKLY, 12 / 26),
        (PaymentSchedule.ACCELERATED_BI_WEEKLY, 0.5),
    ],
)
def test_schedule_conversion(schedule, factor):
    quote = calculate_mortgage(_terms(schedule=schedule))
    assert quote.payment_per_schedule == pytest.approx(quote.monthly_payment * factor)
    assert quote.payment_schedule is schedule


def test_quote_mortgage_validates_first():
    raw = MortgageCalculationInput.model_validate({
        "propertyPrice": 600000,
        "downPayment": 30000,
        "annualInterestRate": 3,
        "amortizationPeriod": 25,
        "paymentSchedule": "monthly",
    })
    with pytest.raises(InsufficientDownPaymentError):
        quote_mortgage(raw)


def test_response_formats_two_decimals():
    response = MortgageCalculationResponse.from_quote(calculate_mortgage(_terms()))
    assert response.model_dump(by_alias=True) == {
        "paymentPerPaymentSchedule": "2195.62",
        "cmhcInsurance": "13950.00",
    }


@pytest.mark.parametrize(
    "value, expected",
    [
        (3800.125, "3800.13"),
        (0.125, "0.13"),
        (2195.6224, "2195.62"),
        (0.0, "0.00"),
        (1e30, "1000000000000000019884624838656.00"),
    ],
)
def test_format_amount(value, expected):
    assert format_amount(value) == expected
