# This project was developed with assistance from AI tools.
"""Eligibility validation for mortgage calculation requests.

Converts the raw request body into ``MortgageTerms`` once. Checks run in a
fixed order and the first failure raises; nothing is computed for a
rejected request.
"""

import math
import re
from typing import Any

from ..core.rules import DEFAULT_RULES, MortgageRules
from ..enums import PaymentSchedule
from ..errors import (
    DownPaymentExceedsPriceError,
    InsufficientDownPaymentError,
    InvalidAmortizationPeriodError,
    InvalidNumberError,
    InvalidScheduleTypeError,
    MissingFieldError,
    UnrecognizedPaymentScheduleError,
)
from ..schemas.mortgage import MortgageCalculationInput, MortgageTerms

_POSITIVE_DECIMAL = re.compile(r"\d+(\.\d+)?")


def parse_positive_number(value: Any) -> float | None:
    """Return ``value`` as a positive float, or None.

    Accepts real numbers and unsigned decimal strings ("1500", "3.25").
    Signs, exponents, thousands separators and booleans are rejected.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            return None
    elif isinstance(value, str):
        cleaned = value.strip()
        if not _POSITIVE_DECIMAL.fullmatch(cleaned):
            return None
        number = float(cleaned)
    else:
        return None
    if not math.isfinite(number) or number <= 0:
        return None
    return number


def down_payment_percent(down_payment: float, property_price: float) -> float:
    return down_payment * 100 / property_price


def verify_amortization_period(
    down_payment: float,
    property_price: float,
    amortization_period: float,
    rules: MortgageRules = DEFAULT_RULES,
) -> bool:
    """Amortization must be a legal step; over 25 years needs 20% down."""
    percent = down_payment_percent(down_payment, property_price)
    if (
        amortization_period > rules.max_standard_amortization_years
        and percent < rules.insurance_free_down_payment_percent
    ):
        return False
    return amortization_period in rules.allowed_amortization_years


def minimum_down_payment(property_price: float, rules: MortgageRules = DEFAULT_RULES) -> float:
    """Smallest down payment allowed for ``property_price``.

    5% up to $500,000, plus 10% on the portion above. Properties over
    $1,000,000 need more than 20%, which ``verify_minimum_down_payment``
    enforces separately.
    """
    base_rate = rules.minimum_down_payment_percent / 100
    if property_price <= rules.tiered_minimum_price:
        return base_rate * property_price
    return base_rate * rules.tiered_minimum_price + (
        rules.tiered_down_payment_percent / 100
    ) * (property_price - rules.tiered_minimum_price)


def verify_minimum_down_payment(
    down_payment: float,
    property_price: float,
    rules: MortgageRules = DEFAULT_RULES,
) -> bool:
    percent = down_payment_percent(down_payment, property_price)
    if percent < rules.minimum_down_payment_percent:
        return False
    if (
        property_price > rules.insurance_exempt_price
        and percent <= rules.insurance_free_down_payment_percent
    ):
        return False
    if property_price > rules.tiered_minimum_price:
        if down_payment < minimum_down_payment(property_price, rules):
            return False
    return True


def parse_mortgage_request(
    raw: MortgageCalculationInput,
    rules: MortgageRules = DEFAULT_RULES,
) -> MortgageTerms:
    """Validate the raw body and return normalized terms.

    Raises:
        MortgageCalculationError: the subclass for the first failing check.
    """
    fields = (
        raw.property_price,
        raw.down_payment,
        raw.annual_interest_rate,
        raw.amortization_period,
        raw.payment_schedule,
    )
    if not all(fields):
        raise MissingFieldError()

    property_price = parse_positive_number(raw.property_price)
    down_payment = parse_positive_number(raw.down_payment)
    annual_interest_rate = parse_positive_number(raw.annual_interest_rate)
    amortization_period = parse_positive_number(raw.amortization_period)
    if (
        property_price is None
        or down_payment is None
        or annual_interest_rate is None
        or amortization_period is None
    ):
        raise InvalidNumberError()

    if not isinstance(raw.payment_schedule, str):
        raise InvalidScheduleTypeError()

    if down_payment >= property_price:
        raise DownPaymentExceedsPriceError()

    if not verify_amortization_period(down_payment, property_price, amortization_period, rules):
        raise InvalidAmortizationPeriodError()

    if not verify_minimum_down_payment(down_payment, property_price, rules):
        raise InsufficientDownPaymentError()

    schedule = PaymentSchedule.parse(raw.payment_schedule)
    if schedule is None:
        raise UnrecognizedPaymentScheduleError()

    return MortgageTerms(
        property_price=property_price,
        down_payment=down_payment,
        annual_interest_rate=annual_interest_rate,
        amortization_years=int(amortization_period),
        payment_schedule=schedule,
    )
