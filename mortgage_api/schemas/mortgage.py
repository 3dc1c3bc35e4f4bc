# This project was developed with assistance from AI tools.
"""Mortgage calculator schemas.

``MortgageCalculationInput`` is the body exactly as the form client sends
it. ``MortgageTerms`` is the validated form built by
``services.validation.parse_mortgage_request``; the calculators only
accept the validated type.
"""

from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from ..enums import PaymentSchedule

_CENTS = Decimal("0.01")


def format_amount(value: float) -> str:
    """Two-decimal string; exact half-cent ties round up."""
    amount = Decimal(value)
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, amount.adjusted() + 3)
        return str(amount.quantize(_CENTS, rounding=ROUND_HALF_UP))


class MortgageCalculationInput(BaseModel):
    """Raw request body. Values may be numbers, numeric strings or junk."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    property_price: Any = Field(default=None, alias="propertyPrice")
    down_payment: Any = Field(default=None, alias="downPayment")
    annual_interest_rate: Any = Field(default=None, alias="annualInterestRate")
    amortization_period: Any = Field(default=None, alias="amortizationPeriod")
    payment_schedule: Any = Field(default=None, alias="paymentSchedule")


class MortgageTerms(BaseModel):
    """Validated, normalized loan parameters."""

    model_config = ConfigDict(frozen=True)

    property_price: float = Field(gt=0)
    down_payment: float = Field(gt=0)
    annual_interest_rate: float = Field(gt=0)
    amortization_years: int = Field(gt=0)
    payment_schedule: PaymentSchedule

    @property
    def down_payment_percent(self) -> float:
        return self.down_payment * 100 / self.property_price

    @property
    def loan_amount(self) -> float:
        """Principal before any financed insurance premium."""
        return self.property_price - self.down_payment


class MortgageQuote(BaseModel):
    """Unrounded calculation results."""

    principal: float
    insurance_rate: float
    cmhc_insurance: float
    monthly_payment: float
    payment_per_schedule: float
    payment_schedule: PaymentSchedule


class MortgageCalculationResponse(BaseModel):
    """Amounts formatted to exactly two decimals, as strings."""

    model_config = ConfigDict(populate_by_name=True)

    payment_per_payment_schedule: str = Field(alias="paymentPerPaymentSchedule")
    cmhc_insurance: str = Field(alias="cmhcInsurance")

    @classmethod
    def from_quote(cls, quote: MortgageQuote) -> "MortgageCalculationResponse":
        return cls(
            payment_per_payment_schedule=format_amount(quote.payment_per_schedule),
            cmhc_insurance=format_amount(quote.cmhc_insurance),
        )
