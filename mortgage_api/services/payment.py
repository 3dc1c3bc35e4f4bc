# This project was developed with assistance from AI tools.
"""Mortgage payment calculation.

Pure math, no I/O. Canadian fixed-rate mortgages quote a nominal annual
rate compounded semi-annually, so the rate is converted to an effective
monthly rate before applying the amortization formula.

Schedule conversions follow the usual bank convention: bi-weekly spreads
twelve monthly payments over 26 periods, accelerated bi-weekly pays half
the monthly amount every two weeks.
"""

from ..enums import PaymentSchedule

MONTHS_PER_YEAR = 12
COMPOUNDING_PERIODS_PER_YEAR = 2
BI_WEEKLY_PERIODS_PER_YEAR = 26


def effective_monthly_rate(annual_interest_rate: float) -> float:
    """Effective monthly rate for a nominal percent compounded semi-annually."""
    semi_annual_rate = annual_interest_rate / 100 / COMPOUNDING_PERIODS_PER_YEAR
    months_per_period = MONTHS_PER_YEAR / COMPOUNDING_PERIODS_PER_YEAR
    return (1 + semi_annual_rate) ** (1 / months_per_period) - 1


def monthly_payment(principal: float, monthly_rate: float, n_payments: int) -> float:
    """Level payment that repays ``principal`` over ``n_payments`` months.

    P = L * [r(1+r)^n] / [(1+r)^n - 1]
    """
    if monthly_rate == 0:
        return principal / n_payments
    compound = (1 + monthly_rate) ** n_payments
    return principal * monthly_rate * compound / (compound - 1)


def payment_per_schedule(monthly: float, schedule: PaymentSchedule) -> float:
    """Convert a monthly payment to the amount due on ``schedule``."""
    conversions = {
        PaymentSchedule.MONTHLY: lambda m: m,
        PaymentSchedule.BI_WEEKLY: lambda m: m * MONTHS_PER_YEAR / BI_WEEKLY_PERIODS_PER_YEAR,
        PaymentSchedule.ACCELERATED_BI_WEEKLY: lambda m: m / 2,
    }
    return conversions[schedule](monthly)


def calculate_payment(
    principal: float,
    annual_interest_rate: float,
    amortization_years: int,
    schedule: PaymentSchedule,
) -> tuple[float, float]:
    """Return ``(monthly_payment, payment_per_schedule)``."""
    rate = effective_monthly_rate(annual_interest_rate)
    monthly = monthly_payment(principal, rate, MONTHS_PER_YEAR * amortization_years)
    return monthly, payment_per_schedule(monthly, schedule)
