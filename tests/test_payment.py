# This project was developed with assistance from AI tools.
"""Tests for payment math and schedule conversion."""

import pytest

from mortgage_api.enums import PaymentSchedule
from mortgage_api.services.payment import (
    calculate_payment,
    effective_monthly_rate,
    monthly_payment,
    payment_per_schedule,
)


class TestRates:
    def test_semi_annual_compounding(self):
        # (1 + 0.015)^(1/6) - 1
        assert effective_monthly_rate(3) == pytest.approx(0.0024845167, rel=1e-8)

    def test_effective_rate_below_nominal_monthly(self):
        assert effective_monthly_rate(6) < 6 / 100 / 12


class TestMonthlyPayment:
    def test_matches_bank_calculator(self):
        rate = effective_monthly_rate(3)
        assert monthly_payment(463950, rate, 300) == pytest.approx(2195.62, abs=0.01)

    def test_zero_rate_is_straight_line(self):
        assert monthly_payment(120000, 0, 120) == 1000

    def test_scales_with_principal(self):
        rate = effective_monthly_rate(5)
        assert monthly_payment(200000, rate, 300) == pytest.approx(
            2 * monthly_payment(100000, rate, 300)
        )


class TestSchedules:
    def test_monthly_unchanged(self):
        assert payment_per_schedule(2600, PaymentSchedule.MONTHLY) == 2600

    def test_bi_weekly(self):
        assert payment_per_schedule(2600, PaymentSchedule.BI_WEEKLY) == pytest.approx(1200)

    def test_accelerated_bi_weekly_is_half(self):
        assert payment_per_schedule(2600, PaymentSchedule.ACCELERATED_BI_WEEKLY) == 1300

    def test_parse_case_insensitive(self):
        assert PaymentSchedule.parse("Bi-Weekly") is PaymentSchedule.BI_WEEKLY
        assert PaymentSchedule.parse("MONTHLY") is PaymentSchedule.MONTHLY

    def test_parse_unknown(self):
        assert PaymentSchedule.parse("bi-monthly") is None
        assert PaymentSchedule.parse("biweekly") is None


def test_calculate_payment_returns_monthly_and_scheduled():
    monthly, scheduled = calculate_payment(320000, 3, 30, PaymentSchedule.ACCELERATED_BI_WEEKLY)
    assert monthly == pytest.approx(1345.93, abs=0.01)
    assert scheduled == pytest.approx(monthly / 2)
