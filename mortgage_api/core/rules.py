# This project was developed with assistance from AI tools.
"""BC mortgage lending rules.

Thresholds for minimum down payment, amortization and CMHC default
insurance. Immutable for the process lifetime and shared by the
validation and insurance services.
"""

import logging

from pydantic import BaseModel, ConfigDict

logger = logging.getLogger(__name__)


class InsuranceTier(BaseModel):
    """Premium rate applied when the down payment percent is in [lower, upper)."""

    model_config = ConfigDict(frozen=True)

    lower_percent: float
    upper_percent: float
    rate_percent: float


class MortgageRules(BaseModel):
    """Eligibility and insurance thresholds (CMHC default rates only)."""

    model_config = ConfigDict(frozen=True)

    insurance_exempt_price: float = 1_000_000
    tiered_minimum_price: float = 500_000
    minimum_down_payment_percent: float = 5
    tiered_down_payment_percent: float = 10
    insurance_free_down_payment_percent: float = 20

    min_amortization_years: int = 5
    max_amortization_years: int = 30
    amortization_step_years: int = 5
    max_standard_amortization_years: int = 25

    insurance_tiers: tuple[InsuranceTier, ...] = (
        InsuranceTier(lower_percent=5, upper_percent=10, rate_percent=4.0),
        InsuranceTier(lower_percent=10, upper_percent=15, rate_percent=3.1),
        InsuranceTier(lower_percent=15, upper_percent=20, rate_percent=2.8),
    )

    @property
    def allowed_amortization_years(self) -> frozenset[int]:
        """Legal amortization periods, e.g. {5, 10, 15, 20, 25, 30}."""
        return frozenset(
            range(
                self.min_amortization_years,
                self.max_amortization_years + 1,
                self.amortization_step_years,
            )
        )

    @property
    def max_insurance_rate(self) -> float:
        return max(tier.rate_percent for tier in self.insurance_tiers)


DEFAULT_RULES = MortgageRules()


def log_rules_status(rules: MortgageRules = DEFAULT_RULES) -> None:
    """Log the active lending rule set. Call at startup."""
    logger.info(
        "Mortgage rules: min down %s%%, insurance exempt above $%s, amortization %s-%s years",
        rules.minimum_down_payment_percent,
        f"{rules.insurance_exempt_price:,.0f}",
        rules.min_amortization_years,
        rules.max_amortization_years,
    )
