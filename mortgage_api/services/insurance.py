# This project was developed with assistance from AI tools.
"""CMHC default insurance.

Only the standard BC default rates are modelled (no non-traditional
down payment or self-employed surcharges).
"""

from ..core.rules import DEFAULT_RULES, MortgageRules
from ..schemas.mortgage import MortgageTerms


def cmhc_insurance_rate(terms: MortgageTerms, rules: MortgageRules = DEFAULT_RULES) -> float:
    """Premium rate as a percent of the loan amount.

    Zero at 20% down or more, or when the price is above $1,000,000.
    """
    percent = terms.down_payment_percent
    if (
        percent >= rules.insurance_free_down_payment_percent
        or terms.property_price > rules.insurance_exempt_price
    ):
        return 0.0

    for tier in rules.insurance_tiers:
        if tier.lower_percent <= percent < tier.upper_percent:
            return tier.rate_percent
    # Below every tier; validation rejects these before we get here
    return rules.max_insurance_rate


def cmhc_insurance_premium(terms: MortgageTerms, rules: MortgageRules = DEFAULT_RULES) -> float:
    """Premium in dollars, charged on the loan amount before insurance."""
    return cmhc_insurance_rate(terms, rules) * terms.loan_amount / 100
