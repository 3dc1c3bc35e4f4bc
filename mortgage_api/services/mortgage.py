# This project was developed with assistance from AI tools.
"""Mortgage calculation pipeline.

validate -> insurance premium -> principal adjustment -> payment ->
schedule conversion. Shared by the HTTP route and anything else that
needs a quote.
"""

import logging

from ..core.rules import DEFAULT_RULES, MortgageRules
from ..schemas.mortgage import MortgageCalculationInput, MortgageQuote, MortgageTerms
from .insurance import cmhc_insurance_premium, cmhc_insurance_rate
from .payment import calculate_payment
from .validation import parse_mortgage_request

logger = logging.getLogger(__name__)


def calculate_mortgage(terms: MortgageTerms, rules: MortgageRules = DEFAULT_RULES) -> MortgageQuote:
    """Compute the CMHC premium and the payment per schedule for valid terms.

    The premium is financed: it is added to the loan amount before the
    payment is calculated.
    """
    insurance_rate = cmhc_insurance_rate(terms, rules)
    cmhc_insurance = cmhc_insurance_premium(terms, rules)
    principal = terms.loan_amount + cmhc_insurance

    monthly, per_schedule = calculate_payment(
        principal,
        terms.annual_interest_rate,
        terms.amortization_years,
        terms.payment_schedule,
    )

    return MortgageQuote(
        principal=principal,
        insurance_rate=insurance_rate,
        cmhc_insurance=cmhc_insurance,
        monthly_payment=monthly,
        payment_per_schedule=per_schedule,
        payment_schedule=terms.payment_schedule,
    )


def quote_mortgage(
    raw: MortgageCalculationInput,
    rules: MortgageRules = DEFAULT_RULES,
) -> MortgageQuote:
    """Validate a raw request and compute its quote.

    Raises:
        MortgageCalculationError: when the request is rejected.
    """
    terms = parse_mortgage_request(raw, rules)
    quote = calculate_mortgage(terms, rules)
    logger.debug(
        "Quoted %s payment %.2f (insurance %.2f at %s%%)",
        terms.payment_schedule.value,
        quote.payment_per_schedule,
        quote.cmhc_insurance,
        quote.insurance_rate,
    )
    return quote
