# This project was developed with assistance from AI tools.
"""Mortgage calculation errors.

Every rejection the calculator can produce. Each carries the fixed
message returned to the client as ``{"error": message}``.
"""


class MortgageCalculationError(Exception):
    """Base class for rejected calculation requests."""

    message: str = "Unable to calculate mortgage"
    status_code: int = 400

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class MissingFieldError(MortgageCalculationError):
    message = "All fields are required"


class InvalidNumberError(MortgageCalculationError):
    message = (
        "Property price, down payment, amortization period and annual interest rate "
        "must be positive numbers"
    )


class InvalidScheduleTypeError(MortgageCalculationError):
    message = "Payment schedule must be string"


class DownPaymentExceedsPriceError(MortgageCalculationError):
    message = "Invalid inputs"


class InvalidAmortizationPeriodError(MortgageCalculationError):
    message = "Invalid Amortization Period!"


class InsufficientDownPaymentError(MortgageCalculationError):
    message = "Downpayment is too low!"


class UnrecognizedPaymentScheduleError(MortgageCalculationError):
    message = "Payment schedule is invalid!"


class InternalCalculationError(MortgageCalculationError):
    """Unexpected failure during computation. Details are logged, never returned."""

    message = "An unexpected error occurred."
