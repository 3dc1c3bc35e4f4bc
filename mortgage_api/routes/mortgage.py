# This project was developed with assistance from AI tools.
"""Mortgage calculator endpoint -- no authentication required."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Request
from fastapi.exceptions import RequestValidationError

from ..errors import InternalCalculationError, MortgageCalculationError
from ..schemas.error import CalculationErrorResponse
from ..schemas.mortgage import MortgageCalculationInput, MortgageCalculationResponse
from ..services.mortgage import quote_mortgage

logger = logging.getLogger(__name__)

router = APIRouter()

_FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


def _invalid_body(payload) -> RequestValidationError:
    return RequestValidationError(
        [
            {
                "type": "model_attributes_type",
                "loc": ("body",),
                "msg": "Input should be a valid dictionary or object",
                "input": payload,
            }
        ]
    )


async def read_calculation_input(request: Request) -> MortgageCalculationInput:
    """Read the body as JSON or as form fields.

    An empty body counts as an object with no fields, so it is rejected
    as missing fields rather than as malformed input.
    """
    content_type = request.headers.get("content-type", "")
    if content_type.startswith(_FORM_CONTENT_TYPES):
        form = await request.form()
        return MortgageCalculationInput.model_validate(dict(form))

    raw = await request.body()
    if not raw.strip():
        return MortgageCalculationInput()
    try:
        payload = await request.json()
    except ValueError as exc:
        raise _invalid_body(raw.decode("utf-8", errors="replace")) from exc
    if not isinstance(payload, dict):
        raise _invalid_body(payload)
    return MortgageCalculationInput.model_validate(payload)


@router.post(
    "/calculate-mortgage",
    response_model=MortgageCalculationResponse,
    responses={400: {"model": CalculationErrorResponse}},
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {
                "application/json": {
                    "schema": MortgageCalculationInput.model_json_schema(by_alias=True)
                },
                "application/x-www-form-urlencoded": {
                    "schema": MortgageCalculationInput.model_json_schema(by_alias=True)
                },
            },
        }
    },
)
async def calculate_mortgage(
    body: Annotated[MortgageCalculationInput, Depends(read_calculation_input)],
) -> MortgageCalculationResponse:
    """Payment per payment schedule and the financed CMHC insurance premium.

    Accepts JSON or form-encoded bodies. Rejected requests return 400 with
    ``{"error": <reason>}``.
    """
    try:
        quote = quote_mortgage(body)
    except MortgageCalculationError as exc:
        logger.info("Mortgage calculation rejected: %s", type(exc).__name__)
        raise
    except Exception as exc:
        logger.exception("Mortgage calculation failed")
        raise InternalCalculationError() from exc

    return MortgageCalculationResponse.from_quote(quote)
