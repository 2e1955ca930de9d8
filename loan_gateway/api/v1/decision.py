"""POST /v1/loan/decision - loan pre-approval decision endpoint"""

import time
import logging
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from loan_gateway.api.v1.schemas import DecisionRequest, DecisionResponse
from loan_gateway.api.dependencies import get_decision_engine, get_request_id
from loan_gateway.domain.decision_engine import DecisionEngine
from loan_gateway.domain.exceptions import (
    InvalidAgeError,
    InvalidCountryError,
    InvalidLoanAmountError,
    InvalidLoanPeriodError,
    InvalidPersonalCodeError,
    LoanRejectedError,
    NoValidLoanError,
)
from loan_gateway.domain.models import Decision, LoanRequest
from loan_gateway.infrastructure.observability.metrics import record_decision, record_rejection
from loan_gateway.infrastructure.observability.logging import log_decision, log_rejection

router = APIRouter()

# Failure kind -> (HTTP status, metric/log reason)
REJECTION_RESPONSES = {
    InvalidPersonalCodeError: (400, "invalid_personal_code"),
    InvalidLoanAmountError: (400, "invalid_loan_amount"),
    InvalidLoanPeriodError: (400, "invalid_loan_period"),
    InvalidCountryError: (400, "invalid_country"),
    InvalidAgeError: (400, "invalid_age"),
    NoValidLoanError: (404, "no_valid_loan"),
}


def to_response(decision: Decision) -> DecisionResponse:
    """Map an engine decision onto the API response body"""
    return DecisionResponse(
        loan_amount=decision.approved_amount,
        loan_period=decision.approved_period,
        error_message=decision.error_message,
    )


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=to_response(Decision(error_message=message)).model_dump(),
    )


@router.post("/loan/decision", response_model=DecisionResponse)
def request_decision(
    request_body: DecisionRequest,
    request: Request,
    engine: DecisionEngine = Depends(get_decision_engine),
):
    """
    Calculate the maximum approvable loan for an applicant.

    Flow:
    1. Build loan request from body
    2. Run decision engine (validation, segment, age, amount/period search)
    3. Record metrics and logs
    4. Return approved amount and period, or mapped error status
    """
    start_time = time.time()
    request_id = get_request_id(request)

    loan_request = LoanRequest(
        personal_code=request_body.personal_code,
        requested_amount=request_body.loan_amount,
        requested_period=request_body.loan_period,
        country=request_body.country,
    )

    try:
        decision = engine.evaluate(loan_request)

    except LoanRejectedError as e:
        status_code, reason = REJECTION_RESPONSES.get(type(e), (400, "rejected"))
        record_rejection(reason)
        log_rejection(request_id, loan_request.country, reason, str(e))
        return _error_response(status_code, str(e))

    except Exception as e:
        record_rejection("error")
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        return _error_response(500, "An unexpected error occurred")

    duration_ms = (time.time() - start_time) * 1000
    record_decision(decision.approved_amount, decision.approved_period, loan_request.requested_period)
    log_decision(
        request_id,
        loan_request.country,
        decision.approved_amount,
        decision.approved_period,
        loan_request.requested_period,
        duration_ms,
    )

    return to_response(decision)
