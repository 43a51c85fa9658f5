import logging
from typing import Any

from fastapi import APIRouter, Body
from fastapi.responses import JSONResponse

from core.errors import InputValidationError
from schemas.assessment import AssessmentResponse, ErrorResponse
from services.scoring import assess
from services.validation import validate_assessment

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/assess",
    response_model=AssessmentResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def assess_risk(payload: Any = Body(None)):
    if isinstance(payload, dict):
        # field names only; values are self-reported health data
        logger.info("Received assessment request with fields: %s", sorted(payload))

    try:
        record = validate_assessment(payload)
    except InputValidationError as exc:
        logger.info("Rejected assessment request: %s", exc)
        return JSONResponse(status_code=400, content=exc.to_response())

    try:
        result = assess(record)
    except Exception as exc:
        logger.exception("Assessment error")
        return JSONResponse(
            status_code=500,
            content={"error": "Assessment failed", "message": str(exc)},
        )

    return AssessmentResponse(
        success=True,
        riskCategory=result.category,
        recommendations=result.recommendations,
        score=result.score,
    )
