from datetime import datetime, timezone

from fastapi import APIRouter

from core.config import APP_VERSION
from core.scoring_table import SCORING_VERSION
from schemas.health import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
def health():
    return HealthResponse(
        status="Healthy",
        version=APP_VERSION,
        timestamp=datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
        scoringVersion=SCORING_VERSION,
    )
