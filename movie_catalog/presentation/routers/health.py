from datetime import datetime, timezone
from http import HTTPStatus

from fastapi import APIRouter

from movie_catalog.applications.interfaces.dtos.health import HealthStatus

router = APIRouter(tags=["health"])


@router.get("/health", status_code=HTTPStatus.OK, response_model=HealthStatus)
async def health_check():
    return HealthStatus(status="healthy", timestamp=datetime.now(timezone.utc))
