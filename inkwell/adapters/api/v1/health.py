from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from inkwell.adapters.api.dependencies import get_container
from inkwell.core.container import ServiceContainer

router = APIRouter()


class HealthResponse(BaseModel):
    status: str
    database: str
    timestamp: datetime


@router.get("", response_model=HealthResponse)
async def health_check(container: ServiceContainer = Depends(get_container)):
    """
    Liveness probe. Reports ``ok`` when the database answers, ``degraded``
    otherwise; always 200 so the process itself counts as alive.
    """
    db_healthy = await container.database.check_health()
    return HealthResponse(
        status="ok" if db_healthy else "degraded",
        database="ok" if db_healthy else "unavailable",
        timestamp=datetime.now(timezone.utc),
    )
