from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..database import get_db
from ..schemas.metrics import MetricsResponse
from ..services.metrics_service import MetricsService
from ..utils.router_helpers import handle_service_errors

admin_router = APIRouter(tags=["admin"])


@admin_router.get("/metrics", response_model=MetricsResponse)
@handle_service_errors
async def get_metrics(db: Session = Depends(get_db)):
    """Invited and RSVP counts, plus totals per food choice"""
    return MetricsService(db).compute_metrics().as_dict()
