# backend/modules/dashboard/routes/dashboard_routes.py

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from core.database import get_db
from ..schemas.dashboard_schemas import DashboardResponse
from ..services.dashboard_service import DashboardService

router = APIRouter(prefix="/dashboard", tags=["Dashboard"])


def get_dashboard_service(db: Session = Depends(get_db)) -> DashboardService:
    return DashboardService(db)


@router.get("", response_model=DashboardResponse)
async def get_dashboard(
    dashboard_service: DashboardService = Depends(get_dashboard_service),
):
    """Headline KPIs, the last seven days of sales and the latest orders"""
    return await dashboard_service.get_dashboard_data()
