import logging
from typing import Optional
from fastapi import APIRouter, Depends, Query

from app.api.deps import get_analytics
from app.core.config import settings
from app.core.errors import AnalyticsError
from app.schemas.analytics import StatisticsResponse, TransactionPage
from app.services.analytics.engine import TransactionAnalytics

logger = logging.getLogger(__name__)

router = APIRouter()

@router.get("/transactions", response_model=TransactionPage)
async def list_transactions(
    month: Optional[int] = Query(None, ge=1, le=12, description="Calendar month of the sale (1-12)"),
    search: Optional[str] = Query(None, description="Matches title, description or price"),
    page: int = Query(1, ge=1),
    per_page: int = Query(settings.DEFAULT_PER_PAGE, ge=1, alias="perPage"),
    analytics: TransactionAnalytics = Depends(get_analytics)
):
    """List transactions, optionally filtered by month and search text, one page at a time."""
    try:
        result = analytics.list_transactions(
            month=month, search=search, page=page, per_page=per_page
        )
    except Exception as e:
        logger.exception(f"Error fetching transactions: {str(e)}")
        raise AnalyticsError("Error fetching transactions", e)

    return {"success": True, **result}

@router.get("/statistics", response_model=StatisticsResponse)
async def get_statistics(
    month: Optional[int] = Query(None, ge=1, le=12),
    analytics: TransactionAnalytics = Depends(get_analytics)
):
    """Get the total sale amount and the sold / not sold item counts."""
    try:
        return analytics.get_statistics(month=month)
    except Exception as e:
        logger.exception(f"Error fetching statistics: {str(e)}")
        raise AnalyticsError("Error fetching statistics", e)
