import logging
from fastapi import APIRouter, Depends, Query

from app.api.deps import get_analytics
from app.core.errors import AnalyticsError
from app.schemas.analytics import CombinedResponse
from app.services.analytics.engine import TransactionAnalytics
from app.services.analytics.periods import resolve_month

logger = logging.getLogger(__name__)

router = APIRouter()

@router.get("/combined", response_model=CombinedResponse)
async def get_combined(
    month: str = Query(..., description="Month number (3) or name (March)"),
    analytics: TransactionAnalytics = Depends(get_analytics)
):
    """Get transactions, statistics and both charts for a month in one call."""
    number = resolve_month(month)
    try:
        return analytics.combined(number)
    except Exception as e:
        logger.exception(f"Error fetching combined data: {str(e)}")
        raise AnalyticsError("Error fetching combined data", e)
