import logging
from typing import List
from fastapi import APIRouter, Depends, Query

from app.api.deps import get_analytics
from app.core.errors import AnalyticsError
from app.schemas.analytics import CategoryCount, PriceRangeCount
from app.services.analytics.engine import TransactionAnalytics
from app.services.analytics.periods import month_name

logger = logging.getLogger(__name__)

router = APIRouter()

# Unlike /transactions and /statistics, the chart endpoints take the month
# by name ("March") and always look at the configured sales year.

@router.get("/bar-chart", response_model=List[PriceRangeCount])
async def get_bar_chart(
    month: str = Query(..., description="Month name, e.g. March"),
    analytics: TransactionAnalytics = Depends(get_analytics)
):
    """Get the number of sales in each price range for a month."""
    name = month_name(month)
    try:
        return analytics.bar_chart(name)
    except Exception as e:
        logger.exception(f"Error fetching bar chart data: {str(e)}")
        raise AnalyticsError("Error fetching bar chart data", e)

@router.get("/pie-chart", response_model=List[CategoryCount])
async def get_pie_chart(
    month: str = Query(..., description="Month name, e.g. March"),
    analytics: TransactionAnalytics = Depends(get_analytics)
):
    """Get the number of sales in each category for a month."""
    name = month_name(month)
    try:
        return analytics.pie_chart(name)
    except Exception as e:
        logger.exception(f"Error fetching pie chart data: {str(e)}")
        raise AnalyticsError("Error fetching pie chart data", e)
