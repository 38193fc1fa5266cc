import logging
from typing import Any, Dict, List, Optional, Union

from sqlalchemy import case, func
from sqlalchemy.orm import Session

from app.core.config import settings
from app.models.product import Product
from app.services.analytics.filters import (
    apply_filters,
    month_filter,
    paginate,
    period_filter,
    price_range_filter,
    search_filter,
)
from app.services.analytics.periods import PRICE_BUCKETS, month_name, resolve_month, sale_period

logger = logging.getLogger(__name__)


class TransactionAnalytics:
    """
    TransactionAnalytics answers the dashboard queries over the product table.

    Every read is a pure function of the current table contents and its
    arguments. Results are plain dicts shaped like the HTTP responses.
    """
    def __init__(self, db: Session, sales_year: Optional[int] = None):
        self.db = db
        self.sales_year = sales_year or settings.SALES_YEAR

    def list_transactions(
        self,
        month: Optional[int] = None,
        search: Optional[str] = None,
        page: int = 1,
        per_page: int = 10,
    ) -> Dict[str, Any]:
        """
        List the transactions matching a month and a free-text search.

        Args:
            month: Calendar month of the sale (1-12); None disables the filter
            search: Substring matched against title, description and price
            page: 1-based page number
            per_page: Page size

        Returns:
            Dict with the page of products under "data" and the size of the
            whole filtered set under "count"
        """
        filtered = apply_filters(
            self.db.query(Product),
            month_filter(month),
            search_filter(search),
        )

        count = filtered.order_by(None).count()
        data = paginate(filtered, page, per_page).all()

        return {"data": data, "count": count}

    def get_statistics(self, month: Optional[int] = None) -> Dict[str, Any]:
        """Total sale amount with sold and not sold item counts for a month."""
        criterion = month_filter(month)

        sold_row = apply_filters(
            self.db.query(
                func.count(Product.pk).label("records"),
                func.coalesce(func.sum(Product.price), 0).label("total_amount"),
                func.coalesce(func.sum(case((Product.sold.is_(True), 1), else_=0)), 0).label("items_sold"),
            ),
            criterion,
        ).one()

        # Summed over every record in the month, sold or not
        item_sold = []
        if sold_row.records:
            item_sold.append({
                "_id": None,
                "totalAmount": float(sold_row.total_amount),
                "totalItemsSold": int(sold_row.items_sold),
            })

        not_sold_row = apply_filters(
            self.db.query(
                func.count(Product.pk).label("records"),
                func.coalesce(func.sum(case((Product.sold.is_(True), 1), else_=0)), 0).label("items_sold"),
            ),
            criterion,
            Product.sold.is_(False),
        ).one()

        item_not_sold = []
        if not_sold_row.records:
            item_not_sold.append({
                "_id": None,
                "totalItemsNotSold": int(not_sold_row.records),
                "totalItemsSold": int(not_sold_row.items_sold),
            })

        return {"totalSales": [{"itemSold": item_sold, "itemNotSold": item_not_sold}]}

    def bar_chart(self, month: Union[str, int]) -> List[Dict[str, Any]]:
        """Number of sales per price bucket for a month of the sales year."""
        start, end = sale_period(month, self.sales_year)

        result = []
        for bucket in PRICE_BUCKETS:
            count = apply_filters(
                self.db.query(Product),
                period_filter(start, end),
                price_range_filter(bucket.min_price, bucket.max_price),
            ).count()
            result.append({"range": bucket.label, "count": count})

        return result

    def pie_chart(self, month: Union[str, int]) -> List[Dict[str, Any]]:
        """Number of sales per category for a month of the sales year."""
        start, end = sale_period(month, self.sales_year)

        rows = apply_filters(
            self.db.query(
                Product.category,
                func.count(Product.pk).label("count"),
            ),
            period_filter(start, end),
        ).group_by(
            Product.category
        ).all()

        return [{"_id": row.category, "count": row.count} for row in rows]

    def combined(self, month: Union[str, int]) -> Dict[str, Any]:
        """Run all four dashboard queries for one month."""
        number = resolve_month(month)
        name = month_name(number)
        logger.debug(f"Building combined dashboard for {name}")

        transactions = self.list_transactions(month=number, per_page=settings.DEFAULT_PER_PAGE)

        return {
            "transactions": {"success": True, **transactions},
            "statistics": self.get_statistics(month=number),
            "barChart": self.bar_chart(name),
            "pieChart": self.pie_chart(name),
        }
