"""
Query building blocks for the transaction analytics.

Each helper returns a SQLAlchemy expression or a narrowed query so the
filter, group and paginate stages can be composed and tested on their own.
"""
from datetime import datetime
from typing import Optional

from sqlalchemy import Integer, String, and_, case, cast, extract, or_
from sqlalchemy.orm import Query

from app.models.product import Product


def month_of_sale():
    """Calendar month (1-12) of the sale date, computed on read."""
    return extract("month", Product.date_of_sale)


def price_as_text():
    """Decimal string form of the price; whole numbers render without a fraction."""
    return case(
        (Product.price == cast(Product.price, Integer), cast(cast(Product.price, Integer), String)),
        else_=cast(Product.price, String),
    )


def _like_pattern(term: str) -> str:
    escaped = term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


def month_filter(month: Optional[int]):
    """Criterion keeping sales in ``month``, or None when no month is given."""
    if month is None:
        return None
    return month_of_sale() == month


def search_filter(search: Optional[str]):
    """Case-insensitive substring match on title, description or price text."""
    if not search:
        return None
    pattern = _like_pattern(search)
    return or_(
        Product.title.ilike(pattern, escape="\\"),
        Product.description.ilike(pattern, escape="\\"),
        price_as_text().ilike(pattern, escape="\\"),
    )


def period_filter(start: datetime, end: datetime):
    """Criterion keeping sales with start <= dateOfSale < end."""
    return and_(Product.date_of_sale >= start, Product.date_of_sale < end)


def price_range_filter(min_price: float, max_price: float):
    """Criterion keeping prices inside the inclusive range."""
    return and_(Product.price >= min_price, Product.price <= max_price)


def apply_filters(query: Query, *criteria) -> Query:
    """AND together every criterion that is not None."""
    active = [criterion for criterion in criteria if criterion is not None]
    if active:
        query = query.filter(*active)
    return query


def paginate(query: Query, page: int, per_page: int) -> Query:
    """Slice a query in insertion order, skipping (page - 1) * per_page rows."""
    offset = max((page - 1) * per_page, 0)
    limit = max(per_page, 0)
    return query.order_by(Product.pk).offset(offset).limit(limit)
