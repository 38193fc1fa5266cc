from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field

from app.schemas.product import ProductOut

# Paginated transaction list
class TransactionPage(BaseModel):
    success: bool = True
    data: List[ProductOut] = []
    count: int = 0

# Summary over every record in the filtered month
class SoldSummary(BaseModel):
    group_id: Optional[str] = Field(None, alias="_id")
    total_amount: float = Field(0, alias="totalAmount")
    total_items_sold: int = Field(0, alias="totalItemsSold")

    model_config = ConfigDict(populate_by_name=True)

# Summary over the unsold records of the filtered month
class NotSoldSummary(BaseModel):
    group_id: Optional[str] = Field(None, alias="_id")
    total_items_not_sold: int = Field(0, alias="totalItemsNotSold")
    # Always zero: the group only contains unsold records
    total_items_sold: int = Field(0, alias="totalItemsSold")

    model_config = ConfigDict(populate_by_name=True)

class SalesFacets(BaseModel):
    item_sold: List[SoldSummary] = Field([], alias="itemSold")
    item_not_sold: List[NotSoldSummary] = Field([], alias="itemNotSold")

    model_config = ConfigDict(populate_by_name=True)

class StatisticsResponse(BaseModel):
    total_sales: List[SalesFacets] = Field([], alias="totalSales")

    model_config = ConfigDict(populate_by_name=True)

class PriceRangeCount(BaseModel):
    range: str
    count: int

class CategoryCount(BaseModel):
    category: Optional[str] = Field(None, alias="_id")
    count: int

    model_config = ConfigDict(populate_by_name=True)

class CombinedResponse(BaseModel):
    transactions: TransactionPage
    statistics: StatisticsResponse
    bar_chart: List[PriceRangeCount] = Field(alias="barChart")
    pie_chart: List[CategoryCount] = Field(alias="pieChart")

    model_config = ConfigDict(populate_by_name=True)
