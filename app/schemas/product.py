from datetime import datetime, timezone
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

# Base schema for Product shared properties
class ProductBase(BaseModel):
    id: Optional[int] = None
    title: Optional[str] = None
    description: Optional[str] = None
    price: Optional[float] = None
    category: Optional[str] = None
    date_of_sale: Optional[datetime] = Field(None, alias="dateOfSale")
    sold: Optional[bool] = None

    model_config = ConfigDict(populate_by_name=True)

# Schema for one element of the seed dataset
class ProductSeed(ProductBase):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @field_validator("date_of_sale")
    @classmethod
    def normalise_to_utc(cls, v: Optional[datetime]) -> Optional[datetime]:
        """Store timestamps as naive UTC so month extraction is zone independent."""
        if v is not None and v.tzinfo is not None:
            return v.astimezone(timezone.utc).replace(tzinfo=None)
        return v

# Schema for Product returned to the client
class ProductOut(ProductBase):
    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    @field_serializer("date_of_sale")
    def serialize_date_of_sale(self, v: Optional[datetime]) -> Optional[str]:
        if v is None:
            return None
        return v.isoformat(timespec="milliseconds") + "Z"
