from pydantic import BaseModel, Field, validator
from typing import Optional, List
from datetime import datetime


class ProductResponse(BaseModel):
    id: int
    name: str
    price: float
    image: Optional[str]
    description: Optional[str]
    quantity: Optional[int]
    categoryid: Optional[int]
    supermarketid: Optional[int]
    date_added: Optional[datetime]

    class Config:
        from_attributes = True


class ProductDetailResponse(BaseModel):
    product: ProductResponse
    related: List[ProductResponse]


class InventoryProductResponse(BaseModel):
    id: int
    name: str
    price: float
    image: str
    quantity: Optional[int]
    date_added: Optional[datetime]


class ProductUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=200)
    price: Optional[float] = Field(None, ge=0)
    quantity: Optional[int] = Field(None, ge=0)

    @validator("name")
    def validate_name(cls, v):
        if v is not None and not v.strip():
            raise ValueError("Product name cannot be empty")
        return v.strip() if v else v
