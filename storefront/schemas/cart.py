from pydantic import BaseModel, Field
from typing import Optional, List


class CartLineResponse(BaseModel):
    product_id: int
    name: str
    price: float
    image: Optional[str]
    quantity: int


class CartResponse(BaseModel):
    key: str
    items: List[CartLineResponse]
    total: float
    count: int


class CartAddRequest(BaseModel):
    product_id: int
    quantity: int = 1


class CartQuantityRequest(BaseModel):
    quantity: int


class LocationRequest(BaseModel):
    location: str = Field(..., min_length=1, max_length=300)


class LocationResponse(BaseModel):
    location: Optional[str]
