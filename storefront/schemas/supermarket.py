from pydantic import BaseModel, Field
from typing import Optional, List


class StoreResponse(BaseModel):
    id: int
    name: str
    address: Optional[str]
    price: Optional[str]
    delivery_time: Optional[str]
    delivery_fee: Optional[float]
    main_image: Optional[str]
    gallery_images: Optional[List[str]]

    class Config:
        from_attributes = True


class StoreCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    address: Optional[str] = Field(None, max_length=500)
    delivery_time: Optional[str] = Field(None, max_length=50)
    main_image: Optional[str] = Field(None, max_length=500)
    gallery_images: Optional[List[str]] = None
