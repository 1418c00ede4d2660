from pydantic import BaseModel
from typing import Optional, List

from storefront.schemas.product import ProductResponse


class CategoryResponse(BaseModel):
    id: int
    name: str
    description: Optional[str]
    image: Optional[str]
    parent_id: Optional[int]

    class Config:
        from_attributes = True


class CategoryNode(CategoryResponse):
    children: List["CategoryNode"] = []


class CategoryDetailResponse(BaseModel):
    category: CategoryResponse
    products: List[ProductResponse]


CategoryNode.model_rebuild()
