from pydantic import BaseModel
from typing import Optional


class CreateVendorRequest(BaseModel):
    # Presence is checked by the service so the error text stays uniform.
    name: Optional[str] = None
    email: Optional[str] = None
    avatar_base64: Optional[str] = None


class CreateVendorResponse(BaseModel):
    success: bool
    password: str


class VendorResponse(BaseModel):
    id: str
    full_name: Optional[str]
    avatar_url: Optional[str]
    email: Optional[str]
    role: str

    class Config:
        from_attributes = True
