from pydantic import BaseModel
from typing import Optional
from datetime import datetime


class ProfileResponse(BaseModel):
    id: str
    full_name: Optional[str]
    avatar_url: Optional[str]
    role: str
    email: Optional[str]
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
