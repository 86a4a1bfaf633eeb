from pydantic import BaseModel, Field, ConfigDict
from typing import Optional
from datetime import datetime


class UserProfileUpdateRequest(BaseModel):
    name: Optional[str] = None


class UserProfileResponse(BaseModel):
    id: str = Field(alias="_id")
    name: Optional[str] = None
    created_at: Optional[datetime] = None

    model_config = ConfigDict(populate_by_name=True)
