from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from models.enums import UserRole


class UserRegister(BaseModel):
    name: str
    email: str = Field(..., min_length=1)
    photo: Optional[str] = None
    role: UserRole = UserRole.BORROWER
    # Upstream identity providers may carry their own account creation time
    created_at: Optional[datetime] = Field(None, alias="createdAt")

    model_config = {"populate_by_name": True}


class RoleUpdate(BaseModel):
    role: UserRole


class UserSuspend(BaseModel):
    reason: Optional[str] = None
    feedback: Optional[str] = None
