from typing import Optional

from pydantic import BaseModel


class UserResponse(BaseModel):
    """DTO for user response (no password)"""
    id: str
    email: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    location: Optional[str] = None
