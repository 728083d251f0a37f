"""Pydantic schemas for the (external) author entity."""

from typing import Optional
from pydantic import BaseModel


class AuthorSummary(BaseModel):
    """Author info embedded in posts and comments."""
    id: str
    name: str
    email: str
    image: Optional[str] = None
    
    class Config:
        from_attributes = True
