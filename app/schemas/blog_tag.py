"""Pydantic schemas for BlogTag."""

from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, Field, field_validator

from app.utils.slug import is_valid_slug, slugify


class BlogTagCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=50, description="Tag name")

    @field_validator("name")
    @classmethod
    def name_must_be_sluggable(cls, v: str) -> str:
        if not is_valid_slug(slugify(v)):
            raise ValueError("must contain at least one letter or digit")
        return v


class BlogTagUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=50)

    @field_validator("name")
    @classmethod
    def name_must_be_sluggable(cls, v: Optional[str]) -> Optional[str]:
        if v is None or not is_valid_slug(slugify(v)):
            raise ValueError("must contain at least one letter or digit")
        return v


class BlogTagSummary(BaseModel):
    id: str
    name: str
    slug: str
    
    class Config:
        from_attributes = True


class BlogTagResponse(BlogTagSummary):
    posts_count: int = 0
    created_at: datetime
    updated_at: datetime


class BlogTagListResponse(BaseModel):
    tags: List[BlogTagResponse]
    total_count: int
