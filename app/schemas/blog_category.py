"""Pydantic schemas for BlogCategory."""

from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, Field, field_validator

from app.utils.slug import is_valid_slug, slugify


def _require_sluggable(value: Optional[str]) -> Optional[str]:
    if value is not None and not is_valid_slug(slugify(value)):
        raise ValueError("must contain at least one letter or digit")
    return value


class BlogCategoryBase(BaseModel):
    """Base schema for BlogCategory."""
    name: str = Field(..., min_length=1, max_length=100, description="Category name")
    description: Optional[str] = Field(None, description="Category description")


class BlogCategoryCreate(BlogCategoryBase):
    """Schema for creating a new category. The slug is derived from the name."""

    @field_validator("name")
    @classmethod
    def name_must_be_sluggable(cls, v: str) -> str:
        return _require_sluggable(v)


class BlogCategoryUpdate(BaseModel):
    """Schema for updating a category."""
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    description: Optional[str] = None

    @field_validator("name")
    @classmethod
    def name_must_be_sluggable(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            raise ValueError("name cannot be null")
        return _require_sluggable(v)


class BlogCategorySummary(BaseModel):
    """Category info embedded in a post."""
    id: str
    name: str
    slug: str
    description: Optional[str] = None
    
    class Config:
        from_attributes = True


class BlogCategoryResponse(BlogCategorySummary):
    """Schema for BlogCategory response."""
    posts_count: int = 0
    created_at: datetime
    updated_at: datetime


class BlogCategoryListResponse(BaseModel):
    """Response for listing categories."""
    categories: List[BlogCategoryResponse]
    total_count: int
