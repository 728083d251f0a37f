"""Pydantic schemas for BlogPost, including list filter/sort/pagination."""

from datetime import datetime, timezone
from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, Field, HttpUrl, TypeAdapter, ValidationError, field_validator, model_validator

from app.config import settings
from app.models.blog_post import PostStatus
from app.schemas.blog_category import BlogCategorySummary
from app.schemas.blog_tag import BlogTagSummary
from app.schemas.user import AuthorSummary
from app.utils.slug import is_valid_slug, slugify

_http_url = TypeAdapter(HttpUrl)


def _check_title(value: str) -> str:
    if not is_valid_slug(slugify(value)):
        raise ValueError("title must contain at least one letter or digit")
    return value


def _check_image_url(value: Optional[str]) -> Optional[str]:
    if value is None:
        return value
    try:
        _http_url.validate_python(value)
    except ValidationError:
        raise ValueError("featured_image must be a valid http(s) URL")
    return value


def _to_naive_utc(value: Optional[datetime]) -> Optional[datetime]:
    if value is not None and value.tzinfo is not None:
        return value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


class BlogPostBase(BaseModel):
    """Base schema for BlogPost."""
    title: str = Field(..., min_length=1, max_length=200, description="Post title")
    content: str = Field(..., min_length=1, description="Post body")
    excerpt: Optional[str] = Field(None, max_length=500, description="Short summary")
    featured_image: Optional[str] = Field(None, max_length=500, description="Featured image URL")


class BlogPostCreate(BlogPostBase):
    """Schema for creating a new post. The slug is derived from the title."""
    status: PostStatus = PostStatus.DRAFT
    published_at: Optional[datetime] = None
    author_id: str = Field(..., min_length=1)
    category_id: Optional[str] = None
    tag_ids: List[str] = Field(default_factory=list)

    @field_validator("title")
    @classmethod
    def title_must_be_sluggable(cls, v: str) -> str:
        return _check_title(v)

    @field_validator("featured_image")
    @classmethod
    def featured_image_must_be_url(cls, v: Optional[str]) -> Optional[str]:
        return _check_image_url(v)

    @field_validator("published_at")
    @classmethod
    def published_at_to_utc(cls, v: Optional[datetime]) -> Optional[datetime]:
        return _to_naive_utc(v)


class BlogPostUpdate(BaseModel):
    """
    Schema for updating a post.

    Only fields present in the payload are applied. ``tag_ids`` replaces the
    whole tag set; send ``[]`` to clear it. ``category_id: null`` removes the
    post from its category.
    """
    title: Optional[str] = Field(None, min_length=1, max_length=200)
    content: Optional[str] = Field(None, min_length=1)
    excerpt: Optional[str] = Field(None, max_length=500)
    featured_image: Optional[str] = Field(None, max_length=500)
    status: Optional[PostStatus] = None
    published_at: Optional[datetime] = None
    category_id: Optional[str] = None
    tag_ids: Optional[List[str]] = None

    @field_validator("featured_image")
    @classmethod
    def featured_image_must_be_url(cls, v: Optional[str]) -> Optional[str]:
        return _check_image_url(v)

    @field_validator("published_at")
    @classmethod
    def published_at_to_utc(cls, v: Optional[datetime]) -> Optional[datetime]:
        return _to_naive_utc(v)

    @field_validator("title")
    @classmethod
    def title_must_be_sluggable(cls, v: Optional[str]) -> Optional[str]:
        return v if v is None else _check_title(v)

    @model_validator(mode="after")
    def reject_null_required_fields(self):
        for name in ("title", "content", "status", "tag_ids"):
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"{name} cannot be null")
        return self


class PostSortField(str, Enum):
    CREATED_AT = "created_at"
    UPDATED_AT = "updated_at"
    PUBLISHED_AT = "published_at"
    TITLE = "title"
    VIEW_COUNT = "view_count"


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


class BlogPostFilter(BaseModel):
    """Filter for listing posts. Absent fields do not constrain the result."""
    status: Optional[PostStatus] = None
    category_id: Optional[str] = None
    author_id: Optional[str] = None
    search: Optional[str] = Field(None, max_length=200)
    tag_ids: Optional[List[str]] = None

    @field_validator("search")
    @classmethod
    def blank_search_is_no_search(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        v = v.strip()
        return v or None


class BlogPostSort(BaseModel):
    field: PostSortField = PostSortField.CREATED_AT
    direction: SortDirection = SortDirection.DESC


class PaginationParams(BaseModel):
    page: int = Field(1, ge=1, description="1-based page number")
    limit: int = Field(settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


class BlogPostResponse(BaseModel):
    """Enriched post: category, author, tags and approved comment count."""
    id: str
    title: str
    slug: str
    content: str
    excerpt: Optional[str] = None
    featured_image: Optional[str] = None
    status: PostStatus
    published_at: Optional[datetime] = None
    view_count: int
    author_id: str
    category_id: Optional[str] = None
    created_at: datetime
    updated_at: datetime
    category: Optional[BlogCategorySummary] = None
    author: Optional[AuthorSummary] = None
    tags: List[BlogTagSummary] = []
    comments_count: int = 0
    
    class Config:
        from_attributes = True


class BlogPostListResponse(BaseModel):
    """Response for listing posts."""
    posts: List[BlogPostResponse]
    total_count: int
    total_pages: int
    current_page: int


class BlogPostViewResponse(BaseModel):
    post_id: str
    view_count: int
