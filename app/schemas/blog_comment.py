"""Pydantic schemas for BlogComment."""

from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, Field

from app.schemas.user import AuthorSummary


class BlogCommentCreate(BaseModel):
    """Schema for creating a comment."""
    content: str = Field(..., min_length=1, max_length=1000, description="Comment content")
    post_id: str
    author_id: str
    parent_id: Optional[str] = Field(None, description="Parent comment for threaded replies")
    is_approved: bool = False


class BlogCommentUpdate(BaseModel):
    """Schema for editing a comment."""
    content: str = Field(..., min_length=1, max_length=1000)


class CommentPostSummary(BaseModel):
    """Post identity shown next to a comment."""
    id: str
    title: str
    slug: str
    
    class Config:
        from_attributes = True


class BlogCommentResponse(BaseModel):
    """Schema for BlogComment response."""
    id: str
    content: str
    post_id: str
    author_id: str
    parent_id: Optional[str] = None
    is_approved: bool
    created_at: datetime
    updated_at: datetime
    author: Optional[AuthorSummary] = None
    post: Optional[CommentPostSummary] = None
    
    class Config:
        from_attributes = True


class BlogCommentListResponse(BaseModel):
    """Response for listing comments."""
    comments: List[BlogCommentResponse]
    total_count: int
