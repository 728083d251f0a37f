"""Statistics schemas for dashboard data."""

from typing import List

from pydantic import BaseModel, Field

from app.schemas.blog_comment import BlogCommentResponse
from app.schemas.blog_post import BlogPostResponse


class BlogStatisticsResponse(BaseModel):
    """Response schema for the blog dashboard."""
    
    # Post statistics
    total_posts: int = Field(0, description="Total posts in any status")
    published_posts: int = Field(0, description="Posts with status published")
    draft_posts: int = Field(0, description="Posts with status draft")
    
    # Taxonomy statistics
    total_categories: int = Field(0, description="Total categories")
    total_tags: int = Field(0, description="Total tags")
    
    # Comment statistics
    total_comments: int = Field(0, description="Total comments")
    approved_comments: int = Field(0, description="Approved comments")
    pending_comments: int = Field(0, description="Comments waiting for approval")
    
    # Author statistics
    total_authors: int = Field(0, description="Distinct authors with at least one post")
    
    # Lists
    recent_posts: List[BlogPostResponse] = Field(default_factory=list, description="Newest posts, any status")
    popular_posts: List[BlogPostResponse] = Field(default_factory=list, description="Most viewed published posts")
    recent_comments: List[BlogCommentResponse] = Field(default_factory=list, description="Newest comments")
