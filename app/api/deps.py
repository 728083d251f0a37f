"""FastAPI dependency injection functions for database and service access."""

from typing import Generator, List, Optional

from fastapi import Query
from sqlalchemy.orm import Session

from app.config import settings
from app.database import SessionLocal
from app.models.blog_post import PostStatus
from app.schemas.blog_post import (
    BlogPostFilter,
    BlogPostSort,
    PaginationParams,
    PostSortField,
    SortDirection,
)
from app.services.blog_service import BlogService, blog_service
from app.services.blog_statistics import BlogStatisticsService, blog_statistics_service


def get_db() -> Generator[Session, None, None]:
    """
    Dependency to get database session.
    
    Yields:
        Session: SQLAlchemy database session
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_blog_service() -> BlogService:
    """The process-wide blog service."""
    return blog_service


def get_blog_statistics_service() -> BlogStatisticsService:
    return blog_statistics_service


def get_post_filter(
    status: Optional[PostStatus] = Query(None, description="Filter by status"),
    category_id: Optional[str] = Query(None, description="Filter by category"),
    author_id: Optional[str] = Query(None, description="Filter by author"),
    search: Optional[str] = Query(None, max_length=200, description="Case-insensitive search in title and content"),
    tag_ids: Optional[List[str]] = Query(None, description="Posts having any of these tags"),
) -> BlogPostFilter:
    return BlogPostFilter(
        status=status,
        category_id=category_id,
        author_id=author_id,
        search=search,
        tag_ids=tag_ids,
    )


def get_post_sort(
    sort_field: PostSortField = Query(PostSortField.CREATED_AT, description="Sort column"),
    sort_direction: SortDirection = Query(SortDirection.DESC, description="Sort direction"),
) -> BlogPostSort:
    return BlogPostSort(field=sort_field, direction=sort_direction)


def get_pagination(
    page: int = Query(1, ge=1, description="1-based page number"),
    limit: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE, description="Page size"),
) -> PaginationParams:
    return PaginationParams(page=page, limit=limit)
