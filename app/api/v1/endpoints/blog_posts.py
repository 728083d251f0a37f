"""Blog post endpoints."""

import logging

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.api.deps import (
    get_blog_service,
    get_db,
    get_pagination,
    get_post_filter,
    get_post_sort,
)
from app.core.exceptions import BlogConflictException, BlogPostNotFoundException
from app.models.blog_post import PostStatus
from app.schemas.blog_comment import BlogCommentListResponse
from app.schemas.blog_post import (
    BlogPostCreate,
    BlogPostFilter,
    BlogPostListResponse,
    BlogPostResponse,
    BlogPostSort,
    BlogPostUpdate,
    BlogPostViewResponse,
    PaginationParams,
)
from app.services.blog_service import BlogService

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/blog/posts",
    tags=["Blog Posts"],
)


@router.post(
    "",
    response_model=BlogPostResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create blog post",
    description="""
    Create a new blog post. The slug is generated from the title.

    A post created as `published` without `published_at` is stamped with the
    current time. Unknown `tag_ids` are rejected with 409.
    """,
)
def create_post(
    post_in: BlogPostCreate,
    db: Session = Depends(get_db),
    service: BlogService = Depends(get_blog_service),
) -> BlogPostResponse:
    """Create a new blog post."""
    try:
        return service.create_post(db, obj_in=post_in)
    except ValueError as e:
        logger.warning(f"[BLOG] Post create rejected: {e}")
        raise BlogConflictException(detail=str(e))


@router.get(
    "",
    response_model=BlogPostListResponse,
    status_code=status.HTTP_200_OK,
    summary="List blog posts",
    description="""
    Get one page of posts matching the filter.

    **Filters** (all optional, combined with AND): `status`, `category_id`,
    `author_id`, `search` (title or content, case-insensitive), `tag_ids`.

    **Sorting:** `sort_field` in `created_at`, `updated_at`, `published_at`,
    `title`, `view_count`; `sort_direction` in `asc`, `desc`.
    """,
)
def list_posts(
    post_filter: BlogPostFilter = Depends(get_post_filter),
    sort: BlogPostSort = Depends(get_post_sort),
    pagination: PaginationParams = Depends(get_pagination),
    db: Session = Depends(get_db),
    service: BlogService = Depends(get_blog_service),
) -> BlogPostListResponse:
    """List blog posts."""
    return service.list_posts(db, post_filter=post_filter, sort=sort, pagination=pagination)


@router.get(
    "/{post_id}",
    response_model=BlogPostResponse,
    status_code=status.HTTP_200_OK,
    summary="Get blog post",
)
def get_post(
    post_id: str,
    db: Session = Depends(get_db),
    service: BlogService = Depends(get_blog_service),
) -> BlogPostResponse:
    """Get post detail with category, author, tags and comment count."""
    post = service.get_post(db, post_id=post_id)
    if not post:
        raise BlogPostNotFoundException()
    return post


@router.put(
    "/{post_id}",
    response_model=BlogPostResponse,
    status_code=status.HTTP_200_OK,
    summary="Update blog post",
    description="""
    Partially update a post. Changing the title regenerates the slug.
    `tag_ids` replaces the post's whole tag set atomically.
    """,
)
def update_post(
    post_id: str,
    post_update: BlogPostUpdate,
    db: Session = Depends(get_db),
    service: BlogService = Depends(get_blog_service),
) -> BlogPostResponse:
    """Update a blog post."""
    try:
        post = service.update_post(db, post_id=post_id, obj_in=post_update)
    except ValueError as e:
        logger.warning(f"[BLOG] Post {post_id} update rejected: {e}")
        raise BlogConflictException(detail=str(e))
    if not post:
        raise BlogPostNotFoundException()
    return post


@router.delete(
    "/{post_id}",
    status_code=status.HTTP_200_OK,
    summary="Delete blog post",
    description="Delete a post together with its comments and tag links.",
)
def delete_post(
    post_id: str,
    db: Session = Depends(get_db),
    service: BlogService = Depends(get_blog_service),
) -> dict:
    """Delete a blog post."""
    if not service.delete_post(db, post_id=post_id):
        raise BlogPostNotFoundException()
    return {"message": "Blog post deleted successfully", "success": True}


def _change_status(db: Session, service: BlogService, post_id: str, new_status: PostStatus) -> BlogPostResponse:
    post = service.change_status(db, post_id=post_id, status=new_status)
    if not post:
        raise BlogPostNotFoundException()
    return post


@router.post(
    "/{post_id}/publish",
    response_model=BlogPostResponse,
    summary="Publish blog post",
    description="Set status to `published`. `published_at` is stamped the first time only.",
)
def publish_post(
    post_id: str,
    db: Session = Depends(get_db),
    service: BlogService = Depends(get_blog_service),
) -> BlogPostResponse:
    return _change_status(db, service, post_id, PostStatus.PUBLISHED)


@router.post(
    "/{post_id}/unpublish",
    response_model=BlogPostResponse,
    summary="Unpublish blog post",
    description="Set status back to `draft`. `published_at` is kept.",
)
def unpublish_post(
    post_id: str,
    db: Session = Depends(get_db),
    service: BlogService = Depends(get_blog_service),
) -> BlogPostResponse:
    return _change_status(db, service, post_id, PostStatus.DRAFT)


@router.post(
    "/{post_id}/archive",
    response_model=BlogPostResponse,
    summary="Archive blog post",
)
def archive_post(
    post_id: str,
    db: Session = Depends(get_db),
    service: BlogService = Depends(get_blog_service),
) -> BlogPostResponse:
    return _change_status(db, service, post_id, PostStatus.ARCHIVED)


@router.post(
    "/{post_id}/view",
    response_model=BlogPostViewResponse,
    summary="Record a post view",
    description="Atomically increment the post's view counter.",
)
def record_view(
    post_id: str,
    db: Session = Depends(get_db),
    service: BlogService = Depends(get_blog_service),
) -> BlogPostViewResponse:
    result = service.record_view(db, post_id=post_id)
    if not result:
        raise BlogPostNotFoundException()
    return result


@router.get(
    "/{post_id}/comments",
    response_model=BlogCommentListResponse,
    summary="Get post comments",
    description="Comments of a post, newest first. Use `approved_only` for the public view.",
)
def get_post_comments(
    post_id: str,
    approved_only: bool = Query(False, description="Only approved comments"),
    db: Session = Depends(get_db),
    service: BlogService = Depends(get_blog_service),
) -> BlogCommentListResponse:
    comments = service.list_post_comments(db, post_id=post_id, approved_only=approved_only)
    if comments is None:
        raise BlogPostNotFoundException()
    return BlogCommentListResponse(comments=comments, total_count=len(comments))
