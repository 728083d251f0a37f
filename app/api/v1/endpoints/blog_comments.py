"""Blog comment endpoints (moderation)."""

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.api.deps import get_blog_service, get_db
from app.core.exceptions import (
    BlogCommentNotFoundException,
    BlogPostNotFoundException,
    InvalidParentCommentException,
)
from app.schemas.blog_comment import BlogCommentCreate, BlogCommentResponse, BlogCommentUpdate
from app.services.blog_service import BlogService

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/blog/comments",
    tags=["Blog Comments"],
)


@router.post(
    "",
    response_model=BlogCommentResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create comment",
    description="""
    Create a comment on a post. Set `parent_id` to reply to another comment
    of the same post. New comments are pending until approved.
    """,
)
def create_comment(
    comment_in: BlogCommentCreate,
    db: Session = Depends(get_db),
    service: BlogService = Depends(get_blog_service),
) -> BlogCommentResponse:
    try:
        return service.create_comment(db, obj_in=comment_in)
    except LookupError:
        raise BlogPostNotFoundException()
    except ValueError as e:
        logger.warning(f"[BLOG] Comment rejected on post {comment_in.post_id}: {e}")
        raise InvalidParentCommentException(detail=str(e))


@router.get(
    "/{comment_id}",
    response_model=BlogCommentResponse,
    summary="Get comment",
)
def get_comment(
    comment_id: str,
    db: Session = Depends(get_db),
    service: BlogService = Depends(get_blog_service),
) -> BlogCommentResponse:
    comment = service.get_comment(db, comment_id=comment_id)
    if not comment:
        raise BlogCommentNotFoundException()
    return comment


@router.put(
    "/{comment_id}",
    response_model=BlogCommentResponse,
    summary="Edit comment",
)
def update_comment(
    comment_id: str,
    comment_update: BlogCommentUpdate,
    db: Session = Depends(get_db),
    service: BlogService = Depends(get_blog_service),
) -> BlogCommentResponse:
    comment = service.update_comment(db, comment_id=comment_id, obj_in=comment_update)
    if not comment:
        raise BlogCommentNotFoundException()
    return comment


@router.post(
    "/{comment_id}/approve",
    response_model=BlogCommentResponse,
    summary="Approve comment",
)
def approve_comment(
    comment_id: str,
    db: Session = Depends(get_db),
    service: BlogService = Depends(get_blog_service),
) -> BlogCommentResponse:
    comment = service.set_comment_approval(db, comment_id=comment_id, is_approved=True)
    if not comment:
        raise BlogCommentNotFoundException()
    return comment


@router.post(
    "/{comment_id}/reject",
    response_model=BlogCommentResponse,
    summary="Reject comment",
    description="Mark a comment as not approved. The comment is kept.",
)
def reject_comment(
    comment_id: str,
    db: Session = Depends(get_db),
    service: BlogService = Depends(get_blog_service),
) -> BlogCommentResponse:
    comment = service.set_comment_approval(db, comment_id=comment_id, is_approved=False)
    if not comment:
        raise BlogCommentNotFoundException()
    return comment


@router.delete(
    "/{comment_id}",
    summary="Delete comment",
    description="Delete a comment and all replies below it.",
)
def delete_comment(
    comment_id: str,
    db: Session = Depends(get_db),
    service: BlogService = Depends(get_blog_service),
) -> dict:
    if not service.delete_comment(db, comment_id=comment_id):
        raise BlogCommentNotFoundException()
    return {"message": "Comment deleted successfully", "success": True}
