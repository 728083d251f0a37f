"""Blog tag endpoints."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.api.deps import get_blog_service, get_db, get_pagination, get_post_sort
from app.core.exceptions import BlogTagNotFoundException
from app.schemas.blog_tag import (
    BlogTagCreate,
    BlogTagListResponse,
    BlogTagResponse,
    BlogTagUpdate,
)
from app.schemas.blog_post import BlogPostFilter, BlogPostListResponse, BlogPostSort, PaginationParams
from app.services.blog_service import BlogService

router = APIRouter(
    prefix="/blog/tags",
    tags=["Blog Tags"],
)


@router.post(
    "",
    response_model=BlogTagResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create tag",
    description="Create a tag. The slug is generated from the name; a duplicate slug is rejected with 409.",
)
def create_tag(
    tag_in: BlogTagCreate,
    db: Session = Depends(get_db),
    service: BlogService = Depends(get_blog_service),
) -> BlogTagResponse:
    return service.create_tag(db, obj_in=tag_in)


@router.get(
    "",
    response_model=BlogTagListResponse,
    summary="List tags",
    description="All tags with their post counts.",
)
def list_tags(
    db: Session = Depends(get_db),
    service: BlogService = Depends(get_blog_service),
) -> BlogTagListResponse:
    tags = service.list_tags(db)
    return BlogTagListResponse(tags=tags, total_count=len(tags))


@router.get(
    "/{tag_id}",
    response_model=BlogTagResponse,
    summary="Get tag",
)
def get_tag(
    tag_id: str,
    db: Session = Depends(get_db),
    service: BlogService = Depends(get_blog_service),
) -> BlogTagResponse:
    tag = service.get_tag(db, tag_id=tag_id)
    if not tag:
        raise BlogTagNotFoundException()
    return tag


@router.put(
    "/{tag_id}",
    response_model=BlogTagResponse,
    summary="Update tag",
    description="Renaming a tag regenerates its slug.",
)
def update_tag(
    tag_id: str,
    tag_update: BlogTagUpdate,
    db: Session = Depends(get_db),
    service: BlogService = Depends(get_blog_service),
) -> BlogTagResponse:
    tag = service.update_tag(db, tag_id=tag_id, obj_in=tag_update)
    if not tag:
        raise BlogTagNotFoundException()
    return tag


@router.delete(
    "/{tag_id}",
    summary="Delete tag",
    description="Delete a tag. Posts lose the tag but are kept.",
)
def delete_tag(
    tag_id: str,
    db: Session = Depends(get_db),
    service: BlogService = Depends(get_blog_service),
) -> dict:
    if not service.delete_tag(db, tag_id=tag_id):
        raise BlogTagNotFoundException()
    return {"message": "Tag deleted successfully", "success": True}


@router.get(
    "/{tag_id}/posts",
    response_model=BlogPostListResponse,
    summary="List posts with a tag",
)
def list_tag_posts(
    tag_id: str,
    sort: BlogPostSort = Depends(get_post_sort),
    pagination: PaginationParams = Depends(get_pagination),
    db: Session = Depends(get_db),
    service: BlogService = Depends(get_blog_service),
) -> BlogPostListResponse:
    if not service.get_tag(db, tag_id=tag_id):
        raise BlogTagNotFoundException()
    return service.list_posts(
        db,
        post_filter=BlogPostFilter(tag_ids=[tag_id]),
        sort=sort,
        pagination=pagination,
    )
