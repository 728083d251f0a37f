"""Blog category endpoints."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.api.deps import get_blog_service, get_db, get_pagination, get_post_sort
from app.core.exceptions import BlogCategoryNotFoundException
from app.schemas.blog_category import (
    BlogCategoryCreate,
    BlogCategoryListResponse,
    BlogCategoryResponse,
    BlogCategoryUpdate,
)
from app.schemas.blog_post import BlogPostFilter, BlogPostListResponse, BlogPostSort, PaginationParams
from app.services.blog_service import BlogService

router = APIRouter(
    prefix="/blog/categories",
    tags=["Blog Categories"],
)


@router.post(
    "",
    response_model=BlogCategoryResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create category",
    description="Create a category. The slug is generated from the name; a duplicate slug is rejected with 409.",
)
def create_category(
    category_in: BlogCategoryCreate,
    db: Session = Depends(get_db),
    service: BlogService = Depends(get_blog_service),
) -> BlogCategoryResponse:
    return service.create_category(db, obj_in=category_in)


@router.get(
    "",
    response_model=BlogCategoryListResponse,
    summary="List categories",
    description="All categories with their post counts.",
)
def list_categories(
    db: Session = Depends(get_db),
    service: BlogService = Depends(get_blog_service),
) -> BlogCategoryListResponse:
    categories = service.list_categories(db)
    return BlogCategoryListResponse(categories=categories, total_count=len(categories))


@router.get(
    "/{category_id}",
    response_model=BlogCategoryResponse,
    summary="Get category",
)
def get_category(
    category_id: str,
    db: Session = Depends(get_db),
    service: BlogService = Depends(get_blog_service),
) -> BlogCategoryResponse:
    category = service.get_category(db, category_id=category_id)
    if not category:
        raise BlogCategoryNotFoundException()
    return category


@router.put(
    "/{category_id}",
    response_model=BlogCategoryResponse,
    summary="Update category",
    description="Renaming a category regenerates its slug.",
)
def update_category(
    category_id: str,
    category_update: BlogCategoryUpdate,
    db: Session = Depends(get_db),
    service: BlogService = Depends(get_blog_service),
) -> BlogCategoryResponse:
    category = service.update_category(db, category_id=category_id, obj_in=category_update)
    if not category:
        raise BlogCategoryNotFoundException()
    return category


@router.delete(
    "/{category_id}",
    summary="Delete category",
    description="Delete a category. Its posts are kept and become uncategorized.",
)
def delete_category(
    category_id: str,
    db: Session = Depends(get_db),
    service: BlogService = Depends(get_blog_service),
) -> dict:
    if not service.delete_category(db, category_id=category_id):
        raise BlogCategoryNotFoundException()
    return {"message": "Category deleted successfully", "success": True}


@router.get(
    "/{category_id}/posts",
    response_model=BlogPostListResponse,
    summary="List posts of a category",
)
def list_category_posts(
    category_id: str,
    sort: BlogPostSort = Depends(get_post_sort),
    pagination: PaginationParams = Depends(get_pagination),
    db: Session = Depends(get_db),
    service: BlogService = Depends(get_blog_service),
) -> BlogPostListResponse:
    if not service.get_category(db, category_id=category_id):
        raise BlogCategoryNotFoundException()
    return service.list_posts(
        db,
        post_filter=BlogPostFilter(category_id=category_id),
        sort=sort,
        pagination=pagination,
    )
