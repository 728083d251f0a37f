"""Service layer for the blog module: posts, categories, tags and comments."""

import logging
import math
from typing import List, Optional

from sqlalchemy.orm import Session

from app.crud import (
    crud_blog_category,
    crud_blog_comment,
    crud_blog_post,
    crud_blog_tag,
)
from app.models.blog_post import BlogPost, PostStatus
from app.schemas.blog_category import (
    BlogCategoryCreate,
    BlogCategoryResponse,
    BlogCategorySummary,
    BlogCategoryUpdate,
)
from app.schemas.blog_comment import BlogCommentCreate, BlogCommentResponse, BlogCommentUpdate
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
from app.schemas.blog_tag import BlogTagCreate, BlogTagResponse, BlogTagSummary, BlogTagUpdate
from app.schemas.user import AuthorSummary

logger = logging.getLogger(__name__)


class BlogService:
    """
    Stateless facade over the blog CRUD singletons.

    Every method takes the request's database session and returns response
    schemas, so ORM objects never leave the session that loaded them. Missing
    records come back as ``None``/``False``; routers decide the HTTP status.
    """

    # ----- Enrichment -----
    @staticmethod
    def to_post_response(post: BlogPost, comments_count: int = 0) -> BlogPostResponse:
        """Build an enriched post from a post whose relations are loaded."""
        return BlogPostResponse(
            id=post.id,
            title=post.title,
            slug=post.slug,
            content=post.content,
            excerpt=post.excerpt,
            featured_image=post.featured_image,
            status=post.status,
            published_at=post.published_at,
            view_count=post.view_count,
            author_id=post.author_id,
            category_id=post.category_id,
            created_at=post.created_at,
            updated_at=post.updated_at,
            category=BlogCategorySummary.model_validate(post.category) if post.category else None,
            author=AuthorSummary.model_validate(post.author) if post.author else None,
            tags=[BlogTagSummary.model_validate(tag) for tag in post.tags],
            comments_count=comments_count,
        )

    def enrich_posts(self, db: Session, posts: List[BlogPost]) -> List[BlogPostResponse]:
        counts = crud_blog_post.get_approved_comment_counts(db, post_ids=[post.id for post in posts])
        return [self.to_post_response(post, counts.get(post.id, 0)) for post in posts]

    # ----- Posts -----
    def create_post(self, db: Session, *, obj_in: BlogPostCreate) -> BlogPostResponse:
        post = crud_blog_post.create_post(db, obj_in=obj_in)
        return self.get_post(db, post_id=post.id)

    def get_post(self, db: Session, *, post_id: str) -> Optional[BlogPostResponse]:
        post = crud_blog_post.get_with_relations(db, post_id=post_id)
        if not post:
            return None
        return self.enrich_posts(db, [post])[0]

    def list_post_responses(
        self,
        db: Session,
        *,
        post_filter: Optional[BlogPostFilter] = None,
        sort: Optional[BlogPostSort] = None,
        pagination: Optional[PaginationParams] = None
    ) -> List[BlogPostResponse]:
        """Enriched page of posts without paging metadata."""
        posts, _ = crud_blog_post.get_page(db, post_filter=post_filter, sort=sort, pagination=pagination)
        return self.enrich_posts(db, posts)

    def list_posts(
        self,
        db: Session,
        *,
        post_filter: Optional[BlogPostFilter] = None,
        sort: Optional[BlogPostSort] = None,
        pagination: Optional[PaginationParams] = None
    ) -> BlogPostListResponse:
        pagination = pagination or PaginationParams()
        posts, total_count = crud_blog_post.get_page(
            db, post_filter=post_filter, sort=sort, pagination=pagination
        )
        return BlogPostListResponse(
            posts=self.enrich_posts(db, posts),
            total_count=total_count,
            total_pages=math.ceil(total_count / pagination.limit),
            current_page=pagination.page,
        )

    def update_post(self, db: Session, *, post_id: str, obj_in: BlogPostUpdate) -> Optional[BlogPostResponse]:
        post = crud_blog_post.get(db, post_id)
        if not post:
            return None
        crud_blog_post.update_post(db, db_obj=post, obj_in=obj_in)
        return self.get_post(db, post_id=post_id)

    def change_status(self, db: Session, *, post_id: str, status: PostStatus) -> Optional[BlogPostResponse]:
        """Publish, unpublish (back to draft) or archive a post."""
        post = crud_blog_post.get(db, post_id)
        if not post:
            return None
        crud_blog_post.set_status(db, db_obj=post, status=status)
        return self.get_post(db, post_id=post_id)

    def record_view(self, db: Session, *, post_id: str) -> Optional[BlogPostViewResponse]:
        view_count = crud_blog_post.increment_view_count(db, post_id=post_id)
        if view_count is None:
            return None
        return BlogPostViewResponse(post_id=post_id, view_count=view_count)

    def delete_post(self, db: Session, *, post_id: str) -> bool:
        """Delete a post; its comments and tag links go with it."""
        deleted = crud_blog_post.delete(db, id=post_id)
        if deleted:
            logger.info(f"[BLOG] Deleted post {post_id}")
        return deleted

    # ----- Categories -----
    def create_category(self, db: Session, *, obj_in: BlogCategoryCreate) -> BlogCategoryResponse:
        category = crud_blog_category.create_category(db, obj_in=obj_in)
        return BlogCategoryResponse.model_validate(category)

    def list_categories(self, db: Session) -> List[BlogCategoryResponse]:
        return [
            BlogCategoryResponse.model_validate(category).model_copy(update={"posts_count": count})
            for category, count in crud_blog_category.get_all_with_post_counts(db)
        ]

    def get_category(self, db: Session, *, category_id: str) -> Optional[BlogCategoryResponse]:
        category = crud_blog_category.get(db, category_id)
        if not category:
            return None
        posts_count = crud_blog_category.get_post_count(db, category_id=category_id)
        return BlogCategoryResponse.model_validate(category).model_copy(update={"posts_count": posts_count})

    def update_category(
        self,
        db: Session,
        *,
        category_id: str,
        obj_in: BlogCategoryUpdate
    ) -> Optional[BlogCategoryResponse]:
        category = crud_blog_category.get(db, category_id)
        if not category:
            return None
        crud_blog_category.update_category(db, db_obj=category, obj_in=obj_in)
        return self.get_category(db, category_id=category_id)

    def delete_category(self, db: Session, *, category_id: str) -> bool:
        """Delete a category. Its posts stay, without a category."""
        deleted = crud_blog_category.delete(db, id=category_id)
        if deleted:
            logger.info(f"[BLOG] Deleted category {category_id}")
        return deleted

    # ----- Tags -----
    def create_tag(self, db: Session, *, obj_in: BlogTagCreate) -> BlogTagResponse:
        tag = crud_blog_tag.create_tag(db, obj_in=obj_in)
        return BlogTagResponse.model_validate(tag)

    def list_tags(self, db: Session) -> List[BlogTagResponse]:
        return [
            BlogTagResponse.model_validate(tag).model_copy(update={"posts_count": count})
            for tag, count in crud_blog_tag.get_all_with_post_counts(db)
        ]

    def get_tag(self, db: Session, *, tag_id: str) -> Optional[BlogTagResponse]:
        tag = crud_blog_tag.get(db, tag_id)
        if not tag:
            return None
        posts_count = crud_blog_tag.get_post_count(db, tag_id=tag_id)
        return BlogTagResponse.model_validate(tag).model_copy(update={"posts_count": posts_count})

    def update_tag(self, db: Session, *, tag_id: str, obj_in: BlogTagUpdate) -> Optional[BlogTagResponse]:
        tag = crud_blog_tag.get(db, tag_id)
        if not tag:
            return None
        crud_blog_tag.update_tag(db, db_obj=tag, obj_in=obj_in)
        return self.get_tag(db, tag_id=tag_id)

    def delete_tag(self, db: Session, *, tag_id: str) -> bool:
        deleted = crud_blog_tag.delete(db, id=tag_id)
        if deleted:
            logger.info(f"[BLOG] Deleted tag {tag_id}")
        return deleted

    # ----- Comments -----
    def create_comment(self, db: Session, *, obj_in: BlogCommentCreate) -> BlogCommentResponse:
        comment = crud_blog_comment.create_comment(db, obj_in=obj_in)
        return self.get_comment(db, comment_id=comment.id)

    def get_comment(self, db: Session, *, comment_id: str) -> Optional[BlogCommentResponse]:
        comment = crud_blog_comment.get_with_relations(db, comment_id=comment_id)
        if not comment:
            return None
        return BlogCommentResponse.model_validate(comment)

    def list_post_comments(
        self,
        db: Session,
        *,
        post_id: str,
        approved_only: bool = False
    ) -> Optional[List[BlogCommentResponse]]:
        if not crud_blog_post.get(db, post_id):
            return None
        comments = crud_blog_comment.get_by_post(db, post_id=post_id, approved_only=approved_only)
        return [BlogCommentResponse.model_validate(comment) for comment in comments]

    def get_recent_comments(self, db: Session, *, limit: int) -> List[BlogCommentResponse]:
        return [
            BlogCommentResponse.model_validate(comment)
            for comment in crud_blog_comment.get_recent(db, limit=limit)
        ]

    def update_comment(
        self,
        db: Session,
        *,
        comment_id: str,
        obj_in: BlogCommentUpdate
    ) -> Optional[BlogCommentResponse]:
        comment = crud_blog_comment.get(db, comment_id)
        if not comment:
            return None
        crud_blog_comment.update(db, db_obj=comment, obj_in=obj_in)
        return self.get_comment(db, comment_id=comment_id)

    def set_comment_approval(
        self,
        db: Session,
        *,
        comment_id: str,
        is_approved: bool
    ) -> Optional[BlogCommentResponse]:
        comment = crud_blog_comment.get(db, comment_id)
        if not comment:
            return None
        crud_blog_comment.set_approval(db, db_obj=comment, is_approved=is_approved)
        return self.get_comment(db, comment_id=comment_id)

    def delete_comment(self, db: Session, *, comment_id: str) -> bool:
        """Delete a comment together with its replies."""
        return crud_blog_comment.delete(db, id=comment_id)


# Singleton instance, shared by all requests
blog_service = BlogService()
