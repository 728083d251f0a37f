"""CRUD operations for BlogPost, including the list query builder."""

import logging
from typing import Dict, List, Optional, Sequence, Tuple

from sqlalchemy import and_, asc, desc, func, or_, select, update
from sqlalchemy.orm import Session, joinedload, selectinload

from app.crud.base import CRUDBase
from app.crud.blog_post_tag import crud_blog_post_tag
from app.database import utcnow
from app.models.blog_comment import BlogComment
from app.models.blog_post import BlogPost, PostStatus
from app.models.blog_post_tag import BlogPostTag
from app.schemas.blog_post import (
    BlogPostCreate,
    BlogPostFilter,
    BlogPostSort,
    BlogPostUpdate,
    PaginationParams,
    PostSortField,
    SortDirection,
)
from app.utils.slug import slugify

logger = logging.getLogger(__name__)

SORT_COLUMNS = {
    PostSortField.CREATED_AT: BlogPost.created_at,
    PostSortField.UPDATED_AT: BlogPost.updated_at,
    PostSortField.PUBLISHED_AT: BlogPost.published_at,
    PostSortField.TITLE: BlogPost.title,
    PostSortField.VIEW_COUNT: BlogPost.view_count,
}


def _escape_like(term: str) -> str:
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class CRUDBlogPost(CRUDBase[BlogPost, BlogPostCreate, BlogPostUpdate]):
    """CRUD operations for BlogPost."""

    # ----- Query builder -----
    def build_conditions(self, post_filter: Optional[BlogPostFilter]) -> list:
        """Translate a filter into WHERE predicates. Absent fields add nothing."""
        conditions = []
        if post_filter is None:
            return conditions

        if post_filter.status:
            conditions.append(BlogPost.status == post_filter.status)
        if post_filter.category_id:
            conditions.append(BlogPost.category_id == post_filter.category_id)
        if post_filter.author_id:
            conditions.append(BlogPost.author_id == post_filter.author_id)
        if post_filter.search:
            pattern = f"%{_escape_like(post_filter.search)}%"
            conditions.append(
                or_(
                    BlogPost.title.ilike(pattern, escape="\\"),
                    BlogPost.content.ilike(pattern, escape="\\"),
                )
            )
        if post_filter.tag_ids:
            tagged = select(BlogPostTag.post_id).where(BlogPostTag.tag_id.in_(post_filter.tag_ids))
            conditions.append(BlogPost.id.in_(tagged))
        return conditions

    def get_page(
        self,
        db: Session,
        *,
        post_filter: Optional[BlogPostFilter] = None,
        sort: Optional[BlogPostSort] = None,
        pagination: Optional[PaginationParams] = None
    ) -> Tuple[List[BlogPost], int]:
        """
        Get one page of posts plus the total number of matching posts.

        The total is counted with the same predicates but without ordering
        or windowing, so it does not depend on page/limit. Ties on the sort
        column come back in no particular order.

        Returns:
            (posts, total_count), posts with category, author and tags loaded
        """
        sort = sort or BlogPostSort()
        pagination = pagination or PaginationParams()
        conditions = self.build_conditions(post_filter)

        column = SORT_COLUMNS[sort.field]
        order_by = desc(column) if sort.direction == SortDirection.DESC else asc(column)

        stmt = (
            select(BlogPost)
            .options(
                joinedload(BlogPost.category),
                joinedload(BlogPost.author),
                selectinload(BlogPost.tags),
            )
            .order_by(order_by)
            .offset(pagination.offset)
            .limit(pagination.limit)
        )
        count_stmt = select(func.count(BlogPost.id))
        if conditions:
            stmt = stmt.where(and_(*conditions))
            count_stmt = count_stmt.where(and_(*conditions))

        posts = list(db.scalars(stmt).unique().all())
        total_count = db.scalar(count_stmt) or 0
        return posts, total_count

    def get_with_relations(self, db: Session, *, post_id: str) -> Optional[BlogPost]:
        """Get post by ID with category, author and tags loaded."""
        stmt = (
            select(BlogPost)
            .options(
                joinedload(BlogPost.category),
                joinedload(BlogPost.author),
                selectinload(BlogPost.tags),
            )
            .where(BlogPost.id == post_id)
        )
        return db.scalars(stmt).unique().first()

    def get_approved_comment_counts(self, db: Session, *, post_ids: Sequence[str]) -> Dict[str, int]:
        """Approved comments per post, one grouped query for the whole page."""
        if not post_ids:
            return {}
        stmt = (
            select(BlogComment.post_id, func.count(BlogComment.id))
            .where(
                and_(
                    BlogComment.post_id.in_(post_ids),
                    BlogComment.is_approved == True
                )
            )
            .group_by(BlogComment.post_id)
        )
        return {post_id: count for post_id, count in db.execute(stmt).all()}

    # ----- Write -----
    def create_post(self, db: Session, *, obj_in: BlogPostCreate) -> BlogPost:
        """
        Create a post and its tag associations in one transaction.

        A published post without an explicit ``published_at`` is stamped now;
        drafts and archived posts start unpublished.
        """
        data = obj_in.model_dump(exclude={"tag_ids"})
        if obj_in.status == PostStatus.PUBLISHED:
            data["published_at"] = obj_in.published_at or utcnow()
        else:
            data["published_at"] = None

        post = BlogPost(**data, slug=slugify(obj_in.title), view_count=0)
        try:
            db.add(post)
            db.flush()
            crud_blog_post_tag.associate(db, post_id=post.id, tag_ids=obj_in.tag_ids, commit=False)
            db.commit()
        except Exception:
            db.rollback()
            raise
        db.refresh(post)
        logger.info(f"[BLOG] Created post {post.id} ({post.slug})")
        return post

    def update_post(self, db: Session, *, db_obj: BlogPost, obj_in: BlogPostUpdate) -> BlogPost:
        """
        Apply a partial update.

        A new title regenerates the slug. Entering ``published`` stamps
        ``published_at`` only if it was never set; it is never cleared here.
        An explicit ``published_at`` is ignored while the post stays unpublished
        and has never been published, and an explicit ``null`` is always ignored.
        ``tag_ids`` replaces the tag set inside the same transaction.
        """
        update_data = obj_in.model_dump(exclude_unset=True)
        tag_ids = update_data.pop("tag_ids", None)

        if "title" in update_data:
            update_data["slug"] = slugify(update_data["title"])

        new_status = update_data.get("status", db_obj.status)
        if "published_at" in update_data:
            explicit = update_data["published_at"]
            # null never clears it, and a date alone does not publish a draft
            if explicit is None or (db_obj.published_at is None and new_status != PostStatus.PUBLISHED):
                del update_data["published_at"]

        if (
            new_status == PostStatus.PUBLISHED
            and db_obj.published_at is None
            and "published_at" not in update_data
        ):
            update_data["published_at"] = utcnow()

        for field, value in update_data.items():
            setattr(db_obj, field, value)
        db_obj.updated_at = utcnow()

        try:
            db.add(db_obj)
            if tag_ids is not None:
                crud_blog_post_tag.replace_associations(
                    db, post_id=db_obj.id, tag_ids=tag_ids, commit=False
                )
            db.commit()
        except Exception:
            db.rollback()
            raise
        db.refresh(db_obj)
        logger.info(f"[BLOG] Updated post {db_obj.id}: {sorted(update_data)}")
        return db_obj

    def set_status(self, db: Session, *, db_obj: BlogPost, status: PostStatus) -> BlogPost:
        """Move a post to another lifecycle state."""
        return self.update_post(db, db_obj=db_obj, obj_in=BlogPostUpdate(status=status))

    def increment_view_count(self, db: Session, *, post_id: str) -> Optional[int]:
        """Atomically add one view. Returns the new count, or None if the post is missing."""
        stmt = (
            update(BlogPost)
            .where(BlogPost.id == post_id)
            .values(view_count=BlogPost.view_count + 1)
            .execution_options(synchronize_session=False)
        )
        try:
            result = db.execute(stmt)
            db.commit()
        except Exception:
            db.rollback()
            raise
        if result.rowcount == 0:
            return None
        return db.scalar(select(BlogPost.view_count).where(BlogPost.id == post_id))

    # ----- Aggregates -----
    def count_by_status(self, db: Session, *, status: Optional[PostStatus] = None) -> int:
        stmt = select(func.count(BlogPost.id))
        if status is not None:
            stmt = stmt.where(BlogPost.status == status)
        return db.scalar(stmt) or 0

    def count_distinct_authors(self, db: Session) -> int:
        return db.scalar(select(func.count(BlogPost.author_id.distinct()))) or 0


# Singleton instance
crud_blog_post = CRUDBlogPost(BlogPost)
