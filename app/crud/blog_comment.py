"""CRUD operations for BlogComment."""

import logging
from typing import List, Optional

from sqlalchemy import func, select
from sqlalchemy.orm import Session, joinedload

from app.crud.base import CRUDBase
from app.models.blog_comment import BlogComment
from app.models.blog_post import BlogPost
from app.schemas.blog_comment import BlogCommentCreate, BlogCommentUpdate

logger = logging.getLogger(__name__)


class CRUDBlogComment(CRUDBase[BlogComment, BlogCommentCreate, BlogCommentUpdate]):
    """CRUD operations for BlogComment."""
    
    def create_comment(self, db: Session, *, obj_in: BlogCommentCreate) -> BlogComment:
        """
        Create a comment on a post.

        Raises:
            LookupError: if the post does not exist
            ValueError: if the parent comment is missing or belongs to another post
        """
        post = db.get(BlogPost, obj_in.post_id)
        if not post:
            raise LookupError("Post not found")
        
        if obj_in.parent_id:
            parent = db.get(BlogComment, obj_in.parent_id)
            if not parent or parent.post_id != obj_in.post_id:
                raise ValueError("Parent comment not found or belongs to another post")
        
        comment = self.create(db, obj_in=obj_in)
        logger.info(f"[BLOG] Created comment {comment.id} on post {comment.post_id}")
        return comment

    def get_with_relations(self, db: Session, *, comment_id: str) -> Optional[BlogComment]:
        stmt = (
            select(BlogComment)
            .options(joinedload(BlogComment.author), joinedload(BlogComment.post))
            .where(BlogComment.id == comment_id)
        )
        return db.scalars(stmt).first()
    
    def get_by_post(
        self,
        db: Session,
        *,
        post_id: str,
        approved_only: bool = False
    ) -> List[BlogComment]:
        """Get all comments of a post, newest first."""
        stmt = (
            select(BlogComment)
            .options(joinedload(BlogComment.author))
            .where(BlogComment.post_id == post_id)
            .order_by(BlogComment.created_at.desc())
        )
        if approved_only:
            stmt = stmt.where(BlogComment.is_approved == True)
        return list(db.scalars(stmt).all())

    def get_recent(self, db: Session, *, limit: int = 5) -> List[BlogComment]:
        """Newest comments across all posts, with author and post loaded."""
        stmt = (
            select(BlogComment)
            .options(joinedload(BlogComment.author), joinedload(BlogComment.post))
            .order_by(BlogComment.created_at.desc())
            .limit(limit)
        )
        return list(db.scalars(stmt).all())

    def count_by_approval(self, db: Session, *, is_approved: Optional[bool] = None) -> int:
        stmt = select(func.count(BlogComment.id))
        if is_approved is not None:
            stmt = stmt.where(BlogComment.is_approved == is_approved)
        return db.scalar(stmt) or 0

    def set_approval(self, db: Session, *, db_obj: BlogComment, is_approved: bool) -> BlogComment:
        """Approve or reject a comment."""
        comment = self.update(db, db_obj=db_obj, obj_in={"is_approved": is_approved})
        logger.info(f"[BLOG] Comment {comment.id} approved={is_approved}")
        return comment


# Singleton instance
crud_blog_comment = CRUDBlogComment(BlogComment)
