"""Tag association manager: the many-to-many link between posts and tags."""

import logging
from typing import List, Sequence

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from app.crud.base import CRUDBase
from app.models.blog_post_tag import BlogPostTag
from app.models.blog_tag import BlogTag

logger = logging.getLogger(__name__)


class CRUDBlogPostTag(CRUDBase[BlogPostTag, dict, dict]):
    """Associations are only ever inserted or removed, never updated."""

    def associate(
        self,
        db: Session,
        *,
        post_id: str,
        tag_ids: Sequence[str],
        commit: bool = True
    ) -> List[BlogPostTag]:
        """
        Link a post to the given tags, one row per tag.

        Duplicate ids are collapsed. An empty list is a no-op.

        Args:
            post_id: Post to link
            tag_ids: Existing tag ids
            commit: Commit immediately; pass False when the caller owns the transaction

        Raises:
            ValueError: if any tag id does not exist
        """
        unique_ids = list(dict.fromkeys(tag_ids))
        if not unique_ids:
            return []

        found = set(db.scalars(select(BlogTag.id).where(BlogTag.id.in_(unique_ids))).all())
        missing = [tag_id for tag_id in unique_ids if tag_id not in found]
        if missing:
            logger.warning(f"[TAGS] Unknown tag ids for post {post_id}: {missing}")
            raise ValueError(f"Tag not found: {', '.join(missing)}")

        links = [BlogPostTag(post_id=post_id, tag_id=tag_id) for tag_id in unique_ids]
        db.add_all(links)
        if not commit:
            db.flush()
            return links

        try:
            db.commit()
        except Exception:
            db.rollback()
            raise
        return links

    def replace_associations(
        self,
        db: Session,
        *,
        post_id: str,
        tag_ids: Sequence[str],
        commit: bool = True
    ) -> List[BlogPostTag]:
        """
        Make the post's tag set exactly ``tag_ids``.

        Delete and insert run in the same transaction, so other readers never
        see the post with a partial or empty tag set. On any failure the whole
        replacement is rolled back.
        """
        try:
            db.execute(delete(BlogPostTag).where(BlogPostTag.post_id == post_id))
            links = self.associate(db, post_id=post_id, tag_ids=tag_ids, commit=False)
            if commit:
                db.commit()
        except Exception:
            if commit:
                db.rollback()
            raise
        logger.info(f"[TAGS] Post {post_id} now has {len(links)} tag(s)")
        return links


# Singleton instance
crud_blog_post_tag = CRUDBlogPostTag(BlogPostTag)
