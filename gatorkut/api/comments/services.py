# gatorkut/api/comments/services.py
import logging
from typing import List

from gatorkut.extensions import db
from gatorkut.models import Comment, Post
from gatorkut.core.errors import NotFound
from gatorkut.utils.datetime_utils import DateTimeUtils

logger = logging.getLogger(__name__)


class CommentService:
    """댓글 작성과 게시글별 댓글 목록 조회를 담당합니다."""

    def create_comment(self, post_id: int, author_id: int, text: str) -> Comment:
        if db.session.get(Post, post_id) is None:
            raise NotFound("post not found")

        comment = Comment(post_id=post_id, author_id=author_id, text=text, time=DateTimeUtils.now_ms())
        db.session.add(comment)
        db.session.commit()
        logger.info(f"댓글 생성 (comment_id: {comment.id}, post_id: {post_id})")
        return comment

    def get_comments_for_post(self, post_id: int) -> List[Comment]:
        """특정 게시글의 댓글을 작성 시간 순으로 반환합니다."""
        query = (
            db.select(Comment)
            .join(Comment.author)
            .where(Comment.post_id == post_id)
            .order_by(Comment.time, Comment.id)
        )
        return db.session.execute(query).scalars().all()
