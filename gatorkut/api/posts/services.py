# gatorkut/api/posts/services.py
import logging
from typing import Optional, List
from werkzeug.datastructures import FileStorage

from gatorkut.extensions import db
from gatorkut.models import Post, User
from gatorkut.core.errors import NotFound
from gatorkut.services.storage_service import StorageService
from gatorkut.utils.datetime_utils import DateTimeUtils

logger = logging.getLogger(__name__)


class PostService:
    """
    게시글 관련 비즈니스 로직을 담당하는 서비스 클래스.
    좋아요(like)와 meow 반응 카운터 증가를 포함합니다.
    """
    def __init__(self, storage_service: StorageService):
        self.storage_service = storage_service

    def create_post(self, author_id: int, text: Optional[str],
                    image_file: Optional[FileStorage] = None,
                    image_data: Optional[str] = None) -> Post:
        """새 게시글을 생성합니다. 이미지는 multipart 파일이 base64 보다 우선합니다."""
        image_path = self.storage_service.ingest(file_storage=image_file, data_uri=image_data)

        post = Post(
            author_id=author_id,
            text=text or '',
            image=image_path,
            time=DateTimeUtils.now_ms(),
            likes=0,
            meows=0
        )
        db.session.add(post)
        try:
            db.session.commit()
        except Exception:
            db.session.rollback()
            # 게시글이 저장되지 않았으므로 방금 올린 이미지도 지웁니다.
            if image_path:
                self.storage_service.delete(image_path)
            raise
        logger.info(f"게시글 생성 (post_id: {post.id}, author: {author_id}, image: {image_path})")
        return post

    def get_posts(self) -> List[Post]:
        """작성자 정보와 함께 최신순으로 전체 게시글을 반환합니다."""
        query = (
            db.select(Post)
            .join(Post.author)
            .order_by(Post.time.desc(), Post.id.desc())
        )
        return db.session.execute(query).scalars().all()

    def like_post(self, post_id: int) -> None:
        """좋아요 수를 1 증가시킵니다. 같은 사용자가 여러 번 눌러도 매번 증가합니다."""
        result = db.session.execute(
            db.update(Post).where(Post.id == post_id).values(likes=Post.likes + 1)
        )
        if result.rowcount == 0:
            db.session.rollback()
            raise NotFound("post not found")
        db.session.commit()

    def meow_post(self, post_id: int) -> None:
        """
        게시글의 meow 수와 작성자의 meowPoints 를 각각 1 증가시킵니다.
        두 UPDATE 는 하나의 트랜잭션으로 함께 커밋되거나 함께 롤백됩니다.
        """
        post = db.session.get(Post, post_id)
        if post is None:
            raise NotFound("post not found")

        try:
            db.session.execute(
                db.update(Post).where(Post.id == post_id).values(meows=Post.meows + 1)
            )
            db.session.execute(
                db.update(User).where(User.id == post.author_id).values(meow_points=User.meow_points + 1)
            )
            db.session.commit()
        except Exception:
            db.session.rollback()
            logger.error(f"meow 처리 실패, 롤백합니다 (post_id: {post_id})", exc_info=True)
            raise
