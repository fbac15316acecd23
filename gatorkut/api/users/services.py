# gatorkut/api/users/services.py
import logging
from typing import Optional, List
from werkzeug.datastructures import FileStorage

from gatorkut.extensions import db
from gatorkut.models import User
from gatorkut.core.errors import NotFound
from gatorkut.services.storage_service import StorageService

logger = logging.getLogger(__name__)


class UserService:
    """사용자 목록 조회와 본인 프로필 수정을 담당하는 서비스 클래스."""

    def __init__(self, storage_service: StorageService):
        self.storage_service = storage_service

    def list_users(self) -> List[User]:
        return db.session.execute(db.select(User).order_by(User.id)).scalars().all()

    def update_profile(self, user_id: int, display_name: Optional[str], about: Optional[str],
                       avatar_file: Optional[FileStorage] = None) -> User:
        """
        프로필을 수정합니다. 빈 값이 전달된 필드는 기존 값을 유지하고,
        아바타 파일이 있으면 업로드 후 경로를 교체합니다.
        """
        user = db.session.get(User, user_id)
        if user is None:
            raise NotFound("user not found")

        avatar_path = self.storage_service.ingest(file_storage=avatar_file)
        if avatar_path:
            user.avatar = avatar_path
        user.display_name = display_name or user.display_name
        user.about = about or user.about

        db.session.commit()
        logger.info(f"프로필 수정 완료 (user_id: {user_id}, avatar_changed: {bool(avatar_path)})")
        return user
