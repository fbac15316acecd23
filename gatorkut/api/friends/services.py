# gatorkut/api/friends/services.py
import logging
from typing import List

from gatorkut.extensions import db
from gatorkut.models import User, FriendLink, FriendStatus
from gatorkut.core.errors import InvalidInput, NotFound, Forbidden, Conflict

logger = logging.getLogger(__name__)


class FriendService:
    """
    친구 요청 흐름(요청 → 수락)을 담당하는 서비스 클래스.
    - 두 사용자 사이(방향 무관)에는 하나의 FriendLink 만 존재합니다.
    - 수락은 요청을 받은 사용자(user_b)만 할 수 있습니다.
    """

    def send_request(self, from_user_id: int, to_username: str) -> FriendLink:
        target = db.session.execute(
            db.select(User).filter_by(username=to_username)
        ).scalar_one_or_none()
        if target is None:
            raise NotFound("user not found")
        if target.id == from_user_id:
            raise InvalidInput("cannot send a friend request to yourself")

        existing = db.session.execute(
            db.select(FriendLink).where(
                db.or_(
                    db.and_(FriendLink.user_a == from_user_id, FriendLink.user_b == target.id),
                    db.and_(FriendLink.user_a == target.id, FriendLink.user_b == from_user_id)
                )
            )
        ).scalars().first()
        if existing is not None:
            raise Conflict("request exists")

        link = FriendLink(user_a=from_user_id, user_b=target.id, status=FriendStatus.PENDING.value)
        db.session.add(link)
        db.session.commit()
        logger.info(f"친구 요청 생성 (link_id: {link.id}, from: {from_user_id}, to: {target.id})")
        return link

    def accept_request(self, link_id: int, user_id: int) -> FriendLink:
        link = db.session.get(FriendLink, link_id)
        if link is None:
            raise NotFound("friend request not found")
        if link.user_b != user_id:
            raise Forbidden()
        if link.status == FriendStatus.ACCEPTED.value:
            raise Conflict("friend request already accepted")

        link.status = FriendStatus.ACCEPTED.value
        db.session.commit()
        logger.info(f"친구 요청 수락 (link_id: {link_id}, by: {user_id})")
        return link

    def get_pending_requests(self, user_id: int) -> List[FriendLink]:
        """user_id 에게 온 pending 상태의 요청 목록."""
        query = (
            db.select(FriendLink)
            .where(FriendLink.user_b == user_id, FriendLink.status == FriendStatus.PENDING.value)
            .order_by(FriendLink.id)
        )
        return db.session.execute(query).scalars().all()
