# gatorkut/api/communities/services.py
import logging
from typing import Optional, List

from gatorkut.extensions import db
from gatorkut.models import Community, CommunityMember
from gatorkut.core.errors import NotFound

logger = logging.getLogger(__name__)


class CommunityService:
    """커뮤니티 생성/조회와 가입/탈퇴를 담당합니다."""

    def create_community(self, owner_id: int, name: str, description: Optional[str]) -> Community:
        community = Community(name=name, description=description, owner_id=owner_id)
        db.session.add(community)
        db.session.commit()
        logger.info(f"커뮤니티 생성 (community_id: {community.id}, owner: {owner_id})")
        return community

    def get_communities(self) -> List[Community]:
        return db.session.execute(db.select(Community).order_by(Community.id)).scalars().all()

    def _find_membership(self, community_id: int, user_id: int) -> Optional[CommunityMember]:
        return db.session.execute(
            db.select(CommunityMember).filter_by(community_id=community_id, user_id=user_id)
        ).scalars().first()

    def join(self, community_id: int, user_id: int) -> None:
        """이미 가입되어 있으면 아무것도 하지 않습니다."""
        if db.session.get(Community, community_id) is None:
            raise NotFound("community not found")
        if self._find_membership(community_id, user_id) is not None:
            return
        db.session.add(CommunityMember(community_id=community_id, user_id=user_id))
        db.session.commit()

    def leave(self, community_id: int, user_id: int) -> None:
        """가입 여부와 관계없이 멤버십 행을 삭제합니다."""
        db.session.execute(
            db.delete(CommunityMember).where(
                CommunityMember.community_id == community_id,
                CommunityMember.user_id == user_id
            )
        )
        db.session.commit()

