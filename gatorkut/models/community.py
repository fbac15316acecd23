# gatorkut/models/community.py
from gatorkut.extensions import db


class Community(db.Model):
    __tablename__ = 'communities'

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    name = db.Column(db.Text, nullable=False)
    description = db.Column(db.Text)
    owner_id = db.Column('owner', db.Integer, db.ForeignKey('users.id'), nullable=False)


class CommunityMember(db.Model):
    """가입 여부는 행의 존재로만 표현합니다 (상태 컬럼 없음)."""
    __tablename__ = 'community_members'

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    community_id = db.Column('communityId', db.Integer, db.ForeignKey('communities.id'), nullable=False)
    user_id = db.Column('userId', db.Integer, db.ForeignKey('users.id'), nullable=False)
