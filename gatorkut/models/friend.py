# gatorkut/models/friend.py
from enum import Enum

from gatorkut.extensions import db


class FriendStatus(str, Enum):
    PENDING = "pending"
    ACCEPTED = "accepted"


class FriendLink(db.Model):
    """
    'friends' 테이블. user_a 가 요청자, user_b 가 수신자입니다.
    한 쌍(순서 무관)에 하나의 링크만 존재하도록 서비스 계층에서 확인합니다.
    """
    __tablename__ = 'friends'

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    user_a = db.Column('userA', db.Integer, db.ForeignKey('users.id'), nullable=False)
    user_b = db.Column('userB', db.Integer, db.ForeignKey('users.id'), nullable=False)
    status = db.Column(db.Text, nullable=False, default=FriendStatus.PENDING.value)

    requester = db.relationship('User', foreign_keys=[user_a], lazy='joined')
