# gatorkut/models/user.py
from gatorkut.extensions import db


class User(db.Model):
    """
    'users' 테이블. password 컬럼에는 bcrypt 해시만 저장됩니다.
    meow_points 는 다른 사용자가 내 게시글에 meow 할 때마다 1씩 증가합니다.
    """
    __tablename__ = 'users'

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    username = db.Column(db.Text, unique=True, nullable=False)
    password = db.Column(db.Text, nullable=False)
    display_name = db.Column('displayName', db.Text)
    avatar = db.Column(db.Text)
    about = db.Column(db.Text)
    meow_points = db.Column('meowPoints', db.Integer, nullable=False, default=0, server_default='0')

    def identity(self) -> dict:
        return {"id": self.id, "username": self.username}
