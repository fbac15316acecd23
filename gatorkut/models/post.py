# gatorkut/models/post.py
from gatorkut.extensions import db


class Post(db.Model):
    """
    'posts' 테이블. time 은 epoch 밀리초이며 likes/meows 는 증가만 합니다.
    """
    __tablename__ = 'posts'

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    author_id = db.Column('author', db.Integer, db.ForeignKey('users.id'), nullable=False)
    text = db.Column(db.Text, nullable=False, default='')
    image = db.Column(db.Text)
    time = db.Column(db.Integer, nullable=False)
    likes = db.Column(db.Integer, nullable=False, default=0, server_default='0')
    meows = db.Column(db.Integer, nullable=False, default=0, server_default='0')

    author = db.relationship('User', lazy='joined')
