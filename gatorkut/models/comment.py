# gatorkut/models/comment.py
from gatorkut.extensions import db


class Comment(db.Model):
    """'comments' 테이블. 생성 후 수정되지 않습니다."""
    __tablename__ = 'comments'

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    post_id = db.Column('postId', db.Integer, db.ForeignKey('posts.id'), nullable=False)
    author_id = db.Column('author', db.Integer, db.ForeignKey('users.id'), nullable=False)
    text = db.Column(db.Text, nullable=False)
    time = db.Column(db.Integer, nullable=False)

    author = db.relationship('User', lazy='joined')
