# gatorkut/api/comments/schemas.py
from marshmallow import Schema, fields, validate, EXCLUDE

from gatorkut.utils.datetime_utils import to_iso


class CommentCreateSchema(Schema):
    """
    POST /posts/{post_id}/comments
    댓글 생성을 요청할 때의 데이터 형식을 정의하고 유효성을 검사합니다.
    """
    class Meta:
        unknown = EXCLUDE

    text = fields.Str(required=True, validate=validate.Length(min=1, error="text required"))


class CommentResponseSchema(Schema):
    id = fields.Int(dump_only=True)
    postId = fields.Int(attribute='post_id')
    author = fields.Int(attribute='author_id')
    text = fields.Str()
    time = fields.Int()
    createdAt = fields.Function(lambda comment: to_iso(comment.time))

    username = fields.Str(attribute='author.username')
    displayName = fields.Str(attribute='author.display_name', allow_none=True)
