# gatorkut/api/posts/schemas.py
from marshmallow import Schema, fields, EXCLUDE

from gatorkut.utils.datetime_utils import to_iso


class PostCreateSchema(Schema):
    """
    POST /posts
    image 는 multipart 파일 대신 보내는 base64 data URI 입니다.
    """
    class Meta:
        unknown = EXCLUDE

    text = fields.Str(load_default='', allow_none=True)
    image = fields.Str(load_default=None, allow_none=True)


class PostResponseSchema(Schema):
    """게시글 응답 스키마. 목록 조회 시 작성자 정보가 함께 포함됩니다."""
    id = fields.Int(dump_only=True)
    author = fields.Int(attribute='author_id')
    text = fields.Str()
    image = fields.Str(allow_none=True)
    time = fields.Int()
    createdAt = fields.Function(lambda post: to_iso(post.time))
    likes = fields.Int()
    meows = fields.Int()

    username = fields.Str(attribute='author.username')
    displayName = fields.Str(attribute='author.display_name', allow_none=True)
    avatar = fields.Str(attribute='author.avatar', allow_none=True)
