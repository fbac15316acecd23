# gatorkut/api/friends/schemas.py
from marshmallow import Schema, fields, validate, EXCLUDE


class FriendRequestSchema(Schema):
    """POST /friends/request 요청 본문의 유효성을 검사합니다."""
    class Meta:
        unknown = EXCLUDE

    toUsername = fields.Str(required=True, validate=validate.Length(min=1, error="toUsername required"))


class PendingRequestResponseSchema(Schema):
    """나에게 온 대기 중인 친구 요청 응답 스키마."""
    id = fields.Int()
    fromUsername = fields.Str(attribute='requester.username')
    displayName = fields.Str(attribute='requester.display_name', allow_none=True)
