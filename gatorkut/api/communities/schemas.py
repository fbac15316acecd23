# gatorkut/api/communities/schemas.py
from marshmallow import Schema, fields, validate, EXCLUDE


class CommunityCreateSchema(Schema):
    """POST /communities 요청 본문의 유효성을 검사합니다."""
    class Meta:
        unknown = EXCLUDE

    name = fields.Str(required=True, validate=validate.Length(min=1, error="name required"))
    description = fields.Str(load_default=None, allow_none=True)


class CommunityResponseSchema(Schema):
    id = fields.Int(dump_only=True)
    name = fields.Str()
    description = fields.Str(allow_none=True)
    owner = fields.Int(attribute='owner_id')
