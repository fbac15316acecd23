# gatorkut/api/users/schemas.py
from marshmallow import Schema, fields, EXCLUDE


class UserPublicResponseSchema(Schema):
    """
    사용자 공개 프로필 응답 스키마.
    비밀번호 해시는 절대 포함하지 않습니다.
    """
    id = fields.Int(dump_only=True)
    username = fields.Str()
    displayName = fields.Str(attribute='display_name', allow_none=True)
    about = fields.Str(allow_none=True)
    avatar = fields.Str(allow_none=True)
    meowPoints = fields.Int(attribute='meow_points')


class ProfileUpdateSchema(Schema):
    """
    POST /users/me
    비어 있거나 생략된 필드는 기존 값을 유지합니다.
    """
    class Meta:
        unknown = EXCLUDE

    displayName = fields.Str(load_default=None, allow_none=True)
    about = fields.Str(load_default=None, allow_none=True)
