# gatorkut/api/auth/schemas.py
from marshmallow import Schema, fields, validate, EXCLUDE


class RegisterSchema(Schema):
    """POST /auth/register 요청의 유효성을 검사하는 스키마"""
    class Meta:
        unknown = EXCLUDE

    username = fields.Str(
        required=True,
        validate=validate.Length(min=1, error="username and password required"),
        error_messages={"required": "username and password required"}
    )
    password = fields.Str(
        required=True,
        validate=validate.Length(min=1, error="username and password required"),
        error_messages={"required": "username and password required"}
    )
    displayName = fields.Str(load_default=None, allow_none=True)


class LoginSchema(Schema):
    """POST /auth/login 요청의 유효성을 검사하는 스키마"""
    class Meta:
        unknown = EXCLUDE

    username = fields.Str(required=True, validate=validate.Length(min=1))
    password = fields.Str(required=True, validate=validate.Length(min=1))
