# gatorkut/core/errors.py
"""
API 전역에서 사용하는 예외 계층.

서비스 계층은 이 예외들을 raise 하고, create_app()에 등록된 에러 핸들러가
{"error_code": ..., "error": ...} 형태의 JSON 응답으로 변환합니다.
"""


class ApiError(Exception):
    status_code = 500
    error_code = "INTERNAL_SERVER_ERROR"
    message = "server error"

    def __init__(self, message=None):
        super().__init__(message or self.message)
        if message:
            self.message = message

    def to_dict(self):
        return {"error_code": self.error_code, "error": self.message}


class InvalidInput(ApiError):
    status_code = 400
    error_code = "INVALID_INPUT"
    message = "invalid input"


class Unauthenticated(ApiError):
    status_code = 401
    error_code = "UNAUTHENTICATED"
    message = "no token"


class InvalidToken(Unauthenticated):
    # 만료/위조/형식 오류를 구분하지 않는 단일 메시지
    error_code = "INVALID_TOKEN"
    message = "invalid token"


class InvalidCredentials(ApiError):
    status_code = 401
    error_code = "INVALID_CREDENTIALS"
    message = "invalid credentials"


class Forbidden(ApiError):
    status_code = 403
    error_code = "FORBIDDEN"
    message = "not allowed"


class NotFound(ApiError):
    status_code = 404
    error_code = "NOT_FOUND"
    message = "not found"


class Conflict(ApiError):
    status_code = 409
    error_code = "CONFLICT"
    message = "already exists"


class StorageFailure(ApiError):
    status_code = 500
    error_code = "STORAGE_FAILURE"
    message = "failed to store file"
