import logging
import jwt
import bcrypt
from datetime import datetime, timedelta, timezone
from functools import wraps
from typing import Optional
from flask import Flask, request, g, current_app

from gatorkut.core.errors import Unauthenticated, InvalidToken

logger = logging.getLogger(__name__)

ALGORITHM = "HS256"
# bcrypt 는 앞 72바이트만 사용합니다. 긴 비밀번호는 해시/검증 모두 같은 길이로 자릅니다.
BCRYPT_MAX_BYTES = 72


def _password_bytes(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


def hash_password(password: str, rounds: int = 10) -> str:
    """bcrypt 로 솔트를 포함한 비밀번호 해시를 생성합니다."""
    return bcrypt.hashpw(_password_bytes(password), bcrypt.gensalt(rounds=rounds)).decode("utf-8")


def check_password(password: str, password_hash: str) -> bool:
    try:
        return bcrypt.checkpw(_password_bytes(password), password_hash.encode("utf-8"))
    except ValueError:
        # 저장된 해시가 bcrypt 형식이 아닌 경우
        return False


class TokenService:
    """
    사용자 식별 정보({id, username})를 담은 서명 토큰을 발급/검증합니다.
    서명 키는 init_app() 시점에 한 번만 읽습니다.
    """

    def __init__(self, secret_key: Optional[str] = None,
                 expires_in: timedelta = timedelta(days=7),
                 algorithm: str = ALGORITHM):
        self.secret_key = secret_key
        self.expires_in = expires_in
        self.algorithm = algorithm

    def init_app(self, app: Flask):
        secret_key = app.config.get('JWT_SECRET_KEY')
        if not secret_key:
            raise ValueError("JWT_SECRET_KEY 설정이 필요합니다.")
        self.secret_key = secret_key
        self.expires_in = app.config.get('JWT_ACCESS_TOKEN_EXPIRES', self.expires_in)
        self.algorithm = app.config.get('JWT_ALGORITHM', self.algorithm)

    def issue(self, identity: dict) -> str:
        now = datetime.now(timezone.utc)
        payload = {
            "id": identity["id"],
            "username": identity["username"],
            "iat": now,
            "exp": now + self.expires_in,
        }
        return jwt.encode(payload, self.secret_key, algorithm=self.algorithm)

    def verify(self, token: str) -> dict:
        """
        토큰을 검증하고 식별 정보를 반환합니다.
        실패 원인(만료/위조/형식)은 호출자에게 구분해서 알려주지 않습니다.
        """
        try:
            payload = jwt.decode(token, self.secret_key, algorithms=[self.algorithm],
                                 options={"require": ["exp"]})
        except jwt.PyJWTError as e:
            logger.debug(f"토큰 검증 실패: {e.__class__.__name__}")
            raise InvalidToken()

        if "id" not in payload or "username" not in payload:
            raise InvalidToken()
        return {"id": payload["id"], "username": payload["username"]}


def _extract_token(auth_header: str, strict: bool) -> str:
    # 'Bearer <token>' 처럼 공백 하나로 나뉜 두 부분이어야 합니다.
    parts = auth_header.split(" ")
    if len(parts) != 2 or not parts[1]:
        raise InvalidToken()
    if strict and parts[0].lower() != "bearer":
        raise InvalidToken()
    return parts[1]


def jwt_required(f):
    """
    Authorization 헤더의 토큰을 검증하고 g.user 에 식별 정보를 저장합니다.
    검증에 실패하면 뷰 함수는 실행되지 않습니다.
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        auth_header = request.headers.get("Authorization")
        if not auth_header:
            raise Unauthenticated()

        token = _extract_token(auth_header, current_app.config.get("JWT_STRICT_BEARER", False))
        try:
            g.user = current_app.services['tokens'].verify(token)
        except InvalidToken:
            logger.warning(f"유효하지 않은 토큰으로 접근 시도: {request.method} {request.path}")
            raise

        return f(*args, **kwargs)

    return decorated_function


def get_current_user_id() -> int:
    return g.user["id"]
