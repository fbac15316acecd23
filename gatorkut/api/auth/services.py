# gatorkut/api/auth/services.py
import logging
from typing import Optional
from flask import Flask
from sqlalchemy.exc import IntegrityError

from gatorkut.extensions import db
from gatorkut.models import User
from gatorkut.core.errors import InvalidInput, Conflict, NotFound, InvalidCredentials
from gatorkut.core.security import hash_password, check_password

logger = logging.getLogger(__name__)


class AuthService:
    """회원가입과 로그인(자격 증명 확인)을 담당합니다."""

    def __init__(self):
        self.log_rounds = 10

    def init_app(self, app: Flask):
        self.log_rounds = app.config.get('BCRYPT_LOG_ROUNDS', self.log_rounds)

    def register(self, username: str, password: str, display_name: Optional[str] = None) -> User:
        """
        새 사용자를 생성합니다. 중복 username 은 UNIQUE 제약으로 감지하므로
        동시에 들어온 가입 요청도 하나만 성공합니다.
        """
        if not username or not password:
            raise InvalidInput("username and password required")

        user = User(
            username=username,
            password=hash_password(password, self.log_rounds),
            display_name=display_name or username,
            meow_points=0
        )
        db.session.add(user)
        try:
            db.session.commit()
        except IntegrityError:
            db.session.rollback()
            logger.info(f"중복 username 으로 가입 시도: {username}")
            raise Conflict("user exists")

        logger.info(f"신규 사용자 가입 (user_id: {user.id}, username: {username})")
        return user

    def authenticate(self, username: str, password: str) -> User:
        """username/password 를 확인하고 사용자 객체를 반환합니다."""
        user = db.session.execute(
            db.select(User).filter_by(username=username)
        ).scalar_one_or_none()
        if user is None:
            raise NotFound("user not found")

        if not check_password(password, user.password):
            logger.warning(f"로그인 실패: 비밀번호 불일치 (username: {username})")
            raise InvalidCredentials()
        return user
