# gatorkut/core/config.py

import os
from datetime import timedelta


def _env_bool(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


def _env_list(name: str):
    value = os.getenv(name)
    if not value:
        return None
    return {item.strip().lower().lstrip('.') for item in value.split(',') if item.strip()}


def _env_int(name: str, default=None):
    value = os.getenv(name)
    if value is None or value == '':
        return default
    return int(value)


class Config:
    """모든 환경 설정의 기반이 되는 공통 설정 클래스입니다."""
    # 토큰 서명 키. 앱 생성 시 한 번만 읽히며, 변경하면 기존 토큰은 모두 무효가 됩니다.
    JWT_SECRET_KEY = os.getenv('JWT_SECRET', 'change-this-secret')
    JWT_ALGORITHM = 'HS256'
    JWT_ACCESS_TOKEN_EXPIRES = timedelta(days=_env_int('JWT_EXPIRES_DAYS', 7))
    # True 이면 Authorization 헤더의 첫 단어가 반드시 'Bearer' 여야 합니다.
    JWT_STRICT_BEARER = _env_bool('JWT_STRICT_BEARER', False)

    BCRYPT_LOG_ROUNDS = _env_int('BCRYPT_LOG_ROUNDS', 10)

    # SQLALCHEMY_DATABASE_URI 는 create_app() 에서 DB_FILE 로부터 만들어집니다.
    DB_FILE = os.getenv('DB_FILE', './db.sqlite')
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    UPLOAD_DIR = os.path.abspath(os.getenv('UPLOAD_DIR', './uploads'))
    # 요청 본문 전체 크기 제한 (기본 10MB)
    MAX_CONTENT_LENGTH = _env_int('MAX_CONTENT_LENGTH', 10 * 1024 * 1024)
    # 파일 하나당 크기 제한. None 이면 제한 없음
    MAX_UPLOAD_BYTES = _env_int('MAX_UPLOAD_BYTES')
    # 허용 확장자 집합. None 이면 모든 확장자 허용
    ALLOWED_UPLOAD_EXTENSIONS = _env_list('ALLOWED_UPLOAD_EXTENSIONS')

    CORS_ORIGINS = os.getenv('CORS_ORIGINS', '*')
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')

    HOST = os.getenv('HOST', '127.0.0.1')
    PORT = _env_int('PORT', 3000)


class DevelopmentConfig(Config):
    """개발 환경을 위한 설정 클래스입니다."""
    DEBUG = True


class TestingConfig(Config):
    """테스트 환경을 위한 설정 클래스입니다."""
    TESTING = True
    DEBUG = False
    JWT_SECRET_KEY = 'testing-secret'
    # 테스트 속도를 위해 bcrypt 비용을 최소값으로 낮춥니다.
    BCRYPT_LOG_ROUNDS = 4


class ProductionConfig(Config):
    DEBUG = False


config_by_name = dict(
    development=DevelopmentConfig,
    testing=TestingConfig,
    production=ProductionConfig
)
