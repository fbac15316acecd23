# gatorkut/__init__.py

# =====================================================================================
# 1. 환경 변수 로드 (가장 먼저 실행)
# =====================================================================================
from dotenv import load_dotenv
load_dotenv()

# =====================================================================================
# 2. 모듈 임포트 (Module Imports)
# =====================================================================================
import os
import logging
import click
from flask import Flask, jsonify, send_from_directory, current_app
from flask_cors import CORS
from marshmallow import ValidationError
from werkzeug.exceptions import HTTPException

# - 설정 및 확장
from gatorkut.core.config import config_by_name
from gatorkut.core.errors import ApiError
from gatorkut.core.security import TokenService
from gatorkut.extensions import db

# - API 블루프린트
from gatorkut.api.auth.routes import auth_bp
from gatorkut.api.users.routes import users_bp
from gatorkut.api.posts.routes import posts_bp
from gatorkut.api.comments.routes import comments_bp
from gatorkut.api.communities.routes import communities_bp
from gatorkut.api.friends.routes import friends_bp

# - 서비스 모듈
from gatorkut.services.storage_service import StorageService
from gatorkut.api.auth.services import AuthService
from gatorkut.api.users.services import UserService
from gatorkut.api.posts.services import PostService
from gatorkut.api.comments.services import CommentService
from gatorkut.api.communities.services import CommunityService
from gatorkut.api.friends.services import FriendService


def create_app(config_name=None, overrides=None):
    """
    Flask 애플리케이션 팩토리 함수.

    :param config_name: 'development' | 'testing' | 'production' (기본값: FLASK_ENV)
    :param overrides: 설정 클래스 값을 덮어쓸 dict (테스트에서 DB/업로드 경로 지정용)
    """
    # =====================================================================================
    # 3. Flask 앱 생성 및 기본 설정
    # =====================================================================================
    config_name = config_name or os.getenv('FLASK_ENV', 'development')

    app = Flask(__name__)
    app.config.from_object(config_by_name[config_name])
    if overrides:
        app.config.update(overrides)
    app.config['SQLALCHEMY_DATABASE_URI'] = 'sqlite:///' + os.path.abspath(app.config['DB_FILE'])
    app.json.ensure_ascii = False

    # =====================================================================================
    # 4. 확장 기능 초기화
    # =====================================================================================
    db.init_app(app)
    CORS(app, resources={r"/*": {"origins": app.config['CORS_ORIGINS']}})

    # =====================================================================================
    # 5. 서비스 인스턴스 생성 및 'app.services'에 저장 (의존성 주입)
    # =====================================================================================
    app.services = {}

    # 5-1. 다른 서비스의 기반이 되는 공용/핵심 서비스 먼저 생성
    try:
        storage_instance = StorageService()
        storage_instance.init_app(app)
        app.services['storage'] = storage_instance
    except Exception as e:
        logging.error(f"Failed to initialize storage service: {e}")
        raise

    token_instance = TokenService()
    token_instance.init_app(app)
    app.services['tokens'] = token_instance

    auth_instance = AuthService()
    auth_instance.init_app(app)
    app.services['auth'] = auth_instance

    # 5-2. 스토리지를 주입받아야 하는 도메인 서비스
    app.services['users'] = UserService(storage_service=app.services['storage'])
    app.services['posts'] = PostService(storage_service=app.services['storage'])

    # - 나머지 도메인
    app.services['comments'] = CommentService()
    app.services['communities'] = CommunityService()
    app.services['friends'] = FriendService()

    with app.app_context():
        db.create_all()

    # =====================================================================================
    # 6. 블루프린트 등록
    # =====================================================================================
    app.register_blueprint(auth_bp, url_prefix='/auth')
    app.register_blueprint(users_bp, url_prefix='/users')
    app.register_blueprint(posts_bp, url_prefix='/posts')
    app.register_blueprint(comments_bp)
    app.register_blueprint(communities_bp, url_prefix='/communities')
    app.register_blueprint(friends_bp, url_prefix='/friends')

    @app.route('/uploads/<path:filename>', methods=['GET'])
    def uploaded_file(filename):
        """업로드된 공개 파일을 그대로 제공합니다 (인증 없음)."""
        return send_from_directory(current_app.config['UPLOAD_DIR'], filename)

    @app.cli.command('init-db')
    def init_db_command():
        """데이터베이스 테이블을 생성합니다."""
        db.create_all()
        click.echo('Initialized the database.')

    # =====================================================================================
    # 7. 전역 에러 핸들러 설정
    # =====================================================================================
    @app.errorhandler(ApiError)
    def handle_api_error(err):
        db.session.rollback()
        return jsonify(err.to_dict()), err.status_code

    @app.errorhandler(ValidationError)
    def handle_marshmallow_validation(err):
        response = {"error_code": "VALIDATION_ERROR", "error": "invalid input", "details": err.messages}
        return jsonify(response), 400

    @app.errorhandler(HTTPException)
    def handle_http_exception(err):
        error_code = (err.name or "HTTP_ERROR").upper().replace(" ", "_")
        return jsonify({"error_code": error_code, "error": err.description}), err.code

    @app.errorhandler(Exception)
    def handle_generic_exception(err):
        # 다른 핸들러에서 처리되지 않은 모든 예외를 여기서 처리
        logging.error(f"An unhandled exception occurred: {err}", exc_info=True)
        db.session.rollback()
        response = {"error_code": "INTERNAL_SERVER_ERROR", "error": "server error"}
        return jsonify(response), 500

    # =====================================================================================
    # 8. 로깅 및 앱 반환
    # =====================================================================================
    if not app.debug:
        logging.basicConfig(level=app.config['LOG_LEVEL'], format='%(asctime)s %(levelname)s: %(message)s [in %(pathname)s:%(lineno)d]')

    logging.info(f"Flask app created for '{config_name}' environment.")

    return app
