# gatorkut/api/auth/routes.py

import logging
from flask import Blueprint, jsonify, current_app

from gatorkut.api.auth.schemas import RegisterSchema, LoginSchema
from gatorkut.api.users.schemas import UserPublicResponseSchema
from gatorkut.utils.request_utils import request_payload

auth_bp = Blueprint('auth_bp', __name__)


@auth_bp.route('/register', methods=['POST'])
def register():
    """username/password 로 회원가입합니다. 비밀번호는 bcrypt 해시로 저장됩니다."""
    auth_service = current_app.services['auth']
    data = RegisterSchema().load(request_payload())
    user = auth_service.register(data['username'], data['password'], data['displayName'])
    return jsonify({"user": UserPublicResponseSchema().dump(user)}), 201


@auth_bp.route('/login', methods=['POST'])
def login():
    """자격 증명을 확인하고 7일간 유효한 토큰을 발급합니다."""
    auth_service = current_app.services['auth']
    token_service = current_app.services['tokens']

    data = LoginSchema().load(request_payload())
    user = auth_service.authenticate(data['username'], data['password'])
    token = token_service.issue(user.identity())

    logging.info(f"로그인 성공 (user_id: {user.id})")
    return jsonify({
        "token": token,
        "user": UserPublicResponseSchema().dump(user)
    }), 200
