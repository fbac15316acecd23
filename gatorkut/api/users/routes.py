# gatorkut/api/users/routes.py
from flask import Blueprint, request, jsonify, current_app

from gatorkut.api.users.schemas import UserPublicResponseSchema, ProfileUpdateSchema
from gatorkut.core.security import jwt_required, get_current_user_id
from gatorkut.utils.request_utils import request_payload

users_bp = Blueprint('users_bp', __name__)


@users_bp.route('', methods=['GET'])
def list_users():
    """전체 사용자의 공개 프로필 목록을 반환합니다."""
    user_service = current_app.services['users']
    users = user_service.list_users()
    return jsonify(UserPublicResponseSchema(many=True).dump(users)), 200


@users_bp.route('/me', methods=['POST'])
@jwt_required
def update_my_profile():
    """
    현재 로그인된 사용자의 프로필을 수정합니다.
    multipart 요청의 'avatar' 파일 필드로 프로필 이미지를 함께 올릴 수 있습니다.
    """
    user_service = current_app.services['users']
    data = ProfileUpdateSchema().load(request_payload())
    updated_user = user_service.update_profile(
        get_current_user_id(),
        display_name=data['displayName'],
        about=data['about'],
        avatar_file=request.files.get('avatar')
    )
    return jsonify({"user": UserPublicResponseSchema().dump(updated_user)}), 200
