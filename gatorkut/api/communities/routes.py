# gatorkut/api/communities/routes.py
from flask import Blueprint, jsonify, current_app

from gatorkut.api.communities.schemas import CommunityCreateSchema, CommunityResponseSchema
from gatorkut.core.security import jwt_required, get_current_user_id
from gatorkut.utils.request_utils import request_payload

communities_bp = Blueprint('communities_bp', __name__)


@communities_bp.route('', methods=['POST'])
@jwt_required
def create_community():
    community_service = current_app.services['communities']
    data = CommunityCreateSchema().load(request_payload())
    community = community_service.create_community(get_current_user_id(), data['name'], data['description'])
    return jsonify({"community": CommunityResponseSchema().dump(community)}), 201


@communities_bp.route('', methods=['GET'])
def get_communities():
    community_service = current_app.services['communities']
    return jsonify(CommunityResponseSchema(many=True).dump(community_service.get_communities())), 200


@communities_bp.route('/<int:community_id>/join', methods=['POST'])
@jwt_required
def join_community(community_id: int):
    """커뮤니티에 가입합니다. 이미 가입된 경우에도 성공으로 응답합니다."""
    current_app.services['communities'].join(community_id, get_current_user_id())
    return jsonify({"ok": True}), 200


@communities_bp.route('/<int:community_id>/leave', methods=['POST'])
@jwt_required
def leave_community(community_id: int):
    current_app.services['communities'].leave(community_id, get_current_user_id())
    return jsonify({"ok": True}), 200
