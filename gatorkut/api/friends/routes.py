# gatorkut/api/friends/routes.py
from flask import Blueprint, jsonify, current_app

from gatorkut.api.friends.schemas import FriendRequestSchema, PendingRequestResponseSchema
from gatorkut.core.security import jwt_required, get_current_user_id
from gatorkut.utils.request_utils import request_payload

friends_bp = Blueprint('friends_bp', __name__)


@friends_bp.route('/request', methods=['POST'])
@jwt_required
def send_friend_request():
    """username 으로 지정한 사용자에게 친구 요청을 보냅니다."""
    friend_service = current_app.services['friends']
    data = FriendRequestSchema().load(request_payload())
    friend_service.send_request(get_current_user_id(), data['toUsername'])
    return jsonify({"ok": True}), 200


@friends_bp.route('/<int:link_id>/accept', methods=['POST'])
@jwt_required
def accept_friend_request(link_id: int):
    current_app.services['friends'].accept_request(link_id, get_current_user_id())
    return jsonify({"ok": True}), 200


@friends_bp.route('/requests', methods=['GET'])
@jwt_required
def get_pending_requests():
    friend_service = current_app.services['friends']
    pending = friend_service.get_pending_requests(get_current_user_id())
    return jsonify(PendingRequestResponseSchema(many=True).dump(pending)), 200
