# gatorkut/api/comments/routes.py
from flask import Blueprint, jsonify, current_app

from gatorkut.api.comments.schemas import CommentCreateSchema, CommentResponseSchema
from gatorkut.core.security import jwt_required, get_current_user_id
from gatorkut.utils.request_utils import request_payload

comments_bp = Blueprint('comments_bp', __name__)


@comments_bp.route('/posts/<int:post_id>/comments', methods=['POST'])
@jwt_required
def create_comment(post_id: int):
    """
    특정 게시글에 새로운 댓글을 작성합니다.
    - 성공 시, 생성된 댓글 정보를 201 Created 상태 코드와 함께 반환합니다.
    """
    comment_service = current_app.services['comments']
    data = CommentCreateSchema().load(request_payload())
    new_comment = comment_service.create_comment(post_id, get_current_user_id(), data['text'])
    return jsonify({"comment": CommentResponseSchema().dump(new_comment)}), 201


@comments_bp.route('/posts/<int:post_id>/comments', methods=['GET'])
def get_comments(post_id: int):
    comment_service = current_app.services['comments']
    comments = comment_service.get_comments_for_post(post_id)
    return jsonify(CommentResponseSchema(many=True).dump(comments)), 200
