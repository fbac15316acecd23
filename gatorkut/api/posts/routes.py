# gatorkut/api/posts/routes.py
from flask import Blueprint, request, jsonify, current_app

from gatorkut.api.posts.schemas import PostCreateSchema, PostResponseSchema
from gatorkut.core.security import jwt_required, get_current_user_id
from gatorkut.utils.request_utils import request_payload

posts_bp = Blueprint('posts_bp', __name__)


@posts_bp.route('', methods=['POST'])
@jwt_required
def create_post():
    """
    게시글을 작성합니다.
    이미지는 multipart 'image' 파일 또는 본문의 base64 'image' 값으로 첨부할 수 있습니다.
    """
    post_service = current_app.services['posts']
    data = PostCreateSchema().load(request_payload())
    new_post = post_service.create_post(
        get_current_user_id(),
        data['text'],
        image_file=request.files.get('image'),
        image_data=data['image']
    )
    return jsonify({"post": PostResponseSchema().dump(new_post)}), 201


@posts_bp.route('', methods=['GET'])
def get_posts():
    post_service = current_app.services['posts']
    posts = post_service.get_posts()
    return jsonify(PostResponseSchema(many=True).dump(posts)), 200


@posts_bp.route('/<int:post_id>/like', methods=['POST'])
@jwt_required
def like_post(post_id: int):
    current_app.services['posts'].like_post(post_id)
    return jsonify({"ok": True}), 200


@posts_bp.route('/<int:post_id>/meow', methods=['POST'])
@jwt_required
def meow_post(post_id: int):
    """게시글에 meow 반응을 남기고 작성자에게 meowPoint 를 1 줍니다."""
    current_app.services['posts'].meow_post(post_id)
    return jsonify({"ok": True}), 200
