# gatorkut/utils/request_utils.py
from flask import request


def request_payload() -> dict:
    """
    multipart/form 요청이면 form 필드를, 그 외에는 JSON 본문을 dict 로 반환합니다.
    본문이 없거나 JSON 이 아니면 빈 dict 를 반환합니다.
    """
    if request.mimetype in ('multipart/form-data', 'application/x-www-form-urlencoded'):
        return request.form.to_dict()
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}
