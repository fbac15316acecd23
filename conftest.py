# conftest.py
"""
공용 pytest 픽스처

사용법: python -m pytest -v
"""

import pytest

from gatorkut import create_app
from gatorkut.extensions import db


@pytest.fixture
def app(tmp_path):
    app = create_app('testing', overrides={
        'DB_FILE': str(tmp_path / 'test.sqlite'),
        'UPLOAD_DIR': str(tmp_path / 'uploads'),
    })
    yield app
    with app.app_context():
        db.session.remove()
        db.engine.dispose()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def register(client):
    """사용자를 가입시키고 응답 JSON 의 user 를 반환하는 헬퍼"""
    def _register(username, password='pw1234', display_name=None):
        body = {'username': username, 'password': password}
        if display_name:
            body['displayName'] = display_name
        response = client.post('/auth/register', json=body)
        assert response.status_code == 201, response.get_json()
        return response.get_json()['user']
    return _register


@pytest.fixture
def login(client, register):
    """가입 후 로그인하여 Authorization 헤더 dict 를 반환하는 헬퍼"""
    def _login(username, password='pw1234'):
        register(username, password)
        response = client.post('/auth/login', json={'username': username, 'password': password})
        assert response.status_code == 200, response.get_json()
        return {'Authorization': f"Bearer {response.get_json()['token']}"}
    return _login
