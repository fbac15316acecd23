# gatorkut/api/auth/test_auth_api.py
"""
회원가입/로그인 API 테스트

사용법: python -m pytest gatorkut/api/auth/test_auth_api.py -v
"""

import jwt
import pytest

from gatorkut.core.errors import NotFound, InvalidCredentials
from gatorkut.extensions import db
from gatorkut.models import User


def test_register_returns_public_profile(client):
    response = client.post('/auth/register', json={'username': 'albert', 'password': 'chomp'})

    assert response.status_code == 201
    user = response.get_json()['user']
    assert user['username'] == 'albert'
    assert user['displayName'] == 'albert'
    assert user['meowPoints'] == 0
    assert user['avatar'] is None
    assert 'password' not in user


def test_register_stores_only_a_hash(app, register):
    register('alberta', password='plain-secret')

    with app.app_context():
        stored = db.session.execute(db.select(User).filter_by(username='alberta')).scalar_one()
        assert stored.password != 'plain-secret'
        assert stored.password.startswith('$2')


def test_duplicate_username_conflicts(client, register):
    register('gator')

    second = client.post('/auth/register', json={'username': 'gator', 'password': 'other'})
    third = client.post('/auth/register', json={'username': 'croc', 'password': 'other'})

    assert second.status_code == 409
    assert second.get_json()['error_code'] == 'CONFLICT'
    assert third.status_code == 201


@pytest.mark.parametrize('body', [
    {},
    {'username': 'only-name'},
    {'password': 'only-password'},
    {'username': '', 'password': 'x'},
])
def test_register_requires_username_and_password(client, body):
    response = client.post('/auth/register', json=body)

    assert response.status_code == 400
    assert response.get_json()['error_code'] == 'VALIDATION_ERROR'


def test_register_accepts_display_name(register):
    user = register('swamp', display_name='Swamp Thing')

    assert user['displayName'] == 'Swamp Thing'


def test_login_returns_token_and_user(app, client, register):
    created = register('login-user', password='pw')

    response = client.post('/auth/login', json={'username': 'login-user', 'password': 'pw'})

    assert response.status_code == 200
    body = response.get_json()
    assert body['user'] == created
    payload = jwt.decode(body['token'], app.config['JWT_SECRET_KEY'], algorithms=['HS256'])
    assert payload['id'] == created['id']
    assert payload['username'] == 'login-user'


def test_login_wrong_password(client, register):
    register('u', password='right')

    response = client.post('/auth/login', json={'username': 'u', 'password': 'wrong'})

    assert response.status_code == 401
    assert response.get_json()['error_code'] == 'INVALID_CREDENTIALS'


def test_login_unknown_user(client):
    response = client.post('/auth/login', json={'username': 'missing', 'password': 'x'})

    assert response.status_code == 404
    assert response.get_json() == {'error_code': 'NOT_FOUND', 'error': 'user not found'}


def test_authenticate_service(app, register):
    register('svc', password='pw')
    auth_service = app.services['auth']

    with app.app_context():
        assert auth_service.authenticate('svc', 'pw').username == 'svc'
        with pytest.raises(InvalidCredentials):
            auth_service.authenticate('svc', 'wrong')
        with pytest.raises(NotFound):
            auth_service.authenticate('missing', 'x')


def test_register_and_login_with_long_password(client):
    password = '비밀번호' * 30

    registered = client.post('/auth/register', json={'username': 'longpw', 'password': password})
    logged_in = client.post('/auth/login', json={'username': 'longpw', 'password': password})

    assert registered.status_code == 201
    assert logged_in.status_code == 200
