# gatorkut/core/test_security.py
"""
토큰 발급/검증 및 인증 게이트 테스트

사용법: python -m pytest gatorkut/core/test_security.py -v
"""

from datetime import timedelta

import jwt
import pytest

from gatorkut import create_app
from gatorkut.core.errors import InvalidToken
from gatorkut.core.security import TokenService, hash_password, check_password


def test_issue_then_verify_returns_identity():
    service = TokenService('secret')
    token = service.issue({'id': 7, 'username': 'albert'})

    assert service.verify(token) == {'id': 7, 'username': 'albert'}


def test_token_expires_after_seven_days_by_default():
    service = TokenService('secret')
    payload = jwt.decode(service.issue({'id': 1, 'username': 'u'}), 'secret', algorithms=['HS256'])

    assert payload['exp'] - payload['iat'] == int(timedelta(days=7).total_seconds())


def test_expired_token_is_rejected():
    service = TokenService('secret', expires_in=timedelta(seconds=-1))
    token = service.issue({'id': 1, 'username': 'u'})

    with pytest.raises(InvalidToken):
        service.verify(token)


def test_token_signed_with_other_key_is_rejected():
    forged = TokenService('other-secret').issue({'id': 1, 'username': 'u'})

    with pytest.raises(InvalidToken):
        TokenService('secret').verify(forged)


def test_rejections_share_one_message():
    """만료/위조/형식 오류를 메시지로 구분할 수 없어야 함"""
    service = TokenService('secret')
    expired = TokenService('secret', expires_in=timedelta(seconds=-1)).issue({'id': 1, 'username': 'u'})
    forged = TokenService('nope').issue({'id': 1, 'username': 'u'})

    messages = set()
    for token in (expired, forged, 'not-a-jwt'):
        with pytest.raises(InvalidToken) as exc_info:
            service.verify(token)
        messages.add(str(exc_info.value))
    assert messages == {'invalid token'}


def test_token_without_identity_claims_is_rejected():
    token = jwt.encode({'exp': 9999999999}, 'secret', algorithm='HS256')

    with pytest.raises(InvalidToken):
        TokenService('secret').verify(token)


def test_password_hash_is_salted_and_verifiable():
    first = hash_password('hunter2', rounds=4)
    second = hash_password('hunter2', rounds=4)

    assert first != second
    assert 'hunter2' not in first
    assert check_password('hunter2', first)
    assert not check_password('hunter3', first)
    assert not check_password('hunter2', 'not-a-bcrypt-hash')


# --- 인증 게이트 ---

def test_missing_header_is_unauthenticated(client):
    response = client.get('/friends/requests')

    assert response.status_code == 401
    assert response.get_json() == {'error_code': 'UNAUTHENTICATED', 'error': 'no token'}


@pytest.mark.parametrize('header', ['Bearer', 'Bearer a b', 'Bearer ', 'Bearer not-a-jwt'])
def test_malformed_header_is_rejected(client, header):
    response = client.get('/friends/requests', headers={'Authorization': header})

    assert response.status_code == 401
    assert response.get_json()['error_code'] == 'INVALID_TOKEN'


def test_expired_token_never_reaches_handler(app, client, register):
    user = register('late')
    with app.app_context():
        expired = TokenService(app.config['JWT_SECRET_KEY'], expires_in=timedelta(seconds=-1)).issue(user)

    response = client.post('/posts', json={'text': 'hello'}, headers={'Authorization': f'Bearer {expired}'})

    assert response.status_code == 401
    assert client.get('/posts').get_json() == []


def test_scheme_word_is_not_checked_by_default(client, login):
    headers = login('lenient')
    token = headers['Authorization'].split(' ')[1]

    response = client.get('/friends/requests', headers={'Authorization': f'Token {token}'})

    assert response.status_code == 200


def test_strict_bearer_requires_scheme_word(tmp_path):
    app = create_app('testing', overrides={
        'DB_FILE': str(tmp_path / 'strict.sqlite'),
        'UPLOAD_DIR': str(tmp_path / 'uploads'),
        'JWT_STRICT_BEARER': True,
    })
    client = app.test_client()
    client.post('/auth/register', json={'username': 'strict', 'password': 'pw'})
    token = client.post('/auth/login', json={'username': 'strict', 'password': 'pw'}).get_json()['token']

    assert client.get('/friends/requests', headers={'Authorization': f'Token {token}'}).status_code == 401
    assert client.get('/friends/requests', headers={'Authorization': f'bearer {token}'}).status_code == 200


def test_long_password_uses_first_72_bytes():
    """bcrypt 한계(72바이트)를 넘는 비밀번호도 해시/검증이 가능해야 함"""
    password = 'p' * 100
    hashed = hash_password(password, rounds=4)

    assert check_password(password, hashed)
    assert check_password('p' * 72, hashed)
    assert not check_password('p' * 71, hashed)
