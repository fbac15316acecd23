# gatorkut/services/test_storage_service.py
"""
업로드 저장(StorageService) 테스트

사용법: python -m pytest gatorkut/services/test_storage_service.py -v
"""

import base64
import io
import os
import re

import pytest
from werkzeug.datastructures import FileStorage

from gatorkut.core.errors import InvalidInput, StorageFailure

FILENAME_PATTERN = re.compile(r'^/uploads/\d{13}-[a-z0-9]{6}(\.[a-z0-9]+)?$')
PNG_BYTES = b'\x89PNG\r\n\x1a\n' + b'\x00' * 16


@pytest.fixture
def storage(app):
    return app.services['storage']


def _on_disk(storage, public_path):
    with open(os.path.join(storage.upload_dir, public_path.rsplit('/', 1)[1]), 'rb') as f:
        return f.read()


def test_init_app_creates_upload_directory(app):
    assert os.path.isdir(app.config['UPLOAD_DIR'])


def test_save_file_keeps_original_extension(storage):
    path = storage.save_file(FileStorage(stream=io.BytesIO(b'gif-data'), filename='party.GIF'))

    assert FILENAME_PATTERN.match(path)
    assert path.endswith('.gif')
    assert _on_disk(storage, path) == b'gif-data'


def test_save_file_keeps_extension_of_non_ascii_name(storage):
    path = storage.save_file(FileStorage(stream=io.BytesIO(b'x'), filename='사진.JPG'))

    assert FILENAME_PATTERN.match(path)
    assert path.endswith('.jpg')
    assert _on_disk(storage, path) == b'x'


def test_save_file_without_extension(storage):
    path = storage.save_file(FileStorage(stream=io.BytesIO(b'raw'), filename='blob'))

    assert FILENAME_PATTERN.match(path)
    assert '.' not in path.rsplit('/', 1)[1]


def test_save_base64_always_writes_png(storage):
    payload = base64.b64encode(b'jpeg-bytes').decode()

    path = storage.save_base64(f'data:image/jpeg;base64,{payload}')

    assert FILENAME_PATTERN.match(path)
    assert path.endswith('.png')
    assert _on_disk(storage, path) == b'jpeg-bytes'


def test_save_base64_ignores_values_that_are_not_data_uris(storage):
    assert storage.save_base64('https://example.com/cat.png') is None
    assert os.listdir(storage.upload_dir) == []


def test_save_base64_rejects_undecodable_payload(storage):
    with pytest.raises(InvalidInput):
        storage.save_base64('data:image/png;base64,abc')


def test_ingest_prefers_multipart_over_base64(storage):
    payload = base64.b64encode(PNG_BYTES).decode()
    upload = FileStorage(stream=io.BytesIO(b'from-file'), filename='pic.jpg')

    path = storage.ingest(file_storage=upload, data_uri=f'data:image/png;base64,{payload}')

    assert path.endswith('.jpg')
    assert _on_disk(storage, path) == b'from-file'
    assert len(os.listdir(storage.upload_dir)) == 1


def test_ingest_without_input_returns_none(storage):
    assert storage.ingest() is None
    assert storage.ingest(file_storage=FileStorage(stream=io.BytesIO(b''), filename='')) is None


def test_unwritable_directory_raises_storage_failure(storage, tmp_path):
    storage.upload_dir = str(tmp_path / 'missing' / 'dir')

    with pytest.raises(StorageFailure):
        storage.save_base64('data:image/png;base64,' + base64.b64encode(PNG_BYTES).decode())


def test_size_limit(storage):
    storage.max_upload_bytes = 4

    with pytest.raises(InvalidInput):
        storage.save_file(FileStorage(stream=io.BytesIO(b'12345'), filename='a.png'))
    assert storage.save_file(FileStorage(stream=io.BytesIO(b'1234'), filename='a.png'))


def test_extension_allow_list(storage):
    storage.allowed_extensions = {'png', 'jpg'}

    with pytest.raises(InvalidInput):
        storage.save_file(FileStorage(stream=io.BytesIO(b'x'), filename='evil.exe'))
    assert storage.save_file(FileStorage(stream=io.BytesIO(b'x'), filename='ok.PNG')).endswith('.png')


def test_storage_failure_is_reported_as_json(app, client, login):
    headers = login('writer')
    app.services['storage'].upload_dir = os.path.join(app.config['UPLOAD_DIR'], 'gone', 'away')
    image = 'data:image/png;base64,' + base64.b64encode(PNG_BYTES).decode()

    response = client.post('/posts', json={'text': 'x', 'image': image}, headers=headers)

    assert response.status_code == 500
    assert response.get_json()['error_code'] == 'STORAGE_FAILURE'
    assert client.get('/posts').get_json() == []


def test_delete_removes_stored_file(storage):
    path = storage.save_file(FileStorage(stream=io.BytesIO(b'bye'), filename='tmp.png'))

    storage.delete(path)
    storage.delete(path)

    assert os.listdir(storage.upload_dir) == []
