# gatorkut/services/storage_service.py
import os
import re
import base64
import binascii
import secrets
import string
import logging
from typing import Optional
from flask import Flask
from werkzeug.datastructures import FileStorage

from gatorkut.core.errors import InvalidInput, StorageFailure
from gatorkut.utils.datetime_utils import DateTimeUtils

logger = logging.getLogger(__name__)

DATA_URI_PATTERN = re.compile(r'^data:(.+);base64,(.+)$')
SUFFIX_ALPHABET = string.ascii_lowercase + string.digits
PUBLIC_PREFIX = '/uploads/'


class StorageService:
    """
    업로드 파일을 로컬 공개 디렉터리에 저장하는 서비스 클래스입니다.
    multipart 파일 스트림과 base64 data URI 두 가지 입력을 지원하며,
    저장된 파일은 '/uploads/<filename>' 경로로 누구나 조회할 수 있습니다.
    """

    def __init__(self):
        """실제 디렉터리와 제한값은 init_app 메서드를 통해 주입됩니다."""
        self.upload_dir = None
        self.max_upload_bytes = None
        self.allowed_extensions = None

    def init_app(self, app: Flask):
        """
        Flask 앱 초기화 과정에서 호출되어 업로드 디렉터리를 준비합니다.

        :param app: Flask 애플리케이션 객체
        """
        upload_dir = app.config.get('UPLOAD_DIR')
        if not upload_dir:
            raise ValueError("UPLOAD_DIR 설정이 필요합니다.")

        os.makedirs(upload_dir, exist_ok=True)
        self.upload_dir = upload_dir
        self.max_upload_bytes = app.config.get('MAX_UPLOAD_BYTES')
        self.allowed_extensions = app.config.get('ALLOWED_UPLOAD_EXTENSIONS')
        logger.info(f"StorageService: 업로드 디렉터리 {upload_dir}")

    def generate_filename(self, extension: str) -> str:
        """'<밀리초 타임스탬프>-<6자리 임의 문자열><확장자>' 형식의 파일명을 만듭니다."""
        suffix = ''.join(secrets.choice(SUFFIX_ALPHABET) for _ in range(6))
        return f"{DateTimeUtils.now_ms()}-{suffix}{extension}"

    def save_file(self, file_storage: FileStorage) -> str:
        """
        multipart 로 전달된 파일을 저장하고 공개 경로를 반환합니다.

        :param file_storage: werkzeug FileStorage 객체
        :return: '/uploads/<filename>'
        """
        # 저장 파일명은 새로 생성하므로 원본 이름에서는 확장자만 사용합니다.
        extension = os.path.splitext(file_storage.filename or '')[1].lower()
        if self.allowed_extensions is not None and extension.lstrip('.') not in self.allowed_extensions:
            raise InvalidInput(f"허용되지 않는 파일 형식입니다: '{extension or '(none)'}'")

        data = file_storage.read()
        return self._write(data, extension)

    def save_base64(self, data_uri: str) -> Optional[str]:
        """
        'data:<mime>;base64,<payload>' 문자열을 디코딩해 .png 파일로 저장합니다.
        선언된 mime 타입과 관계없이 확장자는 항상 .png 입니다.
        형식이 맞지 않으면 아무것도 저장하지 않고 None 을 반환합니다.
        """
        matches = DATA_URI_PATTERN.match(data_uri)
        if not matches:
            return None
        try:
            data = base64.b64decode(matches.group(2))
        except (binascii.Error, ValueError):
            raise InvalidInput("base64 이미지 데이터를 해석할 수 없습니다.")
        return self._write(data, '.png')

    def ingest(self, file_storage: Optional[FileStorage] = None,
               data_uri: Optional[str] = None) -> Optional[str]:
        """multipart 파일이 있으면 우선 사용하고, 없으면 base64 값을 사용합니다."""
        if file_storage is not None and file_storage.filename:
            return self.save_file(file_storage)
        if data_uri:
            return self.save_base64(data_uri)
        return None

    def delete(self, public_path: str) -> None:
        """'/uploads/<filename>' 경로의 파일을 삭제합니다. 이미 없으면 무시합니다."""
        filename = os.path.basename(public_path)
        try:
            os.remove(os.path.join(self.upload_dir, filename))
        except FileNotFoundError:
            pass
        except OSError as e:
            logger.error(f"파일 삭제 실패 ({filename}): {e}", exc_info=True)

    def _write(self, data: bytes, extension: str) -> str:
        if self.upload_dir is None:
            raise RuntimeError("StorageService가 초기화되지 않았습니다. init_app을 먼저 호출해주세요.")
        if self.max_upload_bytes is not None and len(data) > self.max_upload_bytes:
            raise InvalidInput(f"파일 크기가 제한({self.max_upload_bytes} bytes)을 초과했습니다.")

        filename = self.generate_filename(extension)
        full_path = os.path.join(self.upload_dir, filename)
        try:
            with open(full_path, 'wb') as f:
                f.write(data)
        except OSError as e:
            logger.error(f"파일 저장 실패 ({full_path}): {e}", exc_info=True)
            raise StorageFailure()

        logger.info(f"파일 저장 완료: {filename} ({len(data)} bytes)")
        return PUBLIC_PREFIX + filename
