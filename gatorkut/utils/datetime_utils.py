# gatorkut/utils/datetime_utils.py
"""
프로젝트 전체에서 일관된 시간 처리를 위한 유틸리티 모듈

게시글/댓글의 time 컬럼과 업로드 파일명은 모두 epoch 밀리초 정수를 사용합니다.
"""

import time
from datetime import datetime, timezone
from typing import Optional


class DateTimeUtils:
    """시간 처리를 위한 중앙화된 유틸리티 클래스"""

    @staticmethod
    def now_ms() -> int:
        """현재 시각을 epoch 밀리초로 반환"""
        return int(time.time() * 1000)

    @staticmethod
    def from_ms(value: Optional[int]) -> Optional[datetime]:
        """epoch 밀리초를 UTC datetime 으로 변환"""
        if value is None:
            return None
        return datetime.fromtimestamp(value / 1000, tz=timezone.utc)

    @staticmethod
    def to_iso(value: Optional[int]) -> Optional[str]:
        """epoch 밀리초를 'Z' 접미사의 ISO 문자열로 변환"""
        dt = DateTimeUtils.from_ms(value)
        if dt is None:
            return None
        return dt.isoformat().replace('+00:00', 'Z')


# 편의를 위한 모듈 레벨 함수
now_ms = DateTimeUtils.now_ms
from_ms = DateTimeUtils.from_ms
to_iso = DateTimeUtils.to_iso
