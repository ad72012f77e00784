"""
목적:
- 공통 유틸 공개 심볼을 정의한다.

설명:
- 패키지 전역에서 재사용하는 로깅 설정 함수의 진입점이다.

디자인 패턴:
- 모듈 퍼사드(Module Facade).

참조:
- src_py/rankeval/shared/logging_utils.py
"""

from .logging_utils import setup_logging

__all__ = ["setup_logging"]
