"""
목적:
- 왕복 코덱 계층의 공개 진입점을 제공한다.

설명:
- RatedRequest 직렬화/파싱 코덱 클래스를 외부에 노출한다.

디자인 패턴:
- 모듈 퍼사드(Module Facade).

참조:
- src_py/rankeval/roundtrip/service.py
"""

from .service import RatedRequestCodec

__all__ = ["RatedRequestCodec"]
