"""
목적:
- 평가 명세 계약 모델 계층의 공개 심볼을 제공한다.

설명:
- 판정 문서/검색 요청 본문/평가 요청 명세 모델을 하나의 네임스페이스에서 재노출한다.

디자인 패턴:
- 모듈 퍼사드(Module Facade).

참조:
- src_py/rankeval/contracts/rated_document.py
- src_py/rankeval/contracts/search_source.py
- src_py/rankeval/contracts/rated_request.py
"""

from .rated_document import RatedDocument, RatedDocumentKey
from .rated_request import RatedRequest
from .search_source import SearchSource

__all__ = [
    "RatedDocumentKey",
    "RatedDocument",
    "SearchSource",
    "RatedRequest",
]
