"""
목적:
- 문서 코덱 계층의 공개 진입점을 제공한다.

설명:
- 인코딩 종류, 바이트 직렬화/역직렬화 함수, 객체 커서를 재노출한다.

디자인 패턴:
- 모듈 퍼사드(Module Facade).

참조:
- src_py/rankeval/codec/content_type.py
- src_py/rankeval/codec/document.py
- src_py/rankeval/codec/cursor.py
"""

from .content_type import ContentType, coerce_content_type
from .cursor import ObjectCursor
from .document import dump_document, load_document

__all__ = [
    "ContentType",
    "coerce_content_type",
    "ObjectCursor",
    "dump_document",
    "load_document",
]
