"""
목적:
- 문서 인코딩 종류를 정의한다.

설명:
- 사람이 읽는 텍스트 형식(JSON, YAML)과 압축 바이너리 형식(CBOR)을 지원한다.
- 인코딩은 항상 호출자가 지정하며 본문 내용으로 추론하지 않는다.

디자인 패턴:
- 열거형(Enum).

참조:
- src_py/rankeval/codec/document.py
"""

from __future__ import annotations

from enum import Enum

from rankeval.exceptions import ConfigurationError


class ContentType(str, Enum):
    """지원 문서 인코딩."""

    JSON = "json"
    YAML = "yaml"
    CBOR = "cbor"

    @property
    def is_text(self) -> bool:
        """pretty-print가 의미 있는 텍스트 형식인지 반환한다."""
        return self is not ContentType.CBOR


def coerce_content_type(value: ContentType | str) -> ContentType:
    """문자열/열거형 값을 ContentType으로 변환한다."""
    try:
        return ContentType(value)
    except ValueError as exc:
        raise ConfigurationError(f"지원하지 않는 content_type입니다: {value}") from exc
