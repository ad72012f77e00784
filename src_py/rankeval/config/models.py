"""
목적:
- rankeval 코덱의 설정 인터페이스를 정의한다.

설명:
- 기본 인코딩, pretty-print, strict 모드, 최대 중첩 깊이를 단일 모델로 관리한다.
- 라이브러리는 환경 파일을 직접 읽지 않고 호출자가 생성한 설정 객체를 주입받는다.

디자인 패턴:
- 값 객체(Value Object).

참조:
- src_py/rankeval/roundtrip/service.py
- src_py/rankeval/parsing/context.py
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from rankeval.codec.content_type import ContentType


class CodecConfig(BaseModel):
    """RatedRequest 코덱 설정 모델."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    content_type: ContentType = Field(default=ContentType.JSON)
    pretty: bool = Field(default=False)
    strict: bool = Field(default=True)
    max_depth: int = Field(default=64, ge=1, le=1_000)
    include_scope: bool = Field(default=False)

    @field_validator("pretty")
    @classmethod
    def validate_pretty(cls, value: bool, info) -> bool:
        content_type = info.data.get("content_type", ContentType.JSON)
        if value and not content_type.is_text:
            raise ValueError("pretty는 텍스트 content_type에서만 사용할 수 있습니다")
        return value
