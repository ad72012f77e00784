"""
목적:
- 문서 파싱 호출 체인 전체에 전달되는 파싱 컨텍스트를 제공한다.

설명:
- 필드 레지스트리, strict 여부, 최대 중첩 깊이를 묶어 모든 하위 파서에 그대로 전달한다.
- strict 모드에서는 스키마에 없는 멤버를 UnrecognizedFieldError로 거부하고,
  lenient 모드에서는 해당 멤버를 건너뛴다.
- 임베디드 쿼리는 단일 멤버 객체의 이름으로 레지스트리를 조회해 파싱한다.

디자인 패턴:
- 컨텍스트 객체(Context Object) + 의존성 주입(Dependency Injection).

참조:
- src_py/rankeval/codec/cursor.py
- src_py/rankeval/registry/field_registry.py
"""

from __future__ import annotations

import logging
from collections.abc import Collection, Mapping
from typing import Any

from rankeval.codec.cursor import ObjectCursor
from rankeval.config.models import CodecConfig
from rankeval.exceptions import ConfigurationError, UnknownTypeError, UnrecognizedFieldError
from rankeval.registry.field_registry import FieldRegistry

logger = logging.getLogger(__name__)


class ParseContext:
    """레지스트리와 strict 정책을 담는 파싱 컨텍스트."""

    __slots__ = ("registry", "strict", "max_depth")

    def __init__(self, registry: FieldRegistry, *, strict: bool = True, max_depth: int = 64) -> None:
        if max_depth < 1:
            raise ConfigurationError("max_depth는 1 이상이어야 합니다")
        self.registry = registry
        self.strict = strict
        self.max_depth = max_depth

    @classmethod
    def from_config(cls, registry: FieldRegistry, config: CodecConfig) -> ParseContext:
        """설정 객체로부터 컨텍스트를 생성한다."""
        return cls(registry, strict=config.strict, max_depth=config.max_depth)

    def open(self, tree: Mapping[str, Any], type_name: str) -> ObjectCursor:
        """문서 루트 객체에 대한 커서를 연다."""
        return ObjectCursor(tree, type_name=type_name, max_depth=self.max_depth)

    def check_members(self, cursor: ObjectCursor, recognized: Collection[str]) -> None:
        """커서의 멤버 중 스키마에 없는 이름을 strict 정책에 따라 처리한다."""
        for name in cursor.names():
            if name in recognized:
                continue
            if self.strict:
                raise UnrecognizedFieldError(
                    "인식할 수 없는 필드입니다",
                    field=name,
                    type_name=cursor.type_name,
                    path=cursor.path,
                )
            logger.debug(
                "lenient 모드: 미인식 필드를 건너뜀 field=%s type=%s path=%s",
                name,
                cursor.type_name,
                cursor.path,
            )

    def parse_query(self, cursor: ObjectCursor) -> Any:
        """`{타입 이름: 본문}` 형태의 쿼리 객체를 레지스트리로 파싱한다."""
        name = cursor.single_member()
        if name not in self.registry:
            raise UnknownTypeError(
                f"등록되지 않은 {self.registry.category} 타입입니다",
                field=name,
                type_name=self.registry.category,
                path=cursor.path,
            )
        entry = self.registry.resolve(name)
        body = cursor.child(name, type_name=name)
        return entry.parser(body, self)
