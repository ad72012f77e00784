"""
목적:
- 레지스트리로 해석되는 쿼리 모델의 공통 베이스를 정의한다.

설명:
- 모든 쿼리는 불변(frozen) pydantic 모델이며 해시 가능해야 한다.
- 각 쿼리 타입은 query_name, 문서 파서(from_document), 본문 직렬화(body_document)를 제공한다.

디자인 패턴:
- 태그드 배리언트(Tagged Variant).

참조:
- src_py/rankeval/queries/builtin.py
- src_py/rankeval/registry/field_registry.py
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Any, ClassVar, Union

from pydantic import BaseModel, ConfigDict, Field

from rankeval.codec.cursor import ObjectCursor
from rankeval.exceptions import MalformedDocumentError

if TYPE_CHECKING:
    from rankeval.registry.field_registry import FieldRegistry

ScalarValue = Union[str, int, float, bool]

DEFAULT_BOOST = 1.0


class QueryModel(BaseModel):
    """쿼리 모델 베이스."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    query_name: ClassVar[str]

    boost: float = Field(default=DEFAULT_BOOST, ge=0.0)

    @abstractmethod
    def body_document(self, registry: FieldRegistry) -> dict[str, Any]:
        """`{query_name: ...}`의 본문 부분을 문서 트리로 만든다."""

    def _with_boost(self, body: dict[str, Any]) -> dict[str, Any]:
        if self.boost != DEFAULT_BOOST:
            body["boost"] = self.boost
        return body


def read_boost(cursor: ObjectCursor) -> float:
    boost = cursor.number("boost", required=False)
    return DEFAULT_BOOST if boost is None else boost


def read_scalar(cursor: ObjectCursor, name: str) -> ScalarValue:
    value = cursor.value(name)
    if not isinstance(value, (str, int, float, bool)):
        raise MalformedDocumentError(
            f"쿼리 값은 문자열/숫자/불리언이어야 합니다: actual={type(value).__name__}",
            field=name,
            type_name=cursor.type_name,
            path=cursor.path,
        )
    return value


def scalar_identity(value: ScalarValue) -> tuple[type, ScalarValue]:
    """동등성/해시 비교용 키. `1`, `1.0`, `true`처럼 직렬화가 다른 값을 구분한다."""
    return type(value), value
