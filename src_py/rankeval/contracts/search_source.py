"""
목적:
- 평가 요청에 포함되는 검색 요청 본문(`request`) 모델을 정의한다.

설명:
- query는 레지스트리로 해석되는 다형 쿼리이고 size/from은 선택 정수다.
- 값이 없는 필드는 직렬화하지 않는다.

디자인 패턴:
- DTO(Data Transfer Object).

참조:
- src_py/rankeval/contracts/rated_request.py
- src_py/rankeval/queries/builtin.py
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from rankeval.codec.cursor import ObjectCursor
from rankeval.parsing.context import ParseContext
from rankeval.parsing.validation import build_model
from rankeval.queries.base import QueryModel
from rankeval.registry.field_registry import FieldRegistry

SEARCH_SOURCE_FIELDS = frozenset({"query", "size", "from"})


class SearchSource(BaseModel):
    """검색 요청 본문 모델."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    query: QueryModel | None = Field(default=None)
    size: int | None = Field(default=None, ge=0)
    from_: int | None = Field(default=None, ge=0)

    @classmethod
    def from_document(cls, cursor: ObjectCursor, context: ParseContext) -> SearchSource:
        context.check_members(cursor, SEARCH_SOURCE_FIELDS)

        query = None
        query_cursor = cursor.child("query", type_name="query", required=False)
        if query_cursor is not None:
            query = context.parse_query(query_cursor)

        return build_model(
            cls,
            cursor,
            query=query,
            size=cursor.integer("size", required=False, minimum=0),
            from_=cursor.integer("from", required=False, minimum=0),
        )

    def to_document(self, registry: FieldRegistry) -> dict[str, Any]:
        document: dict[str, Any] = {}
        if self.query is not None:
            document["query"] = registry.serialize(self.query)
        if self.size is not None:
            document["size"] = self.size
        if self.from_ is not None:
            document["from"] = self.from_
        return document
