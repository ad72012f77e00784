"""
목적:
- 기본 쿼리 타입(match_all, match, term, bool)과 기본 레지스트리를 제공한다.

설명:
- 각 쿼리는 ParseContext를 받아 strict 정책을 하위 구조까지 그대로 적용한다.
- bool 쿼리의 하위 절은 ParseContext.parse_query로 다시 레지스트리를 거쳐 해석한다.
- boost가 기본값(1.0)이면 직렬화 시 생략한다.

디자인 패턴:
- 플러그인(Plugin) + 레지스트리(Registry).

참조:
- src_py/rankeval/queries/base.py
- src_py/rankeval/parsing/context.py
"""

from __future__ import annotations

from typing import Any, ClassVar, Literal, Union

from pydantic import Field

from rankeval.codec.cursor import ObjectCursor
from rankeval.exceptions import MalformedDocumentError
from rankeval.parsing.context import ParseContext
from rankeval.parsing.validation import build_model
from rankeval.queries.base import QueryModel, ScalarValue, read_boost, read_scalar, scalar_identity
from rankeval.registry.field_registry import FieldRegistry

QUERY_CATEGORY = "query"


class MatchAllQuery(QueryModel):
    """모든 문서를 매칭하는 쿼리."""

    query_name: ClassVar[str] = "match_all"

    @classmethod
    def from_document(cls, cursor: ObjectCursor, context: ParseContext) -> MatchAllQuery:
        context.check_members(cursor, {"boost"})
        return build_model(cls, cursor, boost=read_boost(cursor))

    def body_document(self, registry: FieldRegistry) -> dict[str, Any]:
        return self._with_boost({})


class MatchQuery(QueryModel):
    """단일 필드 전문 검색 쿼리."""

    query_name: ClassVar[str] = "match"

    field: str = Field(min_length=1)
    query: ScalarValue
    operator: Literal["or", "and"] = "or"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MatchQuery):
            return NotImplemented
        return super().__eq__(other) and scalar_identity(self.query) == scalar_identity(other.query)

    def __hash__(self) -> int:
        return hash((self.field, scalar_identity(self.query), self.operator, self.boost))

    @classmethod
    def from_document(cls, cursor: ObjectCursor, context: ParseContext) -> MatchQuery:
        field_name = cursor.single_member()
        if not cursor.has(field_name) or not isinstance(cursor.value(field_name), dict):
            return build_model(cls, cursor, field=field_name, query=read_scalar(cursor, field_name))

        options = cursor.child(field_name, type_name=cls.query_name)
        context.check_members(options, {"query", "operator", "boost"})
        operator = options.string("operator", required=False) or "or"
        operator = operator.lower()
        if operator not in ("or", "and"):
            raise MalformedDocumentError(
                f"operator는 or/and 중 하나여야 합니다: actual={operator}",
                field="operator",
                type_name=cls.query_name,
                path=options.path,
            )
        return build_model(
            cls,
            options,
            field=field_name,
            query=read_scalar(options, "query"),
            operator=operator,
            boost=read_boost(options),
        )

    def body_document(self, registry: FieldRegistry) -> dict[str, Any]:
        if self.operator == "or" and self.boost == 1.0:
            return {self.field: self.query}
        options: dict[str, Any] = {"query": self.query}
        if self.operator != "or":
            options["operator"] = self.operator
        return {self.field: self._with_boost(options)}


class TermQuery(QueryModel):
    """정확히 일치하는 값을 찾는 쿼리."""

    query_name: ClassVar[str] = "term"

    field: str = Field(min_length=1)
    value: ScalarValue

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TermQuery):
            return NotImplemented
        return super().__eq__(other) and scalar_identity(self.value) == scalar_identity(other.value)

    def __hash__(self) -> int:
        return hash((self.field, scalar_identity(self.value), self.boost))

    @classmethod
    def from_document(cls, cursor: ObjectCursor, context: ParseContext) -> TermQuery:
        field_name = cursor.single_member()
        if not cursor.has(field_name) or not isinstance(cursor.value(field_name), dict):
            return build_model(cls, cursor, field=field_name, value=read_scalar(cursor, field_name))

        options = cursor.child(field_name, type_name=cls.query_name)
        context.check_members(options, {"value", "boost"})
        return build_model(
            cls,
            options,
            field=field_name,
            value=read_scalar(options, "value"),
            boost=read_boost(options),
        )

    def body_document(self, registry: FieldRegistry) -> dict[str, Any]:
        if self.boost == 1.0:
            return {self.field: self.value}
        return {self.field: self._with_boost({"value": self.value})}


class BoolQuery(QueryModel):
    """하위 쿼리들을 must/should/must_not/filter 절로 조합하는 쿼리."""

    query_name: ClassVar[str] = "bool"

    must: tuple[QueryModel, ...] = ()
    should: tuple[QueryModel, ...] = ()
    must_not: tuple[QueryModel, ...] = ()
    filter: tuple[QueryModel, ...] = ()
    minimum_should_match: Union[int, str, None] = None

    CLAUSES: ClassVar[tuple[str, ...]] = ("must", "should", "must_not", "filter")

    @classmethod
    def from_document(cls, cursor: ObjectCursor, context: ParseContext) -> BoolQuery:
        context.check_members(cursor, {*cls.CLAUSES, "minimum_should_match", "boost"})

        clauses: dict[str, tuple[QueryModel, ...]] = {}
        for clause in cls.CLAUSES:
            children = cursor.children(clause, type_name=QUERY_CATEGORY, allow_single=True)
            clauses[clause] = tuple(context.parse_query(child) for child in children)

        minimum_should_match = cursor.value("minimum_should_match", required=False)
        if minimum_should_match is not None and (
            isinstance(minimum_should_match, bool) or not isinstance(minimum_should_match, (int, str))
        ):
            raise MalformedDocumentError(
                f"minimum_should_match는 정수 또는 문자열이어야 합니다: actual={minimum_should_match!r}",
                field="minimum_should_match",
                type_name=cls.query_name,
                path=cursor.path,
            )

        return build_model(
            cls,
            cursor,
            minimum_should_match=minimum_should_match,
            boost=read_boost(cursor),
            **clauses,
        )

    def body_document(self, registry: FieldRegistry) -> dict[str, Any]:
        body: dict[str, Any] = {}
        for clause in self.CLAUSES:
            queries = getattr(self, clause)
            if queries:
                body[clause] = [registry.serialize(query) for query in queries]
        if self.minimum_should_match is not None:
            body["minimum_should_match"] = self.minimum_should_match
        return self._with_boost(body)


BUILTIN_QUERIES: tuple[type[QueryModel], ...] = (MatchAllQuery, MatchQuery, TermQuery, BoolQuery)


def register_builtin_queries(registry: FieldRegistry) -> FieldRegistry:
    """기본 쿼리 타입을 레지스트리에 등록한다."""
    for query_type in BUILTIN_QUERIES:
        registry.register(
            query_type.query_name,
            query_type.from_document,
            model_type=query_type,
            serializer=query_type.body_document,
        )
    return registry


def default_query_registry() -> FieldRegistry:
    """기본 쿼리 타입이 등록된 고정 레지스트리를 생성한다."""
    return register_builtin_queries(FieldRegistry(QUERY_CATEGORY)).freeze()
