"""
목적:
- 평가 요청 명세(Rated Request) 모델과 문서 파싱/직렬화 규칙을 정의한다.

설명:
- 명세는 id, 검색 요청 본문(request) 또는 템플릿 참조(template_id/params),
  인덱스/타입 범위, 문서별 관련도 판정 목록으로 구성된다.
- request와 template_id는 정확히 하나만 존재해야 한다.
- 같은 (index, type, doc_id) 키를 가진 판정이 두 개 이상이면 생성 단계에서 거부한다.
- indices/types는 호출 지점(URL 경로 등)에서 주입되므로 파싱 후 with_scope()로
  새 인스턴스를 만들어 덮어쓴다. 모델 자체는 불변이다.

디자인 패턴:
- 값 객체(Value Object) + 2단계 생성(Two-phase Construction).

참조:
- src_py/rankeval/contracts/rated_document.py
- src_py/rankeval/contracts/search_source.py
- src_py/rankeval/roundtrip/service.py
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from rankeval.codec.cursor import ObjectCursor
from rankeval.contracts.rated_document import RatedDocument
from rankeval.contracts.search_source import SearchSource
from rankeval.parsing.context import ParseContext
from rankeval.parsing.validation import build_model
from rankeval.registry.field_registry import FieldRegistry

RATED_REQUEST_TYPE = "rated_request"
RATED_REQUEST_FIELDS = frozenset({"id", "request", "template_id", "params", "ratings", "indices", "types"})


class RatedRequest(BaseModel):
    """평가 요청 명세 모델."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    spec_id: str = Field(min_length=1)
    test_request: SearchSource | None = Field(default=None)
    template_id: str | None = Field(default=None, min_length=1)
    params: dict[str, Any] = Field(default_factory=dict)
    indices: tuple[str, ...] = Field(default=())
    types: tuple[str, ...] = Field(default=())
    rated_documents: tuple[RatedDocument, ...] = Field(default=())

    @model_validator(mode="after")
    def validate_request_source(self) -> RatedRequest:
        if (self.test_request is None) == (self.template_id is None):
            raise ValueError("request와 template_id 중 정확히 하나가 필요합니다")
        if self.params and self.template_id is None:
            raise ValueError("params는 template_id와 함께만 사용할 수 있습니다")
        return self

    @model_validator(mode="after")
    def validate_unique_keys(self) -> RatedRequest:
        seen = set()
        for rated_document in self.rated_documents:
            key = rated_document.key
            if key in seen:
                raise ValueError(
                    "중복된 판정 문서 키가 있습니다: "
                    f"index={key.index}, type={key.type}, doc_id={key.doc_id}, id={self.spec_id}"
                )
            seen.add(key)
        return self

    def __hash__(self) -> int:
        # params는 dict라 해시에서만 제외한다. 동등성 비교에는 포함된다.
        return hash(
            (
                self.spec_id,
                self.test_request,
                self.template_id,
                self.indices,
                self.types,
                self.rated_documents,
            )
        )

    @classmethod
    def from_document(cls, cursor: ObjectCursor, context: ParseContext) -> RatedRequest:
        """문서 커서에서 명세를 파싱한다."""
        context.check_members(cursor, RATED_REQUEST_FIELDS)

        spec_id = cursor.string("id")

        test_request = None
        request_cursor = cursor.child("request", type_name="request", required=False)
        if request_cursor is not None:
            test_request = SearchSource.from_document(request_cursor, context)

        rated_documents = [
            RatedDocument.from_document(item, context)
            for item in cursor.children("ratings", type_name="rated_document")
        ]

        return build_model(
            cls,
            cursor,
            spec_id=spec_id,
            test_request=test_request,
            template_id=cursor.string("template_id", required=False),
            params=cursor.mapping("params"),
            indices=cursor.string_list("indices"),
            types=cursor.string_list("types"),
            rated_documents=rated_documents,
        )

    def to_document(self, registry: FieldRegistry, *, include_scope: bool = False) -> dict[str, Any]:
        """명세를 문서 트리로 직렬화한다."""
        document: dict[str, Any] = {"id": self.spec_id}
        if self.test_request is not None:
            document["request"] = self.test_request.to_document(registry)
        if self.template_id is not None:
            document["template_id"] = self.template_id
        if self.params:
            document["params"] = dict(self.params)
        if include_scope:
            if self.indices:
                document["indices"] = list(self.indices)
            if self.types:
                document["types"] = list(self.types)
        document["ratings"] = [rated_document.to_document() for rated_document in self.rated_documents]
        return document

    def with_scope(self, indices: Iterable[str], types: Iterable[str]) -> RatedRequest:
        """호출 지점에서 받은 indices/types로 범위를 덮어쓴 새 명세를 반환한다.

        문자열 하나(str/bytes)는 시퀀스로 취급하지 않고 TypeError로 거부한다.
        """
        for name, values in (("indices", indices), ("types", types)):
            if isinstance(values, (str, bytes)):
                raise TypeError(f"{name}는 문자열 시퀀스여야 합니다: actual={values!r}")
        return type(self).model_validate(
            {
                **dict(self),
                "indices": tuple(indices),
                "types": tuple(types),
            }
        )
