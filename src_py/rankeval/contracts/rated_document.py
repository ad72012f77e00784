"""
목적:
- 문서 단위 관련도 판정(Rated Document) 모델을 정의한다.

설명:
- (index, type, doc_id) 복합 키와 0 이상의 정수 등급으로 구성된다.
- 문서 형태는 `{"key": {"index", "type", "doc_id"}, "rating": <int>}` 이다.
- key 하위 필드 또는 rating이 없거나 형식이 틀리면 MalformedDocumentError를 발생시킨다.

디자인 패턴:
- 값 객체(Value Object).

참조:
- src_py/rankeval/contracts/rated_request.py
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictInt

from rankeval.codec.cursor import ObjectCursor
from rankeval.exceptions import MalformedDocumentError, MissingRequiredFieldError
from rankeval.parsing.context import ParseContext
from rankeval.parsing.validation import build_model

KEY_FIELDS = frozenset({"index", "type", "doc_id"})
RATED_DOCUMENT_FIELDS = frozenset({"key", "rating"})


class RatedDocumentKey(BaseModel):
    """판정 대상 문서의 복합 키 모델."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    index: str = Field(min_length=1)
    type: str
    doc_id: str = Field(min_length=1)

    @classmethod
    def from_document(cls, cursor: ObjectCursor, context: ParseContext) -> RatedDocumentKey:
        context.check_members(cursor, KEY_FIELDS)
        return build_model(
            cls,
            cursor,
            index=_required_string(cursor, "index"),
            type=_required_string(cursor, "type"),
            doc_id=_required_string(cursor, "doc_id"),
        )

    def to_document(self) -> dict[str, Any]:
        return {"index": self.index, "type": self.type, "doc_id": self.doc_id}


class RatedDocument(BaseModel):
    """문서 하나에 대한 관련도 판정 모델."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    key: RatedDocumentKey
    rating: StrictInt = Field(ge=0)

    @classmethod
    def from_document(cls, cursor: ObjectCursor, context: ParseContext) -> RatedDocument:
        context.check_members(cursor, RATED_DOCUMENT_FIELDS)

        if not cursor.has("key"):
            raise MalformedDocumentError(
                "판정 항목에 key가 없습니다",
                field="key",
                type_name=cursor.type_name,
                path=cursor.path,
            )
        key = RatedDocumentKey.from_document(
            cursor.child("key", type_name="rated_document_key"),
            context,
        )

        try:
            rating = cursor.integer("rating", minimum=0)
        except MissingRequiredFieldError as exc:
            raise MalformedDocumentError(
                "판정 항목에 rating이 없습니다",
                field="rating",
                type_name=cursor.type_name,
                path=cursor.path,
            ) from exc

        return build_model(cls, cursor, key=key, rating=rating)

    def to_document(self) -> dict[str, Any]:
        return {"key": self.key.to_document(), "rating": self.rating}


def _required_string(cursor: ObjectCursor, name: str) -> str:
    try:
        return cursor.string(name)
    except MissingRequiredFieldError as exc:
        raise MalformedDocumentError(
            "문서 키 필드가 없습니다",
            field=name,
            type_name=cursor.type_name,
            path=cursor.path,
        ) from exc
