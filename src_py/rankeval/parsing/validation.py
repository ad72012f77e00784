"""
목적:
- 파싱 중 pydantic 모델 생성 실패를 문서 형식 오류로 변환한다.

설명:
- 문서에서 읽은 값으로 모델을 만들 때 발생하는 ValidationError를
  MalformedDocumentError로 바꾸고 커서 경로를 함께 남긴다.

디자인 패턴:
- 예외 변환(Exception Translation).

참조:
- src_py/rankeval/contracts/rated_request.py
- src_py/rankeval/queries/builtin.py
"""

from __future__ import annotations

from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from rankeval.codec.cursor import ObjectCursor
from rankeval.exceptions import MalformedDocumentError

ModelT = TypeVar("ModelT", bound=BaseModel)


def build_model(model_type: type[ModelT], cursor: ObjectCursor, **values: Any) -> ModelT:
    """문서 값으로 모델을 생성하고 검증 실패를 MalformedDocumentError로 변환한다."""
    try:
        return model_type(**values)
    except ValidationError as exc:
        reasons = "; ".join(_describe(error) for error in exc.errors())
        raise MalformedDocumentError(
            f"모델 검증에 실패했습니다: {reasons}",
            type_name=cursor.type_name,
            path=cursor.path,
        ) from exc


def _describe(error: dict[str, Any]) -> str:
    location = ".".join(str(part) for part in error.get("loc", ()))
    message = error.get("msg", "")
    return f"{location}: {message}" if location else message
