"""
목적:
- rankeval 파싱/직렬화 계층의 예외 타입을 표준화한다.

설명:
- 필수 필드 누락, 미인식 필드, 미등록 타입, 형식 오류를 명시적으로 구분해
  라이브러리 소비자가 요청 검증 실패를 정확히 보고할 수 있게 한다.
- 파싱 예외는 필드명/상위 타입/문서 경로를 함께 보관한다.

디자인 패턴:
- 계층형 예외(Hierarchical Exception).

참조:
- src_py/rankeval/codec/cursor.py
- src_py/rankeval/parsing/context.py
- src_py/rankeval/registry/field_registry.py
"""

from __future__ import annotations


class RankEvalError(Exception):
    """rankeval 공통 베이스 예외."""


class ConfigurationError(RankEvalError):
    """설정값 또는 레지스트리 사용이 유효하지 않을 때 발생한다."""


class DocumentParseError(RankEvalError):
    """문서 파싱 실패의 공통 베이스 예외."""

    def __init__(
        self,
        message: str,
        *,
        field: str | None = None,
        type_name: str | None = None,
        path: str | None = None,
    ) -> None:
        self.field = field
        self.type_name = type_name
        self.path = path

        details = []
        if field is not None:
            details.append(f"field={field}")
        if type_name is not None:
            details.append(f"type={type_name}")
        if path:
            details.append(f"path={path}")
        if details:
            message = f"{message} [{', '.join(details)}]"
        super().__init__(message)


class MissingRequiredFieldError(DocumentParseError):
    """필수 필드가 문서에 없을 때 발생한다."""


class UnrecognizedFieldError(DocumentParseError):
    """strict 모드에서 스키마에 없는 필드를 만났을 때 발생한다."""


class UnknownTypeError(DocumentParseError):
    """레지스트리에 등록되지 않은 타입 이름을 조회할 때 발생한다."""


class MalformedDocumentError(DocumentParseError):
    """값의 타입/형태가 기대와 다르거나 모델 검증에 실패할 때 발생한다."""
