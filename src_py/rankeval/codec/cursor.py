"""
목적:
- 디코딩된 문서 트리의 객체 단위 읽기 커서를 제공한다.

설명:
- 커서는 하나의 객체 멤버와 문서 경로, 상위 타입 이름, 중첩 깊이를 보관한다.
- 값 조회 시 누락/형식 오류를 필드명과 상위 타입을 포함한 예외로 변환한다.
- 미인식 멤버 판정(strict/lenient)은 ParseContext가 담당한다.

디자인 패턴:
- 커서(Cursor) + 값 객체(Value Object).

참조:
- src_py/rankeval/parsing/context.py
- src_py/rankeval/contracts/rated_request.py
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from rankeval.exceptions import MalformedDocumentError, MissingRequiredFieldError


class ObjectCursor:
    """문서 객체 하나에 대한 읽기 전용 커서."""

    __slots__ = ("_members", "type_name", "path", "depth", "max_depth")

    def __init__(
        self,
        members: Mapping[str, Any],
        *,
        type_name: str,
        path: str = "",
        depth: int = 0,
        max_depth: int = 64,
    ) -> None:
        if depth > max_depth:
            raise MalformedDocumentError(
                f"문서 중첩 깊이가 최대값을 초과했습니다: max_depth={max_depth}",
                type_name=type_name,
                path=path,
            )
        for name in members:
            if not isinstance(name, str):
                raise MalformedDocumentError(
                    f"객체 멤버 이름은 문자열이어야 합니다: {name!r}",
                    type_name=type_name,
                    path=path,
                )

        self._members = members
        self.type_name = type_name
        self.path = path
        self.depth = depth
        self.max_depth = max_depth

    def names(self) -> list[str]:
        """멤버 이름을 문서 순서대로 반환한다."""
        return list(self._members)

    def has(self, name: str) -> bool:
        """멤버가 존재하고 null이 아닌지 반환한다."""
        return self._members.get(name) is not None

    def value(self, name: str, *, required: bool = True) -> Any:
        """멤버 값을 그대로 반환한다."""
        if not self.has(name):
            if required:
                raise MissingRequiredFieldError(
                    "필수 필드가 없습니다",
                    field=name,
                    type_name=self.type_name,
                    path=self.path,
                )
            return None
        return self._members[name]

    def string(self, name: str, *, required: bool = True) -> str | None:
        value = self.value(name, required=required)
        if value is None:
            return None
        if not isinstance(value, str):
            raise self._malformed(name, "문자열이어야 합니다", value)
        return value

    def integer(self, name: str, *, required: bool = True, minimum: int | None = None) -> int | None:
        value = self.value(name, required=required)
        if value is None:
            return None
        if isinstance(value, bool) or not isinstance(value, int):
            raise self._malformed(name, "정수여야 합니다", value)
        if minimum is not None and value < minimum:
            raise self._malformed(name, f"{minimum} 이상이어야 합니다", value)
        return value

    def number(self, name: str, *, required: bool = True) -> float | None:
        value = self.value(name, required=required)
        if value is None:
            return None
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise self._malformed(name, "숫자여야 합니다", value)
        return float(value)

    def string_list(self, name: str) -> list[str]:
        """문자열 배열 멤버를 반환한다. 없으면 빈 리스트."""
        value = self.value(name, required=False)
        if value is None:
            return []
        if not isinstance(value, list):
            raise self._malformed(name, "배열이어야 합니다", value)
        for item in value:
            if not isinstance(item, str):
                raise self._malformed(name, "배열 원소는 문자열이어야 합니다", item)
        return list(value)

    def mapping(self, name: str) -> dict[str, Any]:
        """임의 객체 멤버를 dict 복사본으로 반환한다. 없으면 빈 dict."""
        value = self.value(name, required=False)
        if value is None:
            return {}
        if not isinstance(value, Mapping):
            raise self._malformed(name, "객체여야 합니다", value)
        return dict(value)

    def child(self, name: str, type_name: str, *, required: bool = True) -> ObjectCursor | None:
        """객체 멤버에 대한 하위 커서를 연다."""
        value = self.value(name, required=required)
        if value is None:
            return None
        if not isinstance(value, Mapping):
            raise self._malformed(name, "객체여야 합니다", value)
        return self._open(value, type_name, self._child_path(name))

    def children(self, name: str, type_name: str, *, allow_single: bool = False) -> list[ObjectCursor]:
        """객체 배열 멤버의 원소별 하위 커서를 연다.

        allow_single이 참이면 배열 대신 단일 객체도 원소 하나짜리 배열로 취급한다.
        """
        value = self.value(name, required=False)
        if value is None:
            return []
        if allow_single and isinstance(value, Mapping):
            return [self._open(value, type_name, self._child_path(name))]
        if not isinstance(value, list):
            raise self._malformed(name, "객체 배열이어야 합니다", value)

        cursors = []
        for position, item in enumerate(value):
            item_path = f"{self._child_path(name)}[{position}]"
            if not isinstance(item, Mapping):
                raise MalformedDocumentError(
                    f"배열 원소는 객체여야 합니다: actual={type(item).__name__}",
                    field=name,
                    type_name=type_name,
                    path=item_path,
                )
            cursors.append(self._open(item, type_name, item_path))
        return cursors

    def single_member(self) -> str:
        """멤버가 정확히 하나인 객체의 멤버 이름을 반환한다."""
        names = self.names()
        if len(names) != 1:
            raise MalformedDocumentError(
                f"객체는 멤버를 정확히 하나 가져야 합니다: actual={names}",
                type_name=self.type_name,
                path=self.path,
            )
        return names[0]

    def _open(self, members: Mapping[str, Any], type_name: str, path: str) -> ObjectCursor:
        return ObjectCursor(
            members,
            type_name=type_name,
            path=path,
            depth=self.depth + 1,
            max_depth=self.max_depth,
        )

    def _child_path(self, name: str) -> str:
        return f"{self.path}.{name}" if self.path else name

    def _malformed(self, name: str, reason: str, value: Any) -> MalformedDocumentError:
        return MalformedDocumentError(
            f"필드 값이 {reason}: actual={value!r}",
            field=name,
            type_name=self.type_name,
            path=self._child_path(name),
        )
