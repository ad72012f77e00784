"""
목적:
- 타입 판별 문자열을 파서/직렬화기 쌍으로 매핑하는 레지스트리를 제공한다.

설명:
- 임베디드 쿼리처럼 형태가 열려 있는 하위 문서를 코덱이 개별 타입을 알지 못한 채
  파싱/직렬화할 수 있게 한다.
- 초기화 시점에 등록을 마친 뒤 freeze()로 고정하고, 이후에는 조회만 허용한다.
- 조회는 상태를 바꾸지 않으므로 여러 파싱 호출이 동시에 공유해도 안전하다.

디자인 패턴:
- 레지스트리(Registry) + 팩토리(Factory).

참조:
- src_py/rankeval/parsing/context.py
- src_py/rankeval/queries/builtin.py
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from rankeval.exceptions import ConfigurationError, UnknownTypeError

if TYPE_CHECKING:
    from rankeval.codec.cursor import ObjectCursor
    from rankeval.parsing.context import ParseContext

Parser = Callable[["ObjectCursor", "ParseContext"], Any]
Serializer = Callable[[Any, "FieldRegistry"], dict[str, Any]]


@dataclass(frozen=True, slots=True)
class RegistryEntry:
    """등록된 타입 하나의 파서/직렬화기 쌍."""

    name: str
    model_type: type
    parser: Parser
    serializer: Serializer


class FieldRegistry:
    """이름 -> 파서/직렬화기 매핑 레지스트리."""

    def __init__(self, category: str) -> None:
        if not category:
            raise ConfigurationError("레지스트리 category는 비어 있을 수 없습니다")
        self._category = category
        self._entries: dict[str, RegistryEntry] = {}
        self._by_type: dict[type, RegistryEntry] = {}
        self._frozen = False

    @property
    def category(self) -> str:
        return self._category

    @property
    def frozen(self) -> bool:
        return self._frozen

    def register(
        self,
        name: str,
        parser: Parser,
        *,
        model_type: type,
        serializer: Serializer,
    ) -> FieldRegistry:
        """타입 이름에 파서/직렬화기 쌍을 등록한다."""
        if self._frozen:
            raise ConfigurationError(
                f"고정된 레지스트리에는 등록할 수 없습니다: category={self._category}, name={name}"
            )
        if not name:
            raise ConfigurationError("등록 이름은 비어 있을 수 없습니다")
        if name in self._entries:
            raise ConfigurationError(
                f"이미 등록된 이름입니다: category={self._category}, name={name}"
            )
        if model_type in self._by_type:
            raise ConfigurationError(
                f"이미 등록된 모델 타입입니다: category={self._category}, type={model_type.__name__}"
            )

        entry = RegistryEntry(name=name, model_type=model_type, parser=parser, serializer=serializer)
        self._entries[name] = entry
        self._by_type[model_type] = entry
        return self

    def freeze(self) -> FieldRegistry:
        """이후 등록을 막고 조회 전용으로 전환한다."""
        self._frozen = True
        return self

    def names(self) -> list[str]:
        return sorted(self._entries)

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def resolve(self, name: str) -> RegistryEntry:
        """타입 이름에 등록된 엔트리를 반환한다."""
        try:
            return self._entries[name]
        except KeyError:
            raise UnknownTypeError(
                f"등록되지 않은 {self._category} 타입입니다",
                field=name,
                type_name=self._category,
            ) from None

    def entry_for(self, value: object) -> RegistryEntry:
        """값의 모델 타입(상위 클래스 포함)에 등록된 엔트리를 반환한다."""
        for klass in type(value).__mro__:
            entry = self._by_type.get(klass)
            if entry is not None:
                return entry
        raise UnknownTypeError(
            f"직렬화기가 등록되지 않은 {self._category} 모델입니다: {type(value).__name__}",
            type_name=self._category,
        )

    def serialize(self, value: object) -> dict[str, Any]:
        """값을 `{이름: 본문}` 형태의 문서 트리로 직렬화한다."""
        entry = self.entry_for(value)
        return {entry.name: entry.serializer(value, self)}
