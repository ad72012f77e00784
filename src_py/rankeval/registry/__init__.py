"""
목적:
- 필드 레지스트리 계층의 공개 진입점을 제공한다.

설명:
- 레지스트리 클래스와 엔트리 타입을 재노출한다.

디자인 패턴:
- 모듈 퍼사드(Module Facade).

참조:
- src_py/rankeval/registry/field_registry.py
"""

from .field_registry import FieldRegistry, RegistryEntry

__all__ = ["FieldRegistry", "RegistryEntry"]
