"""
목적:
- 파싱 컨텍스트 계층의 공개 진입점을 제공한다.

설명:
- ParseContext를 재노출한다.

디자인 패턴:
- 모듈 퍼사드(Module Facade).

참조:
- src_py/rankeval/parsing/context.py
"""

from .context import ParseContext

__all__ = ["ParseContext"]
