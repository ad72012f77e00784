"""
목적:
- 쿼리 모델 계층의 공개 진입점을 제공한다.

설명:
- 쿼리 베이스, 기본 쿼리 타입, 기본 레지스트리 팩토리를 재노출한다.

디자인 패턴:
- 모듈 퍼사드(Module Facade).

참조:
- src_py/rankeval/queries/base.py
- src_py/rankeval/queries/builtin.py
"""

from .base import QueryModel
from .builtin import (
    QUERY_CATEGORY,
    BoolQuery,
    MatchAllQuery,
    MatchQuery,
    TermQuery,
    default_query_registry,
    register_builtin_queries,
)

__all__ = [
    "QUERY_CATEGORY",
    "QueryModel",
    "MatchAllQuery",
    "MatchQuery",
    "TermQuery",
    "BoolQuery",
    "register_builtin_queries",
    "default_query_registry",
]
