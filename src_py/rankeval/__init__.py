"""
목적:
- rankeval Python 패키지의 공개 진입점을 제공한다.

설명:
- 라이브러리 핵심 클래스는 `RatedRequest`, `RatedRequestCodec` 두 가지다.
- 문서 코덱/필드 레지스트리/파싱 컨텍스트/기본 쿼리/설정/예외를 함께 노출한다.

디자인 패턴:
- 퍼사드(Facade).

참조:
- src_py/rankeval/contracts/rated_request.py
- src_py/rankeval/roundtrip/service.py
"""

from .codec import ContentType, ObjectCursor, dump_document, load_document
from .config.models import CodecConfig
from .contracts import RatedDocument, RatedDocumentKey, RatedRequest, SearchSource
from .exceptions import (
    ConfigurationError,
    DocumentParseError,
    MalformedDocumentError,
    MissingRequiredFieldError,
    RankEvalError,
    UnknownTypeError,
    UnrecognizedFieldError,
)
from .parsing import ParseContext
from .queries import (
    BoolQuery,
    MatchAllQuery,
    MatchQuery,
    QueryModel,
    TermQuery,
    default_query_registry,
    register_builtin_queries,
)
from .registry import FieldRegistry, RegistryEntry
from .roundtrip import RatedRequestCodec
from .shared import setup_logging
from .version import __version__

__all__ = [
    "__version__",
    "RatedRequest",
    "RatedRequestCodec",
    "RatedDocument",
    "RatedDocumentKey",
    "SearchSource",
    "CodecConfig",
    "ContentType",
    "ObjectCursor",
    "dump_document",
    "load_document",
    "FieldRegistry",
    "RegistryEntry",
    "ParseContext",
    "QueryModel",
    "MatchAllQuery",
    "MatchQuery",
    "TermQuery",
    "BoolQuery",
    "register_builtin_queries",
    "default_query_registry",
    "setup_logging",
    "RankEvalError",
    "ConfigurationError",
    "DocumentParseError",
    "MissingRequiredFieldError",
    "UnrecognizedFieldError",
    "UnknownTypeError",
    "MalformedDocumentError",
]
