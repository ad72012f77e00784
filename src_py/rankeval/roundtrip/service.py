"""
목적:
- RatedRequest를 문서 바이트로 쓰고 다시 읽는 왕복 코덱 클래스를 제공한다.

설명:
- 인코딩/pretty-print/strict 기본값은 CodecConfig에서 가져오고 호출마다 덮어쓸 수 있다.
- 파싱 시 고정된 필드 레지스트리와 strict 정책을 ParseContext로 묶어 전체 트리에 전달한다.
- indices/types는 문서 본문이 아닌 호출 지점 값으로 덮어쓴다(with_scope).
- 호출 단위 pretty 지정은 바이너리 인코딩에서 무시된다.

디자인 패턴:
- 서비스 레이어(Service Layer).

참조:
- src_py/rankeval/codec/document.py
- src_py/rankeval/contracts/rated_request.py
- src_py/rankeval/parsing/context.py
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from rankeval.codec.content_type import ContentType, coerce_content_type
from rankeval.codec.document import dump_document, load_document
from rankeval.config.models import CodecConfig
from rankeval.contracts.rated_request import RATED_REQUEST_TYPE, RatedRequest
from rankeval.exceptions import ConfigurationError
from rankeval.parsing.context import ParseContext
from rankeval.registry.field_registry import FieldRegistry

logger = logging.getLogger(__name__)


class RatedRequestCodec:
    """RatedRequest 직렬화/파싱 코덱."""

    def __init__(self, registry: FieldRegistry, config: CodecConfig | None = None) -> None:
        if not registry.frozen:
            raise ConfigurationError(
                f"코덱에는 freeze()된 레지스트리가 필요합니다: category={registry.category}"
            )
        self._registry = registry
        self._config = config or CodecConfig()

    @property
    def config(self) -> CodecConfig:
        return self._config

    def to_tree(self, request: RatedRequest, *, include_scope: bool | None = None) -> dict[str, Any]:
        """명세를 문서 트리로 변환한다."""
        if include_scope is None:
            include_scope = self._config.include_scope
        return request.to_document(self._registry, include_scope=include_scope)

    def from_tree(self, tree: dict[str, Any], *, strict: bool | None = None) -> RatedRequest:
        """디코딩된 문서 트리에서 명세를 파싱한다."""
        context = ParseContext(
            self._registry,
            strict=self._config.strict if strict is None else strict,
            max_depth=self._config.max_depth,
        )
        return RatedRequest.from_document(context.open(tree, RATED_REQUEST_TYPE), context)

    def dumps(
        self,
        request: RatedRequest,
        *,
        content_type: ContentType | str | None = None,
        pretty: bool | None = None,
        include_scope: bool | None = None,
    ) -> bytes:
        """명세를 지정한 인코딩의 바이트로 직렬화한다."""
        content_type = coerce_content_type(content_type or self._config.content_type)
        if pretty is None:
            pretty = self._config.pretty

        payload = dump_document(
            self.to_tree(request, include_scope=include_scope),
            content_type,
            pretty=pretty and content_type.is_text,
        )
        logger.debug(
            "rated request 직렬화 완료 id=%s content_type=%s bytes=%d",
            request.spec_id,
            content_type.value,
            len(payload),
        )
        return payload

    def loads(
        self,
        data: bytes | str,
        *,
        content_type: ContentType | str | None = None,
        indices: Iterable[str] | None = None,
        types: Iterable[str] | None = None,
        strict: bool | None = None,
    ) -> RatedRequest:
        """바이트를 파싱해 명세를 만들고, 주어진 indices/types로 범위를 덮어쓴다."""
        content_type = coerce_content_type(content_type or self._config.content_type)
        request = self.from_tree(load_document(data, content_type), strict=strict)

        if indices is not None or types is not None:
            request = request.with_scope(
                request.indices if indices is None else indices,
                request.types if types is None else types,
            )

        logger.debug(
            "rated request 파싱 완료 id=%s content_type=%s ratings=%d",
            request.spec_id,
            content_type.value,
            len(request.rated_documents),
        )
        return request
