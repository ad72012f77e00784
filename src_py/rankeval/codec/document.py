"""
목적:
- 트리 형태 문서(객체/배열/스칼라)를 바이트로 쓰고 읽는 코덱을 제공한다.

설명:
- JSON/YAML은 pretty-print 여부를 선택할 수 있고 CBOR는 항상 압축 형식이다.
- 객체 멤버 순서는 쓰기 시 보존하며 읽기 결과의 의미에는 영향을 주지 않는다.
- YAML 출력은 ASCII만 사용한다. 비ASCII 문자는 큰따옴표 스칼라 안에서 이스케이프되므로
  NEL(U+0085), LS(U+2028) 같은 줄바꿈 문자도 그대로 복원된다.
- 디코딩 실패, 디코더 재귀 한도를 넘는 중첩, 루트가 객체가 아닌 경우는
  MalformedDocumentError로 변환한다.
- 중복 멤버 이름은 JSON/YAML에서 거부한다. CBOR 디코더는 중복 키를 구분할 수 없어
  마지막 값을 유지한다.

디자인 패턴:
- 어댑터(Adapter).

참조:
- src_py/rankeval/codec/content_type.py
- src_py/rankeval/roundtrip/service.py
"""

from __future__ import annotations

import json
from collections.abc import Hashable
from typing import Any

import cbor2
import yaml

from rankeval.codec.content_type import ContentType, coerce_content_type
from rankeval.exceptions import MalformedDocumentError

YAML_MERGE_TAG = "tag:yaml.org,2002:merge"


class _UniqueKeySafeLoader(yaml.SafeLoader):
    """같은 매핑 안의 중복 키를 거부하는 SafeLoader."""

    def construct_mapping(self, node, deep=False):
        if isinstance(node, yaml.MappingNode):
            seen = set()
            for key_node, _ in node.value:
                if key_node.tag == YAML_MERGE_TAG:
                    continue
                key = self.construct_object(key_node, deep=deep)
                if not isinstance(key, Hashable):
                    continue
                if key in seen:
                    raise MalformedDocumentError("객체 멤버 이름이 중복되었습니다", field=str(key))
                seen.add(key)
        return super().construct_mapping(node, deep=deep)


def dump_document(tree: dict[str, Any], content_type: ContentType, *, pretty: bool = False) -> bytes:
    """문서 트리를 지정한 인코딩의 바이트로 직렬화한다."""
    content_type = coerce_content_type(content_type)

    if content_type is ContentType.JSON:
        if pretty:
            text = json.dumps(tree, ensure_ascii=False, indent=2)
        else:
            text = json.dumps(tree, ensure_ascii=False, separators=(",", ":"))
        return text.encode("utf-8")

    if content_type is ContentType.YAML:
        text = yaml.safe_dump(
            tree,
            sort_keys=False,
            default_flow_style=not pretty,
        )
        return text.encode("utf-8")

    return cbor2.dumps(tree)


def load_document(data: bytes | str, content_type: ContentType) -> dict[str, Any]:
    """바이트를 지정한 인코딩으로 디코딩해 루트 객체를 반환한다."""
    content_type = coerce_content_type(content_type)

    if content_type is ContentType.JSON:
        try:
            tree = json.loads(data, object_pairs_hook=_reject_duplicate_members)
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise MalformedDocumentError(f"JSON 문서 파싱 실패: {exc}") from exc
        except RecursionError as exc:
            raise _too_deep(content_type) from exc
    elif content_type is ContentType.YAML:
        try:
            tree = yaml.load(data, Loader=_UniqueKeySafeLoader)
        except yaml.YAMLError as exc:
            raise MalformedDocumentError(f"YAML 문서 파싱 실패: {exc}") from exc
        except RecursionError as exc:
            raise _too_deep(content_type) from exc
    else:
        if isinstance(data, str):
            raise MalformedDocumentError("CBOR 문서는 bytes여야 합니다")
        try:
            tree = cbor2.loads(data)
        except cbor2.CBORDecodeError as exc:
            raise MalformedDocumentError(f"CBOR 문서 파싱 실패: {exc}") from exc
        except RecursionError as exc:
            raise _too_deep(content_type) from exc

    if not isinstance(tree, dict):
        raise MalformedDocumentError(
            f"문서 루트는 객체여야 합니다: actual={type(tree).__name__}"
        )
    return tree


def _reject_duplicate_members(pairs: list[tuple[str, Any]]) -> dict[str, Any]:
    members: dict[str, Any] = {}
    for name, value in pairs:
        if name in members:
            raise MalformedDocumentError("객체 멤버 이름이 중복되었습니다", field=name)
        members[name] = value
    return members


def _too_deep(content_type: ContentType) -> MalformedDocumentError:
    return MalformedDocumentError(
        f"{content_type.value.upper()} 문서 중첩이 디코더 재귀 한도를 초과했습니다"
    )
