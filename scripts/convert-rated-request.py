"""
목적:
- 평가 요청 명세 파일을 파싱해 다른 인코딩으로 다시 쓰는 드라이버 스크립트를 제공한다.

설명:
- 라이브러리 본체는 파일/환경을 직접 읽지 않는다.
- 이 스크립트는 파일 읽기 -> strict/lenient 파싱 -> 범위 주입 -> 재직렬화 흐름을 데모한다.
- 기본 쿼리 외 타입이 필요하면 레지스트리 팩토리를 `module:function` 형식으로 주입한다.

디자인 패턴:
- 드라이버(Driver Script).

참조:
- src_py/rankeval/config/models.py
- src_py/rankeval/roundtrip/service.py
"""

from __future__ import annotations

import argparse
import importlib
import logging
import sys
from pathlib import Path

from rankeval import CodecConfig, ContentType, RatedRequestCodec, default_query_registry, setup_logging

logger = logging.getLogger("rankeval.scripts.convert")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    choices = [content_type.value for content_type in ContentType]
    parser = argparse.ArgumentParser(description="rated request 인코딩 변환기")
    parser.add_argument("--input", required=True, help="입력 명세 파일 경로")
    parser.add_argument("--output", default=None, help="출력 파일 경로 (기본: stdout)")
    parser.add_argument("--from", dest="source_type", choices=choices, default="json", help="입력 인코딩")
    parser.add_argument("--to", dest="target_type", choices=choices, default="json", help="출력 인코딩")
    parser.add_argument("--pretty", action="store_true", help="텍스트 출력 pretty-print")
    parser.add_argument("--lenient", action="store_true", help="미인식 필드를 건너뜀")
    parser.add_argument("--indices", default=None, help="콤마로 구분된 인덱스 범위 (예: a,b)")
    parser.add_argument("--types", default=None, help="콤마로 구분된 타입 범위")
    parser.add_argument(
        "--registry-factory",
        default=None,
        help="쿼리 레지스트리 팩토리 경로 (예: app.queries:build_registry)",
    )
    return parser.parse_args(argv)


def parse_scope(raw: str | None) -> list[str] | None:
    if raw is None:
        return None
    return [token.strip() for token in raw.split(",") if token.strip()]


def load_factory(spec: str):
    if ":" not in spec:
        raise RuntimeError("--registry-factory 형식은 module:function 이어야 합니다")
    module_name, function_name = spec.split(":", 1)
    module = importlib.import_module(module_name)
    return getattr(module, function_name)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    setup_logging()

    input_path = Path(args.input)
    if not input_path.exists():
        raise RuntimeError(f"입력 파일이 존재하지 않습니다: {input_path}")

    registry = load_factory(args.registry_factory)() if args.registry_factory else default_query_registry()
    target_type = ContentType(args.target_type)
    config = CodecConfig(
        content_type=target_type,
        pretty=args.pretty and target_type.is_text,
        strict=not args.lenient,
        include_scope=args.indices is not None or args.types is not None,
    )
    codec = RatedRequestCodec(registry, config)

    request = codec.loads(
        input_path.read_bytes(),
        content_type=args.source_type,
        indices=parse_scope(args.indices),
        types=parse_scope(args.types),
    )
    payload = codec.dumps(request)

    if args.output:
        Path(args.output).write_bytes(payload)
    else:
        sys.stdout.buffer.write(payload)
        sys.stdout.buffer.flush()

    logger.info(
        "변환 완료 id=%s ratings=%d %s -> %s",
        request.spec_id,
        len(request.rated_documents),
        args.source_type,
        target_type.value,
    )
    return 0


if __name__ == "__main__":
    try:
        raise SystemExit(main())
    except Exception as exc:  # noqa: BLE001
        print(f"[error] {exc}", file=sys.stderr)
        raise SystemExit(1)
