"""
목적:
- 드라이버 스크립트와 애플리케이션용 로깅 설정 함수를 제공한다.

설명:
- 라이브러리 모듈은 `logging.getLogger(__name__)`만 사용하고 핸들러를 붙이지 않는다.
- 로그 레벨은 RANKEVAL_LOG_LEVEL, 파일 출력은 RANKEVAL_LOG_FILE 환경 변수로 지정한다.
- 루트 로거에 이미 핸들러가 있으면 아무것도 하지 않는다.

디자인 패턴:
- 설정 함수(Configuration Function).

참조:
- scripts/convert-rated-request.py
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(level: str | None = None) -> None:
    """루트 로거에 콘솔(및 선택적 파일) 핸들러를 설정한다."""
    root_logger = logging.getLogger()
    if root_logger.handlers:
        return

    level_name = (level or os.getenv("RANKEVAL_LOG_LEVEL", "INFO")).upper()
    formatter = logging.Formatter(LOG_FORMAT)

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)
    root_logger.addHandler(stream_handler)

    log_file = os.getenv("RANKEVAL_LOG_FILE")
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    root_logger.setLevel(getattr(logging, level_name, logging.INFO))
