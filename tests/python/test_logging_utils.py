import logging
from contextlib import contextmanager

from rankeval import setup_logging


@contextmanager
def bare_root_logger():
    # pytest가 테스트 단계마다 붙이는 캡처 핸들러를 잠시 떼어 낸다.
    root_logger = logging.getLogger()
    saved_handlers = list(root_logger.handlers)
    saved_level = root_logger.level
    for handler in saved_handlers:
        root_logger.removeHandler(handler)
    try:
        yield root_logger
    finally:
        for handler in list(root_logger.handlers):
            root_logger.removeHandler(handler)
            handler.close()
        for handler in saved_handlers:
            root_logger.addHandler(handler)
        root_logger.setLevel(saved_level)


def test_setup_logging_configures_empty_root_logger(monkeypatch, tmp_path) -> None:
    log_file = tmp_path / "logs" / "rankeval.log"
    monkeypatch.setenv("RANKEVAL_LOG_FILE", str(log_file))

    with bare_root_logger() as root_logger:
        setup_logging("debug")

        assert root_logger.level == logging.DEBUG
        assert any(type(handler) is logging.StreamHandler for handler in root_logger.handlers)
        assert any(isinstance(handler, logging.FileHandler) for handler in root_logger.handlers)
        assert log_file.parent.is_dir()


def test_setup_logging_reads_level_from_environment(monkeypatch) -> None:
    monkeypatch.delenv("RANKEVAL_LOG_FILE", raising=False)
    monkeypatch.setenv("RANKEVAL_LOG_LEVEL", "warning")

    with bare_root_logger() as root_logger:
        setup_logging()

        assert root_logger.level == logging.WARNING
        assert len(root_logger.handlers) == 1


def test_setup_logging_is_noop_when_handlers_exist() -> None:
    existing = logging.NullHandler()

    with bare_root_logger() as root_logger:
        root_logger.addHandler(existing)
        setup_logging("debug")

        assert root_logger.handlers == [existing]
