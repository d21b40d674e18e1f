"""
로깅 설정 유틸리티

Web 서버 공통 로깅 설정.
- 콘솔: INFO 레벨
- 파일: INFO 레벨, 매일 자정 롤링 (7일 보관)
- logger.info(..., extra={...})의 extra 항목은 메시지 뒤에 key=value로 출력

사용법:
    from core.logging import setup_logging
    setup_logging("web", log_dir=settings.log_dir)
"""

import logging
import sys
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

from core.constants import Paths

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_FILE_BACKUP_COUNT = 7

# WARNING 이상만 출력할 서드파티 로거
NOISY_LOGGERS = [
    "aiosqlite",      # 쿼리마다 executing/completed
    "httpcore",
    "httpx",          # 체인 노드 요청
    "asyncio",
    "passlib",        # 해시 백엔드 탐지
]

# LogRecord 기본 속성 (extra 항목 구분용)
_RESERVED_ATTRS = frozenset(
    logging.LogRecord("", 0, "", 0, "", None, None).__dict__
) | {"message", "asctime", "taskName"}


class ExtraFormatter(logging.Formatter):
    """extra 항목을 메시지 뒤에 붙이는 포맷터

    예: 회원가입 완료 | principal_id=... wallet_address=0xAAA
    """

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        extras = {
            key: value
            for key, value in record.__dict__.items()
            if key not in _RESERVED_ATTRS and not key.startswith("_")
        }
        if not extras:
            return line
        rendered = " ".join(f"{key}={value}" for key, value in extras.items())
        return f"{line} | {rendered}"


def get_log_file_path(process_name: str, log_dir: Path | None = None) -> Path:
    """로그 파일 경로 (log_dir 없으면 logs/web)"""
    return (log_dir or Paths.WEB_LOGS_DIR) / f"{process_name}.log"


def setup_logging(
    process_name: str,
    log_dir: Path | None = None,
    console_level: int = logging.INFO,
    file_level: int = logging.INFO,
) -> logging.Logger:
    """루트 로거 초기화

    여러 번 호출해도 핸들러가 중복되지 않음 (기존 핸들러 교체).

    Args:
        process_name: 로그 파일 이름
        log_dir: 로그 디렉토리 (None이면 기본 경로)
        console_level: 콘솔 로그 레벨
        file_level: 파일 로그 레벨

    Returns:
        설정된 루트 Logger
    """
    log_file = get_log_file_path(process_name, log_dir)
    log_file.parent.mkdir(parents=True, exist_ok=True)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)  # 핸들러에서 필터링

    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    formatter = ExtraFormatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    file_handler = TimedRotatingFileHandler(
        filename=log_file,
        when="midnight",
        interval=1,
        backupCount=LOG_FILE_BACKUP_COUNT,
        encoding="utf-8",
    )
    file_handler.suffix = "%Y-%m-%d"  # web.log.2026-02-21
    file_handler.setLevel(file_level)
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    for logger_name in NOISY_LOGGERS:
        logging.getLogger(logger_name).setLevel(logging.WARNING)

    root_logger.info(
        "로깅 초기화 완료",
        extra={"process_name": process_name, "log_file": str(log_file)},
    )
    return root_logger
