"""
core/logging.py 테스트
"""

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

from core.constants import Paths
from core.logging import ExtraFormatter, get_log_file_path, setup_logging


@pytest.fixture
def restore_root_logger() -> Iterator[None]:
    """루트 로거 핸들러/레벨 복원"""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


class TestGetLogFilePath:
    """get_log_file_path 테스트"""

    def test_default(self) -> None:
        assert get_log_file_path("web") == Paths.WEB_LOGS_DIR / "web.log"

    def test_override(self, tmp_path: Path) -> None:
        assert get_log_file_path("web", tmp_path) == tmp_path / "web.log"


class TestExtraFormatter:
    """ExtraFormatter 테스트"""

    def test_appends_extra(self) -> None:
        """extra 항목 key=value 출력"""
        record = logging.makeLogRecord(
            {"msg": "회원가입 완료", "levelname": "INFO", "wallet_address": "0xAAA"}
        )

        line = ExtraFormatter("%(message)s").format(record)

        assert line == "회원가입 완료 | wallet_address=0xAAA"

    def test_without_extra(self) -> None:
        """extra 없으면 메시지만"""
        record = logging.makeLogRecord({"msg": "Web 종료", "levelname": "INFO"})

        assert ExtraFormatter("%(message)s").format(record) == "Web 종료"


class TestSetupLogging:
    """setup_logging 테스트"""

    def test_handlers_and_file(self, tmp_path: Path, restore_root_logger: None) -> None:
        """콘솔 + 파일 핸들러, 로그 파일 생성"""
        root = setup_logging("web", log_dir=tmp_path / "logs")

        assert len(root.handlers) == 2
        assert (tmp_path / "logs" / "web.log").exists()
        assert logging.getLogger("aiosqlite").level == logging.WARNING

    def test_idempotent(self, tmp_path: Path, restore_root_logger: None) -> None:
        """재호출 시 핸들러 중복 없음"""
        setup_logging("web", log_dir=tmp_path)
        root = setup_logging("web", log_dir=tmp_path)

        assert len(root.handlers) == 2
