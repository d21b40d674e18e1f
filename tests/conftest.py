"""
pytest 공통 fixture 정의

설정 파일, 도메인 객체, 저장소 fixture
"""

import tempfile
from collections.abc import Iterator
from pathlib import Path

import pytest

from core.config.loader import Settings
from core.domain.models import Principal
from tests.helpers import make_principal


@pytest.fixture
def temp_dir() -> Iterator[Path]:
    """OS 독립적인 임시 디렉토리 생성"""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture(autouse=True)
def reset_settings() -> Iterator[None]:
    """Settings 싱글턴 초기화"""
    Settings.reset()
    yield
    Settings.reset()


@pytest.fixture
def temp_secrets_file(temp_dir: Path) -> Path:
    """테스트용 secrets.yaml 파일 생성"""
    secrets_content = f"""# 테스트용 secrets.yaml
mode: development

web:
  secret_key: "test_jwt_secret_key_xyz"
  token_expire_minutes: 30

storage:
  backend: sqlite
  db_path: "{(temp_dir / 'ledger.db').as_posix()}"
  timeout_sec: 2
  fallback: true

wallets:
  - "0xAAA"
  - "0xBBB"
  - "0xCCC"

chain:
  rpc_url: "http://127.0.0.1:7545"

logging:
  dir: "{(temp_dir / 'logs').as_posix()}"
"""
    secrets_path = temp_dir / "secrets.yaml"
    secrets_path.write_text(secrets_content, encoding="utf-8")
    return secrets_path


@pytest.fixture
def temp_secrets_file_minimal(temp_dir: Path) -> Path:
    """필수 항목만 있는 secrets.yaml (production 모드)"""
    secrets_content = """mode: production

web:
  secret_key: "prod_jwt_secret_key_xyz"
"""
    secrets_path = temp_dir / "secrets_prod.yaml"
    secrets_path.write_text(secrets_content, encoding="utf-8")
    return secrets_path


@pytest.fixture
def temp_secrets_file_invalid_mode(temp_dir: Path) -> Path:
    """잘못된 모드의 secrets.yaml 파일 생성"""
    secrets_content = """mode: invalid_mode

web:
  secret_key: "jwt_secret"
"""
    secrets_path = temp_dir / "secrets_invalid.yaml"
    secrets_path.write_text(secrets_content, encoding="utf-8")
    return secrets_path


@pytest.fixture
def principal() -> Principal:
    """지갑이 배정된 샘플 사용자"""
    return make_principal()
