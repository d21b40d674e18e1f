"""
설정 로더

secrets.yaml 로드 및 저장소/지갑/체인 설정 생성
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from core.constants import Defaults, Paths, WalletDefaults
from core.types import BackendKind, Environment


@dataclass(frozen=True)
class StorageConfig:
    """저장소 설정

    backend: 시작 시 선택되는 기본 저장소
    fallback: sqlite 장애 시 메모리 저장소로 전환 여부
    """

    backend: BackendKind = BackendKind.SQLITE
    db_path: Path | None = None
    timeout_sec: float = Defaults.STORE_TIMEOUT_SEC
    fallback: bool = True


@dataclass(frozen=True)
class Secrets:
    """보안 설정 (secrets.yaml에서 로드)

    불변 데이터 구조로 설정 변경 방지
    """

    mode: Environment
    web_secret_key: str
    token_expire_minutes: int = Defaults.TOKEN_EXPIRE_MINUTES
    storage: StorageConfig = StorageConfig()
    wallets: tuple[str, ...] = WalletDefaults.ADDRESSES
    chain_rpc_url: str | None = None
    log_dir: Path | None = None


class SecretsLoadError(Exception):
    """Secrets 로드 실패 예외"""

    pass


def _section(data: dict[str, Any], name: str) -> dict[str, Any]:
    section = data.get(name) or {}
    if not isinstance(section, dict):
        raise SecretsLoadError(f"secrets.yaml의 '{name}' 항목은 매핑이어야 합니다")
    return section


def _parse_storage(data: dict[str, Any]) -> StorageConfig:
    section = _section(data, "storage")

    backend_str = section.get("backend", BackendKind.SQLITE.value)
    try:
        backend = BackendKind(backend_str)
    except ValueError as e:
        valid = [b.value for b in BackendKind]
        raise ValueError(
            f"유효하지 않은 storage.backend입니다: '{backend_str}'. 유효한 값: {valid}"
        ) from e

    db_path = section.get("db_path")
    timeout_sec = float(section.get("timeout_sec", Defaults.STORE_TIMEOUT_SEC))
    if timeout_sec <= 0:
        raise SecretsLoadError("storage.timeout_sec는 0보다 커야 합니다")

    return StorageConfig(
        backend=backend,
        db_path=Path(db_path) if db_path else None,
        timeout_sec=timeout_sec,
        fallback=bool(section.get("fallback", True)),
    )


def _parse_wallets(data: dict[str, Any]) -> tuple[str, ...]:
    wallets = data.get("wallets")
    if wallets is None:
        return WalletDefaults.ADDRESSES

    if not isinstance(wallets, list) or not wallets:
        raise SecretsLoadError("secrets.yaml의 'wallets'는 비어 있지 않은 목록이어야 합니다")

    addresses = tuple(str(w) for w in wallets)
    if len(set(addresses)) != len(addresses):
        raise SecretsLoadError("secrets.yaml의 'wallets'에 중복 주소가 있습니다")
    return addresses


def load_secrets(path: Path | None = None) -> Secrets:
    """secrets.yaml 파일 로드

    Args:
        path: secrets.yaml 경로 (None이면 기본 경로 사용)

    Returns:
        Secrets 인스턴스

    Raises:
        SecretsLoadError: 파일이 없거나 형식이 잘못된 경우
        ValueError: 유효하지 않은 mode 또는 storage.backend인 경우
    """
    if path is None:
        path = Paths.SECRETS_FILE

    if not path.exists():
        raise SecretsLoadError(f"secrets.yaml 파일을 찾을 수 없습니다: {path}")

    try:
        content = path.read_text(encoding="utf-8")
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise SecretsLoadError(f"secrets.yaml 파싱 실패: {e}") from e

    if data is None:
        raise SecretsLoadError("secrets.yaml이 비어 있습니다")
    if not isinstance(data, dict):
        raise SecretsLoadError("secrets.yaml 최상위는 매핑이어야 합니다")

    # mode 검증
    mode_str = data.get("mode")
    if mode_str is None:
        raise SecretsLoadError("secrets.yaml에 'mode' 필드가 없습니다")

    try:
        mode = Environment(mode_str)
    except ValueError as e:
        valid_modes = [m.value for m in Environment]
        raise ValueError(
            f"유효하지 않은 mode입니다: '{mode_str}'. "
            f"유효한 값: {valid_modes}"
        ) from e

    # Web secret key 로드
    web_config = _section(data, "web")
    web_secret_key = web_config.get("secret_key", "")

    if not web_secret_key:
        raise SecretsLoadError(
            "secrets.yaml의 web 섹션에 'secret_key'가 없습니다"
        )

    chain_config = _section(data, "chain")
    logging_config = _section(data, "logging")
    log_dir = logging_config.get("dir")

    return Secrets(
        mode=mode,
        web_secret_key=web_secret_key,
        token_expire_minutes=int(
            web_config.get("token_expire_minutes", Defaults.TOKEN_EXPIRE_MINUTES)
        ),
        storage=_parse_storage(data),
        wallets=_parse_wallets(data),
        chain_rpc_url=chain_config.get("rpc_url") or None,
        log_dir=Path(log_dir) if log_dir else None,
    )


def get_db_path(secrets: Secrets) -> Path:
    """DB 경로 반환 (storage.db_path 우선, 없으면 모드 기본값)

    Args:
        secrets: Secrets 인스턴스

    Returns:
        DB 파일 경로 (Path 타입)
    """
    if secrets.storage.db_path is not None:
        return secrets.storage.db_path
    if secrets.mode == Environment.PRODUCTION:
        return Paths.PROD_DB
    return Paths.DEV_DB


class Settings:
    """애플리케이션 설정 (싱글턴 패턴)

    secrets.yaml을 로드하고 관련 설정을 제공
    """

    _instance: "Settings | None" = None
    _secrets: Secrets | None = None

    def __new__(cls, secrets_path: Path | None = None) -> "Settings":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self, secrets_path: Path | None = None) -> None:
        if self._secrets is None:
            self._secrets = load_secrets(secrets_path)

    @classmethod
    def from_secrets(cls, secrets: Secrets) -> "Settings":
        """이미 로드된 Secrets로 설정 생성 (테스트/내장 실행용, 싱글턴 아님)"""
        settings = object.__new__(cls)
        settings._secrets = secrets
        return settings

    @property
    def secrets(self) -> Secrets:
        assert self._secrets is not None
        return self._secrets

    @property
    def mode(self) -> Environment:
        """현재 실행 환경"""
        return self.secrets.mode

    @property
    def web_secret_key(self) -> str:
        """Web JWT Secret Key"""
        return self.secrets.web_secret_key

    @property
    def token_expire_minutes(self) -> int:
        return self.secrets.token_expire_minutes

    @property
    def storage(self) -> StorageConfig:
        """저장소 설정"""
        return self.secrets.storage

    @property
    def db_path(self) -> Path:
        """현재 모드의 DB 경로"""
        return get_db_path(self.secrets)

    @property
    def wallet_addresses(self) -> tuple[str, ...]:
        """지갑 풀 주소 (정의 순서 = 배정 순서)"""
        return self.secrets.wallets

    @property
    def chain_rpc_url(self) -> str | None:
        return self.secrets.chain_rpc_url

    @property
    def log_dir(self) -> Path:
        """로그 디렉토리"""
        return self.secrets.log_dir or Paths.WEB_LOGS_DIR

    @classmethod
    def reset(cls) -> None:
        """싱글턴 인스턴스 초기화 (테스트용)"""
        cls._instance = None
        cls._secrets = None


def get_settings(secrets_path: Path | None = None) -> Settings:
    """Settings 인스턴스 반환

    Args:
        secrets_path: secrets.yaml 경로 (None이면 기본 경로 사용)

    Returns:
        Settings 싱글턴 인스턴스
    """
    return Settings(secrets_path)
