"""
하드코딩 상수 - 변경될 일이 거의 없는 고정값

중요: 경로는 반드시 pathlib.Path 사용 (Windows/Linux 크로스 플랫폼)
"""

from pathlib import Path


# 프로젝트 루트 (이 파일 기준 2단계 상위: core/constants.py → finance-ledger/)
PROJECT_ROOT: Path = Path(__file__).resolve().parent.parent


class Defaults:
    """기본값 상수"""

    WEB_HOST: str = "127.0.0.1"
    WEB_PORT: int = 3001

    APP_VERSION: str = "1.0.0"

    LOG_LEVEL: str = "INFO"

    # JWT 만료 시간 (분)
    TOKEN_EXPIRE_MINUTES: int = 60 * 24

    # 저장소 접근 제한 시간 (초) - 초과 시 fallback으로 전환
    STORE_TIMEOUT_SEC: float = 5.0

    # 거래 ID 충돌 시 재시도 횟수
    SEQUENCER_MAX_RETRIES: int = 3

    # 대시보드 최근 거래 개수
    RECENT_TRANSACTIONS: int = 5

    # 체인 노드 probe 제한 시간 (초)
    CHAIN_PROBE_TIMEOUT_SEC: float = 3.0


class Paths:
    """프로젝트 경로 상수 (pathlib 사용 - OS 독립적)"""

    # 디렉토리
    CONFIG_DIR: Path = PROJECT_ROOT / "config"
    DATA_DIR: Path = PROJECT_ROOT / "data"
    LOGS_DIR: Path = PROJECT_ROOT / "logs"
    WEB_LOGS_DIR: Path = LOGS_DIR / "web"

    # 설정 파일
    SECRETS_FILE: Path = CONFIG_DIR / "secrets.yaml"

    # DB 파일
    PROD_DB: Path = DATA_DIR / "finance_ledger_prod.db"
    DEV_DB: Path = DATA_DIR / "finance_ledger_dev.db"


class WalletDefaults:
    """기본 지갑 풀 (Ganache 개발용 계정)

    정의 순서가 곧 배정 순서.
    secrets.yaml의 wallets 항목으로 교체 가능.
    """

    ADDRESSES: tuple[str, ...] = (
        "0x90F8bf6A479f320ead074411a4B0e7944Ea8c9C1",
        "0xFFcf8FDEE72ac11b5c542428B35EEF5769C409f0",
        "0x22d491Bde2303f2f43325b2108D26f1eAbA1e32b",
        "0xE11BA2b4D45Eaed5996Cd0823791E0C93114882d",
        "0xd03ea8624C8C5987235048901fB614fDcA89b117",
        "0x95cED938F7991cd0dFcb48F0a06a40FA1aF46EBC",
        "0x3E5e9111Ae8eB78Fe1CC3bb8915d5D461F3Ef9A9",
        "0x28a8746e75304c0780E011BEd21C72cD78cd535E",
        "0xACa94ef8bD5ffEE41947b4585a84BdA5a3d3DA6E",
        "0x1dF62f291b2E969fB0849d99D9Ce41e2F137006e",
    )
