"""
타입 정의 모듈

Enum 등 핵심 타입 정의
모든 Enum은 str을 상속하여 문자열 직렬화 가능
"""

from enum import Enum


class Environment(str, Enum):
    """실행 환경 (운영 / 개발)"""

    PRODUCTION = "production"
    DEVELOPMENT = "development"


class Role(str, Enum):
    """사용자 권한"""

    ADMIN = "admin"
    USER = "user"
    VIEWER = "viewer"


class BackendKind(str, Enum):
    """시작 시 선택되는 저장소 구현"""

    SQLITE = "sqlite"
    MEMORY = "memory"


class StorageTier(str, Enum):
    """요청을 처리한 저장소 계층"""

    PERSISTENT = "persistent"
    MEMORY = "memory"


class ChainMode(str, Enum):
    """블록체인 연결 모드 (시작 시 한 번 결정)"""

    BLOCKCHAIN = "blockchain"
    MOCK = "mock"
