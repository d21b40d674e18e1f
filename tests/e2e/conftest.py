"""
E2E 테스트 공통 fixture

TestClient로 앱 전체(라우트 → 서비스 → 시퀀서 → 저장소)를 실행.
기본 저장소는 MemoryLedgerBackend, 체인은 MockChainClient.
"""

from collections.abc import Callable, Iterator
from typing import Any

import pytest
from fastapi.testclient import TestClient

from adapters.chain.rpc_client import MockChainClient
from adapters.interfaces import ILedgerBackend
from adapters.memory.ledger_backend import MemoryLedgerBackend
from core.config.loader import Secrets, Settings, StorageConfig
from core.types import BackendKind, Environment
from tests.e2e.utils.helpers import register
from tests.helpers import TEST_WALLETS
from web.app import create_app

SECRET_KEY = "e2e_jwt_secret_key_xyz"


# -------------------------------------------------------------------------
# pytest 마커 등록
# -------------------------------------------------------------------------


def pytest_configure(config: Any) -> None:
    """pytest 마커 등록"""
    config.addinivalue_line(
        "markers",
        "e2e: E2E 테스트 (HTTP API 전체 흐름)",
    )


# -------------------------------------------------------------------------
# 앱 / 클라이언트
# -------------------------------------------------------------------------


def make_settings(
    wallets: tuple[str, ...] = TEST_WALLETS,
    fallback: bool = False,
) -> Settings:
    """테스트용 Settings (파일 없이 생성)"""
    return Settings.from_secrets(
        Secrets(
            mode=Environment.DEVELOPMENT,
            web_secret_key=SECRET_KEY,
            token_expire_minutes=30,
            storage=StorageConfig(backend=BackendKind.MEMORY, fallback=fallback),
            wallets=wallets,
        )
    )


@pytest.fixture
def app_factory() -> Iterator[Callable[..., TestClient]]:
    """설정/저장소를 바꿔 가며 클라이언트 생성

    생성한 클라이언트는 테스트 종료 시 닫힘 (lifespan 종료).
    """
    clients: list[TestClient] = []

    def factory(
        wallets: tuple[str, ...] = TEST_WALLETS,
        primary: ILedgerBackend | None = None,
        fallback: ILedgerBackend | None = None,
    ) -> TestClient:
        app = create_app(
            make_settings(wallets=wallets, fallback=fallback is not None),
            primary=primary or MemoryLedgerBackend(),
            fallback=fallback,
            chain_client=MockChainClient(),
            configure_logging=False,
        )
        client = TestClient(app)
        client.__enter__()
        clients.append(client)
        return client

    yield factory

    for client in clients:
        client.__exit__(None, None, None)


@pytest.fixture
def client(app_factory: Callable[..., TestClient]) -> TestClient:
    """기본 클라이언트 (지갑 3개, 메모리 저장소)"""
    return app_factory()


@pytest.fixture
def alice_token(client: TestClient) -> str:
    """가입한 alice의 토큰"""
    response = register(client, "alice")
    assert response.status_code == 201
    return response.json()["token"]
