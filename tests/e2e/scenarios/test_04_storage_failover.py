"""
E2E: 저장소 장애와 메모리 전환

시작 시 장애, 실행 중 장애, fallback 없음
"""

from collections.abc import Callable

import pytest
from fastapi.testclient import TestClient

from adapters.memory.ledger_backend import MemoryLedgerBackend
from tests.e2e.utils.helpers import add_transaction, auth_headers, register

pytestmark = pytest.mark.e2e


class TestFailover:
    """fallback 전환 시나리오"""

    def test_degraded_at_startup(self, app_factory: Callable[..., TestClient]) -> None:
        """시작 시 기본 저장소 장애 → 메모리로 동작, 응답에 표시"""
        client = app_factory(
            primary=MemoryLedgerBackend(should_fail=True),
            fallback=MemoryLedgerBackend(),
        )

        body = register(client, "alice").json()
        tx = add_transaction(client, body["token"], "10").json()

        assert body["storage"]["degraded"] is True
        assert tx["storage"] == {"tier": "memory", "degraded": True, "persisted": False}
        assert tx["transaction"]["transactionId"] == 1

    def test_runtime_failure(self, app_factory: Callable[..., TestClient]) -> None:
        """실행 중 장애 → 이후 요청은 fallback에서 처리"""
        primary = MemoryLedgerBackend()
        client = app_factory(primary=primary, fallback=MemoryLedgerBackend())
        register(client, "alice")

        primary.should_fail = True
        body = register(client, "bob").json()
        status = client.get("/api/status").json()

        assert body["storage"]["degraded"] is True
        assert status["services"]["storage"]["degraded"] is True
        assert status["services"]["storage"]["users"] == 1

    def test_principals_not_carried_over(self, app_factory: Callable[..., TestClient]) -> None:
        """전환 전 사용자는 fallback에 없음 → 404"""
        primary = MemoryLedgerBackend()
        client = app_factory(primary=primary, fallback=MemoryLedgerBackend())
        token = register(client, "alice").json()["token"]

        primary.should_fail = True
        response = client.get("/api/auth/me", headers=auth_headers(token))

        assert response.status_code == 404
        assert response.json()["error"] == "principal_not_found"

    def test_no_fallback(self, app_factory: Callable[..., TestClient]) -> None:
        """fallback 없음 → 503 store_unavailable"""
        primary = MemoryLedgerBackend()
        client = app_factory(primary=primary)
        token = register(client, "alice").json()["token"]

        primary.should_fail = True
        response = add_transaction(client, token, "10")
        status = client.get("/api/status")

        assert response.status_code == 503
        assert response.json()["error"] == "store_unavailable"
        assert status.status_code == 200
        assert status.json()["services"]["storage"]["transactions"] is None
