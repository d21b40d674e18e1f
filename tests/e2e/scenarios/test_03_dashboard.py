"""
E2E: 대시보드 요약

합계, 카테고리/월별 분석, 최근 거래
"""

import pytest
from fastapi.testclient import TestClient

from tests.e2e.utils.helpers import add_transaction, auth_headers

pytestmark = pytest.mark.e2e


class TestDashboard:
    """대시보드 시나리오"""

    def test_empty(self, client: TestClient, alice_token: str) -> None:
        """거래 없음 → 0"""
        body = client.get("/api/dashboard/summary", headers=auth_headers(alice_token)).json()

        assert body["summary"] == {
            "totalIncome": "0",
            "totalExpenses": "0",
            "balance": "0",
            "transactionCount": 0,
        }
        assert body["recentTransactions"] == []

    def test_summary(self, client: TestClient, alice_token: str) -> None:
        """수입 1000, 지출 400 → 잔액 600"""
        add_transaction(client, alice_token, "1000", "income", "salary")
        add_transaction(client, alice_token, "400", "expense", "rent")

        body = client.get("/api/dashboard/summary", headers=auth_headers(alice_token)).json()

        assert body["summary"]["totalIncome"] == "1000"
        assert body["summary"]["totalExpenses"] == "400"
        assert body["summary"]["balance"] == "600"
        assert body["summary"]["transactionCount"] == 2
        assert body["analytics"]["byCategory"]["salary"]["income"] == "1000"
        assert body["analytics"]["byCategory"]["rent"]["expense"] == "400"
        assert len(body["analytics"]["byMonth"]) == 1

    def test_recent_limited_to_five(self, client: TestClient, alice_token: str) -> None:
        """최근 거래 5건 (최신순)"""
        for _ in range(7):
            add_transaction(client, alice_token, "1")

        body = client.get("/api/dashboard/summary", headers=auth_headers(alice_token)).json()

        assert [t["transactionId"] for t in body["recentTransactions"]] == [7, 6, 5, 4, 3]
        assert body["summary"]["transactionCount"] == 7

    def test_requires_token(self, client: TestClient) -> None:
        """토큰 없음 → 401"""
        assert client.get("/api/dashboard/summary").status_code == 401
