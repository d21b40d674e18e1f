"""
E2E 테스트 헬퍼 함수

요청 생성 유틸리티.
"""

from typing import Any

import httpx
from fastapi.testclient import TestClient


def register(
    client: TestClient,
    username: str,
    email: str | None = None,
    password: str = "secret123",
) -> httpx.Response:
    """회원가입 요청"""
    return client.post(
        "/api/auth/register",
        json={
            "username": username,
            "email": email or f"{username}@example.com",
            "password": password,
        },
    )


def auth_headers(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


def add_transaction(
    client: TestClient,
    token: str,
    amount: Any,
    type_: str = "income",
    category: str | None = None,
    description: str = "test",
    **extra: Any,
) -> httpx.Response:
    """거래 생성 요청"""
    body: dict[str, Any] = {"description": description, "amount": amount, "type": type_, **extra}
    if category is not None:
        body["category"] = category
    return client.post("/api/transactions", json=body, headers=auth_headers(token))
