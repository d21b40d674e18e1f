"""
블록체인 JSON-RPC 클라이언트

Ethereum 호환 노드(Ganache 등)에 eth_accounts / eth_blockNumber를 조회하여
시작 시 ChainMode(blockchain / mock)를 결정.
IChainClient Protocol 준수.
"""

import logging
from typing import Any

import httpx

from adapters.models import ChainStatus
from core.constants import Defaults
from core.types import ChainMode

logger = logging.getLogger(__name__)


class ChainRpcError(Exception):
    """JSON-RPC 에러 응답"""

    def __init__(self, code: int, message: str):
        self.code = code
        self.message = message
        super().__init__(f"RPC error {code}: {message}")


class ChainRpcClient:
    """JSON-RPC 노드 클라이언트

    Args:
        rpc_url: 노드 URL (예: http://127.0.0.1:7545)
        timeout: 요청 타임아웃 (초)
        network: 응답에 표시할 네트워크 이름

    사용 예시:
    ```python
    client = ChainRpcClient("http://127.0.0.1:7545")
    status = await client.probe()
    if status.mode == ChainMode.BLOCKCHAIN:
        ...
    await client.close()
    ```
    """

    def __init__(
        self,
        rpc_url: str,
        timeout: float = Defaults.CHAIN_PROBE_TIMEOUT_SEC,
        network: str = "Ganache Local",
    ):
        self.rpc_url = rpc_url
        self.timeout = timeout
        self.network = network
        self._client: httpx.AsyncClient | None = None
        self._request_id = 0

    async def _get_client(self) -> httpx.AsyncClient:
        """HTTP 클라이언트 가져오기 (lazy initialization)"""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(timeout=self.timeout)
        return self._client

    async def close(self) -> None:
        """HTTP 클라이언트 종료"""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def _call(self, method: str, params: list[Any] | None = None) -> Any:
        """JSON-RPC 호출

        Raises:
            httpx.HTTPError: 네트워크/HTTP 오류
            ChainRpcError: RPC 에러 응답
        """
        client = await self._get_client()
        self._request_id += 1

        response = await client.post(
            self.rpc_url,
            json={
                "jsonrpc": "2.0",
                "method": method,
                "params": params or [],
                "id": self._request_id,
            },
        )
        response.raise_for_status()
        body = response.json()

        if "error" in body:
            error = body["error"] or {}
            raise ChainRpcError(error.get("code", -1), error.get("message", "unknown"))
        return body.get("result")

    async def get_accounts(self) -> list[str]:
        return list(await self._call("eth_accounts") or [])

    async def get_block_number(self) -> int:
        result = await self._call("eth_blockNumber")
        return int(result, 16) if isinstance(result, str) else int(result)

    async def probe(self) -> ChainStatus:
        """노드 상태 조회

        실패해도 예외를 발생시키지 않고 mock 상태 반환.
        """
        try:
            accounts = await self.get_accounts()
            block = await self.get_block_number()
        except (httpx.HTTPError, ChainRpcError, ValueError) as e:
            logger.warning(
                "블록체인 노드 연결 실패, mock 모드 사용",
                extra={"rpc_url": self.rpc_url, "error": str(e)},
            )
            return ChainStatus.mock(error=str(e))

        logger.info(
            "블록체인 노드 연결",
            extra={"rpc_url": self.rpc_url, "accounts": len(accounts), "block": block},
        )
        return ChainStatus(
            connected=True,
            mode=ChainMode.BLOCKCHAIN,
            accounts=len(accounts),
            current_block=block,
            network=self.network,
            test_accounts=tuple(accounts[:3]),
        )


class MockChainClient:
    """노드 없이 동작하는 클라이언트

    rpc_url 미설정 시 사용. probe()는 항상 mock 상태.

    Args:
        status: probe()가 반환할 상태 (테스트에서 blockchain 모드 재현용)
    """

    def __init__(self, status: ChainStatus | None = None):
        self._status = status or ChainStatus.mock(error="rpc_url not configured")
        self.probe_count = 0

    async def probe(self) -> ChainStatus:
        self.probe_count += 1
        return self._status

    async def close(self) -> None:
        pass
