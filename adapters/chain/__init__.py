"""
블록체인 노드 어댑터

JSON-RPC probe로 시작 시 체인 모드 결정
"""

from adapters.chain.rpc_client import ChainRpcClient, ChainRpcError, MockChainClient

__all__ = [
    "ChainRpcClient",
    "ChainRpcError",
    "MockChainClient",
]
