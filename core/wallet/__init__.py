"""
지갑 모듈

사용자별 고유 지갑 주소 배정
"""

from core.wallet.pool import WalletPool

__all__ = ["WalletPool"]
