"""
지갑 풀

고정된 지갑 주소 목록에서 사용자별 고유 주소를 배정.
배정된 주소는 회수하지 않음 (assigned 집합은 증가만 함).

동시성: 풀 자체는 await 지점이 없는 동기 코드.
등록 흐름 전체(중복 확인 → 배정 → 저장)의 직렬화는
호출자(AuthService)가 공유 write lock으로 보장.
"""

import logging
from collections.abc import Iterable, Iterator
from contextlib import contextmanager

from core.errors import PoolExhausted

logger = logging.getLogger(__name__)


class WalletPool:
    """지갑 풀

    Args:
        addresses: 배정 가능한 주소 목록 (정의 순서 = 배정 순서)

    Raises:
        ValueError: 빈 목록 또는 중복 주소

    사용 예시:
    ```python
    pool = WalletPool(["0xA", "0xB"])
    pool.assign("alice")   # "0xA"
    pool.assign("bob")     # "0xB"
    pool.assign("carol")   # PoolExhausted
    ```
    """

    def __init__(self, addresses: Iterable[str]):
        self._addresses: tuple[str, ...] = tuple(addresses)

        if not self._addresses:
            raise ValueError("지갑 풀이 비어 있습니다")
        if len(set(self._addresses)) != len(self._addresses):
            raise ValueError("지갑 풀에 중복 주소가 있습니다")

        # address -> principal_id
        self._holders: dict[str, str] = {}

    @property
    def size(self) -> int:
        """풀 전체 주소 수"""
        return len(self._addresses)

    @property
    def assigned_count(self) -> int:
        """배정된 주소 수"""
        return len(self._holders)

    @property
    def available_count(self) -> int:
        """배정 가능한 주소 수"""
        return self.size - self.assigned_count

    @property
    def addresses(self) -> tuple[str, ...]:
        return self._addresses

    def is_assigned(self, address: str) -> bool:
        """주소 배정 여부"""
        return address in self._holders

    def holder_of(self, address: str) -> str | None:
        """주소를 보유한 principal_id"""
        return self._holders.get(address)

    def assign(self, principal_id: str) -> str:
        """정의 순서상 첫 번째 미배정 주소를 배정

        멱등하지 않음: 같은 principal로 두 번 호출하면 두 개의 주소가 배정됨.
        호출자가 첫 결과를 저장해서 재사용해야 함.

        Args:
            principal_id: 주소를 받을 사용자 식별자

        Returns:
            배정된 지갑 주소

        Raises:
            PoolExhausted: 모든 주소가 배정된 경우
        """
        for address in self._addresses:
            if address not in self._holders:
                self._holders[address] = principal_id
                logger.info(
                    "지갑 배정",
                    extra={
                        "principal_id": principal_id,
                        "address": address,
                        "available": self.available_count,
                    },
                )
                return address

        logger.warning("지갑 풀 소진", extra={"pool_size": self.size})
        raise PoolExhausted(self.size)

    @contextmanager
    def assignment(self, principal_id: str) -> Iterator[str]:
        """배정 후 본문이 실패하면 배정을 되돌리는 컨텍스트 매니저

        사용자 저장이 실패한 등록 요청이 풀을 오염시키지 않도록 함.
        (커밋되지 않은 배정의 취소이며 회수 경로가 아님)

        사용 예시:
        ```python
        with pool.assignment(principal_id) as address:
            await store.insert_principal(...)
        ```
        """
        address = self.assign(principal_id)
        try:
            yield address
        except BaseException:
            self._holders.pop(address, None)
            logger.info(
                "지갑 배정 취소",
                extra={"principal_id": principal_id, "address": address},
            )
            raise

    def restore(self, held: Iterable[tuple[str, str]]) -> int:
        """저장소에 기록된 배정 상태 복원 (시작 시 1회)

        Args:
            held: (address, principal_id) 목록

        Returns:
            복원된 주소 수
        """
        known = set(self._addresses)
        restored = 0

        for address, principal_id in held:
            if not address:
                continue
            if address not in known:
                logger.warning(
                    "풀에 없는 지갑 주소 무시",
                    extra={"address": address, "principal_id": principal_id},
                )
                continue
            if address not in self._holders:
                self._holders[address] = principal_id
                restored += 1

        logger.info(
            f"지갑 배정 상태 복원: {restored}개",
            extra={"available": self.available_count},
        )
        return restored
