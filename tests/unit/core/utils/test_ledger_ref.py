"""
core/utils/ledger_ref.py 테스트
"""

from datetime import datetime, timezone
from decimal import Decimal

import pytest

from core.types import ChainMode
from core.utils.ledger_ref import is_ledger_ref, ledger_ref_mode, make_ledger_ref

TS = datetime(2024, 1, 1, tzinfo=timezone.utc)


def _ref(transaction_id: int = 1, chain_mode: ChainMode = ChainMode.MOCK, **overrides: object) -> str:
    fields: dict[str, object] = {
        "description": "Rent",
        "amount": Decimal("400"),
        "direction": "expense",
        "sender": "0xA",
        "receiver": "external_receiver",
        "created_at": TS,
    }
    fields.update(overrides)
    return make_ledger_ref(transaction_id, chain_mode=chain_mode, **fields)  # type: ignore[arg-type]


class TestMakeLedgerRef:
    """make_ledger_ref 테스트"""

    def test_mock_shape(self) -> None:
        """mock_ + 16자리 16진수"""
        ref = _ref()

        assert ref.startswith("mock_")
        assert len(ref) == len("mock_") + 16

    def test_blockchain_shape(self) -> None:
        """0x + 64자리 16진수"""
        ref = _ref(chain_mode=ChainMode.BLOCKCHAIN)

        assert ref.startswith("0x")
        assert len(ref) == 66

    def test_deterministic(self) -> None:
        """동일 입력 → 동일 해시"""
        assert _ref() == _ref()

    def test_amount_normalized(self) -> None:
        """400과 400.00은 같은 금액"""
        assert _ref(amount=Decimal("400")) == _ref(amount=Decimal("400.00"))

    def test_different_id(self) -> None:
        """ID가 다르면 해시도 다름"""
        assert _ref(1) != _ref(2)

    def test_mock_is_prefix_of_chain_digest(self) -> None:
        """mock 해시는 같은 digest의 앞부분"""
        chain = _ref(chain_mode=ChainMode.BLOCKCHAIN)
        mock = _ref(chain_mode=ChainMode.MOCK)

        assert chain[2:18] == mock[len("mock_"):]

    def test_invalid_id(self) -> None:
        """ID는 1 이상"""
        with pytest.raises(ValueError):
            _ref(0)


class TestLedgerRefMode:
    """ledger_ref_mode / is_ledger_ref 테스트"""

    def test_detect(self) -> None:
        """형식으로 모드 판별"""
        assert ledger_ref_mode(_ref()) == ChainMode.MOCK
        assert ledger_ref_mode(_ref(chain_mode=ChainMode.BLOCKCHAIN)) == ChainMode.BLOCKCHAIN

    @pytest.mark.parametrize("value", ["", "0x123", "mock_xyz", "mock_" + "g" * 16, "abc"])
    def test_invalid(self, value: str) -> None:
        """형식 불일치"""
        assert ledger_ref_mode(value) is None
        assert not is_ledger_ref(value)
