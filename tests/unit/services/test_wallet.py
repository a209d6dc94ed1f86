from datetime import datetime, timedelta, timezone
from unittest.mock import AsyncMock

import pytest

from seigate.domain.models import WalletActivitySummary
from seigate.exceptions import InvalidKeyError
from seigate.services.history import HistoryReconstructor
from seigate.services.tokens import TokenService
from seigate.services.wallet import RISK_BASE, RISK_CAP, WalletService, address_jitter, compute_risk_score

NOW = datetime(2024, 6, 1, tzinfo=timezone.utc)
QUIET = "0x0000000000000000000000000000000000000000"
BUSY = "0x000000000000000000000000000000000000ffff"
ETHER = 10**18


class TestRiskScore:
    def test_floor(self):
        assert compute_risk_score(QUIET, 0, 0, None, now=NOW) == RISK_BASE

    def test_cap(self):
        score = compute_risk_score(BUSY, 5000, 50_000 * ETHER, NOW - timedelta(hours=1), now=NOW)
        assert score == RISK_CAP

    @pytest.mark.parametrize("count", [0, 11, 51, 101, 501, 1001, 10**6])
    @pytest.mark.parametrize("balance", [0, 1001 * ETHER, 10**30])
    @pytest.mark.parametrize("days_ago", [None, 0.5, 3, 30])
    def test_always_in_bounds(self, count, balance, days_ago):
        last = None if days_ago is None else NOW - timedelta(days=days_ago)
        for address in (QUIET, BUSY, "0x000000000000000000000000000000000000dEaD"):
            score = compute_risk_score(address, count, balance, last, now=NOW)
            assert RISK_BASE <= score <= RISK_CAP

    def test_transaction_count_thresholds(self):
        assert compute_risk_score(QUIET, 11, 0, None, now=NOW) == pytest.approx(0.1)
        assert compute_risk_score(QUIET, 51, 0, None, now=NOW) == pytest.approx(0.2)

    def test_recency(self):
        assert compute_risk_score(QUIET, 0, 0, NOW - timedelta(hours=2), now=NOW) == pytest.approx(0.15)
        assert compute_risk_score(QUIET, 0, 0, NOW - timedelta(days=3), now=NOW) == pytest.approx(0.1)
        assert compute_risk_score(QUIET, 0, 0, NOW - timedelta(days=30), now=NOW) == pytest.approx(0.05)

    def test_balance_thresholds(self):
        assert compute_risk_score(QUIET, 0, 1001 * ETHER, None, now=NOW) == pytest.approx(0.15)
        assert compute_risk_score(QUIET, 0, 10_001 * ETHER, None, now=NOW) == pytest.approx(0.3)

    def test_jitter(self):
        assert address_jitter(QUIET) == 0.0
        assert address_jitter(BUSY) == pytest.approx(0.1)
        assert address_jitter("sei1xyz") == 0.0


class TestWalletService:
    async def test_analyze_wallet(self, factory, chain_client):
        tokens = TokenService(factory)
        history = HistoryReconstructor(factory)
        activity = WalletActivitySummary(address=QUIET, network="sei-testnet", transaction_count=0)
        history.get_wallet_activity = AsyncMock(return_value=activity)
        chain_client.get_balance.return_value = 0

        service = WalletService(tokens, history, clock=lambda: NOW)

        analysis = await service.analyze_wallet(QUIET)

        assert analysis.balance == {"wei": "0", "formatted": "0"}
        assert analysis.transaction_count == 0
        assert analysis.last_activity is None
        assert analysis.risk_score == RISK_BASE
        assert analysis.data_source == "real_blockchain_data"

    def test_signer_address(self, factory):
        service = WalletService(
            TokenService(factory),
            HistoryReconstructor(factory),
            private_key="ac0974bec39a17e36ba4a6b4d238ff944bacb478cbed5efcae784d7bf4f2ff80",
        )
        assert service.get_signer_address() == "0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266"

    def test_signer_address_without_key(self, factory):
        service = WalletService(TokenService(factory), HistoryReconstructor(factory))
        with pytest.raises(InvalidKeyError):
            service.get_signer_address()
