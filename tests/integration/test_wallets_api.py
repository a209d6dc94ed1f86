from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest

from seigate.api.deps import get_history, get_token_service, get_transaction_service, get_wallet_service
from seigate.domain.enums import TxStatus, TxType
from seigate.domain.models import Balance, TransactionHistory, TransactionRecord, WalletActivitySummary, WalletAnalysis
from seigate.exceptions import InvalidAddressError, InvalidKeyError

DEAD = "0x000000000000000000000000000000000000dEaD"


@pytest.fixture()
def tokens(override):
    service = MagicMock()
    service.get_balance = AsyncMock()
    return override(get_token_service, service)


@pytest.fixture()
def history(override):
    service = MagicMock()
    service.get_transaction_history = AsyncMock()
    service.get_wallet_activity = AsyncMock()
    return override(get_history, service)


@pytest.fixture()
def wallet(override):
    service = MagicMock()
    service.analyze_wallet = AsyncMock()
    return override(get_wallet_service, service)


class TestWalletsAPI:
    async def test_zero_balance(self, client, tokens):
        tokens.get_balance.return_value = Balance(address=DEAD, network="sei-testnet", wei=0)

        res = await client.get(f"/api/wallets/{DEAD}/balance")

        assert res.status_code == 200
        data = res.json()
        assert data["wei"] == "0"
        assert data["formatted"] == "0"
        assert data["symbol"] == "SEI"
        tokens.get_balance.assert_awaited_once_with(DEAD, None)

    async def test_balance_network_query(self, client, tokens):
        tokens.get_balance.return_value = Balance(address=DEAD, network="sei", wei=10**24)

        res = await client.get(f"/api/wallets/{DEAD}/balance", params={"network": "sei"})

        assert res.json()["wei"] == str(10**24)
        tokens.get_balance.assert_awaited_once_with(DEAD, "sei")

    async def test_invalid_address_400(self, client, tokens):
        tokens.get_balance.side_effect = InvalidAddressError("Invalid address: 0x12")

        res = await client.get("/api/wallets/0x12/balance")

        assert res.status_code == 400
        assert res.json() == {"error": "Invalid address: 0x12"}

    async def test_transaction_history(self, client, history):
        history.get_transaction_history.return_value = TransactionHistory(
            address=DEAD,
            network="sei-testnet",
            transactions=[
                TransactionRecord(
                    hash="0x01",
                    from_address=DEAD,
                    to_address=None,
                    value=0,
                    gas_used=21000,
                    gas_price=1_000_000_000,
                    block_number=7,
                    timestamp=datetime(2024, 1, 1, tzinfo=timezone.utc),
                    status=TxStatus.SUCCESS,
                    type=TxType.CONTRACT,
                )
            ],
            blocks_scanned=3,
        )

        res = await client.get(f"/api/wallets/{DEAD}/transactions", params={"limit": 5})

        assert res.status_code == 200
        data = res.json()
        assert data["total_count"] == 1
        assert data["blocks_scanned"] == 3
        assert data["transactions"][0]["fee"] == "21000000000000"
        assert data["transactions"][0]["type"] == "contract"
        history.get_transaction_history.assert_awaited_once_with(DEAD, None, 5)

    @pytest.mark.parametrize("limit", [0, 51])
    async def test_history_limit_bounds(self, client, history, limit):
        res = await client.get(f"/api/wallets/{DEAD}/transactions", params={"limit": limit})
        assert res.status_code == 400
        assert "limit" in res.json()["error"]
        history.get_transaction_history.assert_not_awaited()

    async def test_activity(self, client, history):
        history.get_wallet_activity.return_value = WalletActivitySummary(
            address=DEAD, network="sei-testnet", transaction_count=0
        )

        res = await client.get(f"/api/wallets/{DEAD}/activity")

        assert res.json() == {
            "address": DEAD,
            "network": "sei-testnet",
            "transaction_count": 0,
            "last_activity": None,
            "last_activity_estimated": False,
            "recent_transactions": [],
        }

    async def test_analysis(self, client, wallet):
        wallet.analyze_wallet.return_value = WalletAnalysis(
            address=DEAD,
            network="sei-testnet",
            balance={"wei": "0", "formatted": "0"},
            transaction_count=0,
            risk_score=0.05,
        )

        res = await client.get(f"/api/wallets/{DEAD}/analysis")

        assert res.status_code == 200
        assert res.json()["risk_score"] == 0.05

    async def test_transaction_count(self, client, override):
        service = override(get_transaction_service, MagicMock(get_transaction_count=AsyncMock(return_value=12)))

        res = await client.get(f"/api/wallets/{DEAD}/transaction-count")

        assert res.json() == {"address": DEAD, "transaction_count": 12}
        service.get_transaction_count.assert_awaited_once_with(DEAD, None)

    async def test_signer_without_key(self, client, wallet):
        wallet.get_signer_address = MagicMock(side_effect=InvalidKeyError("No signing key configured (set PRIVATE_KEY)"))

        res = await client.get("/api/wallets/signer")

        assert res.status_code == 400
        assert "PRIVATE_KEY" in res.json()["error"]
