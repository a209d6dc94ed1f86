"""Wallet analysis: balance + activity + a presentation-only risk heuristic."""

import logging
from collections.abc import Callable
from datetime import datetime, timezone
from decimal import Decimal

from seigate.domain.models import WalletAnalysis
from seigate.exceptions import InvalidKeyError
from seigate.infra.chain.factory import derive_address
from seigate.infra.chain.registry import NetworkIdentifier
from seigate.services.history import HistoryReconstructor
from seigate.services.tokens import TokenService
from seigate.utils.units import NATIVE_DECIMALS

logger = logging.getLogger(__name__)

RISK_BASE = 0.05
RISK_CAP = 0.85

# (threshold, weight): each exceeded threshold adds its weight
TX_COUNT_WEIGHTS = ((10, 0.05), (50, 0.1), (100, 0.15), (500, 0.2), (1000, 0.25))
BALANCE_WEIGHTS = ((Decimal(1000), 0.1), (Decimal(10000), 0.15))


def address_jitter(address: str) -> float:
    """0..0.1 from the last four hex digits of the address."""
    try:
        return int(address[-4:], 16) / 65535 * 0.1
    except ValueError:
        return 0.0


def compute_risk_score(
    address: str,
    transaction_count: int,
    balance_wei: int,
    last_activity: datetime | None,
    now: datetime | None = None,
) -> float:
    """Additive heuristic in [0.05, 0.85]. Not a security signal."""
    score = RISK_BASE
    for threshold, weight in TX_COUNT_WEIGHTS:
        if transaction_count > threshold:
            score += weight

    if last_activity is not None:
        now = now or datetime.now(timezone.utc)
        days_since = (now - last_activity).total_seconds() / 86400
        if days_since < 1:
            score += 0.1
        elif days_since < 7:
            score += 0.05

    balance = Decimal(balance_wei) / Decimal(10) ** NATIVE_DECIMALS
    for threshold, weight in BALANCE_WEIGHTS:
        if balance > threshold:
            score += weight

    score += address_jitter(address)
    return round(min(score, RISK_CAP), 3)


class WalletService:
    def __init__(
        self,
        tokens: TokenService,
        history: HistoryReconstructor,
        private_key: str = "",
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._tokens = tokens
        self._history = history
        self._private_key = private_key
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    async def analyze_wallet(self, address: str, network: NetworkIdentifier | None = None) -> WalletAnalysis:
        balance = await self._tokens.get_balance(address, network)
        activity = await self._history.get_wallet_activity(address, network)
        risk_score = compute_risk_score(
            address,
            activity.transaction_count,
            balance.wei,
            activity.last_activity,
            now=self._clock(),
        )
        logger.info(
            "Risk score for %s: %.3f (%d txs, balance: %s)",
            address, risk_score, activity.transaction_count, balance.formatted,
        )
        return WalletAnalysis(
            address=address,
            network=balance.network,
            balance={"wei": str(balance.wei), "formatted": balance.formatted},
            transaction_count=activity.transaction_count,
            last_activity=activity.last_activity,
            last_activity_estimated=activity.last_activity_estimated,
            risk_score=risk_score,
            recent_transactions=activity.recent_transactions,
        )

    def get_signer_address(self) -> str:
        """Address of the configured signing key. The key itself is never returned."""
        if not self._private_key:
            raise InvalidKeyError("No signing key configured (set PRIVATE_KEY)")
        return derive_address(self._private_key)
