"""CoinBalanceService — thin composition layer over the store.

Read-only: one store lookup per call, no retries.
"""

import logging

from src.cb_account.application.schemas import CoinBalanceResponse
from src.cb_account.domain.repository import CoinStoreProtocol, store_errors
from src.cb_common.errors import BalanceNotFoundError

logger = logging.getLogger("cb.account")


class CoinBalanceService:
    def __init__(self, store: CoinStoreProtocol) -> None:
        self._store = store

    async def get_coin_balance(self, username: str) -> CoinBalanceResponse:
        with store_errors("get_balance"):
            details = await self._store.get_balance(username)
        if details is None:
            logger.warning("no coin record for authorized user %r", username)
            raise BalanceNotFoundError(username)
        return CoinBalanceResponse.from_details(details)
