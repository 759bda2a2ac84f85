"""MockCoinStore — in-memory implementation of CoinStoreProtocol.

Stands in for a slow external database: every lookup waits
``latency_seconds`` before answering. The wait is an ``asyncio.sleep`` so
other requests keep running meanwhile.

The dataset is copied into read-only mappings at construction and never
changes afterwards, so one instance can be shared by all requests without
locking.
"""

import asyncio
import logging
from collections.abc import Iterable
from types import MappingProxyType
from typing import TypeVar

from src.cb_account.domain.models import CoinDetails, LoginDetails

logger = logging.getLogger("cb.store")

DEFAULT_LOGIN_DETAILS: tuple[LoginDetails, ...] = (
    LoginDetails(username="alex", auth_token="123ABC"),
    LoginDetails(username="maria", auth_token="456DEF"),
    LoginDetails(username="john", auth_token="789GHI"),
)

DEFAULT_COIN_DETAILS: tuple[CoinDetails, ...] = (
    CoinDetails(username="alex", coins=1000),
    CoinDetails(username="maria", coins=2500),
    CoinDetails(username="john", coins=500),
)


RecordT = TypeVar("RecordT", LoginDetails, CoinDetails)


def _index(records: Iterable[RecordT], kind: str) -> MappingProxyType[str, RecordT]:
    by_username: dict[str, RecordT] = {}
    for record in records:
        if record.username in by_username:
            raise ValueError(f"duplicate {kind} record for user {record.username!r}")
        by_username[record.username] = record
    return MappingProxyType(by_username)


class MockCoinStore:
    def __init__(
        self,
        latency_seconds: float = 1.0,
        login_details: Iterable[LoginDetails] = DEFAULT_LOGIN_DETAILS,
        coin_details: Iterable[CoinDetails] = DEFAULT_COIN_DETAILS,
    ) -> None:
        if latency_seconds < 0:
            raise ValueError("latency_seconds must be >= 0")
        self._latency = latency_seconds
        self._login_details = _index(login_details, "login")
        self._coin_details = _index(coin_details, "coin")

    async def _simulate_latency(self) -> None:
        if self._latency:
            await asyncio.sleep(self._latency)

    async def get_credential(self, username: str) -> LoginDetails | None:
        await self._simulate_latency()
        return self._login_details.get(username)

    async def get_balance(self, username: str) -> CoinDetails | None:
        await self._simulate_latency()
        return self._coin_details.get(username)

    async def initialize(self) -> None:
        logger.info(
            "mock store ready: %d login records, %d coin records",
            len(self._login_details),
            len(self._coin_details),
        )
