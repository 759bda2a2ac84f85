"""Store Protocol — dependency inversion for the gate and the balance handler.

Unit tests inject a mock that conforms to this Protocol.
Infrastructure layer provides the real implementations.

Lookups return ``None`` when no record exists. That is a defined outcome,
not an error: callers must check it before using the record.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Protocol

from src.cb_account.domain.models import CoinDetails, LoginDetails
from src.cb_common.errors import AppError, StoreUnavailableError


class CoinStoreProtocol(Protocol):
    async def get_credential(self, username: str) -> LoginDetails | None: ...

    async def get_balance(self, username: str) -> CoinDetails | None: ...

    async def initialize(self) -> None:
        """Prepare the store for use. Raises StoreUnavailableError on failure."""
        ...


@contextmanager
def store_errors(operation: str) -> Iterator[None]:
    """Wrap a store call so any non-AppError failure becomes StoreUnavailableError.

    Usage:
        with store_errors("get_balance"):
            details = await store.get_balance(username)
    """
    try:
        yield
    except AppError:
        raise
    except Exception as e:
        raise StoreUnavailableError(f"{operation} failed: {e!r}") from e
