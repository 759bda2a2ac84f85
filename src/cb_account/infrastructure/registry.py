"""Store registry — picks the CoinStoreProtocol implementation by name.

The backend is chosen once, when the application is built. New backends
register a factory here; nothing downstream inspects the store's type.
"""

from collections.abc import Callable

from config.settings import Settings
from src.cb_account.domain.repository import CoinStoreProtocol
from src.cb_account.infrastructure.mock_store import MockCoinStore

StoreFactory = Callable[[Settings], CoinStoreProtocol]


def _memory_store(app_settings: Settings) -> CoinStoreProtocol:
    return MockCoinStore(latency_seconds=app_settings.STORE_LATENCY_SECONDS)


STORE_FACTORIES: dict[str, StoreFactory] = {
    "memory": _memory_store,
}


def build_store(app_settings: Settings) -> CoinStoreProtocol:
    """Instantiate the store named by ``STORE_BACKEND``."""
    backend = app_settings.STORE_BACKEND.lower()
    try:
        factory = STORE_FACTORIES[backend]
    except KeyError:
        known = ", ".join(sorted(STORE_FACTORIES))
        raise ValueError(f"Unknown STORE_BACKEND {backend!r} (known: {known})") from None
    return factory(app_settings)
