"""FastAPI dependency: get_store.

The store is built once in create_app() and kept on app.state; every
request shares that single read-only instance.
"""

from fastapi import Request

from src.cb_account.domain.repository import CoinStoreProtocol


def get_store(request: Request) -> CoinStoreProtocol:
    return request.app.state.store
