"""FastAPI dependency: authorize.

Usage in any protected router:
    from src.cb_gateway.auth.dependencies import authorize

    router = APIRouter(dependencies=[Depends(authorize)])

The request itself is never modified; on success the dependency returns and
the route handler runs with the original request.
"""

import logging
import secrets
from typing import Annotated

from fastapi import Depends, Request

from src.cb_account.api.dependencies import get_store
from src.cb_account.application.schemas import decode_coin_balance_params
from src.cb_account.domain.repository import CoinStoreProtocol, store_errors
from src.cb_common.errors import (
    InvalidCredentialsError,
    MissingCredentialsError,
    UnauthorizedError,
)

logger = logging.getLogger("cb.auth")


def tokens_match(stored: str, presented: str) -> bool:
    """Byte-exact, case-sensitive, constant-time token comparison.

    Header values arrive latin-1 decoded, so encoding back to latin-1
    recovers the bytes sent on the wire.
    """
    try:
        presented_bytes = presented.encode("latin-1")
    except UnicodeEncodeError:
        return False
    return secrets.compare_digest(stored.encode("utf-8"), presented_bytes)


def _reject(request: Request, exc: UnauthorizedError, username: str) -> UnauthorizedError:
    logger.warning(
        "auth rejected code=%d user=%r path=%s",
        exc.code,
        username,
        request.url.path,
    )
    return exc


async def authorize(
    request: Request,
    store: Annotated[CoinStoreProtocol, Depends(get_store)],
) -> None:
    """Validate ``username`` query param against the ``Authorization`` header.

    Raises MissingCredentialsError (no store lookup) if either is empty.
    Raises DecodeFailureError (no store lookup) if the query does not decode
    into CoinBalanceParams.
    Raises InvalidCredentialsError if the user is unknown or the token differs.
    Both credential errors surface as the same HTTP 400 response.

    The checked identity comes from decode_coin_balance_params, the same
    decode the handler uses, so both stages always see the same username.
    """
    token = request.headers.get("Authorization") or ""
    if not request.query_params.get("username") or not token:
        raise _reject(request, MissingCredentialsError(), "")

    username = decode_coin_balance_params(request.url.query).Username

    with store_errors("get_credential"):
        login = await store.get_credential(username)
    if login is None or not tokens_match(login.auth_token, token):
        raise _reject(request, InvalidCredentialsError(), username)
