"""cb_account REST API — coin balance lookup behind the authorization gate.

Pipeline per request: authorize (router dependency) → get_coin_balance.
A gate rejection short-circuits with an AppError before the handler runs.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from src.cb_account.api.dependencies import get_store
from src.cb_account.application.schemas import (
    CoinBalanceResponse,
    decode_coin_balance_params,
)
from src.cb_account.application.service import CoinBalanceService
from src.cb_account.domain.repository import CoinStoreProtocol
from src.cb_gateway.auth.dependencies import authorize

router = APIRouter(
    prefix="/account",
    tags=["account"],
    dependencies=[Depends(authorize)],
)


@router.get("/coins", response_model=CoinBalanceResponse)
async def get_coin_balance(
    request: Request,
    store: Annotated[CoinStoreProtocol, Depends(get_store)],
) -> CoinBalanceResponse:
    params = decode_coin_balance_params(request.url.query)
    return await CoinBalanceService(store).get_coin_balance(params.Username)
