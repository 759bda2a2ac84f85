"""Pydantic schemas and query decoding for the cb_account API."""

from urllib.parse import parse_qsl

from pydantic import BaseModel, ConfigDict, Field

from src.cb_account.domain.models import INT64_MAX, INT64_MIN, CoinDetails
from src.cb_common.errors import DecodeFailureError

# ---------------------------------------------------------------------------
# Request schemas
# ---------------------------------------------------------------------------


class CoinBalanceParams(BaseModel):
    """Query parameters of GET /account/coins.

    Unknown keys are rejected, so any query that carries more than the
    username fails to decode.
    """

    model_config = ConfigDict(extra="forbid")

    Username: str


def decode_coin_balance_params(query: str) -> CoinBalanceParams:
    """Decode a raw query string into CoinBalanceParams.

    Keys match field names case-insensitively. A key given more than once
    (in any casing) is ambiguous and rejected. Percent-escapes must decode
    to valid UTF-8.

    Raises DecodeFailureError with the underlying cause as detail.
    """
    field_names = {name.lower(): name for name in CoinBalanceParams.model_fields}
    try:
        pairs = parse_qsl(query, keep_blank_values=True, errors="strict")
        data: dict[str, str] = {}
        for key, value in pairs:
            name = field_names.get(key.lower(), key)
            if name in data:
                raise ValueError(f"query key {key!r} repeats {name!r}")
            data[name] = value
        return CoinBalanceParams.model_validate(data)
    except ValueError as e:  # UnicodeDecodeError and ValidationError included
        raise DecodeFailureError(f"cannot decode query {query!r}: {e}") from e


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------


class CoinBalanceResponse(BaseModel):
    StatusCode: int = 200
    Balance: int = Field(..., ge=INT64_MIN, le=INT64_MAX)

    @classmethod
    def from_details(cls, details: CoinDetails) -> "CoinBalanceResponse":
        return cls(StatusCode=200, Balance=details.coins)
