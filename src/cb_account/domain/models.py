"""Domain models for cb_account — pure dataclasses, no framework dependency."""

from dataclasses import dataclass

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


@dataclass(frozen=True)
class LoginDetails:
    username: str
    auth_token: str   # authoritative token, compared byte-exact


@dataclass(frozen=True)
class CoinDetails:
    username: str
    coins: int        # signed 64-bit

    def __post_init__(self) -> None:
        if not INT64_MIN <= self.coins <= INT64_MAX:
            raise ValueError(f"coins out of int64 range: {self.coins}")
