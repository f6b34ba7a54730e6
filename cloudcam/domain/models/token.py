# Standard library imports
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Token:
    """
    Device cloud access token.

    Instances are immutable; a refresh replaces the whole object so readers
    never observe a half-updated token.
    """
    value: str
    expires_at_ms: int
    account_id: Optional[str] = None

    def is_valid(self, now_ms: float) -> bool:
        """True while now is strictly before the (skew-adjusted) expiry."""
        return now_ms < self.expires_at_ms

    def __repr__(self) -> str:
        return (
            f"Token(value='***', expires_at_ms={self.expires_at_ms}, "
            f"account_id={self.account_id!r})"
        )
