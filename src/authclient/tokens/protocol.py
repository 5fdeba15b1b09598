"""
Token manager protocol.

Any object exposing these six synchronous methods can be plugged into the
request client as its token store.
"""

from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class TokenManager(Protocol):
    """Reads, writes and clears the access and refresh tokens.

    Implementations must not cache: every ``get_*`` call reads the
    underlying medium, so tokens written by another process are seen.
    An absent token reads as ``None``.
    """

    def get_token(self) -> Optional[str]:
        ...

    def set_token(self, token: str) -> None:
        ...

    def remove_token(self) -> None:
        ...

    def get_refresh_token(self) -> Optional[str]:
        ...

    def set_refresh_token(self, token: str) -> None:
        ...

    def remove_refresh_token(self) -> None:
        ...
