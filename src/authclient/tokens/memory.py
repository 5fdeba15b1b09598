"""In-process token storage, for scripts and tests that need no persistence."""

from typing import Dict, Optional

from ..constants import REFRESH_TOKEN_KEY, TOKEN_KEY


class MemoryTokenManager:
    """Token manager backed by a plain dictionary."""

    def __init__(self, token: Optional[str] = None, refresh_token: Optional[str] = None):
        self._items: Dict[str, str] = {}
        if token:
            self._items[TOKEN_KEY] = token
        if refresh_token:
            self._items[REFRESH_TOKEN_KEY] = refresh_token

    def get_token(self) -> Optional[str]:
        return self._items.get(TOKEN_KEY)

    def set_token(self, token: str) -> None:
        self._items[TOKEN_KEY] = token

    def remove_token(self) -> None:
        self._items.pop(TOKEN_KEY, None)

    def get_refresh_token(self) -> Optional[str]:
        return self._items.get(REFRESH_TOKEN_KEY)

    def set_refresh_token(self, token: str) -> None:
        self._items[REFRESH_TOKEN_KEY] = token

    def remove_refresh_token(self) -> None:
        self._items.pop(REFRESH_TOKEN_KEY, None)
