"""
File-backed token storage.

Stores the access and refresh tokens as two string keys in a small JSON
document, owner-readable only.
"""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Dict, Optional

from ..constants import (
    DEFAULT_TOKEN_FILE,
    REFRESH_TOKEN_KEY,
    TOKEN_FILE_MODE,
    TOKEN_KEY,
)

logger = logging.getLogger(__name__)


class FileTokenManager:
    """Token manager persisting to a JSON key-value file.

    The file holds the keys ``auth_token`` and ``refresh_token``. Nothing is
    cached in memory; each read loads the file again.
    """

    def __init__(self, path: Optional[Path] = None):
        self.path = Path(path) if path else DEFAULT_TOKEN_FILE

    def get_token(self) -> Optional[str]:
        return self._get_item(TOKEN_KEY)

    def set_token(self, token: str) -> None:
        self._set_item(TOKEN_KEY, token)

    def remove_token(self) -> None:
        self._remove_item(TOKEN_KEY)

    def get_refresh_token(self) -> Optional[str]:
        return self._get_item(REFRESH_TOKEN_KEY)

    def set_refresh_token(self, token: str) -> None:
        self._set_item(REFRESH_TOKEN_KEY, token)

    def remove_refresh_token(self) -> None:
        self._remove_item(REFRESH_TOKEN_KEY)

    def _get_item(self, key: str) -> Optional[str]:
        value = self._load().get(key)
        return value if isinstance(value, str) else None

    def _set_item(self, key: str, value: str) -> None:
        items = self._load()
        items[key] = value
        self._save(items)

    def _remove_item(self, key: str) -> None:
        items = self._load()
        if key in items:
            del items[key]
            self._save(items)

    def _load(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8") or "{}")
        except (OSError, ValueError) as e:
            logger.warning(f"Ignoring unreadable token file {self.path}: {e}")
            return {}
        if not isinstance(data, dict):
            logger.warning(f"Ignoring token file {self.path}: expected a JSON object")
            return {}
        return data

    def _save(self, items: Dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)

        # Write to a sibling temp file, then swap it in so readers never see a partial file
        fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=".tokens-", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(items, f)
            os.chmod(tmp_name, TOKEN_FILE_MODE)
            os.replace(tmp_name, self.path)
        except BaseException:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise

    def __repr__(self) -> str:
        return f"FileTokenManager(path={str(self.path)!r})"
