"""
Token storage for authclient.

- protocol: the TokenManager interface
- file_store: JSON file persistence (the default store)
- memory: dictionary-backed store
"""

from .file_store import FileTokenManager
from .memory import MemoryTokenManager
from .protocol import TokenManager

__all__ = ["TokenManager", "FileTokenManager", "MemoryTokenManager"]
