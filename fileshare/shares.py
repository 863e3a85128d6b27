# shares.py
# In-memory share tokens. Entries live until the process exits.
import logging
import os
import threading
import uuid
from typing import Optional

from .errors import NotFoundError

logger = logging.getLogger("fileshare")


def new_token() -> str:
    return uuid.uuid4().hex


class ShareRegistry:
    def __init__(self, token_factory=new_token):
        self._shares = {}
        self._lock = threading.Lock()
        self._token_factory = token_factory

    def issue_share(self, path: str) -> str:
        """Map a fresh token to path. Raises NotFoundError if path does not exist."""
        if not os.path.exists(path):
            raise NotFoundError(path)
        with self._lock:
            token = self._token_factory()
            while token in self._shares:
                token = self._token_factory()
            self._shares[token] = path
        logger.info("Shared %s as %s", path, token)
        return token

    def resolve(self, token: str) -> Optional[str]:
        """Path for token, or None if unknown or the file is gone."""
        with self._lock:
            path = self._shares.get(token)
        if path is None or not os.path.exists(path):
            return None
        return path

    def __len__(self):
        with self._lock:
            return len(self._shares)
