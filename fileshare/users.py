# users.py
# Flat-file user store: a JSON list of {"username", "passwordHash"} records.
import json
import logging
import os
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import List

from .errors import StorageError

logger = logging.getLogger("fileshare")


@dataclass(frozen=True)
class UserRecord:
    username: str
    password_hash: str

    def to_dict(self) -> dict:
        return {"username": self.username, "passwordHash": self.password_hash}

    @classmethod
    def from_dict(cls, data: dict) -> "UserRecord":
        return cls(username=data["username"], password_hash=data["passwordHash"])


class UserStore:
    """
    Loads and persists the user list.
    Writes are serialized by one lock; reads take no lock.
    """

    def __init__(self, path):
        self.path = Path(path)
        self._write_lock = threading.Lock()

    def _ensure_file(self):
        with self._write_lock:
            # another thread may have created it since the caller looked
            if self.path.exists():
                return
            try:
                self.path.parent.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                raise StorageError(f"cannot create user file {self.path}") from e
            self._write([])
        logger.info("Created empty user file: %s", self.path)

    def load(self) -> List[UserRecord]:
        if not self.path.exists():
            self._ensure_file()
        return self._read()

    def _read(self) -> List[UserRecord]:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except OSError as e:
            raise StorageError(f"cannot read user file {self.path}") from e
        except json.JSONDecodeError as e:
            raise StorageError(f"user file {self.path} is not valid JSON") from e
        if not isinstance(data, list):
            raise StorageError(f"user file {self.path} does not hold a list")
        try:
            return [UserRecord.from_dict(item) for item in data]
        except (KeyError, TypeError) as e:
            raise StorageError(f"malformed record in {self.path}") from e

    def save(self, records: List[UserRecord]):
        with self._write_lock:
            self._write(records)

    def _write(self, records):
        payload = [r.to_dict() for r in records]
        tmp = self.path.with_name(self.path.name + ".tmp")
        try:
            with open(tmp, "w", encoding="utf-8") as f:
                json.dump(payload, f, indent=2)
            os.replace(tmp, self.path)
        except OSError as e:
            raise StorageError(f"cannot write user file {self.path}") from e

    def find(self, username: str):
        for record in self.load():
            if record.username == username:
                return record
        return None

    def append(self, record: UserRecord):
        """Add a record unless the username is taken. Returns False on conflict."""
        self._ensure_file()
        with self._write_lock:
            records = self._read()
            if any(r.username == record.username for r in records):
                return False
            records.append(record)
            self._write(records)
        return True
