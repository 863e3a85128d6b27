# listing.py
# Directory listing: directories first, then files, each group in enumeration order.
import os
import posixpath
from dataclasses import dataclass
from typing import List, Optional

from .errors import NotFoundError, StorageError

FILE = "file"
DIRECTORY = "directory"


@dataclass(frozen=True)
class DirectoryEntry:
    name: str
    kind: str

    @property
    def is_dir(self) -> bool:
        return self.kind == DIRECTORY


def _enumerate(path: str):
    # names come back in code point order, like a sorted readdir
    with os.scandir(path) as it:
        entries = list(it)
    entries.sort(key=lambda e: e.name)
    return entries


def list_directory(path: str) -> List[DirectoryEntry]:
    """
    List the immediate children of path.
    Raises NotFoundError if path is missing, StorageError if it cannot be read.
    """
    try:
        raw = _enumerate(path)
    except FileNotFoundError as e:
        raise NotFoundError(path) from e
    except OSError as e:
        raise StorageError(f"cannot read directory {path}") from e
    dirs = []
    files = []
    for entry in raw:
        try:
            is_dir = entry.is_dir(follow_symlinks=False)
        except OSError:
            is_dir = False
        if is_dir:
            dirs.append(DirectoryEntry(entry.name, DIRECTORY))
        else:
            files.append(DirectoryEntry(entry.name, FILE))
    return dirs + files


def filter_entries(entries: List[DirectoryEntry], query: Optional[str]) -> List[DirectoryEntry]:
    if not query:
        return list(entries)
    needle = query.lower()
    return [e for e in entries if needle in e.name.lower()]


def parent_of(relative_dir: str) -> str:
    """Relative parent for the Back link; '' means the base directory."""
    parent = posixpath.dirname(relative_dir.rstrip("/"))
    return "" if parent in (".", "/") else parent


def child_of(relative_dir: str, name: str) -> str:
    return posixpath.join(relative_dir, name) if relative_dir else name
