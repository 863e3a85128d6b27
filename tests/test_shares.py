import itertools
import threading

import pytest

from fileshare.errors import NotFoundError
from fileshare.shares import ShareRegistry


@pytest.fixture
def target(tmp_path):
    f = tmp_path / "report.pdf"
    f.write_bytes(b"%PDF-1.4")
    return str(f)


def test_issue_then_resolve(target):
    registry = ShareRegistry()
    token = registry.issue_share(target)
    assert registry.resolve(token) == target


def test_two_shares_of_one_file_are_distinct(target):
    registry = ShareRegistry()
    first = registry.issue_share(target)
    second = registry.issue_share(target)
    assert first != second
    assert registry.resolve(first) == target
    assert registry.resolve(second) == target


def test_missing_path_is_rejected(tmp_path):
    registry = ShareRegistry()
    with pytest.raises(NotFoundError):
        registry.issue_share(str(tmp_path / "ghost.txt"))
    assert len(registry) == 0


def test_unknown_token():
    assert ShareRegistry().resolve("never-issued") is None


def test_deleted_file_no_longer_resolves(tmp_path):
    f = tmp_path / "gone.txt"
    f.write_text("bye")
    registry = ShareRegistry()
    token = registry.issue_share(str(f))
    f.unlink()
    assert registry.resolve(token) is None


def test_colliding_tokens_are_redrawn(target):
    tokens = itertools.chain(["same", "same", "same"], itertools.count())
    registry = ShareRegistry(token_factory=lambda: str(next(tokens)))
    assert registry.issue_share(target) == "same"
    second = registry.issue_share(target)
    assert second != "same"
    assert registry.resolve("same") == target
    assert registry.resolve(second) == target


def test_concurrent_issues_are_all_kept(target):
    registry = ShareRegistry()
    issued = []
    lock = threading.Lock()

    def worker():
        for _ in range(50):
            token = registry.issue_share(target)
            with lock:
                issued.append(token)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert len(set(issued)) == 400
    assert len(registry) == 400
