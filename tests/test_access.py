import os

import pytest

from fileshare.access import Outcome, classify_file, join_base, resolve_for_view


@pytest.mark.parametrize("name", ["a.md", "a.PDF", "a.html", "a.txt", "a.png", "a.JPG", "a.jpeg", "a.gif"])
def test_allow_listed_files_are_viewable(tmp_path, name):
    (tmp_path / name).write_bytes(b"x")
    decision = resolve_for_view(str(tmp_path), name)
    assert decision.outcome is Outcome.VIEWABLE
    assert decision.path == os.path.join(str(tmp_path), name)


@pytest.mark.parametrize("name", ["setup.exe", "archive.zip", "Makefile"])
def test_other_files_are_refused(tmp_path, name):
    (tmp_path / name).write_bytes(b"x")
    assert resolve_for_view(str(tmp_path), name).outcome is Outcome.REFUSED


def test_directory_is_refused(tmp_path):
    (tmp_path / "pics.png").mkdir()
    assert resolve_for_view(str(tmp_path), "pics.png").outcome is Outcome.REFUSED


def test_missing_file(tmp_path):
    assert resolve_for_view(str(tmp_path), "nope.txt").outcome is Outcome.NOT_FOUND
    assert classify_file(None).outcome is Outcome.NOT_FOUND


def test_join_base_stays_under_base_for_plain_paths():
    assert join_base("/srv/files", "docs/a.txt") == os.path.normpath("/srv/files/docs/a.txt")
    assert join_base("/srv/files", "/docs/a.txt") == os.path.normpath("/srv/files/docs/a.txt")
    assert join_base("/srv/files", "") == os.path.normpath("/srv/files")


def test_join_base_does_not_reject_dotdot():
    assert join_base("/srv/files", "../etc/passwd") == os.path.normpath("/srv/etc/passwd")


@pytest.mark.skipif(os.sep != "/", reason="backslash is a separator here")
def test_leading_backslash_is_part_of_the_name(tmp_path):
    (tmp_path / "\\x.txt").write_text("odd")
    decision = resolve_for_view(str(tmp_path), "\\x.txt")
    assert decision.outcome is Outcome.VIEWABLE
    assert decision.path == os.path.join(str(tmp_path), "\\x.txt")
