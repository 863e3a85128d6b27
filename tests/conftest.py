import pytest

from fileshare.app import create_app


@pytest.fixture
def base_dir(tmp_path):
    base = tmp_path / "files"
    base.mkdir()
    (base / "docs").mkdir()
    (base / "docs" / "readme.md").write_text("# hello\n")
    (base / "notes.txt").write_text("some notes\n")
    (base / "picture.png").write_bytes(b"\x89PNG\r\n\x1a\nfake")
    (base / "tool.exe").write_bytes(b"MZ\x00\x00")
    return base


@pytest.fixture
def app(tmp_path, base_dir):
    app = create_app({
        "BASE_DIRECTORY": str(base_dir),
        "USERS_FILE": str(tmp_path / "users.json"),
        "SECRET_KEY": "test-secret",
    })
    app.config["TESTING"] = True
    app.extensions["auth_gate"].register("admin", "s3cret")
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def logged_in(client):
    resp = client.post("/login", data={"username": "admin", "password": "s3cret"})
    assert resp.status_code == 302
    return client
