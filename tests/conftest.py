import pytest
from fastapi.testclient import TestClient

from staticsite.config import Settings
from staticsite.main import create_app


INDEX_HTML = b"<!doctype html>\n<html><body><h1>Home</h1></body></html>\n"
STYLE_CSS = b"body { margin: 0; }\n"


@pytest.fixture()
def site_root(tmp_path):
    (tmp_path / "index.html").write_bytes(INDEX_HTML)
    (tmp_path / "style.css").write_bytes(STYLE_CSS)
    (tmp_path / "css").mkdir()
    (tmp_path / "css" / "site.css").write_bytes(b"h1 { color: red; }\n")
    (tmp_path / "data.bin").write_bytes(bytes(range(256)))
    return tmp_path


@pytest.fixture()
def client(site_root):
    return TestClient(create_app(Settings(root_dir=site_root)))
