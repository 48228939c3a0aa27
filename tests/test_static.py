from fastapi import FastAPI
from fastapi.testclient import TestClient

from core.static import SPAStaticFiles


def _client(tmp_path):
    (tmp_path / "index.html").write_text("<html>spa</html>")
    (tmp_path / "app.js").write_text("console.log('hi')")
    app = FastAPI()
    app.mount("/", SPAStaticFiles(directory=tmp_path, html=True), name="frontend")
    return TestClient(app)


def test_serves_existing_asset(tmp_path):
    resp = _client(tmp_path).get("/app.js")
    assert resp.status_code == 200
    assert "console.log" in resp.text


def test_root_serves_index(tmp_path):
    resp = _client(tmp_path).get("/")
    assert resp.status_code == 200
    assert resp.text == "<html>spa</html>"


def test_unknown_route_falls_back_to_index(tmp_path):
    resp = _client(tmp_path).get("/account/42")
    assert resp.status_code == 200
    assert resp.text == "<html>spa</html>"
