import pytest
from patternlab.engine import DemoEngine
from frontend.web import app as flask_app


@pytest.mark.e2e
def test_frontend_home_page_renders():
    import frontend.web as webmod
    webmod._engine = DemoEngine()

    client = flask_app.test_client()
    r = client.get("/")
    assert r.status_code == 200
    html = r.data.decode("utf-8", errors="ignore")
    assert "Pattern Lab" in html
    for demo_id in ("trie", "aho-corasick", "fft"):
        assert f"/api/demos/{demo_id}" in html

    webmod._engine = None
