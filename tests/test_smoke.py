import pytest

from app.cms import create_app


@pytest.fixture()
def client(monkeypatch):
    monkeypatch.setenv("SECRET_KEY", "test-secret")
    monkeypatch.setenv("ENV", "test")
    monkeypatch.delenv("DEFAULT_ROLE", raising=False)

    app = create_app()
    return app.test_client()


def test_health_ok(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json["ok"] is True


def test_healthz_ok(client):
    r = client.get("/healthz")
    assert r.status_code == 200
    assert r.data == b"ok"


def test_admin_forbidden_without_role(client):
    r = client.get("/admin/")
    assert r.status_code == 403


def test_unknown_route_404(client):
    r = client.get("/nope")
    assert r.status_code == 404
