import pytest
from fastapi.testclient import TestClient

from codegen.api import deps
from codegen.content.factory import build_codegen
from codegen.core.config import Settings
from codegen.main import create_app


@pytest.fixture
def client():
    app = create_app()
    codegen = build_codegen(Settings())
    app.dependency_overrides[deps.get_codegen] = lambda: codegen
    return TestClient(app)


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_list_generators(client):
    response = client.get("/generators/")
    assert response.status_code == 200
    assert response.json() == {"generators": ["ibprop", "mevent", "uf"]}


def test_generate_script(client):
    response = client.get("/generators/uf")
    assert response.status_code == 200
    body = response.json()
    assert body["generator"] == "uf"
    assert body["content"].startswith("<?php\n")


def test_generate_raw(client):
    response = client.get("/generators/ibprop/raw")
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/plain")
    assert "$ibp = new CIBlockProperty();" in response.text


def test_unknown_generator_is_404(client):
    response = client.get("/generators/non_ex_g")
    assert response.status_code == 404
    assert response.json()["detail"] == "Generator with such name not found: 'non_ex_g'"
    assert client.get("/generators/non_ex_g/raw").status_code == 404


def test_snippet_roundtrip_via_put(client):
    assert client.get("/snippets/php_quick_echo").status_code == 404
    response = client.put("/snippets/php_quick_echo", json={"value": "<?="})
    assert response.status_code == 200
    assert client.get("/snippets/php_quick_echo").json() == {"key": "php_quick_echo", "value": "<?="}
    assert "php_quick_echo" in client.get("/snippets/").json()


def test_get_default_snippet(client):
    assert client.get("/snippets/mevent_obj").json()["value"] == "$meo = new CEventType;"
