import pytest
from fastapi.testclient import TestClient

from chat_websearch.api import app, get_config_path, get_pipeline

PAYLOAD = {"answer_box": {"type": "calculator_result", "result": "4"}}


@pytest.fixture
def api(make_pipeline, tmp_path):
    env = make_pipeline(PAYLOAD)
    config_path = tmp_path / "websearch.json"
    app.dependency_overrides[get_pipeline] = lambda: env.pipeline
    app.dependency_overrides[get_config_path] = lambda: str(config_path)
    try:
        yield TestClient(app), env
    finally:
        app.dependency_overrides.clear()


def test_health(api):
    client, _ = api

    assert client.get("/api/health").json() == {"status": "ok"}


def test_config_defaults_then_update(api):
    client, _ = api

    assert client.get("/api/websearch/config").json()["enabled"] is False

    updated = client.put(
        "/api/websearch/config",
        json={"enabled": True, "trigger_phrases": ["how much"], "position": 1, "depth": 3},
    )
    assert updated.status_code == 200

    stored = client.get("/api/websearch/config").json()
    assert stored["enabled"] is True
    assert stored["trigger_phrases"] == ["how much"]
    assert (stored["position"], stored["depth"]) == (1, 3)


def test_config_validation(api):
    client, _ = api

    assert client.put("/api/websearch/config", json={"max_words": 0}).status_code == 422


def test_prompt_uses_stored_config(api):
    client, env = api
    client.put("/api/websearch/config", json={"enabled": True, "insertion_template": "{{text}}"})

    response = client.post(
        "/api/websearch/prompt",
        json={"chat": [{"mes": "How much is 2 + 2?", "is_user": True}]},
    )

    body = response.json()
    assert body["status"] == "injected"
    assert body["query"] == "how much is 2 + 2"
    assert body["content"] == "4\n"
    assert len(env.calls) == 1


def test_prompt_respects_disabled_store(api):
    client, env = api

    response = client.post(
        "/api/websearch/prompt",
        json={"chat": [{"text": "what is love", "is_user": True}]},
    )

    assert response.json()["status"] == "disabled"
    assert response.json()["content"] == ""
    assert env.calls == []


def test_test_endpoint_returns_text(api):
    client, _ = api

    response = client.post("/api/websearch/test", json={"text": "How to make a sandwich"})

    assert response.status_code == 200
    assert response.json() == {"text": "4\n"}


def test_test_endpoint_maps_network_failure(make_pipeline, tmp_path):
    env = make_pipeline(status_code=500)
    app.dependency_overrides[get_pipeline] = lambda: env.pipeline
    app.dependency_overrides[get_config_path] = lambda: str(tmp_path / "websearch.json")
    try:
        response = TestClient(app).post("/api/websearch/test", json={"text": "q"})
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 502


def test_clear_cache(api):
    client, env = api
    env.cache.put("q", "text")

    assert client.post("/api/websearch/cache/clear").json() == {"status": "cleared"}
    assert len(env.cache) == 0


def test_prompt_with_inline_config(api):
    client, _ = api

    response = client.post(
        "/api/websearch/prompt",
        json={
            "chat": [{"mes": "what is 2 times 2", "is_user": True}],
            "config": {"enabled": True, "position": 1, "depth": 0},
        },
    )

    body = response.json()
    assert body["status"] == "injected"
    assert body["content"].endswith("4\n\n***")


def test_inline_config_ignores_corrupt_store(api):
    client, env = api
    config_path = app.dependency_overrides[get_config_path]()
    with open(config_path, "w", encoding="utf-8") as handle:
        handle.write("{not json")

    response = client.post(
        "/api/websearch/prompt",
        json={
            "chat": [{"mes": "How much is 2 + 2?", "is_user": True}],
            "config": {"enabled": True, "insertion_template": "{{text}}"},
        },
    )

    assert response.status_code == 200
    assert response.json()["status"] == "injected"
    assert len(env.calls) == 1


def test_corrupt_store_is_reported(api):
    client, env = api
    config_path = app.dependency_overrides[get_config_path]()
    with open(config_path, "w", encoding="utf-8") as handle:
        handle.write('{"max_words": 0}')

    response = client.post(
        "/api/websearch/prompt",
        json={"chat": [{"mes": "How much is 2 + 2?", "is_user": True}]},
    )

    assert response.status_code == 500
    assert response.json()["detail"].startswith("Stored web search config is invalid")
    assert env.calls == []
