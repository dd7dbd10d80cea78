# File: tests/test_adcopy_api.py
import httpx
import openai
import pytest

from backend.routers.adcopy import CORS_HEADERS

ALLOWED_HEADERS = "authorization, x-client-info, apikey, content-type"


def _status_error(status_code):
    request = httpx.Request("POST", "https://api.openai.com/v1/chat/completions")
    response = httpx.Response(status_code, request=request, json={"error": {"message": "nope"}})
    return openai.APIStatusError("upstream failed", response=response, body=None)


def test_generate_returns_verbatim_content(client, auth_headers, fake_openai):
    fake_openai.content = "- Headline: Run Faster\n- Body: New shoes.\n- CTA: Shop now"
    resp = client.post(
        "/generate-ad-copy",
        json={"prompt": "running shoes", "adType": "social", "tone": "playful"},
        headers=auth_headers,
    )
    assert resp.status_code == 200
    assert resp.json() == {"content": "- Headline: Run Faster\n- Body: New shoes.\n- CTA: Shop now"}
    assert resp.headers["access-control-allow-origin"] == "*"


def test_generate_sends_templated_two_message_request(client, auth_headers, fake_openai):
    client.post(
        "/generate-ad-copy",
        json={"prompt": "coffee beans", "adType": "banner", "tone": "luxurious"},
        headers=auth_headers,
    )
    call = fake_openai.calls[0]
    assert call["model"] == "gpt-4o-mini"
    assert call["temperature"] == 0.8
    system, user = call["messages"]
    assert system["role"] == "system"
    assert "expert advertising copywriter" in system["content"]
    assert "action-oriented" in system["content"]
    assert user["role"] == "user"
    assert user["content"].startswith("Create banner ad copy with a luxurious tone. Requirements: coffee beans")
    for label in ("Headline:", "Body:", "CTA:"):
        assert label in user["content"]


def test_missing_fields_interpolate_as_empty(client, auth_headers, fake_openai):
    resp = client.post("/generate-ad-copy", json={"prompt": "only a prompt"}, headers=auth_headers)
    assert resp.status_code == 200
    user = fake_openai.calls[0]["messages"][1]["content"]
    assert user.startswith("Create  ad copy with a  tone. Requirements: only a prompt")


def test_upstream_status_becomes_500(client, auth_headers, fake_openai):
    fake_openai.error = _status_error(429)
    resp = client.post("/generate-ad-copy", json={"prompt": "x", "adType": "y", "tone": "z"}, headers=auth_headers)
    assert resp.status_code == 500
    assert resp.json() == {"error": "OpenAI API error: 429"}
    assert resp.headers["access-control-allow-origin"] == "*"
    assert len(fake_openai.calls) == 1  # 재시도 없음


def test_transport_failure_becomes_500(client, auth_headers, fake_openai):
    request = httpx.Request("POST", "https://api.openai.com/v1/chat/completions")
    fake_openai.error = openai.APIConnectionError(request=request)
    resp = client.post("/generate-ad-copy", json={"prompt": "x", "adType": "y", "tone": "z"}, headers=auth_headers)
    assert resp.status_code == 500
    assert isinstance(resp.json()["error"], str)
    assert resp.json()["error"]


def test_unreadable_body_becomes_500(client, auth_headers, fake_openai):
    headers = dict(auth_headers, **{"Content-Type": "application/json"})
    resp = client.post("/generate-ad-copy", content=b"{not json", headers=headers)
    assert resp.status_code == 500
    assert isinstance(resp.json()["error"], str)
    assert fake_openai.calls == []


@pytest.mark.parametrize(
    "payload",
    [
        {"prompt": "a", "adType": "social", "tone": "bold"},
        {"prompt": "", "adType": "", "tone": ""},
        {"prompt": "emoji ✨ and \"quotes\"", "adType": "story", "tone": "calm"},
    ],
)
def test_generate_is_200_or_500_only(client, auth_headers, fake_openai, payload):
    ok = client.post("/generate-ad-copy", json=payload, headers=auth_headers)
    assert ok.status_code == 200
    assert isinstance(ok.json()["content"], str)

    fake_openai.error = _status_error(503)
    failed = client.post("/generate-ad-copy", json=payload, headers=auth_headers)
    assert failed.status_code == 500
    assert isinstance(failed.json()["error"], str)


def test_generate_requires_identity(client, fake_openai):
    resp = client.post("/generate-ad-copy", json={"prompt": "x", "adType": "y", "tone": "z"})
    assert resp.status_code == 401
    assert fake_openai.calls == []


@pytest.mark.parametrize("body", [None, b"", b"garbage", b'{"prompt": "x"}'])
def test_preflight_always_permissive(client, body):
    resp = client.request("OPTIONS", "/generate-ad-copy", content=body)
    assert resp.status_code == 200
    assert resp.content == b""
    assert resp.headers["access-control-allow-origin"] == "*"
    assert resp.headers["access-control-allow-headers"] == ALLOWED_HEADERS


@pytest.mark.parametrize(
    "requested_headers",
    ["authorization, content-type", "authorization, content-type, x-requested-with"],
)
def test_browser_preflight_allows_any_origin(client, requested_headers):
    resp = client.options(
        "/generate-ad-copy",
        headers={
            "Origin": "https://somewhere.example",
            "Access-Control-Request-Method": "POST",
            "Access-Control-Request-Headers": requested_headers,
        },
    )
    assert resp.status_code == 200
    assert resp.content == b""
    assert resp.headers["access-control-allow-origin"] == "*"
    assert resp.headers["access-control-allow-headers"] == ALLOWED_HEADERS


def test_other_routes_keep_cors_middleware(client):
    resp = client.options(
        "/projects",
        headers={"Origin": "https://somewhere.example", "Access-Control-Request-Method": "GET"},
    )
    assert resp.status_code == 200
    assert resp.headers["access-control-allow-origin"] == "*"


def test_cors_header_constants():
    assert CORS_HEADERS["Access-Control-Allow-Headers"] == ALLOWED_HEADERS
