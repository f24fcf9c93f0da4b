"""
Endpoint tests for the proofreading proxy, evaluation and PREP routes.

The proofreading service is replaced by a ProofreadClient over a mocked
HTTP session, so the full request path runs without network access.
"""

from unittest.mock import Mock

import pytest
import requests
from fastapi.testclient import TestClient

from api.core.middleware import SECURITY_HEADERS
from api.dependencies import RATE_LIMIT_MESSAGE
from api.main import create_app
from config import AppSettings
from transcript.proofread_client import ProofreadClient

KOUSEI_OK = {
    "result": {
        "suggestions": [
            {"offset": "7", "length": "3", "word": "見れる", "suggestion": "見られる", "rule": "ら抜き"},
        ]
    }
}


def _response(status=200, payload=None):
    resp = Mock()
    resp.ok = 200 <= status < 300
    resp.status_code = status
    resp.reason = "OK" if resp.ok else "Error"
    resp.text = ""
    resp.json.return_value = payload
    return resp


@pytest.fixture
def http():
    session = Mock(spec=requests.Session)
    session.post.return_value = _response(payload=KOUSEI_OK)
    return session


@pytest.fixture
def app(http):
    app = create_app(AppSettings(PRIVATE_YAHOO_APP_ID="test-app", RATE_LIMIT_REQUESTS=5))
    app.state.proofreader = ProofreadClient(app_id="test-app", session=http)
    return app


@pytest.fixture
def client(app):
    return TestClient(app)


def _frames(n=50):
    return [{"volume": 0.05, "pitch": 150.0} for _ in range(n)]


class TestProofreadEndpoint:

    def test_suggestions_returned(self, client, http):
        response = client.post("/api/proofread", json={"sentence": "私はこの映画を見れる。"})
        assert response.status_code == 200
        suggestions = response.json()["result"]["suggestions"]
        assert suggestions[0]["offset"] == 7
        assert suggestions[0]["replacement"] == "見られる"
        assert suggestions[0]["rule"] == "ra-nuki"
        assert http.post.call_count == 1

    def test_empty_sentence(self, client, http):
        response = client.post("/api/proofread", json={"sentence": ""})
        assert response.status_code == 400
        assert "error" in response.json()
        http.post.assert_not_called()

    def test_sentence_too_long(self, client):
        response = client.post("/api/proofread", json={"sentence": "あ" * 2001})
        assert response.status_code == 400

    def test_upstream_failure(self, client, http):
        http.post.return_value = _response(status=502)
        response = client.post("/api/proofread", json={"sentence": "テスト"})
        assert response.status_code == 500
        assert set(response.json()) == {"error"}

    def test_unconfigured_service(self):
        app = create_app(AppSettings(PRIVATE_YAHOO_APP_ID=None))
        assert app.state.proofreader is None
        response = TestClient(app).post("/api/proofread", json={"sentence": "テスト"})
        assert response.status_code == 500
        assert "error" in response.json()

    def test_rate_limited(self, client, http):
        for _ in range(5):
            assert client.post("/api/proofread", json={"sentence": "テスト"}).status_code == 200

        response = client.post("/api/proofread", json={"sentence": "テスト"})
        assert response.status_code == 429
        assert response.json() == {"error": RATE_LIMIT_MESSAGE}
        assert int(response.headers["Retry-After"]) >= 1
        assert http.post.call_count == 5

    def test_security_headers(self, client):
        response = client.post("/api/proofread", json={"sentence": "テスト"})
        for name, value in SECURITY_HEADERS.items():
            assert response.headers[name] == value


class TestEvaluationEndpoint:

    def test_completed(self, client):
        body = {"transcript": "私はこの映画を見れる", "frames": _frames(), "duration_sec": 2.0}
        response = client.post("/v1/evaluation", json=body)
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "completed"
        assert data["corrected_transcript"] == "私はこの映画を見られる"
        assert data["correction_source"] == "service"
        assert data["speaking_rate"] == 300
        assert data["speaking_rate_label"] == "good"
        assert set(data["delivery"]) >= {"intonation", "volume", "pause", "speed_variation"}

    def test_service_down_falls_back(self, client, http):
        http.post.side_effect = requests.exceptions.Timeout()
        body = {"transcript": "えーと私は見れる", "frames": _frames()}
        data = client.post("/v1/evaluation", json=body).json()
        assert data["status"] == "completed"
        assert data["correction_source"] == "fallback"
        assert data["corrected_transcript"] == "私は見れる。"
        assert data["grammar_errors"] == []

    def test_no_speech(self, client, http):
        data = client.post("/v1/evaluation", json={"transcript": "", "frames": _frames()}).json()
        assert data["status"] == "no_speech"
        assert data["error"]
        assert data["delivery"] is None
        http.post.assert_not_called()

    def test_no_speech_does_not_use_quota(self, client):
        for _ in range(10):
            empty = client.post("/v1/evaluation", json={"transcript": "  ", "frames": _frames(5)})
            assert empty.json()["status"] == "no_speech"
        body = {"transcript": "はい。", "frames": _frames(5)}
        assert client.post("/v1/evaluation", json=body).status_code == 200

    def test_unconfigured_service_falls_back_without_limit(self):
        client = TestClient(create_app(AppSettings(PRIVATE_YAHOO_APP_ID=None)))
        body = {"transcript": "えーと私は見れる", "frames": _frames(5)}
        for _ in range(7):
            response = client.post("/v1/evaluation", json=body)
            assert response.status_code == 200
            assert response.json()["correction_source"] == "fallback"

    def test_invalid_frame(self, client):
        body = {"transcript": "はい", "frames": [{"volume": 2.0, "pitch": 100.0}]}
        assert client.post("/v1/evaluation", json=body).status_code == 422

    def test_rate_limited(self, client):
        body = {"transcript": "はい。", "frames": _frames(5)}
        for _ in range(5):
            assert client.post("/v1/evaluation", json=body).status_code == 200
        assert client.post("/v1/evaluation", json=body).status_code == 429


class TestPrepEndpoint:

    def test_reorganized(self, client):
        response = client.post("/v1/prep", json={"text": "なぜなら準備したから。結論から言うと速い。"})
        assert response.status_code == 200
        data = response.json()
        assert data["point"] == ["結論から言うと速い。"]
        assert data["reason"] == ["なぜなら準備したから。"]
        assert data["text"] == "結論から言うと速い。なぜなら準備したから。"

    def test_not_rate_limited(self, client):
        for _ in range(10):
            assert client.post("/v1/prep", json={"text": "はい。"}).status_code == 200
