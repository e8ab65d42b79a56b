"""End-to-end tests for the detection pipeline and the /api/detect endpoint."""

import json

import pytest
import requests
from fastapi.testclient import TestClient

from newscheck.config import Config
from newscheck.errors import InvalidInput
from newscheck.main import app
from newscheck.models.schema import DetectRequest
from newscheck.services import pipeline
from newscheck.services.llm_agent import RemoteClassifier, get_remote_classifier

from conftest import ARTICLE_HTML, chat_completion, make_response, stub_client


@pytest.fixture
def client(monkeypatch):
    monkeypatch.setattr(Config, "CLASSIFIER", "heuristic")
    return TestClient(app)


def _remote(content):
    return RemoteClassifier(client=stub_client(reply=chat_completion(content)), model="test-model")


class TestPipeline:
    def test_empty_request_rejected(self):
        with pytest.raises(InvalidInput):
            pipeline.detect(DetectRequest(text=" ", headline="", url=None))

    def test_headline_preferred_over_text(self):
        resp = pipeline.detect(
            DetectRequest(
                headline="SHOCKING: You won't believe what happened next!!!",
                text="The city council met on Tuesday to discuss the annual budget.",
            ),
            mode="heuristic",
        )
        assert resp.verdict == "Likely Fake"
        assert resp.source == "heuristic"
        assert resp.source_domain is None

    def test_blank_headline_falls_back_to_text(self):
        resp = pipeline.detect(
            DetectRequest(headline="   ", text="The city council met on Tuesday to discuss the annual budget."),
            mode="heuristic",
        )
        assert resp.verdict == "Uncertain"
        assert resp.confidence == 60

    def test_remote_mode_uses_normalized_text(self, fake_get):
        fake_get.response = make_response(ARTICLE_HTML)
        remote = _remote(json.dumps({"verdict": "Likely Real", "confidence": 80, "reasons": ["a", "b"]}))

        resp = pipeline.detect(DetectRequest(url="https://example.com/story"), mode="remote", remote=remote)

        assert resp.verdict == "Likely Real"
        assert resp.source == "remote"
        assert resp.source_domain == "example.com"
        sent = remote.client.chat.completions.calls[0]["messages"][1]["content"]
        assert sent.startswith("Source: example.com\nTitle: City Council Approves Budget\n\n")

    def test_auto_mode_without_key_is_heuristic(self, monkeypatch):
        monkeypatch.setattr(Config, "OPENAI_KEY", None)
        resp = pipeline.detect(DetectRequest(text="Plain words here."), mode="auto")
        assert resp.source == "heuristic"

    def test_auto_mode_with_client_is_remote(self):
        remote = _remote(json.dumps({"verdict": "Uncertain", "confidence": 65, "reasons": ["a", "b"]}))
        resp = pipeline.detect(DetectRequest(text="Plain words here."), mode="auto", remote=remote)
        assert resp.source == "remote"
        assert resp.color == "text-yellow-600"

    def test_unknown_mode_is_heuristic(self):
        resp = pipeline.detect(DetectRequest(text="Plain words here."), mode="oracle")
        assert resp.source == "heuristic"

    def test_heuristic_mode_never_builds_remote_client(self, monkeypatch):
        def unexpected():
            raise AssertionError("remote classifier built in heuristic mode")

        monkeypatch.setattr(pipeline, "get_remote_classifier", unexpected)
        monkeypatch.setattr(Config, "OPENAI_KEY", "sk-test")
        resp = pipeline.detect(DetectRequest(text="Plain words here."), mode="heuristic")
        assert resp.source == "heuristic"

    def test_remote_classifier_shared_across_requests(self, monkeypatch):
        monkeypatch.setattr(Config, "OPENAI_KEY", "sk-test")
        first = get_remote_classifier()
        assert first.available
        assert get_remote_classifier() is first


class TestDetectEndpoint:
    def test_root(self, client):
        assert client.get("/").json() == {"status": "ok", "message": "Backend running"}

    @pytest.mark.parametrize("body", [{}, {"text": "", "headline": "", "url": ""}, {"text": "  "}])
    def test_no_content(self, client, body):
        resp = client.post("/api/detect", json=body)
        assert resp.status_code == 400
        assert resp.json() == {"error": "Please provide URL, text, or headline"}

    def test_fake_headline(self, client):
        resp = client.post("/api/detect", json={"headline": "SHOCKING: You won't believe what happened next!!!"})
        assert resp.status_code == 200
        data = resp.json()
        assert data["verdict"] == "Likely Fake"
        assert data["confidence"] == 95
        assert data["color"] == "text-red-600"
        assert data["bgColor"] == "bg-red-50"
        assert data["borderColor"] == "border-red-200"
        assert data["source"] == "heuristic"
        assert 1 <= len(data["reasons"]) <= 4

    def test_url_success(self, client, fake_get):
        fake_get.response = make_response(ARTICLE_HTML)
        resp = client.post("/api/detect", json={"url": "https://example.com/story"})
        assert resp.status_code == 200
        data = resp.json()
        assert data["source_domain"] == "example.com"
        assert data["verdict"] == "Uncertain"

    def test_url_takes_precedence_over_text(self, client, fake_get):
        fake_get.response = make_response(ARTICLE_HTML)
        resp = client.post(
            "/api/detect",
            json={"url": "https://example.com/story", "headline": "SHOCKING!!! LEAKED!!!"},
        )
        assert resp.json()["verdict"] == "Uncertain"
        assert len(fake_get.calls) == 1

    def test_url_timeout(self, client, fake_get):
        fake_get.error = requests.exceptions.ConnectTimeout("timed out")
        resp = client.post("/api/detect", json={"url": "https://slow.example.com"})
        assert resp.status_code == 400
        assert resp.json() == {"error": "Request timeout - the website took too long to respond"}
        assert "verdict" not in resp.json()

    def test_invalid_url(self, client, fake_get):
        resp = client.post("/api/detect", json={"url": "not a url"})
        assert resp.status_code == 400
        assert resp.json() == {"error": "Invalid URL format"}
        assert fake_get.calls == []

    def test_upstream_status(self, client, fake_get):
        fake_get.response = make_response("", status_code=503)
        resp = client.post("/api/detect", json={"url": "https://example.com"})
        assert resp.status_code == 400
        assert resp.json() == {"error": "Failed to fetch content from URL"}

    def test_transport_failure(self, client, fake_get):
        fake_get.error = requests.exceptions.ConnectionError("dns")
        resp = client.post("/api/detect", json={"url": "https://example.com"})
        assert resp.status_code == 400
        assert resp.json() == {"error": "Failed to fetch or parse URL content"}

    def test_malformed_remote_response(self, client, monkeypatch):
        monkeypatch.setattr(Config, "CLASSIFIER", "remote")
        monkeypatch.setattr(pipeline, "get_remote_classifier", lambda: _remote("I think it's fake"))
        resp = client.post("/api/detect", json={"text": "Some article"})
        assert resp.status_code == 500
        assert resp.json() == {"error": "Invalid response from AI"}

    def test_remote_without_key(self, client, monkeypatch):
        monkeypatch.setattr(Config, "CLASSIFIER", "remote")
        monkeypatch.setattr(Config, "OPENAI_KEY", None)
        resp = client.post("/api/detect", json={"text": "Some article"})
        assert resp.status_code == 500
        assert resp.json() == {"error": "API key not configured"}

    def test_unexpected_fault_is_internal_error(self, client, monkeypatch):
        def boom(text):
            raise RuntimeError("secret internal detail")

        monkeypatch.setattr(pipeline, "analyze_content", boom)
        resp = client.post("/api/detect", json={"text": "Some article"})
        assert resp.status_code == 500
        assert resp.json() == {"error": "Internal server error"}
