"""
Tests for the RandomUser HTTP client.
"""

import asyncio
import json

import pytest
import requests

from user_cards import api_client, config
from user_cards.errors import FetchError


class TestFetchUsers:
    def test_returns_results_unmodified(self, monkeypatch, fake_response, raw_users):
        calls = []

        def fake_get(url, timeout=None):
            calls.append((url, timeout))
            return fake_response({"results": raw_users, "info": {"results": 3}})

        monkeypatch.setattr(api_client.requests, "get", fake_get)

        users = api_client.fetch_users()

        assert users == raw_users
        assert calls == [(config.API_URL, config.RANDOMUSER_TIMEOUT)]

    def test_default_endpoint(self):
        assert config.build_api_url("GB", 10, "https://randomuser.me/api") == \
            "https://randomuser.me/api?nat=GB&results=10"

    def test_custom_url_and_timeout(self, monkeypatch, fake_response):
        seen = {}

        def fake_get(url, timeout=None):
            seen.update(url=url, timeout=timeout)
            return fake_response({"results": []})

        monkeypatch.setattr(api_client.requests, "get", fake_get)

        assert api_client.fetch_users(timeout=2.5, url="http://localhost/api") == []
        assert seen == {"url": "http://localhost/api", "timeout": 2.5}

    def test_http_error_raises_fetch_error(self, monkeypatch, fake_response):
        monkeypatch.setattr(api_client.requests, "get", lambda url, timeout=None: fake_response(status_code=503))

        with pytest.raises(FetchError, match="failed") as excinfo:
            api_client.fetch_users()
        assert isinstance(excinfo.value.__cause__, requests.HTTPError)

    def test_network_error_raises_fetch_error(self, monkeypatch):
        def boom(url, timeout=None):
            raise requests.ConnectionError("no route to host")

        monkeypatch.setattr(api_client.requests, "get", boom)

        with pytest.raises(FetchError):
            api_client.fetch_users()

    def test_non_json_body_raises_fetch_error(self, monkeypatch, fake_response):
        err = json.JSONDecodeError("Expecting value", "<html>", 0)
        monkeypatch.setattr(api_client.requests, "get", lambda url, timeout=None: fake_response(json_error=err))

        with pytest.raises(FetchError, match="not JSON"):
            api_client.fetch_users()

    def test_missing_results_raises_fetch_error(self, monkeypatch, fake_response):
        monkeypatch.setattr(api_client.requests, "get",
                            lambda url, timeout=None: fake_response({"error": "Uh oh"}))

        with pytest.raises(FetchError, match="results"):
            api_client.fetch_users()


class TestFetchUsersAsync:
    def test_awaits_same_request(self, monkeypatch, fake_response, raw_users):
        monkeypatch.setattr(api_client.requests, "get",
                            lambda url, timeout=None: fake_response({"results": raw_users}))

        users = asyncio.run(api_client.fetch_users_async())

        assert [u["email"] for u in users] == ["ann@x.com", "bob@x.com", "cara@x.com"]

    def test_failure_propagates(self, monkeypatch, fake_response):
        monkeypatch.setattr(api_client.requests, "get", lambda url, timeout=None: fake_response(status_code=500))

        with pytest.raises(FetchError):
            asyncio.run(api_client.fetch_users_async())
