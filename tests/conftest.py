"""
Shared fixtures
테스트 공통 설정: 설정 파일 격리, 실제 네트워크 차단
"""

import pytest
import requests

from rock_identifier import config


class FakeResponse:
    """requests.Response 대체 객체"""

    def __init__(self, payload=None, status_code=200):
        self.payload = payload
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")

    def json(self):
        if isinstance(self.payload, Exception):
            raise self.payload
        return self.payload


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch, tmp_path):
    """기본 설정 사용 + 모든 HTTP 요청을 연결 실패로 처리"""
    monkeypatch.setenv(config.CONFIG_ENV_VAR, str(tmp_path / "missing.yaml"))
    monkeypatch.delenv("ANTHROPIC_API_KEY", raising=False)
    monkeypatch.setattr(config, "_config_cache", None)

    def offline_get(url, params=None, headers=None, timeout=None):
        raise requests.ConnectionError(f"network disabled in tests: {url}")

    monkeypatch.setattr(requests, "get", offline_get)


@pytest.fixture
def fake_http(monkeypatch):
    """
    handler(url, params) -> FakeResponse 를 설치하고 호출 기록 반환

    Usage:
        calls = fake_http(lambda url, params: FakeResponse({...}))
    """
    def install(handler):
        calls = []

        def fake_get(url, params=None, headers=None, timeout=None):
            calls.append((url, params or {}))
            return handler(url, params or {})

        monkeypatch.setattr(requests, "get", fake_get)
        return calls

    return install
