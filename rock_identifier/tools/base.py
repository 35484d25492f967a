"""
Lookup Result & HTTP Helper
외부 조회 공통 도구

External lookups never raise: they return a LookupResult tagged ok/failed,
carrying either the fetched payload or the caller's fallback value.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

import requests

from ..config import get_http_settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LookupResult:
    """외부 조회 결과 (성공 payload | fallback payload)"""
    ok: bool
    value: Any = None
    error: Optional[str] = None

    @classmethod
    def success(cls, value: Any) -> "LookupResult":
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, error: str, fallback: Any = None) -> "LookupResult":
        return cls(ok=False, value=fallback, error=error)

    def value_or(self, default: Any) -> Any:
        return self.value if self.ok else default


def get_json(url: str, params: Optional[Dict[str, Any]] = None) -> Any:
    """
    GET 요청 후 JSON 반환

    Raises:
        requests.RequestException: network error, timeout or non-2xx status
        ValueError: body is not valid JSON
    """
    settings = get_http_settings()
    response = requests.get(
        url,
        params=params,
        headers={"User-Agent": settings.get("user_agent", "rock-identifier")},
        timeout=float(settings.get("timeout", 10.0)),
    )
    response.raise_for_status()
    return response.json()


def safe_get_json(source: str, url: str, params: Optional[Dict[str, Any]] = None,
                  fallback: Any = None) -> LookupResult:
    """get_json을 한 번 호출하고 실패 시 fallback을 담은 LookupResult 반환 (재시도 없음)"""
    try:
        return LookupResult.success(get_json(url, params=params))
    except (requests.RequestException, ValueError) as e:
        logger.warning("%s lookup failed: %s", source, e)
        return LookupResult.failure(str(e), fallback)
