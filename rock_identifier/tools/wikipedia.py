"""
Wikipedia Lookup Tool
위키백과 요약/관련 문서 조회 도구
"""

import logging
from typing import Any, Dict
from urllib.parse import quote

from ..config import get_source_settings
from .base import LookupResult, safe_get_json

logger = logging.getLogger(__name__)


def _rest_url(path: str, title: str) -> str:
    base = get_source_settings().get("wikipedia_api", "https://en.wikipedia.org/api/rest_v1")
    return f"{base.rstrip('/')}/page/{path}/{quote(title, safe='')}"


def fetch_page_summary(title: str) -> LookupResult:
    """
    페이지 요약 조회

    Returns:
        LookupResult whose value is
        {
            "title": str,
            "extract": str or None,
            "extract_html": str,
            "thumbnail": str or None,
            "timestamp": str or None,
            "page_url": str or None,
        }
        or None when the page could not be fetched.
    """
    result = safe_get_json("Wikipedia summary", _rest_url("summary", title))
    if not result.ok:
        return result

    data = result.value
    if not isinstance(data, dict):
        return LookupResult.failure("unexpected summary payload")

    return LookupResult.success({
        "title": data.get("title", title),
        "extract": data.get("extract"),
        "extract_html": data.get("extract_html", ""),
        "thumbnail": (data.get("thumbnail") or {}).get("source"),
        "timestamp": data.get("timestamp"),
        "page_url": ((data.get("content_urls") or {}).get("desktop") or {}).get("page"),
    })


def fetch_related_pages(title: str, limit: int = 5) -> LookupResult:
    """관련 문서 목록 조회 (최대 limit개)"""
    result = safe_get_json("Wikipedia related", _rest_url("related", title), fallback=[])
    if not result.ok:
        return result

    pages = (result.value or {}).get("pages") or []
    related = [
        {
            "title": page.get("title"),
            "description": page.get("description"),
            "url": ((page.get("content_urls") or {}).get("desktop") or {}).get("page"),
        }
        for page in pages[:limit]
    ]
    return LookupResult.success(related)


def fetch_scientific_data(rock_name: str, rock_type: str) -> LookupResult:
    """
    암석의 과학적 요약 데이터 조회

    The value is always a usable scientific-data dict: when the summary call
    fails it carries only the templated summary, and ok is False.
    """
    summary = fetch_page_summary(rock_name)
    if not summary.ok:
        return LookupResult.failure(
            summary.error or "summary unavailable",
            {
                "summary": f"{rock_name} is a {rock_type} rock.",
                "relatedTopics": [],
            },
        )

    page = summary.value
    related = fetch_related_pages(rock_name)
    if not related.ok:
        logger.info("No related topics for %s", rock_name)
    data: Dict[str, Any] = {
        "summary": page.get("extract") or f"{rock_name} is a {rock_type} rock with unique geological characteristics.",
        "fullText": page.get("extract_html") or "",
        "image": page.get("thumbnail"),
        "relatedTopics": related.value_or([]),
        "lastModified": page.get("timestamp"),
        "pageUrl": page.get("page_url"),
    }
    return LookupResult.success(data)


def search_geology_summary(query: str) -> LookupResult:
    """질문 텍스트 + ' geology' 로 요약 조회 (챗봇 출처용)"""
    return fetch_page_summary(f"{query} geology")
