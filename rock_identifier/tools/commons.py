"""
Wikimedia Commons Image Tool
위키미디어 공용 암석 이미지 검색 도구
"""

import logging
from typing import Any, Dict, List

from ..config import get_source_settings
from .base import LookupResult, safe_get_json

logger = logging.getLogger(__name__)

IMAGE_EXTENSIONS = (".jpg", ".jpeg", ".png")


def _commons_url() -> str:
    return get_source_settings().get("commons_api", "https://commons.wikimedia.org/w/api.php")


def _is_image_file(title: str) -> bool:
    lowered = title.lower()
    return title.startswith("File:") and any(ext in lowered for ext in IMAGE_EXTENSIONS)


def fetch_image_url(file_title: str) -> LookupResult:
    """파일 제목 → 원본 이미지 URL"""
    result = safe_get_json("Commons image info", _commons_url(), params={
        "action": "query",
        "titles": file_title,
        "prop": "imageinfo",
        "iiprop": "url",
        "format": "json",
    })
    if not result.ok:
        return result

    pages = ((result.value or {}).get("query") or {}).get("pages") or {}
    for page in pages.values():
        info = page.get("imageinfo") or []
        if info and info[0].get("url"):
            return LookupResult.success(info[0]["url"])

    return LookupResult.failure(f"no image url for {file_title}")


def fetch_rock_images(rock_name: str, limit: int = 5) -> LookupResult:
    """
    암석 이미지 검색

    Returns:
        LookupResult with value {"images": [{"url", "title", "description"}, ...]}.
        Images whose URL lookup fails are skipped.
    """
    search = safe_get_json("Commons search", _commons_url(), params={
        "action": "query",
        "list": "search",
        "srsearch": f"{rock_name} rock geology",
        "srnamespace": 6,
        "format": "json",
        "srlimit": limit,
    }, fallback={"images": []})
    if not search.ok:
        return search

    images: List[Dict[str, Any]] = []
    for hit in ((search.value or {}).get("query") or {}).get("search") or []:
        title = hit.get("title", "")
        if not _is_image_file(title):
            continue

        url = fetch_image_url(title)
        if url.ok:
            images.append({
                "url": url.value,
                "title": title.replace("File:", "", 1),
                "description": hit.get("snippet", ""),
            })

    logger.info("Found %d Commons images for %s", len(images), rock_name)
    return LookupResult.success({"images": images})
