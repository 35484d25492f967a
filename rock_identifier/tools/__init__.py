"""
Rock Identifier Tools
외부 데이터 소스 조회 도구들 (모두 LookupResult 반환, 예외를 던지지 않음)
"""

from .base import LookupResult
from .commons import fetch_rock_images
from .geonames import fetch_geological_features, location_labels
from .llm import ask_geologist
from .wikipedia import (
    fetch_page_summary,
    fetch_related_pages,
    fetch_scientific_data,
    search_geology_summary,
)

__all__ = [
    "LookupResult",
    "fetch_rock_images",
    "fetch_geological_features",
    "location_labels",
    "ask_geologist",
    "fetch_page_summary",
    "fetch_related_pages",
    "fetch_scientific_data",
    "search_geology_summary",
]
