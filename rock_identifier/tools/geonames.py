"""
GeoNames Feature Tool
GeoNames 지형 피처 조회 도구
"""

from typing import Any, Dict, List, Optional

from ..config import get_source_settings
from .base import LookupResult, safe_get_json


def empty_features() -> Dict[str, List[Any]]:
    """빈 조회 결과 (호출마다 새 리스트)"""
    return {"features": [], "locations": []}


def fetch_geological_features(rock_name: str, username: Optional[str] = None,
                              max_rows: int = 10) -> LookupResult:
    """
    암석명과 관련된 지형 피처(featureClass=T) 조회

    Returns:
        LookupResult with value
        {
            "features": list (raw GeoNames records),
            "locations": [{"name", "country", "coordinates", "type"}, ...]
        }
    """
    settings = get_source_settings()
    username = username or settings.get("geonames_username")
    if not username:
        return LookupResult.failure("GeoNames username not configured", empty_features())

    base = settings.get("geonames_api", "http://api.geonames.org").rstrip("/")
    result = safe_get_json("GeoNames", f"{base}/searchJSON", params={
        "q": rock_name,
        "featureClass": "T",
        "username": username,
        "maxRows": max_rows,
    }, fallback=empty_features())
    if not result.ok:
        return result

    features = (result.value or {}).get("geonames") or []
    return LookupResult.success({
        "features": features,
        "locations": [
            {
                "name": feature.get("name"),
                "country": feature.get("countryName"),
                "coordinates": [feature.get("lat"), feature.get("lng")],
                "type": feature.get("fclName"),
            }
            for feature in features
        ],
    })


def location_labels(locations: List[Dict[str, Any]]) -> List[str]:
    """피처 목록 → "이름, 국가" 문자열 목록"""
    labels = []
    for location in locations:
        name = location.get("name")
        if not name:
            continue
        country = location.get("country")
        labels.append(f"{name}, {country}" if country else name)
    return labels
