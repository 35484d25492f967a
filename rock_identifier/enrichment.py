"""
Enrichment Stage
식별 결과 + 참조 데이터 결합

Static tables supply composition, uses, classification and fun facts. One
Wikipedia summary call may replace the fun facts and add an image. A location
lookup may replace the default locations for the rock type. Lookup failures
are never surfaced.
"""

import logging
from typing import Callable, Optional

from . import reference_data
from .models import Classification, EnrichedRock, Identification
from .tools.base import LookupResult
from .tools.geonames import fetch_geological_features, location_labels
from .tools.wikipedia import fetch_page_summary

logger = logging.getLogger(__name__)

SummaryFetcher = Callable[[str], LookupResult]
LocationFetcher = Callable[[str], LookupResult]


def resolve_locations(identification: Identification,
                      fetch_locations: Optional[LocationFetcher] = fetch_geological_features):
    """위치 조회 결과가 있으면 사용, 없으면 성인별 기본 위치"""
    rock_type = identification.rock_type.value
    if fetch_locations is not None:
        result = fetch_locations(identification.name)
        labels = location_labels((result.value or {}).get("locations") or []) if result.ok else []
        if labels:
            return tuple(labels)
    return reference_data.get_default_locations(rock_type)


def enrich_rock(
    identification: Identification,
    fetch_summary: Optional[SummaryFetcher] = fetch_page_summary,
    fetch_locations: Optional[LocationFetcher] = fetch_geological_features,
) -> EnrichedRock:
    """
    식별 결과에 참조 데이터 결합

    Args:
        identification: 분류기 출력
        fetch_summary: 요약/썸네일 조회 함수 (None이면 외부 조회 생략)
        fetch_locations: 위치 조회 함수 (None이면 기본 위치 사용)

    Returns:
        EnrichedRock (외부 조회 실패 시 정적 데이터로 대체)
    """
    name = identification.name
    rock_type = identification.rock_type.value

    fun_facts = reference_data.get_fun_facts(name)
    image = None

    if fetch_summary is not None:
        summary = fetch_summary(name)
        if summary.ok and summary.value:
            extract = summary.value.get("extract") or (
                f"{name} is a type of rock with unique geological properties."
            )
            fun_facts = (extract,)
            image = summary.value.get("thumbnail")
        else:
            logger.info("Using static fun facts for %s (%s)", name, summary.error)

    return EnrichedRock(
        identification=identification,
        locations=resolve_locations(identification, fetch_locations),
        composition=reference_data.get_composition(name),
        uses=reference_data.get_uses(name),
        classification=Classification(**reference_data.get_classification(name, rock_type)),
        fun_facts=fun_facts,
        image=image,
    )


def enrich_offline(identification: Identification) -> EnrichedRock:
    """외부 조회 없이 정적 데이터만으로 결합"""
    return enrich_rock(identification, fetch_summary=None, fetch_locations=None)
