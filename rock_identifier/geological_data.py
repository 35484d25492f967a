"""
Geological Data Service
암석별 외부 지질 데이터 조회 (지형 피처 / 이미지 / 과학 요약)

Lookups are blocking; they are pushed onto a thread pool and joined with
asyncio.gather(return_exceptions=True). A lookup that raises contributes its
empty value, so one failure never fails the others.
"""

import asyncio
import logging
from concurrent.futures import Executor
from datetime import datetime
from typing import Any, Callable, Dict, Optional, Sequence, Tuple

from .tools.base import LookupResult
from .tools.commons import fetch_rock_images
from .tools.geonames import empty_features, fetch_geological_features
from .tools.wikipedia import fetch_scientific_data

logger = logging.getLogger(__name__)

QUERY_FEATURES = "geological_features"
QUERY_IMAGES = "rock_images"
QUERY_SCIENTIFIC = "scientific_data"


def _empty_scientific(rock_name: str, rock_type: str) -> Dict[str, Any]:
    return {"summary": f"{rock_name} is a {rock_type} rock.", "relatedTopics": []}


def _unwrap(result: Any, fallback: Any) -> Any:
    """LookupResult/예외 → 응답 값 (예외나 빈 값이면 fallback)"""
    if isinstance(result, BaseException):
        logger.warning("Lookup raised: %r", result)
        return fallback
    if isinstance(result, LookupResult) and result.value is not None:
        return result.value
    return fallback


async def collect_all(
    calls: Sequence[Tuple[Callable[..., Any], Tuple[Any, ...]]],
    executor: Optional[Executor] = None,
) -> list:
    """블로킹 호출들을 동시에 실행하고 모두 모음 (개별 예외는 결과 자리에 그대로 남음)"""
    loop = asyncio.get_running_loop()
    tasks = [loop.run_in_executor(executor, fn, *args) for fn, args in calls]
    return await asyncio.gather(*tasks, return_exceptions=True)


async def fetch_geological_data(
    rock_name: str,
    rock_type: str,
    query: Optional[str] = None,
    executor: Optional[Executor] = None,
) -> Dict[str, Any]:
    """
    query 종류별 지질 데이터 조회

    Args:
        rock_name: 암석명
        rock_type: igneous / metamorphic / sedimentary
        query: geological_features / rock_images / scientific_data / 그 외(전체)
        executor: 블로킹 조회를 실행할 executor (None이면 기본 executor)

    Returns:
        geological_features → {"features", "locations"}
        rock_images → {"images"}
        scientific_data → scientific summary dict
        default → {"geologicalFeatures", "images", "scientificData", "metadata"}
    """
    if query == QUERY_FEATURES:
        (result,) = await collect_all([(fetch_geological_features, (rock_name,))], executor)
        return _unwrap(result, empty_features())

    if query == QUERY_IMAGES:
        (result,) = await collect_all([(fetch_rock_images, (rock_name,))], executor)
        return _unwrap(result, {"images": []})

    if query == QUERY_SCIENTIFIC:
        (result,) = await collect_all([(fetch_scientific_data, (rock_name, rock_type))], executor)
        return _unwrap(result, _empty_scientific(rock_name, rock_type))

    features, images, scientific = await collect_all([
        (fetch_geological_features, (rock_name,)),
        (fetch_rock_images, (rock_name,)),
        (fetch_scientific_data, (rock_name, rock_type)),
    ], executor)

    return {
        "geologicalFeatures": _unwrap(features, empty_features()),
        "images": _unwrap(images, {"images": []}).get("images", []),
        "scientificData": _unwrap(scientific, _empty_scientific(rock_name, rock_type)),
        "metadata": {
            "dataSource": "Multiple geological databases",
            "lastUpdated": datetime.now().isoformat(),
            "confidence": "varies by source",
        },
    }
