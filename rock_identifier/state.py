"""
Rock Identifier State Definition
LangGraph 워크플로우 상태 정의
"""

from typing import Any, Dict, List, Optional, TypedDict

from .models import Characteristics, EnrichedRock, Identification


class ImageAnalysis(TypedDict, total=False):
    """이미지 분석 힌트 (추론 없음, 전달만)"""
    colors: List[str]
    texture: str
    patterns: List[str]


class FinalOutput(TypedDict, total=False):
    """최종 출력"""
    status: str
    task_id: str
    rock: Dict[str, Any]
    characteristics: Dict[str, Any]
    error: str
    timestamp: str


class RockIdentifierState(TypedDict, total=False):
    """
    Rock Identifier 워크플로우 상태

    각 노드가 자신의 단계 결과만 추가하며, 요청 하나의 수명 동안만 존재합니다.
    """
    # 기본 정보
    task_id: str
    description: Optional[str]
    image_analysis: Optional[ImageAnalysis]
    offline: bool

    # 특징 추출 단계
    characteristics: Optional[Characteristics]

    # 분류 단계
    identification: Optional[Identification]

    # 보강 단계
    enriched: Optional[EnrichedRock]

    # 최종 출력
    final_output: Optional[FinalOutput]

    # 에러 처리
    error: Optional[str]
    current_step: str
