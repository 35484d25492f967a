"""
LangGraph Workflow for Rock Identifier
암석 식별 워크플로우 정의

    START → extract_characteristics → classify → enrich → finalize → END
                       └──────────────┴──────────┴→ error → END
"""

import logging
import uuid
from datetime import datetime
from typing import Any, Callable, Dict, Literal, Optional

from langgraph.graph import END, START, StateGraph

from .characteristics import extract_characteristics
from .classifier import classify_rock
from .enrichment import enrich_offline, enrich_rock
from .state import RockIdentifierState

logger = logging.getLogger(__name__)

STEP_ORDER = ["extract_characteristics", "classify", "enrich", "finalize"]


# =============================================================================
# Node Functions
# =============================================================================

def extract_characteristics_node(state: RockIdentifierState) -> Dict[str, Any]:
    """특징 추출 노드"""
    logger.info("[Step 1/4] Extracting characteristics")

    try:
        characteristics = extract_characteristics(
            state.get("description"),
            state.get("image_analysis"),
        )
    except Exception as e:
        logger.exception("Characteristic extraction failed")
        return {"current_step": "extract_characteristics", "error": str(e)}

    return {
        "characteristics": characteristics,
        "current_step": "extract_characteristics",
        "error": None,
    }


def classify_node(state: RockIdentifierState) -> Dict[str, Any]:
    """분류 노드"""
    logger.info("[Step 2/4] Classifying rock")

    try:
        identification = classify_rock(state["characteristics"])
    except Exception as e:
        logger.exception("Classification failed")
        return {"current_step": "classify", "error": str(e)}

    return {
        "identification": identification,
        "current_step": "classify",
        "error": None,
    }


def enrich_node(state: RockIdentifierState) -> Dict[str, Any]:
    """참조 데이터 보강 노드"""
    offline = state.get("offline", False)
    logger.info("[Step 3/4] Enriching identification%s", " (offline)" if offline else "")

    identification = state["identification"]
    try:
        enriched = enrich_offline(identification) if offline else enrich_rock(identification)
    except Exception as e:
        logger.exception("Enrichment failed")
        return {"current_step": "enrich", "error": str(e)}

    return {
        "enriched": enriched,
        "current_step": "enrich",
        "error": None,
    }


def finalize_node(state: RockIdentifierState) -> Dict[str, Any]:
    """최종 출력 생성 노드"""
    enriched = state["enriched"]
    logger.info(
        "[Step 4/4] Identified %s (%s, %d%%)",
        enriched.name, enriched.rock_type.value, enriched.identification.confidence,
    )

    return {
        "final_output": {
            "status": "completed",
            "task_id": state.get("task_id", ""),
            "rock": enriched.to_dict(),
            "characteristics": state["characteristics"].to_dict(),
            "timestamp": datetime.now().isoformat(),
        },
        "current_step": "finalize",
    }


def error_node(state: RockIdentifierState) -> Dict[str, Any]:
    """에러 처리 노드"""
    error = state.get("error") or "Unknown error"
    logger.error("Rock identification failed: %s", error)

    return {
        "final_output": {
            "status": "error",
            "task_id": state.get("task_id", ""),
            "error": error,
            "timestamp": datetime.now().isoformat(),
        },
        "current_step": "error",
    }


# =============================================================================
# Routing Functions
# =============================================================================

def _route_unless_error(next_step: str) -> Callable[[RockIdentifierState], str]:
    def route(state: RockIdentifierState) -> str:
        return "error" if state.get("error") else next_step
    route.__name__ = f"route_to_{next_step}"
    return route


route_after_extract = _route_unless_error("classify")
route_after_classify = _route_unless_error("enrich")
route_after_enrich = _route_unless_error("finalize")


# =============================================================================
# Workflow Creation
# =============================================================================

def create_workflow() -> StateGraph:
    """
    LangGraph 워크플로우 생성

    Returns:
        컴파일 전 StateGraph
    """
    workflow = StateGraph(RockIdentifierState)

    workflow.add_node("extract_characteristics", extract_characteristics_node)
    workflow.add_node("classify", classify_node)
    workflow.add_node("enrich", enrich_node)
    workflow.add_node("finalize", finalize_node)
    workflow.add_node("error", error_node)

    workflow.add_edge(START, "extract_characteristics")

    workflow.add_conditional_edges(
        "extract_characteristics",
        route_after_extract,
        {"classify": "classify", "error": "error"},
    )
    workflow.add_conditional_edges(
        "classify",
        route_after_classify,
        {"enrich": "enrich", "error": "error"},
    )
    workflow.add_conditional_edges(
        "enrich",
        route_after_enrich,
        {"finalize": "finalize", "error": "error"},
    )

    workflow.add_edge("finalize", END)
    workflow.add_edge("error", END)

    return workflow


_graph_instance = None


def get_graph():
    """컴파일된 그래프 싱글톤 반환 (상태는 요청마다 새로 생성)"""
    global _graph_instance
    if _graph_instance is None:
        _graph_instance = create_workflow().compile()
    return _graph_instance


def run_workflow(
    description: Optional[str] = None,
    image_analysis: Optional[Dict[str, Any]] = None,
    offline: bool = False,
    task_id: Optional[str] = None,
    progress_callback: Optional[Callable[[str], None]] = None,
) -> Dict[str, Any]:
    """
    워크플로우 실행

    Args:
        description: 암석 설명 텍스트
        image_analysis: 이미지 분석 힌트
        offline: True면 외부 조회 없이 정적 데이터만 사용
        task_id: 태스크 ID (기본값: UUID 생성)
        progress_callback: 각 노드 완료 시 호출되는 콜백 (step_name: str) -> None

    Returns:
        final_output 딕셔너리
    """
    graph = get_graph()

    initial_state: RockIdentifierState = {
        "task_id": task_id or str(uuid.uuid4()),
        "description": description,
        "image_analysis": image_analysis,
        "offline": offline,
        "error": None,
    }

    final_output: Dict[str, Any] = {}
    for chunk in graph.stream(initial_state):
        for node_name, state_update in chunk.items():
            if not isinstance(state_update, dict):
                continue
            step = state_update.get("current_step")
            if step and progress_callback:
                progress_callback(step)
            if state_update.get("final_output"):
                final_output = state_update["final_output"]

    return final_output
