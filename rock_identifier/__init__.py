"""
Rock Identifier Agent
LangGraph + FastAPI 기반 암석 식별 에이전트

사용 예시:
    from rock_identifier import identify_rock, enrich_rock, answer_question

    identification = identify_rock("porous light volcanic foam")
    rock = enrich_rock(identification)
    print(answer_question("How was this rock formed?", rock))

    # 또는 워크플로우 직접 실행
    from rock_identifier.workflow import run_workflow
    result = run_workflow(description="dark fine-grained rock")
"""

__version__ = "0.1.0"

from .characteristics import extract_characteristics
from .classifier import classify_rock, identify_rock
from .enrichment import enrich_offline, enrich_rock
from .chat import answer_question, chat_reply
from .models import Characteristics, Classification, EnrichedRock, Identification, RockType
from .reference_data import ROCK_CATALOG, get_catalog

__all__ = [
    "extract_characteristics",
    "classify_rock",
    "identify_rock",
    "enrich_rock",
    "enrich_offline",
    "answer_question",
    "chat_reply",
    "Characteristics",
    "Classification",
    "EnrichedRock",
    "Identification",
    "RockType",
    "ROCK_CATALOG",
    "get_catalog",
]
