"""
Conversational Front-End
식별 결과에 대한 질의응답

Two entry points:

- answer_question(): follow-up questions about an identified specimen.
  Uses a fetched scientific summary when available, otherwise local
  templates filled from the EnrichedRock fields.
- chat_reply(): the general geology chatbot. Collects reference sources,
  then answers from the specimen context, the language model, or local
  templates. Always returns a reply.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional

from .models import EnrichedRock, RockType
from .tools.base import LookupResult
from .tools.llm import ask_geologist
from .tools.wikipedia import fetch_scientific_data, search_geology_summary

logger = logging.getLogger(__name__)


DATA_SOURCES: Dict[str, Dict[str, str]] = {
    "usgs": {
        "name": "United States Geological Survey",
        "url": "https://www.usgs.gov/",
        "description": "Official geological data and mineral information from the US government",
    },
    "mindat": {
        "name": "Mindat.org",
        "url": "https://www.mindat.org/",
        "description": "Comprehensive mineral database with detailed properties and locations",
    },
    "geonames": {
        "name": "GeoNames",
        "url": "https://www.geonames.org/",
        "description": "Geographical database with rock formation locations",
    },
    "wikipedia": {
        "name": "Wikipedia",
        "url": "https://en.wikipedia.org/",
        "description": "Open encyclopedia with geological articles",
    },
    "dataGov": {
        "name": "Data.gov Geospatial Datasets",
        "url": "https://catalog.data.gov/dataset/?metadata_type=geospatial",
        "description": "US government open geospatial datasets including geological surveys",
    },
}

FALLBACK_MESSAGE = (
    "I'm here to help with geological questions! I can provide information about rocks, "
    "minerals, formations, and geological processes. What would you like to know?"
)

SUGGESTED_QUESTIONS = [
    "How was this rock formed?",
    "Where can I find more specimens?",
    "What makes this rock unique?",
    "How old might this specimen be?",
]

ScientificFetcher = Callable[[str, str], LookupResult]


def _mentions(text: str, *words: str) -> bool:
    return any(word in text for word in words)


def _is_formation_question(q: str) -> bool:
    return "how" in q and _mentions(q, "form", "creat")


def _is_location_question(q: str) -> bool:
    return "where" in q and _mentions(q, "find", "locat")


def greeting(rock: EnrichedRock) -> str:
    """대화 시작 메시지"""
    return (
        f"Hello! I'm your geological expert. I see you've identified {rock.name}, "
        f"a fascinating {rock.rock_type.value} rock! I have access to comprehensive "
        "geological databases and can answer any questions about this specimen or "
        "geology in general. What would you like to know?"
    )


# =============================================================================
# Specimen questions
# =============================================================================

def answer_from_data(question: str, rock: EnrichedRock, scientific: Dict[str, Any]) -> str:
    """조회된 과학 요약으로 답변 생성"""
    q = question.lower()
    summary = scientific.get("summary")
    page_url = scientific.get("pageUrl")

    if _is_formation_question(q):
        return (
            f"Based on current geological research: {summary or rock.formation}\n\n"
            f"For more detailed information, you can explore: {page_url or 'geological databases'}"
        )

    if _is_location_question(q):
        excerpt = summary[:200] if summary else rock.formation
        return (
            f"According to geological surveys, {rock.name} can be found in various locations worldwide.\n\n"
            f"The scientific literature indicates: {excerpt}...\n\n"
            "For current geological feature locations, I recommend checking local geological surveys."
        )

    answer = f"Based on geological databases: {summary or f'{rock.name} is a {rock.rock_type.value} rock with unique properties.'}"
    if page_url:
        answer += f"\n\nLearn more: {page_url}"
    return answer


def _outcrop_hint(rock_type: RockType) -> str:
    if rock_type == RockType.IGNEOUS:
        return "volcanic activity or plutonic intrusions"
    if rock_type == RockType.METAMORPHIC:
        return "mountain-building events or contact zones"
    return "sedimentary basins and depositional environments"


def _age_hint(rock_type: RockType) -> str:
    if rock_type == RockType.IGNEOUS:
        return "from recent volcanic activity to billions of years old"
    if rock_type == RockType.METAMORPHIC:
        return "typically very ancient, often Precambrian"
    return "ranging from recent deposits to hundreds of millions of years old"


def answer_locally(question: str, rock: EnrichedRock) -> str:
    """외부 데이터 없이 EnrichedRock 필드로 답변 생성"""
    q = question.lower()
    name = rock.name
    rock_type = rock.rock_type

    if _is_formation_question(q):
        minerals = ", ".join(rock.composition[:3]) or "its constituent minerals"
        return (
            f"Great question about {name} formation! {rock.formation} This process typically "
            "occurs over millions of years under specific temperature and pressure conditions. "
            f"The minerals present in {name} - {minerals} - crystallized during this formation process."
        )

    if _is_location_question(q):
        places = ", ".join(rock.locations[:3]) or "many regions worldwide"
        return (
            f"You can commonly find {name} in these locations: {places}. These areas have the "
            f"right geological conditions for {rock_type.value} rock formation. Look for outcrops "
            f"in areas with {_outcrop_hint(rock_type)}."
        )

    if _mentions(q, "age", "old"):
        return (
            f"{name} specimens can vary in age {_age_hint(rock_type)}. The age depends on when "
            "the specific geological processes occurred in that location. Dating techniques like "
            "radiometric dating of zircon crystals or stratigraphic relationships help determine "
            "precise ages."
        )

    if _mentions(q, "mineral", "composition"):
        return (
            f"The mineral composition of {name} includes: {', '.join(rock.composition) or 'varied minerals'}. "
            "Each mineral contributes to the rock's properties - hardness, color, cleavage patterns, "
            "and weathering resistance."
        )

    if _mentions(q, "use", "purpose"):
        return (
            f"{name} has several important applications: {'; '.join(rock.uses) or 'various industrial uses'}. "
            "Its physical and chemical properties make it valuable for these purposes."
        )

    return (
        f"That's an interesting question about {name}! As a {rock_type.value} rock, it has unique "
        "characteristics. Would you like me to elaborate on any particular aspect of this rock's "
        "formation, composition, or geological significance?"
    )


def answer_question(
    question: str,
    rock: EnrichedRock,
    fetch_scientific: Optional[ScientificFetcher] = fetch_scientific_data,
) -> str:
    """
    표본에 대한 질문에 답변

    Tries one scientific-summary lookup for the rock; on failure answers
    from the local templates. Always returns a non-empty string.
    """
    if fetch_scientific is not None:
        result = fetch_scientific(rock.name, rock.rock_type.value)
        if result.ok and result.value:
            return answer_from_data(question, rock, result.value)
        logger.info("Scientific data unavailable for %s; answering locally", rock.name)

    return answer_locally(question, rock)


# =============================================================================
# General chatbot
# =============================================================================

@dataclass
class ChatReply:
    message: str
    sources: List[Dict[str, Any]] = field(default_factory=list)
    timestamp: str = field(default_factory=lambda: datetime.now(timezone.utc).isoformat())
    rock_context: Optional[Dict[str, Any]] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "message": self.message,
            "sources": self.sources,
            "timestamp": self.timestamp,
            "rockContext": self.rock_context,
        }


def _data_gov_source(title: str, summary: str) -> Dict[str, Any]:
    return {
        "source": dict(DATA_SOURCES["dataGov"]),
        "title": title,
        "summary": summary,
        "url": DATA_SOURCES["dataGov"]["url"],
    }


def gather_sources(message: str,
                   search: Callable[[str], LookupResult] = search_geology_summary) -> List[Dict[str, Any]]:
    """질문과 관련된 출처 수집 (위키백과 + Data.gov 참조)"""
    sources = []

    result = search(message)
    if result.ok and result.value:
        sources.append({
            "source": dict(DATA_SOURCES["wikipedia"]),
            "title": result.value.get("title"),
            "summary": result.value.get("extract"),
            "url": result.value.get("page_url"),
        })

    sources.append(_data_gov_source(
        "US Geospatial Datasets",
        "Access comprehensive geological and geospatial datasets from US government agencies, "
        "including mineral surveys, geological formations, and environmental data.",
    ))
    return sources


def general_geology_response(prompt: str, context: str = "") -> str:
    """일반 지질학 질문용 로컬 답변"""
    q = prompt.lower()

    if "igneous" in q:
        return (
            "Igneous rocks form from the cooling and solidification of magma or lava. Examples "
            "include granite (intrusive) and basalt (extrusive). These rocks are characterized by "
            "their crystalline structure and mineral composition."
        )
    if "sedimentary" in q:
        return (
            "Sedimentary rocks form from the accumulation and cementation of sediments. Common types "
            "include sandstone, limestone, and shale. They often contain fossils and show layered "
            "structures called strata."
        )
    if "metamorphic" in q:
        return (
            "Metamorphic rocks form when existing rocks are subjected to high pressure and temperature. "
            "Examples include marble (from limestone) and gneiss (from granite). They show foliation "
            "and mineral recrystallization."
        )
    if "mineral" in q:
        return (
            "Minerals are naturally occurring inorganic substances with specific chemical compositions "
            "and crystal structures. They're the building blocks of rocks and can be identified by "
            "properties like hardness, color, and luster."
        )

    suffix = (
        f"From the provided sources: {context}" if context
        else "I recommend checking the referenced sources for detailed information."
    )
    return (
        "Based on geological knowledge and available data sources, I can help you understand rocks "
        f"and minerals. {suffix}"
    )


def fallback_reply() -> ChatReply:
    return ChatReply(
        message=FALLBACK_MESSAGE,
        sources=[_data_gov_source(
            "US Geological Datasets",
            "Comprehensive geological and geospatial data from US government sources",
        )],
    )


def chat_reply(
    message: str,
    rock_context: Optional[Dict[str, Any]] = None,
    search: Callable[[str], LookupResult] = search_geology_summary,
    ask: Optional[Callable[[str, str], LookupResult]] = ask_geologist,
    fetch_scientific: Optional[ScientificFetcher] = fetch_scientific_data,
) -> ChatReply:
    """
    챗봇 응답 생성 (항상 응답 반환)

    Args:
        message: 사용자 메시지
        rock_context: 식별된 암석 (EnrichedRock.to_dict() 형태), 없으면 일반 질문
        search: 출처 검색 함수
        ask: LLM 답변 함수 (None이면 로컬 답변만)
        fetch_scientific: 표본 질문용 과학 요약 조회 함수
    """
    try:
        sources = gather_sources(message, search)
        context = "\n\n".join(
            f"{s['source']['name']}: {s['summary']}" for s in sources if s.get("summary")
        )

        if rock_context:
            rock = EnrichedRock.from_dict(rock_context)
            answer = answer_question(message, rock, fetch_scientific)
        else:
            answer = None
            if ask is not None:
                llm = ask(message, context)
                answer = llm.value if llm.ok else None
            if not answer:
                answer = general_geology_response(message, context)

        return ChatReply(message=answer, sources=sources, rock_context=rock_context)

    except Exception:
        logger.exception("Chatbot failed; returning fallback reply")
        return fallback_reply()
