"""
API Routes for Rock Identifier
API 엔드포인트 정의
"""

import asyncio
import logging
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, timezone
from functools import partial

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from .. import __version__
from ..chat import answer_question, chat_reply, fallback_reply
from ..geological_data import fetch_geological_data
from ..models import EnrichedRock
from ..reference_data import ROCK_CATALOG
from ..workflow import run_workflow
from .schemas import (
    ChatbotRequest,
    ChatbotResponse,
    EnrichedRockResponse,
    ErrorResponse,
    GeologicalDataRequest,
    HealthResponse,
    IdentifyRequest,
    QuestionRequest,
    QuestionResponse,
    RockInfo,
    RocksResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()

# 블로킹 조회(HTTP, 워크플로우) 실행용
_executor = ThreadPoolExecutor(max_workers=8)


async def _run_blocking(fn, *args, **kwargs):
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(_executor, partial(fn, *args, **kwargs))


@router.get("/health", response_model=HealthResponse, tags=["System"])
async def health_check():
    """서비스 상태 확인"""
    return HealthResponse(
        status="healthy",
        version=__version__,
        timestamp=datetime.now(),
    )


@router.get("/rocks", response_model=RocksResponse, tags=["Rocks"])
async def list_rocks():
    """식별 가능한 암석 목록 조회"""
    return RocksResponse(rocks=[
        RockInfo(name=name, type=entry["type"], subtype=entry["subtype"])
        for name, entry in ROCK_CATALOG.items()
    ])


@router.post(
    "/identify-rock",
    response_model=EnrichedRockResponse,
    response_model_exclude_none=True,
    responses={500: {"model": ErrorResponse}},
    tags=["Identification"],
)
async def identify_rock(request: IdentifyRequest):
    """
    암석 식별

    설명 텍스트에서 특징을 추출하고 분류한 뒤 참조 데이터를 결합합니다.
    """
    image_analysis = request.image_analysis.model_dump() if request.image_analysis else None

    try:
        result = await _run_blocking(run_workflow, request.description, image_analysis)
    except Exception:
        logger.exception("Error in rock identification")
        result = {}

    if result.get("status") != "completed":
        return JSONResponse(status_code=500, content={"error": "Failed to identify rock"})

    return result["rock"]


@router.post("/geological-data", responses={500: {"model": ErrorResponse}}, tags=["Reference Data"])
async def geological_data(request: GeologicalDataRequest):
    """
    외부 지질 데이터 조회

    query: geological_features / rock_images / scientific_data / (생략 시 전체 조회)
    """
    try:
        return await fetch_geological_data(
            request.rock_name,
            request.rock_type,
            request.query,
            executor=_executor,
        )
    except Exception:
        logger.exception("Error fetching geological data")
        return JSONResponse(status_code=500, content={"error": "Failed to fetch geological data"})


@router.post("/rock-chatbot", response_model=ChatbotResponse, tags=["Chat"])
async def rock_chatbot(request: ChatbotRequest):
    """
    지질학 챗봇

    내부 조회가 실패해도 항상 200과 함께 기본 안내 메시지를 반환합니다.
    """
    logger.info("Processing chatbot request: %s", request.message)
    try:
        reply = await _run_blocking(chat_reply, request.message, request.rock_context)
    except Exception:
        logger.exception("Error in rock chatbot")
        reply = fallback_reply()

    return reply.to_dict()


@router.post("/chat", response_model=QuestionResponse, tags=["Chat"])
async def ask_about_rock(request: QuestionRequest):
    """식별된 표본에 대한 후속 질문"""
    try:
        rock = EnrichedRock.from_dict(request.rock)
    except (ValueError, TypeError) as e:
        return JSONResponse(status_code=400, content={"error": "Invalid rock context", "detail": str(e)})

    message = await _run_blocking(answer_question, request.question, rock)
    return QuestionResponse(message=message, timestamp=datetime.now(timezone.utc))
