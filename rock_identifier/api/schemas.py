"""
Pydantic Schemas for Rock Identifier API
API 요청/응답 스키마 정의

Request bodies use the camelCase field names of the web client.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ImageAnalysisPayload(BaseModel):
    """이미지 분석 힌트 (전달만 하며 추론에 사용하지 않음)"""
    colors: List[str] = Field(default_factory=list)
    texture: Optional[str] = None
    patterns: List[str] = Field(default_factory=list)


class IdentifyRequest(BaseModel):
    """암석 식별 요청 스키마"""
    model_config = ConfigDict(populate_by_name=True)

    description: Optional[str] = Field(
        default=None,
        description="암석에 대한 자유 텍스트 설명",
        examples=["dark fine-grained volcanic rock"],
    )
    image_analysis: Optional[ImageAnalysisPayload] = Field(
        default=None,
        alias="imageAnalysis",
        description="이미지 분석 힌트",
    )


class ClassificationOut(BaseModel):
    group: str
    family: Optional[str] = None
    series: Optional[str] = None


class EnrichedRockResponse(BaseModel):
    """식별 + 참조 데이터 응답 스키마"""
    model_config = ConfigDict(populate_by_name=True)

    name: str
    type: str
    confidence: int = Field(ge=0, le=100)
    formation: str
    subtype: str
    texture_type: str = Field(alias="textureType")
    locations: List[str]
    composition: List[str]
    uses: List[str]
    classification: ClassificationOut
    fun_facts: List[str] = Field(alias="funFacts")
    image: Optional[str] = None


class GeologicalDataRequest(BaseModel):
    """외부 지질 데이터 조회 요청 스키마"""
    model_config = ConfigDict(populate_by_name=True)

    rock_name: str = Field(alias="rockName", min_length=1, description="암석명")
    rock_type: str = Field(default="igneous", alias="rockType", description="암석 성인")
    query: Optional[str] = Field(
        default=None,
        description="geological_features / rock_images / scientific_data / (생략 시 전체)",
    )


class ChatbotRequest(BaseModel):
    """챗봇 요청 스키마"""
    model_config = ConfigDict(populate_by_name=True)

    message: str = Field(min_length=1)
    rock_context: Optional[Dict[str, Any]] = Field(default=None, alias="rockContext")


class ChatbotResponse(BaseModel):
    """챗봇 응답 스키마"""
    model_config = ConfigDict(populate_by_name=True)

    message: str
    sources: List[Dict[str, Any]] = Field(default_factory=list)
    timestamp: str
    rock_context: Optional[Dict[str, Any]] = Field(default=None, alias="rockContext")


class QuestionRequest(BaseModel):
    """식별된 표본에 대한 질문 요청 스키마"""
    question: str = Field(min_length=1)
    rock: Dict[str, Any] = Field(description="EnrichedRock JSON")


class QuestionResponse(BaseModel):
    message: str
    timestamp: datetime


class RockInfo(BaseModel):
    """카탈로그 암석 정보"""
    name: str
    type: str
    subtype: str


class RocksResponse(BaseModel):
    rocks: List[RockInfo]


class ErrorResponse(BaseModel):
    """에러 응답 스키마"""
    error: str = Field(description="에러 메시지")
    detail: Optional[str] = Field(default=None, description="상세 에러 정보")


class HealthResponse(BaseModel):
    """헬스체크 응답 스키마"""
    status: str = Field(default="healthy", description="서비스 상태")
    version: str = Field(description="API 버전")
    timestamp: datetime = Field(description="현재 시간")
