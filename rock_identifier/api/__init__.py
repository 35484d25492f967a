"""
Rock Identifier API
FastAPI 기반 REST API
"""

from .server import create_app
from .schemas import (
    ChatbotRequest,
    ChatbotResponse,
    EnrichedRockResponse,
    GeologicalDataRequest,
    IdentifyRequest,
)

__all__ = [
    "create_app",
    "ChatbotRequest",
    "ChatbotResponse",
    "EnrichedRockResponse",
    "GeologicalDataRequest",
    "IdentifyRequest",
]
