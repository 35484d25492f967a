"""
FastAPI Server for Rock Identifier
암석 식별 API 서버
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .. import __version__
from ..config import get_config
from ..logging_config import setup_logging
from .routes import router

logger = logging.getLogger(__name__)


async def _validation_error_handler(request: Request, exc: RequestValidationError):
    """잘못된 요청 본문 → 400 + 일반 에러 메시지"""
    logger.warning("Malformed request to %s: %s", request.url.path, exc.errors())
    return JSONResponse(
        status_code=400,
        content={"error": "Invalid request body", "detail": str(exc.errors())},
    )


def create_app() -> FastAPI:
    """
    FastAPI 앱 생성

    Returns:
        FastAPI 앱 인스턴스
    """
    app = FastAPI(
        title="Rock Identifier API",
        description="""
## 암석 식별 에이전트 API

설명 텍스트로 암석을 식별하고 공개 지질 데이터로 결과를 보강합니다.

### 주요 기능

- **암석 식별**: 규칙 기반 분류기로 암석명, 성인, 신뢰도 추정
- **참조 데이터**: 구성 광물, 용도, 분류 체계, 산지, 흥미로운 사실
- **외부 데이터**: Wikipedia 요약, Wikimedia Commons 이미지, GeoNames 지형
- **지질학자 챗봇**: 식별 결과에 대한 질의응답

### 사용 예시

```python
import requests

rock = requests.post(
    "http://localhost:8000/api/v1/identify-rock",
    json={"description": "dark fine-grained volcanic rock"},
).json()

answer = requests.post(
    "http://localhost:8000/api/v1/chat",
    json={"question": "How was this rock formed?", "rock": rock},
).json()
print(answer["message"])
```
        """,
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # CORS 설정 (preflight OPTIONS 요청도 처리)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RequestValidationError, _validation_error_handler)

    @app.on_event("startup")
    async def startup_logging():
        """서버 시작 시 로깅 설정"""
        setup_logging(get_config().get("logging", {}).get("level", "INFO"))

    app.include_router(router, prefix="/api/v1")

    @app.get("/", tags=["Root"])
    async def root():
        """루트 엔드포인트"""
        return {
            "message": "Rock Identifier API",
            "version": __version__,
            "docs": "/docs",
            "redoc": "/redoc",
        }

    return app


# 앱 인스턴스 (uvicorn에서 직접 사용)
app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "rock_identifier.api.server:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )
