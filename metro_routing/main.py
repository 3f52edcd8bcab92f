"""
Metro Routing Backend - FastAPI Application

노선별 역 그래프 기반 최단 경로 안내
구간 지연/폐쇄/초기화 반영
"""

import logging
from contextlib import asynccontextmanager
from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from metro_routing.core.config import settings
from metro_routing.core.exceptions import MetroException
from metro_routing.api.deps import get_service, to_http_exception
from metro_routing.api.v1.router import api_router
from metro_routing.middleware.request_logging import RequestTimingMiddleware
from metro_routing.services.metro_service import MetroService, get_metro_service

# 로깅 설정
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    애플리케이션 생명주기 관리

    서버 시작 시 노선 데이터(NETWORK_DATA_PATH)를 읽어 노선망 구축
    strict 모드에서 잘못된 행이 있으면 시작 실패
    """
    logger.info("=" * 60)
    logger.info("Metro Routing Backend 시작 중...")
    logger.info("=" * 60)

    try:
        service = get_metro_service()
        summary = service.network_summary()
        logger.info(
            f"노선망 로드 완료: 역 {summary['stations']}개, "
            f"노선 {summary['lines']}개, 간선 {summary['connections']}개"
        )
    except Exception as e:
        logger.error(f"초기화 실패: {e}", exc_info=True)
        raise

    yield

    logger.info("Metro Routing Backend 종료")


app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description="""
    ## 노선망 최단 경로 안내

    ### 주요 기능
    - 역 이름 부분 일치 => 모든 노선 후보 조합 탐색
    - 동일 역 이름 노선 간 환승 (0분)
    - 구간 지연 / 이동 시간 변경 / 초기화
    - 역 개방 / 폐쇄
    - 닫힌 구간, 지연 구간 조회
    """,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
)

# CORS 설정
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

if settings.ENABLE_PERFORMANCE_MONITORING:
    app.add_middleware(RequestTimingMiddleware)
    logger.info("요청 처리시간 로깅 미들웨어 활성화")

app.include_router(api_router, prefix="/v1")


# ========== Health Check Endpoints ==========


@app.get("/")
async def root():
    """서비스 기본 정보 반환"""
    return {
        "service": settings.PROJECT_NAME,
        "version": settings.VERSION,
        "status": "running",
        "docs": "/docs",
    }


@app.get("/health")
async def health_check(service: MetroService = Depends(get_service)):
    """
    헬스 체크 엔드포인트

    노선망이 비어 있으면 unhealthy (503)
    """
    summary = service.network_summary()
    healthy = summary["stations"] > 0

    return JSONResponse(
        status_code=200 if healthy else 503,
        content={
            "status": "healthy" if healthy else "unhealthy",
            "version": settings.VERSION,
            "network": summary,
        },
    )


# ========== Exception Handlers ==========


@app.exception_handler(MetroException)
async def metro_exception_handler(request, exc: MetroException):
    """라우터에서 처리되지 않은 도메인 예외"""
    http_exc = to_http_exception(exc)
    return JSONResponse(status_code=http_exc.status_code, content=http_exc.detail)


@app.exception_handler(Exception)
async def global_exception_handler(request, exc):
    """예상치 못한 오류 처리"""
    logger.error(f"예상치 못한 오류: {exc}", exc_info=True)

    return JSONResponse(
        status_code=500,
        content={
            "message": "서버 내부 오류가 발생했습니다",
            "detail": str(exc) if settings.DEBUG else "Internal Server Error",
        },
    )


if __name__ == "__main__":
    import uvicorn

    logger.info("개발 서버 시작...")

    uvicorn.run(
        "metro_routing.main:app",
        host="0.0.0.0",
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level="debug" if settings.DEBUG else "info",
        access_log=True,
    )
