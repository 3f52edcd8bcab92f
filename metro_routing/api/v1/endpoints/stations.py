"""
역 검색 REST API 엔드포인트
"""

from fastapi import APIRouter, Query, HTTPException, Depends
import logging

from metro_routing.api.deps import get_service
from metro_routing.api.v1.endpoints.routes import station_ref
from metro_routing.core.config import settings
from metro_routing.models.responses import StationSearchResponse
from metro_routing.services.metro_service import MetroService

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/search", response_model=StationSearchResponse)
async def search_stations(
    q: str = Query(..., description="검색 키워드", min_length=1, max_length=50),
    limit: int = Query(
        settings.STATION_SEARCH_LIMIT, ge=1, le=50, description="최대 결과 수"
    ),
    service: MetroService = Depends(get_service),
):
    """
    역 검색 (자동완성용)

    - **q**: 검색 키워드 (1-50자, 대소문자 무시)
    - **limit**: 최대 결과 수

    Example:
        GET /v1/stations/search?q=Station&limit=5
    """
    try:
        logger.info(f"역 검색: keyword={q}, limit={limit}")
        results = service.search_stations(q, limit)

        return {
            "keyword": q,
            "count": len(results),
            "results": [station_ref(key) for key in results],
        }
    except Exception as e:
        logger.error(f"역 검색 오류: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"검색 중 오류 발생: {str(e)}")


@router.get("/lines")
async def get_all_lines(service: MetroService = Depends(get_service)):
    """
    전체 노선 목록 조회

    Returns:
        {
            "lines": {"Green": ["StationX", "StationY"], ...},
            "total_lines": 2
        }
    """
    lines = service.get_lines()
    return {"lines": lines, "total_lines": len(lines)}
