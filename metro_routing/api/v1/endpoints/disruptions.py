"""
구간 지연/폐쇄/초기화 REST API 엔드포인트
"""

from fastapi import APIRouter, HTTPException, Depends
import logging

from metro_routing.api.deps import get_service, to_http_exception
from metro_routing.api.v1.endpoints.routes import station_ref
from metro_routing.core.exceptions import MetroException
from metro_routing.models.requests import (
    ResetTravelTimeRequest,
    RouteStatusRequest,
    TravelTimeUpdateRequest,
)
from metro_routing.models.responses import (
    RouteListResponse,
    RouteStatusResponse,
    TravelTimeUpdateResponse,
)
from metro_routing.services.metro_service import MetroService

router = APIRouter()
logger = logging.getLogger(__name__)


def _connection_info(update) -> dict:
    return {
        "station_from": station_ref(update.station_from),
        "station_to": station_ref(update.station_to),
        "original_time": update.original_time,
        "current_time": update.current_time,
    }


@router.post("/travel-time", response_model=TravelTimeUpdateResponse)
async def update_travel_time(
    request: TravelTimeUpdateRequest,
    service: MetroService = Depends(get_service),
):
    """
    구간 이동 시간 변경 (양방향)

    - **is_delay**: true => 현재 시간에 minutes를 더함, false => minutes로 대체
    """
    try:
        updates = service.update_travel_time(
            request.origin, request.destination, request.minutes, request.is_delay
        )
    except MetroException as e:
        logger.error(f"이동 시간 변경 실패: {e.message}")
        raise to_http_exception(e)
    except Exception as e:
        logger.error(f"예상치 못한 오류: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"변경 중 오류 발생: {str(e)}")

    return {
        "updated": len(updates),
        "connections": [_connection_info(u) for u in updates],
    }


@router.post("/status", response_model=RouteStatusResponse)
async def set_route_status(
    request: RouteStatusRequest,
    service: MetroService = Depends(get_service),
):
    """구간 양 끝 역 개방/폐쇄"""
    try:
        updates = service.set_route_status(
            request.origin, request.destination, request.is_open
        )
    except MetroException as e:
        logger.error(f"구간 상태 변경 실패: {e.message}")
        raise to_http_exception(e)
    except Exception as e:
        logger.error(f"예상치 못한 오류: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"변경 중 오류 발생: {str(e)}")

    return {
        "updated": len(updates),
        "routes": [
            {
                "station_from": station_ref(u.station_from),
                "station_to": station_ref(u.station_to),
                "is_open": u.is_open,
            }
            for u in updates
        ],
    }


@router.post("/reset", response_model=TravelTimeUpdateResponse)
async def reset_travel_time(
    request: ResetTravelTimeRequest,
    service: MetroService = Depends(get_service),
):
    """구간 이동 시간을 원래 값으로 복원"""
    try:
        updates = service.reset_travel_time(request.origin, request.destination)
    except MetroException as e:
        logger.error(f"이동 시간 초기화 실패: {e.message}")
        raise to_http_exception(e)
    except Exception as e:
        logger.error(f"예상치 못한 오류: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"초기화 중 오류 발생: {str(e)}")

    return {
        "updated": len(updates),
        "connections": [_connection_info(u) for u in updates],
    }


@router.get("/closed", response_model=RouteListResponse)
async def list_closed_routes(service: MetroService = Depends(get_service)):
    """닫힌 구간 목록"""
    routes = service.list_closed_routes()
    return {"count": len(routes), "routes": [_connection_info(r) for r in routes]}


@router.get("/delayed", response_model=RouteListResponse)
async def list_delayed_routes(service: MetroService = Depends(get_service)):
    """지연된 구간 목록 (원래 시간 -> 현재 시간)"""
    routes = service.list_delayed_routes()
    return {"count": len(routes), "routes": [_connection_info(r) for r in routes]}
