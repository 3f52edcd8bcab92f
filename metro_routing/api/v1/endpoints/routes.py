"""
최단 경로 조회 REST API 엔드포인트
"""

from fastapi import APIRouter, HTTPException, Depends
import logging

from metro_routing.api.deps import get_service, to_http_exception
from metro_routing.core.exceptions import MetroException
from metro_routing.models.domain import StationKey
from metro_routing.models.requests import FastestRouteRequest
from metro_routing.models.responses import FastestRouteResponse
from metro_routing.services.metro_service import MetroService

router = APIRouter()
logger = logging.getLogger(__name__)


def station_ref(key: StationKey) -> dict:
    return {"name": key.name, "line": key.line}


@router.post("/fastest", response_model=FastestRouteResponse)
async def find_fastest_route(
    request: FastestRouteRequest,
    service: MetroService = Depends(get_service),
):
    """
    최단 경로 계산

    - **origin**: 출발역 이름 (부분 일치, 모든 노선 후보 탐색)
    - **destination**: 도착역 이름 (부분 일치)

    Example:
        POST /v1/routes/fastest
        {
            "origin": "StationX",
            "destination": "StationZ"
        }
    """
    try:
        logger.info(f"REST 경로 계산: {request.origin} → {request.destination}")
        result = service.find_fastest_route(request.origin, request.destination)

    except MetroException as e:
        logger.error(f"경로 계산 실패: {e.message}")
        raise to_http_exception(e)
    except Exception as e:
        logger.error(f"예상치 못한 오류: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"경로 계산 중 오류 발생: {str(e)}")

    journey = result.journey
    return {
        "origin": result.start_query,
        "destination": result.end_query,
        "total_time": journey.total_time,
        "changes": journey.changes,
        "candidates_evaluated": result.candidates_evaluated,
        "steps": [
            {
                "step": number,
                "kind": step.kind.value,
                "station": station_ref(step.station),
                "from_station": (
                    station_ref(step.from_station) if step.from_station else None
                ),
                "minutes": step.minutes,
            }
            for number, step in enumerate(journey.steps, start=1)
        ],
        "summary": result.description,
    }
