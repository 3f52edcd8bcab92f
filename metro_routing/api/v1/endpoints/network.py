"""
노선망 직접 입력 REST API 엔드포인트
"""

from fastapi import APIRouter, HTTPException, Depends
import logging

from metro_routing.api.deps import get_service, to_http_exception
from metro_routing.core.exceptions import MetroException
from metro_routing.models.requests import NetworkUploadRequest
from metro_routing.models.responses import NetworkUploadResponse
from metro_routing.services.metro_service import MetroService

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("", response_model=NetworkUploadResponse)
async def upload_network(
    request: NetworkUploadRequest,
    service: MetroService = Depends(get_service),
):
    """
    노선 데이터를 직접 입력하여 노선망 교체

    - **data**: line,station1,station2,travelTime (한 줄에 한 구간)
    - **strict**: true => 잘못된 행이 있으면 400, false => 건너뛰고 skipped에 기록

    Example:
        POST /v1/network
        {
            "data": "Green,StationX,StationY,10\\nB,StationY,StationZ,5",
            "strict": true
        }
    """
    try:
        result = service.load_from_text(request.data, strict=request.strict)
    except MetroException as e:
        logger.error(f"노선망 입력 실패: {e.message}")
        raise to_http_exception(e)
    except Exception as e:
        logger.error(f"예상치 못한 오류: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"입력 처리 중 오류 발생: {str(e)}")

    summary = service.network_summary()
    return {
        **summary,
        "skipped": [
            {"line_number": err.line_number, "raw": err.raw, "reason": err.reason}
            for err in result.errors
        ],
    }
