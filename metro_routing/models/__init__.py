"""
pydantic models for 요청, 응답, 도메인 객체
"""

from metro_routing.models.requests import (
    FastestRouteRequest,
    TravelTimeUpdateRequest,
    RouteStatusRequest,
    ResetTravelTimeRequest,
    NetworkUploadRequest,
)
from metro_routing.models.responses import (
    FastestRouteResponse,
    TravelTimeUpdateResponse,
    RouteStatusResponse,
    RouteListResponse,
    StationSearchResponse,
    NetworkUploadResponse,
)
from metro_routing.models.domain import (
    StationKey,
    Station,
    Connection,
    StepKind,
    JourneyStep,
    Journey,
    RouteResult,
    ConnectionUpdate,
    StationStatusUpdate,
    RouteStatusEntry,
)

__all__ = [
    "FastestRouteRequest",
    "TravelTimeUpdateRequest",
    "RouteStatusRequest",
    "ResetTravelTimeRequest",
    "NetworkUploadRequest",
    "FastestRouteResponse",
    "TravelTimeUpdateResponse",
    "RouteStatusResponse",
    "RouteListResponse",
    "StationSearchResponse",
    "NetworkUploadResponse",
    "StationKey",
    "Station",
    "Connection",
    "StepKind",
    "JourneyStep",
    "Journey",
    "RouteResult",
    "ConnectionUpdate",
    "StationStatusUpdate",
    "RouteStatusEntry",
]
