from typing import List, Optional
from pydantic import BaseModel, Field

# service 별 응답 구조 정의


class StationRef(BaseModel):
    name: str = Field(..., description="역 이름")
    line: str = Field(..., description="노선")


class JourneyStepInfo(BaseModel):
    step: int = Field(..., description="순번 (1부터)")
    kind: str = Field(..., description="start / travel / change / end")
    station: StationRef
    from_station: Optional[StationRef] = Field(None, description="이전 역")
    minutes: int = Field(0, description="구간 소요시간 (분)")


# 최단 경로 응답
class FastestRouteResponse(BaseModel):
    origin: str = Field(..., description="출발지 검색어")
    destination: str = Field(..., description="목적지 검색어")
    total_time: int = Field(..., description="총 소요시간 (분)")
    changes: int = Field(..., description="환승 횟수")
    candidates_evaluated: int = Field(..., description="평가한 출발/도착 조합 수")
    steps: List[JourneyStepInfo] = Field(default_factory=list)
    summary: str = Field(..., description="텍스트 경로 안내")


class ConnectionUpdateInfo(BaseModel):
    station_from: StationRef
    station_to: StationRef
    original_time: int
    current_time: int


class TravelTimeUpdateResponse(BaseModel):
    updated: int = Field(..., description="변경된 구간 수")
    connections: List[ConnectionUpdateInfo] = Field(default_factory=list)


class StationStatusInfo(BaseModel):
    station_from: StationRef
    station_to: StationRef
    is_open: bool


class RouteStatusResponse(BaseModel):
    updated: int = Field(..., description="변경된 구간 수")
    routes: List[StationStatusInfo] = Field(default_factory=list)


# 닫힌/지연 구간 조회 응답
class RouteListResponse(BaseModel):
    count: int = Field(..., description="구간 수")
    routes: List[ConnectionUpdateInfo] = Field(default_factory=list)


# 역 검색 응답 (자동완성)
class StationSearchResponse(BaseModel):
    keyword: str = Field(..., description="검색 키워드")
    count: int = Field(..., description="검색 결과 수")
    results: List[StationRef] = Field(default_factory=list, description="역 정보 리스트")


class RowErrorInfo(BaseModel):
    line_number: int = Field(..., description="입력 줄 번호 (1부터)")
    raw: str = Field(..., description="원본 행")
    reason: str = Field(..., description="건너뛴 이유")


# 노선망 직접 입력 응답
class NetworkUploadResponse(BaseModel):
    stations: int = Field(..., description="역 수")
    lines: int = Field(..., description="노선 수")
    connections: int = Field(..., description="방향 간선 수 (환승 포함)")
    skipped: List[RowErrorInfo] = Field(default_factory=list, description="건너뛴 행")
