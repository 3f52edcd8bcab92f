from pydantic import BaseModel, ConfigDict, Field

# service별 requests 구조 정의


# 역 이름 검색어는 앞뒤 공백 제거 후 검증 => 공백만 있는 검색어는 422
class StationQueryModel(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)


# 최단 경로 조회
class FastestRouteRequest(StationQueryModel):
    origin: str = Field(..., min_length=1, description="출발역 이름 (부분 일치)")
    destination: str = Field(..., min_length=1, description="도착역 이름 (부분 일치)")


# 이동 시간 변경 (지연 또는 절대값)
class TravelTimeUpdateRequest(StationQueryModel):
    origin: str = Field(..., min_length=1, description="구간 시작역 이름")
    destination: str = Field(..., min_length=1, description="구간 끝역 이름")
    minutes: int = Field(..., ge=0, description="지연 시간 또는 새 이동 시간 (분)")
    is_delay: bool = Field(default=True, description="true => 현재 값에 더함, false => 대체")


# 구간 개방/폐쇄
class RouteStatusRequest(StationQueryModel):
    origin: str = Field(..., min_length=1, description="구간 시작역 이름")
    destination: str = Field(..., min_length=1, description="구간 끝역 이름")
    is_open: bool = Field(..., description="개방 여부")


# 이동 시간 초기화
class ResetTravelTimeRequest(StationQueryModel):
    origin: str = Field(..., min_length=1, description="구간 시작역 이름")
    destination: str = Field(..., min_length=1, description="구간 끝역 이름")


# 노선망 직접 입력 (line,station1,station2,travelTime 한 줄에 한 구간)
class NetworkUploadRequest(BaseModel):
    data: str = Field(..., min_length=1, description="노선 데이터 텍스트")
    strict: bool = Field(default=True, description="false => 잘못된 행은 건너뜀")
