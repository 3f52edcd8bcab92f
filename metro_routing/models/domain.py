from enum import Enum
from typing import List, NamedTuple, Optional
from dataclasses import dataclass, field

# domain 정의


class StationKey(NamedTuple):
    """(역 이름, 노선) 복합 키 => 내부 연산은 StationKey로 통일"""

    name: str
    line: str

    def __str__(self) -> str:
        return f"{self.name} ({self.line})"


@dataclass
class Station:
    name: str
    line: str
    is_open: bool = True

    @property
    def key(self) -> StationKey:
        return StationKey(self.name, self.line)


@dataclass
class Connection:
    # 방향 간선, 항상 역방향 간선과 쌍으로 생성됨
    source: StationKey
    target: StationKey
    original_time: int
    current_time: int
    is_transfer: bool = False

    @property
    def is_delayed(self) -> bool:
        return self.current_time > self.original_time


class StepKind(str, Enum):
    START = "start"
    TRAVEL = "travel"
    CHANGE = "change"
    END = "end"


@dataclass
class JourneyStep:
    kind: StepKind
    station: StationKey  # START/END => 해당 역, TRAVEL/CHANGE => 도착 역
    from_station: Optional[StationKey] = None
    minutes: int = 0


@dataclass
class Journey:
    origin: StationKey
    destination: StationKey
    reachable: bool
    total_time: int = 0
    steps: List[JourneyStep] = field(default_factory=list)

    @property
    def changes(self) -> int:
        return sum(1 for step in self.steps if step.kind == StepKind.CHANGE)


@dataclass
class RouteResult:
    start_query: str
    end_query: str
    journey: Journey
    description: str
    candidates_evaluated: int


@dataclass
class ConnectionUpdate:
    station_from: StationKey
    station_to: StationKey
    original_time: int
    current_time: int


@dataclass
class StationStatusUpdate:
    station_from: StationKey
    station_to: StationKey
    is_open: bool


@dataclass
class RouteStatusEntry:
    # 닫힌/지연된 구간 조회 결과 (물리적 구간당 1개)
    station_from: StationKey
    station_to: StationKey
    original_time: int
    current_time: int
