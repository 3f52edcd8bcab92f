"""
노선망 저장소

역은 StationKey(name, line)로 식별하는 arena에 보관하고,
간선(Connection)은 객체 참조 대신 StationKey를 저장함
=> 순환 참조 없이 역 <-> 간선 관계 표현
"""

import logging
from typing import Dict, Iterator, List, Optional, Tuple

from metro_routing.core.exceptions import (
    ConnectionNotFoundException,
    InvalidInputException,
    StationNotFoundException,
)
from metro_routing.models.domain import Connection, Station, StationKey

logger = logging.getLogger(__name__)


class Network:
    def __init__(self):
        # key: StationKey -> Station (삽입 순서 유지)
        self._stations: Dict[StationKey, Station] = {}
        # key: StationKey -> 출발 간선 리스트
        self._connections: Dict[StationKey, List[Connection]] = {}
        # 노선 이름 (최초 등장 순서)
        self._lines: List[str] = []

    # ========== 조회 ==========

    @property
    def lines(self) -> List[str]:
        return list(self._lines)

    @property
    def station_count(self) -> int:
        return len(self._stations)

    @property
    def connection_count(self) -> int:
        return sum(len(conns) for conns in self._connections.values())

    def stations(self) -> List[Station]:
        return list(self._stations.values())

    def has_station(self, key: StationKey) -> bool:
        return key in self._stations

    def get_station(self, key: StationKey) -> Station:
        station = self._stations.get(key)
        if station is None:
            raise StationNotFoundException(f"Station not found: {key}")
        return station

    def connections_from(self, key: StationKey) -> List[Connection]:
        return self._connections.get(key, [])

    def iter_connections(self) -> Iterator[Connection]:
        """역 삽입 순서 -> 간선 삽입 순서로 모든 방향 간선 순회"""
        for key in self._stations:
            yield from self._connections[key]

    def find_connection(
        self,
        from_key: StationKey,
        to_key: StationKey,
        include_transfers: bool = True,
    ) -> Optional[Connection]:
        for connection in self._connections.get(from_key, []):
            if connection.is_transfer and not include_transfers:
                continue
            if connection.target == to_key:
                return connection
        return None

    # ========== 생성 ==========

    def get_or_create_station(self, name: str, line: str) -> Station:
        key = StationKey(name, line)
        station = self._stations.get(key)
        if station is not None:
            return station

        station = Station(name=name, line=line)
        self._stations[key] = station
        self._connections[key] = []
        if line not in self._lines:
            self._lines.append(line)

        logger.debug(f"역 추가: {key}")
        return station

    def add_connection(
        self,
        station_a: Station,
        station_b: Station,
        minutes: int,
        is_transfer: bool = False,
    ) -> Tuple[Connection, Connection]:
        """A->B, B->A 간선 쌍 생성 (current = original = minutes)"""
        if minutes < 0:
            raise InvalidInputException(
                f"Travel time must be non-negative: {station_a.key} - {station_b.key} ({minutes})"
            )

        forward = Connection(
            source=station_a.key,
            target=station_b.key,
            original_time=minutes,
            current_time=minutes,
            is_transfer=is_transfer,
        )
        backward = Connection(
            source=station_b.key,
            target=station_a.key,
            original_time=minutes,
            current_time=minutes,
            is_transfer=is_transfer,
        )
        self._connections[station_a.key].append(forward)
        self._connections[station_b.key].append(backward)
        return forward, backward

    # ========== 변경 ==========

    def set_open(self, key: StationKey, is_open: bool) -> None:
        self.get_station(key).is_open = is_open

    def set_current_time(self, connection: Connection, minutes: int) -> None:
        if minutes < 0:
            raise InvalidInputException(
                f"Travel time must be non-negative: {minutes}"
            )
        connection.current_time = minutes

    def set_travel_time(
        self, from_key: StationKey, to_key: StationKey, minutes: int
    ) -> Tuple[Connection, Connection]:
        """양방향 운행 간선의 current_time을 함께 변경 (환승 간선 제외)"""
        forward = self.find_connection(from_key, to_key, include_transfers=False)
        backward = self.find_connection(to_key, from_key, include_transfers=False)
        if forward is None or backward is None:
            raise ConnectionNotFoundException(
                f"No connection from {from_key} to {to_key} or vice versa."
            )

        self.set_current_time(forward, minutes)
        self.set_current_time(backward, minutes)
        return forward, backward
