# 노선망 조회/변경 서비스

import logging
import time
from functools import lru_cache
from pathlib import Path
from threading import Lock
from typing import Dict, Iterator, List, Optional, Tuple

from metro_routing.core.config import settings
from metro_routing.core.exceptions import (
    ConnectionNotFoundException,
    InvalidInputException,
    MetroException,
    RouteNotFoundException,
    StationNotFoundException,
)
from metro_routing.db.loader import LoadResult, build_network, load_network, parse_rows
from metro_routing.db.network_store import Network
from metro_routing.models.domain import (
    Connection,
    ConnectionUpdate,
    RouteResult,
    RouteStatusEntry,
    StationKey,
    StationStatusUpdate,
)
from metro_routing.services.endpoint_resolver import (
    resolve_candidates,
    resolve_combinations,
)
from metro_routing.services.journey_formatter import NO_ROUTE_MESSAGE, format_journey
from metro_routing.services.route_selector import select_fastest_route

logger = logging.getLogger(__name__)


class MetroService:
    """
    노선망 하나에 대한 경로 조회 및 지연/폐쇄/초기화 처리

    모든 작업은 하나의 Lock으로 직렬화됨
    (경로 탐색 중간값은 쿼리별 dict라 공유 상태 변경 없음)
    """

    def __init__(self, network: Optional[Network] = None):
        self.network = network if network is not None else Network()
        self._lock = Lock()
        logger.info(
            f"MetroService 초기화 완료: 역 {self.network.station_count}개, "
            f"노선 {len(self.network.lines)}개"
        )

    def replace_network(self, network: Network) -> None:
        with self._lock:
            self.network = network
        logger.info(f"노선망 교체: 역 {network.station_count}개")

    def load_from_text(self, text: str, strict: bool = True) -> LoadResult:
        """
        직접 입력한 노선 데이터로 노선망 교체

        Raises:
            InvalidInputException: strict 모드에서 잘못된 행이 있거나 유효한 행이 없을 때
        """
        result = parse_rows(text, strict=strict)
        if not result.rows:
            raise InvalidInputException("No valid network rows.")

        self.replace_network(build_network(result.rows))
        return result

    # ========== 경로 조회 ==========

    def find_fastest_route(self, start_query: str, end_query: str) -> RouteResult:
        """
        출발/도착 검색어로 최단 경로 계산

        Args:
            start_query: 출발역 이름 (부분 일치)
            end_query: 도착역 이름 (부분 일치)

        Returns:
            RouteResult (경로 + 텍스트 안내)

        Raises:
            StationNotFoundException: 검색어와 일치하는 역이 없을 때
            RouteNotFoundException: 유효한 경로가 없을 때
        """
        start_time = time.time()

        try:
            with self._lock:
                candidates = self._resolve_or_raise(start_query, end_query)
                journey = select_fastest_route(self.network, candidates)

            if journey is None:
                raise RouteNotFoundException(NO_ROUTE_MESSAGE)

            description = format_journey(
                journey, journey.origin.name, journey.destination.name
            )

            elapsed_time = time.time() - start_time
            logger.info(
                f"경로 계산 완료: {start_query} → {end_query}, "
                f"조합 {len(candidates)}개, 총 {journey.total_time}분, "
                f"계산시간={elapsed_time * 1000:.1f}ms"
            )

            return RouteResult(
                start_query=start_query,
                end_query=end_query,
                journey=journey,
                description=description,
                candidates_evaluated=len(candidates),
            )

        except MetroException as e:
            logger.error(f"경로 계산 실패: {e.message}")
            raise

    # ========== 구간 변경 ==========

    def update_travel_time(
        self,
        start_query: str,
        end_query: str,
        amount: int,
        is_delay_additive: bool,
    ) -> List[ConnectionUpdate]:
        """
        직접 연결된 모든 후보 구간의 이동 시간 변경 (양방향 동시)

        is_delay_additive=True => 현재 값에 amount를 더함
        is_delay_additive=False => amount로 대체
        """
        if amount < 0:
            raise InvalidInputException(
                "Invalid travel time. Travel time should be a non-negative integer."
            )

        updates = []
        with self._lock:
            for from_key, to_key, forward in self._direct_connections(
                start_query, end_query
            ):
                new_time = forward.current_time + amount if is_delay_additive else amount
                self.network.set_travel_time(from_key, to_key, new_time)
                updates.append(
                    ConnectionUpdate(
                        station_from=from_key,
                        station_to=to_key,
                        original_time=forward.original_time,
                        current_time=forward.current_time,
                    )
                )
                logger.info(
                    f"이동 시간 변경: {from_key} ↔ {to_key} = {forward.current_time}분 "
                    f"({'delay' if is_delay_additive else 'absolute'})"
                )

        return updates

    def set_route_status(
        self, start_query: str, end_query: str, is_open: bool
    ) -> List[StationStatusUpdate]:
        """직접 연결된 후보 구간의 양 끝 역을 개방/폐쇄 (역 단위 정책)"""
        updates = []
        with self._lock:
            for from_key, to_key, _ in self._direct_connections(start_query, end_query):
                self.network.set_open(from_key, is_open)
                self.network.set_open(to_key, is_open)
                updates.append(
                    StationStatusUpdate(
                        station_from=from_key, station_to=to_key, is_open=is_open
                    )
                )
                logger.info(
                    f"역 상태 변경: {from_key}, {to_key} => "
                    f"{'open' if is_open else 'closed'}"
                )

        return updates

    def reset_travel_time(
        self, start_query: str, end_query: str
    ) -> List[ConnectionUpdate]:
        """직접 연결된 후보 구간의 이동 시간을 원래 값으로 복원 (양방향 동시)"""
        updates = []
        with self._lock:
            for from_key, to_key, forward in self._direct_connections(
                start_query, end_query
            ):
                self.network.set_travel_time(from_key, to_key, forward.original_time)
                updates.append(
                    ConnectionUpdate(
                        station_from=from_key,
                        station_to=to_key,
                        original_time=forward.original_time,
                        current_time=forward.current_time,
                    )
                )
                logger.info(
                    f"이동 시간 초기화: {from_key} ↔ {to_key} = {forward.current_time}분"
                )

        return updates

    # ========== 조회 ==========

    def list_closed_routes(self) -> List[RouteStatusEntry]:
        """양 끝 역이 모두 닫힌 운행 구간"""
        with self._lock:
            return [
                self._to_entry(connection)
                for connection in self._unique_travel_connections()
                if not self.network.get_station(connection.source).is_open
                and not self.network.get_station(connection.target).is_open
            ]

    def list_delayed_routes(self) -> List[RouteStatusEntry]:
        """현재 이동 시간이 원래보다 긴 운행 구간"""
        with self._lock:
            return [
                self._to_entry(connection)
                for connection in self._unique_travel_connections()
                if connection.is_delayed
            ]

    def search_stations(
        self, keyword: str, limit: Optional[int] = None
    ) -> List[StationKey]:
        """역 검색 (자동완성용) => 정확 일치 > 접두 일치 > 부분 일치"""
        if limit is None:
            limit = settings.STATION_SEARCH_LIMIT
        keyword = keyword.strip().lower()
        results = []

        with self._lock:
            for station in self.network.stations():
                name_lower = station.name.lower()
                if keyword not in name_lower:
                    continue
                if name_lower == keyword:
                    priority = 1
                elif name_lower.startswith(keyword):
                    priority = 2
                else:
                    priority = 3
                results.append((priority, len(station.name), station.name, station.key))

        results.sort(key=lambda x: x[:3])
        return [key for *_, key in results[:limit]]

    def get_lines(self) -> Dict[str, List[str]]:
        """노선별 역 이름 목록"""
        with self._lock:
            lines: Dict[str, List[str]] = {line: [] for line in self.network.lines}
            for station in self.network.stations():
                lines[station.line].append(station.name)
        return lines

    def network_summary(self) -> Dict[str, int]:
        with self._lock:
            return {
                "stations": self.network.station_count,
                "lines": len(self.network.lines),
                "connections": self.network.connection_count,
            }

    # ========== helpers ==========

    def _resolve_or_raise(
        self, start_query: str, end_query: str
    ) -> List[Tuple[StationKey, StationKey]]:
        if not start_query.strip() or not end_query.strip():
            raise InvalidInputException("Station name must not be blank.")

        candidates = resolve_combinations(self.network, start_query, end_query)
        if candidates:
            return candidates

        if not resolve_candidates(self.network, start_query):
            raise StationNotFoundException(f"Invalid station name: {start_query}")
        raise StationNotFoundException(f"Invalid station name: {end_query}")

    def _direct_connections(
        self, start_query: str, end_query: str
    ) -> Iterator[Tuple[StationKey, StationKey, Connection]]:
        """
        후보 조합 중 직접 운행 간선이 있는 구간만 반환 (물리적 구간당 1번)

        Raises:
            StationNotFoundException: 검색어와 일치하는 역이 없을 때
            ConnectionNotFoundException: 직접 연결된 구간이 하나도 없을 때
        """
        candidates = self._resolve_or_raise(start_query, end_query)

        pairs = []
        seen = set()
        for from_key, to_key in candidates:
            forward = self.network.find_connection(
                from_key, to_key, include_transfers=False
            )
            backward = self.network.find_connection(
                to_key, from_key, include_transfers=False
            )
            if forward is None or backward is None:
                logger.debug(f"직접 연결 없음: {from_key} ↔ {to_key}")
                continue

            pair_id = frozenset((from_key, to_key))
            if pair_id in seen:
                continue
            seen.add(pair_id)
            pairs.append((from_key, to_key, forward))

        if not pairs:
            raise ConnectionNotFoundException(
                f"No connection from {start_query} to {end_query} or vice versa."
            )
        return iter(pairs)

    def _unique_travel_connections(self) -> Iterator[Connection]:
        seen = set()
        for connection in self.network.iter_connections():
            if connection.is_transfer:
                continue
            pair_id = frozenset((connection.source, connection.target))
            if pair_id in seen:
                continue
            seen.add(pair_id)
            yield connection

    @staticmethod
    def _to_entry(connection: Connection) -> RouteStatusEntry:
        return RouteStatusEntry(
            station_from=connection.source,
            station_to=connection.target,
            original_time=connection.original_time,
            current_time=connection.current_time,
        )


@lru_cache()
def get_metro_service() -> MetroService:
    """settings.NETWORK_DATA_PATH 기준 MetroService 싱글톤 반환"""
    path = Path(settings.NETWORK_DATA_PATH)
    if not path.exists():
        logger.warning(f"노선 데이터 파일 없음: {path}. 빈 노선망 사용")
        return MetroService()

    network, result = load_network(path, strict=settings.STRICT_INGESTION)
    if result.errors:
        logger.warning(f"잘못된 행 {len(result.errors)}개 건너뜀")
    return MetroService(network)
