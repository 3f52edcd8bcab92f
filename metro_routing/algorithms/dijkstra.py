# 단일 출발 최단 경로 (Dijkstra)

import heapq
import logging
from itertools import count
from typing import Dict, List, Optional, Set

from metro_routing.core.config import MAX_TRAVEL_TIME
from metro_routing.core.exceptions import StationNotFoundException
from metro_routing.db.network_store import Network
from metro_routing.models.domain import Journey, JourneyStep, StationKey, StepKind

logger = logging.getLogger(__name__)


def shortest_path(
    network: Network, origin: StationKey, destination: StationKey
) -> Journey:
    """
    현재 간선 가중치(current_time) 기준 최단 경로 탐색

    - 탐색 중간값(best_time, predecessor)은 쿼리마다 별도 dict에 저장
      => Network 객체는 조회 중 변경되지 않음
    - 닫힌 역: 도달은 가능하지만 그 역에서 출발하는 간선은 완화하지 않음
    - 동일 비용 경로는 먼저 발견된 predecessor 유지 (strict <)

    Raises:
        StationNotFoundException: 출발/도착 역이 노선망에 없을 때
    """
    for key in (origin, destination):
        if not network.has_station(key):
            raise StationNotFoundException(f"Station not found: {key}")

    best_time: Dict[StationKey, float] = {origin: 0}
    predecessor: Dict[StationKey, Optional[StationKey]] = {origin: None}
    settled: Set[StationKey] = set()

    # (best_time, 삽입 순번, key) => 동률이면 먼저 들어온 역 우선
    sequence = count()
    frontier = [(0, next(sequence), origin)]

    while frontier:
        current_time, _, key = heapq.heappop(frontier)
        if key in settled:
            continue
        settled.add(key)

        if key == destination:
            break

        # 닫힌 역은 막다른 곳
        if not network.get_station(key).is_open:
            continue

        for connection in network.connections_from(key):
            neighbor = connection.target
            if neighbor in settled:
                continue

            new_time = current_time + connection.current_time
            if new_time < best_time.get(neighbor, MAX_TRAVEL_TIME):
                best_time[neighbor] = new_time
                predecessor[neighbor] = key
                heapq.heappush(frontier, (new_time, next(sequence), neighbor))

    if destination not in settled:
        logger.debug(f"도달 불가: {origin} → {destination}")
        return Journey(origin=origin, destination=destination, reachable=False)

    steps = _build_steps(_walk_back(predecessor, destination), best_time)
    return Journey(
        origin=origin,
        destination=destination,
        reachable=True,
        total_time=int(best_time[destination]),
        steps=steps,
    )


def _walk_back(
    predecessor: Dict[StationKey, Optional[StationKey]], destination: StationKey
) -> List[StationKey]:
    path = []
    key: Optional[StationKey] = destination
    while key is not None:
        path.append(key)
        key = predecessor[key]
    path.reverse()
    return path


def _build_steps(
    path: List[StationKey], best_time: Dict[StationKey, float]
) -> List[JourneyStep]:
    """경로를 start / travel / change / end 단계로 분류"""
    steps = [JourneyStep(kind=StepKind.START, station=path[0])]

    for previous, current in zip(path, path[1:]):
        if previous.name == current.name and previous.line != current.line:
            steps.append(
                JourneyStep(
                    kind=StepKind.CHANGE, station=current, from_station=previous
                )
            )
            continue

        steps.append(
            JourneyStep(
                kind=StepKind.TRAVEL,
                station=current,
                from_station=previous,
                minutes=int(best_time[current] - best_time[previous]),
            )
        )

    steps.append(JourneyStep(kind=StepKind.END, station=path[-1]))
    return steps
