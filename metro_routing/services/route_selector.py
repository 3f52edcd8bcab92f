# 후보 조합별 최단 경로 중 최적 경로 선택

import logging
from typing import Iterable, Optional

from metro_routing.algorithms.dijkstra import shortest_path
from metro_routing.db.network_store import Network
from metro_routing.models.domain import Journey, StepKind
from metro_routing.services.endpoint_resolver import CandidatePair

logger = logging.getLogger(__name__)


def starts_with_change(journey: Journey) -> bool:
    """
    출발 직후(두 번째 단계)가 환승인지 확인

    다른 노선의 출발역을 골라 0분 환승 간선으로 지름길을 타는 경로는 제외
    두 번째 단계만 검사함 (이후 환승은 대상 아님)
    """
    return len(journey.steps) > 1 and journey.steps[1].kind == StepKind.CHANGE


def select_fastest_route(
    network: Network, candidates: Iterable[CandidatePair]
) -> Optional[Journey]:
    """도달 가능하고 제외 조건에 걸리지 않는 경로 중 총 소요시간 최소 (동률 => 먼저 나온 조합)"""
    best: Optional[Journey] = None

    for origin, destination in candidates:
        journey = shortest_path(network, origin, destination)

        if not journey.reachable:
            continue
        if starts_with_change(journey):
            logger.debug(f"출발 직후 환승 경로 제외: {origin} → {destination}")
            continue
        if best is None or journey.total_time < best.total_time:
            best = journey

    return best
