# 역 이름 검색어 => (역, 노선) 후보 확장

import logging
from typing import List, Tuple

from metro_routing.db.network_store import Network
from metro_routing.models.domain import StationKey

logger = logging.getLogger(__name__)

CandidatePair = Tuple[StationKey, StationKey]


def resolve_candidates(network: Network, query: str) -> List[StationKey]:
    """
    이름에 검색어가 포함된 모든 (역, 노선) 후보 반환 (대소문자 구분)

    역 삽입 순서대로 순회, 동일 키는 한 번만 기록
    """
    query = query.strip()
    candidates: List[StationKey] = []
    seen = set()

    for station in network.stations():
        if query not in station.name:
            continue
        key = station.key
        if key not in seen:
            seen.add(key)
            candidates.append(key)

    return candidates


def resolve_combinations(
    network: Network, start_query: str, end_query: str
) -> List[CandidatePair]:
    """
    출발 후보 × 도착 후보 전체 조합 (발견 순서 유지)

    어느 한쪽 후보가 없으면 빈 리스트 반환 => 호출 측에서 "경로 없음" 처리
    """
    start_candidates = resolve_candidates(network, start_query)
    end_candidates = resolve_candidates(network, end_query)

    combinations = [
        (start, end) for start in start_candidates for end in end_candidates
    ]
    logger.debug(
        f"후보 확장: '{start_query}' {len(start_candidates)}개 × "
        f"'{end_query}' {len(end_candidates)}개 = {len(combinations)}개 조합"
    )
    return combinations
