# 환승 간선 생성기

import logging
from collections import defaultdict
from typing import Dict, List

from metro_routing.db.network_store import Network
from metro_routing.models.domain import Station

logger = logging.getLogger(__name__)

# 환승 간선은 항상 0분 (delay/reset 대상 아님)
TRANSFER_TIME = 0


def synthesize_transfers(network: Network) -> int:
    """
    이름이 같고 노선이 다른 역끼리 0분 양방향 환승 간선 추가

    station_name이 동일한데 line이 다른 경우만 환승으로 인정
    비순서쌍마다 한 번만 추가 (이미 간선이 있으면 건너뜀)

    Returns:
        추가된 환승 쌍 수
    """
    # station_name : [Station(line1), Station(line2), ...]
    by_name: Dict[str, List[Station]] = defaultdict(list)
    for station in network.stations():
        by_name[station.name].append(station)

    added = 0
    for name, variants in by_name.items():
        if len(variants) < 2:
            continue

        for i, station_a in enumerate(variants):
            for station_b in variants[i + 1 :]:
                if station_a.line == station_b.line:
                    continue
                if _has_transfer(network, station_a, station_b):
                    continue

                network.add_connection(
                    station_a, station_b, TRANSFER_TIME, is_transfer=True
                )
                added += 1

    logger.info(f"환승 간선 {added}쌍 생성 완료")
    return added


def _has_transfer(network: Network, station_a: Station, station_b: Station) -> bool:
    return any(
        connection.is_transfer and connection.target == station_b.key
        for connection in network.connections_from(station_a.key)
    )
