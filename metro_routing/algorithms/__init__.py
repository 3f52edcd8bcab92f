"""
최단 경로 탐색 및 환승 간선 생성
"""

from metro_routing.algorithms.dijkstra import shortest_path
from metro_routing.algorithms.transfers import synthesize_transfers

__all__ = [
    "shortest_path",
    "synthesize_transfers",
]
