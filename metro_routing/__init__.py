"""
Metro Routing - 노선별 역 그래프 기반 최단 경로 탐색 서비스
"""

__version__ = "1.0.0"
