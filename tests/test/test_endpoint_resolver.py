"""
EndpointResolver 테스트
"""

from metro_routing.models.domain import StationKey
from metro_routing.services.endpoint_resolver import (
    resolve_candidates,
    resolve_combinations,
)


class TestResolveCandidates:
    """resolve_candidates 테스트 클래스"""

    def test_exact_name_all_lines(self, sample_network, keys):
        """이름이 같은 역은 노선별로 모두 후보"""
        candidates = resolve_candidates(sample_network, "Central")

        assert candidates == [
            keys["central_green"],
            keys["central_blue"],
            keys["central_red"],
        ]

    def test_substring_in_discovery_order(self, sample_network, keys):
        """부분 일치, 역 삽입 순서 유지"""
        candidates = resolve_candidates(sample_network, "Station")

        assert candidates == [
            keys["x_green"],
            keys["y_green"],
            keys["y_blue"],
            keys["z_blue"],
        ]

    def test_case_sensitive(self, sample_network):
        """대소문자 구분"""
        assert resolve_candidates(sample_network, "central") == []

    def test_query_is_stripped(self, sample_network, keys):
        """검색어 앞뒤 공백 무시"""
        assert resolve_candidates(sample_network, "  Airport ") == [keys["airport_red"]]


class TestResolveCombinations:
    """resolve_combinations 테스트 클래스"""

    def test_cross_product(self, sample_network):
        """출발 4개 × 도착 2개 = 8개 조합"""
        combinations = resolve_combinations(sample_network, "Station", "Harbour")

        assert len(combinations) == 8
        assert combinations[0] == (
            StationKey("StationX", "Green"),
            StationKey("Harbour", "Blue"),
        )
        assert combinations[1] == (
            StationKey("StationX", "Green"),
            StationKey("Harbour", "Red"),
        )
        assert combinations[-1] == (
            StationKey("StationZ", "Blue"),
            StationKey("Harbour", "Red"),
        )

    def test_same_query_both_sides(self, scenario_network):
        """양쪽 같은 검색어 => 자기 자신 조합 포함"""
        combinations = resolve_combinations(scenario_network, "Station", "Station")

        assert len(combinations) == 16

    def test_empty_when_no_match(self, sample_network):
        """한쪽이라도 일치 없으면 빈 리스트 (예외 없음)"""
        assert resolve_combinations(sample_network, "Nowhere", "Central") == []
        assert resolve_combinations(sample_network, "Central", "Nowhere") == []
