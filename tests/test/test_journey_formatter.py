"""
경로 텍스트 안내 테스트
"""

from metro_routing.algorithms.dijkstra import shortest_path
from metro_routing.models.domain import Journey
from metro_routing.services.journey_formatter import format_journey


class TestFormatJourney:
    """format_journey 테스트 클래스"""

    def test_scenario_text(self, scenario_network, keys):
        """번호 매긴 단계 + 총 소요시간"""
        journey = shortest_path(scenario_network, keys["x_green"], keys["z_b"])

        text = format_journey(journey, "StationX", "StationZ")

        assert text == (
            "Shortest path from StationX to StationZ:\n"
            "(1) Start: StationX\n"
            "(2)\tStationX (Green) to StationY (Green) \t(10 mins)\n"
            "(3) Change: StationY (Green) to StationY (B)\n"
            "(4)\tStationY (B) to StationZ (B) \t(5 mins)\n"
            "(5) End: StationZ\n"
            "Total Journey Time: 15 minutes"
        )

    def test_self_route_text(self, scenario_network, keys):
        """출발 == 도착"""
        journey = shortest_path(scenario_network, keys["z_b"], keys["z_b"])

        text = format_journey(journey, "StationZ", "StationZ")

        assert "(1) Start: StationZ" in text
        assert "(2) End: StationZ" in text
        assert text.endswith("Total Journey Time: 0 minutes")

    def test_unreachable_text(self, keys):
        """도달 불가 경로"""
        journey = Journey(origin=keys["x_green"], destination=keys["z_b"], reachable=False)

        assert format_journey(journey, "StationX", "StationZ") == (
            "No route found from StationX to StationZ."
        )
