"""
환승 간선 생성 테스트
"""

from metro_routing.algorithms.dijkstra import shortest_path
from metro_routing.algorithms.transfers import synthesize_transfers
from metro_routing.db.network_store import Network


class TestSynthesizeTransfers:
    """synthesize_transfers 테스트 클래스"""

    def test_transfer_edges_zero_and_symmetric(self, sample_network, keys):
        """환승 간선은 0분, 양방향"""
        pairs = [
            ("y_green", "y_blue"),
            ("central_green", "central_blue"),
            ("central_green", "central_red"),
            ("central_blue", "central_red"),
            ("harbour_blue", "harbour_red"),
        ]
        for a, b in pairs:
            forward = sample_network.find_connection(keys[a], keys[b])
            backward = sample_network.find_connection(keys[b], keys[a])

            assert forward.is_transfer and backward.is_transfer
            assert forward.current_time == backward.current_time == 0
            assert forward.original_time == 0

    def test_no_transfer_between_different_names(self, sample_network, keys):
        """이름이 다르면 환승 간선 없음"""
        assert sample_network.find_connection(keys["y_green"], keys["central_blue"]) is None

    def test_idempotent(self, sample_network):
        """다시 실행해도 중복 환승 간선 없음"""
        before = sample_network.connection_count

        added = synthesize_transfers(sample_network)

        assert added == 0
        assert sample_network.connection_count == before

    def test_three_lines_one_pair_each(self):
        """노선 3개가 만나는 역 => 비순서쌍 3개"""
        network = Network()
        for line in ("A", "B", "C"):
            hub = network.get_or_create_station("Hub", line)
            leaf = network.get_or_create_station(f"Leaf{line}", line)
            network.add_connection(hub, leaf, 3)

        added = synthesize_transfers(network)

        assert added == 3
        # 운행 3쌍 + 환승 3쌍
        assert network.connection_count == 12

    def test_same_name_stations_zero_apart(self, sample_network, keys):
        """폐쇄가 없으면 같은 이름 다른 노선 역 사이 최단 시간은 0"""
        journey = shortest_path(sample_network, keys["central_green"], keys["central_red"])

        assert journey.reachable is True
        assert journey.total_time == 0
