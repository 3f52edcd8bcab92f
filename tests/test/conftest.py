"""
Pytest 설정 및 공통 Fixture
"""

import os
import sys
from pathlib import Path

import pytest

# 테스트 모드 환경 변수 설정 (모듈 임포트 전에 설정해야 함)
os.environ["TESTING"] = "true"
os.environ.setdefault("NETWORK_DATA_PATH", "does-not-exist.csv")

# 프로젝트 루트를 sys.path에 추가
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

from metro_routing.db.loader import build_network, parse_rows  # noqa: E402
from metro_routing.models.domain import StationKey  # noqa: E402
from metro_routing.services.metro_service import MetroService  # noqa: E402


# 기본 시나리오: Green X-Y(10), B Y-Z(5), StationY에서 환승
SCENARIO_ROWS = """Green,StationX,StationY,10
B,StationY,StationZ,5
"""

# 3개 노선, 환승역 3곳 (StationY, Central, Harbour)
SAMPLE_ROWS = """Green,StationX,StationY,10
Green,StationY,Central,4
Blue,StationY,StationZ,5
Blue,StationZ,Harbour,7
Blue,Central,Harbour,6
Red,Central,Airport,12
Red,Harbour,Airport,9
"""


@pytest.fixture
def scenario_text():
    return SCENARIO_ROWS


@pytest.fixture
def sample_text():
    return SAMPLE_ROWS


@pytest.fixture
def scenario_network():
    """StationX(Green) - StationY(Green) | StationY(B) - StationZ(B)"""
    return build_network(parse_rows(SCENARIO_ROWS).rows)


@pytest.fixture
def sample_network():
    return build_network(parse_rows(SAMPLE_ROWS).rows)


@pytest.fixture
def scenario_service(scenario_network):
    return MetroService(scenario_network)


@pytest.fixture
def sample_service(sample_network):
    return MetroService(sample_network)


@pytest.fixture
def keys():
    """자주 쓰는 StationKey 모음"""
    return {
        "x_green": StationKey("StationX", "Green"),
        "y_green": StationKey("StationY", "Green"),
        "y_b": StationKey("StationY", "B"),
        "z_b": StationKey("StationZ", "B"),
        "y_blue": StationKey("StationY", "Blue"),
        "z_blue": StationKey("StationZ", "Blue"),
        "central_green": StationKey("Central", "Green"),
        "central_blue": StationKey("Central", "Blue"),
        "central_red": StationKey("Central", "Red"),
        "harbour_blue": StationKey("Harbour", "Blue"),
        "harbour_red": StationKey("Harbour", "Red"),
        "airport_red": StationKey("Airport", "Red"),
    }


def _assert_mirrored(network):
    """모든 간선에 대해 current(A→B) == current(B→A)"""
    for connection in network.iter_connections():
        mirror = network.find_connection(
            connection.target,
            connection.source,
            include_transfers=connection.is_transfer,
        )
        assert mirror is not None
        assert mirror.current_time == connection.current_time
        assert mirror.original_time == connection.original_time


@pytest.fixture
def assert_mirrored():
    return _assert_mirrored
