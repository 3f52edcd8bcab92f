"""
노선 데이터 로더

입력 형식: line,station1,station2,travelTime (한 줄에 한 구간)
- strict (기본값): 잘못된 행이 하나라도 있으면 전체 로드 실패
- lenient: 잘못된 행은 경고 로그 후 건너뜀
"""

import csv
import io
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional, Tuple, Union

from metro_routing.algorithms.transfers import synthesize_transfers
from metro_routing.core.config import ROW_FIELD_COUNT
from metro_routing.core.exceptions import InvalidInputException
from metro_routing.db.network_store import Network

logger = logging.getLogger(__name__)


@dataclass
class NetworkRow:
    line: str
    station_from: str
    station_to: str
    travel_time: int


@dataclass
class RowError:
    line_number: int
    raw: str
    reason: str


@dataclass
class LoadResult:
    rows: List[NetworkRow] = field(default_factory=list)
    errors: List[RowError] = field(default_factory=list)


def parse_rows(text: str, strict: bool = True) -> LoadResult:
    """텍스트 블록(직접 입력)을 NetworkRow 리스트로 변환"""
    return _parse(io.StringIO(text), strict)


def read_rows(path: Union[str, Path], strict: bool = True) -> LoadResult:
    """CSV 파일을 NetworkRow 리스트로 변환"""
    path = Path(path)
    if not path.exists():
        raise InvalidInputException(f"Network data file not found: {path}")

    with open(path, "r", encoding="utf-8", newline="") as f:
        result = _parse(f, strict)

    logger.info(f"{path}에서 구간 {len(result.rows)}개 로드")
    return result


def _parse(stream, strict: bool) -> LoadResult:
    result = LoadResult()

    for line_number, fields in enumerate(csv.reader(stream), start=1):
        # 빈 줄 무시
        if not fields or all(not value.strip() for value in fields):
            continue

        row, reason = _parse_fields(fields)
        if row is not None:
            result.rows.append(row)
            continue

        raw = ",".join(fields)
        if strict:
            raise InvalidInputException(f"Invalid data in line {line_number}: {reason}")

        logger.warning(f"잘못된 행 건너뜀 (line {line_number}): {reason} => {raw!r}")
        result.errors.append(RowError(line_number=line_number, raw=raw, reason=reason))

    return result


def _parse_fields(fields: List[str]) -> Tuple[Optional[NetworkRow], str]:
    if len(fields) != ROW_FIELD_COUNT:
        return None, f"each line should have {ROW_FIELD_COUNT} fields, got {len(fields)}"

    line, station_from, station_to, raw_time = (value.strip() for value in fields)
    if not line or not station_from or not station_to:
        return None, "line and station names must not be empty"

    try:
        travel_time = int(raw_time)
    except ValueError:
        return None, f"travel time should be an integer, got {raw_time!r}"

    if travel_time < 0:
        return None, f"travel time should be non-negative, got {travel_time}"

    return NetworkRow(line, station_from, station_to, travel_time), ""


def build_network(rows: Iterable[NetworkRow]) -> Network:
    """행 순서대로 역/구간 생성 후 환승 간선 추가"""
    network = Network()

    for row in rows:
        station_a = network.get_or_create_station(row.station_from, row.line)
        station_b = network.get_or_create_station(row.station_to, row.line)
        network.add_connection(station_a, station_b, row.travel_time)

    synthesize_transfers(network)

    logger.info(
        f"노선망 구축 완료: 역 {network.station_count}개, "
        f"노선 {len(network.lines)}개, 간선 {network.connection_count}개"
    )
    return network


def load_network(path: Union[str, Path], strict: bool = True) -> Tuple[Network, LoadResult]:
    result = read_rows(path, strict=strict)
    return build_network(result.rows), result
