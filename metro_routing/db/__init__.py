from metro_routing.db.network_store import Network
from metro_routing.db.loader import (
    NetworkRow,
    RowError,
    LoadResult,
    parse_rows,
    read_rows,
    build_network,
    load_network,
)

__all__ = [
    "Network",
    "NetworkRow",
    "RowError",
    "LoadResult",
    "parse_rows",
    "read_rows",
    "build_network",
    "load_network",
]
