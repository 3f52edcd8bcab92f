"""
Core 설정 및 utilities, 커스텀 예외
"""

from metro_routing.core.config import settings

from metro_routing.core.exceptions import (
    MetroException,
    RouteNotFoundException,
    StationNotFoundException,
    ConnectionNotFoundException,
    InvalidInputException,
)

__all__ = [
    "settings",
    "MetroException",
    "RouteNotFoundException",
    "StationNotFoundException",
    "ConnectionNotFoundException",
    "InvalidInputException",
]
