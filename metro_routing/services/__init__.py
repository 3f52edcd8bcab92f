"""
Business logic services
"""

from metro_routing.services.metro_service import MetroService, get_metro_service
from metro_routing.services.endpoint_resolver import (
    resolve_candidates,
    resolve_combinations,
)
from metro_routing.services.route_selector import select_fastest_route
from metro_routing.services.journey_formatter import format_journey

__all__ = [
    "MetroService",
    "get_metro_service",
    "resolve_candidates",
    "resolve_combinations",
    "select_fastest_route",
    "format_journey",
]
