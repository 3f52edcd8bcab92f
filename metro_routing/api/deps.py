from fastapi import HTTPException

from metro_routing.core.exceptions import (
    InvalidInputException,
    MetroException,
)
from metro_routing.services.metro_service import MetroService, get_metro_service


# lru_cache 싱글톤 => Depends로 주입, 테스트에서는 dependency_overrides로 교체
def get_service() -> MetroService:
    return get_metro_service()


def to_http_exception(e: MetroException) -> HTTPException:
    """도메인 예외 -> HTTP 예외 (잘못된 입력 400, 나머지는 404)"""
    status_code = 400 if isinstance(e, InvalidInputException) else 404
    return HTTPException(
        status_code=status_code, detail={"message": e.message, "code": e.code}
    )
