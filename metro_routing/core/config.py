import os
from dotenv import load_dotenv

load_dotenv()  # 환경변수 읽어오기


class Settings:
    PROJECT_NAME: str = "Metro Routing Backend"
    VERSION: str = "1.0.0"

    DEBUG: bool = os.getenv("DEBUG", "False").lower() == "true"
    PORT: int = int(os.getenv("PORT", 8001))

    # 노선 데이터 (line,station1,station2,travelTime)
    NETWORK_DATA_PATH: str = os.getenv("NETWORK_DATA_PATH", "data/network.csv")
    # false => 잘못된 행은 건너뛰고 경고만 남김
    STRICT_INGESTION: bool = os.getenv("STRICT_INGESTION", "true").lower() == "true"

    STATION_SEARCH_LIMIT: int = int(os.getenv("STATION_SEARCH_LIMIT", 10))

    ENABLE_PERFORMANCE_MONITORING: bool = (
        os.getenv("ENABLE_PERFORMANCE_MONITORING", "true").lower() == "true"
    )
    SLOW_REQUEST_THRESHOLD_MS: float = float(
        os.getenv("SLOW_REQUEST_THRESHOLD_MS", 500)
    )

    # CORS 설정
    ALLOWED_ORIGINS: list[str] = os.getenv(
        "ALLOWED_ORIGINS",
        "http://localhost:3000,http://localhost:5173,http://127.0.0.1:3000",
    ).split(",")


settings = Settings()  # 모듈화


# 탐색 시 무한대로 취급하는 이동 시간
MAX_TRAVEL_TIME = float("inf")

# 입력 행 필드 수: line,station1,station2,travelTime
ROW_FIELD_COUNT = 4
