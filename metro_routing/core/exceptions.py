# custom exception 정의 및 관리


class MetroException(Exception):  # 예외 구조 정의
    def __init__(self, message: str, code: str = "INTERNAL_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)


class RouteNotFoundException(MetroException):
    def __init__(self, message: str = "No valid route found."):
        super().__init__(message, code="ROUTE_NOT_FOUND")


class StationNotFoundException(MetroException):
    def __init__(self, message: str = "Invalid station name."):
        super().__init__(message, code="STATION_NOT_FOUND")


class ConnectionNotFoundException(MetroException):
    def __init__(self, message: str = "No direct connection between stations."):
        super().__init__(message, code="CONNECTION_NOT_FOUND")


class InvalidInputException(MetroException):
    def __init__(self, message: str = "Invalid input."):
        super().__init__(message, code="INVALID_INPUT")
