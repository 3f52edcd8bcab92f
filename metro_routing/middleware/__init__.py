from metro_routing.middleware.request_logging import RequestTimingMiddleware

__all__ = ["RequestTimingMiddleware"]
