import json
import logging
import threading
import time
import uuid
from collections import defaultdict
from typing import DefaultDict

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware


logger = logging.getLogger("evento_api.observability")


def _escape_label(value: str) -> str:
    return value.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")


def _route_template(request: Request) -> str:
    # /api/eventos/{evento_id} en lugar de un label por cada id
    route = request.scope.get("route")
    return getattr(route, "path", None) or request.url.path


class MetricsRegistry:
    def __init__(self) -> None:
        self._lock = threading.Lock()
        self.http_requests_total = 0
        self.http_request_errors_5xx_total = 0
        self.http_request_duration_ms_sum = 0.0
        self.http_request_duration_ms_count = 0

        self.requests_by_route_method_status: DefaultDict[tuple[str, str, int], int] = defaultdict(int)
        self.duration_sum_by_route_method: DefaultDict[tuple[str, str], float] = defaultdict(float)
        self.duration_count_by_route_method: DefaultDict[tuple[str, str], int] = defaultdict(int)

    def observe(
        self,
        method: str,
        path: str,
        status_code: int,
        duration_ms: float,
        include_global: bool = True,
    ) -> None:
        with self._lock:
            if include_global:
                self.http_requests_total += 1
                if status_code >= 500:
                    self.http_request_errors_5xx_total += 1
                self.http_request_duration_ms_sum += duration_ms
                self.http_request_duration_ms_count += 1

            self.requests_by_route_method_status[(path, method, status_code)] += 1
            self.duration_sum_by_route_method[(path, method)] += duration_ms
            self.duration_count_by_route_method[(path, method)] += 1

    def render_prometheus(self) -> str:
        lines: list[str] = []

        def metric(name: str, help_text: str, samples: list[tuple[str, str]]) -> None:
            lines.append(f"# HELP {name} {help_text}")
            lines.append(f"# TYPE {name} counter")
            for labels, value in samples:
                lines.append(f"{name}{labels} {value}")

        with self._lock:
            metric("http_requests_total", "Total number of HTTP requests processed.", [("", str(self.http_requests_total))])
            metric(
                "http_request_errors_5xx_total",
                "Total number of HTTP 5xx responses.",
                [("", str(self.http_request_errors_5xx_total))],
            )
            metric(
                "http_request_duration_ms_sum",
                "Sum of request durations in milliseconds.",
                [("", f"{self.http_request_duration_ms_sum:.3f}")],
            )
            metric(
                "http_request_duration_ms_count",
                "Number of observed request durations.",
                [("", str(self.http_request_duration_ms_count))],
            )
            metric(
                "http_requests_by_route_method_status",
                "HTTP requests split by route, method and status code.",
                [
                    (f'{{path="{_escape_label(path)}",method="{method}",status="{status_code}"}}', str(count))
                    for (path, method, status_code), count in sorted(self.requests_by_route_method_status.items())
                ],
            )
            metric(
                "http_request_duration_ms_by_route_method_sum",
                "Sum of duration per route/method.",
                [
                    (f'{{path="{_escape_label(path)}",method="{method}"}}', f"{total:.3f}")
                    for (path, method), total in sorted(self.duration_sum_by_route_method.items())
                ],
            )
            metric(
                "http_request_duration_ms_by_route_method_count",
                "Count of duration samples per route/method.",
                [
                    (f'{{path="{_escape_label(path)}",method="{method}"}}', str(count))
                    for (path, method), count in sorted(self.duration_count_by_route_method.items())
                ],
            )

        return "\n".join(lines) + "\n"


class ObservabilityMiddleware(BaseHTTPMiddleware):
    """Request id, métricas por ruta y una línea JSON de log por petición."""

    def __init__(self, app, registry: MetricsRegistry, exclude_paths: set[str] | None = None) -> None:
        super().__init__(app)
        self.registry = registry
        self.exclude_paths = exclude_paths or set()

    def _record(self, request: Request, request_id: str, status_code: int) -> dict:
        duration_ms = (time.perf_counter() - request.state.request_start_monotonic) * 1000.0
        path = request.url.path
        self.registry.observe(
            method=request.method,
            path=_route_template(request),
            status_code=status_code,
            duration_ms=duration_ms,
            include_global=(path not in self.exclude_paths),
        )
        return {
            "event": "http_request",
            "request_id": request_id,
            "method": request.method,
            "path": path,
            "status_code": status_code,
            "duration_ms": round(duration_ms, 3),
            "client_ip": request.client.host if request.client else None,
        }

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get("x-request-id") or str(uuid.uuid4())
        request.state.request_id = request_id
        request.state.request_start_monotonic = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception:
            logger.exception(json.dumps(self._record(request, request_id, 500), ensure_ascii=False))
            raise

        response.headers["X-Request-ID"] = request_id
        logger.info(json.dumps(self._record(request, request_id, response.status_code), ensure_ascii=False))
        return response
