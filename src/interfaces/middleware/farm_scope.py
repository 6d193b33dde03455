from __future__ import annotations

from typing import Iterable

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse, Response

from src.application.errors import PermissionDenied
from src.config.settings import Settings
from src.domain.value_objects.farm_id import parse_farm_id

PUBLIC_PATHS: Iterable[str] = (
    "/api/v1/health",
    "/docs",
    "/openapi.json",
    "/redoc",
)


class FarmScopeMiddleware(BaseHTTPMiddleware):
    """Resolve the farm every request is scoped to from the farm header."""

    def __init__(self, app, *, settings: Settings) -> None:
        super().__init__(app)
        self.settings = settings

    async def dispatch(self, request: Request, call_next) -> Response:
        # Let CORS preflight pass without farm checks
        if request.method == "OPTIONS":
            return await call_next(request)
        if any(request.url.path.startswith(path) for path in PUBLIC_PATHS):
            return await call_next(request)

        try:
            farm_value = request.headers.get(self.settings.farm_header)
            if not farm_value:
                raise PermissionDenied("Missing farm header")
            try:
                request.state.farm_id = parse_farm_id(farm_value)
            except ValueError as exc:
                raise PermissionDenied("Invalid farm identifier") from exc
        except PermissionDenied as exc:
            payload = {"code": exc.code, "message": exc.message}
            return JSONResponse(status_code=exc.status_code, content=payload)
        return await call_next(request)
