"""
CORS header middleware

Sets Access-Control-Allow-Origin on every response, including error
responses, whether or not the request carried an Origin header.
"""
from typing import Awaitable, Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware


class AllowOriginMiddleware(BaseHTTPMiddleware):
    """Stamp a fixed allow-origin header onto all responses."""

    def __init__(self, app, allow_origin: str = "*"):
        super().__init__(app)
        self.allow_origin = allow_origin

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        response = await call_next(request)
        response.headers["Access-Control-Allow-Origin"] = self.allow_origin
        return response
