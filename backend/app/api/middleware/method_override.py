"""
http method override for html forms

browsers only submit forms as GET or POST, so edit and delete forms post a
hidden _method field. POST requests carrying one are rewritten to that method
before routing happens.
"""
from typing import Callable
from urllib.parse import parse_qs

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from app.core.logging_config import get_logger

logger = get_logger(__name__)

METHOD_FIELD = "_method"
ALLOWED_OVERRIDES = frozenset({"PATCH", "PUT", "DELETE"})
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


class MethodOverrideMiddleware(BaseHTTPMiddleware):
    """dispatch POST requests carrying _method as that method"""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        if request.method == "POST":
            override = await self._requested_method(request)
            if override in ALLOWED_OVERRIDES:
                logger.debug(f"overriding POST {request.url.path} as {override}")
                request.scope["method"] = override
        return await call_next(request)

    async def _requested_method(self, request: Request) -> str:
        override = request.query_params.get(METHOD_FIELD)
        if override:
            return override.upper()

        content_type = request.headers.get("content-type", "")
        if not content_type.startswith(FORM_CONTENT_TYPE):
            return ""

        # body() caches the payload so the endpoint can still read the form
        body = await request.body()
        values = parse_qs(body.decode("latin-1"), keep_blank_values=True).get(METHOD_FIELD)
        return values[0].upper() if values else ""
